"""
Slug and filename helpers.
"""

import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")
_NON_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9\s]")


def slugify(text: str) -> str:
    """Lowercase URL slug: keep ``[a-z0-9]``, turn whitespace into ``-``, collapse dashes.

    >>> slugify("  Nature & Landscapes ")
    'nature-landscapes'
    """
    slug = _NON_SLUG_CHARS.sub("", text.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    return _DASHES.sub("-", slug).strip("-")


def download_filename(title: str, resolution: str, extension: str) -> str:
    """Attachment filename such as ``Sunset_Over_Hills-4k.jpg``."""
    stem = _WHITESPACE.sub("_", _NON_FILENAME_CHARS.sub("", title).strip()) or "wallpaper"
    return f"{stem}-{resolution}{extension}"
