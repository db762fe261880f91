"""Unit tests for slug and filename helpers."""

import pytest

from wallpaper_hub.core.slugs import download_filename, slugify


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Nature", "nature"),
        ("  Nature & Landscapes ", "nature-landscapes"),
        ("Sci-Fi -- Space", "sci-fi-space"),
        ("Anime 2024!", "anime-2024"),
        ("Café Lights", "caf-lights"),
        ("---", ""),
        ("", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


@pytest.mark.parametrize(
    "title,resolution,extension,expected",
    [
        ("Sunset Over Hills", "4k", ".jpg", "Sunset_Over_Hills-4k.jpg"),
        ("Neon: City (Night)", "1080p", ".png", "Neon_City_Night-1080p.png"),
        ("  Ocean   Waves ", "video", ".mp4", "Ocean_Waves-video.mp4"),
        ("!!!", "8k", ".jpg", "wallpaper-8k.jpg"),
    ],
)
def test_download_filename(title, resolution, extension, expected):
    assert download_filename(title, resolution, extension) == expected
