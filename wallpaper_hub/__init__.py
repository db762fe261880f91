"""Wallpaper Hub.

Backend for a wallpaper download site. The package is split in two layers:

``wallpaper_hub.core``
    Logging, monitoring, storage signing, the identity client and the
    database layer (SQLModel entities, async repositories, I/O models).

``wallpaper_hub.server``
    The FastAPI application: configuration, routers under ``/api/v1``,
    exception handlers, request middleware and request-scoped services
    such as the download token broker.
"""

__version__ = "1.0.0"
