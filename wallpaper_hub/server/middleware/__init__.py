"""
Middleware modules for the Wallpaper Hub server.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
