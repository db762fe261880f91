"""HTTP server for Wallpaper Hub: FastAPI application, routers, middleware and services."""
