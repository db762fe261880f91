"""Request-scoped services used by the API routers."""
