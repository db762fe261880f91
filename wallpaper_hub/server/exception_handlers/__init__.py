"""
Exception handlers for the Wallpaper Hub server.

This package contains the exception handlers for domain errors, request
validation, framework HTTP errors and unhandled exceptions, plus a setup
function to register them with the FastAPI application.
"""

from .global_handler import global_exception_handler, setup_exception_handlers

__all__ = ["global_exception_handler", "setup_exception_handlers"]
