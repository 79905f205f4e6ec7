"""Image resize plugin."""

from .algo import image_resize, render, resolve
from .routes import create_router

__all__ = ["create_router", "image_resize", "render", "resolve"]
