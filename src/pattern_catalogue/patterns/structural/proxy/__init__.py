"""Proxy pattern - access control, lazy loading and caching in front of an image."""
from .images import ALLOWED_ROLES, Image, ImageProxy, RealImage

__all__ = ["ALLOWED_ROLES", "Image", "ImageProxy", "RealImage"]
