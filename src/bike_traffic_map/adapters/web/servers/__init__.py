"""Servers for the web adapter."""

from .static_file_server import StaticFileServer

__all__ = ["StaticFileServer"]
