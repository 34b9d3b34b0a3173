"""Adapters for change discovery."""

from .filesystem import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway"]
