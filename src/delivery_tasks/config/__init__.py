"""
Package: config
Description: Runtime configuration for the delivery task creator.
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
