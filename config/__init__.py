"""Configuration module for the HTML truncation library."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
