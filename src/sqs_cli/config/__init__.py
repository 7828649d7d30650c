"""
Package: config
Description: Environment-backed configuration for the SQS CLI.
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
