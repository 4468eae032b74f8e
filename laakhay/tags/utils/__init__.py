"""Utility functions."""

from .http import HTTPClient
from .text import is_invalid, truncate

__all__ = ["HTTPClient", "is_invalid", "truncate"]
