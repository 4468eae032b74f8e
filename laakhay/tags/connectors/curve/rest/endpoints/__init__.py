"""Curve REST endpoint definitions."""

from . import pools

__all__ = ["pools"]
