"""High-level API."""

from .tags_api import TagsAPI, return_tags

__all__ = ["TagsAPI", "return_tags"]
