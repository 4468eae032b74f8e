"""REST runtime abstractions."""

from .runner import PostTransport, ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "PostTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
