"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from laakhay.tags.core import (
    GraphQLError,
    PaginationLimitError,
    TagsError,
    TransportError,
    UnsupportedChainError,
)


def test_unsupported_chain_error_lists_supported_ids():
    """Test UnsupportedChainError message carries the supported ids."""
    error = UnsupportedChainError("999", ["1", "10"])
    assert error.chain_id == "999"
    assert error.supported == ["1", "10"]
    assert "999" in str(error)
    assert "1, 10" in str(error)
    assert isinstance(error, TagsError)


def test_transport_error_with_status_code():
    """Test TransportError with status_code (meaningful behavior)."""
    error = TransportError("error", status_code=500)
    assert str(error) == "error"
    assert error.status_code == 500
    assert isinstance(error, TagsError)


def test_graphql_error_keeps_messages():
    error = GraphQLError("2 errors", messages=["a", "b"])
    assert error.messages == ["a", "b"]
    assert GraphQLError("x").messages == []


def test_pagination_limit_error():
    error = PaginationLimitError("too many pages", max_pages=5)
    assert error.max_pages == 5
    assert isinstance(error, TagsError)
