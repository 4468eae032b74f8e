"""Custom exception hierarchy."""

from __future__ import annotations


class TagsError(Exception):
    """Base exception for all library errors."""

    pass


class UnsupportedChainError(TagsError):
    """Chain id is not numeric or has no configured subgraph endpoint."""

    def __init__(self, chain_id: str, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported chain id {chain_id!r}; supported chain ids: {', '.join(supported)}"
        )
        self.chain_id = chain_id
        self.supported = supported


class TransportError(TagsError):
    """Subgraph endpoint answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class GraphQLError(TagsError):
    """Response carried a top-level GraphQL ``errors`` array."""

    def __init__(self, message: str, messages: list[str] | None = None) -> None:
        super().__init__(message)
        self.messages = messages or []


class MalformedResponseError(TagsError):
    """Response JSON does not have the expected ``data.pools`` shape."""

    pass


class UnknownError(TagsError):
    """Failure outside the recognised error shapes."""

    pass


class PaginationLimitError(TagsError):
    """Page limit reached while the upstream was still returning full pages."""

    def __init__(self, message: str, max_pages: int) -> None:
        super().__init__(message)
        self.max_pages = max_pages
