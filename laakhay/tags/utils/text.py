"""Text checks applied to upstream token metadata."""

import re

ELLIPSIS = "..."

_TAG_RE = re.compile(r"<[^>]*>")


def is_invalid(text: str) -> bool:
    """Return True for blank text or text containing anything like a markup tag."""
    if not text.strip():
        return True
    return _TAG_RE.search(text) is not None


def truncate(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, ending with an ellipsis when cut.

    Limits shorter than the ellipsis itself yield a clipped ellipsis.
    """
    if max_length < 0:
        raise ValueError("max_length must not be negative")
    if len(text) <= max_length:
        return text
    if max_length < len(ELLIPSIS):
        return ELLIPSIS[:max_length]
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS
