"""Shared helpers for the upload test suites."""

from unittest.mock import AsyncMock, MagicMock

__all__ = ["make_client", "make_response"]


def make_response(status_code: int) -> MagicMock:
    """Build a minimal mock httpx.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    return resp


def _replies(items: list) -> list:
    return [item if isinstance(item, BaseException) else make_response(item) for item in items]


def make_client(head: list, put: list | None = None) -> AsyncMock:
    """AsyncMock client whose head/put return (or raise) the given items in order.

    Integers become responses with that status code; exceptions are raised.
    """
    client = AsyncMock()
    client.head.side_effect = _replies(head)
    client.put.side_effect = _replies(put or [])
    return client
