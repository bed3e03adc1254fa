"""Shared helpers for in-memory repositories."""

from collections.abc import Container


def next_free_id(prefix: str, size: int, taken: Container[str]) -> str:
    """Build the next ``<prefix>-<n>`` identifier.

    Numbering starts at size + 1 and skips ids already in use, so seed
    payloads with gaps in their numbering never cause a collision.
    """
    n = size + 1
    while f"{prefix}-{n}" in taken:
        n += 1
    return f"{prefix}-{n}"
