"""Choosing which replays to process and how to name them compactly."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Protocol, Sequence, TypeVar

MAX_HASH_FRAGMENT = 64


class _Versioned(Protocol):
    version: int


V = TypeVar("V", bound=_Versioned)


def shortest_unique_prefix_length(hashes: Sequence[str]) -> int:
    """Return the shortest prefix length that keeps every hash distinct.

    The search starts at one character and stops at 64, the length of a hex
    encoded SHA-256 digest; 64 is returned when no shorter prefix suffices,
    including when the sequence holds duplicates.
    """
    expected = len(hashes)
    for length in range(1, MAX_HASH_FRAGMENT):
        if len({digest[:length] for digest in hashes}) == expected:
            return length
    return MAX_HASH_FRAGMENT


def filter_by_version(
    sources: Iterable[V],
    min_version: int | None,
    max_version: int | None,
    limit: int | None,
) -> list[V]:
    """Keep the sources whose ``version`` lies within the inclusive bounds.

    A bound of ``None`` is not applied.  At most ``limit`` sources are kept,
    in their original order; ``None`` keeps them all.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit cannot be negative")

    def in_range(source: V) -> bool:
        if min_version is not None and source.version < min_version:
            return False
        if max_version is not None and source.version > max_version:
            return False
        return True

    return list(islice(filter(in_range, sources), limit))