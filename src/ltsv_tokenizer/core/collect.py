"""Eager helpers built on the lazy tokenizer."""

from __future__ import annotations

from collections.abc import Iterator

from .models import LtsvError, Pair, PositionedPair
from .tokenizer import tokenize


def parse(data: str | bytes) -> list[list[Pair]]:
    """Parse every line into a list of pairs.

    Raises:
        LtsvError: the first invalid field (lines in order, fields left to
            right). No partial table is returned.
    """
    out: list[list[Pair]] = []
    for record in tokenize(data):
        row: list[Pair] = []
        for item in record:
            if isinstance(item, LtsvError):
                raise item
            row.append(item.to_pair())
        out.append(row)
    return out


def first_error(data: str | bytes) -> LtsvError | None:
    """Return the first error in ``data``, or None if it is well formed."""
    for record in tokenize(data):
        for item in record:
            if isinstance(item, LtsvError):
                return item
    return None


def validate(data: str | bytes) -> None:
    """Check ``data`` without keeping any pairs; raise the first error."""
    error = first_error(data)
    if error is not None:
        raise error


def iter_pairs(data: str | bytes) -> Iterator[PositionedPair]:
    """Yield valid pairs in order, skipping invalid fields."""
    for record in tokenize(data):
        for item in record:
            if not isinstance(item, LtsvError):
                yield item


def iter_errors(data: str | bytes, *, limit: int | None = None) -> Iterator[LtsvError]:
    """Yield every error in order, optionally stopping after ``limit``."""
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    count = 0
    for record in tokenize(data):
        for item in record:
            if not isinstance(item, LtsvError):
                continue
            if limit is not None and count >= limit:
                return
            yield item
            count += 1


def parse_dicts(data: str | bytes) -> list[dict[str, str]]:
    """Parse every line into a label -> field mapping (later labels win)."""
    return [{pair.label: pair.field for pair in row} for row in parse(data)]
