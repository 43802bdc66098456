"""Render pairs back to LTSV text.

LTSV has no escaping, so pairs that could not be parsed back are rejected.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Pair, PositionedPair
from .tokenizer import SEPARATOR, TAB, byte_length, check_pair

PairLike = Pair | PositionedPair


def _format(pair: PairLike, *, line: int, start: int) -> str:
    error = check_pair(pair.label, pair.field, line=line, start=start)
    if error is not None:
        raise error
    return f"{pair.label}{SEPARATOR}{pair.field}"


def format_pair(pair: PairLike) -> str:
    """Render a single pair as ``label:field``."""
    return _format(pair, line=0, start=0)


def format_record(pairs: Iterable[PairLike], *, line: int = 0) -> str:
    """Render one record as tab-joined pairs.

    Error spans are offsets within the rendered line.
    """
    parts: list[str] = []
    cursor = 0
    for pair in pairs:
        text = _format(pair, line=line, start=cursor)
        parts.append(text)
        cursor += byte_length(text) + 1
    return TAB.join(parts)


def dumps(records: Iterable[Iterable[PairLike]]) -> str:
    """Render records as newline-terminated lines.

    Every line is terminated so empty records, including trailing ones,
    survive a round trip through ``parse``.
    """
    return "".join(f"{format_record(pairs, line=i)}\n" for i, pairs in enumerate(records))
