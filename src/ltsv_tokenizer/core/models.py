"""Core data models for LTSV tokens and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Reason a field failed to parse (first failure wins, label before value)."""

    INVALID_PAIR = "invalid_pair"  # no ":" separator
    INVALID_LABEL = "invalid_label"
    INVALID_FIELD = "invalid_field"


@dataclass(frozen=True, slots=True)
class Pair:
    """A validated ``label:field`` pair."""

    label: str
    field: str

    def __str__(self) -> str:
        return f"{self.label}:{self.field}"


@dataclass(frozen=True, slots=True)
class PositionedPair:
    """A validated pair plus where it was found.

    ``start``/``end`` are UTF-8 byte offsets of the whole ``label:field``
    span relative to the start of its line (end exclusive).
    """

    label: str
    field: str
    line: int = 0
    start: int = 0
    end: int = 0

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    def to_pair(self) -> Pair:
        """Drop position information."""
        return Pair(label=self.label, field=self.field)

    def __str__(self) -> str:
        return f"{self.label}:{self.field}"


class LtsvError(ValueError):
    """A located LTSV grammar violation.

    Yielded as a value by the lazy tokenizer and raised by the eager
    helpers (``parse``, ``validate``).
    """

    __slots__ = ("kind", "text", "line", "start", "end")

    def __init__(
        self,
        kind: ErrorKind,
        text: str,
        line: int = 0,
        start: int = 0,
        end: int = 0,
    ) -> None:
        super().__init__(kind, text, line, start, end)
        self.kind = kind
        self.text = text
        self.line = line
        self.start = start
        self.end = end

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LtsvError):
            return NotImplemented
        return (self.kind, self.text, self.line, self.start, self.end) == (
            other.kind,
            other.text,
            other.line,
            other.start,
            other.end,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.text, self.line, self.start, self.end))

    def __str__(self) -> str:
        return f"line {self.line}, bytes {self.start}-{self.end}: {self.kind.value} {self.text!r}"

    def __repr__(self) -> str:
        return (
            f"LtsvError(kind={self.kind!r}, text={self.text!r}, "
            f"line={self.line}, start={self.start}, end={self.end})"
        )
