"""Parser and validator for Labeled Tab-separated Values (LTSV)."""

from __future__ import annotations

from .core import (
    ErrorKind,
    LtsvError,
    Pair,
    PositionedPair,
    Record,
    RecordStream,
    dumps,
    first_error,
    format_pair,
    format_record,
    iter_errors,
    iter_pairs,
    parse,
    parse_dicts,
    parse_pair,
    tokenize,
    validate,
)

__all__ = [
    "ErrorKind",
    "LtsvError",
    "Pair",
    "PositionedPair",
    "Record",
    "RecordStream",
    "dumps",
    "first_error",
    "format_pair",
    "format_record",
    "iter_errors",
    "iter_pairs",
    "parse",
    "parse_dicts",
    "parse_pair",
    "tokenize",
    "validate",
]
