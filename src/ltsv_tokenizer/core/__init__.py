"""LTSV tokenizer core.

Pure in-memory parsing: byte classes, pair parsing, line/field scanning and
eager collection helpers.
"""

from __future__ import annotations

from .classifiers import is_field, is_field_byte, is_label, is_label_byte
from .collect import first_error, iter_errors, iter_pairs, parse, parse_dicts, validate
from .models import ErrorKind, LtsvError, Pair, PositionedPair
from .render import dumps, format_pair, format_record
from .tokenizer import Record, RecordStream, check_pair, parse_pair, tokenize

__all__ = [
    "ErrorKind",
    "LtsvError",
    "Pair",
    "PositionedPair",
    "Record",
    "RecordStream",
    "check_pair",
    "dumps",
    "first_error",
    "format_pair",
    "format_record",
    "is_field",
    "is_field_byte",
    "is_label",
    "is_label_byte",
    "iter_errors",
    "iter_pairs",
    "parse",
    "parse_dicts",
    "parse_pair",
    "tokenize",
    "validate",
]
