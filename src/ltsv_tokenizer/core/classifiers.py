"""Byte classes of the LTSV grammar.

    lbyte = %x30-39 / %x41-5A / %x61-7A / "_" / "." / "-"
    fbyte = %x01-08 / %x0B / %x0C / %x0E-FF
"""

from __future__ import annotations


def _table(*ranges: tuple[int, int]) -> bytes:
    """Build a 256-entry lookup table (1 = allowed) from inclusive ranges."""
    table = bytearray(256)
    for lo, hi in ranges:
        for b in range(lo, hi + 1):
            table[b] = 1
    return bytes(table)


_LABEL_TABLE = _table(
    (0x30, 0x39),
    (0x41, 0x5A),
    (0x61, 0x7A),
    (ord("_"), ord("_")),
    (ord("."), ord(".")),
    (ord("-"), ord("-")),
)

_FIELD_TABLE = _table(
    (0x01, 0x08),
    (0x0B, 0x0C),
    (0x0E, 0xFF),
)


def is_label_byte(b: int) -> bool:
    """Return True if ``b`` may appear in a label."""
    return 0 <= b <= 0xFF and _LABEL_TABLE[b] == 1


def is_field_byte(b: int) -> bool:
    """Return True if ``b`` may appear in a field value."""
    return 0 <= b <= 0xFF and _FIELD_TABLE[b] == 1


def is_label(text: str) -> bool:
    """Return True if every character of ``text`` is a label byte.

    Non-ASCII characters encode to bytes >= 0x80, none of which are label
    bytes, so they always fail.
    """
    return all(ord(ch) < 0x80 and _LABEL_TABLE[ord(ch)] for ch in text)


def is_field(text: str) -> bool:
    """Return True if every character of ``text`` is a field byte.

    Non-ASCII characters encode to bytes in 0x80-0xFF, all of which are
    field bytes, so only ASCII characters need a table lookup.
    """
    return all(ord(ch) >= 0x80 or _FIELD_TABLE[ord(ch)] for ch in text)
