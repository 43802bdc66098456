"""Lazy, position-tracking LTSV tokenizer.

Grammar:

    ltsv        = *(record NL) [record]
    record      = [field *(TAB field)]
    field       = label ":" field-value
    label       = 1*lbyte
    field-value = *fbyte
    TAB         = %x09
    NL          = [%x0D] %x0A

``tokenize`` returns a ``RecordStream`` (one ``Record`` per line); each
``Record`` yields ``PositionedPair`` or ``LtsvError`` per tab-delimited field.
Errors are yielded, never raised, so iteration always continues to the next
field and line. Offsets are UTF-8 byte offsets relative to the line.
Labels and fields are sliced (copied) out of the input.
"""

from __future__ import annotations

from collections.abc import Iterator

from .classifiers import is_field, is_label
from .models import ErrorKind, LtsvError, PositionedPair

TAB = "\t"
SEPARATOR = ":"
NEWLINE = "\n"
CARRIAGE_RETURN = "\r"


def byte_length(text: str) -> int:
    """UTF-8 length of ``text``.

    Surrogate-escaped bytes (U+DC80-U+DCFF) count as one byte; any other
    lone surrogate counts as its 3-byte encoded form.
    """
    if text.isascii():
        return len(text)
    try:
        return len(text.encode("utf-8", errors="surrogateescape"))
    except UnicodeEncodeError:
        return sum(
            1 if 0xDC80 <= ord(ch) <= 0xDCFF else len(ch.encode("utf-8", errors="surrogatepass"))
            for ch in text
        )


def check_pair(
    label: str,
    field: str,
    *,
    line: int = 0,
    start: int = 0,
) -> LtsvError | None:
    """Validate an already split label/field, label first.

    ``start`` is the offset of the label; the field is assumed to follow a
    single separator byte.
    """
    label_end = start + byte_length(label)
    if not label or not is_label(label):
        return LtsvError(ErrorKind.INVALID_LABEL, label, line, start, label_end)
    if not is_field(field):
        field_start = label_end + 1
        return LtsvError(
            ErrorKind.INVALID_FIELD,
            field,
            line,
            field_start,
            field_start + byte_length(field),
        )
    return None


def parse_pair(text: str, *, line: int = 0, start: int = 0) -> PositionedPair | LtsvError:
    """Parse one tab-free ``label:value`` substring found at ``start`` on ``line``.

    Only the first ``:`` is structural; the value may contain more.
    """
    end = start + byte_length(text)
    label, sep, field = text.partition(SEPARATOR)
    if not sep:
        return LtsvError(ErrorKind.INVALID_PAIR, text, line, start, end)

    error = check_pair(label, field, line=line, start=start)
    if error is not None:
        return error
    return PositionedPair(label=label, field=field, line=line, start=start, end=end)


class Record:
    """Scanner over the fields of one line (without its terminator).

    Single pass: re-create it from the line text to scan again.
    """

    __slots__ = ("text", "line", "cursor", "_pos")

    def __init__(self, text: str, line: int = 0) -> None:
        self.text = text
        self.line = line
        # byte offset of the next field within the line
        self.cursor = 0
        # character index of the next field, None once exhausted
        self._pos: int | None = 0 if text else None

    def __iter__(self) -> Iterator[PositionedPair | LtsvError]:
        return self

    def __next__(self) -> PositionedPair | LtsvError:
        pos = self._pos
        if pos is None:
            raise StopIteration

        tab = self.text.find(TAB, pos)
        if tab == -1:
            field = self.text[pos:]
            self._pos = None
        else:
            field = self.text[pos:tab]
            self._pos = tab + 1

        start = self.cursor
        # advance past the field and its tab even when the field is invalid
        self.cursor = start + byte_length(field) + 1
        return parse_pair(field, line=self.line, start=start)

    def run(self) -> list[PositionedPair]:
        """Collect the remaining pairs of this line, raising the first error."""
        out: list[PositionedPair] = []
        for item in self:
            if isinstance(item, LtsvError):
                raise item
            out.append(item)
        return out

    def __repr__(self) -> str:
        return f"Record(line={self.line}, cursor={self.cursor}, text={self.text!r})"


class RecordStream:
    """Scanner over the lines of a whole buffer.

    Lines end at ``\\n``; a ``\\r`` directly before it belongs to the
    terminator. The last line need not be terminated, and a final newline
    does not produce an extra empty record.
    """

    __slots__ = ("_data", "_pos", "current_line")

    def __init__(self, data: str) -> None:
        self._data = data
        self._pos = 0
        self.current_line = 0

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        data = self._data
        pos = self._pos
        if pos >= len(data):
            raise StopIteration

        nl = data.find(NEWLINE, pos)
        if nl == -1:
            text = data[pos:]
            self._pos = len(data)
        else:
            stop = nl
            if stop > pos and data[stop - 1] == CARRIAGE_RETURN:
                stop -= 1
            text = data[pos:stop]
            self._pos = nl + 1

        record = Record(text, self.current_line)
        self.current_line += 1
        return record

    def run(self) -> list[list[PositionedPair]]:
        """Collect every remaining line, raising the first error."""
        return [record.run() for record in self]


def decode(data: str | bytes | bytearray | memoryview) -> str:
    """Return text for ``data``; bytes are decoded as UTF-8 with surrogateescape."""
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="surrogateescape")


def tokenize(data: str | bytes | bytearray | memoryview) -> RecordStream:
    """Lazily tokenize an LTSV buffer."""
    return RecordStream(decode(data))
