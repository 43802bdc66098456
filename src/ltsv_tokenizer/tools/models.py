"""Structured tool output models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ltsv_tokenizer.core.models import LtsvError


class ErrorReport(BaseModel):
    kind: Literal["invalid_pair", "invalid_label", "invalid_field"] = Field(
        description="Which grammar rule the field broke."
    )
    text: str = Field(description="The offending substring.")
    line: int = Field(ge=0, description="0-based line index.")
    start: int = Field(ge=0, description="Byte offset of the span within its line.")
    end: int = Field(ge=0, description="Exclusive end byte offset of the span.")

    @classmethod
    def from_error(cls, error: LtsvError) -> ErrorReport:
        return cls(
            kind=error.kind.value,
            text=error.text,
            line=error.line,
            start=error.start,
            end=error.end,
        )


class LintReport(BaseModel):
    valid: bool = Field(description="True when no errors were found.")
    error_count: int = Field(ge=0, description="Number of errors returned.")
    truncated: bool = Field(
        default=False, description="True when more errors exist beyond the limit."
    )
    errors: list[ErrorReport] = Field(default_factory=list)
