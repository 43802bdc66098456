"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from itertools import islice
from typing import Any

from ltsv_tokenizer.core.collect import first_error, iter_errors, parse, parse_dicts
from ltsv_tokenizer.core.models import LtsvError
from ltsv_tokenizer.core.reader import read_bytes
from ltsv_tokenizer.tools.models import ErrorReport, LintReport

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


async def _load(text: str | None, log_path: str | None) -> str | bytes:
    """Return the buffer to check from exactly one of text / log_path."""
    if (text is None) == (log_path is None):
        raise ValueError("Provide exactly one of text or log_path.")
    if text is not None:
        return text
    return await read_bytes(log_path)


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def _error_to_dict(error: LtsvError) -> dict[str, Any]:
    return ErrorReport.from_error(error).model_dump()


async def validate_ltsv_impl(
    *,
    text: str | None = None,
    log_path: str | None = None,
) -> dict[str, Any]:
    """Implementation for the `validate_ltsv` MCP tool."""
    data = await _load(text, log_path)
    error = first_error(data)
    return {
        "valid": error is None,
        "error": _error_to_dict(error) if error is not None else None,
    }


async def parse_ltsv_impl(
    *,
    text: str | None = None,
    log_path: str | None = None,
    as_dicts: bool = False,
) -> dict[str, Any]:
    """Implementation for the `parse_ltsv` MCP tool.

    Notes
    -----
    - Parsing stops at the first invalid field; no partial records are returned.
    - as_dicts returns one {label: field} object per line (later labels win).
    """
    data = await _load(text, log_path)
    try:
        if as_dicts:
            records: list[Any] = parse_dicts(data)
        else:
            records = [
                [{"label": p.label, "field": p.field} for p in row] for row in parse(data)
            ]
    except LtsvError as e:
        return {"valid": False, "count": 0, "records": [], "error": _error_to_dict(e)}

    return {"valid": True, "count": len(records), "records": records, "error": None}


async def lint_ltsv_impl(
    *,
    text: str | None = None,
    log_path: str | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `lint_ltsv` MCP tool.

    Unlike validation, linting keeps scanning after an invalid field and
    reports every error up to limit (hard-capped).
    """
    limit = _resolve_limit(limit)
    data = await _load(text, log_path)

    errors = list(islice(iter_errors(data), limit + 1))
    truncated = len(errors) > limit
    errors = errors[:limit]

    report = LintReport(
        valid=not errors,
        error_count=len(errors),
        truncated=truncated,
        errors=[ErrorReport.from_error(e) for e in errors],
    )
    return report.model_dump()
