"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
import os
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from ltsv_tokenizer.tools.models import LintReport

ALLOWED_FILE_SUFFIXES = {".ltsv", ".log", ".txt"}
BASE_DIR_ENV = "LTSV_BASE_DIR"
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

GRAMMAR = """\
ltsv        = *(record NL) [record]
record      = [field *(TAB field)]
field       = label ":" field-value
label       = 1*lbyte
field-value = *fbyte
TAB         = %x09
NL          = [%x0D] %x0A
lbyte       = %x30-39 / %x41-5A / %x61-7A / "_" / "." / "-"
fbyte       = %x01-08 / %x0B / %x0C / %x0E-FF
"""

SAMPLE = (
    "host:127.0.0.1\tident:-\tuser:frank\ttime:[10/Oct/2000:13:55:36 -0700]"
    "\treq:GET /apache_pb.gif HTTP/1.0\tstatus:200\tsize:2326"
    "\treferer:http://www.example.com/start.html\tua:Mozilla/4.08 [en] (Win98; I ;Nav)\n"
)


def _base_dir() -> Path:
    """Return the resolved base directory for file resources."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = _safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def _read_text(path: Path) -> str:
    """Read text from a file, supporting optional gzip compression."""
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            return f.read()
    return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://ltsv/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://ltsv/help\n"
            "- app://ltsv/grammar\n"
            "- app://ltsv/examples/sample\n"
            "- app://ltsv/schemas/lint-report\n"
            f"- ltsv://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {_base_dir()}\n"
        )

    @mcp.resource("app://ltsv/grammar")
    def grammar() -> str:
        """Return the ABNF grammar the validator enforces."""
        return GRAMMAR

    @mcp.resource("app://ltsv/examples/sample")
    def sample() -> str:
        """Return a one-line LTSV access log sample."""
        return SAMPLE

    @mcp.resource("app://ltsv/schemas/lint-report")
    def lint_report_schema() -> dict[str, Any]:
        """Return the JSON schema of lint_ltsv results."""
        return LintReport.model_json_schema()

    @mcp.resource("ltsv://{path}")
    async def read_ltsv(path: str) -> str:
        """Read an LTSV file from within LTSV_BASE_DIR."""
        p = _resolve_resource_path(path)
        return await asyncio.to_thread(_read_text, p)
