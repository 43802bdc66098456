"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: validate, parse and lint LTSV text or files
- Resources: grammar, samples, report schema and base-dir restricted files
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m ltsv_tokenizer.server.ltsv_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from ltsv_tokenizer.prompts.registry import register_prompts
from ltsv_tokenizer.resources.registry import register_resources
from ltsv_tokenizer.tools.lint import lint_ltsv_impl, parse_ltsv_impl, validate_ltsv_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("LTSV_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("ltsv", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def validate_ltsv(text: str | None = None, log_path: str | None = None) -> dict[str, Any]:
    """Check that LTSV text or a file is well formed.

    Parameters
    ----------
    text:
        Inline LTSV content.
    log_path:
        Path to a local LTSV file (plain or .gz). Use either text or log_path.

    Returns
    -------
    dict:
        {"valid": bool, "error": dict | None} with the first error found.
    """
    LOGGER.debug("validate_ltsv log_path=%s", log_path)
    return await validate_ltsv_impl(text=text, log_path=log_path)


@mcp.tool()
async def parse_ltsv(
    text: str | None = None,
    log_path: str | None = None,
    as_dicts: bool = False,
) -> dict[str, Any]:
    """Parse LTSV into records.

    Parameters
    ----------
    text / log_path:
        Inline content or a local file; exactly one is required.
    as_dicts:
        Return one {label: field} object per line instead of pair lists.

    Returns
    -------
    dict:
        {"valid": bool, "count": int, "records": list, "error": dict | None}
    """
    LOGGER.debug("parse_ltsv log_path=%s as_dicts=%s", log_path, as_dicts)
    return await parse_ltsv_impl(text=text, log_path=log_path, as_dicts=as_dicts)


@mcp.tool()
async def lint_ltsv(
    text: str | None = None,
    log_path: str | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Report every invalid field, not just the first.

    Parameters
    ----------
    text / log_path:
        Inline content or a local file; exactly one is required.
    limit:
        Maximum number of errors returned (hard-capped in the implementation).

    Returns
    -------
    dict:
        {"valid": bool, "error_count": int, "truncated": bool, "errors": list[dict]}
    """
    LOGGER.debug("lint_ltsv log_path=%s limit=%s", log_path, limit)
    return await lint_ltsv_impl(text=text, log_path=log_path, limit=limit)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
