"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def explain_ltsv_errors(log_path: str, limit: int = 50) -> list[dict[str, Any]]:
        """Build a prompt that explains LTSV validation errors in a file."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a precise assistant for LTSV (Labeled Tab-separated Values) data. "
                    "Explain validation errors using only tool output and the file contents. "
                    "Do not invent lines or offsets."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Check the file with lint_ltsv. Follow this workflow:\n"
                    f"- Call lint_ltsv with log_path={log_path!r} and limit={limit}.\n"
                    "- If valid is true, say so and stop.\n"
                    "- Group errors by kind (invalid_pair, invalid_label, invalid_field).\n"
                    "- line is 0-based; start/end are byte offsets within that line.\n"
                    "- If truncated is true, mention that more errors exist.\n\n"
                    "Return this structure:\n"
                    "1) Summary (1-2 sentences)\n"
                    "2) Errors by kind (quote text, line and span)\n"
                    "3) Likely cause (e.g., missing ':' separator, spaces in labels, "
                    "raw control bytes in values)\n"
                ),
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Grammar reference:"},
                    {"type": "resource", "uri": "app://ltsv/grammar"},
                ],
            },
        ]
