from __future__ import annotations

import pytest

from ltsv_tokenizer.server.ltsv_server import mcp


@pytest.mark.asyncio
async def test_tools_registered() -> None:
    names = {tool.name for tool in await mcp.list_tools()}
    assert {"validate_ltsv", "parse_ltsv", "lint_ltsv"} <= names


@pytest.mark.asyncio
async def test_prompts_registered() -> None:
    names = {prompt.name for prompt in await mcp.list_prompts()}
    assert "explain_ltsv_errors" in names
