from __future__ import annotations

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from fravia.config import Settings
from fravia.mcp import host
from fravia.mcp.recipes import HANDBOOK
from fravia.mcp.service import FraviaService


@pytest.fixture
def service(monkeypatch: pytest.MonkeyPatch) -> FraviaService:
    instance = FraviaService(Settings())
    monkeypatch.setattr(host, "_service", instance)
    return instance


async def _call(name: str, arguments: dict | None = None) -> str:
    async with Client(host.mcp) as client:
        result = await client.call_tool(name, arguments or {})
    return result.content[0].text


@pytest.mark.asyncio
async def test_tools_are_registered() -> None:
    async with Client(host.mcp) as client:
        tools = {tool.name for tool in await client.list_tools()}
    assert {
        "fravia_get_index",
        "fravia_get_menu",
        "fravia_execute",
        "fravia_resolve_hygiene",
        "fravia_list_engines",
        "fravia_stop",
    } <= tools


@pytest.mark.asyncio
async def test_get_index_lists_phases(service: FraviaService) -> None:
    text = await _call("fravia_get_index")
    assert text.startswith("*** FRAVIA SEARCH PHASES ***")
    assert "[1] S1: Reconnaissance" in text
    assert "[8] S8: Language/Regional Lateral" in text


@pytest.mark.asyncio
async def test_get_menu_renders_blocks_and_filters(service: FraviaService) -> None:
    text = await _call("fravia_get_menu", {"phase": 1})
    assert "*** PHASE S1: Reconnaissance ***" in text
    assert "--- ACTIVE HYGIENE (Default: BLOCKED) ---" in text
    assert "[X] Standard Recon Combo (=A+B)" in text


@pytest.mark.asyncio
async def test_get_menu_rejects_out_of_range_phase(service: FraviaService) -> None:
    with pytest.raises(ToolError):
        await _call("fravia_get_menu", {"phase": 9})


@pytest.mark.asyncio
async def test_execute_returns_queries_and_stop_hook(service: FraviaService) -> None:
    text = await _call("fravia_execute", {"phase": 1, "topics": ["x"], "codes": "A"})
    assert "*** PHASE S1 EXECUTION ***" in text
    assert "Queries generated: 3" in text
    assert '[google] "x" OR "x" OR "x" -site:pinterest.*' in text
    assert "Or call fravia_stop(continue_to_phase=2) to auto-advance" in text
    assert "=== SEARCH EXECUTION PLAN ===" not in text
    assert text.count("[BROWSER] yandex") == 1


@pytest.mark.asyncio
async def test_execute_last_phase_awaits_user(service: FraviaService) -> None:
    text = await _call("fravia_execute", {"phase": 8, "topics": ["x"], "codes": "A"})
    assert "Next phase: COMPLETE" in text
    assert "---AWAIT_USER_INPUT---" in text


@pytest.mark.asyncio
async def test_execute_rejects_empty_topics(service: FraviaService) -> None:
    with pytest.raises(ToolError):
        await _call("fravia_execute", {"phase": 1, "topics": [], "codes": "A"})


@pytest.mark.asyncio
async def test_resolve_hygiene_relaxes_filters(service: FraviaService) -> None:
    text = await _call("fravia_resolve_hygiene", {"codes": "sftucl", "engine": "bing"})
    assert text == 'NOT "let\'s dive in" NOT "comprehensive guide"'


@pytest.mark.asyncio
async def test_list_engines(service: FraviaService) -> None:
    text = await _call("fravia_list_engines")
    assert "google (api): Google Custom Search" in text
    assert "yandex (browser): Yandex" in text


@pytest.mark.asyncio
async def test_stop_with_and_without_followup(service: FraviaService) -> None:
    text = await _call("fravia_stop", {"continue_to_phase": 3, "reason": "enough recon"})
    assert text == (
        "STOP: Phase 2 complete. enough recon\n---FOLLOWUP---\nContinuing to phase 3: Deep Documents"
    )
    text = await _call("fravia_stop", {})
    assert text.endswith("---AWAIT_USER_INPUT---")
    assert text.startswith("STOP: Search session complete.")


@pytest.mark.asyncio
async def test_handbook_prompt() -> None:
    async with Client(host.mcp) as client:
        result = await client.get_prompt("fravia_handbook")
    assert result.messages[0].content.text == HANDBOOK
