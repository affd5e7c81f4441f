from __future__ import annotations

from fravia.config import Settings
from fravia.engines import EngineRegistry
from fravia.executor import (
    execute_queries,
    format_execution_plan,
    generate_api_instructions,
    generate_browser_instructions,
    manual_search_url,
)
from fravia.models import ConstructedQuery, SearchRequest


def _registry() -> EngineRegistry:
    return EngineRegistry(Settings())


def _query(engine: str, text: str = "x") -> ConstructedQuery:
    return ConstructedQuery(engine=engine, query=text, phase=1, block_code="A")


def test_browser_instructions_are_numbered_steps() -> None:
    [item] = generate_browser_instructions([SearchRequest(engine="yandex", query="a b")], _registry(), wait_time=5)
    assert item.navigate_url.endswith("a%20b")
    assert item.wait_time == 5
    assert item.instructions[0] == f'1. browser_navigate(url="{item.navigate_url}")'
    assert item.instructions[1] == "2. browser_wait_for(time=5)"
    assert item.instructions[2] == "3. browser_snapshot()"


def test_api_instructions_carry_auth_headers() -> None:
    requests = [SearchRequest(engine="bing", query="x"), SearchRequest(engine="yandex", query="x")]
    [item] = generate_api_instructions(requests, _registry())
    assert item.engine == "bing"
    assert item.method == "GET"
    assert item.headers == {"Ocp-Apim-Subscription-Key": "${BING_API_KEY}"}


def test_execute_queries_partitions_by_engine_type() -> None:
    results = execute_queries([_query("google"), _query("yandex")], _registry())
    titles = [result.title for result in results]
    assert titles == ["[BROWSER] yandex", "[API] google"]


def test_unregistered_engine_gets_manual_entry() -> None:
    registry = EngineRegistry(Settings(), engines={})
    [result] = execute_queries([_query("mystery", "a b")], registry)
    assert result.title == "[MYSTERY] Query prepared"
    assert result.url == "https://www.google.com/search?q=a%20b"
    assert result.snippet == "Execute manually: a b"


def test_manual_search_url_known_engine() -> None:
    assert manual_search_url("DDG", "q") == "https://duckduckgo.com/?q=q"


def test_execution_plan_sections() -> None:
    requests = [SearchRequest(engine="google", query="x"), SearchRequest(engine="yandex", query="x")]
    plan = format_execution_plan(requests, _registry())
    assert plan.startswith("=== SEARCH EXECUTION PLAN ===")
    assert "--- API SEARCHES ---" in plan
    assert "--- BROWSER AUTOMATION SEARCHES ---" in plan
    assert "[yandex] Navigate to:" in plan
