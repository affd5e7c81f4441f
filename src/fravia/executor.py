"""Execution planning: turn constructed queries into browser or API instructions.

Nothing here talks to a search engine. Queries are partitioned by the
registered engine type and rendered as navigation steps (browser engines) or
request descriptors (API engines); engines without a registry entry get a
manual search URL instead.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Sequence

from .engines import EngineRegistry, build_search_url
from .models import (
    ApiSearchInstruction,
    BrowserSearchInstruction,
    ConstructedQuery,
    QueryResult,
    SearchRequest,
)
from .utils import encode_uri_component

logger = logging.getLogger(__name__)

DEFAULT_WAIT_SECONDS = 3

# engine id -> (headers, notes) for API requests
API_AUTH: dict[str, tuple[dict[str, str], str]] = {
    "google": ({}, "Requires GOOGLE_API_KEY and GOOGLE_CX environment variables"),
    "bing": (
        {"Ocp-Apim-Subscription-Key": "${BING_API_KEY}"},
        "Requires BING_API_KEY environment variable",
    ),
    "brave": (
        {"X-Subscription-Token": "${BRAVE_API_KEY}"},
        "Requires BRAVE_API_KEY environment variable",
    ),
    "github": (
        {"Authorization": "token ${GITHUB_TOKEN}", "Accept": "application/vnd.github.v3+json"},
        "Optional GITHUB_TOKEN for higher rate limits",
    ),
    "gitlab": (
        {"PRIVATE-TOKEN": "${GITLAB_TOKEN}"},
        "Optional GITLAB_TOKEN for private projects",
    ),
    "archive": ({}, "No authentication required"),
}

MANUAL_SEARCH_URLS: dict[str, str] = {
    "google": "https://www.google.com/search?q={q}",
    "bing": "https://www.bing.com/search?q={q}",
    "yandex": "https://yandex.com/search/?text={q}",
    "duckduckgo": "https://duckduckgo.com/?q={q}",
    "ddg": "https://duckduckgo.com/?q={q}",
    "brave": "https://search.brave.com/search?q={q}",
    "baidu": "https://www.baidu.com/s?wd={q}",
    "github": "https://github.com/search?q={q}",
    "scholar": "https://scholar.google.com/scholar?q={q}",
    "archive": "https://web.archive.org/web/*/{q}",
    "wayback": "https://web.archive.org/web/*/{q}",
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def manual_search_url(engine: str, query: str) -> str:
    """Public search-page URL for hand execution; unknown engines go to Google."""
    template = MANUAL_SEARCH_URLS.get(engine.lower(), MANUAL_SEARCH_URLS["google"])
    return template.format(q=encode_uri_component(query))


def generate_browser_instructions(
    requests: Sequence[SearchRequest],
    registry: EngineRegistry,
    wait_time: int = DEFAULT_WAIT_SECONDS,
) -> list[BrowserSearchInstruction]:
    instructions: list[BrowserSearchInstruction] = []
    for request in requests:
        engine = registry.get(request.engine)
        if engine is None or engine.type != "browser":
            continue
        url = build_search_url(engine, request.query)
        selectors = engine.selectors
        instructions.append(
            BrowserSearchInstruction(
                engine=engine.id,
                navigate_url=url,
                wait_time=wait_time,
                selectors=selectors,
                instructions=[
                    f'1. browser_navigate(url="{url}")',
                    f"2. browser_wait_for(time={wait_time})",
                    "3. browser_snapshot()",
                    "4. Extract results using selectors:",
                    f"   - Results container: {selectors.result}",
                    f"   - Title: {selectors.title}",
                    f"   - URL: {selectors.url}",
                    f"   - Snippet: {selectors.snippet}",
                ],
            )
        )
    return instructions


def generate_api_instructions(
    requests: Sequence[SearchRequest],
    registry: EngineRegistry,
) -> list[ApiSearchInstruction]:
    instructions: list[ApiSearchInstruction] = []
    for request in requests:
        engine = registry.get(request.engine)
        if engine is None or engine.type != "api":
            continue
        headers, notes = API_AUTH.get(engine.id, ({}, ""))
        instructions.append(
            ApiSearchInstruction(
                engine=engine.id,
                url=build_search_url(engine, request.query),
                headers=dict(headers),
                notes=notes,
            )
        )
    return instructions


def format_execution_plan(
    requests: Sequence[SearchRequest],
    registry: EngineRegistry,
    wait_time: int = DEFAULT_WAIT_SECONDS,
) -> str:
    browser = generate_browser_instructions(requests, registry, wait_time)
    api = generate_api_instructions(requests, registry)

    lines = ["=== SEARCH EXECUTION PLAN ===", ""]
    if api:
        lines.append("--- API SEARCHES ---")
        for item in api:
            lines.append(f"[{item.engine}] {item.method} {item.url}")
            if item.headers:
                lines.append(f"  Headers: {json.dumps(item.headers)}")
            if item.notes:
                lines.append(f"  Note: {item.notes}")
            lines.append("")
    if browser:
        lines.append("--- BROWSER AUTOMATION SEARCHES ---")
        for item in browser:
            lines.append(f"[{item.engine}] Navigate to: {item.navigate_url}")
            lines.append(f"  Wait: {item.wait_time}s")
            lines.append(f"  Selectors: {json.dumps(item.selectors.model_dump())}")
            lines.append("")
    return "\n".join(lines)


def execute_queries(
    queries: Sequence[ConstructedQuery],
    registry: EngineRegistry,
    wait_time: int = DEFAULT_WAIT_SECONDS,
) -> list[QueryResult]:
    """
    Render an execution plan for each query as QueryResult entries.

    Unknown engines fall into the browser bucket, produce no instruction
    there, and end up with a manual-execution entry instead.
    """
    browser_requests: list[SearchRequest] = []
    api_requests: list[SearchRequest] = []
    for query in queries:
        request = SearchRequest(engine=query.engine, query=query.query)
        engine = registry.get(query.engine)
        if engine is not None and engine.type == "api":
            api_requests.append(request)
        else:
            browser_requests.append(request)

    results: list[QueryResult] = []
    for item in generate_browser_instructions(browser_requests, registry, wait_time):
        results.append(
            QueryResult(
                engine=item.engine,
                query=item.navigate_url,
                title=f"[BROWSER] {item.engine}",
                url=item.navigate_url,
                snippet="\n".join(item.instructions),
                timestamp=_now(),
            )
        )
    for item in generate_api_instructions(api_requests, registry):
        results.append(
            QueryResult(
                engine=item.engine,
                query=item.url,
                title=f"[API] {item.engine}",
                url=item.url,
                snippet=f"Method: {item.method}\nHeaders: {json.dumps(item.headers)}\n{item.notes}",
                timestamp=_now(),
            )
        )

    planned = {result.engine for result in results}
    for query in queries:
        if query.engine in planned:
            continue
        results.append(
            QueryResult(
                engine=query.engine,
                query=query.query,
                title=f"[{query.engine.upper()}] Query prepared",
                url=manual_search_url(query.engine, query.query),
                snippet=f"Execute manually: {query.query}",
                timestamp=_now(),
            )
        )

    logger.debug(
        "planned %d queries: %d browser, %d api, %d results",
        len(queries),
        len(browser_requests),
        len(api_requests),
        len(results),
    )
    return results


__all__ = [
    "execute_queries",
    "format_execution_plan",
    "generate_api_instructions",
    "generate_browser_instructions",
    "manual_search_url",
]
