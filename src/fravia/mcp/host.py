from __future__ import annotations

import logging
import secrets
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastmcp import FastMCP
from starlette.middleware import Middleware as StarletteMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from fravia.config import get_settings
from fravia.mcp import views
from fravia.mcp.recipes import HANDBOOK
from fravia.mcp.service import FraviaService
from fravia.models import StopRequest

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(levelname)s:%(name)s:%(message)s",
)
_service: FraviaService | None = None
LifespanState = dict[str, Any]


@asynccontextmanager
async def _lifespan(_: FastMCP[LifespanState]) -> AsyncIterator[LifespanState]:
    global _service
    service = FraviaService(settings)
    _service = service
    try:
        yield {"service": "fravia"}
    finally:
        _service = None


def _auth_failure(status_code: int, detail: str) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse({"detail": detail}, status_code=status_code, headers=headers)


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Reject HTTP requests whose bearer token does not match MCP_API_TOKEN."""

    def __init__(self, app, *, token: str):
        super().__init__(app)
        self._expected = token.encode("utf-8")

    async def dispatch(self, request: Request, call_next):
        scheme, _, presented = (request.headers.get("authorization") or "").partition(" ")
        presented = presented.strip()
        if scheme.lower() != "bearer" or not presented:
            return _auth_failure(401, "Missing or invalid Authorization header")
        if not secrets.compare_digest(presented.encode("utf-8"), self._expected):
            return _auth_failure(403, "Invalid bearer token")
        return await call_next(request)


class FraviaFastMCP(FastMCP):
    """FastMCP server that guards its HTTP transports with an optional bearer token."""

    def __init__(self, *args, auth_token: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._auth_token = auth_token

    def http_app(self, *args, middleware: list[StarletteMiddleware] | None = None, **kwargs):
        stack = list(middleware or [])
        if self._auth_token:
            stack.insert(0, StarletteMiddleware(BearerAuthMiddleware, token=self._auth_token))
        return super().http_app(*args, middleware=stack, **kwargs)


mcp = FraviaFastMCP(
    name="fravia-mcp",
    instructions=(
        "Menu-ordering web search: pick letter codes from a phase menu and the "
        "server builds engine-specific queries with noise filters applied."
    ),
    version="0.1.0",
    lifespan=_lifespan,
    auth_token=settings.mcp_api_token,
)


def _require_service() -> FraviaService:
    if _service is None:
        raise RuntimeError("MCP service is not initialized")
    return _service


# ============================
# Prompts
# ============================


@mcp.prompt(name="fravia_handbook")
def fravia_handbook() -> str:
    """Protocol, code letters and phase overview for menu-ordering search."""
    return HANDBOOK


# ============================
# Tools
# ============================


@mcp.tool
async def fravia_get_index() -> str:
    """
    summary: List the eight search phases (S1-S8) with their purpose.
    when_to_use:
      - Call this first to see which phases exist before asking for a menu.
    returns:
      text:
        description: Phase list plus protocol instructions.
    """
    return views.format_phase_index(_require_service().phase_index())


@mcp.tool
async def fravia_get_menu(phase: int) -> str:
    """
    summary: Show the menu for one phase.
    when_to_use:
      - Before fravia_execute, to pick building blocks (A,B,C...), precombinations (X,Y...) and decide which noise filters (s,f,t,u,c,l,a) to relax.
    arguments:
      phase:
        type: int
        required: true
        description: Phase number 1-8.
    constraints:
      - Phase must be between 1 and 8.
    returns:
      text:
        description: Active hygiene filters, building blocks with per-engine templates, precombinations, engine nuances and the reply format.
    """
    return _require_service().render_menu(phase)


@mcp.tool
async def fravia_execute(phase: int, topics: list[str], codes: str) -> str:
    """
    summary: Build queries from menu codes and return per-query execution instructions.
    when_to_use:
      - After reading a phase menu, to turn selected codes into engine-specific queries.
    arguments:
      phase:
        type: int
        required: true
        description: Phase number 1-8.
      topics:
        type: list[string]
        required: true
        description: Topics/synonyms. Index 0 is the main subject, 1+ are synonyms.
      codes:
        type: string
        required: true
        description: Single string of codes. Uppercase letters select building blocks/combos, lowercase letters relax noise filters. Example 'AC', 'X' or 's AC'.
    constraints:
      - topics must be non-empty and codes must contain at least one non-space character.
    returns:
      text:
        description: Generated queries, per-query browser/API instructions and the stop-hook footer.
      notes:
        - Identical queries are collapsed; unknown codes are ignored.
    """
    service = _require_service()
    response = service.execute(phase, topics, codes)
    return views.format_execution_results(phase, codes, response.queries, response.results)


@mcp.tool
async def fravia_resolve_hygiene(codes: str = "", engine: str = "google") -> str:
    """
    summary: Show the noise-suppression clause that would be appended for an engine.
    when_to_use:
      - To preview which exclusions stay active after relaxing filters with lowercase letters.
    arguments:
      codes:
        type: string
        required: false
        description: Code string; only lowercase relax letters matter here.
      engine:
        type: string
        required: false
        description: Engine name (google, bing, yandex, ddg). Unknown engines use the google dialect.
    returns:
      text:
        description: The exclusion clause, possibly empty.
    """
    return _require_service().resolve_hygiene(codes, engine).clause


@mcp.tool
async def fravia_list_engines() -> str:
    """
    summary: List registered search engines and whether each runs via browser or API.
    returns:
      text:
        description: One line per engine as "id (type): name".
    """
    engines = _require_service().engines()
    return "\n".join(f"{engine.id} ({engine.type}): {engine.name}" for engine in engines)


@mcp.tool
async def fravia_stop(continue_to_phase: int | None = None, reason: str | None = None) -> str:
    """
    summary: Signal the end of a phase and optionally request a follow-up phase.
    when_to_use:
      - After reviewing execution results, to hand over to the next phase or end the session.
    arguments:
      continue_to_phase:
        type: int
        required: false
        description: Next phase to continue to (1-8).
      reason:
        type: string
        required: false
        description: Reason for stopping or continuing.
    returns:
      text:
        description: STOP line followed by ---FOLLOWUP--- (continuing) or ---AWAIT_USER_INPUT--- (done).
    """
    request = StopRequest(continue_to_phase=continue_to_phase, reason=reason)
    return _require_service().stop(request.continue_to_phase, request.reason).text


@mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def health(_: Request) -> JSONResponse:
    """Lightweight health check for load balancers hitting GET /healthz."""
    return JSONResponse({"status": "ok"})


__all__ = ["mcp"]


if __name__ == "__main__":
    mcp.run(
        transport="streamable-http",
        path="/mcp",
        host=settings.mcp_host,
        port=settings.mcp_port,
    )
