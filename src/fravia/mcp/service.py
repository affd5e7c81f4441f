"""Core business logic shared by the MCP host and the FastAPI facade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Sequence

from fastapi import HTTPException, status

from ..builder import build_queries
from ..config import Settings
from ..engines import EngineRegistry
from ..executor import execute_queries
from ..filters import resolve_dialect, resolve_hygiene
from ..menu_conf import load_menu_config
from ..models import (
    PHASE_COUNT,
    ConstructedQuery,
    EngineSummary,
    ExecuteResponse,
    HygieneResponse,
    MenuConfig,
    PhaseIndexEntry,
    PhaseMenu,
)
from ..phases import PHASES, get_phase_menu, phase_info
from . import views

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return max(0, int((perf_counter() - start) * 1000))


def _require_phase(phase: int) -> None:
    if not isinstance(phase, int) or phase < 1 or phase > PHASE_COUNT:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Phase must be 1-{PHASE_COUNT}",
        )


@dataclass(frozen=True)
class StopSignal:
    continue_to_phase: int | None
    text: str


class FraviaService:
    def __init__(
        self,
        settings: Settings,
        *,
        menu_config: MenuConfig | None = None,
        engine_registry: EngineRegistry | None = None,
    ) -> None:
        self.settings = settings
        self.menu_config = menu_config or load_menu_config(settings.menu_conf_path)
        self.engine_registry = engine_registry or EngineRegistry(settings)

    # ------------------------------------------------------------------ #
    def phase_index(self) -> list[PhaseIndexEntry]:
        return [
            PhaseIndexEntry(code=str(number), id=f"S{number}", name=info.name, purpose=info.purpose)
            for number, info in enumerate(PHASES, start=1)
        ]

    def get_menu(self, phase: int) -> PhaseMenu:
        _require_phase(phase)
        return get_phase_menu(phase)

    def render_menu(self, phase: int) -> str:
        menu = self.get_menu(phase)
        return views.format_phase_menu(menu, self.menu_config.phases.get(f"S{phase}"))

    # ------------------------------------------------------------------ #
    def construct(self, phase: int, topics: Sequence[str], codes: str) -> list[ConstructedQuery]:
        _require_phase(phase)
        if not topics:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="At least one topic required",
            )
        if not codes or not codes.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Codes required (e.g., 'A', 'XY', 's AC')",
            )
        return build_queries(phase, list(topics), codes, self.menu_config)

    def execute(self, phase: int, topics: Sequence[str], codes: str) -> ExecuteResponse:
        start = perf_counter()
        queries = self.construct(phase, topics, codes)
        results = execute_queries(
            queries, self.engine_registry, wait_time=self.settings.browser_wait_seconds
        )
        logger.info(
            "execute phase=%s codes=%r topics=%d -> %d queries, %d results in %dms",
            phase,
            codes,
            len(topics),
            len(queries),
            len(results),
            _elapsed_ms(start),
        )
        return ExecuteResponse(phase=phase, codes=codes, queries=queries, results=results)

    # ------------------------------------------------------------------ #
    def resolve_hygiene(self, codes: str, engine: str) -> HygieneResponse:
        return HygieneResponse(
            engine=engine,
            dialect=resolve_dialect(engine),
            clause=resolve_hygiene(codes, engine, self.menu_config),
        )

    def engines(self) -> list[EngineSummary]:
        return self.engine_registry.available()

    def stop(self, continue_to_phase: int | None = None, reason: str | None = None) -> StopSignal:
        info = phase_info(continue_to_phase) if continue_to_phase else None
        if info is None:
            return StopSignal(None, views.format_stop(None, reason))
        return StopSignal(
            continue_to_phase,
            views.format_stop(continue_to_phase, reason, info.name),
        )


__all__ = ["FraviaService", "StopSignal"]
