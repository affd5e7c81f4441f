"""Pydantic models for the phase catalog, query construction and execution plans."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

HygieneDialect = Literal["google", "bing", "yandex", "ddg"]
EngineType = Literal["api", "browser"]
FilterDefault = Literal["ON", "OFF"]

PHASE_COUNT = 8


class NoiseFilter(BaseModel):
    """Display entry for a noise filter shown on every phase menu."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    applies: str
    default: FilterDefault = "ON"


class FilterConfig(BaseModel):
    """Exclusion clauses for one noise filter, one rendering per dialect."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    google: str = ""
    bing: str = ""
    yandex: str = ""
    ddg: str = ""

    def clause_for(self, dialect: HygieneDialect) -> str:
        return getattr(self, dialect, "") or ""


class OptionConfig(BaseModel):
    code: str
    description: str = ""
    value: str = ""


class PhaseConfig(BaseModel):
    description: str = ""
    nuance: str = ""
    options: dict[str, OptionConfig] = Field(default_factory=dict)


class MenuConfig(BaseModel):
    """Parsed menu configuration: filter table plus per-phase option notes."""

    model_config = ConfigDict(frozen=True)

    version: str = "5.0"
    filters: dict[str, FilterConfig] = Field(default_factory=dict)
    phases: dict[str, PhaseConfig] = Field(default_factory=dict)


class PhaseInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    purpose: str


class BuildingBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    description: str
    engines: dict[str, list[str]] = Field(default_factory=dict)


class Precombination(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    expands_to: list[str]
    description: str


class PhaseMenu(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: int
    id: str
    name: str
    purpose: str
    noise_filters: list[NoiseFilter] = Field(default_factory=list)
    building_blocks: list[BuildingBlock] = Field(default_factory=list)
    precombinations: list[Precombination] = Field(default_factory=list)
    engine_nuances: dict[str, str] = Field(default_factory=dict)

    def block(self, code: str) -> BuildingBlock | None:
        for block in self.building_blocks:
            if block.code == code:
                return block
        return None

    def precombination(self, code: str) -> Precombination | None:
        for combo in self.precombinations:
            if combo.code == code:
                return combo
        return None


class ConstructedQuery(BaseModel):
    engine: str
    query: str
    phase: int
    block_code: str


class EngineSelectors(BaseModel):
    result: str
    title: str
    url: str
    snippet: str


class EngineConfig(BaseModel):
    id: str
    type: EngineType
    name: str
    base_url: str
    selectors: EngineSelectors


class EngineSummary(BaseModel):
    id: str
    name: str
    type: EngineType


class SearchRequest(BaseModel):
    engine: str
    query: str
    max_results: int | None = None


class BrowserSearchInstruction(BaseModel):
    engine: str
    navigate_url: str
    wait_time: int = 3
    selectors: EngineSelectors
    instructions: list[str] = Field(default_factory=list)


class ApiSearchInstruction(BaseModel):
    engine: str
    method: Literal["GET"] = "GET"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    notes: str = ""


class QueryResult(BaseModel):
    engine: str
    query: str
    title: str
    url: str
    snippet: str
    timestamp: str


class ExecuteRequest(BaseModel):
    phase: int = Field(ge=1, le=PHASE_COUNT)
    topics: list[str] = Field(min_length=1)
    codes: str

    @field_validator("codes")
    def _require_codes(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("codes required (e.g. 'A', 'XY', 's AC')")
        return value


class ExecuteResponse(BaseModel):
    phase: int
    codes: str
    queries: list[ConstructedQuery]
    results: list[QueryResult]


class HygieneRequest(BaseModel):
    codes: str = ""
    engine: str = "google"


class HygieneResponse(BaseModel):
    engine: str
    dialect: HygieneDialect
    clause: str


class StopRequest(BaseModel):
    continue_to_phase: int | None = None
    reason: str | None = None

    @field_validator("reason", mode="before")
    def _blank_reason(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


class PhaseIndexEntry(BaseModel):
    code: str
    id: str
    name: str
    purpose: str
