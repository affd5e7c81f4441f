"""Search-engine registry loaded from ``engines.txt`` plus search URL building."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from .config import Settings
from .models import EngineConfig, EngineSelectors, EngineSummary
from .utils import encode_uri_component

logger = logging.getLogger(__name__)

ENGINE_FIELD_COUNT = 8
ARCHIVE_CDX_URL = "https://web.archive.org/cdx/search/cdx"


def parse_engines(content: str) -> dict[str, EngineConfig]:
    """Parse ``id|type|name|base_url|result|title|url|snippet`` lines."""
    engines: dict[str, EngineConfig] = {}
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        parts = stripped.split("|")
        if len(parts) < ENGINE_FIELD_COUNT:
            logger.debug("skipping short engine line: %r", stripped)
            continue
        engine_id, engine_type, name, base_url, result, title, url, snippet = parts[:ENGINE_FIELD_COUNT]
        if engine_type not in ("api", "browser"):
            logger.debug("skipping engine %s with unknown type %r", engine_id, engine_type)
            continue
        engines[engine_id] = EngineConfig(
            id=engine_id,
            type=engine_type,
            name=name,
            base_url=base_url,
            selectors=EngineSelectors(result=result, title=title, url=url, snippet=snippet),
        )
    return engines


def default_engines() -> dict[str, EngineConfig]:
    return {
        "google": EngineConfig(
            id="google",
            type="api",
            name="Google Custom Search",
            base_url="https://www.googleapis.com/customsearch/v1",
            selectors=EngineSelectors(result="items", title="title", url="link", snippet="snippet"),
        ),
        "bing": EngineConfig(
            id="bing",
            type="api",
            name="Bing Search",
            base_url="https://api.bing.microsoft.com/v7.0/search",
            selectors=EngineSelectors(
                result="webPages.value", title="name", url="url", snippet="snippet"
            ),
        ),
        "searx": EngineConfig(
            id="searx",
            type="browser",
            name="Searx",
            base_url="https://searx.be/search?q=",
            selectors=EngineSelectors(
                result=".result",
                title=".result h3 a",
                url=".result .url",
                snippet=".result .content",
            ),
        ),
    }


def _read_engines_file(path: Path | None) -> str | None:
    try:
        if path is not None:
            return path.read_text(encoding="utf-8")
        return resources.files("fravia").joinpath("data/engines.txt").read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


class EngineRegistry:
    """Resolve engine ids to their configuration, loading the registry on first use."""

    def __init__(
        self,
        settings: Settings,
        engines: dict[str, EngineConfig] | None = None,
    ) -> None:
        self.settings = settings
        self._engines: dict[str, EngineConfig] | None = dict(engines) if engines is not None else None

    def _load(self) -> dict[str, EngineConfig]:
        path = self.settings.engines_file
        content = _read_engines_file(path)
        if content is None:
            logger.warning("engines file %s not found, using defaults", path or "engines.txt")
            return default_engines()
        engines = parse_engines(content)
        logger.info("loaded %d search engines", len(engines))
        return engines

    @property
    def engines(self) -> dict[str, EngineConfig]:
        if self._engines is None:
            self._engines = self._load()
        return self._engines

    def get(self, engine_id: str) -> EngineConfig | None:
        return self.engines.get(engine_id)

    def register(self, engine: EngineConfig) -> None:
        self.engines[engine.id] = engine

    def available(self) -> list[EngineSummary]:
        return [
            EngineSummary(id=engine.id, name=engine.name, type=engine.type)
            for engine in self.engines.values()
        ]


def build_search_url(engine: EngineConfig, query: str) -> str:
    """Turn a query into a navigable (browser) or requestable (API) URL."""
    encoded = encode_uri_component(query)
    if engine.type == "browser":
        return f"{engine.base_url}{encoded}"
    if engine.id in ("google", "bing", "brave", "github"):
        return f"{engine.base_url}?q={encoded}"
    if engine.id == "gitlab":
        return f"{engine.base_url}?search={encoded}"
    if engine.id == "archive":
        return f"{ARCHIVE_CDX_URL}?url=*{encoded}*&output=json&limit=10"
    return f"{engine.base_url}{encoded}"


__all__ = [
    "EngineRegistry",
    "build_search_url",
    "default_engines",
    "parse_engines",
]
