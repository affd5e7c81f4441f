from __future__ import annotations

from pathlib import Path

from fravia.config import Settings
from fravia.engines import EngineRegistry, build_search_url, default_engines, parse_engines
from fravia.models import EngineConfig, EngineSelectors

SELECTORS = EngineSelectors(result="r", title="t", url="u", snippet="s")


def _engine(engine_id: str, engine_type: str, base_url: str) -> EngineConfig:
    return EngineConfig(id=engine_id, type=engine_type, name=engine_id, base_url=base_url, selectors=SELECTORS)


def test_parse_engines_skips_comments_short_lines_and_bad_types() -> None:
    content = "\n".join(
        [
            "# id|type|name|base_url|result|title|url|snippet",
            "searx|browser|Searx|https://searx.be/search?q=|.result|h3 a|.url|.content",
            "short|api|Too short",
            "weird|grpc|Weird|https://x|a|b|c|d",
        ]
    )
    engines = parse_engines(content)
    assert list(engines) == ["searx"]
    assert engines["searx"].selectors.title == "h3 a"


def test_registry_loads_packaged_engine_list() -> None:
    registry = EngineRegistry(Settings())
    assert registry.get("yandex").type == "browser"
    assert registry.get("google").type == "api"
    assert registry.get("nope") is None


def test_registry_falls_back_to_defaults_when_file_missing(tmp_path: Path) -> None:
    settings = Settings(FRAVIA_ENGINES_FILE=tmp_path / "none.txt")
    registry = EngineRegistry(settings)
    assert set(registry.engines) == set(default_engines())


def test_registry_register_and_available() -> None:
    registry = EngineRegistry(Settings(), engines={})
    registry.register(_engine("custom", "browser", "https://c/?q="))
    assert [(e.id, e.type) for e in registry.available()] == [("custom", "browser")]


def test_build_search_url_variants() -> None:
    query = '"a b" -site:x.com'
    encoded = "%22a%20b%22%20-site%3Ax.com"
    assert build_search_url(_engine("yandex", "browser", "https://yandex.com/search/?text="), query) == (
        f"https://yandex.com/search/?text={encoded}"
    )
    assert build_search_url(_engine("google", "api", "https://g/v1"), query) == f"https://g/v1?q={encoded}"
    assert build_search_url(_engine("gitlab", "api", "https://gl/api"), query) == (
        f"https://gl/api?search={encoded}"
    )
    assert build_search_url(_engine("archive", "api", "https://ignored"), "x") == (
        "https://web.archive.org/cdx/search/cdx?url=*x*&output=json&limit=10"
    )
    assert build_search_url(_engine("other", "api", "https://o/?k="), "x") == "https://o/?k=x"
