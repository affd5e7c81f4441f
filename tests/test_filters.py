from __future__ import annotations

import pytest

from fravia.filters import (
    DEFAULT_FILTERS,
    RELAX_CODES,
    relaxed_filters,
    resolve_dialect,
    resolve_hygiene,
    translate_clause,
)
from fravia.models import FilterConfig, MenuConfig


def _all_clauses(dialect: str) -> str:
    return " ".join(config.clause_for(dialect) for config in DEFAULT_FILTERS.values())


def test_no_relax_letters_yields_every_clause_in_table_order() -> None:
    assert resolve_hygiene("", "google") == _all_clauses("google")
    assert resolve_hygiene("AC", "bing") == _all_clauses("bing")


def test_uppercase_letters_never_relax_filters() -> None:
    assert relaxed_filters("ASFTUCLA") == set()
    assert resolve_hygiene("A", "google") == _all_clauses("google")


def test_lowercase_letter_relaxes_matching_filter() -> None:
    clause = resolve_hygiene("s AC", "google")
    assert "pinterest" not in clause
    assert DEFAULT_FILTERS["2"].google in clause


def test_relax_letters_found_anywhere_in_codes() -> None:
    assert relaxed_filters("A,s C-t") == {"1", "3"}


def test_all_letters_relaxed_yields_empty_clause() -> None:
    assert resolve_hygiene("sftucla", "yandex") == ""


def test_unknown_engine_uses_google_dialect() -> None:
    assert resolve_dialect("brave") == "google"
    assert resolve_dialect("BING") == "bing"
    assert resolve_hygiene("", "scholar") == _all_clauses("google")


def test_relax_map_covers_seven_filters() -> None:
    assert RELAX_CODES == {"s": "1", "f": "2", "t": "3", "u": "4", "c": "5", "l": "6", "a": "7"}
    assert list(DEFAULT_FILTERS) == [str(n) for n in range(1, 8)]


def test_empty_dialect_clause_contributes_nothing() -> None:
    table = {
        "1": FilterConfig(code="s", name="SOCIAL", google="-site:reddit.com"),
        "2": FilterConfig(code="f", name="FREE", google="-site:blogspot.*", bing=""),
    }
    assert resolve_hygiene("", "bing", table) == ""
    assert resolve_hygiene("", "google", table) == "-site:reddit.com -site:blogspot.*"


def test_menu_config_filters_are_used() -> None:
    config = MenuConfig(filters={"1": FilterConfig(code="s", name="X", google="-foo")})
    assert resolve_hygiene("", "google", config) == "-foo"
    assert resolve_hygiene("s", "google", config) == ""


def test_resolution_does_not_mutate_table() -> None:
    before = dict(DEFAULT_FILTERS)
    resolve_hygiene("sftucla", "google")
    assert DEFAULT_FILTERS == before
    assert resolve_hygiene("", "google") == _all_clauses("google")


def test_translate_clause_rewrites_for_bing_only() -> None:
    clause = '-site:reddit.com -inurl:/tag/ -intitle:"top 10" -"affiliate"'
    assert translate_clause(clause, "bing") == (
        'NOT site:reddit.com NOT url:/tag/ NOT intitle:"top 10" NOT "affiliate"'
    )
    assert translate_clause(clause, "google") == clause
    assert translate_clause(clause, "yandex") == clause
    assert translate_clause(clause, "ddg") == clause


def test_mixed_case_engine_name_selects_dialect() -> None:
    assert resolve_hygiene("", "BING") == _all_clauses("bing")
    assert resolve_hygiene("", "Yandex") == _all_clauses("yandex")


@pytest.mark.parametrize("engine", ["google", "bing", "yandex", "ddg"])
def test_adding_relax_letters_never_adds_clauses(engine: str) -> None:
    codes = ""
    previous = len(resolve_hygiene(codes, engine).split())
    for letter in RELAX_CODES:
        codes += letter
        current = len(resolve_hygiene(codes, engine).split())
        assert current <= previous
        previous = current
    assert previous == 0
