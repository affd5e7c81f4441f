"""Query construction: expand menu codes into deduplicated per-engine queries."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Mapping, Sequence

from .filters import resolve_hygiene
from .models import ConstructedQuery, FilterConfig, MenuConfig, PhaseMenu
from .phases import get_phase_menu
from .utils import unique_in_order

logger = logging.getLogger(__name__)

_NON_UPPER = re.compile(r"[^A-Z]")
_PLACEHOLDER = re.compile(r"<\d+>")


def extract_block_letters(codes: str) -> list[str]:
    """Uppercase selection letters in order of appearance; everything else is dropped."""
    return list(_NON_UPPER.sub("", codes or ""))


def expand_codes(letters: Iterable[str], menu: PhaseMenu) -> list[str]:
    """
    Expand precombination letters into their constituent block letters.

    Single pass, one level deep: constituents are added as-is, so a
    constituent that is itself a precombination code simply finds no block
    later on. Letters that are not precombinations are kept even when no block
    matches them. The result behaves as a set but keeps first-insertion order.
    """
    expanded: dict[str, None] = {}
    for letter in letters:
        combo = menu.precombination(letter)
        if combo is not None:
            for constituent in combo.expands_to:
                expanded.setdefault(constituent, None)
        else:
            expanded.setdefault(letter, None)
    return list(expanded)


def substitute_topics(template: str, topics: Sequence[str]) -> str:
    """Fill ``<j>`` with topics[j]; leftover placeholders fall back to topics[0]."""
    query = template
    for index, topic in enumerate(topics):
        query = query.replace(f"<{index}>", topic)
    primary = topics[0]
    return _PLACEHOLDER.sub(lambda _: primary, query)


def dedupe_queries(queries: Iterable[ConstructedQuery]) -> list[ConstructedQuery]:
    return unique_in_order(queries, key=lambda q: (q.engine, q.query))


def build_queries(
    phase: int,
    topics: Sequence[str],
    codes: str,
    filters: Mapping[str, FilterConfig] | MenuConfig | None = None,
    menu: PhaseMenu | None = None,
) -> list[ConstructedQuery]:
    """
    Build the ordered, deduplicated query list for a phase, topic list and code string.

    One query is emitted per (block, engine, template, topic index), even
    when a template never references that topic index; the literal
    duplicates this produces collapse in the final dedup pass. Hygiene
    clauses are resolved from the original code string so lowercase relax
    letters apply to every engine.
    """
    menu = menu or get_phase_menu(phase)
    letters = expand_codes(extract_block_letters(codes), menu)

    queries: list[ConstructedQuery] = []
    for code in letters:
        block = menu.block(code)
        if block is None:
            continue
        for engine, templates in block.engines.items():
            hygiene = resolve_hygiene(codes, engine, filters)
            for template in templates:
                for _ in range(len(topics)):
                    query = substitute_topics(template, topics)
                    if hygiene:
                        query = f"{query} {hygiene}"
                    queries.append(
                        ConstructedQuery(
                            engine=engine,
                            query=query,
                            phase=phase,
                            block_code=code,
                        )
                    )

    deduped = dedupe_queries(queries)
    logger.debug(
        "phase %s codes=%r: %d blocks, %d queries (%d before dedup)",
        phase,
        codes,
        len(letters),
        len(deduped),
        len(queries),
    )
    return deduped


__all__ = [
    "build_queries",
    "dedupe_queries",
    "expand_codes",
    "extract_block_letters",
    "substitute_topics",
]
