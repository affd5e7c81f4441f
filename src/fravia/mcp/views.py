"""Agent-facing text renderings of the phase index, menus and execution results."""

from __future__ import annotations

from typing import Sequence

from fravia.models import (
    ConstructedQuery,
    PHASE_COUNT,
    PhaseConfig,
    PhaseIndexEntry,
    PhaseMenu,
    QueryResult,
)

PROTOCOL_INSTRUCTIONS = (
    "1. Call fravia_get_menu(phase=N) to see options for phase N",
    "2. Call fravia_execute with codes to run queries",
    "3. Letters (A,B,C,X,Y,Z) select search strategies",
    "4. Lowercase (s,f,t,u,c,l,a) relax noise filters",
    "5. Topics list: index 0 is the main subject, 1+ are synonyms",
)


def format_phase_index(phases: Sequence[PhaseIndexEntry]) -> str:
    lines = ["*** FRAVIA SEARCH PHASES ***", ""]
    for entry in phases:
        lines.append(f"[{entry.code}] {entry.id}: {entry.name}")
        lines.append(f"    {entry.purpose}")
        lines.append("")
    lines.append("--- INSTRUCTIONS ---")
    lines.extend(PROTOCOL_INSTRUCTIONS)
    lines.append("")
    lines.append("Call fravia_get_menu(phase=N) to see menu for phase N")
    return "\n".join(lines) + "\n"


def format_phase_menu(menu: PhaseMenu, phase_config: PhaseConfig | None = None) -> str:
    lines = [f"*** PHASE S{menu.phase}: {menu.name} ***", f"PURPOSE: {menu.purpose}", ""]

    lines.append("--- ACTIVE HYGIENE (Default: BLOCKED) ---")
    for noise_filter in menu.noise_filters:
        lines.append(f"[{noise_filter.code}] {noise_filter.name}: {noise_filter.applies}")
    lines.append("(Send lowercase letter to RELAX this filter)")
    lines.append("")

    lines.append("--- BUILDING BLOCKS ---")
    for block in menu.building_blocks:
        lines.append(f"[{block.code}] {block.name}: {block.description}")
        for engine, templates in block.engines.items():
            lines.append(f"    {engine}: {' | '.join(templates)}")
        lines.append("")

    if menu.precombinations:
        lines.append("--- PRECOMBINATIONS ---")
        for combo in menu.precombinations:
            lines.append(
                f"[{combo.code}] {combo.name} (={'+'.join(combo.expands_to)}): {combo.description}"
            )
        lines.append("")

    lines.append("--- ENGINE NUANCE ---")
    for engine, nuance in menu.engine_nuances.items():
        lines.append(f"{engine}: {nuance}")

    if phase_config and (phase_config.description or phase_config.nuance or phase_config.options):
        lines.append("")
        lines.append("--- CONFIGURED NOTES ---")
        if phase_config.description:
            lines.append(f"desc: {phase_config.description}")
        if phase_config.nuance:
            lines.append(f"nuance: {phase_config.nuance}")
        for option in phase_config.options.values():
            lines.append(f"[{option.code}] {option.description} => {option.value}")

    lines.append("")
    lines.append("--- RESPONSE FORMAT ---")
    lines.append("Reply with: fravia_execute(phase=N, topics=[...], codes='...')")
    lines.append("Example codes: 'A' or 'XY' or 's AC' (s=relax social filter)")
    return "\n".join(lines) + "\n"


def format_execution_results(
    phase: int,
    codes: str,
    queries: Sequence[ConstructedQuery],
    results: Sequence[QueryResult],
) -> str:
    lines = [f"*** PHASE S{phase} EXECUTION ***", f"Codes: {codes}", f"Queries generated: {len(queries)}", ""]

    lines.append("--- QUERIES ---")
    for query in queries:
        lines.append(f"[{query.engine}] {query.query}")

    lines.append("")
    lines.append("--- RESULTS ---")
    for result in results:
        lines.append("")
        lines.append(f"[{result.engine}] {result.title}")
        lines.append(f"  URL: {result.url}")
        lines.append(f"  Snippet: {result.snippet}")

    lines.append("")
    lines.append("--- STOP HOOK ---")
    if phase < PHASE_COUNT:
        lines.append(f"Phase {phase} complete. Next phase: {phase + 1}")
        lines.append(f"Call fravia_get_menu(phase={phase + 1}) to continue")
        lines.append(f"Or call fravia_stop(continue_to_phase={phase + 1}) to auto-advance")
    else:
        lines.append(f"Phase {phase} complete. Next phase: COMPLETE")
        lines.append("---AWAIT_USER_INPUT---")
    return "\n".join(lines) + "\n"


def format_stop(
    continue_to_phase: int | None,
    reason: str | None,
    next_phase_name: str | None = None,
) -> str:
    reason_text = reason or ""
    if continue_to_phase is not None and next_phase_name is not None:
        return (
            f"STOP: Phase {continue_to_phase - 1} complete. {reason_text}\n"
            f"---FOLLOWUP---\n"
            f"Continuing to phase {continue_to_phase}: {next_phase_name}"
        )
    return f"STOP: Search session complete. {reason_text}\n---AWAIT_USER_INPUT---"
