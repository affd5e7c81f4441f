"""Loader for the INI-style ``fravia_menu.conf`` menu configuration.

Layout::

    [meta]
    version = 5.0

    [filters]
    # N_NAME = Google-style exclusion clause
    1_SOCIAL = -site:pinterest.* -site:reddit.com

    [S1]
    desc = Reconnaissance
    nuance = AROUND(n) binds concepts
    option_A_desc = Broad sweep
    option_A_val = "<0>" OR "<1>"

Filter clauses are written once in Google syntax and translated to the other
dialects while parsing.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .filters import DEFAULT_FILTERS, HYGIENE_DIALECTS, RELAX_CODES, translate_clause
from .models import FilterConfig, MenuConfig, OptionConfig, PhaseConfig

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "5.0"

_PHASE_SECTION = re.compile(r"^S\d+$")
_IDENTIFIER_TO_CODE = {identifier: code for code, identifier in RELAX_CODES.items()}


def default_menu_config() -> MenuConfig:
    return MenuConfig(version=DEFAULT_VERSION, filters=dict(DEFAULT_FILTERS), phases={})


def _filter_from_entry(key: str, value: str) -> tuple[str, FilterConfig] | None:
    identifier, sep, name = key.partition("_")
    if not sep or not identifier or not name:
        return None
    clauses = {dialect: translate_clause(value, dialect) for dialect in HYGIENE_DIALECTS}
    return identifier, FilterConfig(
        code=_IDENTIFIER_TO_CODE.get(identifier, identifier),
        name=name,
        **clauses,
    )


def _apply_phase_entry(phase: PhaseConfig, key: str, value: str) -> None:
    if key == "desc":
        phase.description = value
    elif key == "nuance":
        phase.nuance = value
    elif key.startswith("option_") and key.endswith("_desc"):
        code = key[len("option_") : -len("_desc")]
        option = phase.options.setdefault(code, OptionConfig(code=code))
        option.description = value
    elif key.startswith("option_") and key.endswith("_val"):
        code = key[len("option_") : -len("_val")]
        option = phase.options.setdefault(code, OptionConfig(code=code))
        option.value = value


def parse_menu_config(content: str) -> MenuConfig:
    """Parse configuration text; unknown sections and keys are ignored."""
    version = DEFAULT_VERSION
    filters: dict[str, FilterConfig] = {}
    phases: dict[str, PhaseConfig] = {}

    section = ""
    current_phase: PhaseConfig | None = None

    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped.startswith("[") and stripped.endswith("]"):
            section = stripped[1:-1]
            if _PHASE_SECTION.match(section):
                current_phase = PhaseConfig()
                phases[section] = current_phase
            else:
                current_phase = None
            continue

        key, sep, value = stripped.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()

        if section == "meta":
            if key == "version":
                version = value
        elif section == "filters":
            entry = _filter_from_entry(key, value)
            if entry is None:
                logger.debug("ignoring malformed filter key %r", key)
                continue
            identifier, config = entry
            filters[identifier] = config
        elif current_phase is not None:
            _apply_phase_entry(current_phase, key, value)

    if not filters:
        filters = dict(DEFAULT_FILTERS)
    return MenuConfig(version=version, filters=filters, phases=phases)


def load_menu_config(path: Path | str | None = None) -> MenuConfig:
    """Read and parse the configuration file, falling back to defaults when absent."""
    if path is None:
        return default_menu_config()
    config_path = Path(path)
    try:
        content = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("menu config %s not found; using defaults", config_path)
        return default_menu_config()
    config = parse_menu_config(content)
    logger.info(
        "loaded menu config %s (version=%s, filters=%d, phases=%d)",
        config_path,
        config.version,
        len(config.filters),
        len(config.phases),
    )
    return config


__all__ = ["default_menu_config", "load_menu_config", "parse_menu_config"]
