#!/usr/bin/env python3
"""
Check a fravia_menu.conf file against the built-in phase catalog.

Usage:
    python scripts/validate_menu_conf.py [path/to/fravia_menu.conf]

Checks:
    - every [filters] key maps to a relax letter (1..7)
    - every filter has a non-empty Google clause
    - phase sections name an existing phase (S1..S8)
    - option_X_* keys refer to a building block or precombination of that phase

Exit codes:
    0: configuration is consistent with the catalog
    1: one or more problems found
    2: file missing
"""

import sys
from pathlib import Path
from typing import List

from fravia.filters import RELAX_CODES
from fravia.menu_conf import parse_menu_config
from fravia.models import MenuConfig
from fravia.phases import get_phase_menu, phase_info


def check_filters(config: MenuConfig) -> List[str]:
    problems = []
    known = set(RELAX_CODES.values())
    for identifier, entry in config.filters.items():
        if identifier not in known:
            problems.append(f"filter {identifier}_{entry.name}: no relax letter maps to '{identifier}'")
        if not entry.google:
            problems.append(f"filter {identifier}_{entry.name}: empty clause")
    return problems


def check_phases(config: MenuConfig) -> List[str]:
    problems = []
    for section, phase_config in config.phases.items():
        number = int(section[1:])
        if phase_info(number) is None:
            problems.append(f"[{section}]: no such phase")
            continue
        menu = get_phase_menu(number)
        for code in phase_config.options:
            if menu.block(code) is None and menu.precombination(code) is None:
                problems.append(f"[{section}] option_{code}: not on the S{number} menu")
    return problems


def main() -> None:
    repo_root = Path(__file__).parent.parent
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else repo_root / "fravia_menu.conf.example"

    print("=" * 60)
    print(f"Validating menu configuration: {path}")
    print("=" * 60)

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(2)

    config = parse_menu_config(content)
    print(f"version={config.version} filters={len(config.filters)} phases={len(config.phases)}")

    problems = check_filters(config) + check_phases(config)
    for problem in problems:
        print(f"  - {problem}")

    print("=" * 60)
    if problems:
        print(f"FAILED: {len(problems)} problem(s)")
        sys.exit(1)
    print("OK")
    sys.exit(0)


if __name__ == "__main__":
    main()
