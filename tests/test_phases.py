from __future__ import annotations

import pytest

from fravia.filters import NOISE_FILTERS
from fravia.phases import PHASES, get_phase_menu, phase_info


@pytest.mark.parametrize("phase", range(1, 9))
def test_every_phase_has_menu(phase: int) -> None:
    menu = get_phase_menu(phase)
    assert menu.phase == phase
    assert menu.id == f"S{phase}"
    assert menu.building_blocks
    assert menu.noise_filters == list(NOISE_FILTERS)


@pytest.mark.parametrize("phase", range(1, 9))
def test_precombination_codes_do_not_collide_with_blocks(phase: int) -> None:
    menu = get_phase_menu(phase)
    block_codes = {block.code for block in menu.building_blocks}
    for combo in menu.precombinations:
        assert combo.code not in block_codes


def test_phase_one_precombinations() -> None:
    menu = get_phase_menu(1)
    assert menu.precombination("X").expands_to == ["A", "B"]
    assert menu.precombination("Y").expands_to == ["A", "C"]
    assert menu.precombination("A") is None


def test_unknown_phase_returns_empty_menu() -> None:
    menu = get_phase_menu(42)
    assert menu.name == "Unknown"
    assert menu.building_blocks == []
    assert menu.precombinations == []
    assert menu.engine_nuances == {}


def test_phase_info_lookup() -> None:
    assert len(PHASES) == 8
    assert phase_info(1).name == "Reconnaissance"
    assert phase_info(8).id == "S8"
    assert phase_info(0) is None
    assert phase_info(9) is None
