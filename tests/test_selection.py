import pytest

from uzemstat.enums import AgeGroup
from uzemstat.selection import MaximumSelection, MinimumSelection
from uzemstat.table import SortedTable
from uzemstat.units import AGE_COUNT, Municipality


def _unit(code, old):
    male = [0] * AGE_COUNT
    female = [0] * AGE_COUNT
    male[70] = old
    female[10] = 1
    return Municipality(code, code, code, code, "", None, None, male, female)


@pytest.fixture
def units():
    return [_unit("a", 5), _unit("b", 9), _unit("c", 2), _unit("d", 9)]


def test_maximum_selects_largest_first_on_tie(units):
    best = MaximumSelection(AgeGroup.POST_PRODUCTIVE).select_best(units)
    assert best is units[1]


def test_minimum_selects_smallest(units):
    best = MinimumSelection(AgeGroup.POST_PRODUCTIVE).select_best(units)
    assert best is units[2]


def test_tie_across_all_keeps_first(units):
    best = MaximumSelection(AgeGroup.PRE_PRODUCTIVE).select_best(units)
    assert best is units[0]
    best = MinimumSelection(AgeGroup.PRE_PRODUCTIVE).select_best(units)
    assert best is units[0]


def test_empty_returns_none():
    assert MaximumSelection(AgeGroup.PRODUCTIVE).select_best([]) is None
    assert MinimumSelection(AgeGroup.PRODUCTIVE).select_best([]) is None


def test_is_better_is_strict():
    maximum = MaximumSelection(AgeGroup.PRODUCTIVE)
    minimum = MinimumSelection(AgeGroup.PRODUCTIVE)
    assert maximum.is_better(3, 4) is True
    assert maximum.is_better(3, 3) is False
    assert minimum.is_better(3, 2) is True
    assert minimum.is_better(3, 3) is False


def test_selection_over_table_values(units):
    table = SortedTable()
    for unit in units:
        table.insert(unit.code, unit)
    best = MinimumSelection(AgeGroup.POST_PRODUCTIVE).select_best(table.values())
    assert best.code == "c"