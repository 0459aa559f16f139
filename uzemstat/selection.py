"""Selection of the unit with the largest or smallest age-group population."""

from __future__ import annotations

from typing import Iterable

from .criteria import AgeGroupCountCriterion
from .enums import AgeGroup
from .units import TerritorialUnit


class _Selection:
    def __init__(self, group: AgeGroup) -> None:
        self.group = group
        self._criterion = AgeGroupCountCriterion(group)

    def is_better(self, best: int, tested: int) -> bool:
        raise NotImplementedError

    def select_best(self, units: Iterable[TerritorialUnit]) -> TerritorialUnit | None:
        """Return the best unit, the first one on ties, or None if there are none."""
        iterator = iter(units)
        best = next(iterator, None)
        if best is None:
            return None
        best_value = self._criterion.evaluate(best)
        for unit in iterator:
            value = self._criterion.evaluate(unit)
            if self.is_better(best_value, value):
                best, best_value = unit, value
        return best


class MaximumSelection(_Selection):
    """Selects the unit with the most inhabitants in an age group."""

    def is_better(self, best: int, tested: int) -> bool:
        """Return True if tested is strictly greater than best."""
        return tested > best

    def select_best(self, units: Iterable[TerritorialUnit]) -> TerritorialUnit | None:
        """Return the unit with the largest count, the first on ties, or None."""
        return super().select_best(units)


class MinimumSelection(_Selection):
    """Selects the unit with the fewest inhabitants in an age group."""

    def is_better(self, best: int, tested: int) -> bool:
        """Return True if tested is strictly smaller than best."""
        return tested < best

    def select_best(self, units: Iterable[TerritorialUnit]) -> TerritorialUnit | None:
        """Return the unit with the smallest count, the first on ties, or None."""
        return super().select_best(units)