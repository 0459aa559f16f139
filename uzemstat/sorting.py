"""In-place ordering of unsorted tables of territorial units."""

from __future__ import annotations

import random
from typing import Callable

from .criteria import AgeGroupCountCriterion, AgeShareCriterion
from .enums import AgeGroup, Gender
from .table import UnsortedTable
from .units import TerritorialUnit


def _quicksort(table: UnsortedTable, key: Callable[[TerritorialUnit], float]) -> None:
    if len(table) < 2:
        return

    def value(index: int) -> float:
        return key(table.item_at(index).data)

    ranges = [(0, len(table) - 1)]
    while ranges:
        low, high = ranges.pop()
        pivot = value((low + high) // 2)
        left, right = low, high
        while left < right:
            while value(left) < pivot:
                left += 1
            while value(right) > pivot:
                right -= 1
            if left <= right:
                table.swap(left, right)
                left += 1
                right -= 1
        # Pushed so that the lower range is handled first.
        if left < high:
            ranges.append((left, high))
        if low < right:
            ranges.append((low, right))


def sort_by_age_share(table: UnsortedTable, age: int, gender: Gender) -> None:
    """Order units ascending by the percentage of one sex and age."""
    criterion = AgeShareCriterion(age, gender)
    _quicksort(table, criterion.evaluate)


def sort_by_age_group(table: UnsortedTable, group: AgeGroup) -> None:
    """Order units ascending by the population of an age group."""
    criterion = AgeGroupCountCriterion(group)
    _quicksort(table, criterion.evaluate)


def shuffle(table: UnsortedTable, rng: random.Random | None = None) -> None:
    """Mix the items by twice as many random swaps as there are items."""
    generator = rng if rng is not None else random.Random()
    size = len(table)
    for _ in range(size * 2):
        table.swap(generator.randrange(size), generator.randrange(size))