"""Filters deciding whether a territorial unit satisfies a condition."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .criteria import (
    AgeCountCriterion,
    AgeGroupCountCriterion,
    AgeGroupShareCriterion,
    AgeShareCriterion,
    Criterion,
    EducationCountCriterion,
    EducationShareCriterion,
    MembershipCriterion,
    NameCriterion,
    TypeCriterion,
)
from .enums import AgeGroup, EducationType, Gender, UnitType
from .units import TerritorialUnit

R = TypeVar("R")


class Filter(ABC):
    """A predicate over territorial units."""

    @abstractmethod
    def passes(self, unit: TerritorialUnit) -> bool:
        """Return True if unit satisfies this filter."""


class CompositeFilter(Filter):
    """A filter combining other registered filters."""

    def __init__(self, *filters: Filter) -> None:
        self._filters: list[Filter] = list(filters)

    def register(self, flt: Filter) -> None:
        """Add a filter to the combination."""
        self._filters.append(flt)


class AndFilter(CompositeFilter):
    """Passes when every registered filter passes (also when there are none)."""

    def passes(self, unit: TerritorialUnit) -> bool:
        return all(flt.passes(unit) for flt in self._filters)


class OrFilter(CompositeFilter):
    """Passes when at least one registered filter passes."""

    def passes(self, unit: TerritorialUnit) -> bool:
        return any(flt.passes(unit) for flt in self._filters)


class CriterionFilter(Filter, Generic[R]):
    """A filter testing the value a criterion gives for the unit."""

    def __init__(self, criterion: Criterion[R]) -> None:
        self.criterion = criterion

    def passes(self, unit: TerritorialUnit) -> bool:
        return self._accepts(self.criterion.evaluate(unit))

    @abstractmethod
    def _accepts(self, value: R) -> bool:
        """Return True if the criterion value is acceptable."""


class ValueFilter(CriterionFilter[R]):
    """Passes when the criterion value equals a given value."""

    def __init__(self, criterion: Criterion[R], value: Any) -> None:
        super().__init__(criterion)
        self.value = value

    def _accepts(self, value: R) -> bool:
        return value == self.value


class RangeFilter(CriterionFilter[R]):
    """Passes when the criterion value lies in [minimum, maximum]."""

    def __init__(self, criterion: Criterion[R], minimum: Any, maximum: Any) -> None:
        super().__init__(criterion)
        self.minimum = minimum
        self.maximum = maximum

    def _accepts(self, value: R) -> bool:
        return self.minimum <= value <= self.maximum


class NameFilter(ValueFilter[str]):
    """Passes units whose official title equals a name."""

    def __init__(self, name: str) -> None:
        super().__init__(NameCriterion(), name)


class MembershipFilter(ValueFilter[bool]):
    """Compares membership under parent with whether parent is given at all.

    With a parent given, a unit passes when it lies directly under that parent;
    with no parent, a unit passes when it has a parent of its own.
    """

    def __init__(self, parent: TerritorialUnit | None) -> None:
        super().__init__(MembershipCriterion(parent), parent is not None)


class TypeFilter(ValueFilter[UnitType]):
    """Passes units of a given level."""

    def __init__(self, unit_type: UnitType) -> None:
        super().__init__(TypeCriterion(), unit_type)


class AgeCountFilter(RangeFilter[int]):
    """Passes units whose count of one sex and age lies in a range."""

    def __init__(self, minimum: int, maximum: int, gender: Gender, age: int) -> None:
        super().__init__(AgeCountCriterion(age, gender), minimum, maximum)


class AgeShareFilter(RangeFilter[float]):
    """Passes units whose percentage of one sex and age lies in a range."""

    def __init__(self, minimum: float, maximum: float, gender: Gender, age: int) -> None:
        super().__init__(AgeShareCriterion(age, gender), minimum, maximum)


class AgeGroupCountFilter(RangeFilter[int]):
    """Passes units whose population in an age group lies in a range."""

    def __init__(self, minimum: int, maximum: int, group: AgeGroup) -> None:
        super().__init__(AgeGroupCountCriterion(group), minimum, maximum)


class AgeGroupShareFilter(RangeFilter[float]):
    """Passes units whose percentage in an age group lies in a range."""

    def __init__(self, minimum: float, maximum: float, group: AgeGroup) -> None:
        super().__init__(AgeGroupShareCriterion(group), minimum, maximum)


class EducationCountFilter(RangeFilter[int]):
    """Passes units whose count with an education lies in a range."""

    def __init__(self, minimum: int, maximum: int, kind: EducationType) -> None:
        super().__init__(EducationCountCriterion(kind), minimum, maximum)


class EducationShareFilter(RangeFilter[float]):
    """Passes units whose percentage with an education lies in a range."""

    def __init__(self, minimum: float, maximum: float, kind: EducationType) -> None:
        super().__init__(EducationShareCriterion(kind), minimum, maximum)