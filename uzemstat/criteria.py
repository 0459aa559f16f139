"""Criteria that evaluate a territorial unit to a single value."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .enums import AgeGroup, EducationType, Gender, UnitType
from .units import AGE_COUNT, TerritorialUnit

R = TypeVar("R")


def _ages(unit: TerritorialUnit, gender: Gender) -> list[int]:
    ages = unit.male_ages if gender is Gender.MALE else unit.female_ages
    if ages is None:
        raise ValueError(f"{unit!r} has no age distribution")
    return ages


def _check_age(age: int) -> None:
    if not 0 <= age < AGE_COUNT:
        raise IndexError(f"invalid age: {age}")


def _population(unit: TerritorialUnit) -> int:
    return sum(_ages(unit, Gender.MALE)) + sum(_ages(unit, Gender.FEMALE))


def _group_count(unit: TerritorialUnit, group: AgeGroup) -> int:
    male = _ages(unit, Gender.MALE)
    female = _ages(unit, Gender.FEMALE)
    return sum(male[age] + female[age] for age in group.ages())


def _percent(part: float, total: float) -> float:
    """Return 100 * part / total with floating-point semantics for a zero total."""
    if total == 0:
        return math.nan if part == 0 else math.copysign(math.inf, part)
    return 100 * (part / total)


class Criterion(ABC, Generic[R]):
    """Something that maps a territorial unit to a value."""

    @abstractmethod
    def evaluate(self, unit: TerritorialUnit) -> R:
        """Return the value of this criterion for unit."""


class NameCriterion(Criterion[str]):
    """Official title of the unit."""

    def evaluate(self, unit: TerritorialUnit) -> str:
        return unit.official_title


class ParentCriterion(Criterion[Any]):
    """The unit one level above."""

    def evaluate(self, unit: TerritorialUnit) -> TerritorialUnit | None:
        return unit.parent


class MembershipCriterion(Criterion[bool]):
    """Whether the unit lies directly under a given higher unit."""

    def __init__(self, parent: TerritorialUnit | None) -> None:
        self.parent = parent

    def evaluate(self, unit: TerritorialUnit) -> bool:
        return unit.parent is self.parent


class TypeCriterion(Criterion[UnitType]):
    """Level of the unit in the hierarchy."""

    def evaluate(self, unit: TerritorialUnit) -> UnitType:
        return unit.unit_type


class AgeCountCriterion(Criterion[int]):
    """Number of inhabitants of one sex and one age."""

    def __init__(self, age: int, gender: Gender) -> None:
        _check_age(age)
        self.age = age
        self.gender = gender

    def evaluate(self, unit: TerritorialUnit) -> int:
        return _ages(unit, self.gender)[self.age]


class AgeShareCriterion(Criterion[float]):
    """Percentage of inhabitants of one sex and one age in the whole population."""

    def __init__(self, age: int, gender: Gender) -> None:
        _check_age(age)
        self.age = age
        self.gender = gender

    def evaluate(self, unit: TerritorialUnit) -> float:
        return _percent(_ages(unit, self.gender)[self.age], _population(unit))


class AgeGroupCountCriterion(Criterion[int]):
    """Number of inhabitants in an age group."""

    def __init__(self, group: AgeGroup) -> None:
        self.group = group

    def evaluate(self, unit: TerritorialUnit) -> int:
        return _group_count(unit, self.group)


class AgeGroupShareCriterion(Criterion[float]):
    """Percentage of the population in an age group."""

    def __init__(self, group: AgeGroup) -> None:
        self.group = group

    def evaluate(self, unit: TerritorialUnit) -> float:
        return _percent(_group_count(unit, self.group), _population(unit))


class EducationCountCriterion(Criterion[int]):
    """Number of inhabitants with a given education; zero if the unit has none."""

    def __init__(self, kind: EducationType) -> None:
        self.kind = kind

    def evaluate(self, unit: TerritorialUnit) -> int:
        if unit.education is None:
            return 0
        return unit.education.get(self.kind)


class EducationShareCriterion(Criterion[float]):
    """Percentage of the population with a given education."""

    def __init__(self, kind: EducationType) -> None:
        self.kind = kind

    def evaluate(self, unit: TerritorialUnit) -> float:
        total = _population(unit)
        if unit.education is None:
            raise ValueError(f"{unit!r} has no education figures")
        return _percent(unit.education.get(self.kind), total)