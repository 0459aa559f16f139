"""Enumerations describing census categories and territorial levels."""

from __future__ import annotations

from enum import Enum, auto


class Gender(Enum):
    """Sex of a population group."""

    MALE = auto()
    FEMALE = auto()


class UnitType(Enum):
    """Level of a territorial unit in the hierarchy."""

    COUNTRY = auto()
    REGION = auto()
    DISTRICT = auto()
    MUNICIPALITY = auto()


class AgeGroup(Enum):
    """Economic age groups of the population."""

    PRE_PRODUCTIVE = auto()
    PRODUCTIVE = auto()
    POST_PRODUCTIVE = auto()

    def ages(self) -> range:
        """Return the ages (inclusive bounds 0-14, 15-64, 65-100) in this group."""
        return _AGE_RANGES[self]


_AGE_RANGES = {
    AgeGroup.PRE_PRODUCTIVE: range(0, 15),
    AgeGroup.PRODUCTIVE: range(15, 65),
    AgeGroup.POST_PRODUCTIVE: range(65, 101),
}


class EducationType(Enum):
    """Highest attained level of education."""

    UNDETERMINED = auto()
    NO_EDUCATION = auto()
    UNIVERSITY = auto()
    HIGHER = auto()
    SECONDARY = auto()
    APPRENTICE = auto()
    PRIMARY = auto()
    INCOMPLETE = auto()