"""Territorial units of the census hierarchy and their education figures."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Sequence

from .enums import EducationType, UnitType
from .table import SortedTable

AGE_COUNT = 101
"""Number of single-year age slots (ages 0 to 100)."""

_EDUCATION_FIELDS = {
    EducationType.INCOMPLETE: "incomplete",
    EducationType.PRIMARY: "primary",
    EducationType.APPRENTICE: "apprentice",
    EducationType.SECONDARY: "secondary",
    EducationType.HIGHER: "higher",
    EducationType.UNIVERSITY: "university",
    EducationType.NO_EDUCATION: "no_education",
    EducationType.UNDETERMINED: "undetermined",
}


@dataclass
class Education:
    """Counts of inhabitants by highest attained education."""

    incomplete: int = 0
    primary: int = 0
    apprentice: int = 0
    secondary: int = 0
    higher: int = 0
    university: int = 0
    no_education: int = 0
    undetermined: int = 0

    def get(self, kind: EducationType) -> int:
        """Return the count for one education type."""
        return getattr(self, _EDUCATION_FIELDS[kind])

    def __add__(self, other: object) -> Education:
        if not isinstance(other, Education):
            return NotImplemented
        return Education(
            *(getattr(self, f.name) + getattr(other, f.name) for f in fields(self))
        )


class TerritorialUnit:
    """A node of the territorial hierarchy, holding its lower units by code."""

    unit_type: UnitType

    def __init__(
        self,
        code: str,
        official_title: str,
        medium_title: str,
        short_title: str,
        note: str,
        parent: TerritorialUnit | None = None,
    ) -> None:
        self.code = code
        self.official_title = official_title
        self.medium_title = medium_title
        self.short_title = short_title
        self.note = note
        self.parent = parent
        self.children: SortedTable[str, TerritorialUnit] = SortedTable()
        self.education: Education | None = None
        self.male_ages: list[int] | None = None
        self.female_ages: list[int] | None = None

    def add_child(self, child: TerritorialUnit) -> None:
        """Register a lower unit under its code; raise KeyError if the code exists."""
        self.children.insert(child.code, child)

    def aggregate(self) -> None:
        """Recompute figures from lower units; units holding raw data keep them."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.official_title!r})"


def _sum_children(unit: TerritorialUnit) -> None:
    male = [0] * AGE_COUNT
    female = [0] * AGE_COUNT
    education = Education()
    for child in unit.children.values():
        male = [a + b for a, b in zip(male, child.male_ages)]
        female = [a + b for a, b in zip(female, child.female_ages)]
        if child.education is not None:
            education = education + child.education
    unit.male_ages = male
    unit.female_ages = female
    unit.education = education


class Country(TerritorialUnit):
    """The whole country; it carries no figures of its own."""

    unit_type = UnitType.COUNTRY


class Region(TerritorialUnit):
    """A region, whose figures are the sums over its districts."""

    unit_type = UnitType.REGION

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.male_ages = [0] * AGE_COUNT
        self.female_ages = [0] * AGE_COUNT
        self.education = Education()

    def aggregate(self) -> None:
        """Sum age distributions and education of the districts."""
        _sum_children(self)


class District(TerritorialUnit):
    """A district, whose figures are the sums over its municipalities."""

    unit_type = UnitType.DISTRICT

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.male_ages = [0] * AGE_COUNT
        self.female_ages = [0] * AGE_COUNT
        self.education = Education()

    def aggregate(self) -> None:
        """Sum age distributions and education of the municipalities."""
        _sum_children(self)


class Municipality(TerritorialUnit):
    """A municipality holding the raw census figures."""

    unit_type = UnitType.MUNICIPALITY

    def __init__(
        self,
        code: str,
        official_title: str,
        medium_title: str,
        short_title: str,
        note: str,
        parent: TerritorialUnit | None = None,
        education: Education | None = None,
        male_ages: Sequence[int] | None = None,
        female_ages: Sequence[int] | None = None,
    ) -> None:
        super().__init__(code, official_title, medium_title, short_title, note, parent)
        self.education = education
        self.male_ages = [0] * AGE_COUNT
        self.female_ages = [0] * AGE_COUNT
        if male_ages is not None and female_ages is not None:
            if len(male_ages) != AGE_COUNT or len(female_ages) != AGE_COUNT:
                raise ValueError(f"age distributions must have {AGE_COUNT} entries")
            self.male_ages = list(male_ages)
            self.female_ages = list(female_ages)