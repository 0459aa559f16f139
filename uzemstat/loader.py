"""Loading census files into the territorial hierarchy."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterator, Sequence

from .enums import UnitType
from .table import SortedTable
from .units import (
    AGE_COUNT,
    Country,
    District,
    Education,
    Municipality,
    Region,
    TerritorialUnit,
)

_log = logging.getLogger(__name__)

_EDUCATION_COUNT = 8
_REGION_KEYS = [str(number) for number in range(1, 10)]
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

REGIONS = 1
DISTRICTS = 2
MUNICIPALITIES = 3


def _to_int(text: str) -> int:
    """Read a leading integer from text, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _split(row: str) -> list[str]:
    """Split a row on semicolons, dropping one empty trailing field."""
    parts = row.split(";")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _substr(text: str, start: int, length: int) -> str:
    """Return a substring; raise IndexError when start lies past the end."""
    if start > len(text):
        raise IndexError(f"position {start} is past the end of {text!r}")
    return text[start:start + length]


class CensusLoader:
    """Reads region, district, municipality, age and education files."""

    def __init__(
        self,
        regions_path: str | os.PathLike[str],
        districts_path: str | os.PathLike[str],
        municipalities_path: str | os.PathLike[str],
        ages_path: str | os.PathLike[str],
        education_path: str | os.PathLike[str],
        encoding: str = "utf-8",
    ) -> None:
        self.regions_path = Path(regions_path)
        self.districts_path = Path(districts_path)
        self.municipalities_path = Path(municipalities_path)
        self.ages_path = Path(ages_path)
        self.education_path = Path(education_path)
        self.encoding = encoding
        self.country = Country("0", "Slovakia", "Slovakia", "SK", "0", None)
        self.units: SortedTable[str, TerritorialUnit] = SortedTable()
        self._education: SortedTable[str, Education] = SortedTable()
        self._male_ages: SortedTable[str, list[int]] = SortedTable()
        self._female_ages: SortedTable[str, list[int]] = SortedTable()

    def _rows(self, path: Path) -> Iterator[str]:
        """Yield the non-blank data rows of a file, skipping its header line."""
        try:
            handle = open(path, encoding=self.encoding)
        except FileNotFoundError:
            _log.warning("file %s could not be opened", path)
            return
        with handle:
            next(handle, None)
            for line in handle:
                row = line.rstrip("\n")
                if row:
                    yield row

    def load(self) -> None:
        """Read every file and compute the aggregated figures."""
        _log.info("reading files")
        self.read_education()
        self.read_ages()
        self.read_units(self.regions_path)
        self.read_units(self.districts_path)
        self.read_units(self.municipalities_path)
        self.aggregate()

    def read_education(self) -> None:
        """Read education counts per municipality code."""
        for row in self._rows(self.education_path):
            code, _title, *values = _split(row) + [""] * max(0, 2 - len(_split(row)))
            if len(values) > _EDUCATION_COUNT:
                raise IndexError(f"too many education values for {code!r}")
            counts = [_to_int(value) for value in values]
            counts += [0] * (_EDUCATION_COUNT - len(counts))
            self._education.insert(code, Education(*counts))
        _log.info("education file read")

    def read_ages(self) -> None:
        """Read male and female age distributions per municipality code."""
        for row in self._rows(self.ages_path):
            fields = _split(row)
            fields += [""] * max(0, 2 - len(fields))
            code, _title, *values = fields
            if len(values) > 2 * AGE_COUNT:
                raise IndexError(f"too many age values for {code!r}")
            counts = [_to_int(value) for value in values]
            counts += [0] * (2 * AGE_COUNT - len(counts))
            self._male_ages.insert(code, counts[:AGE_COUNT])
            self._female_ages.insert(code, counts[AGE_COUNT:])
        _log.info("ages file read")

    def _level_of(self, path: Path) -> int:
        if path == self.municipalities_path:
            return MUNICIPALITIES
        if path == self.districts_path:
            return DISTRICTS
        if path == self.regions_path:
            return REGIONS
        raise ValueError(f"unknown unit file: {path}")

    def read_units(self, path: str | os.PathLike[str]) -> None:
        """Read one of the region, district or municipality files."""
        path = Path(path)
        level = self._level_of(path)
        for row in self._rows(path):
            fields = _split(row)
            fields += [""] * max(0, 6 - len(fields))
            _order, code, official, medium, short, note = fields[:6]
            self.process((code, official, medium, short, note), level)
        _log.info("unit file %s read", path)

    def process(self, fields: Sequence[str], level: int) -> None:
        """Place a unit given as (code, official, medium, short, note) into the hierarchy.

        Level 1 adds a region, level 2 a district and level 3 a municipality.
        """
        if level not in (REGIONS, DISTRICTS, MUNICIPALITIES):
            raise ValueError(f"invalid unit level: {level}")
        code, official, medium, short, note = fields
        if level == REGIONS:
            if code not in self.country.children:
                region = Region(code, official, medium, short, note, self.country)
                self.country.add_child(region)
                self.units.insert(official, region)
        elif level == DISTRICTS:
            for key in _REGION_KEYS:
                region = self.country.children.get(key)
                if region is None:
                    continue
                matches = _substr(region.note, 5, 5) == _substr(code, 0, 5) or (
                    _substr(region.note, 0, 2) == _substr(code, 2, 2)
                )
                if matches and code not in region.children:
                    district = District(code, official, medium, short, note, region)
                    region.add_child(district)
                    self.units.insert(official, district)
        else:
            district_code = code[:6]
            for region in self.country.children.values():
                district = region.children.get(district_code)
                if district is None or district.code != district_code:
                    continue
                if code in district.children:
                    continue
                municipality = Municipality(
                    code,
                    official,
                    medium,
                    short,
                    note,
                    district,
                    self._education.get(code),
                    self._male_ages.get(code),
                    self._female_ages.get(code),
                )
                district.add_child(municipality)
                self.units.insert(official, municipality)

    def aggregate(self) -> None:
        """Sum figures into districts first, then into regions."""
        _log.info("aggregating figures")
        for level in (UnitType.DISTRICT, UnitType.REGION):
            for unit in self.units.values():
                if unit.unit_type is level:
                    unit.aggregate()