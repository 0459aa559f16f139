# uzemstat

`uzemstat` is a library for census data of a country divided into regions,
districts and municipalities. It builds the hierarchy of territorial units
from semicolon-separated files, sums the age and education figures of
municipalities up to districts and then regions, and answers questions about
the result: which units pass a set of filters, which unit has the largest or
smallest age group, and how units rank by the share of people of a given age.

## Loading data

`uzemstat.loader.CensusLoader` takes the paths of five text files (and an
optional `encoding`, UTF-8 by default). Each file starts with one header line,
which is skipped; blank lines are ignored.

1. **regions**: sort number, code, official title, medium title, short title, note
2. **districts**: the same columns
3. **municipalities**: the same columns
4. **ages**: code, title, then 101 counts of men (ages 0 to 100) followed by
   101 counts of women
5. **education**: code, title, then eight counts in the order of the
   `Education` fields: `incomplete`, `primary`, `apprentice`, `secondary`,
   `higher`, `university`, `no_education`, `undetermined`

Missing numbers count as zero; more numbers than expected raise `IndexError`.
A file that cannot be found is logged as a warning and skipped.

```python
from uzemstat.loader import CensusLoader

loader = CensusLoader("kraj.csv", "okres.csv", "obec.csv", "vek.csv", "vzdelanie.csv")
loader.load()
region = loader.units.find("Some Region")   # units are keyed by official title
```

`load()` calls `read_education()`, `read_ages()`, `read_units()` for the
region, district and municipality files, and finally `aggregate()`, which
fills in the totals of every district and then of every region.

Regions hang under `loader.country`. Districts are attached to the regions
whose codes are `"1"` to `"9"`: a district belongs to a region when characters
5–9 of the region's note equal the first five characters of the district code,
or when the first two characters of the note equal characters 2–3 of the code.
A municipality is attached to the district whose code is the first six
characters of its own, and its age and education figures are looked up by its
code. `process(fields, level)` places a single unit (level 1 region,
2 district, 3 municipality; anything else raises `ValueError`).

## Modules

- `uzemstat.enums`: `Gender`, `UnitType`, `AgeGroup` (whose `ages()` gives the
  ages of the group: 0–14, 15–64 and 65–100) and `EducationType`.
- `uzemstat.table`: `SortedTable`, kept in key order and searched by
  bisection, and `UnsortedTable`, kept in insertion order with `item_at()` and
  `swap()`. Both offer `insert`, `find`, `get`, `remove`, `clear`, `items`,
  `values`, `in`, iteration over keys and `len`; inserting an existing key or
  finding/removing a missing one raises `KeyError`.
- `uzemstat.units`: `Education` (countable with `get()`, summable with `+`)
  and the units `Country`, `Region`, `District` and `Municipality`, all
  derived from `TerritorialUnit`. Each unit has its titles, `note`, `parent`,
  `children` (a `SortedTable` by code), `male_ages`, `female_ages` and
  `education`. `Region.aggregate()` and `District.aggregate()` sum their
  children's figures.
- `uzemstat.criteria`: criteria computing one value from a unit:
  `NameCriterion`, `ParentCriterion`, `MembershipCriterion`, `TypeCriterion`,
  `AgeCountCriterion`, `AgeShareCriterion`, `AgeGroupCountCriterion`,
  `AgeGroupShareCriterion`, `EducationCountCriterion` and
  `EducationShareCriterion`. Shares are percentages of the whole population;
  a zero population gives `nan` or `inf`.
- `uzemstat.filters`: `ValueFilter` and `RangeFilter` (inclusive bounds) over
  any criterion, and the ready-made `NameFilter`, `TypeFilter`,
  `MembershipFilter`, `AgeCountFilter`, `AgeShareFilter`,
  `AgeGroupCountFilter`, `AgeGroupShareFilter`, `EducationCountFilter` and
  `EducationShareFilter`. `AndFilter` and `OrFilter` combine filters given to
  the constructor or added with `register()`; an empty `AndFilter` passes
  everything and an empty `OrFilter` nothing.
- `uzemstat.selection`: `MaximumSelection` and `MinimumSelection` return the
  unit with the largest or smallest population in an age group from any
  iterable of units; on a tie the first unit wins, and an empty input gives
  `None`.
- `uzemstat.sorting`: `sort_by_age_share(table, age, gender)` and
  `sort_by_age_group(table, group)` order an `UnsortedTable` of units in
  ascending order in place; `shuffle(table, rng=None)` mixes it with random
  swaps, optionally from a given `random.Random`.

## What the package does not do

It is a library only: there is no command-line program, no interactive menu
and no printed reports. Results are not written anywhere; nothing is stored
beyond the objects in memory.

## Running the tests

Install with the `test` extra and run `pytest`.