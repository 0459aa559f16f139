import pytest

from uzemstat.criteria import AgeCountCriterion, TypeCriterion
from uzemstat.enums import AgeGroup, EducationType, Gender, UnitType
from uzemstat.filters import (
    AgeCountFilter,
    AgeGroupCountFilter,
    AgeGroupShareFilter,
    AgeShareFilter,
    AndFilter,
    CriterionFilter,
    EducationCountFilter,
    EducationShareFilter,
    MembershipFilter,
    NameFilter,
    OrFilter,
    RangeFilter,
    TypeFilter,
    ValueFilter,
)
from uzemstat.units import AGE_COUNT, District, Education, Municipality


def _ages(**counts):
    values = [0] * AGE_COUNT
    for age, count in counts.items():
        values[int(age[1:])] = count
    return values


@pytest.fixture
def district():
    return District("SK0101", "Okres A", "A", "A", "note")


@pytest.fixture
def town(district):
    unit = Municipality(
        "SK0101001",
        "Town",
        "Town",
        "T",
        "note",
        district,
        Education(university=7, primary=3),
        _ages(a5=10, a30=20),
        _ages(a30=20, a70=50),
    )
    district.add_child(unit)
    return unit


def test_name_filter(town):
    assert NameFilter("Town").passes(town) is True
    assert NameFilter("Village").passes(town) is False


def test_type_filter(town, district):
    flt = TypeFilter(UnitType.MUNICIPALITY)
    assert flt.passes(town) is True
    assert flt.passes(district) is False


def test_membership_filter_with_parent(town, district):
    flt = MembershipFilter(district)
    assert flt.passes(town) is True
    assert flt.passes(district) is False


def test_membership_filter_without_parent_passes_units_having_one(town, district):
    flt = MembershipFilter(None)
    assert flt.passes(town) is True
    assert flt.passes(district) is False


def test_age_count_filter_inclusive_bounds(town):
    count = town.male_ages[30]
    assert AgeCountFilter(count, count, Gender.MALE, 30).passes(town) is True
    assert AgeCountFilter(count + 1, count + 5, Gender.MALE, 30).passes(town) is False
    assert AgeCountFilter(0, 0, Gender.FEMALE, 5).passes(town) is True


def test_age_share_filter(town):
    assert AgeShareFilter(0.0, 100.0, Gender.FEMALE, 70).passes(town) is True
    assert AgeShareFilter(0.0, 0.0, Gender.FEMALE, 70).passes(town) is False
    assert AgeShareFilter(0.0, 0.0, Gender.MALE, 70).passes(town) is True


def test_age_group_count_filter(town):
    pre = town.male_ages[5] + town.female_ages[5]
    assert AgeGroupCountFilter(pre, pre, AgeGroup.PRE_PRODUCTIVE).passes(town) is True
    assert AgeGroupCountFilter(0, pre - 1, AgeGroup.PRE_PRODUCTIVE).passes(town) is False


def test_age_group_share_filter_full_range(town):
    for group in AgeGroup:
        assert AgeGroupShareFilter(0.0, 100.0, group).passes(town) is True
    assert AgeGroupShareFilter(100.0, 100.0, AgeGroup.PRODUCTIVE).passes(town) is False


def test_education_count_filter(town):
    assert EducationCountFilter(7, 7, EducationType.UNIVERSITY).passes(town) is True
    assert EducationCountFilter(8, 100, EducationType.UNIVERSITY).passes(town) is False


def test_education_share_filter(town):
    assert EducationShareFilter(0.0, 100.0, EducationType.PRIMARY).passes(town) is True
    assert EducationShareFilter(0.0, 0.0, EducationType.HIGHER).passes(town) is True
    assert EducationShareFilter(0.0, 0.0, EducationType.PRIMARY).passes(town) is False


def test_education_share_filter_without_figures(district):
    unit = Municipality("X", "X", "X", "X", "X", district, None, None, None)
    with pytest.raises(ValueError):
        EducationShareFilter(0.0, 100.0, EducationType.PRIMARY).passes(unit)


def test_empty_composites(town):
    assert AndFilter().passes(town) is True
    assert OrFilter().passes(town) is False


def test_and_filter(town):
    flt = AndFilter(NameFilter("Town"))
    flt.register(TypeFilter(UnitType.MUNICIPALITY))
    assert flt.passes(town) is True
    flt.register(TypeFilter(UnitType.REGION))
    assert flt.passes(town) is False


def test_or_filter(town):
    flt = OrFilter()
    flt.register(NameFilter("Village"))
    assert flt.passes(town) is False
    flt.register(TypeFilter(UnitType.MUNICIPALITY))
    assert flt.passes(town) is True


def test_nested_composites(town):
    inner = OrFilter(NameFilter("Nope"), NameFilter("Town"))
    outer = AndFilter(inner, TypeFilter(UnitType.MUNICIPALITY))
    assert outer.passes(town) is True


def test_generic_value_and_range_filters(town, district):
    assert ValueFilter(TypeCriterion(), UnitType.DISTRICT).passes(district) is True
    assert ValueFilter(TypeCriterion(), UnitType.DISTRICT).passes(town) is False
    crit = AgeCountCriterion(70, Gender.FEMALE)
    value = town.female_ages[70]
    assert RangeFilter(crit, value - 1, value + 1).passes(town) is True
    assert RangeFilter(crit, value + 1, value + 2).passes(town) is False


def test_criterion_filter_is_abstract():
    with pytest.raises(TypeError):
        CriterionFilter(TypeCriterion())