from uzemstat.enums import AgeGroup


def test_pre_productive_bounds():
    ages = AgeGroup.PRE_PRODUCTIVE.ages()
    assert ages[0] == 0
    assert ages[-1] == 14


def test_productive_bounds():
    ages = AgeGroup.PRODUCTIVE.ages()
    assert ages[0] == 15
    assert ages[-1] == 64


def test_post_productive_bounds():
    ages = AgeGroup.POST_PRODUCTIVE.ages()
    assert ages[0] == 65
    assert ages[-1] == 100


def test_age_groups_partition_all_ages():
    pre = list(AgeGroup.PRE_PRODUCTIVE.ages())
    productive = list(AgeGroup.PRODUCTIVE.ages())
    post = list(AgeGroup.POST_PRODUCTIVE.ages())
    assert pre + productive + post == list(range(101))


def test_age_groups_are_disjoint():
    pre = set(AgeGroup.PRE_PRODUCTIVE.ages())
    productive = set(AgeGroup.PRODUCTIVE.ages())
    post = set(AgeGroup.POST_PRODUCTIVE.ages())
    assert pre & productive == set()
    assert productive & post == set()
    assert pre & post == set()
    assert len(pre) + len(productive) + len(post) == 101