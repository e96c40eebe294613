from flexacc.edit_distance import edit_distance
from flexacc.models import CostFunction


def test_edit_distance_classic_levenshtein():
    assert edit_distance("sitting", "kitten") == 3
    assert edit_distance("hello", "hello") == 0


def test_edit_distance_empty_sides():
    assert edit_distance("abc", "") == 3
    assert edit_distance("", "abc") == 3
    assert edit_distance("", "") == 0


def test_edit_distance_substitution_cost_two():
    cost = CostFunction.INS1_DEL1_SUBST2
    assert edit_distance("a", "b", cost) == 2
    assert edit_distance("hello", "hzllo", cost) == 2


def test_edit_distance_free_deletions_ignore_surplus_candidate_text():
    cost = CostFunction.INS1_DEL0_SUBST1
    assert edit_distance("abc", "abcxyz", cost) == 0
    assert edit_distance("", "noise", cost) == 0
    # missing reference characters are still charged
    assert edit_distance("abcxyz", "abc", cost) == 3
