import pytest

from misctools.core import config
from misctools.core.config import Settings
from misctools.core.enums import EqualityPolicy
from misctools.functional.sequences import loose_equal, multi_intersect, strict_equal


def test_multi_intersect_three_sequences():
    assert multi_intersect([[1, 2, 3], [2, 3, 4], [3, 4, 5]]) == [3]


def test_multi_intersect_two_sequences_keeps_first_order():
    assert multi_intersect([[5, 1, 4, 2], [2, 4, 5]]) == [5, 4, 2]


def test_multi_intersect_deduplicates():
    assert multi_intersect([[1, 1, 2, 2, 3], [2, 1, 1]]) == [1, 2]


def test_multi_intersect_empty_result():
    assert multi_intersect([[1, 2], [3, 4], [1, 2]]) == []
    assert multi_intersect([[], [1]]) == []


def test_multi_intersect_accepts_tuples():
    assert multi_intersect(((1, 2, 3), (3, 2))) == [2, 3]


def test_multi_intersect_unhashable_values_are_copied():
    shared = {"id": 1}
    result = multi_intersect([[shared, {"id": 2}], [{"id": 1}]])
    assert result == [{"id": 1}]
    result[0]["id"] = 99
    assert shared == {"id": 1}


@pytest.mark.parametrize("sequences", [[], [[1, 2]], "ab", None, [[1], "ab"], 5])
def test_multi_intersect_invalid_input(sequences):
    with pytest.raises(ValueError):
        multi_intersect(sequences)


def test_multi_intersect_strict_by_default():
    assert multi_intersect([[1, "2", True], ["1", 2, 1]]) == [1]


def test_multi_intersect_strict_numbers_across_types():
    assert multi_intersect([[1, 2.5], [1.0, 2.5]]) == [1, 2.5]


def test_multi_intersect_loose_policy():
    result = multi_intersect([[1, "2", 3], ["1", 2.0]], equality=EqualityPolicy.LOOSE)
    assert result == [1, "2"]


def test_multi_intersect_default_policy_from_settings(monkeypatch):
    monkeypatch.setattr(
        config, "settings", Settings(INTERSECTION_EQUALITY=EqualityPolicy.LOOSE)
    )
    assert multi_intersect([[1, 2], ["1", "3"]]) == [1]


def test_multi_intersect_custom_equality():
    def same_casefold(x, y):
        return x.casefold() == y.casefold()

    result = multi_intersect([["Foo", "bar", "BAR"], ["FOO", "BAR"]], equality=same_casefold)
    assert result == ["Foo", "bar"]


def test_multi_intersect_rejects_bad_equality():
    with pytest.raises(TypeError):
        multi_intersect([[1], [1]], equality="strict")


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1, 1, True),
        (1, 1.0, True),
        (1, "1", False),
        (True, 1, False),
        (None, None, True),
        (None, False, False),
        ({"a": 1}, {"a": 1}, True),
        ([1], (1,), False),
        ([1], [True], False),
        ({"a": [1]}, {"a": [1.0]}, True),
        ({"a": {"b": 0}}, {"a": {"b": False}}, False),
    ],
)
def test_strict_equal(x, y, expected):
    assert strict_equal(x, y) is expected


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1, "1", True),
        (1.0, "1", True),
        (True, "1", True),
        (False, "", True),
        (None, "", True),
        ("a", "A", False),
        (1.5, "1.5", True),
        ({"a": 1}, "{'a': 1}", False),
    ],
)
def test_loose_equal(x, y, expected):
    assert loose_equal(x, y) is expected


def test_multi_intersect_strict_applies_to_nested_values():
    assert multi_intersect([[[1], {"k": 0}], [[True], {"k": False}]]) == []
    assert multi_intersect([[[1], {"k": 0}], [[1.0], {"k": 0}]]) == [[1], {"k": 0}]
