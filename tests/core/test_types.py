from collections import OrderedDict, deque

import pytest

from misctools.core.types import (
    as_index,
    is_container,
    is_mutable_container,
    is_record,
    is_sequence,
)


@pytest.mark.parametrize(
    "value, record, sequence",
    [
        ({}, True, False),
        (OrderedDict(a=1), True, False),
        ([], False, True),
        ((1, 2), False, True),
        ("abc", False, False),
        (b"abc", False, False),
        (None, False, False),
        (5, False, False),
        ({1, 2}, False, False),
    ],
)
def test_container_predicates(value, record, sequence):
    assert is_record(value) is record
    assert is_sequence(value) is sequence
    assert is_container(value) is (record or sequence)


def test_is_mutable_container():
    assert is_mutable_container({})
    assert is_mutable_container([])
    assert not is_mutable_container((1,))
    assert not is_mutable_container(bytearray(b"x"))
    assert not is_mutable_container("x")
    assert is_mutable_container(deque())


@pytest.mark.parametrize(
    "key, expected",
    [(0, 0), (3, 3), ("12", 12), (-1, None), ("-1", None), ("a", None), (True, None), (1.0, None), ("١", None)],
)
def test_as_index(key, expected):
    assert as_index(key) == expected
