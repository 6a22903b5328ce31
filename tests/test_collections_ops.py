"""
Test collection operations module
"""

import pytest
from lambdadepot.collections_ops import (
    list_map, list_flat_map, list_filter, list_append, list_prepend,
    get_head, get_tail, get_at,
    set_map, set_flat_map, set_filter,
    map_map_values, map_filter_keys, map_filter_values, map_get,
    map_get_or_put, map_get_or_default
)
from lambdadepot.error_handling import NullArgumentError
from lambdadepot.functions import Function1
from lambdadepot.predicates import is_greater_than


def test_list_transformations():
    """Test list helpers return new lists"""
    values = [1, 2, 3]
    assert list_map(lambda x: x * 10).apply(values) == [10, 20, 30]
    assert list_flat_map(lambda x: [x, x]).apply(values) == [1, 1, 2, 2, 3, 3]
    assert list_filter(is_greater_than(1)).apply(values) == [2, 3]
    assert list_append(4, 5).apply(values) == [1, 2, 3, 4, 5]
    assert list_prepend(0).apply(values) == [0, 1, 2, 3]
    assert values == [1, 2, 3]


def test_list_helpers_compose():
    """Test helpers chain through and_then"""
    pipeline = list_filter(lambda x: x % 2).and_then(list_map(str))
    assert isinstance(pipeline, Function1)
    assert pipeline.apply([1, 2, 3]) == ["1", "3"]


def test_list_helpers_validate():
    """Test None collaborators and None lists are rejected"""
    with pytest.raises(NullArgumentError):
        list_map(None)
    with pytest.raises(NullArgumentError):
        list_filter(bool).apply(None)
    with pytest.raises(NullArgumentError):
        list_append(1).apply(None)


def test_head_tail_get_at():
    """Test positional access returns options"""
    assert get_head([1, 2, 3]).get() == 1
    assert get_tail([1, 2, 3]).get() == 3
    assert get_at([1, 2, 3], 1).get() == 2

    assert get_head([]).is_empty()
    assert get_tail(None).is_empty()
    assert get_at([1], 1).is_empty()
    assert get_at([1], -1).is_empty()
    assert get_at([None], 0).is_empty()


def test_set_transformations():
    """Test set helpers"""
    assert set_map(abs).apply({-1, 1, 2}) == frozenset({1, 2})
    assert set_flat_map(lambda x: {x, -x}).apply({1}) == frozenset({1, -1})
    assert set_filter(is_greater_than(1)).apply({1, 2, 3}) == frozenset({2, 3})
    with pytest.raises(NullArgumentError):
        set_map(abs).apply(None)


def test_map_transformations():
    """Test dict helpers"""
    prices = {"a": 1, "b": 20}
    assert map_map_values(lambda v: v * 2).apply(prices) == {"a": 2, "b": 40}
    assert map_filter_keys(lambda k: k == "a").apply(prices) == {"a": 1}
    assert map_filter_values(is_greater_than(10)).apply(prices) == {"b": 20}
    assert prices == {"a": 1, "b": 20}

    assert map_get(prices, "a").get() == 1
    assert map_get(prices, "z").is_empty()
    assert map_get(None, "a").is_empty()


def test_map_get_or_put():
    """Test the supplier value is stored only for a missing key"""
    calls = []

    def supplier():
        calls.append(1)
        return []

    cache = {"a": [1]}
    assert map_get_or_put("a", supplier).apply(cache) == [1]
    assert calls == []

    created = map_get_or_put("b", supplier).apply(cache)
    assert created == []
    assert cache["b"] is created
    assert calls == [1]

    with pytest.raises(NullArgumentError):
        map_get_or_put("a", None)
    with pytest.raises(NullArgumentError):
        map_get_or_put("a", supplier).apply(None)


def test_map_get_or_default():
    """Test the default is supplied without touching the mapping"""
    calls = []

    def supplier():
        calls.append(1)
        return 0

    counts = {"a": 3}
    assert map_get_or_default("a", supplier).apply(counts) == 3
    assert calls == []

    assert map_get_or_default("b", supplier).apply(counts) == 0
    assert counts == {"a": 3}
    assert calls == [1]

    with pytest.raises(NullArgumentError):
        map_get_or_default(None, supplier)
