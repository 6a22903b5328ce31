"""
Test option module
"""

import copy

import pytest
from lambdadepot.error_handling import NoSuchElementError, NullArgumentError
from lambdadepot.option import Option, Present, of, of_nullable, empty


def test_constructors():
    """Test Option construction"""
    assert of(1).get() == 1
    assert isinstance(of(1), Present)
    assert of_nullable(None) is empty()
    assert of_nullable(0).is_present()
    assert Option.empty() is Option.empty()

    with pytest.raises(NullArgumentError):
        Option.of(None)


def test_states_are_exclusive():
    """Test is_present / is_empty"""
    assert of(1).is_present() and not of(1).is_empty()
    assert empty().is_empty() and not empty().is_present()


def test_get():
    """Test get on an empty option"""
    with pytest.raises(NoSuchElementError):
        empty().get()


def test_map_flat_map_filter():
    """Test transformations"""
    assert of("a").map(str.upper).get() == "A"
    assert of("a").map(lambda s: None).is_empty()
    assert of(2).flat_map(lambda x: of(x * 2)).get() == 4
    assert of(2).filter(lambda x: x > 1).get() == 2
    assert of(2).filter(lambda x: x > 5).is_empty()

    assert empty().map(str.upper) is empty()
    assert empty().flat_map(of) is empty()
    assert empty().filter(bool) is empty()

    with pytest.raises(NullArgumentError):
        of(1).map(None)


def test_transform():
    """Test transform passes the option itself"""
    assert of(3).transform(lambda o: o.get() + 1) == 4


def test_actions():
    """Test conditional actions and peeks"""
    seen = []
    of(1).if_present(seen.append)
    empty().if_present(seen.append)
    of(2).if_present_or_else(seen.append, lambda: seen.append("empty"))
    empty().if_present_or_else(seen.append, lambda: seen.append("empty"))
    empty().if_empty(lambda: seen.append("nothing"))
    of(3).if_empty(lambda: seen.append("nothing"))

    present = of(4)
    assert present.peek_if_present(seen.append) is present
    assert present.peek_if_empty(lambda: seen.append("never")) is present
    assert empty().peek_if_present_or_else(seen.append, lambda: seen.append("peeked")) is empty()

    assert seen == [1, 2, "empty", "nothing", 4, "peeked"]

    with pytest.raises(NullArgumentError):
        empty().if_present_or_else(seen.append, None)


def test_fallbacks():
    """Test or_else variants"""
    assert of(1).or_else(2) == 1
    assert empty().or_else(2) == 2
    assert empty().or_else(None) is None
    assert empty().or_else_get(lambda: 3) == 3
    assert of(1).or_else_throw(lambda: KeyError()) == 1

    with pytest.raises(KeyError):
        empty().or_else_throw(lambda: KeyError("missing"))


def test_to_result_and_iteration():
    """Test conversions"""
    assert of(1).to_result().get_value() == 1
    assert empty().to_result().is_empty()
    assert list(of(1)) == [1]
    assert list(empty()) == []


def test_equality():
    """Test value semantics"""
    assert of(1) == of(1)
    assert of(1) != of(2)
    assert of(1) != empty()
    assert repr(of(1)) == "Option.of(1)"
    with pytest.raises(AttributeError):
        of(1)._value = 2


def test_copy_returns_same_instance():
    """Test copying immutable options, alone or inside containers"""
    present = of(1)
    assert copy.copy(present) is present
    assert copy.deepcopy([present])[0] is present
    assert copy.deepcopy(empty()) is empty()


def test_option_cannot_be_instantiated_directly():
    """Test the base class has no stateless instances"""
    with pytest.raises(TypeError):
        Option()
