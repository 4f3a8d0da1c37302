import pytest
from hypothesis import given, strategies as st

from mal.equality import is_equal
from mal.errors import MalEqualityError, MalRecursionError, MalTypeError
from mal.types.function import Function
from mal.types.nil import Nil, NilType
from mal.types.symbol import Symbol


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1.0, 1.0, True),
        (1.0, 2.0, False),
        (1, 1.0, True),
        ("a", "a", True),
        ("a", "b", False),
        (Symbol("a"), Symbol("a"), True),
        (Symbol("a"), Symbol("b"), False),
        (True, True, True),
        (True, False, False),
        (Nil, Nil, True),
        (Nil, NilType(), True),
        ([], [], True),
        ([1.0, 2.0], [1.0, 2.0], True),
        ([1.0, 2.0], [1.0, 3.0], False),
        ([1.0], [1.0, 2.0], False),
        ([1.0, [2.0, "x"]], [1.0, [2.0, "x"]], True),
        ([1.0, [2.0, "x"]], [1.0, [2.0, "y"]], False),
        # variant mismatches
        (1.0, "1", False),
        ("a", Symbol("a"), False),
        (1.0, True, False),
        (0.0, False, False),
        (Nil, False, False),
        (Nil, [], False),
        ([], Nil, False),
        ([1.0], 1.0, False),
    ],
)
def test_is_equal(a, b, expected):
    assert is_equal(a, b) is expected
    assert is_equal(b, a) is expected


def test_functions_are_never_equal_even_to_themselves():
    f = Function(lambda: Nil, name="f")
    assert is_equal(f, f) is False
    assert is_equal([f], [f]) is False
    assert is_equal(f, Function(lambda: Nil, name="f")) is False


def test_nan_is_not_equal_to_itself():
    nan = float("nan")
    assert is_equal(nan, nan) is False


@pytest.mark.parametrize("bad", [None, (1.0,), {"a": 1}, object()])
def test_unsupported_types_raise(bad):
    with pytest.raises(MalEqualityError, match=type(bad).__name__):
        is_equal(bad, bad)
    with pytest.raises(MalEqualityError):
        is_equal(1.0, bad)


def test_equality_error_is_a_type_error():
    with pytest.raises(MalTypeError):
        is_equal(None, None)


def test_list_comparison_short_circuits_before_bad_element():
    # the mismatch at index 0 stops the comparison before the foreign object
    assert is_equal([1.0, object()], [2.0, object()]) is False


def test_self_referential_lists_hit_depth_guard(monkeypatch):
    monkeypatch.setenv("MAL_MAX_DEPTH", "50")
    xs = [1.0]
    xs.append(xs)
    ys = [1.0]
    ys.append(ys)
    with pytest.raises(MalRecursionError):
        is_equal(xs, ys)


atom_strat = st.one_of(
    st.floats(allow_nan=False),
    st.text(max_size=10),
    st.text(min_size=1, max_size=5).map(Symbol),
    st.booleans(),
    st.just(Nil),
)
value_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=4), max_leaves=12)


@given(value_strat)
def test_reflexive(a):
    assert is_equal(a, a)


@given(value_strat, value_strat)
def test_symmetric(a, b):
    assert is_equal(a, b) == is_equal(b, a)


@given(value_strat)
def test_transitive_on_copies(a):
    import copy

    b = copy.deepcopy(a)
    c = copy.deepcopy(b)
    assert is_equal(a, b) and is_equal(b, c) and is_equal(a, c)


def test_deep_lists_within_default_limit(monkeypatch):
    monkeypatch.delenv("MAL_MAX_DEPTH", raising=False)
    a, b = [], []
    for _ in range(450):
        a, b = [a], [b]
    assert is_equal(a, b) is True


def test_depth_limit_above_stack_still_raises_mal_error(monkeypatch):
    monkeypatch.setenv("MAL_MAX_DEPTH", "100000")
    xs = [1.0]
    xs.append(xs)
    ys = [1.0]
    ys.append(ys)
    with pytest.raises(MalRecursionError):
        is_equal(xs, ys)


def test_oversized_int_has_no_equality():
    with pytest.raises(MalEqualityError):
        is_equal(10 ** 400, 1.0)
