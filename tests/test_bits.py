import pytest
from hypothesis import given
from hypothesis import strategies as st

from lbkdtree.bits import absolute, clz, left_child, minimum, right_child


class _Boxed:
    def __init__(self, val):
        self.val = val

    def __lt__(self, other):
        return self.val < other.val


@pytest.mark.parametrize(
    "value, expected",
    [(5, 5), (-5, 5), (0, 0), (-1.5, 1.5), (2.25, 2.25), (-3, 3)],
)
def test_absolute(value, expected):
    assert absolute(value) == expected


def test_absolute_keeps_type():
    result = absolute(-7)
    assert result == 7 and isinstance(result, int)
    result_f = absolute(-7.0)
    assert result_f == 7.0 and isinstance(result_f, float)


@given(st.integers(min_value=-(10**12), max_value=10**12))
def test_absolute_is_non_negative_and_preserves_magnitude(n):
    result = absolute(n)
    assert result >= 0
    assert result in (n, -n)


@pytest.mark.parametrize("width", [8, 16, 32, 64])
def test_clz_of_zero_is_width(width):
    assert clz(0, width) == width


@pytest.mark.parametrize("width", [8, 16, 32, 64])
def test_clz_of_minus_one_is_zero(width):
    assert clz(-1, width) == 0


def test_clz_pinned():
    assert clz(1, 32) == 31


@given(st.integers(min_value=1, max_value=64), st.data())
def test_clz_of_power_of_two(width, data):
    k = data.draw(st.integers(min_value=0, max_value=width - 1))
    assert clz(1 << k, width) == width - 1 - k


@given(st.integers(min_value=1, max_value=2**32 - 1))
def test_clz_bounds_the_value(n):
    zeros = clz(n, 32)
    assert n < (1 << (32 - zeros))
    assert n >= (1 << (31 - zeros))


def test_clz_masks_to_width():
    assert clz(1 << 8, 8) == 8


@pytest.mark.parametrize("width", [0, -3])
def test_clz_rejects_bad_width(width):
    with pytest.raises(ValueError):
        clz(1, width)


def test_children_of_root():
    assert left_child(0) == 1
    assert right_child(0) == 2


@given(st.integers(min_value=0, max_value=10**9))
def test_children_point_back_to_parent(n):
    left, right = left_child(n), right_child(n)
    assert right == left + 1
    assert (left - 1) // 2 == n
    assert (right - 1) // 2 == n


@pytest.mark.parametrize(
    "a, b, expected",
    [(3, 5, 3), (10, 2, 2), (42, 42, 42), (-5, -1, -5), (-10, 2, -10), (1.2, 2.3, 1.2)],
)
def test_minimum(a, b, expected):
    assert minimum(a, b) == expected


def test_minimum_with_custom_type():
    a, b, c = _Boxed(10), _Boxed(5), _Boxed(10)
    assert minimum(a, b).val == 5
    assert minimum(b, c).val == 5


def test_minimum_tie_returns_second():
    a, b = _Boxed(7), _Boxed(7)
    assert minimum(a, b) is b


@given(st.integers(), st.integers())
def test_minimum_is_lower_bound(a, b):
    result = minimum(a, b)
    assert result <= a and result <= b
    assert result in (a, b)