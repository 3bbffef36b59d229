"""Test polynomial interpolation and evaluation."""
from fractions import Fraction
from itertools import permutations
import pytest
import ratinterp as ri


def test_interpolate():
    assert ri.interpolate([1, 2, 3, 4], [1, 3, 5, 10]) == [-4, Fraction(15, 2), -3, Fraction(1, 2)]


def test_interpolate_returns_fractions():
    res = ri.interpolate([1, 2, 3, 4], [1, 3, 5, 10])
    assert all(type(a) is Fraction for a in res)


def test_interpolate_is_independent_of_point_order():
    xs, ys = [1, 2, 3, 4], [1, 3, 5, 10]
    expected = ri.interpolate(xs, ys)
    for perm in permutations(range(4)):
        assert ri.interpolate([xs[i] for i in perm], [ys[i] for i in perm]) == expected


def test_interpolate_trims_trailing_zeros():
    assert ri.interpolate([1, 2, 3], [5, 5, 5]) == [5]
    assert ri.interpolate([-1, 0, 1], [0, 0, 0]) == [0]
    assert ri.interpolate([0, 1, 2, 3], [1, 3, 5, 7]) == [1, 2]


def test_interpolate_with_sample_at_zero():
    assert ri.interpolate([0, 1, 2], [1, 2, 5]) == [1, 0, 1]


def test_interpolate_single_point():
    assert ri.interpolate([7], [3]) == [3]
    assert ri.interpolate([0], [0]) == [0]


def test_interpolate_rational_and_float_input():
    assert ri.interpolate(['1/2', '3/2'], [1, 2]) == [Fraction(1, 2), 1]
    assert ri.interpolate([0.5, 1.5], [1, 2]) == [Fraction(1, 2), 1]


def test_interpolate_small_float_samples():
    res = ri.interpolate([0, 1e-7], [1, 2])
    assert res == [1, 1 / Fraction(1e-7)]
    assert ri.evaluate(res, 0) == 1
    assert ri.evaluate(res, 1e-7) == 2
    res = ri.interpolate([1e-7, 1], [1, 2])
    assert ri.evaluate(res, 1e-7) == 1
    assert ri.evaluate(res, 1) == 2


def test_interpolate_recovers_random_polynomial(rng):
    coeffs = [Fraction(rng.randint(-9, 9), rng.randint(1, 4)) for _ in range(4)] + [Fraction(rng.randint(1, 9))]
    xs = rng.sample(range(-20, 20), 7)
    ys = [ri.evaluate(coeffs, x) for x in xs]
    res = ri.interpolate(xs, ys)
    assert res == coeffs
    assert len(res) <= len(xs)


def test_interpolate_repeated_x_fails():
    with pytest.raises(RuntimeError):
        ri.interpolate([1, 1, 2], [2, 2, 2])


def test_interpolate_rejects_bad_samples():
    with pytest.raises(ValueError):
        ri.interpolate([], [])
    with pytest.raises(ValueError):
        ri.interpolate([1, 2], [1])


def test_vandermonde():
    assert ri.vandermonde([0, 2]) == [[1, 0], [1, 2]]
    assert ri.vandermonde([Fraction(1, 2), 3, -1]) == [[1, Fraction(1, 2), Fraction(1, 4)], [1, 3, 9], [1, -1, 1]]


def test_trim_coefficients():
    assert ri.trim_coefficients([1, 0, 0]) == [1]
    assert ri.trim_coefficients([0, 0]) == [0]
    assert ri.trim_coefficients([]) == [0]
    assert ri.trim_coefficients([0, 1]) == [0, 1]


def test_evaluate():
    coeffs = [-4, Fraction(15, 2), -3, Fraction(1, 2)]
    assert [ri.evaluate(coeffs, x) for x in [1, 2, 3, 4]] == [1, 3, 5, 10]
    assert ri.evaluate([1, 2, 3], 0) == 1
    assert ri.evaluate([], 3) == 0
    assert ri.evaluate([0, 1], '1/3') == Fraction(1, 3)


def test_is_unique():
    assert ri.is_unique([1, 2, 3])
    assert ri.is_unique([])
    assert not ri.is_unique([1, 2, 1])
    assert not ri.is_unique([Fraction(1, 2), '2/4'])
