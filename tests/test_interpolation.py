from fractions import Fraction

import pytest

from polysecret import settings as config_module
from polysecret.errors import DuplicateCoordinate, ErrorKind, InsufficientShares, NonIntegralSecret
from polysecret.interpolation import DivisionMode, interpolate, interpolate_fraction
from polysecret.models import Point

from conftest import polynomial_at


@pytest.mark.parametrize("mode", list(DivisionMode))
def test_reference_points(mode):
    points = [Point(1, 4), Point(2, 7), Point(3, 12)]
    assert interpolate(points, 0, mode=mode) == 3


def test_evaluates_at_other_targets():
    coeffs = [5, -3, 2]
    points = [(x, polynomial_at(coeffs, x)) for x in (1, 2, 3)]
    assert interpolate(points, 10, mode=DivisionMode.EXACT) == polynomial_at(coeffs, 10)


def test_single_point_is_constant():
    assert interpolate([(5, 42)], 0) == 42


def test_exact_and_truncating_division_diverge():
    # y = x^2 + 1 sampled at non-consecutive abscissae
    points = [(1, 2), (2, 5), (4, 17)]
    assert interpolate(points, 0, mode=DivisionMode.EXACT) == 1
    assert interpolate(points, 0, mode=DivisionMode.TRUNCATE) == 0


def test_truncation_rounds_toward_zero():
    # y = -x^2 - 1; flooring would give -2
    points = [(1, -2), (2, -5), (4, -17)]
    assert interpolate(points, 0, mode=DivisionMode.EXACT) == -1
    assert interpolate(points, 0, mode=DivisionMode.TRUNCATE) == 0


def test_non_integral_exact_value():
    points = [(1, 1), (2, 2), (4, 5)]
    assert interpolate_fraction(points) == Fraction(1, 3)
    with pytest.raises(NonIntegralSecret) as excinfo:
        interpolate(points, 0, mode=DivisionMode.EXACT)
    assert excinfo.value.value == Fraction(1, 3)
    assert excinfo.value.kind is ErrorKind.NON_INTEGRAL_SECRET
    assert interpolate(points, 0, mode=DivisionMode.TRUNCATE) == -1


@pytest.mark.parametrize("mode", list(DivisionMode))
def test_duplicate_coordinate(mode):
    with pytest.raises(DuplicateCoordinate) as excinfo:
        interpolate([(1, 4), (2, 7), (1, 9)], 0, mode=mode)
    assert excinfo.value.x == 1


def test_empty_input():
    with pytest.raises(InsufficientShares):
        interpolate([], 0)


def test_default_mode_comes_from_settings(monkeypatch):
    points = [(1, 2), (2, 5), (4, 17)]
    monkeypatch.setattr(config_module, "settings", config_module.Settings(division_mode=DivisionMode.TRUNCATE))
    assert interpolate(points) == 0
    monkeypatch.setattr(config_module, "settings", config_module.Settings(division_mode=DivisionMode.EXACT))
    assert interpolate(points) == 1


def test_point_order_does_not_change_exact_result():
    points = [(1, 2), (2, 5), (4, 17)]
    assert interpolate(points[::-1], 0, mode=DivisionMode.EXACT) == 1
