"""Tests for the periodic-series kernel."""

from __future__ import annotations

import math

import numpy as np
import pytest

from astroalgo.series import TermSeries, evaluate_argument_series, evaluate_table, sum_terms


def test_sum_terms_empty_is_zero() -> None:
    """An empty table contributes nothing."""
    assert sum_terms(np.array([]), np.array([])) == 0.0


def test_sum_terms_cosine_and_sine() -> None:
    """Amplitudes multiply trig of the arguments."""
    amplitudes = np.array([1.0, 2.0])
    arguments = np.array([0.0, math.pi])
    assert sum_terms(amplitudes, arguments) == pytest.approx(-1.0)
    assert sum_terms(amplitudes, np.array([math.pi / 2, 0.0]), np.sin) == pytest.approx(1.0)


def test_term_series_power_weighting() -> None:
    """A series of order k is weighted by t**k."""
    series = TermSeries.from_terms([(2.0, 0.0, 0.0)], power=1)
    assert len(series) == 1
    assert series.evaluate(3.0) == pytest.approx(6.0)


def test_term_series_linear_argument() -> None:
    """The argument is phase + frequency * t."""
    series = TermSeries.from_terms([(1.0, math.pi / 2, math.pi / 2)], power=0)
    assert series.evaluate(1.0) == pytest.approx(-1.0)


def test_term_series_is_read_only() -> None:
    """Table arrays cannot be modified after loading."""
    series = TermSeries.from_terms([(1.0, 0.0, 0.0)], power=0)
    with pytest.raises(ValueError):
        series.amplitudes[0] = 5.0


def test_evaluate_table_sums_orders() -> None:
    """Orders 0 and 1 add up as A0 + A1 * t."""
    table = (
        TermSeries.from_terms([(1.0, 0.0, 0.0)], power=0),
        TermSeries.from_terms([(1.0, 0.0, 0.0)], power=1),
    )
    assert evaluate_table(table, 2.0) == pytest.approx(3.0)


def test_evaluate_argument_series() -> None:
    """Arguments are integer combinations of fundamental angles."""
    multipliers = np.array([[1, 0], [0, 1]])
    coefficients = np.array([[1.0, 0.5], [2.0, 0.0]])
    fundamentals = np.array([math.pi / 2, 0.0])
    # k=0: 1*sin(pi/2) + 2*sin(0) = 1; k=1: 0.5*sin(pi/2)*t = 1
    value = evaluate_argument_series(multipliers, coefficients, fundamentals, 2.0, np.sin)
    assert value == pytest.approx(2.0)
