"""Periodic-series evaluation shared by VSOP87, nutation, lunar and equinox theories.

Every theory here is a sum of sinusoids whose partial sums are weighted by
powers of elapsed time:

    value(t) = sum_k ( sum_i A_i * trig(arg_i(t)) ) * t**k

For VSOP87-style tables the argument is linear, arg_i = B_i + C_i * t. For
nutation and the Moon the argument is an integer combination of fundamental
angles, arg_i = m_i . (D, M, M', F, ...).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import numpy as np

Trig = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True)
class TermSeries:
    """One order of a theory table: terms A * trig(B + C * t), weighted by t**power."""

    amplitudes: np.ndarray
    phases: np.ndarray
    frequencies: np.ndarray
    power: int

    @classmethod
    def from_terms(cls, terms: Iterable[Sequence[float]], power: int) -> TermSeries:
        """Build a series from (amplitude, phase, frequency) triples."""
        data = np.asarray(list(terms), dtype=float).reshape(-1, 3)
        amplitudes, phases, frequencies = (np.ascontiguousarray(col) for col in data.T)
        for arr in (amplitudes, phases, frequencies):
            arr.setflags(write=False)
        return cls(amplitudes, phases, frequencies, power)

    def __len__(self) -> int:
        return int(self.amplitudes.size)

    def evaluate(self, t: float, trig: Trig = np.cos) -> float:
        """Return (sum of terms) * t**power at time t."""
        total = sum_terms(self.amplitudes, self.phases + self.frequencies * t, trig)
        return total * t**self.power


# A theory table for one coordinate: series of increasing power (order 0, 1, ...).
TheoryTable = tuple[TermSeries, ...]


def sum_terms(amplitudes: np.ndarray, arguments: np.ndarray, trig: Trig = np.cos) -> float:
    """Return sum(amplitudes * trig(arguments)), summed in table order.

    Parameters:
        amplitudes: Term amplitudes.
        arguments: Term arguments in radians (same shape as amplitudes).
        trig: np.sin or np.cos.

    Returns:
        The sum as a Python float.
    """
    if amplitudes.size == 0:
        return 0.0
    return float(np.sum(amplitudes * trig(arguments)))


def evaluate_table(table: Sequence[TermSeries], t: float, trig: Trig = np.cos) -> float:
    """Evaluate a whole theory table at time t (orders summed).

    Parameters:
        table: Term series, one per power of t.
        t: Elapsed time in the table's unit (Julian millennia for VSOP87).
        trig: np.sin or np.cos.

    Returns:
        Coordinate value in the table's unit (radians or AU for VSOP87).
    """
    return sum(series.evaluate(t, trig) for series in table)


def evaluate_argument_series(
    multipliers: np.ndarray,
    coefficients: np.ndarray,
    fundamentals: np.ndarray,
    t: float,
    trig: Trig = np.sin,
) -> float:
    """Evaluate sum_k (sum_i c_ik * trig(m_i . f)) * t**k.

    Parameters:
        multipliers: Integer argument multipliers, shape (n_terms, n_angles).
        coefficients: Amplitudes, shape (n_terms, n_orders); column k is the
            amplitude of the t**k part.
        fundamentals: Fundamental angles in radians, shape (n_angles,).
        t: Elapsed time (Julian centuries for nutation).
        trig: np.sin or np.cos.

    Returns:
        The series value in the units of the coefficients.
    """
    arguments = multipliers @ fundamentals
    return sum(
        sum_terms(coefficients[:, k], arguments, trig) * t**k
        for k in range(coefficients.shape[1])
    )
