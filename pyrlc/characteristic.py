"""Characteristic values of the second-order response, per damping regime.

Overdamped:         two real roots s1, s2
Critically damped:  one repeated root s
Underdamped:        decay rate a and damped frequency w_d
"""

from __future__ import annotations
import math
from typing import NamedTuple, Union

from ._logging import logger
from .damping import DampingRegime


class OverdampedRoots(NamedTuple):
    s1: float
    s2: float

    @property
    def regime(self) -> DampingRegime:
        return DampingRegime.OVERDAMPED


class CriticalRoot(NamedTuple):
    s: float

    @property
    def regime(self) -> DampingRegime:
        return DampingRegime.CRITICALLY_DAMPED


class UnderdampedFrequencies(NamedTuple):
    a: float    # decay rate
    w_d: float  # damped oscillation frequency

    @property
    def regime(self) -> DampingRegime:
        return DampingRegime.UNDERDAMPED


CharacteristicValues = Union[OverdampedRoots, CriticalRoot, UnderdampedFrequencies]


def overdamped_roots(a: float, w: float) -> OverdampedRoots:
    """
    Real roots s1,2 = -a +/- sqrt(a^2 - w^2).

    s1 is taken from s1 * s2 = w^2 so it keeps its precision when a >> w.

    Near the critical boundary the radicand can come out zero or negative.
    Both roots then fall back to -a, matching the critically damped root.
    """
    radicand = (a - w) * (a + w)
    if not radicand > 0.0:
        logger.debug("overdamped radicand %r not positive, using s = -a", radicand)
        return OverdampedRoots(-a, -a)
    s2 = -a - math.sqrt(radicand)
    return OverdampedRoots(w * w / s2, s2)


def critical_root(a: float) -> CriticalRoot:
    return CriticalRoot(-a)


def underdamped_frequencies(a: float, w: float) -> UnderdampedFrequencies:
    """Decay rate a and damped frequency w_d = sqrt(w^2 - a^2)."""
    radicand = (w - a) * (w + a)
    if not radicand > 0.0:
        logger.debug("underdamped radicand %r not positive, using w_d = 0", radicand)
        return UnderdampedFrequencies(a, 0.0)
    return UnderdampedFrequencies(a, math.sqrt(radicand))


def solve_characteristics(a: float, w: float, regime: DampingRegime) -> CharacteristicValues:
    """
    Compute the characteristic values for an already classified circuit.

    Args:
        a: Neper frequency
        w: Resonant radian frequency
        regime: Result of ``classify(a, w)``

    Returns:
        OverdampedRoots, CriticalRoot or UnderdampedFrequencies
    """
    if regime is DampingRegime.OVERDAMPED:
        return overdamped_roots(a, w)
    if regime is DampingRegime.CRITICALLY_DAMPED:
        return critical_root(a)
    return underdamped_frequencies(a, w)
