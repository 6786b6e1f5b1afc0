"""Neper and resonant radian frequencies of an RLC circuit."""

from __future__ import annotations
import math
from typing import NamedTuple

from .circuit import Topology


class FrequencyPair(NamedTuple):
    """Neper frequency ``a`` and resonant radian frequency ``w`` (both 1/s)."""
    a: float
    w: float

    @property
    def quality_factor(self) -> float:
        """Q = w / (2a)."""
        return self.w / (2.0 * self.a)


def compute_frequencies(
    resistance: float,
    capacitance: float,
    inductance: float,
    topology: Topology,
) -> FrequencyPair:
    """
    Compute the frequencies governing the homogeneous response.

    Series:   a = R / (2L)
    Parallel: a = 1 / (2RC)
    Both:     w = 1 / sqrt(LC)

    Args:
        resistance: R in Ohms (> 0)
        capacitance: C in Farads (> 0)
        inductance: L in Henrys (> 0)
        topology: Series or parallel connection

    Returns:
        FrequencyPair(a, w)
    """
    if Topology(topology) is Topology.SERIES:
        a = resistance / (2.0 * inductance)
    else:
        a = 1.0 / (2.0 * resistance * capacitance)
    w = 1.0 / math.sqrt(inductance * capacitance)
    return FrequencyPair(a, w)
