"""Damping regime classification.

``a`` and ``w`` come from independent formulas, so a circuit that is
critically damped on paper almost never yields bit-equal values. The two are
compared with an absolute tolerance instead.
"""

from __future__ import annotations
from enum import Enum

from ._logging import logger

DEFAULT_TOLERANCE = 1e-9


class DampingRegime(str, Enum):
    OVERDAMPED = "overdamped"
    CRITICALLY_DAMPED = "critically damped"
    UNDERDAMPED = "underdamped"

    @property
    def label(self) -> str:
        """Human readable label, e.g. "Critically Damped"."""
        return self.value.title()


def frequencies_equal(a: float, w: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True when ``a`` and ``w`` differ by at most ``tolerance``."""
    return abs(a - w) <= tolerance


def classify(a: float, w: float, tolerance: float = DEFAULT_TOLERANCE) -> DampingRegime:
    """
    Select the damping regime for neper frequency ``a`` and resonant frequency ``w``.

    Checked in order: equal within tolerance -> critically damped,
    a > w -> overdamped, otherwise underdamped.
    """
    if frequencies_equal(a, w, tolerance):
        regime = DampingRegime.CRITICALLY_DAMPED
    elif a > w:
        regime = DampingRegime.OVERDAMPED
    else:
        regime = DampingRegime.UNDERDAMPED
    logger.debug("a=%r w=%r tol=%r -> %s", a, w, tolerance, regime.value)
    return regime
