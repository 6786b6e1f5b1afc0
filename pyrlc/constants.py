"""Solution constants (c1, c2) fixed by the initial conditions.

The state variable depends on the topology:
    parallel: inductor current,  x(0) = I_init
    series:   capacitor voltage, x(0) = V_init

with initial rate of change
    parallel: delta_init = -(I_init * R + V_init) / L
    series:   delta_init = -(I_init + V_init / R) / C

A forced response adds a constant steady-state offset ``src``. It is removed
from x(0) before the homogeneous constants are solved; its derivative is zero
so the rate is unchanged. With src = 0 a forced formula therefore gives the
same constants as the natural one.

Twelve formulas = {parallel, series} x {natural, forced} x {three regimes},
held in ``FORMULAS`` keyed by (Topology, Excitation, DampingRegime).
"""

from __future__ import annotations
from itertools import product
from typing import Callable, NamedTuple

from .characteristic import (
    CharacteristicValues,
    CriticalRoot,
    OverdampedRoots,
    UnderdampedFrequencies,
)
from .circuit import Excitation, Topology
from .damping import DampingRegime


class SolutionConstants(NamedTuple):
    c1: float
    c2: float


class HomogeneousState(NamedTuple):
    """Initial value and rate of the homogeneous (source-free) part."""
    x0: float
    dx0: float


# (R, L, C, I_init, V_init, src) -> HomogeneousState
StateFn = Callable[[float, float, float, float, float, float], HomogeneousState]
# (characteristics, x0, dx0) -> SolutionConstants
RegimeFn = Callable[[CharacteristicValues, float, float], SolutionConstants]
# (R, L, C, characteristics, I_init, V_init, src) -> SolutionConstants
Formula = Callable[..., SolutionConstants]


def parallel_delta_init(R: float, L: float, i_init: float, v_init: float) -> float:
    return -(i_init * R + v_init) / L


def series_delta_init(R: float, C: float, i_init: float, v_init: float) -> float:
    return -(i_init + v_init / R) / C


def _parallel_natural(R, L, C, i_init, v_init, src):
    return HomogeneousState(i_init, parallel_delta_init(R, L, i_init, v_init))


def _parallel_forced(R, L, C, i_init, v_init, src):
    return HomogeneousState(i_init - src, parallel_delta_init(R, L, i_init, v_init))


def _series_natural(R, L, C, i_init, v_init, src):
    return HomogeneousState(v_init, series_delta_init(R, C, i_init, v_init))


def _series_forced(R, L, C, i_init, v_init, src):
    return HomogeneousState(v_init - src, series_delta_init(R, C, i_init, v_init))


def _overdamped(ch: OverdampedRoots, x0: float, dx0: float) -> SolutionConstants:
    # c1 + c2 = x0,  s1*c1 + s2*c2 = dx0
    if ch.s1 == ch.s2:
        return _critical(CriticalRoot(ch.s1), x0, dx0)
    c2 = (dx0 - ch.s1 * x0) / (ch.s2 - ch.s1)
    return SolutionConstants(x0 - c2, c2)


def _critical(ch: CriticalRoot, x0: float, dx0: float) -> SolutionConstants:
    # x(t) = (c1*t + c2) * exp(s*t)
    c2 = x0
    return SolutionConstants(dx0 - ch.s * c2, c2)


def _underdamped(ch: UnderdampedFrequencies, x0: float, dx0: float) -> SolutionConstants:
    # x(t) = exp(-a*t) * (c1*cos(w_d*t) + c2*sin(w_d*t))
    # w_d == 0: x(t) = exp(-a*t) * (c1 + c2*t)
    c1 = x0
    if ch.w_d == 0.0:
        return SolutionConstants(c1, dx0 + ch.a * c1)
    return SolutionConstants(c1, (dx0 + ch.a * c1) / ch.w_d)


_STATE_FNS: dict[tuple[Topology, Excitation], StateFn] = {
    (Topology.PARALLEL, Excitation.NATURAL): _parallel_natural,
    (Topology.PARALLEL, Excitation.FORCED): _parallel_forced,
    (Topology.SERIES, Excitation.NATURAL): _series_natural,
    (Topology.SERIES, Excitation.FORCED): _series_forced,
}

_REGIME_FNS: dict[DampingRegime, RegimeFn] = {
    DampingRegime.OVERDAMPED: _overdamped,
    DampingRegime.CRITICALLY_DAMPED: _critical,
    DampingRegime.UNDERDAMPED: _underdamped,
}


def _formula(state_fn: StateFn, regime_fn: RegimeFn) -> Formula:
    def formula(R, L, C, characteristics, i_init, v_init, src=0.0):
        x0, dx0 = state_fn(R, L, C, i_init, v_init, src)
        return regime_fn(characteristics, x0, dx0)
    return formula


FORMULAS: dict[tuple[Topology, Excitation, DampingRegime], Formula] = {
    (topology, excitation, regime): _formula(_STATE_FNS[topology, excitation], _REGIME_FNS[regime])
    for (topology, excitation), regime in product(_STATE_FNS, _REGIME_FNS)
}


def homogeneous_state(
    topology: Topology,
    excitation: Excitation,
    R: float,
    L: float,
    C: float,
    i_init: float,
    v_init: float,
    src: float = 0.0,
) -> HomogeneousState:
    """Initial value and rate of the source-free part of the state variable."""
    return _STATE_FNS[topology, excitation](R, L, C, i_init, v_init, src)


def solve_constants(
    regime: DampingRegime,
    topology: Topology,
    excitation: Excitation,
    R: float,
    L: float,
    C: float,
    characteristics: CharacteristicValues,
    i_init: float,
    v_init: float,
    src: float = 0.0,
) -> SolutionConstants:
    """
    Solve for the two response constants.

    Args:
        regime: Damping regime the characteristics were computed for
        topology: Series or parallel
        excitation: Natural or forced
        R, L, C: Element values
        characteristics: Output of ``solve_characteristics`` for ``regime``
        i_init: Initial inductor current
        v_init: Initial capacitor voltage
        src: Source magnitude (ignored for natural excitation)

    Returns:
        SolutionConstants(c1, c2)

    Raises:
        ValueError: if ``characteristics`` belong to a different regime
    """
    regime = DampingRegime(regime)
    if characteristics.regime is not regime:
        raise ValueError(
            f"{type(characteristics).__name__} cannot be used for a {regime.value} response"
        )
    topology, excitation = Topology(topology), Excitation(excitation)
    if excitation is Excitation.NATURAL:
        src = 0.0
    return FORMULAS[topology, excitation, regime](R, L, C, characteristics, i_init, v_init, src)
