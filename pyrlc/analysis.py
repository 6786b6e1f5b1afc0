"""End-to-end pipeline: parameters -> frequencies -> regime -> characteristics -> constants."""

from __future__ import annotations
from typing import NamedTuple, Callable

from jax import Array

from ._logging import logger
from .characteristic import CharacteristicValues, solve_characteristics
from .circuit import CircuitParameters, Excitation, InitialConditions
from .constants import SolutionConstants, solve_constants
from .damping import DEFAULT_TOLERANCE, DampingRegime, classify
from .frequencies import FrequencyPair, compute_frequencies
from .response import response_function


class Analysis(NamedTuple):
    """
    Result of stages 1-3 for one circuit.

    Usage:
        analysis = analyze(CircuitParameters.create(3.0, 1.0, 1.0, "series"))
        constants = analysis.solve(InitialConditions(voltage=1.0, current=0.0))
        x = analysis.response(constants)
        x(0.5)
    """
    params: CircuitParameters
    frequencies: FrequencyPair
    regime: DampingRegime
    characteristics: CharacteristicValues

    @property
    def offset(self) -> float:
        """Steady-state value of the state variable."""
        if self.params.excitation is Excitation.FORCED:
            return self.params.source
        return 0.0

    def solve(self, initial: InitialConditions) -> SolutionConstants:
        """Stage 4: constants for the given initial capacitor voltage and inductor current."""
        p = self.params
        constants = solve_constants(
            self.regime,
            p.topology,
            p.excitation,
            p.resistance,
            p.inductance,
            p.capacitance,
            self.characteristics,
            initial.current,
            initial.voltage,
            p.source,
        )
        logger.debug("initial=%r -> %r", initial, constants)
        return constants

    def response(self, constants: SolutionConstants) -> Callable[[float | Array], Array]:
        """State variable x(t), including the forced offset."""
        return response_function(self.characteristics, constants, self.offset)


def analyze(params: CircuitParameters, tolerance: float = DEFAULT_TOLERANCE) -> Analysis:
    """
    Run frequency calculation, classification and characteristic solving.

    Args:
        params: Validated circuit parameters
        tolerance: Absolute tolerance for the a == w test

    Returns:
        Analysis record; call ``.solve(initial)`` for the constants
    """
    frequencies = compute_frequencies(
        params.resistance, params.capacitance, params.inductance, params.topology
    )
    logger.debug("%s %s: %r", params.topology.value, params.excitation.value, frequencies)
    regime = classify(frequencies.a, frequencies.w, tolerance)
    characteristics = solve_characteristics(frequencies.a, frequencies.w, regime)
    logger.debug("characteristics: %r", characteristics)
    return Analysis(params, frequencies, regime, characteristics)
