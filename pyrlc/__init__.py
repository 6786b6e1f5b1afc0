"""pyrlc - closed-form transient response of second-order RLC circuits.

Pipeline:
    - compute_frequencies: neper frequency a and resonant frequency w
    - classify: overdamped / critically damped / underdamped (tolerance based)
    - solve_characteristics: roots, or decay rate and damped frequency
    - solve_constants: c1, c2 from initial capacitor voltage and inductor current

Usage:
    from pyrlc import CircuitParameters, InitialConditions, analyze

    analysis = analyze(CircuitParameters.create(3.0, 1.0, 1.0, "series"))
    constants = analysis.solve(InitialConditions(voltage=1.0, current=0.0))
    x = analysis.response(constants)  # JAX function of time
"""

from .circuit import Topology, Excitation, CircuitParameters, InitialConditions
from .frequencies import FrequencyPair, compute_frequencies
from .damping import DEFAULT_TOLERANCE, DampingRegime, classify, frequencies_equal
from .characteristic import (
    CharacteristicValues,
    OverdampedRoots,
    CriticalRoot,
    UnderdampedFrequencies,
    solve_characteristics,
)
from .constants import FORMULAS, SolutionConstants, solve_constants
from .analysis import Analysis, analyze

__version__ = "0.1.0"
__all__ = [
    # Circuit description
    "Topology",
    "Excitation",
    "CircuitParameters",
    "InitialConditions",
    # Stages
    "FrequencyPair",
    "compute_frequencies",
    "DEFAULT_TOLERANCE",
    "DampingRegime",
    "classify",
    "frequencies_equal",
    "CharacteristicValues",
    "OverdampedRoots",
    "CriticalRoot",
    "UnderdampedFrequencies",
    "solve_characteristics",
    "FORMULAS",
    "SolutionConstants",
    "solve_constants",
    # Pipeline
    "Analysis",
    "analyze",
    "__version__",
]
