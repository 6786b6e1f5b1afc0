"""Circuit description: topology, excitation, element values, initial state."""

from __future__ import annotations
import math
from enum import Enum
from typing import NamedTuple


class Topology(str, Enum):
    """How R, L and C are connected."""
    SERIES = "series"
    PARALLEL = "parallel"


class Excitation(str, Enum):
    """Whether a constant source drives the circuit."""
    NATURAL = "natural"
    FORCED = "forced"


class CircuitParameters(NamedTuple):
    """
    Element values and classification of a second-order RLC circuit.

    Build with ``CircuitParameters.create`` to get validated values:
        params = CircuitParameters.create(3.0, 1.0, 1.0, Topology.SERIES)
    """
    resistance: float   # Ohms
    capacitance: float  # Farads
    inductance: float   # Henrys
    topology: Topology
    excitation: Excitation = Excitation.NATURAL
    source: float = 0.0  # Volts (series) or Amperes (parallel), forced only

    @classmethod
    def create(
        cls,
        resistance: float,
        capacitance: float,
        inductance: float,
        topology: Topology | str,
        excitation: Excitation | str = Excitation.NATURAL,
        source: float = 0.0,
    ) -> CircuitParameters:
        """
        Validate element values and build the parameter record.

        Raises:
            ValueError: if R, C or L is not a finite positive number, the
                source is not finite, or topology/excitation is unknown.
        """
        topology = Topology(topology)
        excitation = Excitation(excitation)
        for label, value in (("resistance", resistance),
                             ("capacitance", capacitance),
                             ("inductance", inductance)):
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(f"{label} must be a finite positive number, got {value}")
        if not math.isfinite(source):
            raise ValueError(f"source must be finite, got {source}")
        if excitation is Excitation.NATURAL:
            source = 0.0
        return cls(float(resistance), float(capacitance), float(inductance),
                   topology, excitation, float(source))


class InitialConditions(NamedTuple):
    """Capacitor voltage and inductor current at t = 0."""
    voltage: float  # V_init
    current: float  # I_init
