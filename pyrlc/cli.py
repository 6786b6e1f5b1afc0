#!/usr/bin/env python3
"""
Command-line RLC calculator.

Usage:
    pyrlc -[p|s] -[n|f] R C L [SRC] [--initial V I] [--precision N]

Examples:
    pyrlc -s -n 3 1 1                  # overdamped series natural response
    pyrlc -p -f 100 1e-6 1e-3 2 --initial 0 0
"""

from __future__ import annotations
import argparse
import logging
import math
import sys
from typing import Callable, NamedTuple, Optional

from .analysis import Analysis, analyze
from .characteristic import CriticalRoot, OverdampedRoots
from .circuit import CircuitParameters, Excitation, InitialConditions, Topology
from .constants import SolutionConstants
from .damping import DEFAULT_TOLERANCE

# Returns the initial conditions, or None to skip the constant computation.
InitialConditionsPrompt = Callable[[], Optional[InitialConditions]]


class FormatConfig(NamedTuple):
    """Console number formatting."""
    precision: int = 20  # significant digits

    def number(self, value: float) -> str:
        return f"{value:.{self.precision}g}"


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not math.isfinite(value) or value <= 0.0:
        raise argparse.ArgumentTypeError(f"must be a finite positive number: {text!r}")
    return value


def _finite_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"must be finite: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyrlc",
        description="Calculate values for solution of equations describing RLC circuits",
        epilog="Use -? for help. R, C, L in Ohms, Farads and Henrys; "
               "SRC is the voltage or current source value of a forced response circuit.",
        add_help=False,
    )
    parser.add_argument("-?", "-h", "--help", action="help",
                        help="Print this message and exit")

    topology = parser.add_mutually_exclusive_group(required=True)
    topology.add_argument("-p", "--parallel", dest="topology", action="store_const",
                          const=Topology.PARALLEL, help="Parallel RLC")
    topology.add_argument("-s", "--series", dest="topology", action="store_const",
                          const=Topology.SERIES, help="Series RLC")

    excitation = parser.add_mutually_exclusive_group(required=True)
    excitation.add_argument("-n", "--natural", dest="excitation", action="store_const",
                            const=Excitation.NATURAL, help="Natural response")
    excitation.add_argument("-f", "--forced", dest="excitation", action="store_const",
                            const=Excitation.FORCED, help="Forced response")

    parser.add_argument("resistance", metavar="R", type=_positive_float, help="Resistance (Ohms)")
    parser.add_argument("capacitance", metavar="C", type=_positive_float, help="Capacitance (Farads)")
    parser.add_argument("inductance", metavar="L", type=_positive_float, help="Inductance (Henrys)")
    parser.add_argument("source", metavar="SRC", type=_finite_float, nargs="?", default=0.0,
                        help="Source value for a forced response (default: 0)")

    parser.add_argument("--initial", nargs=2, type=_finite_float, metavar=("V", "I"),
                        help="Initial capacitor voltage and inductor current (skips the prompt)")
    parser.add_argument("--precision", type=int, default=FormatConfig().precision,
                        help="Significant digits in the output (default: 20)")
    parser.add_argument("--tolerance", type=_positive_float, default=DEFAULT_TOLERANCE,
                        help="Absolute tolerance for critical damping (default: 1e-9)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def parse_initial_conditions(text: str) -> InitialConditions:
    """Parse "V I" (space separated initial voltage, then initial current)."""
    fields = text.split()
    if len(fields) != 2:
        raise ValueError(f"expected 2 numbers, got {len(fields)}")
    voltage, current = (float(f) for f in fields)
    if not (math.isfinite(voltage) and math.isfinite(current)):
        raise ValueError("initial conditions must be finite")
    return InitialConditions(voltage=voltage, current=current)


def prompt_initial_conditions(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> InitialConditions | None:
    """
    Ask whether to compute constants and, if so, read the initial conditions.

    Returns None when the user declines or input ends.
    """
    write("\nCalculate solution constants?    [Y\\N]")
    try:
        choice = read().strip()
    except EOFError:
        return None
    if choice[:1] not in ("y", "Y"):
        return None

    while True:
        write("\nEnter space separated initial voltage followed by initial current")
        try:
            line = read()
        except EOFError:
            return None
        try:
            return parse_initial_conditions(line)
        except ValueError as e:
            write(f"Invalid input ({e}), try again")


def report_analysis(analysis: Analysis, fmt: FormatConfig, write: Callable[[str], None] = print) -> None:
    p = analysis.params
    write(f"Calculating for {p.excitation.value} response {p.topology.value} RLC")
    write(f"Found Neper frequency of: {fmt.number(analysis.frequencies.a)}")
    write(f"Found resonant radian frequency of: {fmt.number(analysis.frequencies.w)}\n")
    write(f"{analysis.regime.label}:")

    ch = analysis.characteristics
    if isinstance(ch, OverdampedRoots):
        write(f"Found exponents\n    s1: {fmt.number(ch.s1)}\n    s2: {fmt.number(ch.s2)}")
    elif isinstance(ch, CriticalRoot):
        write(f"Found exponent\n    s: {fmt.number(ch.s)}")
    else:
        write(f"Found damping frequency\n    w: {fmt.number(ch.w_d)}")


def report_constants(constants: SolutionConstants, fmt: FormatConfig,
                     write: Callable[[str], None] = print) -> None:
    write(f"Found C1: {fmt.number(constants.c1)}  C2: {fmt.number(constants.c2)}")


def main(argv: list[str] | None = None, prompt: InitialConditionsPrompt | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.precision < 1:
        parser.error("--precision must be at least 1")

    try:
        params = CircuitParameters.create(
            args.resistance, args.capacitance, args.inductance,
            args.topology, args.excitation, args.source,
        )
    except ValueError as e:
        parser.error(str(e))

    fmt = FormatConfig(precision=args.precision)
    analysis = analyze(params, tolerance=args.tolerance)
    report_analysis(analysis, fmt)

    if args.initial is not None:
        initial = InitialConditions(voltage=args.initial[0], current=args.initial[1])
    else:
        initial = (prompt or prompt_initial_conditions)()
    if initial is None:
        return 0

    report_constants(analysis.solve(initial), fmt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
