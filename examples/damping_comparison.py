"""
Example: Series RLC damping comparison

Classifies three series RLC circuits that share L = 100 mH and C = 10 uF:
- Resonant frequency: w = 1 / sqrt(L * C) = 1000 rad/s
- Neper frequency:    a = R / (2 * L)
- Critical damping at R = 2 * sqrt(L / C) = 200 ohm

For each circuit the capacitor starts charged to 5 V with no inductor
current; the closed-form response is sampled with JAX and the peak
undershoot is reported. Finally jax.grad gives the slope dv_C/dt
at a few instants.
"""

import jax.numpy as jnp

from pyrlc import CircuitParameters, InitialConditions, Topology, analyze
from pyrlc.response import rate_function

L_VAL = 0.1    # 100 mH
C_VAL = 1e-5   # 10 uF
V0 = 5.0


def capacitor_voltage(R_val, t):
    """v_C(t) for a series natural response starting at V0."""
    analysis = analyze(CircuitParameters.create(R_val, C_VAL, L_VAL, Topology.SERIES))
    constants = analysis.solve(InitialConditions(voltage=V0, current=0.0))
    return analysis, analysis.response(constants)(t)


def main():
    print("=" * 60)
    print("Series RLC Damping Comparison")
    print("=" * 60)

    t = jnp.linspace(0.0, 0.02, 2001)  # 20 ms

    scenarios = [
        ("Underdamped", 20.0),
        ("Critically damped", 200.0),
        ("Overdamped", 1000.0),
    ]

    for name, R_val in scenarios:
        analysis, v = capacitor_voltage(R_val, t)
        f = analysis.frequencies
        print(f"\n{name} (R = {R_val:.0f} ohm)")
        print("-" * 40)
        print(f"   a = {f.a:.2f} 1/s, w = {f.w:.2f} rad/s, Q = {f.quality_factor:.3f}")
        print(f"   Regime: {analysis.regime.label}")
        print(f"   Characteristics: {analysis.characteristics}")
        print(f"   Minimum v_C: {float(jnp.min(v)):.4f} V")
        print(f"   v_C(20 ms): {float(v[-1]):.6f} V")

    # Time derivative of the closed form via jax.grad
    analysis = analyze(CircuitParameters.create(20.0, C_VAL, L_VAL, Topology.SERIES))
    constants = analysis.solve(InitialConditions(voltage=V0, current=0.0))
    dv_dt = rate_function(analysis.characteristics, constants)

    print("\nJAX Differentiability (underdamped, R = 20 ohm)")
    print("-" * 40)
    for t_ms in (0.0, 0.5, 1.0, 2.0):
        print(f"   dv_C/dt({t_ms:.1f} ms) = {float(dv_dt(t_ms * 1e-3)):.2f} V/s")
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
