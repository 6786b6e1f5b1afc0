"""Closed-form time-domain response, JAX-compatible.

    overdamped:  x(t) = c1 exp(s1 t) + c2 exp(s2 t)          + offset
    critical:    x(t) = (c1 t + c2) exp(s t)                 + offset
    underdamped: x(t) = exp(-a t) (c1 cos(w_d t) + c2 sin(w_d t)) + offset

Coincident overdamped roots use the critical form; w_d == 0 uses
exp(-a t) (c1 + c2 t).

``offset`` is the source magnitude for a forced response and 0 otherwise.
Everything is written with jax.numpy, so the returned functions can be
jit-compiled, vmapped over time arrays and differentiated with ``jax.grad``.
"""

from __future__ import annotations
from typing import Callable

import jax
import jax.numpy as jnp
from jax import Array

from .characteristic import CharacteristicValues
from .constants import SolutionConstants
from .damping import DampingRegime


def evaluate(
    characteristics: CharacteristicValues,
    constants: SolutionConstants,
    t: float | Array,
    offset: float = 0.0,
) -> Array:
    """
    Evaluate the state variable at time(s) ``t``.

    Args:
        characteristics: Roots or decay/frequency pair of the circuit
        constants: (c1, c2) from ``solve_constants``
        t: Scalar or array of times in seconds
        offset: Steady-state value (source magnitude for forced response)

    Returns:
        Array with the same shape as ``t``
    """
    t = jnp.asarray(t)
    c1, c2 = constants
    regime = characteristics.regime
    if regime is DampingRegime.OVERDAMPED and characteristics.s1 == characteristics.s2:
        x = (c1 * t + c2) * jnp.exp(characteristics.s1 * t)
    elif regime is DampingRegime.OVERDAMPED:
        x = c1 * jnp.exp(characteristics.s1 * t) + c2 * jnp.exp(characteristics.s2 * t)
    elif regime is DampingRegime.CRITICALLY_DAMPED:
        x = (c1 * t + c2) * jnp.exp(characteristics.s * t)
    elif characteristics.w_d == 0.0:
        x = jnp.exp(-characteristics.a * t) * (c1 + c2 * t)
    else:
        wt = characteristics.w_d * t
        x = jnp.exp(-characteristics.a * t) * (c1 * jnp.cos(wt) + c2 * jnp.sin(wt))
    return x + offset


def response_function(
    characteristics: CharacteristicValues,
    constants: SolutionConstants,
    offset: float = 0.0,
) -> Callable[[float | Array], Array]:
    """Bind characteristics and constants into a function of time only."""
    def x(t):
        return evaluate(characteristics, constants, t, offset)
    return x


def rate_function(
    characteristics: CharacteristicValues,
    constants: SolutionConstants,
) -> Callable[[float | Array], Array]:
    """dx/dt as a function of time, obtained with jax.grad and vmapped over arrays."""
    dx = jax.grad(response_function(characteristics, constants))

    def rate(t):
        t = jnp.asarray(t, dtype=jnp.result_type(float))
        if t.ndim == 0:
            return dx(t)
        return jax.vmap(dx)(t)
    return rate


def initial_state(
    characteristics: CharacteristicValues,
    constants: SolutionConstants,
    offset: float = 0.0,
) -> float:
    """x(0)."""
    return float(evaluate(characteristics, constants, 0.0, offset))


def initial_rate(characteristics: CharacteristicValues, constants: SolutionConstants) -> float:
    """x'(0)."""
    return float(rate_function(characteristics, constants)(0.0))
