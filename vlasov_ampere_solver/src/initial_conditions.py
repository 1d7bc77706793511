import jax.numpy as jnp
from .solver_types import Array, PhaseSpaceField, VelocityField

def maxwellian(v: Array, vth: float = 1.0, drift: float = 0.0) -> VelocityField:
  return jnp.exp(-(v - drift)**2 / (2 * vth**2)) / jnp.sqrt(2 * jnp.pi * vth**2)

def landau(x: Array, v: Array, eps: float = 0.001, k: float = 0.5) -> PhaseSpaceField:
  """f(x, v) = (1 + eps cos(k x)) exp(-v^2/2) / sqrt(2 pi), x-major (nx, nv)."""
  return (1.0 + eps * jnp.cos(k * x))[:, None] * maxwellian(v)[None, :]

def two_stream(
    x: Array,
    v: Array,
    eps: float = 0.001,
    k: float = 0.2,
    v0: float = 2.4
) -> PhaseSpaceField:
  """Counter-streaming beams at +/- v0 with a cos(k x) density perturbation."""
  beams = 0.5 * (maxwellian(v, drift=v0) + maxwellian(v, drift=-v0))
  return (1.0 + eps * jnp.cos(k * x))[:, None] * beams[None, :]
