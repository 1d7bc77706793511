import jax.numpy as jnp
from .solver_types import Array, ExternalFieldFn

def zero_field(x: Array, step: int, dt: float) -> Array:
  """No external drive."""
  return jnp.zeros(x.shape, dtype=jnp.result_type(x, 1j))

def driven_wave(
    amplitude: float,
    k: float,
    omega: float,
    t_on: float = 0.0,
    t_off: float = jnp.inf,
    rise_time: float = 1.0
) -> ExternalFieldFn:
  """
  Returns a generator for a ramped travelling wave a(t) cos(k x - omega t).

  The envelope rises over `rise_time` around `t_on` and falls around `t_off`
  with tanh profiles.
  """
  if rise_time <= 0:
    raise ValueError(f"rise_time must be positive, got {rise_time}")

  def generator(x: Array, step: int, dt: float) -> Array:
    t = step * dt
    envelope = 0.5 * (
        jnp.tanh((t - t_on) / rise_time) - jnp.tanh((t - t_off) / rise_time)
    )
    e = amplitude * envelope * jnp.cos(k * x - omega * t)
    return e.astype(jnp.result_type(x, 1j))

  return generator
