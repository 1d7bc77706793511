from dataclasses import dataclass, field
import jax.numpy as jnp
from .solver_types import Array, PhaseSpaceField, SpatialField, StepOutput
from .mesh import PeriodicMesh

def field_energy(e: SpatialField, dx: float) -> float:
  """Electric energy 0.5 * integral E^2 dx."""
  return float(0.5 * jnp.sum(jnp.real(e)**2) * dx)

def field_norm(e: SpatialField, dx: float) -> float:
  """L2 norm sqrt(integral E^2 dx)."""
  return float(jnp.sqrt(jnp.sum(jnp.real(e)**2) * dx))

def kinetic_energy(f: PhaseSpaceField, v: Array, dx: float, dv: float) -> float:
  """0.5 * integral v^2 f dx dv for an x-major distribution."""
  return float(0.5 * jnp.sum(jnp.real(f) * v[None, :]**2) * dx * dv)

def total_mass(f: PhaseSpaceField, dx: float, dv: float) -> float:
  return float(jnp.sum(jnp.real(f)) * dx * dv)

def entropy(f: PhaseSpaceField, dx: float, dv: float) -> float:
  """-integral f log f dx dv, restricted to cells where f > 0."""
  f = jnp.real(f)
  positive = f > 0
  safe_f = jnp.where(positive, f, 1.0)
  return float(-jnp.sum(jnp.where(positive, f * jnp.log(safe_f), 0.0)) * dx * dv)

@dataclass
class History:
  """Append-only per-step time series, owned by the driver."""
  steps: list[int] = field(default_factory=list)
  times: list[float] = field(default_factory=list)
  field_energy: list[float] = field(default_factory=list)
  field_norm: list[float] = field(default_factory=list)
  kinetic_energy: list[float] = field(default_factory=list)
  entropy: list[float] = field(default_factory=list)
  mass: list[float] = field(default_factory=list)

  def record(
      self,
      output: StepOutput,
      x_mesh: PeriodicMesh,
      v_mesh: PeriodicMesh
  ) -> None:
    dx, dv = x_mesh.step, v_mesh.step
    self.steps.append(output.step)
    self.times.append(output.time)
    self.field_energy.append(field_energy(output.e, dx))
    self.field_norm.append(field_norm(output.e, dx))
    self.kinetic_energy.append(
        kinetic_energy(output.f_xv, v_mesh.points, dx, dv)
    )
    self.entropy.append(entropy(output.f_xv, dx, dv))
    self.mass.append(total_mass(output.f_xv, dx, dv))

  def __len__(self) -> int:
    return len(self.steps)

  @property
  def total_energy(self) -> list[float]:
    return [fe + ke for fe, ke in zip(self.field_energy, self.kinetic_energy)]

def fit_damping_rate(
    times: Array,
    amplitude: Array,
    t_min: float = 0.0,
    t_max: float = jnp.inf
) -> float:
  """
  Fits log(amplitude) ~ gamma * t + c through the local maxima of `amplitude`.

  Landau-damped fields oscillate, so only the peaks trace the envelope.

  Args:
    times: Sample times.
    amplitude: Positive oscillating signal, e.g. the field norm.
    t_min: Start of the fit window.
    t_max: End of the fit window.

  Returns:
    gamma: Envelope growth rate (negative for damping).
  """
  times = jnp.asarray(times)
  amplitude = jnp.asarray(amplitude)
  if times.shape != amplitude.shape or times.ndim != 1:
    raise ValueError(
        f"times and amplitude must be matching 1D arrays, "
        f"got {times.shape} and {amplitude.shape}"
    )

  is_peak = (amplitude[1:-1] > amplitude[:-2]) & (amplitude[1:-1] >= amplitude[2:])
  peak_times = times[1:-1][is_peak]
  peak_values = amplitude[1:-1][is_peak]

  in_window = (peak_times >= t_min) & (peak_times <= t_max)
  fit_times = peak_times[in_window]
  fit_log = jnp.log(peak_values[in_window])
  if fit_times.shape[0] < 2:
    raise ValueError(
        f"Need at least 2 peaks in [{t_min}, {t_max}] to fit, "
        f"found {fit_times.shape[0]}"
    )

  # Linear regression: y = m t + c.
  n = fit_times.shape[0]
  sum_t = jnp.sum(fit_times)
  sum_y = jnp.sum(fit_log)
  sum_ty = jnp.sum(fit_times * fit_log)
  sum_tt = jnp.sum(fit_times**2)
  return float((n * sum_ty - sum_t * sum_y) / (n * sum_tt - sum_t**2))
