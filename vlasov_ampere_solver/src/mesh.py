from dataclasses import dataclass, field
import jax.numpy as jnp
from .solver_types import Array, WavenumberVector
from .config import DomainConfig

@dataclass(frozen=True)
class PeriodicMesh:
  """
  Uniform grid on [start, stop) treated as periodic with period stop - start.

  The endpoint `stop` is never a sample point: points are start + i * step for
  i in [0, length).
  """
  start: float
  stop: float
  length: int
  points: Array = field(repr=False, compare=False)

  @classmethod
  def create(cls, start: float, stop: float, length: int) -> "PeriodicMesh":
    if length < 1:
      raise ValueError(f"Mesh length must be positive, got {length}")
    if stop <= start:
      raise ValueError(f"Mesh extent must be positive, got [{start}, {stop})")
    points = jnp.linspace(start, stop, length, endpoint=False)
    return cls(start=start, stop=stop, length=length, points=points)

  @property
  def step(self) -> float:
    return (self.stop - self.start) / self.length

  @property
  def period(self) -> float:
    return self.stop - self.start

  def wavenumbers(self) -> WavenumberVector:
    """Angular wavenumbers 2*pi*fftfreq(N, step), in FFT ordering."""
    return 2 * jnp.pi * jnp.fft.fftfreq(self.length, d=self.step)

def x_mesh(config: DomainConfig) -> PeriodicMesh:
  return PeriodicMesh.create(config.x_min, config.x_max, config.nx)

def v_mesh(config: DomainConfig) -> PeriodicMesh:
  return PeriodicMesh.create(config.v_min, config.v_max, config.nv)
