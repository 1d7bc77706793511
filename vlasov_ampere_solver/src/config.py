from dataclasses import dataclass
import math

@dataclass(frozen=True)
class DomainConfig:
  """Configuration for the phase-space domain and grid resolution."""
  x_min: float = 0.0
  x_max: float = 4 * math.pi
  v_min: float = -6.0
  v_max: float = 6.0

  nx: int = 32
  nv: int = 32

  @property
  def lx(self) -> float:
    return self.x_max - self.x_min

  @property
  def dx(self) -> float:
    return (self.x_max - self.x_min) / self.nx

  @property
  def dv(self) -> float:
    return (self.v_max - self.v_min) / self.nv

  def validate(self) -> None:
    if self.nx < 1 or self.nv < 1:
      raise ValueError(
          f"Grid sizes must be positive, got nx={self.nx}, nv={self.nv}"
      )
    if self.x_max <= self.x_min:
      raise ValueError(
          f"Spatial extent must be positive, got [{self.x_min}, {self.x_max})"
      )
    if self.v_max <= self.v_min:
      raise ValueError(
          f"Velocity extent must be positive, got [{self.v_min}, {self.v_max})"
      )

@dataclass(frozen=True)
class PhysicsConfig:
  """Configuration for the time integration."""
  final_time: float = 2.0
  n_steps: int = 10

  @property
  def dt(self) -> float:
    return self.final_time / self.n_steps

  def validate(self) -> None:
    if self.n_steps < 1:
      raise ValueError(f"n_steps must be positive, got {self.n_steps}")
    if self.final_time <= 0:
      raise ValueError(f"final_time must be positive, got {self.final_time}")

@dataclass(frozen=True)
class SolverConfig:
  """Configuration for the run loop."""
  log_every: int = 0  # 0 disables progress logging.
