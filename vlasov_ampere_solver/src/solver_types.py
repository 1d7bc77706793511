from typing import Callable, NamedTuple, TypeAlias
import chex

Array = chex.Array

# Type aliases for clarity.
# 2D array in x-major layout: (nx, nv).
PhaseSpaceField: TypeAlias = Array

# 1D array: (nx,).
SpatialField: TypeAlias = Array

# 1D array: (nv,).
VelocityField: TypeAlias = Array

# 1D array of wavenumbers in FFT ordering.
WavenumberVector: TypeAlias = Array

# (x points, step index, dt) -> external field of shape (nx,).
ExternalFieldFn: TypeAlias = Callable[[Array, int, float], Array]

class StepOutput(NamedTuple):
  """State emitted to diagnostics after each completed step."""
  step: int
  time: float
  e: SpatialField
  f_xv: PhaseSpaceField  # x-major (nx, nv).
  f_vx: PhaseSpaceField  # v-major (nv, nx).
  e_ext: SpatialField
