import jax
import jax.numpy as jnp
from .solver_types import PhaseSpaceField, SpatialField, Array
from .mesh import PeriodicMesh

def compute_density(
    v_mesh: PeriodicMesh,
    f: PhaseSpaceField,
    velocity_axis: int = 1
) -> SpatialField:
  """
  Computes the charge density rho(x) = integral Re f dv - background.

  Args:
    v_mesh: Velocity mesh.
    f: Distribution function, x-major (nx, nv) or v-major (nv, nx).
    velocity_axis: Axis of `f` indexed by velocity (1 for x-major, 0 for
      v-major).

  Returns:
    rho: Mean-free density, shape (nx,).
  """
  if velocity_axis not in (0, 1):
    raise ValueError(f"velocity_axis must be 0 or 1, got {velocity_axis}")
  if f.ndim != 2 or f.shape[velocity_axis] != v_mesh.length:
    raise ValueError(
        f"Expected velocity axis {velocity_axis} of length {v_mesh.length}, "
        f"got array of shape {f.shape}"
    )
  rho = jnp.sum(jnp.real(f), axis=velocity_axis) * v_mesh.step

  # Assume neutralizing background (mean 0).
  return rho - jnp.mean(rho)

def compute_field(x_mesh: PeriodicMesh, rho: SpatialField) -> SpatialField:
  """
  Solves dE/dx = rho using FFT with periodic BCs.

  Args:
    x_mesh: Spatial mesh.
    rho: Mean-free charge density, shape (nx,).

  Returns:
    E: Electric field, shape (nx,), with zero mean.
  """
  if rho.shape != (x_mesh.length,):
    raise ValueError(
        f"Density must have shape ({x_mesh.length},), got {rho.shape}"
    )
  return _solve_field(rho, x_mesh.wavenumbers())

@jax.jit
def _solve_field(rho: SpatialField, kx: Array) -> SpatialField:
  rho_hat = jnp.fft.fft(rho)

  # Mode 0 is divided by 1.0 only to keep the division defined.
  k = jnp.where(kx == 0, 1.0, kx)
  e_hat = -1j * rho_hat / k

  # The mean field is not determined by Gauss's law; set it to 0.
  e_hat = jnp.where(kx == 0, 0.0, e_hat)

  return jnp.real(jnp.fft.ifft(e_hat))
