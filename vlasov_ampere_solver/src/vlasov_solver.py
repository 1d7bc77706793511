import enum
import logging
import time
from functools import partial
from typing import Callable, NamedTuple
import jax
import jax.numpy as jnp
from jax.sharding import Mesh
from .solver_types import PhaseSpaceField, SpatialField, ExternalFieldFn, StepOutput
from .config import DomainConfig, PhysicsConfig, SolverConfig
from .mesh import x_mesh, v_mesh
from .poisson import compute_density, compute_field
from .advection import SpectralAdvector
from .external_fields import zero_field
from .diagnostics import History
from .sharding import get_phase_space_sharding

logger = logging.getLogger(__name__)

class StepperStatus(enum.Enum):
  IDLE = "idle"
  STEPPING = "stepping"
  DONE = "done"

class SimulationResult(NamedTuple):
  f_xv: PhaseSpaceField
  f_vx: PhaseSpaceField
  e: SpatialField
  time: float
  n_steps: int

class TimeStepper:
  """
  Strang-split Vlasov-Ampere integrator for f(x, v) on a periodic x domain.

  Each step is v(dt/2) -> x(dt) with field update -> v(dt/2). The v-advection
  works on the v-major layout (nv, nx), the x-advection on the x-major layout
  (nx, nv); the stepper transposes between them.
  """

  def __init__(
      self,
      domain_config: DomainConfig,
      physics_config: PhysicsConfig,
      solver_config: SolverConfig = SolverConfig(),
      external_field: ExternalFieldFn = zero_field,
      mesh: Mesh | None = None
  ):
    domain_config.validate()
    physics_config.validate()
    self.domain_config = domain_config
    self.physics_config = physics_config
    self.solver_config = solver_config
    self.external_field = external_field
    self.mesh = mesh

    # Grid setup.
    self.x_mesh = x_mesh(domain_config)
    self.v_mesh = v_mesh(domain_config)
    self.x = self.x_mesh.points
    self.v = self.v_mesh.points

    self.advect_x = SpectralAdvector(self.x_mesh, axis=0)
    self.advect_v = SpectralAdvector(self.v_mesh, axis=0)

    # Both layouts transform along axis 0, so both shard axis 1.
    self.sharding = None
    if mesh is not None:
      n_devices = mesh.devices.size
      if domain_config.nx % n_devices or domain_config.nv % n_devices:
        raise ValueError(
            f"nx={domain_config.nx} and nv={domain_config.nv} must be "
            f"divisible by the number of devices ({n_devices})"
        )
      self.sharding = get_phase_space_sharding(mesh, transform_axis=0)

    self.status = StepperStatus.IDLE
    self.step_index = 0

  @property
  def dt(self) -> float:
    return self.physics_config.dt

  def initial_field(self, f: PhaseSpaceField) -> SpatialField:
    """Self-consistent field of an x-major distribution."""
    rho = compute_density(self.v_mesh, f, velocity_axis=1)
    return compute_field(self.x_mesh, rho)

  def start(self, f0: PhaseSpaceField) -> tuple[PhaseSpaceField, SpatialField]:
    """
    Moves IDLE -> STEPPING.

    Args:
      f0: Initial distribution, x-major (nx, nv).

    Returns:
      (f_vx, E): v-major complex distribution and its self-consistent field.
    """
    if self.status is not StepperStatus.IDLE:
      raise RuntimeError(f"Cannot start a stepper in state {self.status.value}")
    f0 = jnp.asarray(f0)
    expected = (self.domain_config.nx, self.domain_config.nv)
    if f0.shape != expected:
      raise ValueError(
          f"Initial distribution must have shape {expected}, got {f0.shape}"
      )
    e = self.initial_field(f0)
    f_vx = f0.T.astype(jnp.result_type(f0, 1j))
    if self.sharding is not None:
      f_vx = jax.device_put(f_vx, self.sharding)

    self.status = StepperStatus.STEPPING
    self.step_index = 0
    return f_vx, e

  def step(self, f_vx: PhaseSpaceField, e: SpatialField) -> StepOutput:
    """
    Advances one step from t_i = i * dt to t_{i+1}.

    Args:
      f_vx: Distribution at t_i, v-major (nv, nx).
      e: Total field at t_i, shape (nx,).

    Returns:
      StepOutput for t_{i+1}, with both layouts in sync.
    """
    if self.status is not StepperStatus.STEPPING:
      raise RuntimeError(f"Cannot step a stepper in state {self.status.value}")

    i = self.step_index
    e_ext = jnp.asarray(self.external_field(self.x, i, self.dt))
    f_vx, e = self._strang_step(f_vx, e, e_ext)
    jax.block_until_ready((f_vx, e))

    self.step_index = i + 1
    if self.step_index >= self.physics_config.n_steps:
      self.status = StepperStatus.DONE
    logger.debug("step %d/%d done", self.step_index, self.physics_config.n_steps)

    return StepOutput(
        step=self.step_index,
        time=self.step_index * self.dt,
        e=e,
        f_xv=f_vx.T,
        f_vx=f_vx,
        e_ext=e_ext,
    )

  def run(
      self,
      f0: PhaseSpaceField,
      history: History | None = None,
      callback: Callable[[StepOutput], None] | None = None
  ) -> SimulationResult:
    """
    Runs physics_config.n_steps steps from f0 (x-major).

    After each step the new state is recorded into `history` and passed to
    `callback`, when given.
    """
    f_vx, e = self.start(f0)
    n_steps = self.physics_config.n_steps
    logger.info(
        "Starting run: nx=%d, nv=%d, dt=%.4g, n_steps=%d",
        self.domain_config.nx, self.domain_config.nv, self.dt, n_steps
    )
    log_every = self.solver_config.log_every
    start_time = time.time()

    output = None
    while self.status is StepperStatus.STEPPING:
      output = self.step(f_vx, e)
      f_vx, e = output.f_vx, output.e
      if history is not None:
        history.record(output, self.x_mesh, self.v_mesh)
      if callback is not None:
        callback(output)
      if log_every and output.step % log_every == 0:
        logger.info("step %d/%d, t=%.4g", output.step, n_steps, output.time)

    logger.info("Run complete in %.2f s", time.time() - start_time)
    return SimulationResult(
        f_xv=output.f_xv,
        f_vx=output.f_vx,
        e=output.e,
        time=output.time,
        n_steps=output.step,
    )

  def reset(self) -> None:
    """Returns the stepper to IDLE so it can run again."""
    self.status = StepperStatus.IDLE
    self.step_index = 0

  @partial(jax.jit, static_argnums=(0,))
  def _strang_step(
      self,
      f_vx: PhaseSpaceField,
      e: SpatialField,
      e_ext: SpatialField
  ) -> tuple[PhaseSpaceField, SpatialField]:
    dt = self.physics_config.dt

    # 1. Advect in V for dt/2 with the current field.
    f_vx = self.advect_v.transport_half_step(f_vx, e, dt / 2)

    # 2. Transpose to x-major.
    f_xv = f_vx.T
    if self.sharding is not None:
      f_xv = jax.lax.with_sharding_constraint(f_xv, self.sharding)

    # 3. Advect in X for dt and update the field.
    f_xv, e = self.advect_x.coupled_advect_and_update_field(
        f_xv, self.v_mesh, dt, e_ext
    )

    # 4. Transpose back to v-major.
    f_vx = f_xv.T
    if self.sharding is not None:
      f_vx = jax.lax.with_sharding_constraint(f_vx, self.sharding)

    # 5. Advect in V for dt/2 with the updated field.
    f_vx = self.advect_v.transport_half_step(f_vx, e, dt / 2)
    return f_vx, e
