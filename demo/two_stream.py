import logging
import jax
import jax.numpy as jnp
import time
import matplotlib.pyplot as plt
from vlasov_ampere_solver import (
    DomainConfig, PhysicsConfig, SolverConfig, TimeStepper, History, two_stream
)

jax.config.update("jax_enable_x64", True)

def main():
  logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s')
  print("Initializing two-stream instability simulation...")

  # Setting up configuration.
  # Instability needs k * v0 below the plasma frequency, so a long box.
  k = 0.2
  domain_config = DomainConfig(
      x_min=0.0, x_max=2*jnp.pi/k,
      v_min=-8.0, v_max=8.0,
      nx=64, nv=128
  )
  # Instability takes time to grow.
  physics_config = PhysicsConfig(final_time=60.0, n_steps=600)
  solver_config = SolverConfig(log_every=100)

  print(f"Domain: {domain_config.nx} spatial x {domain_config.nv} velocity")
  print(f"Physics: dt={physics_config.dt}, T_final={physics_config.final_time}")

  solver = TimeStepper(domain_config, physics_config, solver_config)

  # Setting up initial conditions.
  print("Setting up initial conditions...")
  eps = 0.001
  v0 = 2.4  # Beam velocity.
  f = two_stream(solver.x, solver.v, eps=eps, k=k, v0=v0)

  # Keep a few snapshots of the distribution.
  snapshot_steps = {150, 300, 600}
  snapshots = {}

  def keep_snapshots(out):
    if out.step in snapshot_steps:
      snapshots[out.step] = (out.time, jnp.real(out.f_xv))

  history = History()
  start_time = time.time()
  solver.run(f, history=history, callback=keep_snapshots)
  print(f"Simulation complete in {time.time() - start_time:.2f} seconds.")

  # Growth phase.
  times = jnp.array(history.times)
  energy = jnp.array(history.field_energy)
  print(f"Field energy grew by a factor {energy.max() / energy[0]:.2e}")

  # Plotting.
  fig, axes = plt.subplots(1, len(snapshots) + 1, figsize=(18, 4))
  axes[0].semilogy(times, energy)
  axes[0].set_xlabel('Time')
  axes[0].set_ylabel('Field Energy')
  axes[0].set_title('Two-Stream: Field Energy')
  axes[0].grid(True, alpha=0.3)

  extent = [solver.x[0], solver.x[-1], solver.v[0], solver.v[-1]]
  for ax, step in zip(axes[1:], sorted(snapshots)):
    t, f_step = snapshots[step]
    im = ax.imshow(f_step.T, extent=extent, origin='lower', aspect='auto',
                   cmap='inferno')
    ax.set_title(f'f(x, v) at t={t:.1f}')
    ax.set_xlabel('x')
    ax.set_ylabel('v')
    fig.colorbar(im, ax=ax)

  plt.tight_layout()
  plt.savefig('two_stream_results.png', dpi=150)
  print("Plot saved to two_stream_results.png")

if __name__ == "__main__":
  main()
