import logging
import jax
import jax.numpy as jnp
import time
import matplotlib.pyplot as plt
from vlasov_ampere_solver import (
    DomainConfig, PhysicsConfig, SolverConfig, TimeStepper, History, landau,
    fit_damping_rate
)

jax.config.update("jax_enable_x64", True)

def main():
  logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s')
  print("Initializing Landau Damping Simulation...")

  # 1. Configuration.
  domain_config = DomainConfig(
      x_min=0.0, x_max=4*jnp.pi,
      v_min=-6.0, v_max=6.0,
      nx=64, nv=128
  )
  physics_config = PhysicsConfig(final_time=40.0, n_steps=400)
  solver_config = SolverConfig(log_every=100)

  print(f"Domain: {domain_config.nx} spatial x {domain_config.nv} velocity")
  print(f"Physics: dt={physics_config.dt}, T_final={physics_config.final_time}")

  # 2. Create Solver.
  solver = TimeStepper(domain_config, physics_config, solver_config)

  # 3. Initial Condition: Landau Damping.
  print("Setting up initial conditions...")
  eps = 0.001
  k = 0.5
  f = landau(solver.x, solver.v, eps=eps, k=k)

  # 4. Time Loop.
  history = History()
  start_time = time.time()
  result = solver.run(f, history=history)
  end_time = time.time()
  print("-" * 35)
  print(f"Simulation complete in {end_time - start_time:.2f} seconds.")

  mass_0 = jnp.sum(f) * domain_config.dx * domain_config.dv
  print(f"Final Mass Error: {abs(history.mass[-1] - mass_0) / mass_0:.2e}")
  energy = jnp.array(history.total_energy)
  print(f"Total Energy Drift: {abs(energy[-1] - energy[0]) / energy[0]:.2e}")

  # --- Benchmarking ---
  print("\n--- Landau Damping Benchmark ---")
  # Theoretical decay rate of |E| for k=0.5 is gamma approx -0.1533.
  times = jnp.array(history.times)
  field_norm = jnp.array(history.field_norm)
  fitted_gamma = fit_damping_rate(times, field_norm, t_min=0.0, t_max=20.0)
  theoretical_gamma = -0.1533

  print(f"Fitted Decay Rate (gamma): {fitted_gamma:.4f}")
  print(f"Theoretical Decay Rate:    {theoretical_gamma:.4f}")
  print(f"Relative Error:            {abs((fitted_gamma - theoretical_gamma)/theoretical_gamma)*100:.2f}%")

  # Plot field norm.
  plt.figure(figsize=(6, 4))
  plt.semilogy(times, field_norm, label='Simulation')
  plt.semilogy(times, field_norm[0] * jnp.exp(theoretical_gamma * times),
               'r--', label=f'Theory (gamma={theoretical_gamma:.4f})')
  plt.xlabel('Time')
  plt.ylabel('||E||')
  plt.title('Landau Damping: Field Decay')
  plt.legend()
  plt.grid(True, alpha=0.3)
  plt.savefig('landau_field.png', dpi=150)
  print("Field plot saved to landau_field.png")

  # 5. Plotting phase space.
  print("\nPlotting phase space...")
  fig, axes = plt.subplots(1, 2, figsize=(12, 5))
  extent = [solver.x[0], solver.x[-1], solver.v[0], solver.v[-1]]

  im0 = axes[0].imshow(
      (f - jnp.mean(f, axis=0)).T, extent=extent, origin='lower',
      aspect='auto', cmap='viridis'
  )
  axes[0].set_title('Initial delta f (t=0)')
  axes[0].set_xlabel('x')
  axes[0].set_ylabel('v')
  fig.colorbar(im0, ax=axes[0])

  f_final = jnp.real(result.f_xv)
  im1 = axes[1].imshow(
      (f_final - jnp.mean(f_final, axis=0)).T, extent=extent, origin='lower',
      aspect='auto', cmap='viridis'
  )
  axes[1].set_title(f'Final delta f (t={result.time:.1f})')
  axes[1].set_xlabel('x')
  axes[1].set_ylabel('v')
  fig.colorbar(im1, ax=axes[1])

  plt.tight_layout()
  output_filename = 'landau_damping_phase_space.png'
  plt.savefig(output_filename, dpi=150)
  print(f"Phase space plot saved to {output_filename}")

if __name__ == "__main__":
  main()
