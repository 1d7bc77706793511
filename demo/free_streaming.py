import jax
import jax.numpy as jnp
import time
import matplotlib.pyplot as plt
from vlasov_ampere_solver import PeriodicMesh, SpectralAdvector

jax.config.update("jax_enable_x64", True)

def main():
  print("Initializing Free Streaming Simulation...")

  # 1. Meshes.
  x_mesh = PeriodicMesh.create(0.0, 1.0, 64)
  v_mesh = PeriodicMesh.create(-1.0, 1.0, 64)
  dt = 0.01
  num_steps = 100

  # 2. Free streaming (E=0) is pure x transport at each column's velocity.
  advector = SpectralAdvector(x_mesh, axis=0)

  # 3. Initial Condition: Gaussian Pulse.
  print("Setting up initial conditions...")
  sigma = 0.1
  x_grid = x_mesh.points[:, None]
  v_grid = v_mesh.points[None, :]
  f0 = jnp.exp(-(x_grid - 0.5)**2 / (2 * sigma**2) - v_grid**2 / (2 * sigma**2))

  # 4. Time Loop.
  print(f"Starting simulation for {num_steps} steps...")
  start_time = time.time()
  f = f0.astype(complex)
  for _ in range(num_steps):
    f = advector.transport_half_step(f, v_mesh.points, dt)
  f.block_until_ready()
  t_final = num_steps * dt
  print(f"Simulation complete in {time.time() - start_time:.2f} seconds.")

  # 5. Analytical Solution Check.
  # f_analytical(x, v, t) = f0(x - v*t, v), wrapped onto the periodic box.
  L = x_mesh.period
  x_shifted = (x_grid - v_grid * t_final) % L
  f_analytical = jnp.exp(
      -(x_shifted - 0.5)**2 / (2 * sigma**2) - v_grid**2 / (2 * sigma**2)
  )

  error = jnp.abs(jnp.real(f) - f_analytical)
  print(f"Max Error: {jnp.max(error):.2e}")
  print(f"L2 Error:  {jnp.sqrt(jnp.mean(error**2)):.2e}")

  # 6. Plotting.
  print("Plotting results...")
  rho_final = jnp.sum(jnp.real(f), axis=1) * v_mesh.step
  rho_analytical = jnp.sum(f_analytical, axis=1) * v_mesh.step

  plt.figure(figsize=(8, 6))
  plt.plot(x_mesh.points, rho_final, label='Numerical', marker='o', markersize=4, linestyle='None')
  plt.plot(x_mesh.points, rho_analytical, label='Analytical', linestyle='--')
  plt.xlabel('x')
  plt.ylabel('Density')
  plt.title(f'Free Streaming: Density at t={t_final:.1f}')
  plt.legend()
  plt.grid(True, alpha=0.3)
  plt.savefig('free_streaming_results.png', dpi=150)
  print("Plot saved to free_streaming_results.png")

if __name__ == "__main__":
  main()
