import pytest
import jax.numpy as jnp
from vlasov_ampere_solver import (
    PeriodicMesh, History, StepOutput, field_energy, field_norm,
    kinetic_energy, total_mass, entropy, fit_damping_rate, zero_field,
    driven_wave, landau, two_stream, maxwellian
)

def test_field_energy_of_sine():
  x = PeriodicMesh.create(0.0, 2 * jnp.pi, 64)
  e = 2.0 * jnp.sin(x.points)
  # 0.5 * integral 4 sin^2 = 0.5 * 4 * pi.
  assert jnp.isclose(field_energy(e, x.step), 2 * jnp.pi)
  assert jnp.isclose(field_norm(e, x.step), jnp.sqrt(4 * jnp.pi))

def test_maxwellian_moments():
  x = PeriodicMesh.create(0.0, 4 * jnp.pi, 16)
  v = PeriodicMesh.create(-8.0, 8.0, 128)
  f = landau(x.points, v.points, eps=0.0)

  assert jnp.isclose(total_mass(f, x.step, v.step), 4 * jnp.pi)
  # 0.5 * <v^2> = 0.5 per unit length.
  assert jnp.isclose(kinetic_energy(f, v.points, x.step, v.step), 2 * jnp.pi)
  # Entropy of a unit Maxwellian: 0.5 * (1 + log(2 pi)) per unit length.
  assert jnp.isclose(
      entropy(f, x.step, v.step),
      4 * jnp.pi * 0.5 * (1 + jnp.log(2 * jnp.pi)),
      rtol=1e-8,
  )

def test_entropy_ignores_non_positive_cells():
  f = jnp.array([[0.0, -1e-3], [1.0, 0.5]])
  expected = -(0.5 * jnp.log(0.5))
  assert jnp.isclose(entropy(f, 1.0, 1.0), expected)

def test_two_stream_is_symmetric_and_normalized():
  x = PeriodicMesh.create(0.0, 10 * jnp.pi, 16)
  v = PeriodicMesh.create(-10.0, 10.0, 200)
  f = two_stream(x.points, v.points, eps=0.0, v0=2.4)

  assert jnp.isclose(jnp.sum(f[0]) * v.step, 1.0)
  assert jnp.isclose(jnp.sum(f[0] * v.points) * v.step, 0.0, atol=1e-10)
  assert jnp.allclose(maxwellian(v.points, drift=1.0),
                      maxwellian(-v.points, drift=-1.0))

def test_fit_damping_rate_on_synthetic_signal():
  t = jnp.arange(1, 400) * 0.05
  gamma = -0.2
  signal = jnp.exp(gamma * t) * jnp.abs(jnp.cos(1.4 * t))

  fitted = fit_damping_rate(t, signal, t_min=1.0, t_max=15.0)

  assert abs(fitted - gamma) < 0.01

def test_fit_damping_rate_needs_peaks():
  t = jnp.linspace(0.0, 1.0, 20)
  with pytest.raises(ValueError):
    fit_damping_rate(t, jnp.exp(-t))
  with pytest.raises(ValueError):
    fit_damping_rate(t, jnp.ones(5))

def test_history_records_each_step():
  x = PeriodicMesh.create(0.0, 4 * jnp.pi, 16)
  v = PeriodicMesh.create(-6.0, 6.0, 32)
  f = landau(x.points, v.points, eps=0.1).astype(complex)
  e = 0.2 * jnp.sin(0.5 * x.points)

  history = History()
  for step in (1, 2, 3):
    out = StepOutput(step=step, time=0.1 * step, e=e, f_xv=f, f_vx=f.T,
                     e_ext=zero_field(x.points, step, 0.1))
    history.record(out, x, v)

  assert len(history) == 3
  assert history.steps == [1, 2, 3]
  assert jnp.allclose(jnp.array(history.times), jnp.array([0.1, 0.2, 0.3]))
  assert history.field_energy[0] == pytest.approx(field_energy(e, x.step))
  assert history.mass[0] == pytest.approx(total_mass(f, x.step, v.step))
  assert history.total_energy[0] == pytest.approx(
      history.field_energy[0] + history.kinetic_energy[0]
  )

def test_external_field_generators():
  x = PeriodicMesh.create(0.0, 4 * jnp.pi, 32).points

  e = zero_field(x, 3, 0.1)
  assert e.shape == x.shape
  assert jnp.iscomplexobj(e)
  assert jnp.all(e == 0)

  drive = driven_wave(amplitude=0.5, k=0.5, omega=1.0, t_on=5.0, t_off=10.0,
                      rise_time=0.1)
  assert jnp.max(jnp.abs(drive(x, 0, 0.1))) < 1e-10
  assert jnp.allclose(drive(x, 75, 0.1), 0.5 * jnp.cos(0.5 * x - 7.5),
                      atol=1e-8)
  assert jnp.max(jnp.abs(drive(x, 200, 0.1))) < 1e-10

  with pytest.raises(ValueError):
    driven_wave(amplitude=1.0, k=1.0, omega=1.0, rise_time=0.0)
