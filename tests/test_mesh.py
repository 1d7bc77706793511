import pytest
import jax.numpy as jnp
from vlasov_ampere_solver import (
    DomainConfig, PhysicsConfig, PeriodicMesh, x_mesh, v_mesh
)

def test_mesh_points_exclude_endpoint():
  """Points are start + i * step and never reach stop."""
  mesh = PeriodicMesh.create(0.0, 4 * jnp.pi, 32)

  assert mesh.length == 32
  assert jnp.isclose(mesh.step, 4 * jnp.pi / 32)
  assert jnp.isclose(mesh.period, 4 * jnp.pi)
  assert mesh.points.shape == (32,)
  assert jnp.allclose(mesh.points, mesh.step * jnp.arange(32))
  assert jnp.all(mesh.points < mesh.stop)

def test_single_point_mesh():
  mesh = PeriodicMesh.create(-1.0, 1.0, 1)
  assert jnp.allclose(mesh.points, jnp.array([-1.0]))
  assert jnp.isclose(mesh.step, 2.0)

@pytest.mark.parametrize("start, stop, length", [
    (0.0, 1.0, 0),
    (0.0, 1.0, -4),
    (1.0, 1.0, 8),
    (2.0, 1.0, 8),
])
def test_invalid_mesh_raises(start, stop, length):
  with pytest.raises(ValueError):
    PeriodicMesh.create(start, stop, length)

def test_wavenumber_ordering():
  """k = 0, positive modes, then negative modes, scaled by 2 pi / L."""
  mesh = PeriodicMesh.create(0.0, 2 * jnp.pi, 8)
  expected = jnp.array([0, 1, 2, 3, -4, -3, -2, -1], dtype=float)
  assert jnp.allclose(mesh.wavenumbers(), expected)

  mesh = PeriodicMesh.create(0.0, 4 * jnp.pi, 8)
  assert jnp.allclose(mesh.wavenumbers(), 0.5 * expected)

def test_meshes_from_config():
  config = DomainConfig(x_min=0.0, x_max=4 * jnp.pi, v_min=-6.0, v_max=6.0,
                        nx=16, nv=24)
  xm = x_mesh(config)
  vm = v_mesh(config)

  assert xm.length == 16 and vm.length == 24
  assert jnp.isclose(xm.step, config.dx)
  assert jnp.isclose(vm.step, config.dv)
  assert jnp.isclose(vm.points[0], -6.0)

def test_mesh_is_immutable():
  mesh = PeriodicMesh.create(0.0, 1.0, 4)
  with pytest.raises(AttributeError):
    mesh.length = 8

@pytest.mark.parametrize("config", [
    DomainConfig(nx=0),
    DomainConfig(nv=0),
    DomainConfig(x_min=1.0, x_max=0.0),
    DomainConfig(v_min=6.0, v_max=-6.0),
])
def test_invalid_domain_config(config):
  with pytest.raises(ValueError):
    config.validate()

def test_physics_config():
  config = PhysicsConfig(final_time=2.0, n_steps=10)
  assert jnp.isclose(config.dt, 0.2)
  with pytest.raises(ValueError):
    PhysicsConfig(n_steps=0).validate()
  with pytest.raises(ValueError):
    PhysicsConfig(final_time=-1.0).validate()
