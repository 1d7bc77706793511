import jax
import numpy as np
from jax.sharding import Mesh, NamedSharding, PartitionSpec

def create_mesh(num_devices: int | None = None, axis_name: str = 'batch') -> Mesh:
  """Creates a 1D JAX device mesh.

  Args:
    num_devices: Number of devices to use (default: all available).
    axis_name: Name of the mesh axis.

  Returns:
    JAX Mesh object.
  """
  devices = jax.devices()
  if num_devices is None:
    num_devices = len(devices)
  if num_devices < 1 or num_devices > len(devices):
    raise ValueError(
        f"Requested {num_devices} devices, {len(devices)} available"
    )
  return Mesh(np.array(devices[:num_devices]), (axis_name,))

def get_phase_space_sharding(mesh: Mesh, transform_axis: int = 0) -> NamedSharding:
  """Returns sharding spec for a 2D phase-space layout.

  Strategy: shard the axis that is not transformed, so every device holds
  whole 1D transforms; replicate the transformed axis.
  """
  axis_name = mesh.axis_names[0]
  if transform_axis == 0:
    return NamedSharding(mesh, PartitionSpec(None, axis_name))
  return NamedSharding(mesh, PartitionSpec(axis_name, None))
