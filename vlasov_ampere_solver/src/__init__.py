from .config import DomainConfig, PhysicsConfig, SolverConfig
from .mesh import PeriodicMesh, x_mesh, v_mesh
from .poisson import compute_density, compute_field
from .advection import SpectralAdvector, spectral_shift, spectral_shift_with_field
from .vlasov_solver import TimeStepper, StepperStatus, SimulationResult
from .solver_types import StepOutput
from .external_fields import zero_field, driven_wave
from .initial_conditions import maxwellian, landau, two_stream
from .diagnostics import (
    History, field_energy, field_norm, kinetic_energy, total_mass, entropy,
    fit_damping_rate
)
from .sharding import create_mesh, get_phase_space_sharding

__all__ = [
    "DomainConfig",
    "PhysicsConfig",
    "SolverConfig",
    "PeriodicMesh",
    "x_mesh",
    "v_mesh",
    "compute_density",
    "compute_field",
    "SpectralAdvector",
    "spectral_shift",
    "spectral_shift_with_field",
    "TimeStepper",
    "StepperStatus",
    "SimulationResult",
    "StepOutput",
    "zero_field",
    "driven_wave",
    "maxwellian",
    "landau",
    "two_stream",
    "History",
    "field_energy",
    "field_norm",
    "kinetic_energy",
    "total_mass",
    "entropy",
    "fit_damping_rate",
    "create_mesh",
    "get_phase_space_sharding",
]
