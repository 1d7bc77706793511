from .src.config import DomainConfig, PhysicsConfig, SolverConfig
from .src.mesh import PeriodicMesh, x_mesh, v_mesh
from .src.poisson import compute_density, compute_field
from .src.advection import SpectralAdvector, spectral_shift, spectral_shift_with_field
from .src.vlasov_solver import TimeStepper, StepperStatus, SimulationResult
from .src.solver_types import StepOutput
from .src.external_fields import zero_field, driven_wave
from .src.initial_conditions import maxwellian, landau, two_stream
from .src.diagnostics import (
    History, field_energy, field_norm, kinetic_energy, total_mass, entropy,
    fit_damping_rate
)
from .src.sharding import create_mesh, get_phase_space_sharding

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
