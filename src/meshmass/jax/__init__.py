"""JAX implementation of the mesh mass properties."""

from meshmass.jax._mass_properties import (
    DEFAULT_VOLUME_TOLERANCE,
    apply_inverse_parallel_axis_theorem,
    apply_parallel_axis_theorem,
    compute_mass_properties,
    compute_tetrahedron_inertia,
    compute_tetrahedron_volume,
)

__all__ = [
    "DEFAULT_VOLUME_TOLERANCE",
    "apply_inverse_parallel_axis_theorem",
    "apply_parallel_axis_theorem",
    "compute_mass_properties",
    "compute_tetrahedron_inertia",
    "compute_tetrahedron_volume",
]
