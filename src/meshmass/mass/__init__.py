"""Mass properties of closed triangular meshes."""

from meshmass.mass._mesh_mass_properties import (
    DEFAULT_VOLUME_TOLERANCE,
    MassProperties,
    compute_mass_properties,
)
from meshmass.mass._parallel_axis import (
    apply_inverse_parallel_axis_theorem,
    apply_parallel_axis_theorem,
)
from meshmass.mass._reference import (
    DEFAULT_RESOLUTION,
    compute_box_inertia,
    compute_point_inertia,
    compute_tetrahedron_inertia_by_brute_force,
)
from meshmass.mass._tetrahedron import (
    compute_tetrahedron_inertia,
    compute_tetrahedron_volume,
)

__all__ = [
    "DEFAULT_RESOLUTION",
    "DEFAULT_VOLUME_TOLERANCE",
    "MassProperties",
    "apply_inverse_parallel_axis_theorem",
    "apply_parallel_axis_theorem",
    "compute_box_inertia",
    "compute_mass_properties",
    "compute_point_inertia",
    "compute_tetrahedron_inertia",
    "compute_tetrahedron_inertia_by_brute_force",
    "compute_tetrahedron_volume",
]
