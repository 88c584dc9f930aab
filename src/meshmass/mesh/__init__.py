"""Tooling for working with 3D triangular meshes."""

from meshmass.mesh._orientation import (
    compute_face_normal_centroid_dot_product,
    orient_faces_outward,
    reverse_winding,
)
from meshmass.mesh._sample_data import (
    make_box_mesh,
    make_sphere_mesh,
    make_tetrahedron_mesh,
)

__all__ = [
    "compute_face_normal_centroid_dot_product",
    "make_box_mesh",
    "make_sphere_mesh",
    "make_tetrahedron_mesh",
    "orient_faces_outward",
    "reverse_winding",
]
