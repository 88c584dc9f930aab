"""Volume, center of mass and inertia of a closed triangular mesh."""

import logging
from dataclasses import dataclass

import numpy as np

from meshmass.errors import DegenerateVolumeError, MeshIndexError
from meshmass.mass._parallel_axis import (
    apply_inverse_parallel_axis_theorem,
    apply_parallel_axis_theorem,
)
from meshmass.mass._tetrahedron import (
    compute_tetrahedron_inertia,
    compute_tetrahedron_volume,
)

logger = logging.getLogger(__name__)

# |volume| below this fraction of (bounding box extent)^3 is degenerate
DEFAULT_VOLUME_TOLERANCE = 1e-9


@dataclass(frozen=True)
class MassProperties:
    """Mass properties of a closed mesh with unit density.

    Parameters
    ----------
    volume : float
        Signed volume enclosed by the mesh.
        Negative if the mesh is wound inward.
    center_of_mass : np.ndarray
        (3,) array with the position of the center of mass.
    inertia_tensor : np.ndarray
        (3, 3) inertia tensor about the center of mass.
    """

    volume: float
    center_of_mass: np.ndarray
    inertia_tensor: np.ndarray

    def mass(self, density: float = 1.0) -> float:
        """Get the mass of the body for a uniform density."""
        return density * self.volume

    def scaled_inertia_tensor(self, density: float = 1.0) -> np.ndarray:
        """Get the inertia tensor about the center of mass for a uniform density."""
        return density * self.inertia_tensor

    def principal_axes(self) -> tuple[np.ndarray, np.ndarray]:
        """Compute the principal moments and axes of inertia.

        Returns
        -------
        moments : np.ndarray
            (3,) array of principal moments in ascending order.
        axes : np.ndarray
            (3, 3) array where column i is the axis of moments[i].
        """
        return np.linalg.eigh(self.inertia_tensor)


def _validate_mesh(vertices, faces) -> tuple[np.ndarray, np.ndarray]:
    """Coerce the mesh arrays and check the face indices."""
    vertices = np.asarray(vertices)
    vertices = vertices.astype(np.result_type(vertices, 1.0))
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(f"vertices must have shape (n, 3), got {vertices.shape}")

    faces = np.asarray(faces)
    if faces.size % 3 != 0:
        raise ValueError(
            f"faces must contain a multiple of 3 indices, got {faces.size}"
        )
    if faces.size > 0 and not np.issubdtype(faces.dtype, np.integer):
        raise ValueError(f"faces must contain integer indices, got {faces.dtype}")
    faces = faces.reshape(-1, 3).astype(np.intp)

    n_vertices = vertices.shape[0]
    out_of_bounds = (faces < 0) | (faces >= n_vertices)
    if np.any(out_of_bounds):
        face_index = int(np.argwhere(out_of_bounds)[0, 0])
        raise MeshIndexError(
            f"Face {face_index} {faces[face_index].tolist()} references a vertex "
            f"outside of the {n_vertices} mesh vertices."
        )

    return vertices, faces


def compute_mass_properties(
    vertices: np.ndarray,
    faces: np.ndarray,
    volume_tolerance: float = DEFAULT_VOLUME_TOLERANCE,
) -> MassProperties:
    """Compute the volume, center of mass and inertia tensor of a closed mesh.

    Each triangle forms a tetrahedron with the frame origin. Every
    tetrahedron contributes its signed volume, its volume-weighted
    centroid and its inertia (computed about its own centroid, then
    shifted to the origin) to the totals. The total inertia is finally
    shifted from the origin to the center of mass of the mesh.

    The mesh must be closed and wound by the right-hand rule so the
    face normals point outward. This is not checked: an open or
    inconsistently wound mesh gives a wrong result without error.

    Parameters
    ----------
    vertices : np.ndarray
        (n_vertices, 3) array containing the coordinates of each vertex.
    faces : np.ndarray
        (n_faces, 3) array containing the index of each vertex in each face.
        A flat array of 3 * n_faces indices is also accepted.
    volume_tolerance : float
        The mesh is rejected as degenerate when the magnitude of its
        volume is not larger than volume_tolerance * extent**3, where
        extent is the longest edge of the mesh bounding box.
        Default is 1e-9.

    Returns
    -------
    mass_properties : MassProperties
        The volume, center of mass and inertia tensor (about the
        center of mass) assuming unit density.

    Raises
    ------
    MeshIndexError
        If a face index is outside of the vertex array.
    DegenerateVolumeError
        If the enclosed volume is zero, negligible or not finite.
    """
    vertices, faces = _validate_mesh(vertices, faces)
    n_faces = faces.shape[0]
    if n_faces == 0:
        raise DegenerateVolumeError(0.0, "Mesh has no faces and encloses no volume.")

    # one tetrahedron per face, with the origin as the first point
    face_vertices = vertices[faces]  # (n_faces, 3, 3)
    origin = np.zeros((n_faces, 1, 3), dtype=vertices.dtype)
    tetrahedra = np.concatenate((origin, face_vertices), axis=1)  # (n_faces, 4, 3)

    volumes = compute_tetrahedron_volume(tetrahedra)

    # the origin does not contribute to the sum, but still counts as a point
    centers = face_vertices.sum(axis=1) / 4.0

    # inertia about each centroid, then shifted to the origin frame
    centered_tetrahedra = tetrahedra - centers[:, np.newaxis, :]
    tetrahedra_inertia = compute_tetrahedron_inertia(volumes, centered_tetrahedra)
    tetrahedra_inertia = apply_parallel_axis_theorem(
        tetrahedra_inertia, centers, volumes
    )

    # tally the results
    volume = volumes.sum()
    weighted_center = (volumes[:, np.newaxis] * centers).sum(axis=0)
    origin_inertia = tetrahedra_inertia.sum(axis=0)
    logger.debug(f"Accumulated {n_faces} tetrahedra with total volume {volume}")

    used_vertices = face_vertices.reshape(-1, 3)
    extent = float(np.max(used_vertices.max(axis=0) - used_vertices.min(axis=0)))
    if not np.isfinite(volume) or abs(volume) <= volume_tolerance * extent**3:
        raise DegenerateVolumeError(float(volume))
    if volume < 0:
        logger.warning(
            f"Mesh volume is negative ({volume}). "
            "The faces are probably wound inward."
        )

    center_of_mass = weighted_center / volume
    inertia = apply_inverse_parallel_axis_theorem(
        origin_inertia, center_of_mass, volume
    )

    return MassProperties(
        volume=float(volume),
        center_of_mass=center_of_mass,
        inertia_tensor=inertia,
    )
