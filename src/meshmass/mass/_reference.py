"""Closed-form and brute-force inertia used to verify the analytic path.

These functions are not used by :func:`compute_mass_properties`.
"""

import logging

import numpy as np
from tqdm import tqdm

from meshmass.mass._parallel_axis import apply_parallel_axis_theorem

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 400

# faces of a tetrahedron as (point index) triples
_TETRAHEDRON_FACES = np.array(
    [
        [0, 2, 1],
        [0, 3, 2],
        [0, 1, 3],
        [1, 2, 3],
    ]
)


def compute_box_inertia(mass: float, diagonal: np.ndarray) -> np.ndarray:
    """Compute the inertia tensor of a solid axis-aligned box.

    The tensor is taken about the center of the box::

                         | y^2 + z^2    0        0     |
        inertia = M/12 * |     0    z^2 + x^2    0     |
                         |     0        0    x^2 + y^2 |

    Parameters
    ----------
    mass : float
        The mass of the box.
    diagonal : np.ndarray
        (3,) array of the full edge lengths (x, y, z) of the box.

    Returns
    -------
    inertia : np.ndarray
        (3, 3) diagonal inertia tensor.
    """
    diagonal = np.asarray(diagonal, dtype=float)
    x, y, z = (mass / 12.0) * diagonal**2
    return np.diag([y + z, z + x, x + y])


def compute_point_inertia(point: np.ndarray, mass) -> np.ndarray:
    """Compute the inertia of point masses about the frame origin.

    Parameters
    ----------
    point : np.ndarray
        (..., 3) array of point positions.
    mass : float or np.ndarray
        Mass of each point.

    Returns
    -------
    inertia : np.ndarray
        (..., 3, 3) inertia tensor of each point. Zero for a point at the origin.
    """
    point = np.asarray(point, dtype=float)
    zero_inertia = np.zeros(point.shape[:-1] + (3, 3))
    return apply_parallel_axis_theorem(zero_inertia, point, mass)


def _compute_outward_face_planes(points: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Get a point on each face and the normal pointing away from the centroid."""
    center = points.mean(axis=0)
    face_points = points[_TETRAHEDRON_FACES]
    p0 = face_points[:, 0, :]
    p1 = face_points[:, 1, :]
    p2 = face_points[:, 2, :]

    normals = np.cross(p1 - p0, p2 - p1)
    normals /= np.linalg.norm(normals, axis=1, keepdims=True)

    # make sure the normals point away from the center
    inward = np.einsum("ij,ij->i", normals, p0 - center) < 0
    normals[inward] *= -1

    return p0, normals


def compute_tetrahedron_inertia_by_brute_force(
    points: np.ndarray,
    resolution: int = DEFAULT_RESOLUTION,
    progress: bool = False,
) -> np.ndarray:
    """Approximate the inertia of a tetrahedron by voxel integration.

    The bounding box of the tetrahedron is divided into cubic voxels
    with an edge length of (longest box edge / resolution). Every voxel
    center that lies behind all four face planes is treated as a point
    mass with the voxel's volume (unit density). The integration is
    done one x-slice at a time to bound memory use.

    This is slow and approximate and only meant to validate
    :func:`compute_tetrahedron_inertia`.

    Parameters
    ----------
    points : np.ndarray
        (4, 3) array of the tetrahedron vertices.
    resolution : int
        Number of voxels along the longest bounding box edge.
        Default is 400.
    progress : bool
        If True, show a progress bar over the slices. Default is False.

    Returns
    -------
    inertia : np.ndarray
        (3, 3) approximate inertia tensor about the frame origin.
    """
    points = np.asarray(points, dtype=float)
    if points.shape != (4, 3):
        raise ValueError(f"points must have shape (4, 3), got {points.shape}")

    plane_points, normals = _compute_outward_face_planes(points)

    # bounds of integration
    box_min = points.min(axis=0)
    box_max = points.max(axis=0)
    diagonal = box_max - box_min
    delta = diagonal.max() / resolution
    delta_volume = delta**3
    n_steps = np.maximum(np.ceil(diagonal / delta).astype(int), 1)
    x_centers, y_centers, z_centers = (
        box_min[axis] + (np.arange(n_steps[axis]) + 0.5) * delta for axis in range(3)
    )
    logger.info(
        f"Integrating tetrahedron inertia over {n_steps.tolist()} voxels "
        f"(delta={delta:.3g})"
    )

    y_grid, z_grid = np.meshgrid(y_centers, z_centers, indexing="ij")
    y_grid = y_grid.ravel()
    z_grid = z_grid.ravel()

    inertia = np.zeros((3, 3))
    for x in tqdm(x_centers, disable=not progress, desc="Integrating slices"):
        slice_points = np.column_stack((np.full_like(y_grid, x), y_grid, z_grid))

        # the point is inside the shape if it is behind all face planes
        inside = np.ones(slice_points.shape[0], dtype=bool)
        for plane_point, normal in zip(plane_points, normals):
            inside &= (slice_points - plane_point) @ normal <= 0.0

        if np.any(inside):
            slice_inertia = compute_point_inertia(slice_points[inside], delta_volume)
            inertia += slice_inertia.sum(axis=0)

    return inertia
