"""Functions to generate example meshes."""

import numpy as np
from skimage.measure import marching_cubes

from meshmass.mesh._orientation import orient_faces_outward

# unit box corners, indexed as in the faces below
_BOX_CORNERS = np.array(
    [
        [-0.5, -0.5, -0.5],
        [0.5, -0.5, -0.5],
        [0.5, 0.5, -0.5],
        [-0.5, 0.5, -0.5],
        [-0.5, -0.5, 0.5],
        [0.5, -0.5, 0.5],
        [0.5, 0.5, 0.5],
        [-0.5, 0.5, 0.5],
    ]
)

_BOX_FACES = np.array(
    [
        [0, 2, 1],
        [0, 3, 2],  # bottom
        [4, 5, 6],
        [4, 6, 7],  # top
        [0, 1, 5],
        [0, 5, 4],  # front
        [3, 6, 2],
        [3, 7, 6],  # back
        [1, 2, 6],
        [1, 6, 5],  # right
        [0, 4, 7],
        [0, 7, 3],  # left
    ]
)


def make_box_mesh(
    dimensions: tuple[float, float, float] = (1.0, 1.0, 1.0),
    center: tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> tuple[np.ndarray, np.ndarray]:
    """Create a closed mesh of an axis-aligned box.

    The box has 8 vertices and 12 triangular faces.
    The faces are wound so their normals point outward.

    Parameters
    ----------
    dimensions : tuple[float, float, float]
        The full edge lengths of the box along each axis.
    center : tuple[float, float, float]
        The position of the box center.

    Returns
    -------
    vertices : np.ndarray
        (8, 3) array containing the coordinates of each vertex.
    faces : np.ndarray
        (12, 3) array containing the index of each vertex in each face.
    """
    vertices = _BOX_CORNERS * np.asarray(dimensions, dtype=float) + np.asarray(
        center, dtype=float
    )
    return vertices, _BOX_FACES.copy()


def make_tetrahedron_mesh(points: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Create a closed mesh of a tetrahedron.

    Parameters
    ----------
    points : np.ndarray
        (4, 3) array of the tetrahedron vertices.
        The vertices must not be coplanar.

    Returns
    -------
    vertices : np.ndarray
        (4, 3) array containing the coordinates of each vertex.
    faces : np.ndarray
        (4, 3) array with outward wound faces.
    """
    vertices = np.array(points, dtype=float)
    faces = np.array(
        [
            [0, 2, 1],
            [0, 3, 2],
            [0, 1, 3],
            [1, 2, 3],
        ]
    )
    return vertices, orient_faces_outward(vertices, faces)


def make_sphere_mesh(
    radius: float = 1.0,
    center: tuple[float, float, float] = (0.0, 0.0, 0.0),
    n_voxels: int = 40,
) -> tuple[np.ndarray, np.ndarray]:
    """Create a closed mesh of a sphere with marching cubes.

    The sphere is sampled as a signed distance field on a cubic grid
    and its zero level set is extracted. The faces are oriented so
    their normals point outward.

    Parameters
    ----------
    radius : float
        The radius of the sphere.
    center : tuple[float, float, float]
        The position of the sphere center.
    n_voxels : int
        The number of grid samples across the sphere diameter.
        Larger values give a finer mesh.

    Returns
    -------
    vertices : np.ndarray
        (n_vertices, 3) array containing the coordinates of each vertex.
    faces : np.ndarray
        (n_faces, 3) array containing the index of each vertex in each face.
    """
    # pad the grid by two samples on each side to close the surface
    spacing = 2.0 * radius / n_voxels
    half_width = radius + 2 * spacing
    axis = np.arange(-half_width, half_width + 0.5 * spacing, spacing)
    x, y, z = np.meshgrid(axis, axis, axis, indexing="ij")
    distance = radius - np.sqrt(x**2 + y**2 + z**2)

    vertices, faces, _, _ = marching_cubes(
        distance, level=0.0, spacing=(spacing, spacing, spacing)
    )
    vertices = vertices + axis[0] + np.asarray(center, dtype=float)

    return vertices, orient_faces_outward(vertices, faces)
