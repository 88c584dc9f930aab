"""Analytic volume and inertia of a single tetrahedron."""

import numpy as np


def compute_tetrahedron_volume(points: np.ndarray) -> np.ndarray:
    """Compute the signed volume of a tetrahedron.

    The triangle (points[1], points[2], points[3]) is assumed to be
    wound by the right-hand rule with its normal pointing away from
    points[0]. If it is wound the other way, the volume is negative
    and the tetrahedron contributes negatively to mesh totals.

    Parameters
    ----------
    points : np.ndarray
        (..., 4, 3) array containing the vertices of the tetrahedron.

    Returns
    -------
    volume : np.ndarray
        (...,) array of signed volumes. A 0-d array for a single tetrahedron.
    """
    points = np.asarray(points)
    p0 = points[..., 0, :]
    p1 = points[..., 1, :]
    p2 = points[..., 2, :]
    p3 = points[..., 3, :]

    # (face_area * face_normal) = side_0 x side_1 / 2
    face_normal = np.cross(p2 - p1, p3 - p2)
    return np.einsum("...i,...i->...", face_normal, p3 - p0) / 6.0


def _sum_of_pairwise_products(coordinates: np.ndarray) -> np.ndarray:
    """Sum a_m * a_n over all vertex pairs with m <= n."""
    total = coordinates.sum(axis=-1)
    return 0.5 * (total * total + (coordinates * coordinates).sum(axis=-1))


def compute_tetrahedron_inertia(mass, points: np.ndarray) -> np.ndarray:
    """Compute the inertia tensor of a tetrahedron about its centroid.

    The vertices must already be expressed in the centroid frame of
    the tetrahedron, i.e. the sum of the points is approximately zero.
    The closed form expressions follow Tonon (2005), "Explicit exact
    formulas for the 3-D tetrahedron inertia tensor in terms of its
    vertex coordinates".

    The tensor has the form::

        | a   f   e |
        | f   b   d |
        | e   d   c |

    Parameters
    ----------
    mass : float or np.ndarray
        Mass of the tetrahedron. With unit density this is the
        signed volume, so a negatively wound tetrahedron yields a
        negative tensor. Shape (...,) when computing a batch.
    points : np.ndarray
        (..., 4, 3) array of the centered tetrahedron vertices.

    Returns
    -------
    inertia : np.ndarray
        (..., 3, 3) symmetric inertia tensor.
    """
    points = np.asarray(points)
    points = points.astype(np.result_type(points, 1.0))
    mass = np.asarray(mass, dtype=points.dtype)
    inertia = np.zeros(points.shape[:-2] + (3, 3), dtype=points.dtype)

    for i in range(3):
        j = (i + 1) % 3
        k = (j + 1) % 3
        x_j = points[..., j]
        x_k = points[..., k]

        inertia[..., i, i] = (
            mass
            * 0.1
            * (_sum_of_pairwise_products(x_j) + _sum_of_pairwise_products(x_k))
        )

        # 2 * sum_m(a_m b_m) + sum_{m != n}(a_m b_n)
        # == sum_m(a_m b_m) + sum(a) * sum(b)
        off_diagonal = (
            -mass
            * 0.05
            * ((x_j * x_k).sum(axis=-1) + x_j.sum(axis=-1) * x_k.sum(axis=-1))
        )
        inertia[..., j, k] = off_diagonal
        inertia[..., k, j] = off_diagonal

    return inertia
