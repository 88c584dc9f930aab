"""JAX implementation of the mesh mass properties.

The per-triangle contributions are evaluated for all faces at once and
reduced with a sum, so the whole accumulation compiles to a single
jitted kernel. Computations run in single precision unless JAX is
configured for 64 bit floats.
"""

import logging

import jax
import jax.numpy as jnp
import numpy as np
from jax import Array as JaxArray

from meshmass.errors import DegenerateVolumeError
from meshmass.mass import MassProperties
from meshmass.mass._mesh_mass_properties import _validate_mesh

logger = logging.getLogger(__name__)

# looser than the NumPy backend to absorb float32 rounding
DEFAULT_VOLUME_TOLERANCE = 1e-5


def compute_tetrahedron_volume(points: JaxArray) -> JaxArray:
    """Compute the signed volume of tetrahedra.

    Parameters
    ----------
    points : JaxArray
        (..., 4, 3) array containing the vertices of each tetrahedron.
        The triangle (1, 2, 3) is wound by the right-hand rule
        pointing away from point 0.

    Returns
    -------
    volume : JaxArray
        (...,) array of signed volumes.
    """
    p0 = points[..., 0, :]
    p1 = points[..., 1, :]
    p2 = points[..., 2, :]
    p3 = points[..., 3, :]
    face_normal = jnp.cross(p2 - p1, p3 - p2)
    return jnp.einsum("...i,...i->...", face_normal, p3 - p0) / 6.0


def _sum_of_pairwise_products(coordinates: JaxArray) -> JaxArray:
    total = coordinates.sum(axis=-1)
    return 0.5 * (total * total + (coordinates * coordinates).sum(axis=-1))


def compute_tetrahedron_inertia(mass: JaxArray, points: JaxArray) -> JaxArray:
    """Compute the inertia tensor of tetrahedra about their centroids.

    Parameters
    ----------
    mass : JaxArray
        (...,) array with the (signed) mass of each tetrahedron.
    points : JaxArray
        (..., 4, 3) array of tetrahedron vertices in their centroid frame.

    Returns
    -------
    inertia : JaxArray
        (..., 3, 3) symmetric inertia tensors.
    """
    inertia = jnp.zeros(points.shape[:-2] + (3, 3), dtype=points.dtype)
    for i in range(3):
        j = (i + 1) % 3
        k = (j + 1) % 3
        x_j = points[..., j]
        x_k = points[..., k]

        diagonal = (
            mass
            * 0.1
            * (_sum_of_pairwise_products(x_j) + _sum_of_pairwise_products(x_k))
        )
        off_diagonal = (
            -mass
            * 0.05
            * ((x_j * x_k).sum(axis=-1) + x_j.sum(axis=-1) * x_k.sum(axis=-1))
        )
        inertia = inertia.at[..., i, i].set(diagonal)
        inertia = inertia.at[..., j, k].set(off_diagonal)
        inertia = inertia.at[..., k, j].set(off_diagonal)
    return inertia


def _parallel_axis_term(shift: JaxArray, mass: JaxArray) -> JaxArray:
    distance_squared = jnp.einsum("...i,...i->...", shift, shift)
    outer = shift[..., :, None] * shift[..., None, :]
    term = distance_squared[..., None, None] * jnp.eye(3, dtype=shift.dtype) - outer
    return jnp.asarray(mass, dtype=shift.dtype)[..., None, None] * term


def apply_parallel_axis_theorem(
    inertia: JaxArray, shift: JaxArray, mass: JaxArray
) -> JaxArray:
    """Shift inertia tensors from the center of mass to a new origin.

    Parameters
    ----------
    inertia : JaxArray
        (..., 3, 3) inertia tensors about the center of mass.
    shift : JaxArray
        (..., 3) displacement from the new origin to the center of mass.
    mass : JaxArray
        (...,) mass of each body.

    Returns
    -------
    shifted_inertia : JaxArray
        (..., 3, 3) inertia tensors about the new origin.
    """
    inertia = jnp.asarray(inertia)
    shift = jnp.asarray(shift, dtype=inertia.dtype)
    return jax.lax.cond(
        jnp.any(shift != 0),
        lambda: inertia + _parallel_axis_term(shift, mass),
        lambda: inertia,
    )


def apply_inverse_parallel_axis_theorem(
    inertia: JaxArray, shift: JaxArray, mass: JaxArray
) -> JaxArray:
    """Shift inertia tensors from an origin back to the center of mass.

    Parameters
    ----------
    inertia : JaxArray
        (..., 3, 3) inertia tensors about the origin.
    shift : JaxArray
        (..., 3) displacement from the origin to the center of mass.
    mass : JaxArray
        (...,) mass of each body.

    Returns
    -------
    centered_inertia : JaxArray
        (..., 3, 3) inertia tensors about the center of mass.
    """
    inertia = jnp.asarray(inertia)
    shift = jnp.asarray(shift, dtype=inertia.dtype)
    return jax.lax.cond(
        jnp.any(shift != 0),
        lambda: inertia - _parallel_axis_term(shift, mass),
        lambda: inertia,
    )


@jax.jit
def _accumulate_tetrahedra(
    vertices: JaxArray, faces: JaxArray
) -> tuple[JaxArray, JaxArray, JaxArray, JaxArray]:
    """Sum the contributions of the origin-face tetrahedra."""
    face_vertices = vertices[faces]
    origin = jnp.zeros((faces.shape[0], 1, 3), dtype=vertices.dtype)
    tetrahedra = jnp.concatenate((origin, face_vertices), axis=1)

    volumes = compute_tetrahedron_volume(tetrahedra)
    centers = face_vertices.sum(axis=1) / 4.0

    tetrahedra_inertia = compute_tetrahedron_inertia(
        volumes, tetrahedra - centers[:, None, :]
    )
    tetrahedra_inertia = apply_parallel_axis_theorem(
        tetrahedra_inertia, centers, volumes
    )

    used_vertices = face_vertices.reshape(-1, 3)
    extent = jnp.max(used_vertices.max(axis=0) - used_vertices.min(axis=0))

    return (
        volumes.sum(),
        (volumes[:, None] * centers).sum(axis=0),
        tetrahedra_inertia.sum(axis=0),
        extent,
    )


@jax.jit
def _shift_to_center_of_mass(
    volume: JaxArray, weighted_center: JaxArray, origin_inertia: JaxArray
) -> tuple[JaxArray, JaxArray]:
    center_of_mass = weighted_center / volume
    inertia = apply_inverse_parallel_axis_theorem(
        origin_inertia, center_of_mass, volume
    )
    return center_of_mass, inertia


def compute_mass_properties(
    vertices,
    faces,
    volume_tolerance: float = DEFAULT_VOLUME_TOLERANCE,
) -> MassProperties:
    """Compute the volume, center of mass and inertia tensor of a closed mesh.

    This gives the same result as
    :func:`meshmass.mass.compute_mass_properties` with the accumulation
    done in a jitted JAX kernel. The mesh is validated and the degenerate
    volume check is made on the host, outside of the compiled functions.

    Parameters
    ----------
    vertices : array_like
        (n_vertices, 3) array containing the coordinates of each vertex.
    faces : array_like
        (n_faces, 3) array containing the index of each vertex in each face.
    volume_tolerance : float
        Relative tolerance for rejecting degenerate volumes.
        Default is 1e-5.

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
    if faces.shape[0] == 0:
        raise DegenerateVolumeError(0.0, "Mesh has no faces and encloses no volume.")

    volume, weighted_center, origin_inertia, extent = _accumulate_tetrahedra(
        jnp.asarray(vertices), jnp.asarray(faces)
    )
    volume_value = float(volume)
    logger.debug(
        f"Accumulated {faces.shape[0]} tetrahedra with total volume {volume_value}"
    )
    if (
        not np.isfinite(volume_value)
        or abs(volume_value) <= volume_tolerance * float(extent) ** 3
    ):
        raise DegenerateVolumeError(volume_value)
    if volume_value < 0:
        logger.warning(
            f"Mesh volume is negative ({volume_value}). "
            "The faces are probably wound inward."
        )

    center_of_mass, inertia = _shift_to_center_of_mass(
        volume, weighted_center, origin_inertia
    )
    return MassProperties(
        volume=volume_value,
        center_of_mass=np.asarray(center_of_mass),
        inertia_tensor=np.asarray(inertia),
    )
