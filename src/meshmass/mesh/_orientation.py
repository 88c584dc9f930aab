"""Functions for checking and fixing the winding of mesh faces."""

import numpy as np


def compute_face_normal_centroid_dot_product(
    vertices: np.ndarray, faces: np.ndarray, epsilon: float = 1e-12
) -> np.ndarray:
    """Check the orientation of mesh faces relative to the mesh centroid.

    This computes the dot product of the face normal
    with the vector from the mesh centroid to face centroid
    for all faces.

    Positive values indicate outward-pointing normals
    and negative values indicate inward-pointing normals.
    The check is only meaningful for star-shaped meshes
    (e.g., convex meshes).

    Parameters
    ----------
    vertices : np.ndarray
        (n_vertices, 3) array of vertex coordinates.
    faces : np.ndarray
        (n_faces, 3) array of vertex indices for each face.
    epsilon : float, optional
        Small value to avoid division by zero when normalizing vectors.
        Default is 1e-12.

    Returns
    -------
    dot_products : np.ndarray
        (n_faces,) array containing the dot product for each face.
    """
    vertices = np.asarray(vertices, dtype=float)
    face_vertices = vertices[np.asarray(faces)]  # (n_faces, 3, 3)

    v0 = face_vertices[:, 0, :]
    v1 = face_vertices[:, 1, :]
    v2 = face_vertices[:, 2, :]

    normals = np.cross(v1 - v0, v2 - v0)
    normals /= np.linalg.norm(normals, axis=1, keepdims=True) + epsilon

    mesh_centroid = vertices.mean(axis=0)
    face_centroids = face_vertices.mean(axis=1)
    centroid_to_face = face_centroids - mesh_centroid
    centroid_to_face /= (
        np.linalg.norm(centroid_to_face, axis=1, keepdims=True) + epsilon
    )

    return np.einsum("ij,ij->i", normals, centroid_to_face)


def reverse_winding(faces: np.ndarray) -> np.ndarray:
    """Reverse the winding of every face.

    Parameters
    ----------
    faces : np.ndarray
        (n_faces, 3) array of vertex indices for each face.

    Returns
    -------
    flipped_faces : np.ndarray
        (n_faces, 3) array with the second and third vertex swapped.
    """
    return np.asarray(faces)[:, [0, 2, 1]]


def orient_faces_outward(vertices: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """Flip the faces whose normals point toward the mesh centroid.

    Parameters
    ----------
    vertices : np.ndarray
        (n_vertices, 3) array of vertex coordinates.
    faces : np.ndarray
        (n_faces, 3) array of vertex indices for each face.

    Returns
    -------
    oriented_faces : np.ndarray
        (n_faces, 3) copy of faces with outward-pointing normals.
    """
    faces = np.array(faces)
    normals_dot = compute_face_normal_centroid_dot_product(
        vertices=vertices,
        faces=faces,
    )
    flipped_faces_mask = normals_dot < 0
    faces[flipped_faces_mask, :] = faces[flipped_faces_mask][:, [2, 1, 0]]
    return faces
