import numpy as np

from meshmass.mass import (
    apply_parallel_axis_theorem,
    compute_box_inertia,
    compute_point_inertia,
    compute_tetrahedron_inertia,
    compute_tetrahedron_inertia_by_brute_force,
    compute_tetrahedron_volume,
)


def test_compute_box_inertia():
    """Check the closed form box inertia."""
    inertia = compute_box_inertia(12.0, np.array([1.0, 2.0, 3.0]))
    np.testing.assert_allclose(inertia, np.diag([13.0, 10.0, 5.0]))


def test_compute_point_inertia():
    """A point mass has inertia m * (|p|^2 E - p p^T)."""
    point = np.array([1.0, 2.0, 0.0])
    inertia = compute_point_inertia(point, 2.0)

    expected_inertia = np.array(
        [
            [8.0, -4.0, 0.0],
            [-4.0, 2.0, 0.0],
            [0.0, 0.0, 10.0],
        ]
    )
    np.testing.assert_allclose(inertia, expected_inertia)


def test_compute_point_inertia_origin():
    """A point at the origin has no inertia about the origin."""
    np.testing.assert_array_equal(
        compute_point_inertia(np.zeros(3), 5.0), np.zeros((3, 3))
    )


def test_compute_point_inertia_batch():
    """Inertia is computed for each point in a batch."""
    points = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 3.0]])
    inertia = compute_point_inertia(points, 1.0)

    assert inertia.shape == (3, 3, 3)
    np.testing.assert_array_equal(inertia[0], np.zeros((3, 3)))
    np.testing.assert_allclose(inertia[1], np.diag([0.0, 1.0, 1.0]))
    np.testing.assert_allclose(inertia[2], np.diag([9.0, 9.0, 0.0]))


def test_brute_force_matches_analytic_inertia():
    """The voxel integration should agree with the closed form expression."""
    points = np.array(
        [
            [0.0, 0.0, 0.0],
            [1.0, 0.2, 0.1],
            [0.3, 1.2, -0.2],
            [0.1, 0.4, 0.9],
        ]
    )
    volume = compute_tetrahedron_volume(points)
    centroid = points.mean(axis=0)

    # analytic inertia about the centroid moved to the origin
    inertia = compute_tetrahedron_inertia(volume, points - centroid)
    inertia = apply_parallel_axis_theorem(inertia, centroid, volume)

    brute_force_inertia = compute_tetrahedron_inertia_by_brute_force(points)

    # off-diagonals are smaller than the diagonals, compare on the diagonal scale
    scale = np.abs(np.diag(inertia)).max()
    np.testing.assert_allclose(
        np.diag(brute_force_inertia), np.diag(inertia), rtol=2e-2
    )
    np.testing.assert_allclose(brute_force_inertia, inertia, atol=2e-2 * scale)


def test_brute_force_unit_tetrahedron():
    """Check the voxel integration against the exact corner tetrahedron inertia."""
    points = np.array(
        [
            [0.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )
    inertia = compute_tetrahedron_inertia_by_brute_force(points, resolution=200)

    expected_inertia = np.full((3, 3), -1.0 / 120.0)
    np.fill_diagonal(expected_inertia, 1.0 / 30.0)
    np.testing.assert_allclose(inertia, expected_inertia, rtol=5e-2)
