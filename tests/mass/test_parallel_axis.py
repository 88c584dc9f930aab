import numpy as np
import pytest

from meshmass.mass import (
    apply_inverse_parallel_axis_theorem,
    apply_parallel_axis_theorem,
)


def _random_inertia(rng: np.random.Generator) -> np.ndarray:
    """Make a random symmetric tensor."""
    matrix = rng.normal(size=(3, 3))
    return matrix @ matrix.T


def test_apply_parallel_axis_theorem():
    """A point mass on the x axis adds m * d^2 to the y and z moments."""
    inertia = np.diag([1.0, 2.0, 3.0])
    shifted = apply_parallel_axis_theorem(inertia, np.array([2.0, 0.0, 0.0]), 3.0)
    np.testing.assert_allclose(shifted, np.diag([1.0, 14.0, 15.0]))


def test_apply_parallel_axis_theorem_off_diagonal():
    """Off-diagonal terms decrease by m * r_i * r_j."""
    shift = np.array([1.0, 2.0, 3.0])
    shifted = apply_parallel_axis_theorem(np.zeros((3, 3)), shift, 2.0)

    expected = 2.0 * (np.dot(shift, shift) * np.eye(3) - np.outer(shift, shift))
    np.testing.assert_allclose(shifted, expected)
    assert shifted[0, 1] == pytest.approx(-4.0)
    assert shifted[1, 2] == pytest.approx(-12.0)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_parallel_axis_round_trip(seed):
    """Forward then inverse (and the reverse) give back the tensor."""
    rng = np.random.default_rng(seed)
    inertia = _random_inertia(rng)
    shift = rng.normal(size=3) * 10
    mass = rng.uniform(-5.0, 5.0)

    forward = apply_parallel_axis_theorem(inertia, shift, mass)
    np.testing.assert_allclose(
        apply_inverse_parallel_axis_theorem(forward, shift, mass),
        inertia,
        atol=1e-10,
    )

    inverse = apply_inverse_parallel_axis_theorem(inertia, shift, mass)
    np.testing.assert_allclose(
        apply_parallel_axis_theorem(inverse, shift, mass),
        inertia,
        atol=1e-10,
    )


def test_parallel_axis_zero_shift():
    """A zero shift returns an unmodified copy."""
    inertia = np.diag([1.0, 2.0, 3.0])
    for shift_function in (
        apply_parallel_axis_theorem,
        apply_inverse_parallel_axis_theorem,
    ):
        shifted = shift_function(inertia, np.zeros(3), 10.0)
        np.testing.assert_array_equal(shifted, inertia)
        assert shifted is not inertia


def test_parallel_axis_does_not_mutate():
    """The input tensor is left unchanged."""
    inertia = np.eye(3)
    apply_parallel_axis_theorem(inertia, np.array([1.0, 1.0, 1.0]), 1.0)
    np.testing.assert_array_equal(inertia, np.eye(3))


def test_parallel_axis_batch():
    """Shifts broadcast over a stack of tensors, shifts and masses."""
    rng = np.random.default_rng(3)
    inertia = np.stack([_random_inertia(rng) for _ in range(4)])
    shifts = rng.normal(size=(4, 3))
    masses = rng.uniform(0.5, 2.0, size=4)

    shifted = apply_parallel_axis_theorem(inertia, shifts, masses)
    for i in range(4):
        np.testing.assert_allclose(
            shifted[i], apply_parallel_axis_theorem(inertia[i], shifts[i], masses[i])
        )
