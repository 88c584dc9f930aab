"""Move inertia tensors between a body's center of mass and another origin.

The parallel axis theorem states::

    I_shifted = I_cm + M * [ (R . R) E - R (x) R ]

where R . R is the inner product, R (x) R the outer product and E the
identity matrix.
"""

import numpy as np


def _parallel_axis_term(shift: np.ndarray, mass) -> np.ndarray:
    """Compute M * [(R . R) E - R (x) R] for (..., 3) shifts."""
    distance_squared = np.einsum("...i,...i->...", shift, shift)
    outer = shift[..., :, np.newaxis] * shift[..., np.newaxis, :]
    identity = np.eye(3, dtype=shift.dtype)
    term = distance_squared[..., np.newaxis, np.newaxis] * identity - outer
    return np.asarray(mass)[..., np.newaxis, np.newaxis] * term


def apply_parallel_axis_theorem(
    inertia: np.ndarray, shift: np.ndarray, mass
) -> np.ndarray:
    """Shift an inertia tensor from the center of mass to a new origin.

    Parameters
    ----------
    inertia : np.ndarray
        (..., 3, 3) inertia tensor about the center of mass of the body.
    shift : np.ndarray
        (..., 3) displacement from the new origin to the center of mass.
    mass : float or np.ndarray
        Mass of the body. May be negative for signed volumes.

    Returns
    -------
    shifted_inertia : np.ndarray
        (..., 3, 3) inertia tensor about the new origin.
        The input array is not modified.
    """
    inertia = np.asarray(inertia)
    shift = np.asarray(shift)
    inertia = np.array(inertia, dtype=np.result_type(inertia, shift, 1.0))
    shift = shift.astype(inertia.dtype)
    if not np.any(shift):
        return inertia
    return inertia + _parallel_axis_term(shift, mass)


def apply_inverse_parallel_axis_theorem(
    inertia: np.ndarray, shift: np.ndarray, mass
) -> np.ndarray:
    """Shift an inertia tensor from an origin back to the center of mass.

    This is the exact inverse of :func:`apply_parallel_axis_theorem`::

        I_cm = I_shifted - M * [ (R . R) E - R (x) R ]

    Parameters
    ----------
    inertia : np.ndarray
        (..., 3, 3) inertia tensor about the origin.
    shift : np.ndarray
        (..., 3) displacement from the origin to the center of mass.
    mass : float or np.ndarray
        Mass of the body.

    Returns
    -------
    centered_inertia : np.ndarray
        (..., 3, 3) inertia tensor about the center of mass.
        The input array is not modified.
    """
    inertia = np.asarray(inertia)
    shift = np.asarray(shift)
    inertia = np.array(inertia, dtype=np.result_type(inertia, shift, 1.0))
    shift = shift.astype(inertia.dtype)
    if not np.any(shift):
        return inertia
    return inertia - _parallel_axis_term(shift, mass)
