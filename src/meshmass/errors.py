"""Exceptions raised by meshmass."""


class MeshIndexError(IndexError):
    """A face references a vertex index outside of the vertex array."""


class DegenerateVolumeError(ValueError):
    """The mesh encloses zero (or numerically negligible) volume.

    Parameters
    ----------
    volume : float
        The total signed volume that was computed for the mesh.
    message : str, optional
        Explanation of why the volume was rejected.
    """

    def __init__(self, volume: float, message: str | None = None):
        self.volume = volume
        if message is None:
            message = (
                f"Mesh volume {volume} is degenerate; "
                "the center of mass is undefined."
            )
        super().__init__(message)
