class InvalidQuantityError(ValueError):
    pass


class OutOfBoundsError(IndexError):
    pass


class TopologyError(ValueError):
    """Raised when a face adjacency table is not a valid cube connectivity."""

    pass


class HaloShapeError(ValueError):
    """Raised when a boundary region cannot be assigned to a halo region."""

    pass


class UnsupportedLocationError(NotImplementedError):
    """Raised when a scalar halo fill is requested for a velocity component.

    Velocity components change meaning across rotated face edges, use
    fill_horizontal_velocity_halos for them instead.
    """

    pass
