import dataclasses
from typing import Optional

import numpy as np

from ._boundary_utils import get_boundary_slice
from .constants import Side
from .quantity import Quantity


def _default_n_points(quantity: Quantity, side: Side) -> int:
    # every spatial dimension carries the same halo width on both ends
    for dim, origin in zip(quantity.dims, quantity.origin):
        if dim in side.axis_dims:
            return origin
    raise ValueError(f"quantity with dims {quantity.dims} has no {side.value} side")


def boundary_view(
    quantity: Quantity, side: Side, n_points: Optional[int] = None
) -> np.ndarray:
    """Return a view of the compute-domain points adjacent to a side.

    These are the points other faces copy into their halos.

    Args:
        quantity: quantity for which to return a view
        side: side of the compute domain
        n_points (optional): width of the region, by default the halo width
    """
    if n_points is None:
        n_points = _default_n_points(quantity, side)
    boundary_slice = get_boundary_slice(
        quantity.dims,
        quantity.origin,
        quantity.extent,
        quantity.data.shape,
        side,
        n_points,
        interior=True,
    )
    return quantity.data[boundary_slice]


def halo_view(
    quantity: Quantity, side: Side, n_points: Optional[int] = None
) -> np.ndarray:
    """Return a writable view of the halo points beyond a side.

    Args:
        quantity: quantity for which to return a view
        side: side of the compute domain
        n_points (optional): width of the region, by default the halo width
    """
    if n_points is None:
        n_points = _default_n_points(quantity, side)
    halo_slice = get_boundary_slice(
        quantity.dims,
        quantity.origin,
        quantity.extent,
        quantity.data.shape,
        side,
        n_points,
        interior=False,
    )
    return quantity.data[halo_slice]


@dataclasses.dataclass(frozen=True)
class ExchangeBoundary:
    """Maps the halo beyond one side of a face to the face which supplies it."""

    face: int
    side: Side
    to_face: int
    to_side: Side
    rotated: bool
    """
    True if the local coordinate frames of the two faces are rotated by 90 degrees
    relative to each other across this boundary.
    """

    def send_view(self, source: Quantity, n_points: Optional[int] = None):
        """Return the view of points the neighboring face supplies to this halo.

        Args:
            source: data of the face given by to_face
            n_points (optional): the width of boundary to include
        """
        return boundary_view(source, self.to_side, n_points)

    def recv_view(self, destination: Quantity, n_points: Optional[int] = None):
        """Return the view of halo points filled across this boundary.

        Args:
            destination: data of the face given by face
            n_points (optional): the width of boundary to include
        """
        return halo_view(destination, self.side, n_points)
