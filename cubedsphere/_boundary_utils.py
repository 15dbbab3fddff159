import functools
from typing import Optional, Sequence, Tuple

from . import constants
from ._exceptions import OutOfBoundsError
from .constants import Side


def get_boundary_slice(
    dims: Tuple[str, ...],
    origin: Tuple[int, ...],
    extent: Tuple[int, ...],
    shape: Tuple[int, ...],
    side: Side,
    n_points: int,
    interior: bool,
) -> Tuple[slice, ...]:
    """Return the index slices of a boundary or halo region of an array.

    Along the dimension normal to the side the region is n_points wide, along
    every other dimension it covers the compute domain only, so corner
    regions are never included.

    Args:
        dims: dimension names of the array
        origin: start of the compute domain along each dimension
        extent: length of the compute domain along each dimension
        shape: shape of the array
        side: side of the compute domain
        n_points: width of the region
        interior: if True, give points inside the compute domain adjacent to
            the side, otherwise give points in the halo

    Raises:
        OutOfBoundsError: if the region extends past the array
    """
    return _get_boundary_slice(
        tuple(dims),
        tuple(origin),
        tuple(extent),
        tuple(shape),
        side,
        n_points,
        interior,
    )


@functools.lru_cache(maxsize=None)
def _get_boundary_slice(dims, origin, extent, shape, side, n_points, interior):
    boundary_slice = []
    for dim, origin_1d, extent_1d, shape_1d in zip(dims, origin, extent, shape):
        # the edge point of a staggered dimension is shared with the neighbor
        if dim in constants.INTERFACE_DIMS:
            n_overlap = 1
        else:
            n_overlap = 0
        at_start = boundary_at_start_of_dim(side, dim)
        if at_start is None:
            start, stop = origin_1d, origin_1d + extent_1d
        elif at_start:
            edge_index = origin_1d
            if interior:
                edge_index += n_overlap
                start, stop = edge_index, edge_index + n_points
            else:
                start, stop = edge_index - n_points, edge_index
        else:
            edge_index = origin_1d + extent_1d
            if interior:
                edge_index -= n_overlap
                start, stop = edge_index - n_points, edge_index
            else:
                start, stop = edge_index, edge_index + n_points
        if start < 0:
            raise OutOfBoundsError(
                f"{side.value} boundary slice extends past start of "
                f"domain on dimension {dim}"
            )
        elif stop > shape_1d:
            raise OutOfBoundsError(
                f"{side.value} boundary slice extends past end of "
                f"domain on dimension {dim}"
            )
        else:
            boundary_slice.append(slice(start, stop))
    return tuple(boundary_slice)


def boundary_at_start_of_dim(side: Side, dim: str) -> Optional[bool]:
    """
    Return True if side is at the start of the dimension,
    False if at the end, None if the side does not align with the dimension.
    """
    return BOUNDARY_AT_START_OF_DIM_MAPPING[side].get(dim, None)


def get_horizontal_axes(dims: Sequence[str]) -> Tuple[int, int]:
    """Return the (x, y) axis indices of the given dimensions."""
    x_axis, y_axis = None, None
    for i, dim in enumerate(dims):
        if dim in constants.X_DIMS:
            x_axis = i
        elif dim in constants.Y_DIMS:
            y_axis = i
    if x_axis is None or y_axis is None:
        raise ValueError(f"dims {tuple(dims)} must include an x and a y dimension")
    return x_axis, y_axis


def get_vertical_axis(dims: Sequence[str]) -> Optional[int]:
    """Return the z axis index of the given dimensions, or None."""
    for i, dim in enumerate(dims):
        if dim in constants.Z_DIMS:
            return i
    return None


def _at_start(side_is_start: bool, axis_dims: Sequence[str]):
    return {dim: side_is_start for dim in axis_dims}


BOUNDARY_AT_START_OF_DIM_MAPPING = {
    constants.WEST: _at_start(True, constants.X_DIMS),
    constants.EAST: _at_start(False, constants.X_DIMS),
    constants.SOUTH: _at_start(True, constants.Y_DIMS),
    constants.NORTH: _at_start(False, constants.Y_DIMS),
    constants.BOTTOM: _at_start(True, constants.Z_DIMS),
    constants.TOP: _at_start(False, constants.Z_DIMS),
}
