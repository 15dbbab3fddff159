from . import constants
from ._boundary_utils import get_horizontal_axes
from .constants import Side


def rotate_boundary_data(data, dims, destination_side: Side, numpy):
    """Rotate boundary data by 90 degrees to fit a halo on a rotated face.

    The x and y axes are swapped, then the axis tangential to the destination
    side is reversed (y for west/east halos, x for south/north halos).

    Args:
        data: boundary data of the neighboring face
        dims: dimension names of the data, x and y axes keep their positions
        destination_side: side of the face whose halo receives the data
        numpy: numpy-like module operating on data

    Returns:
        rotated view of the data
    """
    x_axis, y_axis = get_horizontal_axes(dims)
    data = numpy.swapaxes(data, x_axis, y_axis)
    if destination_side.axis is constants.Axis.X:
        tangential_axis = y_axis
    elif destination_side.axis is constants.Axis.Y:
        tangential_axis = x_axis
    else:
        raise ValueError(f"cannot rotate data into a {destination_side.value} halo")
    return numpy.flip(data, axis=tangential_axis)


def transform_boundary_data(data, dims, destination_side: Side, numpy, rotated: bool):
    """Return boundary data as it should appear in the destination halo."""
    if rotated:
        return rotate_boundary_data(data, dims, destination_side, numpy)
    else:
        return data
