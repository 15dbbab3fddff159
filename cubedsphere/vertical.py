"""Single-face fills of the bottom and top halos.

These never look at neighboring faces, so they are handed one Quantity at a
time. Any callable matching cubedsphere.types.VerticalHaloFiller can be used
in their place.
"""
from ._boundary_utils import get_vertical_axis
from .boundary import halo_view
from .constants import BOTTOM, TOP
from .quantity import Quantity


def zero_gradient_vertical_fill(quantity: Quantity, n_halo: int) -> None:
    """Fill vertical halos by repeating the nearest compute level.

    Quantities without a vertical dimension are left untouched.
    """
    z_axis = get_vertical_axis(quantity.dims)
    if z_axis is None:
        return
    bottom_level = quantity.origin[z_axis]
    top_level = bottom_level + quantity.extent[z_axis] - 1
    halo_view(quantity, BOTTOM, n_halo)[...] = _level(quantity, z_axis, bottom_level)
    halo_view(quantity, TOP, n_halo)[...] = _level(quantity, z_axis, top_level)


def no_vertical_fill(quantity: Quantity, n_halo: int) -> None:
    """Leave vertical halos as they are."""
    pass


def _level(quantity: Quantity, z_axis: int, level: int):
    # one level of the compute domain, kept as a length-1 axis to broadcast
    index = []
    for axis, (origin, extent) in enumerate(zip(quantity.origin, quantity.extent)):
        if axis == z_axis:
            index.append(slice(level, level + 1))
        else:
            index.append(slice(origin, origin + extent))
    return quantity.data[tuple(index)]
