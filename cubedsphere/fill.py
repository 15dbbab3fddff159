import logging
from concurrent.futures import Executor
from typing import Optional

from ._timing import NullTimer, Timer
from .field import CubedSphereField
from .halo_updater import ScalarHaloUpdater, VectorHaloUpdater
from .types import VerticalHaloFiller
from .vertical import zero_gradient_vertical_fill


logger = logging.getLogger("cubedsphere")


def fill_vertical_halo_regions(
    field: CubedSphereField,
    vertical_filler: Optional[VerticalHaloFiller] = None,
    timer: Optional[Timer] = None,
):
    """Fill the bottom and top halos of every face, one face at a time.

    Args:
        field: field to fill, at any location
        vertical_filler (optional): single-face filler, by default halos repeat
            the nearest compute level
        timer (optional): timing of operations
    """
    if vertical_filler is None:
        vertical_filler = zero_gradient_vertical_fill
    if timer is None:
        timer = NullTimer()
    with timer.clock("vertical_halo"):
        for _, quantity in field:
            vertical_filler(quantity, field.n_halo)


def fill_halo_regions(
    field: CubedSphereField,
    vertical_filler: Optional[VerticalHaloFiller] = None,
    executor: Optional[Executor] = None,
    timer: Optional[Timer] = None,
):
    """Fill all halos of a scalar field, vertical first and then horizontal.

    Call this after the compute domain of every face has been updated and
    before any stencil reads halo points.

    A new ScalarHaloUpdater is built on every call. In a time loop, build one
    with ScalarHaloUpdater.from_field before the loop and call its update
    method every step instead, after fill_vertical_halo_regions.

    Args:
        field: field to fill
        vertical_filler (optional): single-face filler for bottom and top halos
        executor (optional): executor on which to run horizontal halo copies
        timer (optional): timing of operations

    Raises:
        UnsupportedLocationError: if the field is a horizontal velocity
            component, use fill_horizontal_velocity_halos instead
    """
    # build first so an unsupported location fails before anything is written
    updater = ScalarHaloUpdater.from_field(field, optional_timer=timer)
    logger.debug("filling halo regions of %r", field)
    fill_vertical_halo_regions(field, vertical_filler, timer)
    updater.update(executor)


def fill_horizontal_velocity_halos(
    u: CubedSphereField,
    v: CubedSphereField,
    executor: Optional[Executor] = None,
    timer: Optional[Timer] = None,
):
    """Fill the horizontal halos of a velocity pair, rotating vectors across edges.

    Vertical halos are not touched, fill them with fill_vertical_halo_regions.
    A new VectorHaloUpdater is built on every call, in a time loop build one
    with VectorHaloUpdater.from_fields before the loop and re-use it.

    Args:
        u: x-component of velocity, staggered in x
        v: y-component of velocity, staggered in y
        executor (optional): executor on which to run halo copies
        timer (optional): timing of operations
    """
    updater = VectorHaloUpdater.from_fields(u, v, optional_timer=timer)
    updater.update(executor)
