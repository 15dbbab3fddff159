import logging
from concurrent.futures import Executor
from typing import Iterable, List, Optional, Sequence

import numpy as np

from . import constants
from ._boundary_utils import get_horizontal_axes, get_vertical_axis
from ._exceptions import (
    HaloShapeError,
    InvalidQuantityError,
    TopologyError,
    UnsupportedLocationError,
)
from ._timing import NullTimer, Timer
from .boundary import boundary_view, halo_view
from .constants import FACES, HORIZONTAL_SIDES, Side
from .field import CubedSphereField
from .rotate import transform_boundary_data
from .vector_routing import VECTOR_ROUTES, Component, VectorRoute


logger = logging.getLogger("cubedsphere")


class HaloCopy:
    """Fills one halo region of one face from a boundary region of another.

    Views into both arrays are taken once on construction. The destination
    halo and the source boundary always belong to different faces, so copies
    never alias each other and may run in any order or concurrently.
    """

    def __init__(
        self,
        destination: np.ndarray,
        source: np.ndarray,
        dims: Sequence[str],
        side: Side,
        rotated: bool,
        sign: int = 1,
        description: str = "",
    ):
        """
        Args:
            destination: writable view of the halo being filled
            source: view of the boundary supplying the data
            dims: dimension names of the source data
            side: side of the destination face the halo is on
            rotated: whether to transpose the data and reverse its tangential axis
            sign: factor applied to the data after it is transformed
            description: human-readable name used in error messages
        """
        self._destination = destination
        self._source = source
        self._dims = tuple(dims)
        self._side = side
        self._rotated = rotated
        self._sign = sign
        self.description = description

    def __call__(self):
        data = transform_boundary_data(
            self._source, self._dims, self._side, np, self._rotated
        )
        if data.shape != self._destination.shape:
            raise HaloShapeError(
                f"cannot fill {self.description}: boundary data has shape "
                f"{data.shape} but the halo has shape {self._destination.shape}"
            )
        if self._sign == 1:
            self._destination[...] = data
        else:
            np.multiply(data, self._sign, out=self._destination)

    def __repr__(self):
        return f"HaloCopy({self.description})"


class HaloUpdater:
    """Fills the horizontal halos of cubed sphere fields.

    Everything that does not depend on data values is computed when the
    updater is built, so it should be built once and re-used every time step.
    The caller must finish updating the compute domain of every face before
    calling update.
    """

    def __init__(self, copies: Iterable[HaloCopy], timer: Optional[Timer] = None):
        self._copies: List[HaloCopy] = list(copies)
        self._timer = timer if timer is not None else NullTimer()

    def __len__(self):
        return len(self._copies)

    @property
    def copies(self) -> List[HaloCopy]:
        return list(self._copies)

    def update(self, executor: Optional[Executor] = None):
        """Fill all halos.

        Args:
            executor (optional): if given, halo copies are submitted to it and
                may run concurrently, otherwise they run in order on the
                calling thread
        """
        logger.debug("filling %d halo regions", len(self._copies))
        with self._timer.clock("halo_copy"):
            if executor is None:
                for copy in self._copies:
                    copy()
            else:
                # consuming the results re-raises any exception from a copy
                list(executor.map(HaloCopy.__call__, self._copies))


class ScalarHaloUpdater(HaloUpdater):
    @classmethod
    def from_field(
        cls, field: CubedSphereField, optional_timer: Optional[Timer] = None
    ) -> "ScalarHaloUpdater":
        """Build an updater for the 24 horizontal halos of a scalar field.

        Across rotated edges boundary data is transposed and reversed along
        the axis tangential to the halo.

        Raises:
            UnsupportedLocationError: if the field is a horizontal velocity
                component, whose halos depend on the other component
        """
        if field.location in constants.HORIZONTAL_VELOCITY_LOCATIONS:
            raise UnsupportedLocationError(
                f"cannot fill halos of a field at location {_location_str(field)} "
                "as a scalar, use fill_horizontal_velocity_halos to fill "
                "velocity components"
            )
        copies = []
        for face in FACES:
            for side in HORIZONTAL_SIDES:
                boundary = field.boundary(face, side)
                copies.append(
                    HaloCopy(
                        destination=boundary.recv_view(field.face(face)),
                        source=boundary.send_view(field.face(boundary.to_face)),
                        dims=field.dims,
                        side=side,
                        rotated=boundary.rotated,
                        description=(
                            f"face {face} {side.value} halo from face "
                            f"{boundary.to_face} {boundary.to_side.value} boundary"
                        ),
                    )
                )
        logger.debug(
            "built scalar halo updater for %r with %d copies", field, len(copies)
        )
        return cls(copies, optional_timer)


class VectorHaloUpdater(HaloUpdater):
    @classmethod
    def from_fields(
        cls,
        u: CubedSphereField,
        v: CubedSphereField,
        routes: Sequence[VectorRoute] = VECTOR_ROUTES,
        optional_timer: Optional[Timer] = None,
    ) -> "VectorHaloUpdater":
        """Build an updater for the horizontal halos of a velocity pair.

        Args:
            u: x-component, staggered in x
            v: y-component, staggered in y
            routes: which component, face and side supplies each halo
            optional_timer: timing of operations

        Raises:
            InvalidQuantityError: if u and v are not at the velocity locations,
                live on different grids, have different dtypes or order their
                dimensions differently
            TopologyError: if a route disagrees with the grid topology
        """
        _validate_velocity_pair(u, v)
        fields = {Component.U: u, Component.V: v}
        copies = []
        for route in routes:
            _validate_route(route, u.grid.topology)
            destination = fields[route.component].face(route.face)
            source = fields[route.source_component].face(route.source_face)
            copies.append(
                HaloCopy(
                    destination=halo_view(destination, route.side),
                    source=boundary_view(source, route.source_side),
                    dims=source.dims,
                    side=route.side,
                    rotated=route.transpose,
                    sign=route.sign,
                    description=(
                        f"face {route.face} {route.side.value} "
                        f"{route.component.value} halo from face "
                        f"{route.source_face} {route.source_side.value} "
                        f"{route.source_component.value} boundary"
                    ),
                )
            )
        logger.debug("built vector halo updater with %d copies", len(copies))
        return cls(copies, optional_timer)


def _location_str(field: CubedSphereField) -> str:
    return "(" + ", ".join(stagger.value for stagger in field.location) + ")"


def _validate_velocity_pair(u: CubedSphereField, v: CubedSphereField):
    if u.location != constants.U_LOCATION:
        raise InvalidQuantityError(
            f"u must be staggered in x only, got location {_location_str(u)}"
        )
    if v.location != constants.V_LOCATION:
        raise InvalidQuantityError(
            f"v must be staggered in y only, got location {_location_str(v)}"
        )
    if u.grid != v.grid:
        raise InvalidQuantityError("u and v must be defined on the same grid")
    # components are copied into each other, so a cast could truncate or fail
    if u.face(1).metadata.dtype != v.face(1).metadata.dtype:
        raise InvalidQuantityError(
            f"u and v must have the same dtype, got {u.face(1).metadata.dtype} "
            f"and {v.face(1).metadata.dtype}"
        )
    if get_horizontal_axes(u.dims) != get_horizontal_axes(v.dims) or (
        get_vertical_axis(u.dims) != get_vertical_axis(v.dims)
    ):
        raise InvalidQuantityError(
            f"u and v must order their dimensions the same way, got {u.dims} "
            f"and {v.dims}"
        )


def _validate_route(route: VectorRoute, topology):
    neighbor = topology.neighbor(route.face, route.side)
    if (neighbor.face, neighbor.side) != (route.source_face, route.source_side):
        raise TopologyError(
            f"route for face {route.face} {route.side.value} reads face "
            f"{route.source_face} {route.source_side.value}, but the grid "
            f"connects it to face {neighbor.face} {neighbor.side.value}"
        )
    if neighbor.rotated != route.transpose:
        raise TopologyError(
            f"route for face {route.face} {route.side.value} has "
            f"transpose={route.transpose}, but the edge has "
            f"rotated={neighbor.rotated}"
        )
