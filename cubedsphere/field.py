from typing import TYPE_CHECKING, Dict, Iterator, Sequence, Tuple

import numpy as np

from . import _xarray, constants
from ._exceptions import InvalidQuantityError
from .boundary import ExchangeBoundary
from .constants import FACES, N_FACES, Side
from .quantity import Quantity
from .types import Location


if TYPE_CHECKING:
    from .grid import CubedSphereGrid


class CubedSphereField:
    """A variable defined on all six faces of a cubed sphere.

    The field owns one Quantity per face, all with the same dimensions, units
    and shape. Each horizontal side of each face carries an ExchangeBoundary
    naming the face and side its halo is filled from.
    """

    def __init__(self, grid: "CubedSphereGrid", faces: Sequence[Quantity]):
        """
        Args:
            grid: grid the field is defined on
            faces: data for faces 1 through 6, in order

        Raises:
            InvalidQuantityError: if there are not six faces, or the faces
                do not share dims, units and array shape
        """
        if len(faces) != N_FACES:
            raise InvalidQuantityError(
                f"a cubed sphere field needs {N_FACES} faces, got {len(faces)}"
            )
        first = faces[0]
        for face_number, quantity in zip(FACES, faces):
            if (
                quantity.dims != first.dims
                or quantity.units != first.units
                or quantity.data.shape != first.data.shape
                or quantity.origin != first.origin
                or quantity.extent != first.extent
            ):
                raise InvalidQuantityError(
                    f"face {face_number} has dims {quantity.dims}, units "
                    f"{quantity.units} and shape {quantity.data.shape}, but face 1 "
                    f"has dims {first.dims}, units {first.units} and shape "
                    f"{first.data.shape}"
                )
        if not any(dim in constants.X_DIMS for dim in first.dims) or not any(
            dim in constants.Y_DIMS for dim in first.dims
        ):
            raise InvalidQuantityError(
                f"cubed sphere fields need x and y dimensions, got {first.dims}"
            )
        self._grid = grid
        self._faces = tuple(faces)
        self._boundaries = grid.exchange_boundaries()

    def __repr__(self):
        return (
            f"CubedSphereField(dims={self.dims}, units={self.units}, "
            f"location={self.location})"
        )

    @property
    def grid(self) -> "CubedSphereGrid":
        return self._grid

    @property
    def faces(self) -> Tuple[Quantity, ...]:
        """data of faces 1 through 6, in order"""
        return self._faces

    def face(self, face_number: int) -> Quantity:
        """Return the data of a face, numbered 1 through 6."""
        if face_number not in FACES:
            raise IndexError(f"face number must be one of {FACES}, got {face_number}")
        return self._faces[face_number - 1]

    def __iter__(self) -> Iterator[Tuple[int, Quantity]]:
        return iter(zip(FACES, self._faces))

    def boundary(self, face_number: int, side: Side) -> ExchangeBoundary:
        """Return the exchange metadata of one side of one face."""
        return self._boundaries[(face_number, side)]

    @property
    def boundaries(self) -> Dict[Tuple[int, Side], ExchangeBoundary]:
        return dict(self._boundaries)

    @property
    def dims(self) -> Tuple[str, ...]:
        return self._faces[0].dims

    @property
    def units(self) -> str:
        return self._faces[0].units

    @property
    def location(self) -> Location:
        """(x, y, z) staggering of the field"""
        return self._faces[0].location

    @property
    def n_halo(self) -> int:
        return self._grid.n_halo

    @property
    def data_array(self) -> _xarray.DataArray:
        """compute domain of all faces, stacked along a leading tile dimension"""
        return _xarray.DataArray(
            np.stack([quantity.view for quantity in self._faces]),
            dims=(constants.TILE_DIM,) + self.dims,
            coords={constants.TILE_DIM: list(FACES)},
            attrs={"units": self.units},
        )
