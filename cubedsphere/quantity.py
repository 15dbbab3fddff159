import dataclasses
from typing import Dict, Sequence, Tuple

import numpy as np

from . import _xarray, constants
from ._exceptions import InvalidQuantityError
from .types import Location


__all__ = ["Quantity", "QuantityMetadata", "location_from_dims"]


@dataclasses.dataclass
class QuantityMetadata:
    origin: Tuple[int, ...]
    "the start of the computational domain"
    extent: Tuple[int, ...]
    "the shape of the computational domain"
    dims: Tuple[str, ...]
    "names of each dimension"
    units: str
    "units of the quantity"
    dtype: type
    "dtype of the data in the ndarray"

    @property
    def dim_lengths(self) -> Dict[str, int]:
        """mapping of dimension names to their lengths"""
        return dict(zip(self.dims, self.extent))

    @property
    def location(self) -> Location:
        """(x, y, z) staggering of the quantity"""
        return location_from_dims(self.dims)


def location_from_dims(dims: Sequence[str]) -> Location:
    """Return the (x, y, z) staggering implied by dimension names.

    Interface dimensions are staggered (FACE), center dimensions and
    missing dimensions are CENTER.
    """
    location = []
    for axis_dims in (constants.X_DIMS, constants.Y_DIMS, constants.Z_DIMS):
        if axis_dims[1] in dims:
            location.append(constants.FACE)
        else:
            location.append(constants.CENTER)
    return tuple(location)  # type: ignore[return-value]


def ensure_int_tuple(arg, arg_name):
    return_list = []
    for item in arg:
        try:
            return_list.append(int(item))
        except ValueError:
            raise TypeError(
                f"tuple arg {arg_name}={arg} contains item {item} of "
                f"unexpected type {type(item)}"
            )
    return tuple(return_list)


def _validate_quantity_property_lengths(shape, dims, origin, extent):
    n_dims = len(shape)
    for var, desc in (
        (dims, "dimension names"),
        (origin, "origins"),
        (extent, "extents"),
    ):
        if len(var) != n_dims:
            raise InvalidQuantityError(
                f"received {len(var)} {desc} for {n_dims} dimensions: {var}"
            )


class Quantity:
    """
    Data for one face of a field, with halo points around its compute domain.
    """

    def __init__(
        self,
        data: np.ndarray,
        dims: Sequence[str],
        units: str,
        origin: Sequence[int] = None,
        extent: Sequence[int] = None,
    ):
        """
        Initialize a Quantity.

        Args:
            data: ndarray containing the compute domain and its halo
            dims: dimension names for each axis
            units: units of the quantity
            origin: first point in data within the computational domain
            extent: number of points along each axis within the computational domain
        """
        if isinstance(data, (int, float, list)):
            data = np.asarray(data)
        if not isinstance(data, np.ndarray):
            raise TypeError(
                f"quantity underlying data is of unexpected type {type(data)}"
            )
        if origin is None:
            origin = (0,) * len(dims)
        if extent is None:
            extent = tuple(length - start for length, start in zip(data.shape, origin))
        _validate_quantity_property_lengths(data.shape, dims, origin, extent)
        self._data = data
        self._metadata = QuantityMetadata(
            origin=ensure_int_tuple(origin, "origin"),
            extent=ensure_int_tuple(extent, "extent"),
            dims=tuple(dims),
            units=units,
            dtype=data.dtype,
        )
        self._compute_slice = tuple(
            slice(start, start + length)
            for start, length in zip(self.origin, self.extent)
        )

    def __repr__(self):
        return (
            f"Quantity(\n    data=\n{self.data},\n    dims={self.dims},\n"
            f"    units={self.units},\n    origin={self.origin},\n"
            f"    extent={self.extent}\n)"
        )

    @property
    def metadata(self) -> QuantityMetadata:
        return self._metadata

    @property
    def units(self) -> str:
        """units of the quantity"""
        return self.metadata.units

    @property
    def dims(self) -> Tuple[str, ...]:
        """names of each dimension"""
        return self.metadata.dims

    @property
    def origin(self) -> Tuple[int, ...]:
        """the start of the computational domain"""
        return self.metadata.origin

    @property
    def extent(self) -> Tuple[int, ...]:
        """the shape of the computational domain"""
        return self.metadata.extent

    @property
    def location(self) -> Location:
        """(x, y, z) staggering of the quantity"""
        return self.metadata.location

    @property
    def data(self) -> np.ndarray:
        """the underlying array of data, including halo points"""
        return self._data

    @property
    def view(self) -> np.ndarray:
        """a writable view into the computational domain of the underlying data"""
        return self._data[self._compute_slice]

    @property
    def np(self):
        """numpy-like module used to interact with the data"""
        return np

    @property
    def attrs(self) -> dict:
        return {"units": self.units}

    @property
    def data_array(self) -> _xarray.DataArray:
        return _xarray.DataArray(self.view, dims=self.dims, attrs=self.attrs)
