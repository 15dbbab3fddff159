import dataclasses
from typing import Callable, Dict, Iterable, Mapping, Sequence, Tuple, Union

import numpy as np

from . import constants
from ._exceptions import InvalidQuantityError
from .boundary import ExchangeBoundary
from .constants import FACES, HORIZONTAL_SIDES, N_HALO_DEFAULT, Side
from .field import CubedSphereField
from .namelist import CubedSphereNamelist
from .quantity import Quantity
from .topology import FaceTopology


@dataclasses.dataclass(frozen=True)
class CubedSphereGrid:
    """Sizes and connectivity of the six faces of a cubed sphere.

    Each face has nx by nx cells horizontally and nz levels, surrounded on every
    side by n_halo halo points. Interface (staggered) dimensions have one more
    compute point than the matching center dimension.
    """

    nx: int
    """number of cell centers along each horizontal edge of a face"""
    nz: int = 1
    """number of vertical levels"""
    n_halo: int = N_HALO_DEFAULT
    """number of halo points on every side of every face"""
    topology: FaceTopology = dataclasses.field(default_factory=FaceTopology.conformal)
    """face adjacency table, fixed for the lifetime of the grid"""

    def __post_init__(self):
        if self.nx < 1 or self.nz < 1:
            raise ValueError(
                f"grid needs at least one cell per face, got nx={self.nx}, "
                f"nz={self.nz}"
            )
        if self.n_halo < 1:
            raise ValueError(f"n_halo must be positive, got {self.n_halo}")
        if self.n_halo > self.nx:
            raise ValueError(
                f"n_halo={self.n_halo} is wider than the face, nx={self.nx}"
            )

    @classmethod
    def from_namelist(
        cls, namelist: Union[Mapping, CubedSphereNamelist]
    ) -> "CubedSphereGrid":
        """Initialize a CubedSphereGrid from a Fortran namelist.

        Args:
            namelist: the Fortran namelist as a dict, or an already parsed
                CubedSphereNamelist
        """
        if not isinstance(namelist, CubedSphereNamelist):
            namelist = CubedSphereNamelist.from_dict(namelist)
        return cls(nx=namelist.nx, nz=namelist.nz, n_halo=namelist.n_halo)

    @property
    def ny(self) -> int:
        """faces are square, so this is always nx"""
        return self.nx

    @property
    def dim_extents(self) -> Dict[str, int]:
        return {
            constants.X_DIM: self.nx,
            constants.X_INTERFACE_DIM: self.nx + 1,
            constants.Y_DIM: self.ny,
            constants.Y_INTERFACE_DIM: self.ny + 1,
            constants.Z_DIM: self.nz,
            constants.Z_INTERFACE_DIM: self.nz + 1,
        }

    def get_origin(self, dims: Iterable[str]) -> Tuple[int, ...]:
        return tuple(self.n_halo for _ in dims)

    def get_extent(self, dims: Iterable[str]) -> Tuple[int, ...]:
        extents = self.dim_extents
        return tuple(extents[dim] for dim in dims)

    def get_shape(self, dims: Iterable[str]) -> Tuple[int, ...]:
        return tuple(extent + 2 * self.n_halo for extent in self.get_extent(dims))

    def exchange_boundaries(self) -> Dict[Tuple[int, Side], ExchangeBoundary]:
        """Boundary metadata for every face and horizontal side."""
        boundaries = {}
        for face in FACES:
            for side in HORIZONTAL_SIDES:
                neighbor = self.topology.neighbor(face, side)
                boundaries[(face, side)] = ExchangeBoundary(
                    face=face,
                    side=side,
                    to_face=neighbor.face,
                    to_side=neighbor.side,
                    rotated=neighbor.rotated,
                )
        return boundaries

    def empty(
        self, dims: Sequence[str], units: str, dtype: type = float
    ) -> CubedSphereField:
        return self._allocate(np.empty, dims, units, dtype)

    def zeros(
        self, dims: Sequence[str], units: str, dtype: type = float
    ) -> CubedSphereField:
        return self._allocate(np.zeros, dims, units, dtype)

    def ones(
        self, dims: Sequence[str], units: str, dtype: type = float
    ) -> CubedSphereField:
        return self._allocate(np.ones, dims, units, dtype)

    def _allocate(
        self,
        allocator: Callable,
        dims: Sequence[str],
        units: str,
        dtype: type,
    ) -> CubedSphereField:
        unknown_dims = [dim for dim in dims if dim not in constants.SPATIAL_DIMS]
        if unknown_dims:
            raise InvalidQuantityError(
                f"dims {unknown_dims} are not spatial dimensions of the grid"
            )
        origin = self.get_origin(dims)
        extent = self.get_extent(dims)
        shape = self.get_shape(dims)
        faces = [
            Quantity(
                allocator(shape, dtype=dtype),
                dims=dims,
                units=units,
                origin=origin,
                extent=extent,
            )
            for _ in FACES
        ]
        return CubedSphereField(self, faces)
