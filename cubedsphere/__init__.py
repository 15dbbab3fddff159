from ._exceptions import (
    HaloShapeError,
    InvalidQuantityError,
    OutOfBoundsError,
    TopologyError,
    UnsupportedLocationError,
)
from ._timing import NullTimer, Timer
from ._xarray import to_dataset
from .boundary import ExchangeBoundary, boundary_view, halo_view
from .constants import (
    BOTTOM,
    CENTER,
    EAST,
    FACE,
    FACES,
    HORIZONTAL_DIMS,
    HORIZONTAL_SIDES,
    HORIZONTAL_VELOCITY_LOCATIONS,
    INTERFACE_DIMS,
    N_FACES,
    N_HALO_DEFAULT,
    NORTH,
    SOUTH,
    SPATIAL_DIMS,
    TILE_DIM,
    TOP,
    U_LOCATION,
    V_LOCATION,
    VERTICAL_SIDES,
    WEST,
    X_DIM,
    X_DIMS,
    X_INTERFACE_DIM,
    Y_DIM,
    Y_DIMS,
    Y_INTERFACE_DIM,
    Z_DIM,
    Z_DIMS,
    Z_INTERFACE_DIM,
    Axis,
    Side,
    Stagger,
)
from .field import CubedSphereField
from .fill import (
    fill_halo_regions,
    fill_horizontal_velocity_halos,
    fill_vertical_halo_regions,
)
from .grid import CubedSphereGrid
from .halo_updater import HaloCopy, HaloUpdater, ScalarHaloUpdater, VectorHaloUpdater
from .namelist import CubedSphereNamelist
from .quantity import Quantity, QuantityMetadata, location_from_dims
from .topology import FaceTopology, Neighbor, sides_in_the_same_dimension
from .vector_routing import VECTOR_ROUTES, Component, VectorRoute
from .vertical import no_vertical_fill, zero_gradient_vertical_fill


__version__ = "0.1.0"
__all__ = list(key for key in locals().keys() if not key.startswith("_"))
