import enum


X_DIM = "x"
X_INTERFACE_DIM = "x_interface"
Y_DIM = "y"
Y_INTERFACE_DIM = "y_interface"
Z_DIM = "z"
Z_INTERFACE_DIM = "z_interface"
TILE_DIM = "tile"
X_DIMS = (X_DIM, X_INTERFACE_DIM)
Y_DIMS = (Y_DIM, Y_INTERFACE_DIM)
Z_DIMS = (Z_DIM, Z_INTERFACE_DIM)
HORIZONTAL_DIMS = X_DIMS + Y_DIMS
INTERFACE_DIMS = (X_INTERFACE_DIM, Y_INTERFACE_DIM, Z_INTERFACE_DIM)
SPATIAL_DIMS = X_DIMS + Y_DIMS + Z_DIMS

N_FACES = 6
FACES = tuple(range(1, N_FACES + 1))
N_HALO_DEFAULT = 3


class Axis(enum.Enum):
    X = "x"
    Y = "y"
    Z = "z"


class Side(enum.Enum):
    WEST = "west"
    EAST = "east"
    SOUTH = "south"
    NORTH = "north"
    BOTTOM = "bottom"
    TOP = "top"

    @property
    def axis(self) -> Axis:
        """the axis normal to this side"""
        return SIDE_AXIS[self]

    @property
    def axis_dims(self):
        """the center and interface dimension names normal to this side"""
        return AXIS_DIMS[SIDE_AXIS[self]]


WEST = Side.WEST
EAST = Side.EAST
SOUTH = Side.SOUTH
NORTH = Side.NORTH
BOTTOM = Side.BOTTOM
TOP = Side.TOP
HORIZONTAL_SIDES = (WEST, EAST, SOUTH, NORTH)
VERTICAL_SIDES = (BOTTOM, TOP)

SIDE_AXIS = {
    WEST: Axis.X,
    EAST: Axis.X,
    SOUTH: Axis.Y,
    NORTH: Axis.Y,
    BOTTOM: Axis.Z,
    TOP: Axis.Z,
}

AXIS_DIMS = {
    Axis.X: X_DIMS,
    Axis.Y: Y_DIMS,
    Axis.Z: Z_DIMS,
}


class Stagger(enum.Enum):
    CENTER = "center"
    FACE = "face"


CENTER = Stagger.CENTER
FACE = Stagger.FACE

# (x, y, z) staggering of the horizontal velocity components
U_LOCATION = (FACE, CENTER, CENTER)
V_LOCATION = (CENTER, FACE, CENTER)
HORIZONTAL_VELOCITY_LOCATIONS = (U_LOCATION, V_LOCATION)
