"""Routing of horizontal velocity halos across the edges of the cubed sphere.

Where two faces meet with rotated coordinate frames, the x-component on one
face is carried by the y-component on the other, possibly with the opposite
sign. The table below lists, for every halo of every velocity component,
which component on which neighboring boundary supplies it.
"""
import dataclasses
import enum
from typing import Dict, Tuple

from .constants import EAST, NORTH, SOUTH, WEST, Side


class Component(enum.Enum):
    U = "u"
    V = "v"


U = Component.U
V = Component.V


@dataclasses.dataclass(frozen=True)
class VectorRoute:
    face: int
    side: Side
    component: Component
    "destination halo"
    source_face: int
    source_side: Side
    source_component: Component
    "boundary supplying the halo"
    sign: int
    "multiplies the data after it is transformed"
    transpose: bool
    "if True, rotate the data (transpose and reverse the tangential axis)"


def _route(face, side, component, source, sign, transpose):
    source_face, source_side, source_component = source
    return VectorRoute(
        face=face,
        side=side,
        component=component,
        source_face=source_face,
        source_side=source_side,
        source_component=source_component,
        sign=sign,
        transpose=transpose,
    )


# fmt: off
VECTOR_ROUTES: Tuple[VectorRoute, ...] = (
    _route(1, WEST,  U, (5, NORTH, V), +1, True),
    _route(1, WEST,  V, (5, NORTH, U), -1, True),
    _route(1, EAST,  U, (2, WEST,  U), +1, False),
    _route(1, EAST,  V, (2, WEST,  V), +1, False),
    _route(1, SOUTH, U, (6, NORTH, U), +1, False),
    _route(1, SOUTH, V, (6, NORTH, V), +1, False),
    _route(1, NORTH, U, (3, WEST,  V), -1, True),
    _route(1, NORTH, V, (3, WEST,  U), +1, True),

    _route(2, WEST,  U, (1, EAST,  U), +1, False),
    _route(2, WEST,  V, (1, EAST,  V), +1, False),
    _route(2, EAST,  U, (4, SOUTH, V), +1, True),
    _route(2, EAST,  V, (4, SOUTH, U), -1, True),
    _route(2, SOUTH, U, (6, EAST,  V), -1, True),
    _route(2, SOUTH, V, (6, EAST,  U), +1, True),
    _route(2, NORTH, U, (3, SOUTH, U), +1, False),
    _route(2, NORTH, V, (3, SOUTH, V), +1, False),

    _route(3, WEST,  U, (1, NORTH, V), +1, True),
    _route(3, WEST,  V, (1, NORTH, U), -1, True),
    _route(3, EAST,  U, (4, WEST,  U), +1, False),
    _route(3, EAST,  V, (4, WEST,  V), +1, False),
    _route(3, SOUTH, U, (2, NORTH, U), +1, False),
    _route(3, SOUTH, V, (2, NORTH, V), +1, False),
    _route(3, NORTH, U, (5, WEST,  V), -1, True),
    _route(3, NORTH, V, (5, WEST,  U), +1, True),

    _route(4, WEST,  U, (3, EAST,  U), +1, False),
    _route(4, WEST,  V, (3, EAST,  V), +1, False),
    _route(4, EAST,  U, (6, SOUTH, V), +1, True),
    _route(4, EAST,  V, (6, SOUTH, U), -1, True),
    _route(4, SOUTH, U, (2, EAST,  V), -1, True),
    _route(4, SOUTH, V, (2, EAST,  U), +1, True),
    _route(4, NORTH, U, (5, SOUTH, U), +1, False),
    _route(4, NORTH, V, (5, SOUTH, V), +1, False),

    _route(5, WEST,  U, (3, NORTH, V), +1, True),
    _route(5, WEST,  V, (3, NORTH, U), -1, True),
    _route(5, EAST,  U, (6, WEST,  U), +1, False),
    _route(5, EAST,  V, (6, WEST,  V), +1, False),
    _route(5, SOUTH, U, (4, NORTH, U), +1, False),
    _route(5, SOUTH, V, (4, NORTH, V), +1, False),
    _route(5, NORTH, U, (1, WEST,  V), -1, True),
    _route(5, NORTH, V, (1, WEST,  U), +1, True),

    _route(6, WEST,  U, (5, EAST,  U), +1, False),
    _route(6, WEST,  V, (5, EAST,  V), +1, False),
    _route(6, EAST,  U, (2, SOUTH, V), +1, True),
    _route(6, EAST,  V, (2, SOUTH, U), -1, True),
    _route(6, SOUTH, U, (4, EAST,  V), -1, True),
    _route(6, SOUTH, V, (4, EAST,  U), +1, True),
    _route(6, NORTH, U, (1, SOUTH, U), +1, False),
    _route(6, NORTH, V, (1, SOUTH, V), +1, False),
)
# fmt: on

ROUTES_BY_DESTINATION: Dict[Tuple[int, Side, Component], VectorRoute] = {
    (route.face, route.side, route.component): route for route in VECTOR_ROUTES
}
