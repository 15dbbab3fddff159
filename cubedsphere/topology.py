import dataclasses
import logging
from typing import Dict, Mapping, Tuple

from . import constants
from ._exceptions import TopologyError
from .constants import EAST, FACES, HORIZONTAL_SIDES, NORTH, SOUTH, WEST, Side


logger = logging.getLogger("cubedsphere")

__all__ = [
    "FaceTopology",
    "Neighbor",
    "CONFORMAL_CUBED_SPHERE_CONNECTIVITY",
    "sides_in_the_same_dimension",
]

# (face, side) -> (neighbor face, neighbor side) for the reference unfolding
# of the cube, faces numbered 1 through 6
CONFORMAL_CUBED_SPHERE_CONNECTIVITY: Mapping[Tuple[int, Side], Tuple[int, Side]] = {
    (1, WEST): (5, NORTH),
    (1, EAST): (2, WEST),
    (1, SOUTH): (6, NORTH),
    (1, NORTH): (3, WEST),
    (2, WEST): (1, EAST),
    (2, EAST): (4, SOUTH),
    (2, SOUTH): (6, EAST),
    (2, NORTH): (3, SOUTH),
    (3, WEST): (1, NORTH),
    (3, EAST): (4, WEST),
    (3, SOUTH): (2, NORTH),
    (3, NORTH): (5, WEST),
    (4, WEST): (3, EAST),
    (4, EAST): (6, SOUTH),
    (4, SOUTH): (2, EAST),
    (4, NORTH): (5, SOUTH),
    (5, WEST): (3, NORTH),
    (5, EAST): (6, WEST),
    (5, SOUTH): (4, NORTH),
    (5, NORTH): (1, WEST),
    (6, WEST): (5, EAST),
    (6, EAST): (2, SOUTH),
    (6, SOUTH): (4, EAST),
    (6, NORTH): (1, SOUTH),
}


def sides_in_the_same_dimension(side1: Side, side2: Side) -> bool:
    """True if both sides are normal to the same axis, e.g. west and east."""
    return constants.SIDE_AXIS[side1] is constants.SIDE_AXIS[side2]


@dataclasses.dataclass(frozen=True)
class Neighbor:
    """The face and side across a given side of a face."""

    face: int
    side: Side
    rotated: bool
    """
    True if the two faces meet with their local coordinate frames rotated by
    90 degrees, so data crossing the edge must be transposed and reversed.
    """


class FaceTopology:
    """Static adjacency graph of the six faces of a cubed sphere.

    The table is validated once on construction, lookups afterwards are plain
    dictionary accesses.
    """

    def __init__(self, connectivity: Mapping[Tuple[int, Side], Tuple[int, Side]]):
        """
        Args:
            connectivity: mapping from (face, side) to the (face, side) across
                that edge, for every face and horizontal side

        Raises:
            TopologyError: if the table is not total, closed, free of
                self-loops and reciprocal
        """
        _validate_connectivity(connectivity)
        self._neighbors: Dict[Tuple[int, Side], Neighbor] = {
            (face, side): Neighbor(
                face=to_face,
                side=to_side,
                rotated=not sides_in_the_same_dimension(side, to_side),
            )
            for (face, side), (to_face, to_side) in connectivity.items()
        }
        logger.debug(
            "built face topology with %d rotated edges",
            sum(neighbor.rotated for neighbor in self._neighbors.values()) // 2,
        )

    @classmethod
    def conformal(cls) -> "FaceTopology":
        """Topology of the conformal cubed sphere reference unfolding."""
        return cls(CONFORMAL_CUBED_SPHERE_CONNECTIVITY)

    def neighbor(self, face: int, side: Side) -> Neighbor:
        """Return the face and side adjacent to the given side of a face.

        Raises:
            TopologyError: for vertical sides, which have no neighboring face,
                or for unknown faces
        """
        try:
            return self._neighbors[(face, side)]
        except KeyError:
            raise TopologyError(
                f"no neighbor across side {side} of face {face}, only the "
                f"horizontal sides of faces {FACES} are connected"
            )

    def edges(self):
        """Iterate over (face, side, neighbor) for every connected side."""
        for (face, side), neighbor in self._neighbors.items():
            yield face, side, neighbor

    def __eq__(self, other):
        if not isinstance(other, FaceTopology):
            return NotImplemented
        return self._neighbors == other._neighbors

    def __hash__(self):
        return hash(frozenset(self._neighbors.items()))


def _validate_connectivity(connectivity):
    expected_keys = {(face, side) for face in FACES for side in HORIZONTAL_SIDES}
    missing = expected_keys - set(connectivity)
    if missing:
        raise TopologyError(
            f"connectivity is missing entries for {_describe_keys(missing)}"
        )
    extra = set(connectivity) - expected_keys
    if extra:
        raise TopologyError(f"connectivity has unexpected entries {extra}")
    for (face, side), target in connectivity.items():
        if target not in expected_keys:
            raise TopologyError(
                f"face {face} {side.value} side connects to {target}, "
                "which is not a horizontal side of a cube face"
            )
        to_face, to_side = target
        if to_face == face:
            raise TopologyError(f"face {face} {side.value} side connects to itself")
        # reciprocity also guarantees both directions agree on rotation
        back_face, back_side = connectivity[target]
        if (back_face, back_side) != (face, side):
            raise TopologyError(
                f"connectivity is not reciprocal: face {face} {side.value} -> "
                f"face {to_face} {to_side.value}, but face {to_face} "
                f"{to_side.value} -> face {back_face} {back_side.value}"
            )


def _describe_keys(keys):
    return sorted((face, side.value) for face, side in keys)
