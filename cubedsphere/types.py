from typing import TYPE_CHECKING, Tuple

from typing_extensions import Protocol

from .constants import Stagger


if TYPE_CHECKING:
    from .quantity import Quantity


Location = Tuple[Stagger, Stagger, Stagger]


class VerticalHaloFiller(Protocol):
    """Fills the bottom and top halos of one face using only that face's data."""

    def __call__(self, quantity: "Quantity", n_halo: int) -> None:
        ...
