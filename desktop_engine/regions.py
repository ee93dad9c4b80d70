"""
Split container abstraction.

Groups with two or more children ask a ``SplitFactory`` for a container. The
GUI supplies a Qt implementation; the engine ships a toolkit-neutral one so
layouts can be resolved and inspected without a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from .orientation import Orientation


class SplitFactory(Protocol):
    """Creates split containers for resolved child regions."""

    def create(self, orientation: Orientation, regions: Sequence[Any]) -> Any:
        """
        Create a split container.

        Parameters
        ----------
        orientation:
            Layout direction of the container.
        regions:
            Child regions in placement order (left to right, top to bottom).

        Returns
        -------
        Any
            The container region.
        """
        ...


@dataclass(frozen=True, slots=True)
class SplitRegion:
    """
    Toolkit-neutral split container.

    Attributes
    ----------
    orientation:
        Layout direction.
    items:
        Child regions in placement order.
    """

    orientation: Orientation
    items: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class PlainSplitFactory:
    """SplitFactory that produces ``SplitRegion`` values."""

    def create(self, orientation: Orientation, regions: Sequence[Any]) -> SplitRegion:
        return SplitRegion(orientation=orientation, items=tuple(regions))
