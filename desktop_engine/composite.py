"""
Composite layout tree.

A desktop layout is a tree of ``ViewLeaf`` and ``ViewGroup`` nodes. Both
produce a region on demand: a leaf yields its registered widget, a group yields
either its single child's region or a split container around its children.

Notes
-----
Regions are recomputed on every ``resolve()`` call; nothing is cached, so
orientation changes and late registry updates are picked up on the next call.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from .orientation import Orientation
from .regions import SplitFactory
from .view_registry import ViewRegistry

_log = logging.getLogger(__name__)


class CompositeNode(Protocol):
    """A node that can produce a renderable region, or none."""

    name: str

    def resolve(self) -> Any | None:
        ...


class ViewLeaf:
    """Leaf node referring to a registered widget by name."""

    def __init__(self, name: str, registry: ViewRegistry) -> None:
        self.name = name
        self._registry = registry

    def resolve(self) -> Any | None:
        widget = self._registry.resolve(self.name)
        if widget is None:
            _log.debug("No widget registered for view %r", self.name)
        return widget

    def __repr__(self) -> str:
        return f"ViewLeaf({self.name!r})"


class ViewGroup:
    """
    Ordered group of child nodes laid out in one direction.

    Children are appended during the build phase with ``add_child``; insertion
    order determines placement.
    """

    def __init__(
        self,
        name: str,
        orientation: Orientation | str | None,
        split_factory: SplitFactory,
    ) -> None:
        self.name = name
        self._orientation = Orientation.parse(orientation)
        self._split_factory = split_factory
        self._children: list[CompositeNode] = []

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def set_orientation(self, orientation: Orientation | str | None) -> None:
        """Change the orientation used by subsequent ``resolve()`` calls."""
        self._orientation = Orientation.parse(orientation)

    @property
    def children(self) -> tuple[CompositeNode, ...]:
        return tuple(self._children)

    def add_child(self, node: CompositeNode) -> None:
        self._children.append(node)

    def resolve(self) -> Any | None:
        """
        Produce this group's region.

        Returns
        -------
        Any | None
            None without children, the child's region for exactly one child,
            otherwise a split container holding the children's regions in
            order. Children without a region are skipped, so the container
            may hold fewer items than declared children, or none at all. Its
            existence depends only on the declared children.
        """
        if not self._children:
            return None
        if len(self._children) == 1:
            return self._children[0].resolve()

        regions: list[Any] = []
        for child in self._children:
            region = child.resolve()
            if region is None:
                _log.debug("Skipping child %r of group %r: no region", child.name, self.name)
                continue
            regions.append(region)

        return self._split_factory.create(self._orientation, regions)

    def __repr__(self) -> str:
        return f"ViewGroup({self.name!r}, {self._orientation.value!r}, children={len(self._children)})"
