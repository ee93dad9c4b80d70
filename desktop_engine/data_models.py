"""
Typed representation of a layout document.

These specs are build-time scratch state: ``desktop_engine.desktop`` reads them
once to assemble a composite tree and then discards them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Self

from .document import LayoutDocument
from .errors import MissingFieldError
from .orientation import Orientation


class ChildType(str, Enum):
    """Kinds of child reference inside a view group."""

    VIEW = "view"
    VIEW_GROUP = "viewGroup"


def _require_string(entry: LayoutDocument, key: str, *, context: str) -> str:
    value = entry.get_string(key)
    if value is None:
        raise MissingFieldError(f"Missing required string '{key}' in {context}.")
    return value


@dataclass(frozen=True, slots=True)
class ViewSpec:
    """Declares that a view with this name exists."""

    name: str

    @classmethod
    def from_document(cls, entry: LayoutDocument) -> Self:
        return cls(name=_require_string(entry, "name", context="view"))


@dataclass(frozen=True, slots=True)
class ChildRef:
    """
    Reference from a view group to one of its children.

    Attributes
    ----------
    type:
        Raw type string. "view" and "viewGroup" are understood; anything else
        is kept so the builder can report it.
    name:
        Name of the referenced view or view group.
    """

    type: str
    name: str

    @classmethod
    def from_document(cls, entry: LayoutDocument, *, parent: str) -> Self:
        context = f"child of view group '{parent}'"
        return cls(
            type=_require_string(entry, "type", context=context),
            name=_require_string(entry, "name", context=context),
        )


@dataclass(frozen=True, slots=True)
class ViewGroupSpec:
    """A named composite with an orientation and ordered child references."""

    name: str
    orientation: Orientation
    children: tuple[ChildRef, ...]

    @classmethod
    def from_document(cls, entry: LayoutDocument) -> Self:
        name = _require_string(entry, "name", context="view group")
        children = entry.objects("viewGroups") or []
        return cls(
            name=name,
            orientation=Orientation.parse(entry.get_string("orientation")),
            children=tuple(ChildRef.from_document(child, parent=name) for child in children),
        )


@dataclass(frozen=True, slots=True)
class DesktopSpec:
    """
    Selects the view group used as the root of a desktop.

    Attributes
    ----------
    name:
        Desktop name.
    root_view_group_name:
        Root view group name, or None when the entry has none. Only the
        selected desktop needs one; see ``require_root``.
    """

    name: str
    root_view_group_name: str | None

    @classmethod
    def from_document(cls, entry: LayoutDocument) -> Self:
        return cls(
            name=_require_string(entry, "name", context="desktop"),
            root_view_group_name=entry.get_string("viewGroup"),
        )

    def require_root(self) -> str:
        """
        Return the root view group name.

        Raises
        ------
        MissingFieldError
            If the desktop entry has no ``viewGroup`` string.
        """
        if self.root_view_group_name is None:
            raise MissingFieldError(f"Missing required string 'viewGroup' in desktop '{self.name}'.")
        return self.root_view_group_name


@dataclass(frozen=True, slots=True)
class LayoutSpec:
    """
    All declarations of a layout document, in declaration order.

    Attributes
    ----------
    desktops:
        Declared desktops.
    views:
        Declared views. Names may repeat; later entries win when indexed.
    view_groups:
        Declared view groups. Order matters for reference wiring.
    """

    desktops: tuple[DesktopSpec, ...]
    views: tuple[ViewSpec, ...]
    view_groups: tuple[ViewGroupSpec, ...]

    @classmethod
    def from_document(cls, document: LayoutDocument) -> Self:
        """
        Read the three top-level arrays of a layout document.

        Raises
        ------
        MissingFieldError
            If ``desktops``, ``views`` or ``viewGroups`` is absent or not an
            array, or if an entry lacks a required string.
        """
        arrays: dict[str, list[LayoutDocument]] = {}
        for key in ("desktops", "views", "viewGroups"):
            entries = document.objects(key)
            if entries is None:
                raise MissingFieldError(f"Layout document has no '{key}' array.")
            arrays[key] = entries

        return cls(
            desktops=tuple(DesktopSpec.from_document(e) for e in arrays["desktops"]),
            views=tuple(ViewSpec.from_document(e) for e in arrays["views"]),
            view_groups=tuple(ViewGroupSpec.from_document(e) for e in arrays["viewGroups"]),
        )
