"""
Name to widget registry.

The host application registers pre-built widgets here before a desktop is
resolved. Leaves look their widget up by name at resolve time, so a registry
may be filled after the desktop is built as long as it is filled before
``Desktop.region()`` is called.

Notes
-----
The registry is not thread safe. Registration from several threads must be
serialized by the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

_log = logging.getLogger(__name__)


class ViewRegistry:
    """Mutable mapping of view names to host-owned widgets."""

    def __init__(self) -> None:
        self._widgets: dict[str, Any] = {}

    def register(self, name: str, widget: Any) -> None:
        """
        Register ``widget`` under ``name``.

        Parameters
        ----------
        name:
            View name as used in layout documents.
        widget:
            Host-owned renderable. An existing registration is replaced.
        """
        if name in self._widgets:
            _log.debug("Replacing registered view %r", name)
        self._widgets[name] = widget

    def unregister(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._widgets.pop(name, None)

    def resolve(self, name: str) -> Any | None:
        """
        Look up the widget registered under ``name``.

        Returns
        -------
        Any | None
            The widget, or None when nothing is registered under ``name``.
        """
        return self._widgets.get(name)

    def names(self) -> tuple[str, ...]:
        """Return registered names in registration order."""
        return tuple(self._widgets)

    def __contains__(self, name: object) -> bool:
        return name in self._widgets

    def __len__(self) -> int:
        return len(self._widgets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._widgets)


_DEFAULT_REGISTRY = ViewRegistry()


def default_registry() -> ViewRegistry:
    """Return the process-wide registry for hosts that want a shared instance."""
    return _DEFAULT_REGISTRY
