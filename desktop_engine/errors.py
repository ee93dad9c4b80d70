"""
Domain exceptions for splitdesk.

Notes
-----
Engine code raises these instead of generic exceptions. Lenient entry points
(see ``desktop_engine.desktop.build_desktop``) translate them into ``None``.
"""

from __future__ import annotations


class SplitdeskError(RuntimeError):
    """Base exception for all splitdesk domain failures."""


class DesktopBuildError(SplitdeskError):
    """Raised when a desktop cannot be built from a layout document."""


class DocumentParseError(DesktopBuildError):
    """Raised when a layout document cannot be read or is not a JSON object."""


class MissingFieldError(DesktopBuildError):
    """Raised when a required array or string is absent from the document."""


class DesktopNotFoundError(DesktopBuildError):
    """Raised when the requested desktop name is not declared."""


class NoViewGroupsError(DesktopBuildError):
    """Raised when the document declares no view groups."""


class DanglingReferenceError(DesktopBuildError):
    """Raised in strict mode when a child reference cannot be wired."""
