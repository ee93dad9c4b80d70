"""Non-fatal findings recorded while building a desktop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IssueKind(str, Enum):
    """Why a declaration was dropped or overridden."""

    DUPLICATE_VIEW = "duplicate_view"
    DUPLICATE_VIEW_GROUP = "duplicate_view_group"
    DANGLING_VIEW = "dangling_view"
    DANGLING_VIEW_GROUP = "dangling_view_group"
    FORWARD_REFERENCE = "forward_reference"
    CYCLE = "cycle"
    UNKNOWN_CHILD_TYPE = "unknown_child_type"
    UNKNOWN_ROOT = "unknown_root"


@dataclass(frozen=True, slots=True)
class BuildIssue:
    """
    A reference or declaration the builder ignored.

    Attributes
    ----------
    kind:
        Issue category.
    group:
        View group whose declaration triggered the issue, or None for
        document-level issues.
    name:
        The offending name.
    message:
        Human-readable detail.
    """

    kind: IssueKind
    group: str | None
    name: str
    message: str

    @property
    def drops_reference(self) -> bool:
        return self.kind not in (IssueKind.DUPLICATE_VIEW, IssueKind.DUPLICATE_VIEW_GROUP)
