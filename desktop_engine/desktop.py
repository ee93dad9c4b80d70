"""
Desktop construction.

Builds the composite tree for one named desktop of a layout document.

Wiring rules
------------
- View groups are wired in declaration order.
- A ``viewGroup`` child is wired only if the referenced group was fully wired
  earlier. Forward references and cycles are therefore dropped instead of
  producing an infinite tree.
- Dropped references are recorded as ``BuildIssue`` entries on the Desktop.
  With ``strict_references=True`` the first one raises instead.

Duplicate names are last-write-wins: a repeated view name replaces the earlier
leaf, and every declaration of a repeated view-group name wires its children
into the same (last constructed) group.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .composite import ViewGroup, ViewLeaf
from .data_models import ChildType, LayoutSpec, ViewGroupSpec
from .document import LayoutDocument
from .errors import (
    DanglingReferenceError,
    DesktopBuildError,
    DesktopNotFoundError,
    NoViewGroupsError,
)
from .issues import BuildIssue, IssueKind
from .regions import PlainSplitFactory, SplitFactory
from .view_registry import ViewRegistry

_log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Desktop:
    """
    A built desktop.

    Attributes
    ----------
    name:
        Desktop name.
    root:
        Root view group, or None when the desktop names an undeclared group.
    issues:
        Non-fatal findings, in the order they were encountered.
    """

    name: str
    root: ViewGroup | None
    issues: tuple[BuildIssue, ...] = ()

    def region(self) -> Any | None:
        """Resolve the root group's region; None without a root."""
        if self.root is None:
            return None
        return self.root.resolve()


class _IssueLog:
    def __init__(self, *, strict: bool) -> None:
        self._strict = strict
        self.items: list[BuildIssue] = []

    def add(self, kind: IssueKind, *, group: str | None, name: str, message: str) -> None:
        issue = BuildIssue(kind=kind, group=group, name=name, message=message)
        _log.debug("%s: %s", kind.value, message)
        if self._strict and issue.drops_reference:
            raise DanglingReferenceError(message)
        self.items.append(issue)


def build_desktop_strict(
    desktop_name: str,
    document: LayoutDocument,
    *,
    registry: ViewRegistry,
    split_factory: SplitFactory | None = None,
    strict_references: bool = False,
) -> Desktop:
    """
    Build the desktop named ``desktop_name``.

    Parameters
    ----------
    desktop_name:
        Name of a desktop declared in ``document``.
    document:
        Parsed layout document.
    registry:
        Registry the leaves resolve their widgets from.
    split_factory:
        Container factory for groups with several children. Defaults to
        ``PlainSplitFactory``.
    strict_references:
        Raise on the first dropped reference instead of recording it.

    Returns
    -------
    Desktop
        The built desktop.

    Raises
    ------
    MissingFieldError
        If a required array or string is absent.
    DesktopNotFoundError
        If ``desktop_name`` is not declared.
    NoViewGroupsError
        If the document declares no view groups.
    DanglingReferenceError
        In strict mode, if any reference cannot be wired.
    """
    factory: SplitFactory = split_factory if split_factory is not None else PlainSplitFactory()
    spec = LayoutSpec.from_document(document)

    desktop_map = {d.name: d for d in spec.desktops}
    desktop_spec = desktop_map.get(desktop_name)
    if desktop_spec is None:
        raise DesktopNotFoundError(f"No desktop found with name '{desktop_name}'.")
    root_name = desktop_spec.require_root()

    issues = _IssueLog(strict=strict_references)

    view_map: dict[str, ViewLeaf] = {}
    for view in spec.views:
        if view.name in view_map:
            issues.add(
                IssueKind.DUPLICATE_VIEW,
                group=None,
                name=view.name,
                message=f"View '{view.name}' is declared more than once; the last declaration wins.",
            )
        view_map[view.name] = ViewLeaf(view.name, registry)

    if not spec.view_groups:
        raise NoViewGroupsError("Layout document declares no view groups.")

    group_map: dict[str, ViewGroup] = {}
    for group_spec in spec.view_groups:
        if group_spec.name in group_map:
            issues.add(
                IssueKind.DUPLICATE_VIEW_GROUP,
                group=None,
                name=group_spec.name,
                message=(
                    f"View group '{group_spec.name}' is declared more than once; "
                    "all declarations wire into the last one."
                ),
            )
        group_map[group_spec.name] = ViewGroup(group_spec.name, group_spec.orientation, factory)

    root = group_map.get(root_name)
    if root is None:
        issues.add(
            IssueKind.UNKNOWN_ROOT,
            group=None,
            name=root_name,
            message=(
                f"Desktop '{desktop_name}' uses undeclared view group "
                f"'{root_name}'."
            ),
        )

    declared_groups = {g.name for g in spec.view_groups}
    declaration_counts = Counter(g.name for g in spec.view_groups)
    duplicated_groups = {name for name, count in declaration_counts.items() if count > 1}
    processed: dict[str, ViewGroup] = {}
    for group_spec in spec.view_groups:
        group = group_map[group_spec.name]
        _wire_children(
            group, group_spec, view_map, processed, declared_groups, duplicated_groups, issues
        )
        processed[group_spec.name] = group

    desktop = Desktop(name=desktop_name, root=root, issues=tuple(issues.items))
    _log.info(
        "Built desktop %r: %d views, %d view groups, %d issues",
        desktop_name,
        len(view_map),
        len(group_map),
        len(desktop.issues),
    )
    return desktop


def _wire_children(
    group: ViewGroup,
    group_spec: ViewGroupSpec,
    view_map: dict[str, ViewLeaf],
    processed: dict[str, ViewGroup],
    declared_groups: set[str],
    duplicated_groups: set[str],
    issues: _IssueLog,
) -> None:
    shared = group_spec.name in duplicated_groups
    for ref in group_spec.children:
        if ref.type == ChildType.VIEW.value:
            leaf = view_map.get(ref.name)
            if leaf is None:
                issues.add(
                    IssueKind.DANGLING_VIEW,
                    group=group_spec.name,
                    name=ref.name,
                    message=f"View group '{group_spec.name}' references undeclared view '{ref.name}'.",
                )
                continue
            group.add_child(leaf)

        elif ref.type == ChildType.VIEW_GROUP.value:
            target = processed.get(ref.name)
            if ref.name == group_spec.name or (
                shared and target is not None and _reaches(target, group)
            ):
                issues.add(
                    IssueKind.CYCLE,
                    group=group_spec.name,
                    name=ref.name,
                    message=f"View group '{group_spec.name}' would contain itself through '{ref.name}'.",
                )
                continue
            if target is None:
                if ref.name in declared_groups:
                    issues.add(
                        IssueKind.FORWARD_REFERENCE,
                        group=group_spec.name,
                        name=ref.name,
                        message=(
                            f"View group '{group_spec.name}' references '{ref.name}' "
                            "before it is declared; the reference is dropped."
                        ),
                    )
                else:
                    issues.add(
                        IssueKind.DANGLING_VIEW_GROUP,
                        group=group_spec.name,
                        name=ref.name,
                        message=(
                            f"View group '{group_spec.name}' references undeclared "
                            f"view group '{ref.name}'."
                        ),
                    )
                continue
            group.add_child(target)

        else:
            issues.add(
                IssueKind.UNKNOWN_CHILD_TYPE,
                group=group_spec.name,
                name=ref.name,
                message=f"View group '{group_spec.name}' has child '{ref.name}' of unknown type '{ref.type}'.",
            )


def _reaches(node: ViewGroup, target: ViewGroup) -> bool:
    # Only duplicate group names can make an already wired group reach the
    # group being wired; the wired part of the tree is acyclic.
    pending = [node]
    seen: set[int] = set()
    while pending:
        current = pending.pop()
        if current is target:
            return True
        if id(current) in seen:
            continue
        seen.add(id(current))
        pending.extend(c for c in current.children if isinstance(c, ViewGroup))
    return False


def build_desktop(
    desktop_name: str,
    document: LayoutDocument,
    *,
    registry: ViewRegistry,
    split_factory: SplitFactory | None = None,
) -> Desktop | None:
    """
    Build a desktop, returning None on failure.

    Failures are logged at WARNING. See ``build_desktop_strict`` for the
    parameters and failure conditions.
    """
    try:
        return build_desktop_strict(
            desktop_name, document, registry=registry, split_factory=split_factory
        )
    except DesktopBuildError as exc:
        _log.warning("Cannot build desktop %r: %s", desktop_name, exc)
        return None


def desktop_from_json_string(
    desktop_name: str,
    text: str,
    *,
    registry: ViewRegistry,
    split_factory: SplitFactory | None = None,
) -> Desktop | None:
    """Parse ``text`` and build a desktop, returning None on any failure."""
    try:
        document = LayoutDocument.from_string(text)
    except DesktopBuildError as exc:
        _log.warning("Cannot build desktop %r: %s", desktop_name, exc)
        return None
    return build_desktop(desktop_name, document, registry=registry, split_factory=split_factory)


def desktop_from_json_file(
    desktop_name: str,
    path: Path,
    *,
    registry: ViewRegistry,
    split_factory: SplitFactory | None = None,
) -> Desktop | None:
    """Read ``path`` and build a desktop, returning None on any failure."""
    try:
        document = LayoutDocument.from_file(path)
    except DesktopBuildError as exc:
        _log.warning("Cannot build desktop %r: %s", desktop_name, exc)
        return None
    return build_desktop(desktop_name, document, registry=registry, split_factory=split_factory)
