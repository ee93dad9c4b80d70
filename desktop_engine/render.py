"""
Rendering for built desktops.

Renders the composite tree of a Desktop, and its build issues, to
deterministic human-readable text. Regions are not resolved.
"""

from __future__ import annotations

from .composite import CompositeNode, ViewGroup
from .desktop import Desktop
from .view_registry import ViewRegistry


def render_desktop_text(desktop: Desktop, *, registry: ViewRegistry | None = None) -> str:
    """
    Render a desktop as deterministic plain text.

    Parameters
    ----------
    desktop:
        The desktop to render.
    registry:
        Optional registry. When given, leaves whose name is not registered are
        marked ``(unregistered)``.

    Returns
    -------
    str
        One line per node, indented by depth, followed by any build issues.
    """
    lines: list[str] = []
    lines.append(f"Desktop: {desktop.name}")

    if desktop.root is None:
        lines.append("(no root view group)")
    else:
        _render_node(desktop.root, depth=1, registry=registry, lines=lines)

    if desktop.issues:
        lines.append("")
        lines.append(f"Issues: {len(desktop.issues)}")
        for issue in desktop.issues:
            lines.append(f"- {issue.kind.value}: {issue.message}")

    return "\n".join(lines)


def _render_node(
    node: CompositeNode,
    *,
    depth: int,
    registry: ViewRegistry | None,
    lines: list[str],
) -> None:
    indent = "  " * depth
    if isinstance(node, ViewGroup):
        lines.append(f"{indent}[{node.orientation.value}] {node.name}")
        for child in node.children:
            _render_node(child, depth=depth + 1, registry=registry, lines=lines)
        return

    marker = ""
    if registry is not None and node.name not in registry:
        marker = " (unregistered)"
    lines.append(f"{indent}{node.name}{marker}")
