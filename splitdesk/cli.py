"""
Command-line interface for splitdesk.

Notes
-----
The CLI is thin. It parses arguments and delegates to engine and GUI modules.
The GUI is imported lazily so that the inspection commands work without a
display.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from desktop_engine.data_models import LayoutSpec
from desktop_engine.desktop import build_desktop_strict
from desktop_engine.document import LayoutDocument
from desktop_engine.errors import SplitdeskError
from desktop_engine.render import render_desktop_text
from desktop_engine.view_registry import ViewRegistry


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="splitdesk",
        description="Build split-pane desktops from JSON layout documents",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_p = sub.add_parser("list", help="List the desktops declared in a layout document")
    list_p.add_argument("layout", type=Path, help="Layout document (JSON)")

    inspect_p = sub.add_parser("inspect", help="Print the composite tree of a desktop")
    inspect_p.add_argument("layout", type=Path, help="Layout document (JSON)")
    inspect_p.add_argument("--desktop", required=True, help="Desktop name")

    validate_p = sub.add_parser(
        "validate",
        help="Report references dropped while building a desktop",
    )
    validate_p.add_argument("layout", type=Path, help="Layout document (JSON)")
    validate_p.add_argument("--desktop", required=True, help="Desktop name")
    validate_p.add_argument(
        "--strict",
        action="store_true",
        help="Fail (exit code 2) if any issue is reported.",
    )

    show_p = sub.add_parser("show", help="Open a desktop in a window")
    show_p.add_argument(
        "layout",
        type=Path,
        nargs="?",
        default=None,
        help="Layout document (JSON). Defaults to the last shown layout.",
    )
    show_p.add_argument("--desktop", default=None, help="Desktop name. Defaults to the last shown desktop.")
    show_p.add_argument(
        "--data-root",
        default=None,
        help="Override the settings directory. If omitted, defaults are used.",
    )
    show_p.add_argument(
        "--no-placeholders",
        action="store_true",
        help="Do not create placeholder panels for declared views.",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Parameters
    ----------
    argv:
        Optional argument vector. If None, argparse uses sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "list":
            spec = LayoutSpec.from_document(LayoutDocument.from_file(args.layout))
            for desktop in spec.desktops:
                print(f"{desktop.name}\t{desktop.root_view_group_name or '-'}")
            return 0

        if args.command == "inspect":
            document = LayoutDocument.from_file(args.layout)
            desktop = build_desktop_strict(args.desktop, document, registry=ViewRegistry())
            print(render_desktop_text(desktop))
            return 0

        if args.command == "validate":
            document = LayoutDocument.from_file(args.layout)
            desktop = build_desktop_strict(args.desktop, document, registry=ViewRegistry())
            if not desktop.issues:
                print(f"OK: desktop '{desktop.name}' has no issues.")
                return 0
            for issue in desktop.issues:
                print(f"{issue.kind.value}: {issue.message}")
            return 2 if args.strict else 0

        if args.command == "show":
            return _show(args)
    except SplitdeskError as exc:
        print(f"ERROR: {exc}")
        return 2

    parser.print_help()
    return 0


def _show(args: argparse.Namespace) -> int:
    from gui.app import run_desktop_app
    from gui.settings_store import load_gui_settings

    data_root = Path(args.data_root) if args.data_root else None
    settings = load_gui_settings(data_root=data_root)

    layout_path = args.layout if args.layout is not None else settings.layout_path
    desktop_name = args.desktop if args.desktop is not None else settings.desktop_name
    if layout_path is None or desktop_name is None:
        print("ERROR: no layout/desktop given and none remembered from a previous run.")
        return 2

    return run_desktop_app(
        layout_path,
        desktop_name,
        settings=settings,
        data_root=data_root,
        placeholders=not args.no_placeholders,
    )


if __name__ == "__main__":
    raise SystemExit(main())
