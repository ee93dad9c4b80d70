from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

_log = logging.getLogger(__name__)

DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 800


@dataclass(frozen=True, slots=True)
class GuiSettings:
    """
    Persisted GUI settings.

    Notes
    -----
    These settings only provide defaults for the ``show`` command. Explicit
    command line arguments always take precedence.
    """

    layout_path: Path | None
    desktop_name: str | None
    window_width: int
    window_height: int

    @staticmethod
    def defaults() -> "GuiSettings":
        return GuiSettings(
            layout_path=None,
            desktop_name=None,
            window_width=DEFAULT_WINDOW_WIDTH,
            window_height=DEFAULT_WINDOW_HEIGHT,
        )


def default_data_root() -> Path:
    """
    Resolve the default splitdesk data root.

    Preference order:
    1) %SPLITDESK_DATA_ROOT% if set
    2) %LOCALAPPDATA%\\splitdesk
    3) %APPDATA%\\splitdesk
    4) ~/.splitdesk
    """
    override = os.environ.get("SPLITDESK_DATA_ROOT")
    if override:
        return Path(override)

    local = os.environ.get("LOCALAPPDATA")
    if local:
        return Path(local) / "splitdesk"

    roaming = os.environ.get("APPDATA")
    if roaming:
        return Path(roaming) / "splitdesk"

    return Path.home() / ".splitdesk"


def _settings_path(data_root: Path | None) -> Path:
    root = default_data_root() if data_root is None else data_root
    return root / "gui_settings.json"


def load_gui_settings(*, data_root: Path | None) -> GuiSettings:
    """
    Load GUI settings from disk.

    Parameters
    ----------
    data_root:
        Settings directory. If None, ``default_data_root()`` is used.

    Returns
    -------
    GuiSettings
        Loaded settings, or defaults if missing/unreadable. Invalid individual
        values fall back to their defaults.
    """
    path = _settings_path(data_root)
    try:
        raw = path.read_text(encoding="utf-8")
        payload = json.loads(raw)
    except FileNotFoundError:
        return GuiSettings.defaults()
    except (OSError, json.JSONDecodeError) as exc:
        _log.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return GuiSettings.defaults()

    if not isinstance(payload, dict):
        return GuiSettings.defaults()

    layout_raw = payload.get("layout_path")
    layout_path = Path(layout_raw) if isinstance(layout_raw, str) and layout_raw.strip() else None

    desktop_raw = payload.get("desktop_name")
    desktop_name = desktop_raw if isinstance(desktop_raw, str) and desktop_raw.strip() else None

    def _size(key: str, default: int) -> int:
        v = payload.get(key)
        if isinstance(v, int) and not isinstance(v, bool) and v > 0:
            return v
        return default

    return GuiSettings(
        layout_path=layout_path,
        desktop_name=desktop_name,
        window_width=_size("window_width", DEFAULT_WINDOW_WIDTH),
        window_height=_size("window_height", DEFAULT_WINDOW_HEIGHT),
    )


def save_gui_settings(*, data_root: Path | None, settings: GuiSettings) -> None:
    """
    Save GUI settings to disk.

    Parameters
    ----------
    data_root:
        Settings directory. If None, ``default_data_root()`` is used.
    settings:
        Settings to persist.
    """
    path = _settings_path(data_root)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "layout_path": str(settings.layout_path) if settings.layout_path is not None else None,
        "desktop_name": settings.desktop_name,
        "window_width": settings.window_width,
        "window_height": settings.window_height,
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
