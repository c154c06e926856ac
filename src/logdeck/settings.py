"""Settings file I/O for logdeck.

Manages a JSON settings file at XDG_CONFIG_HOME/logdeck/settings.json.
Holds panel filter lists and output options. The active panel list itself
is never persisted; it is rebuilt from these settings on every run.

Import as: import logdeck.settings
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from logdeck.core.output_limits import OutputTargetFlags
from logdeck.core.selection import PanelFilterConfig

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / logdeck / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "logdeck" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def load_setting(key: str, default=None):
    """Load a single setting by key. Returns default if absent."""
    return load_settings().get(key, default)


def save_setting(key: str, value) -> None:
    """Save a single setting by key (merge into existing settings)."""
    data = load_settings()
    data[key] = value
    save_settings(data)


def _string_list(key: str) -> tuple[str, ...]:
    raw = load_setting(key, [])
    if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
        return tuple(raw)
    logger.warning("ignoring malformed setting %s=%r (expected a list of names)", key, raw)
    return ()


def load_panel_filter() -> PanelFilterConfig:
    """Enable/ignore panel lists from settings."""
    return PanelFilterConfig(
        enable_panels=_string_list("enable_panels"),
        ignore_panels=_string_list("ignore_panels"),
    )


def save_panel_filter(config: PanelFilterConfig) -> None:
    data = load_settings()
    data["enable_panels"] = list(config.enable_panels)
    data["ignore_panels"] = list(config.ignore_panels)
    save_settings(data)


def load_max_items() -> int:
    """Configured rows per panel; 0 when unset or malformed."""
    raw = load_setting("max_items", 0)
    # bool is an int subclass; reject it explicitly.
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    logger.warning("ignoring malformed setting max_items=%r", raw)
    return 0


def load_log_format():
    """Log-format descriptor string, or None when not configured."""
    raw = load_setting("log_format")
    return raw if isinstance(raw, str) and raw else None


def load_output_formats() -> tuple[str, ...]:
    return _string_list("output_formats")


def load_real_time_html() -> bool:
    return bool(load_setting("real_time_html", False))


def load_output_flags(
    *,
    extra_formats: tuple[str, ...] = (),
    max_items: int | None = None,
    real_time_html: bool | None = None,
    batch: bool = False,
    stdout_isatty: bool = True,
) -> OutputTargetFlags:
    """Output-target flags from settings, overridden by explicit values.

    ``extra_formats`` extend the stored output formats; ``max_items`` and
    ``real_time_html`` replace the stored values when not None. A report goes
    to standard output (``output_stdout``) for batch runs, whenever an output
    format is requested, or when stdout is not a terminal. Only the
    interactive dashboard has ``output_stdout`` False.
    """
    formats = load_output_formats() + tuple(extra_formats)
    return OutputTargetFlags(
        configured_max=max_items if max_items is not None else load_max_items(),
        output_stdout=batch or bool(formats) or not stdout_isatty,
        real_time_html=real_time_html if real_time_html is not None else load_real_time_html(),
        output_formats=formats,
        stdout_isatty=stdout_isatty,
    )
