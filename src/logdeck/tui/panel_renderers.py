"""Panel rendering logic - pure functions for building display text.

Shared by the interactive browser (Text) and the batch listing (Table).
"""

from rich.table import Table
from rich.text import Text

import logdeck.tui.action_config
from logdeck.core.modules import ModuleId
from logdeck.core.registry import ModuleRegistry
from logdeck.tui.panel_registry import PANEL_TITLES


def render_panel_header(module: ModuleId, position: int, count: int, max_rows: int) -> Text:
    """Title line for the current panel: '[2/13] Requested Files (URLs)  max 366 rows'."""
    text = Text()
    text.append("[{}/{}] ".format(position, count), style="dim")
    text.append(PANEL_TITLES[module], style="bold")
    text.append("  ({})".format(module.name), style="cyan")
    text.append("  max {} rows".format(max_rows), style="dim")
    return text


def render_panel_strip(registry: ModuleRegistry, current: ModuleId) -> Text:
    """One-line strip of active panel names with the current one highlighted."""
    text = Text()
    for idx, module in enumerate(registry):
        if idx:
            text.append(" · ", style="dim")
        style = "reverse bold" if module == current else ""
        text.append(module.name, style=style)
    if not len(registry):
        text.append("(no active panels)", style="dim italic")
    return text


def render_keys_hint() -> Text:
    text = Text()
    for idx, (key, label) in enumerate(logdeck.tui.action_config.KEY_HINTS):
        if idx:
            text.append("  ")
        text.append(key, style="bold")
        text.append(" " + label)
    return text


def render_panel_table(registry: ModuleRegistry, max_rows: int) -> Table:
    """Batch listing of active panels in display order."""
    table = Table(title="Active panels")
    table.add_column("#", justify="right")
    table.add_column("Panel")
    table.add_column("Title")
    table.add_column("Max rows", justify="right")
    for idx, module in enumerate(registry, start=1):
        table.add_row(str(idx), module.name, PANEL_TITLES[module], str(max_rows))
    return table
