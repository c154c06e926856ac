"""Interactive panel browser using Textual.

// [LAW:one-source-of-truth] PanelCursor (and the registry it wraps) is the
//   sole navigation state. Widgets only render it.
// [LAW:single-enforcer] Keys map to actions only through action_config:
//   on_key for KEYMAP, priority BINDINGS for PRIORITY_KEYMAP.
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header

import logdeck.tui.action_config
from logdeck.core.navigation import PanelCursor
from logdeck.core.output_limits import OutputTargetFlags, max_rows
from logdeck.tui.panel_registry import PANEL_TITLES
from logdeck.tui.panel_view import KeysHint, PanelHeader, PanelStrip

logger = logging.getLogger(__name__)


class PanelBrowserApp(App):
    """Browse the active report panels one at a time."""

    TITLE = "logdeck"

    BINDINGS = [
        Binding(key, action, show=False, priority=True)
        for key, action in logdeck.tui.action_config.PRIORITY_KEYMAP.items()
    ]

    def __init__(self, cursor: PanelCursor, flags: OutputTargetFlags):
        super().__init__()
        self._cursor = cursor
        self._flags = flags

    @property
    def cursor(self) -> PanelCursor:
        return self._cursor

    def compose(self) -> ComposeResult:
        yield Header()
        yield PanelStrip()
        yield PanelHeader()
        yield KeysHint()

    def on_mount(self) -> None:
        self._refresh_panels()

    def _refresh_panels(self) -> None:
        cursor = self._cursor
        current = cursor.current
        self.sub_title = PANEL_TITLES[current]
        self.query_one(PanelStrip).show(cursor.registry, current)
        self.query_one(PanelHeader).show(
            current,
            cursor.position(),
            cursor.count(),
            max_rows(self._flags),
        )

    async def on_key(self, event) -> None:
        action_name = logdeck.tui.action_config.KEYMAP.get(event.key)
        if action_name:
            event.prevent_default()
            await self.run_action(action_name)

    def action_next_panel(self) -> None:
        self._cursor.next()
        self._refresh_panels()

    def action_prev_panel(self) -> None:
        self._cursor.prev()
        self._refresh_panels()

    def action_remove_panel(self) -> None:
        removed = self._cursor.remove_current()
        if removed is None:
            self.notify("The last panel cannot be hidden", severity="warning")
            return
        logger.info("panel hidden from browser module=%s", removed.name)
        self._refresh_panels()

    def action_quit(self) -> None:
        self.exit()
