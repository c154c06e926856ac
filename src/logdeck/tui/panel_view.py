"""Widgets showing the current panel and the active panel strip."""

from rich.text import Text
from textual.widgets import Static

import logdeck.tui.panel_renderers
from logdeck.core.modules import ModuleId
from logdeck.core.registry import ModuleRegistry


class PanelHeader(Static):
    """Title line of the current panel."""

    DEFAULT_CSS = """
    PanelHeader {
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text;
    }
    """

    def __init__(self):
        super().__init__("", id="panel-header")
        self._module: ModuleId | None = None
        self._rendered = Text()

    @property
    def module(self) -> ModuleId | None:
        return self._module

    @property
    def plain(self) -> str:
        return self._rendered.plain

    def show(self, module: ModuleId, position: int, count: int, max_rows: int) -> None:
        self._module = module
        self._rendered = logdeck.tui.panel_renderers.render_panel_header(
            module, position, count, max_rows
        )
        self.update(self._rendered)


class PanelStrip(Static):
    """Active panels in navigation order."""

    DEFAULT_CSS = """
    PanelStrip {
        height: auto;
        padding: 0 1;
        border-bottom: solid $primary-muted;
    }
    """

    def __init__(self):
        super().__init__("", id="panel-strip")
        self._rendered = Text()

    @property
    def plain(self) -> str:
        return self._rendered.plain

    def show(self, registry: ModuleRegistry, current: ModuleId) -> None:
        self._rendered = logdeck.tui.panel_renderers.render_panel_strip(registry, current)
        self.update(self._rendered)


class KeysHint(Static):
    DEFAULT_CSS = """
    KeysHint {
        dock: bottom;
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(self):
        super().__init__(logdeck.tui.panel_renderers.render_keys_hint(), id="keys-hint")
