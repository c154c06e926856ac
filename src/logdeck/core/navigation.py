"""Current-panel cursor over a ModuleRegistry.

// [LAW:one-source-of-truth] The registry owns panel order; the cursor only
//   remembers which panel is current.
"""

from __future__ import annotations

import logging

from logdeck.core.modules import ModuleId
from logdeck.core.registry import ModuleRegistry
from logdeck.core.selection import PanelFilterConfig, PanelSelectionPolicy

logger = logging.getLogger(__name__)


class PanelCursor:
    """Tracks the current panel and moves it through the registry."""

    def __init__(self, registry: ModuleRegistry, current: ModuleId | None = None):
        self._registry = registry
        self._current = current if current is not None else registry.first()

    @property
    def registry(self) -> ModuleRegistry:
        return self._registry

    @property
    def current(self) -> ModuleId:
        return self._current

    def count(self) -> int:
        return self._registry.count()

    def position(self) -> int:
        """1-based position of the current panel, 0 when it is not active."""
        idx = self._registry.index_of(self._current)
        return 0 if idx is None else idx + 1

    def next(self) -> ModuleId:
        # The fallback module of an empty registry is not navigable.
        if self._registry.contains(self._current):
            self._current = self._registry.next(self._current)
        return self._current

    def prev(self) -> ModuleId:
        self._current = self._registry.prev(self._current)
        return self._current

    def remove_current(self) -> ModuleId | None:
        """Remove the current panel and move to its successor.

        The last active panel is kept. Returns the removed module, or None
        when nothing was removed.
        """
        if self._registry.count() <= 1 or not self._registry.contains(self._current):
            return None
        removed = self._current
        successor = self._registry.next(removed)
        self._registry.remove(removed)
        self._current = successor
        return removed


def build_cursor(config: PanelFilterConfig, log_format: str | None = None) -> PanelCursor:
    """Startup sequence: build the registry, run the prerequisite check, and
    place the cursor on the first active panel."""
    policy = PanelSelectionPolicy(config)
    registry, _first = policy.build_registry()
    removed = policy.verify_panels(registry, log_format)
    if removed:
        logger.info(
            "prerequisite check removed: %s", ", ".join(m.name for m in removed)
        )
    return PanelCursor(registry)
