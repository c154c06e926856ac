"""Panel selection policy: which modules are active at startup.

// [LAW:single-enforcer] build_registry is the only place a ModuleRegistry is
//   populated from configuration.

Precedence during construction: an enable entry overrides an ignore entry.
The prerequisite exclusion that runs afterwards does NOT honor that override;
a panel whose capability is missing is removed even when enabled, unless the
user already listed it under ignore.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from logdeck.core.errors import ModuleNotFound
from logdeck.core.modules import (
    DEFAULT_MODULE,
    DEFAULT_RESOLVER,
    TOTAL_MODULES,
    ModuleId,
    NameResolver,
)
from logdeck.core.registry import ModuleRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelFilterConfig:
    """User-supplied enable/ignore name lists. Read-only once loaded."""

    enable_panels: tuple[str, ...] = ()
    ignore_panels: tuple[str, ...] = ()


# [LAW:dataflow-not-control-flow] Capability prerequisites as data:
# module -> token that must appear in the log-format descriptor.
PANEL_PREREQUISITES: Mapping[ModuleId, str] = {
    ModuleId.VIRTUAL_HOSTS: "%v",
}


class PanelSelectionPolicy:
    """Classifies each module as enabled/ignored and builds the registry."""

    def __init__(self, config: PanelFilterConfig, resolver: NameResolver = DEFAULT_RESOLVER):
        self._config = config
        self._resolver = resolver

    @property
    def config(self) -> PanelFilterConfig:
        return self._config

    def _listed(self, names: tuple[str, ...], module: ModuleId) -> bool:
        for name in names:
            resolved = self._resolver.resolve(name)
            if resolved is None:
                logger.debug("skipping unresolved panel name %r", name)
                continue
            if resolved == module:
                return True
        return False

    def is_enabled(self, module: ModuleId) -> bool:
        return self._listed(self._config.enable_panels, module)

    def is_ignored(self, module: ModuleId) -> bool:
        return self._listed(self._config.ignore_panels, module)

    def build_registry(self) -> tuple[ModuleRegistry, ModuleId]:
        """Build the active registry in canonical order.

        Returns the registry and the first active module. When nothing is
        active the second item is the first canonical module, which is NOT
        added to the registry.
        """
        active = [
            module
            for module in ModuleId
            if not self.is_ignored(module) or self.is_enabled(module)
        ]
        registry = ModuleRegistry(active)
        if not active:
            logger.warning("every panel is ignored; falling back to %s", DEFAULT_MODULE.name)
        logger.debug("active panels: %s", ", ".join(m.name for m in active))
        return registry, registry.first()

    def apply_prerequisite_exclusion(
        self,
        registry: ModuleRegistry,
        module: ModuleId,
        capability_present: bool,
        user_declared_in_ignore_list: bool,
    ) -> bool:
        """Force-remove ``module`` when its capability is missing.

        Skipped when the capability is present or the user already ignored
        the panel by name. Returns True when a removal happened.
        """
        if capability_present or user_declared_in_ignore_list:
            return False

        if self.is_enabled(module):
            logger.info(
                "panel %s is enabled but its prerequisite is missing; removing anyway",
                module.name,
            )
        try:
            registry.remove(module)
        except ModuleNotFound:
            logger.debug("prerequisite exclusion: %s already inactive", module.name)
            return False
        return True

    def verify_panels(self, registry: ModuleRegistry, log_format: str | None) -> list[ModuleId]:
        """Run the startup prerequisite check against ``log_format``.

        Returns the modules that were removed. Nothing is removed when no
        log format is configured.
        """
        if not log_format:
            return []

        ignore_panels = self._config.ignore_panels
        if len(ignore_panels) >= TOTAL_MODULES:
            return []

        removed = []
        for module, token in PANEL_PREREQUISITES.items():
            if self.apply_prerequisite_exclusion(
                registry,
                module,
                capability_present=token in log_format,
                user_declared_in_ignore_list=module.name in ignore_panels,
            ):
                removed.append(module)
        return removed
