"""Ordered, fixed-capacity registry of active report panels.

// [LAW:one-source-of-truth] The registry is the sole record of which panels
//   are active and in which order. Navigation reads nothing else.
// [LAW:no-shared-mutable-globals] Owned by whoever built it and passed
//   explicitly; there is no process-wide module list.

Lifecycle: built once at startup by PanelSelectionPolicy, possibly trimmed by
the prerequisite check, then read for the rest of the run. remove() may also
be called from the interactive browser.

Storage is a list of ``capacity`` slots. Active entries fill a contiguous
prefix in ascending canonical order; the remaining slots hold None.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from logdeck.core.errors import ModuleNotFound, PreconditionViolation
from logdeck.core.modules import DEFAULT_MODULE, TOTAL_MODULES, ModuleId

logger = logging.getLogger(__name__)


class ModuleRegistry:
    """Active panels as a sentinel-terminated prefix of fixed-size slots."""

    def __init__(self, modules: Iterable[ModuleId] = (), capacity: int = TOTAL_MODULES):
        active = list(modules)
        if len(active) > capacity:
            raise ValueError(
                "registry holds at most {} modules, got {}".format(capacity, len(active))
            )
        if len(set(active)) != len(active):
            raise ValueError("registry modules must be unique")
        if active != sorted(active):
            raise ValueError("registry modules must be in canonical order")

        self._capacity = capacity
        self._slots: list[ModuleId | None] = active + [None] * (capacity - len(active))

    @property
    def capacity(self) -> int:
        return self._capacity

    # -- Lookup ---------------------------------------------------------------

    def index_of(self, module: ModuleId) -> int | None:
        """Position of ``module`` within the active prefix, or None if inactive."""
        for idx, slot in enumerate(self._slots):
            if slot is None:
                break
            if slot == module:
                return idx
        return None

    def count(self) -> int:
        """Number of active entries (slots before the first sentinel)."""
        num = 0
        for slot in self._slots:
            if slot is None:
                break
            num += 1
        return num

    def contains(self, module: ModuleId) -> bool:
        return self.index_of(module) is not None

    def first(self) -> ModuleId:
        """First active module, or the default module when nothing is active."""
        head = self._slots[0] if self._slots else None
        return head if head is not None else DEFAULT_MODULE

    def active(self) -> tuple[ModuleId, ...]:
        return tuple(self)

    def slots(self) -> tuple[ModuleId | None, ...]:
        """Capacity-length view of the storage, None marking empty slots."""
        return tuple(self._slots)

    def __iter__(self) -> Iterator[ModuleId]:
        for slot in self._slots:
            if slot is None:
                return
            yield slot

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, module: object) -> bool:
        return isinstance(module, ModuleId) and self.contains(module)

    def __repr__(self) -> str:
        return "ModuleRegistry([{}])".format(", ".join(m.name for m in self))

    # -- Mutation -------------------------------------------------------------

    def remove(self, module: ModuleId) -> None:
        """Drop ``module`` and shift the entries after it one slot left.

        Raises ModuleNotFound when ``module`` is not active.
        """
        idx = self.index_of(module)
        if idx is None:
            raise ModuleNotFound(module)

        last = self._capacity - 1
        self._slots[idx:last] = self._slots[idx + 1:]
        self._slots[last] = None
        logger.info("panel removed module=%s remaining=%d", module.name, self.count())

    # -- Navigation -----------------------------------------------------------

    def next(self, module: ModuleId) -> ModuleId:
        """Circular successor of ``module`` over the active prefix.

        Raises PreconditionViolation when ``module`` is not active.
        """
        idx = self.index_of(module)
        if idx is None:
            raise PreconditionViolation(
                "cannot navigate from inactive module {}".format(module.name)
            )

        nxt = idx + 1
        if nxt == self._capacity or self._slots[nxt] is None:
            return self._slots[0]
        return self._slots[nxt]

    def prev(self, module: ModuleId) -> ModuleId:
        """Circular predecessor of ``module`` over the active prefix.

        An inactive ``module`` falls through to the tail wrap. An empty
        registry yields the default module.
        """
        idx = self.index_of(module)
        prv = idx - 1 if idx is not None else -2

        if prv >= 0 and self._slots[prv] is not None:
            return self._slots[prv]

        # Tail wrap scans every slot, not only the active prefix.
        for slot in reversed(self._slots):
            if slot is not None:
                return slot
        return DEFAULT_MODULE
