"""Tests for ModuleRegistry: lookup, removal and circular navigation."""

import pytest

from logdeck.core.errors import ModuleNotFound, PreconditionViolation
from logdeck.core.modules import TOTAL_MODULES, ModuleId
from logdeck.core.registry import ModuleRegistry

ALL = list(ModuleId)


def _full():
    return ModuleRegistry(ALL)


class TestConstruction:
    def test_full_registry_fills_every_slot(self):
        registry = _full()
        assert registry.count() == TOTAL_MODULES
        assert registry.capacity == TOTAL_MODULES
        assert None not in registry.slots()

    def test_partial_registry_is_sentinel_terminated(self):
        registry = ModuleRegistry([ModuleId.HOSTS, ModuleId.OS])
        slots = registry.slots()
        assert len(slots) == TOTAL_MODULES
        assert slots[:2] == (ModuleId.HOSTS, ModuleId.OS)
        assert all(slot is None for slot in slots[2:])

    def test_rejects_duplicates(self):
        with pytest.raises(ValueError):
            ModuleRegistry([ModuleId.HOSTS, ModuleId.HOSTS])

    def test_rejects_out_of_order(self):
        with pytest.raises(ValueError):
            ModuleRegistry([ModuleId.OS, ModuleId.HOSTS])

    def test_rejects_over_capacity(self):
        with pytest.raises(ValueError):
            ModuleRegistry(ALL, capacity=3)


class TestLookup:
    def test_index_of_active(self):
        registry = ModuleRegistry([ModuleId.REQUESTS, ModuleId.OS, ModuleId.STATUS_CODES])
        assert registry.index_of(ModuleId.OS) == 1
        assert registry.index_of(ModuleId.STATUS_CODES) == 2

    def test_index_of_inactive_is_none(self):
        registry = ModuleRegistry([ModuleId.REQUESTS])
        assert registry.index_of(ModuleId.VISITORS) is None
        assert ModuleId.VISITORS not in registry

    def test_first_of_empty_registry_is_default(self):
        assert ModuleRegistry().first() is ModuleId.VISITORS
        assert ModuleRegistry().count() == 0


class TestRemove:
    @pytest.mark.parametrize("module", ALL)
    def test_remove_then_lookup_fails_and_count_drops(self, module):
        registry = _full()
        before = registry.count()
        registry.remove(module)
        assert registry.index_of(module) is None
        assert registry.count() == before - 1

    def test_remove_preserves_relative_order(self):
        registry = _full()
        registry.remove(ModuleId.OS)
        expected = [m for m in ALL if m is not ModuleId.OS]
        assert list(registry) == expected
        assert registry.slots()[-1] is None

    def test_remove_last_slot(self):
        registry = _full()
        registry.remove(ModuleId.STATUS_CODES)
        assert registry.slots()[-1] is None
        assert registry.count() == TOTAL_MODULES - 1

    def test_remove_absent_raises_and_leaves_registry_untouched(self):
        registry = ModuleRegistry([ModuleId.HOSTS])
        with pytest.raises(ModuleNotFound):
            registry.remove(ModuleId.OS)
        assert list(registry) == [ModuleId.HOSTS]

    def test_remove_twice(self):
        registry = _full()
        registry.remove(ModuleId.HOSTS)
        with pytest.raises(ModuleNotFound):
            registry.remove(ModuleId.HOSTS)
        assert registry.count() == TOTAL_MODULES - 1


class TestNavigation:
    def test_next_moves_forward(self):
        registry = _full()
        assert registry.next(ModuleId.VISITORS) is ModuleId.REQUESTS

    def test_next_wraps_at_capacity(self):
        registry = _full()
        assert registry.next(ModuleId.STATUS_CODES) is ModuleId.VISITORS

    def test_next_wraps_at_sentinel(self):
        registry = ModuleRegistry([ModuleId.HOSTS, ModuleId.OS])
        assert registry.next(ModuleId.OS) is ModuleId.HOSTS

    def test_next_from_inactive_is_a_precondition_violation(self):
        registry = ModuleRegistry([ModuleId.HOSTS])
        with pytest.raises(PreconditionViolation):
            registry.next(ModuleId.OS)

    def test_prev_moves_backward(self):
        registry = _full()
        assert registry.prev(ModuleId.REQUESTS) is ModuleId.VISITORS

    def test_prev_wraps_to_tail(self):
        registry = ModuleRegistry([ModuleId.HOSTS, ModuleId.OS, ModuleId.BROWSERS])
        assert registry.prev(ModuleId.HOSTS) is ModuleId.BROWSERS

    def test_prev_from_inactive_wraps_to_tail(self):
        registry = ModuleRegistry([ModuleId.HOSTS, ModuleId.OS])
        assert registry.prev(ModuleId.STATUS_CODES) is ModuleId.OS

    def test_prev_on_empty_registry_returns_default(self):
        assert ModuleRegistry().prev(ModuleId.OS) is ModuleId.VISITORS

    def test_single_entry_is_its_own_neighbour(self):
        registry = ModuleRegistry([ModuleId.KEYPHRASES])
        assert registry.next(ModuleId.KEYPHRASES) is ModuleId.KEYPHRASES
        assert registry.prev(ModuleId.KEYPHRASES) is ModuleId.KEYPHRASES

    @pytest.mark.parametrize(
        "active",
        [
            ALL,
            [ModuleId.VISITORS],
            [ModuleId.REQUESTS, ModuleId.NOT_FOUND, ModuleId.GEO_LOCATION],
            ALL[5:],
        ],
    )
    def test_k_steps_return_to_start(self, active):
        registry = ModuleRegistry(active)
        k = registry.count()
        for start in registry.active():
            current = start
            for _ in range(k):
                current = registry.next(current)
            assert current is start
            for _ in range(k):
                current = registry.prev(current)
            assert current is start

    def test_prev_tail_wrap_matches_last_active_after_removals(self):
        registry = _full()
        for module in (ModuleId.STATUS_CODES, ModuleId.OS, ModuleId.GEO_LOCATION):
            registry.remove(module)
        active = registry.active()
        assert registry.prev(active[0]) is active[-1]
        assert registry.slots()[len(active):] == (None,) * (TOTAL_MODULES - len(active))
