"""Shared pytest fixtures for ShadeShift tests."""

from __future__ import annotations

import os
from typing import Callable

import pytest

# Run Qt headless unless a platform is explicitly configured.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from shadeshift.core.models import Theme
from shadeshift.core.storage import PreferenceStorage
from shadeshift.theme.store import ThemeStore


class _ManualHandle:
    def __init__(self, due: int, order: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.order = order
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an explicit clock, for deterministic timing tests."""

    def __init__(self) -> None:
        self.now = 0
        self._order = 0
        self._pending: list[_ManualHandle] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> _ManualHandle:
        self._order += 1
        handle = _ManualHandle(self.now + delay_ms, self._order, callback)
        self._pending.append(handle)
        return handle

    @property
    def pending_count(self) -> int:
        return sum(1 for h in self._pending if not h.cancelled)

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing due callbacks in (due time, scheduling) order."""
        target = self.now + ms
        while True:
            due = sorted(
                (h for h in self._pending if not h.cancelled and h.due <= target),
                key=lambda h: (h.due, h.order),
            )
            if not due:
                break
            handle = due[0]
            self._pending.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target
        self._pending = [h for h in self._pending if not h.cancelled]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def storage(tmp_path) -> PreferenceStorage:
    """Preference storage in a fresh temp directory."""
    return PreferenceStorage(tmp_path / "preferences.json")


@pytest.fixture
def make_store(storage, scheduler):
    """Factory for a ThemeStore on the manual clock with a chosen OS preference."""
    stores: list[ThemeStore] = []

    def _make(prefers_dark: bool | None = None, storage_override=storage) -> ThemeStore:
        store = ThemeStore(
            storage_override,
            prefers_dark=lambda: prefers_dark,
            scheduler=scheduler,
        )
        stores.append(store)
        return store

    yield _make
    for store in stores:
        store.dispose()


@pytest.fixture
def dark_store(make_store) -> ThemeStore:
    store = make_store(prefers_dark=True)
    assert store.theme is Theme.DARK
    return store
