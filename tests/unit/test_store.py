"""Tests for ThemeStore: initial resolution, toggle, commit and persistence."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from shadeshift.core.constants import ANIMATION_CORNER, COMMIT_DELAY_MS, IDLE_DELAY_MS
from shadeshift.core.models import Theme
from shadeshift.core.storage import PreferenceStorage
from shadeshift.theme.geometry import lookup
from shadeshift.ui.theme_registry import color_tokens
from shadeshift.utils.error_handler import StorageError


class TestInitialState:
    def test_resolves_from_os(self, make_store):
        assert make_store(prefers_dark=False).theme is Theme.LIGHT

    def test_resolves_from_storage(self, make_store, storage):
        storage.set_item("theme", "light")
        assert make_store(prefers_dark=True).theme is Theme.LIGHT

    def test_idle_at_start(self, make_store):
        store = make_store(prefers_dark=False)
        assert store.is_animating is False
        assert store.pending_theme is store.theme

    def test_geometry_and_corner(self, dark_store):
        assert dark_store.corner is ANIMATION_CORNER
        assert dark_store.geometry is lookup(ANIMATION_CORNER)


class TestToggle:
    def test_dark_to_light(self, dark_store, scheduler):
        dark_store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert dark_store.theme is Theme.LIGHT

    def test_light_to_dark(self, make_store, scheduler):
        store = make_store(prefers_dark=False)
        store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert store.theme is Theme.DARK

    def test_round_trip(self, dark_store, scheduler):
        dark_store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        dark_store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert dark_store.theme is Theme.DARK

    def test_returns_before_commit(self, dark_store):
        dark_store.toggle()
        assert dark_store.theme is Theme.DARK
        assert dark_store.pending_theme is Theme.LIGHT
        assert dark_store.is_animating is True

    def test_snapshot_just_before_commit(self, dark_store, scheduler, storage):
        dark_store.toggle()
        scheduler.advance(COMMIT_DELAY_MS - 1)
        assert dark_store.theme is Theme.DARK
        assert storage.get_item("theme") is None

    def test_colors_follow_pending_theme(self, dark_store):
        assert dark_store.colors == color_tokens(Theme.DARK)
        dark_store.toggle()
        assert dark_store.colors == color_tokens(Theme.LIGHT)

    def test_invariant_after_idle(self, dark_store, scheduler):
        dark_store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert dark_store.is_animating is False
        assert dark_store.pending_theme is dark_store.theme


class TestCommit:
    def test_persists_on_commit(self, dark_store, scheduler, storage):
        dark_store.toggle()
        scheduler.advance(COMMIT_DELAY_MS)
        assert storage.get_item("theme") == "light"

    def test_emits_once_per_commit(self, dark_store, scheduler):
        received = []
        dark_store.theme_changed.connect(received.append)
        dark_store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert received == [Theme.LIGHT]

    def test_rapid_toggles_commit_once(self, dark_store, scheduler, storage):
        received = []
        dark_store.theme_changed.connect(received.append)
        dark_store.toggle()
        scheduler.advance(50)
        dark_store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert received == [Theme.LIGHT]
        assert storage.get_item("theme") == "light"

    def test_write_failure_still_commits(self, make_store, scheduler):
        broken = MagicMock()
        broken.get_item.return_value = None
        broken.set_item.side_effect = StorageError("quota exceeded")
        store = make_store(prefers_dark=True, storage_override=broken)
        store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert store.theme is Theme.LIGHT
        broken.set_item.assert_called_once_with("theme", "light")

    def test_disabled_storage_still_commits(self, make_store, scheduler, tmp_path):
        disabled = PreferenceStorage(tmp_path / "off.json", enabled=False)
        store = make_store(prefers_dark=False, storage_override=disabled)
        store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert store.theme is Theme.DARK
        assert not (tmp_path / "off.json").exists()

    def test_unreachable_path_still_commits(self, make_store, scheduler, tmp_path):
        unreachable = PreferenceStorage(tmp_path / ("x" * 300) / "preferences.json")
        store = make_store(prefers_dark=True, storage_override=unreachable)
        store.toggle()
        scheduler.advance(COMMIT_DELAY_MS)
        assert store.theme is Theme.LIGHT
        scheduler.advance(IDLE_DELAY_MS - COMMIT_DELAY_MS)
        assert store.is_animating is False

    def test_no_storage(self, make_store, scheduler):
        store = make_store(prefers_dark=False, storage_override=None)
        store.toggle()
        scheduler.advance(IDLE_DELAY_MS)
        assert store.theme is Theme.DARK

    def test_failure_is_logged(self, make_store, scheduler):
        broken = MagicMock()
        broken.get_item.return_value = None
        broken.set_item.side_effect = StorageError("denied")
        store = make_store(prefers_dark=True, storage_override=broken)
        with patch("shadeshift.theme.store.logger") as mock_logger:
            store.toggle()
            scheduler.advance(COMMIT_DELAY_MS)
        mock_logger.warning.assert_called_once()


class TestDispose:
    def test_dispose_mid_transition(self, dark_store, scheduler, storage):
        dark_store.toggle()
        dark_store.dispose()
        scheduler.advance(IDLE_DELAY_MS)
        assert dark_store.theme is Theme.DARK
        assert storage.get_item("theme") is None
