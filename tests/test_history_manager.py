"""
Tests for the undo stack.

Covers:
- Seed floor: undo never pops the first saved state
- Pop-and-restore: undo returns the state saved just before the last action
- Deep copies on save
- Optional history cap
- Listener notifications and descriptions
"""
import pytest

from utils.history_manager import HistoryManager


class TestHistoryManagerStack:
    """Unit tests for the generic HistoryManager, no scene involved."""

    @pytest.fixture
    def hm(self):
        return HistoryManager()

    # ── basic operations ────────────────────────────────────────────

    def test_initial_state_empty(self, hm):
        assert len(hm) == 0
        assert not hm.can_undo()

    def test_seed_alone_cannot_undo(self, hm):
        hm.save_state({"v": 0}, "seed")
        assert not hm.can_undo()
        assert hm.undo() is None
        assert len(hm) == 1

    def test_undo_returns_state_before_last_action(self, hm):
        hm.save_state({"v": 0}, "seed")
        hm.save_state({"v": 1}, "before action")
        assert hm.undo() == {"v": 1}
        assert len(hm) == 1

    def test_undo_walks_back_one_step_at_a_time(self, hm):
        hm.save_state({"v": 0}, "seed")
        hm.save_state({"v": 1}, "a")
        hm.save_state({"v": 2}, "b")
        assert hm.undo() == {"v": 2}
        assert hm.undo() == {"v": 1}
        assert hm.undo() is None

    def test_undo_at_floor_is_idempotent(self, hm):
        hm.save_state({"v": 0}, "seed")
        for _ in range(5):
            assert hm.undo() is None
        assert len(hm) == 1

    # ── isolation ───────────────────────────────────────────────────

    def test_saved_state_is_deep_copy(self, hm):
        data = {"tubes": [{"x": 1}]}
        hm.save_state({"tubes": []}, "seed")
        hm.save_state(data, "edit")
        data["tubes"][0]["x"] = 99
        assert hm.undo() == {"tubes": [{"x": 1}]}

    # ── cap ─────────────────────────────────────────────────────────

    def test_unbounded_by_default(self, hm):
        for i in range(200):
            hm.save_state({"v": i})
        assert len(hm) == 200

    def test_max_history_trims_oldest(self):
        hm = HistoryManager(max_history=3)
        for i in range(5):
            hm.save_state({"v": i})
        assert len(hm) == 3
        assert [s['data']['v'] for s in hm.history] == [2, 3, 4]

    @pytest.mark.parametrize("bad", [0, -1])
    def test_max_history_must_be_positive(self, bad):
        with pytest.raises(ValueError):
            HistoryManager(max_history=bad)

    # ── listeners ───────────────────────────────────────────────────

    def test_listener_called_on_save(self, hm):
        calls = []
        hm.add_listener(calls.append)
        hm.save_state({"v": 0})
        hm.save_state({"v": 1})
        assert calls == [False, True]

    def test_listener_called_on_undo(self, hm):
        hm.save_state({"v": 0})
        hm.save_state({"v": 1})
        calls = []
        hm.add_listener(calls.append)
        hm.undo()
        assert calls == [False]

    def test_listener_not_called_on_floor_undo(self, hm):
        hm.save_state({"v": 0})
        calls = []
        hm.add_listener(calls.append)
        hm.undo()
        assert calls == []

    def test_remove_listener(self, hm):
        calls = []
        hm.add_listener(calls.append)
        hm.remove_listener(calls.append)
        hm.save_state({"v": 0})
        assert calls == []

    def test_failing_listener_does_not_break_save(self, hm):
        def broken(_can_undo):
            raise RuntimeError("boom")

        calls = []
        hm.add_listener(broken)
        hm.add_listener(calls.append)
        hm.save_state({"v": 0})
        assert len(hm) == 1
        assert calls == [False]

    # ── descriptions ────────────────────────────────────────────────

    def test_undo_description(self, hm):
        hm.save_state({"v": 0}, "seed")
        assert hm.get_undo_description() == ""
        hm.save_state({"v": 1}, "Add tube")
        assert hm.get_undo_description() == "Add tube"
        hm.undo()
        assert hm.get_undo_description() == ""
