"""Tests for the navigation state machine.

Checks pane-relative movement, page jumps, clamping at both ends, scroll
resets on selection change, and pane-independent thread jumps.
"""

from __future__ import annotations

import itertools
import unittest

from mail_fixtures import make_store, raw_message, thread_store
from mboxview.engine import MAX_SCROLL_OFFSET, Command, NavigationEngine, page_jump
from mboxview.state import Pane, Viewport, ViewState


def _engine(count: int = 5, *, height: int = 24, **state_fields) -> NavigationEngine:
    store = make_store(*(raw_message(Subject=f"m{idx}") for idx in range(count)))
    state = ViewState(viewport=Viewport(width=80, height=height), **state_fields)
    return NavigationEngine(store.messages, state)


class ListPaneMovementTests(unittest.TestCase):
    def test_move_down_then_up_returns_to_start(self) -> None:
        engine = _engine(5, selected=2)
        engine.apply(Command.MOVE_DOWN)
        self.assertEqual(engine.state.selected, 3)
        engine.apply(Command.MOVE_UP)
        self.assertEqual(engine.state.selected, 2)

    def test_move_down_clamps_at_last_index(self) -> None:
        engine = _engine(3, selected=2)
        engine.apply(Command.MOVE_DOWN)
        self.assertEqual(engine.state.selected, 2)

    def test_move_up_clamps_at_first_index(self) -> None:
        engine = _engine(3)
        engine.apply(Command.MOVE_UP)
        self.assertEqual(engine.state.selected, 0)

    def test_list_moves_reset_scroll_offset(self) -> None:
        for command in (Command.MOVE_DOWN, Command.MOVE_UP, Command.PAGE_DOWN, Command.PAGE_UP):
            with self.subTest(command=command):
                engine = _engine(20, selected=10, scroll_offset=7)
                engine.apply(command)
                self.assertEqual(engine.state.scroll_offset, 0)

    def test_page_down_clamps_to_last_message(self) -> None:
        engine = _engine(5, height=10)
        self.assertEqual(page_jump(engine.state), 8)
        engine.apply(Command.PAGE_DOWN)
        self.assertEqual(engine.state.selected, 4)

    def test_page_down_and_up_move_by_jump_size(self) -> None:
        engine = _engine(30, height=10)
        engine.apply(Command.PAGE_DOWN)
        self.assertEqual(engine.state.selected, 8)
        engine.apply(Command.PAGE_DOWN)
        self.assertEqual(engine.state.selected, 16)
        engine.apply(Command.PAGE_UP)
        self.assertEqual(engine.state.selected, 8)

    def test_page_up_clamps_without_underflow(self) -> None:
        engine = _engine(30, height=10, selected=3)
        engine.apply(Command.PAGE_UP)
        self.assertEqual(engine.state.selected, 0)

    def test_single_message_store_never_moves(self) -> None:
        engine = _engine(1)
        for command in (Command.MOVE_DOWN, Command.MOVE_UP, Command.PAGE_DOWN, Command.PAGE_UP):
            engine.apply(command)
            self.assertEqual(engine.state.selected, 0)

    def test_tiny_viewport_still_pages_by_one(self) -> None:
        engine = _engine(5, height=1)
        engine.apply(Command.PAGE_DOWN)
        self.assertEqual(engine.state.selected, 1)


class DetailPaneScrollTests(unittest.TestCase):
    def test_detail_moves_scroll_without_touching_selection(self) -> None:
        engine = _engine(5, selected=2, active_pane=Pane.DETAIL)
        engine.apply(Command.MOVE_DOWN)
        engine.apply(Command.MOVE_DOWN)
        self.assertEqual(engine.state.scroll_offset, 2)
        engine.apply(Command.MOVE_UP)
        self.assertEqual(engine.state.scroll_offset, 1)
        self.assertEqual(engine.state.selected, 2)

    def test_scroll_offset_never_goes_negative(self) -> None:
        engine = _engine(5, active_pane=Pane.DETAIL, scroll_offset=3, height=10)
        engine.apply(Command.PAGE_UP)
        self.assertEqual(engine.state.scroll_offset, 0)
        for _ in range(5):
            engine.apply(Command.MOVE_UP)
        self.assertEqual(engine.state.scroll_offset, 0)

    def test_page_down_scroll_saturates(self) -> None:
        engine = _engine(5, active_pane=Pane.DETAIL, scroll_offset=MAX_SCROLL_OFFSET - 3, height=10)
        engine.apply(Command.PAGE_DOWN)
        self.assertEqual(engine.state.scroll_offset, MAX_SCROLL_OFFSET)

    def test_page_down_scroll_adds_jump(self) -> None:
        engine = _engine(5, active_pane=Pane.DETAIL, height=10)
        engine.apply(Command.PAGE_DOWN)
        self.assertEqual(engine.state.scroll_offset, 8)


class PaneSwitchTests(unittest.TestCase):
    def test_switch_pane_twice_round_trips(self) -> None:
        engine = _engine(5, selected=3, scroll_offset=4)
        engine.apply(Command.SWITCH_PANE)
        self.assertIs(engine.state.active_pane, Pane.DETAIL)
        engine.apply(Command.SWITCH_PANE)
        self.assertIs(engine.state.active_pane, Pane.LIST)
        self.assertEqual(engine.state.selected, 3)
        self.assertEqual(engine.state.scroll_offset, 4)


class ThreadJumpTests(unittest.TestCase):
    def test_thread_scenario_through_engine(self) -> None:
        engine = NavigationEngine(thread_store().messages)
        engine.apply(Command.JUMP_TO_CHILD)
        self.assertEqual(engine.state.selected, 1)
        engine.apply(Command.JUMP_TO_NEXT_SIBLING)
        self.assertEqual(engine.state.selected, 2)
        engine.apply(Command.JUMP_TO_PREV_SIBLING)
        self.assertEqual(engine.state.selected, 1)
        engine.apply(Command.JUMP_TO_PARENT)
        self.assertEqual(engine.state.selected, 0)

    def test_jumps_ignore_active_pane_and_reset_scroll(self) -> None:
        state = ViewState(active_pane=Pane.DETAIL, scroll_offset=9)
        engine = NavigationEngine(thread_store().messages, state)
        engine.apply(Command.JUMP_TO_CHILD)
        self.assertEqual(state.selected, 1)
        self.assertEqual(state.scroll_offset, 0)
        self.assertIs(state.active_pane, Pane.DETAIL)

    def test_failed_jump_leaves_state_unchanged(self) -> None:
        state = ViewState(selected=0, scroll_offset=5, active_pane=Pane.DETAIL)
        engine = NavigationEngine(thread_store().messages, state)
        state.dirty = False
        engine.apply(Command.JUMP_TO_PARENT)
        self.assertEqual((state.selected, state.scroll_offset), (0, 5))
        self.assertFalse(state.dirty)

    def test_headerless_single_message_ignores_every_command(self) -> None:
        engine = NavigationEngine(make_store(b"\nno headers\n").messages)
        for command in (
            Command.JUMP_TO_PARENT,
            Command.JUMP_TO_CHILD,
            Command.JUMP_TO_PREV_SIBLING,
            Command.JUMP_TO_NEXT_SIBLING,
            Command.MOVE_DOWN,
            Command.MOVE_UP,
        ):
            engine.apply(command)
            self.assertEqual(engine.state.selected, 0)


class EngineInvariantTests(unittest.TestCase):
    def test_selection_stays_in_range_for_any_command_sequence(self) -> None:
        commands = [c for c in Command if c is not Command.QUIT]
        for count in (1, 2, 7):
            engine = _engine(count, height=5)
            for command in itertools.chain.from_iterable(itertools.permutations(commands, 3)):
                engine.apply(command)
                self.assertTrue(0 <= engine.state.selected < count)
                self.assertGreaterEqual(engine.state.scroll_offset, 0)

    def test_empty_store_commands_are_noops(self) -> None:
        engine = NavigationEngine(())
        for command in Command:
            if command is Command.QUIT:
                continue
            self.assertFalse(engine.apply(command))
        self.assertEqual(engine.state.selected, 0)
        self.assertIs(engine.state.active_pane, Pane.LIST)

    def test_quit_reports_session_end(self) -> None:
        self.assertTrue(_engine(2).apply(Command.QUIT))
        self.assertTrue(NavigationEngine(()).apply(Command.QUIT))

    def test_resize_marks_dirty_only_on_change(self) -> None:
        engine = _engine(2, height=24)
        engine.state.dirty = False
        self.assertFalse(engine.resize(80, 24))
        self.assertFalse(engine.state.dirty)
        self.assertTrue(engine.resize(100, 30))
        self.assertTrue(engine.state.dirty)
        self.assertEqual((engine.state.viewport.width, engine.state.viewport.height), (100, 30))


if __name__ == "__main__":
    unittest.main()
