"""Tests for keyboard handling."""

from dataclasses import replace

import pytest
from blessed.keyboard import Keystroke

from spotify_cli.ui.blessed.events.keyboard import (
    ACTIVATE,
    MOVE_DOWN,
    MOVE_UP,
    handle_key,
    parse_key,
)
from spotify_cli.ui.blessed.state import UIState


def key(ucs: str, name: str = None) -> Keystroke:
    return Keystroke(ucs=ucs, name=name)


UP = key("\x1b[A", "KEY_UP")
DOWN = key("\x1b[B", "KEY_DOWN")
LEFT = key("\x1b[D", "KEY_LEFT")
RIGHT = key("\x1b[C", "KEY_RIGHT")
ENTER = key("\n", "KEY_ENTER")
ESCAPE = key("\x1b", "KEY_ESCAPE")
TAB = key("\t", "KEY_TAB")


class TestParseKey:
    def test_arrow(self):
        assert parse_key(UP)["type"] == "arrow_up"

    def test_plain_newline_is_enter(self):
        assert parse_key(key("\r"))["type"] == "enter"

    def test_char(self):
        event = parse_key(key("j"))

        assert event["type"] == "char"
        assert event["char"] == "j"


class TestTableFocus:
    @pytest.mark.parametrize("keystroke", [UP, key("k")])
    def test_up(self, keystroke):
        assert handle_key(UIState(), keystroke)[1] == MOVE_UP

    @pytest.mark.parametrize("keystroke", [DOWN, key("j")])
    def test_down(self, keystroke):
        assert handle_key(UIState(), keystroke)[1] == MOVE_DOWN

    def test_enter_activates(self):
        assert handle_key(UIState(focus="devices"), ENTER)[1] == ACTIVATE

    def test_unknown_key(self):
        state = UIState()

        assert handle_key(state, key("x")) == (state, None)


class TestControlsFocus:
    def test_left_right_move_control(self):
        state = UIState(focus="controls", control_index=1)

        state, action = handle_key(state, RIGHT)
        assert action is None
        assert state.control_index == 2

        state, _ = handle_key(state, LEFT)
        state, _ = handle_key(state, LEFT)
        assert state.control_index == 0

    def test_enter_runs_selected_control(self):
        state = UIState(focus="controls", control_index=3)

        assert handle_key(state, ENTER)[1] == "next"

    def test_arrows_do_not_move_tables(self):
        assert handle_key(UIState(focus="controls"), DOWN)[1] is None


class TestGlobalKeys:
    @pytest.mark.parametrize("keystroke", [ESCAPE, key("q")])
    def test_quit(self, keystroke):
        state, _ = handle_key(UIState(), keystroke)

        assert state.should_quit is True

    def test_tab_cycles_focus(self):
        state = UIState()

        state, _ = handle_key(state, TAB)
        assert state.focus == "devices"

        state, _ = handle_key(state, TAB)
        state, _ = handle_key(state, TAB)
        assert state.focus == "albums"

    def test_shift_tab(self):
        state, _ = handle_key(UIState(), key("\x1b[Z", "KEY_BTAB"))

        assert state.focus == "controls"

    @pytest.mark.parametrize("char,control", [("p", "play"), ("s", "stop"), ("n", "next"), ("b", "previous")])
    def test_hotkeys(self, char, control):
        state = replace(UIState(), focus="devices")

        assert handle_key(state, key(char))[1] == control
