import pytest

from keymap import DEFAULT_BINDINGS, ENTER_EDIT, LEAVE_EDIT, NEXT_TAB, QUIT, Keymap


def test_defaults():
    keymap = Keymap()
    assert keymap.action_for("l") == NEXT_TAB
    assert keymap.action_for("right") == NEXT_TAB
    assert keymap.action_for("i") == ENTER_EDIT
    assert keymap.action_for("esc") == LEAVE_EDIT
    assert keymap.action_for("x") is None
    assert keymap.bindings == DEFAULT_BINDINGS


def test_override_replaces_only_that_action():
    keymap = Keymap({QUIT: ["x"]})
    assert keymap.action_for("x") == QUIT
    assert keymap.action_for("q") is None
    assert keymap.keys_for(ENTER_EDIT) == ["i"]


def test_first_action_wins_on_conflict():
    keymap = Keymap({QUIT: ["l"]})
    assert keymap.action_for("l") == NEXT_TAB
    assert keymap.keys_for(QUIT) == ["l"]


def test_unknown_action_rejected():
    with pytest.raises(KeyError):
        Keymap({"launch": ["z"]})
