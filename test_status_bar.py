from keymap import Keymap
from status_bar import render_footer


def test_navigation_hint_is_centered():
    text = render_footer(False, 60)
    assert len(text) == 60
    assert text.strip() == "◄ ► to change tab | i to edit | Press q to quit"
    assert text.startswith(" ")


def test_editing_hint():
    assert render_footer(True, 40).strip() == "Esc to stop editing"


def test_hint_uses_configured_keys():
    keymap = Keymap({"quit": ["x"], "enter_edit": ["e"], "leave_edit": ["tab"]})
    assert "Press x to quit" in render_footer(False, 80, keymap)
    assert "e to edit" in render_footer(False, 80, keymap)
    assert render_footer(True, 80, keymap).strip() == "Tab to stop editing"


def test_hint_truncates_to_width():
    assert render_footer(False, 5) == "◄ ► t"
    assert render_footer(False, 0) == ""


def test_hint_follows_remapped_tab_keys():
    keymap = Keymap({"previous_tab": ["p"], "next_tab": ["n"]})
    assert render_footer(False, 80, keymap).strip().startswith("p n to change tab")

    arrows_only = Keymap({"previous_tab": ["a", "left"]})
    assert render_footer(False, 80, arrows_only).strip().startswith("◄ ► to change tab")
