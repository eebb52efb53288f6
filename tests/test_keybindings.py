import pytest

from editmodes.events import (
    EditCommand,
    EditKind,
    EventKind,
    KeyCode,
    KeyModifiers,
    ReedlineEvent,
)
from editmodes.keybindings import (
    KeyCombination,
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    add_common_selection_bindings,
    edit_bind,
)


def test_add_and_find_binding():
    kb = Keybindings()
    event = ReedlineEvent(EventKind.CLEAR_SCREEN)
    kb.add_binding(KeyModifiers.CONTROL, KeyCode.from_char("l"), event)
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("l")) == event
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.from_char("l")) is None


def test_add_binding_replaces_previous():
    kb = Keybindings()
    kb.add_binding(KeyModifiers.NONE, KeyCode.ESC, ReedlineEvent(EventKind.ESC))
    kb.add_binding(KeyModifiers.NONE, KeyCode.ESC, ReedlineEvent(EventKind.CTRL_C))
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.ESC) == ReedlineEvent(EventKind.CTRL_C)
    assert len(kb.get_keybindings()) == 1


def test_remove_binding_returns_previous():
    kb = Keybindings()
    kb.add_binding(KeyModifiers.NONE, KeyCode.ESC, ReedlineEvent(EventKind.ESC))
    assert kb.remove_binding(KeyModifiers.NONE, KeyCode.ESC) == ReedlineEvent(EventKind.ESC)
    assert kb.remove_binding(KeyModifiers.NONE, KeyCode.ESC) is None
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.ESC) is None


def test_empty_until_found_is_rejected():
    kb = Keybindings()
    with pytest.raises(ValueError):
        kb.add_binding(KeyModifiers.NONE, KeyCode.UP, ReedlineEvent.until_found([]))
    assert kb.get_keybindings() == {}


def test_empty_constructor():
    assert Keybindings.empty().get_keybindings() == {}


def test_get_keybindings_keys_are_combinations():
    kb = Keybindings()
    kb.add_binding(KeyModifiers.NONE, KeyCode.ESC, ReedlineEvent(EventKind.ESC))
    assert list(kb.get_keybindings()) == [KeyCombination(KeyModifiers.NONE, KeyCode.ESC)]


def test_edit_bind_wraps_single_command():
    cmd = EditCommand(EditKind.UNDO)
    assert edit_bind(cmd) == ReedlineEvent.edit([cmd])


def test_common_control_bindings():
    kb = Keybindings()
    add_common_control_bindings(kb)
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("c")) == ReedlineEvent(
        EventKind.CTRL_C
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("r")) == ReedlineEvent(
        EventKind.SEARCH_HISTORY
    )
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.ESC) == ReedlineEvent(EventKind.ESC)


def test_common_navigation_up_prefers_menu():
    kb = Keybindings()
    add_common_navigation_bindings(kb)
    expected = ReedlineEvent.until_found(
        [ReedlineEvent(EventKind.MENU_UP), ReedlineEvent(EventKind.UP)]
    )
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.UP) == expected
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("p")) == expected


def test_common_edit_bindings():
    kb = Keybindings()
    add_common_edit_bindings(kb)
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.BACKSPACE) == edit_bind(
        EditCommand(EditKind.BACKSPACE)
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("j")) == ReedlineEvent(
        EventKind.ENTER
    )


def test_common_selection_bindings_select():
    kb = Keybindings()
    add_common_selection_bindings(kb)
    event = kb.find_binding(KeyModifiers.SHIFT | KeyModifiers.CONTROL, KeyCode.LEFT)
    assert event == edit_bind(EditCommand(EditKind.MOVE_WORD_LEFT, select=True))
    for binding in kb.get_keybindings().values():
        assert binding.kind is EventKind.EDIT