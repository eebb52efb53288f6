from editmodes.events import (
    EditCommand,
    EditKind,
    EventKind,
    KeyCode,
    KeyModifiers,
    ReedlineEvent,
)
from editmodes.keybindings import edit_bind
from editmodes.vi_keybindings import (
    default_vi_insert_keybindings,
    default_vi_normal_keybindings,
)


def test_normal_backspace_moves_left():
    kb = default_vi_normal_keybindings()
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.BACKSPACE) == edit_bind(
        EditCommand(EditKind.MOVE_LEFT)
    )


def test_normal_delete_deletes():
    kb = default_vi_normal_keybindings()
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.DELETE) == edit_bind(
        EditCommand(EditKind.DELETE)
    )


def test_insert_backspace_deletes_backwards():
    kb = default_vi_insert_keybindings()
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.BACKSPACE) == edit_bind(
        EditCommand(EditKind.BACKSPACE)
    )


def test_normal_has_no_common_edit_bindings():
    kb = default_vi_normal_keybindings()
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.BACKSPACE) is None
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("j")) is None


def test_insert_has_common_edit_bindings():
    kb = default_vi_insert_keybindings()
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("j")) == ReedlineEvent(
        EventKind.ENTER
    )


def test_both_tables_have_control_bindings():
    for kb in (default_vi_normal_keybindings(), default_vi_insert_keybindings()):
        assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.from_char("c")) == ReedlineEvent(
            EventKind.CTRL_C
        )
        assert kb.find_binding(KeyModifiers.NONE, KeyCode.ESC) == ReedlineEvent(
            EventKind.ESC
        )


def test_tables_are_independent():
    first = default_vi_normal_keybindings()
    first.remove_binding(KeyModifiers.NONE, KeyCode.DELETE)
    second = default_vi_normal_keybindings()
    assert first.find_binding(KeyModifiers.NONE, KeyCode.DELETE) is None
    assert second.find_binding(KeyModifiers.NONE, KeyCode.DELETE) == edit_bind(
        EditCommand(EditKind.DELETE)
    )