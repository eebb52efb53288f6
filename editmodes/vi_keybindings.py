"""Default keybinding tables for the vi normal and insert modes."""

from __future__ import annotations

from editmodes.events import EditCommand, EditKind, KeyCode, KeyModifiers
from editmodes.keybindings import (
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    add_common_selection_bindings,
    edit_bind,
)


def default_vi_normal_keybindings() -> Keybindings:
    """The default vi normal-mode keybindings."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_selection_bindings(kb)
    # Backspace and Delete behave as in vi
    kb.add_binding(
        KeyModifiers.NONE, KeyCode.BACKSPACE, edit_bind(EditCommand(EditKind.MOVE_LEFT))
    )
    kb.add_binding(
        KeyModifiers.NONE, KeyCode.DELETE, edit_bind(EditCommand(EditKind.DELETE))
    )
    return kb


def default_vi_insert_keybindings() -> Keybindings:
    """The default vi insert-mode keybindings."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    add_common_selection_bindings(kb)
    return kb