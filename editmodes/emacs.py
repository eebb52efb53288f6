"""Emacs-style parsing of terminal input."""

from __future__ import annotations

from typing import Optional

from editmodes.events import (
    EditCommand,
    EditKind,
    EditMode,
    EventKind,
    FocusGained,
    FocusLost,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    PromptEditMode,
    RawEvent,
    ReedlineEvent,
    ResizeEvent,
)
from editmodes.keybindings import (
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    add_common_selection_bindings,
    edit_bind,
)


def default_emacs_keybindings() -> Keybindings:
    """The default emacs keybindings."""
    km = KeyModifiers
    kc = KeyCode
    char = KeyCode.from_char

    def ec(kind: EditKind) -> ReedlineEvent:
        return edit_bind(EditCommand(kind))

    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    add_common_selection_bindings(kb)

    # In vi this also changes the mode, so it is not common
    kb.add_binding(km.NONE, kc.ENTER, ReedlineEvent(EventKind.ENTER))

    # Ctrl moves
    kb.add_binding(
        km.CONTROL,
        char("b"),
        ReedlineEvent.until_found(
            [ReedlineEvent(EventKind.MENU_LEFT), ReedlineEvent(EventKind.LEFT)]
        ),
    )
    kb.add_binding(
        km.CONTROL,
        char("f"),
        ReedlineEvent.until_found(
            [
                ReedlineEvent(EventKind.HISTORY_HINT_COMPLETE),
                ReedlineEvent(EventKind.MENU_RIGHT),
                ReedlineEvent(EventKind.RIGHT),
            ]
        ),
    )
    # Undo/redo
    kb.add_binding(km.CONTROL, char("g"), ec(EditKind.REDO))
    kb.add_binding(km.CONTROL, char("z"), ec(EditKind.UNDO))
    # Cutting
    kb.add_binding(km.CONTROL, char("y"), ec(EditKind.PASTE_CUT_BUFFER_BEFORE))
    kb.add_binding(km.CONTROL, char("w"), ec(EditKind.CUT_WORD_LEFT))
    kb.add_binding(km.CONTROL, char("k"), ec(EditKind.CUT_TO_LINE_END))
    kb.add_binding(km.CONTROL, char("u"), ec(EditKind.CUT_FROM_START))
    kb.add_binding(km.ALT, char("d"), ec(EditKind.CUT_WORD_RIGHT))
    # Edits
    kb.add_binding(km.CONTROL, char("t"), ec(EditKind.SWAP_GRAPHEMES))

    # Alt moves
    word_right = ReedlineEvent.until_found(
        [
            ReedlineEvent(EventKind.HISTORY_HINT_WORD_COMPLETE),
            ec(EditKind.MOVE_WORD_RIGHT),
        ]
    )
    kb.add_binding(km.ALT, kc.LEFT, ec(EditKind.MOVE_WORD_LEFT))
    kb.add_binding(km.ALT, kc.RIGHT, word_right)
    kb.add_binding(km.ALT, char("b"), ec(EditKind.MOVE_WORD_LEFT))
    kb.add_binding(km.ALT, char("f"), word_right)
    # Alt edits
    kb.add_binding(km.ALT, kc.DELETE, ec(EditKind.DELETE_WORD))
    kb.add_binding(km.ALT, kc.BACKSPACE, ec(EditKind.BACKSPACE_WORD))
    kb.add_binding(km.ALT, char("m"), ec(EditKind.BACKSPACE_WORD))
    # Case changes
    kb.add_binding(km.ALT, char("u"), ec(EditKind.UPPERCASE_WORD))
    kb.add_binding(km.ALT, char("l"), ec(EditKind.LOWERCASE_WORD))
    kb.add_binding(km.ALT, char("c"), ec(EditKind.CAPITALIZE_CHAR))

    return kb


def _ascii_lower(c: str) -> str:
    return c.lower() if c.isascii() else c


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


_INSERTING_MODIFIERS = (
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL | KeyModifiers.ALT,
    KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
)


def paste_event(text: str) -> ReedlineEvent:
    """Insert pasted text with line endings normalised to newlines."""
    normalised = text.replace("\r\n", "\n").replace("\r", "\n")
    return edit_bind(EditCommand(EditKind.INSERT_STRING, normalised))


def non_key_event(event: RawEvent) -> ReedlineEvent:
    """Translate any raw event that is not a key press."""
    if isinstance(event, MouseEvent):
        return ReedlineEvent(EventKind.MOUSE)
    if isinstance(event, ResizeEvent):
        return ReedlineEvent.resize(event.width, event.height)
    if isinstance(event, (FocusGained, FocusLost)):
        return ReedlineEvent(EventKind.NONE)
    if isinstance(event, PasteEvent):
        return paste_event(event.text)
    raise TypeError(f"unsupported input event: {event!r}")


class Emacs(EditMode):
    """Parses input events like an emacs-style editor."""

    def __init__(self, keybindings: Optional[Keybindings] = None) -> None:
        self.keybindings = (
            keybindings if keybindings is not None else default_emacs_keybindings()
        )

    def parse_event(self, event: RawEvent) -> ReedlineEvent:
        if not isinstance(event, KeyEvent):
            return non_key_event(event)

        modifier = event.modifiers
        char = event.code.char
        if char is None:
            found = self.keybindings.find_binding(modifier, event.code)
            return found if found is not None else ReedlineEvent(EventKind.NONE)

        # Mixed modifiers such as Ctrl+Alt come from AltGr on non-US layouts.
        c = char if modifier == KeyModifiers.NONE else _ascii_lower(char)
        found = self.keybindings.find_binding(modifier, KeyCode.from_char(c))
        if found is not None:
            return found
        if modifier in _INSERTING_MODIFIERS:
            inserted = _ascii_upper(c) if modifier == KeyModifiers.SHIFT else c
            return edit_bind(EditCommand(EditKind.INSERT_CHAR, inserted))
        return ReedlineEvent(EventKind.NONE)

    def edit_mode(self) -> PromptEditMode:
        return PromptEditMode.emacs()