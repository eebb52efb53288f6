"""Key-combination to editor-event tables and the shared default bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from editmodes.events import (
    EditCommand,
    EditKind,
    EventKind,
    KeyCode,
    KeyModifiers,
    ReedlineEvent,
)


@dataclass(frozen=True)
class KeyCombination:
    """A key together with the modifiers held."""

    modifier: KeyModifiers
    key_code: KeyCode


@dataclass
class Keybindings:
    """Mapping of key combinations to editor events."""

    bindings: Dict[KeyCombination, ReedlineEvent] = field(default_factory=dict)

    def __init__(self) -> None:
        self.bindings = {}

    @classmethod
    def empty(cls) -> "Keybindings":
        """A table with no bindings."""
        return cls()

    def add_binding(
        self, modifier: KeyModifiers, key_code: KeyCode, command: ReedlineEvent
    ) -> None:
        """Bind a key combination, replacing any earlier binding.

        Raises ValueError for an empty UntilFound event.
        """
        if command.kind is EventKind.UNTIL_FOUND and not command.events:
            raise ValueError(
                "UntilFound should contain a series of potential events to handle"
            )
        self.bindings[KeyCombination(modifier, key_code)] = command

    def find_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> Optional[ReedlineEvent]:
        """The event bound to the combination, or None."""
        return self.bindings.get(KeyCombination(modifier, key_code))

    def remove_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> Optional[ReedlineEvent]:
        """Remove a binding and return the event it was bound to, if any."""
        return self.bindings.pop(KeyCombination(modifier, key_code), None)

    def get_keybindings(self) -> Dict[KeyCombination, ReedlineEvent]:
        """The bindings table."""
        return self.bindings


def edit_bind(command: EditCommand) -> ReedlineEvent:
    """An Edit event running the single command."""
    return ReedlineEvent.edit([command])


def _ev(kind: EventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _ec(kind: EditKind, select: bool = False) -> EditCommand:
    return EditCommand(kind, select=select)


KM = KeyModifiers
KC = KeyCode
_char = KeyCode.from_char


def add_common_control_bindings(kb: Keybindings) -> None:
    """Esc, Ctrl-C, Ctrl-D, Ctrl-L, Ctrl-R and Ctrl-O."""
    kb.add_binding(KM.NONE, KC.ESC, _ev(EventKind.ESC))
    kb.add_binding(KM.CONTROL, _char("c"), _ev(EventKind.CTRL_C))
    kb.add_binding(KM.CONTROL, _char("d"), _ev(EventKind.CTRL_D))
    kb.add_binding(KM.CONTROL, _char("l"), _ev(EventKind.CLEAR_SCREEN))
    kb.add_binding(KM.CONTROL, _char("r"), _ev(EventKind.SEARCH_HISTORY))
    kb.add_binding(KM.CONTROL, _char("o"), _ev(EventKind.OPEN_EDITOR))


def add_common_navigation_bindings(kb: Keybindings) -> None:
    """Arrow keys, Home/End and their Ctrl variants."""
    up = ReedlineEvent.until_found([_ev(EventKind.MENU_UP), _ev(EventKind.UP)])
    down = ReedlineEvent.until_found([_ev(EventKind.MENU_DOWN), _ev(EventKind.DOWN)])
    kb.add_binding(KM.NONE, KC.UP, up)
    kb.add_binding(KM.NONE, KC.DOWN, down)
    kb.add_binding(
        KM.NONE,
        KC.LEFT,
        ReedlineEvent.until_found([_ev(EventKind.MENU_LEFT), _ev(EventKind.LEFT)]),
    )
    kb.add_binding(
        KM.NONE,
        KC.RIGHT,
        ReedlineEvent.until_found(
            [
                _ev(EventKind.HISTORY_HINT_COMPLETE),
                _ev(EventKind.MENU_RIGHT),
                _ev(EventKind.RIGHT),
            ]
        ),
    )

    kb.add_binding(KM.CONTROL, KC.LEFT, edit_bind(_ec(EditKind.MOVE_WORD_LEFT)))
    kb.add_binding(
        KM.CONTROL,
        KC.RIGHT,
        ReedlineEvent.until_found(
            [
                _ev(EventKind.HISTORY_HINT_WORD_COMPLETE),
                edit_bind(_ec(EditKind.MOVE_WORD_RIGHT)),
            ]
        ),
    )

    line_start = edit_bind(_ec(EditKind.MOVE_TO_LINE_START))
    line_end = ReedlineEvent.until_found(
        [
            _ev(EventKind.HISTORY_HINT_COMPLETE),
            edit_bind(_ec(EditKind.MOVE_TO_LINE_END)),
        ]
    )
    kb.add_binding(KM.NONE, KC.HOME, line_start)
    kb.add_binding(KM.CONTROL, _char("a"), line_start)
    kb.add_binding(KM.NONE, KC.END, line_end)
    kb.add_binding(KM.CONTROL, _char("e"), line_end)

    kb.add_binding(KM.CONTROL, KC.HOME, edit_bind(_ec(EditKind.MOVE_TO_START)))
    kb.add_binding(KM.CONTROL, KC.END, edit_bind(_ec(EditKind.MOVE_TO_END)))

    kb.add_binding(KM.CONTROL, _char("p"), up)
    kb.add_binding(KM.CONTROL, _char("n"), down)


def add_common_edit_bindings(kb: Keybindings) -> None:
    """Delete, Backspace, their word variants and newline insertion."""
    kb.add_binding(KM.NONE, KC.BACKSPACE, edit_bind(_ec(EditKind.BACKSPACE)))
    kb.add_binding(KM.NONE, KC.DELETE, edit_bind(_ec(EditKind.DELETE)))
    kb.add_binding(KM.CONTROL, KC.BACKSPACE, edit_bind(_ec(EditKind.BACKSPACE_WORD)))
    kb.add_binding(KM.CONTROL, KC.DELETE, edit_bind(_ec(EditKind.DELETE_WORD)))
    # Base commands should not affect the cut buffer
    kb.add_binding(KM.CONTROL, _char("h"), edit_bind(_ec(EditKind.BACKSPACE)))
    kb.add_binding(KM.CONTROL, _char("w"), edit_bind(_ec(EditKind.BACKSPACE_WORD)))
    kb.add_binding(KM.ALT, KC.ENTER, edit_bind(_ec(EditKind.INSERT_NEWLINE)))
    kb.add_binding(KM.SHIFT, KC.ENTER, edit_bind(_ec(EditKind.INSERT_NEWLINE)))
    kb.add_binding(KM.CONTROL, _char("j"), _ev(EventKind.ENTER))


def add_common_selection_bindings(kb: Keybindings) -> None:
    """Shift-extended movements and select-all."""
    shift_ctrl = KM.SHIFT | KM.CONTROL
    kb.add_binding(KM.SHIFT, KC.LEFT, edit_bind(_ec(EditKind.MOVE_LEFT, True)))
    kb.add_binding(KM.SHIFT, KC.RIGHT, edit_bind(_ec(EditKind.MOVE_RIGHT, True)))
    kb.add_binding(shift_ctrl, KC.LEFT, edit_bind(_ec(EditKind.MOVE_WORD_LEFT, True)))
    kb.add_binding(shift_ctrl, KC.RIGHT, edit_bind(_ec(EditKind.MOVE_WORD_RIGHT, True)))
    kb.add_binding(KM.SHIFT, KC.END, edit_bind(_ec(EditKind.MOVE_TO_LINE_END, True)))
    kb.add_binding(shift_ctrl, KC.END, edit_bind(_ec(EditKind.MOVE_TO_END, True)))
    kb.add_binding(KM.SHIFT, KC.HOME, edit_bind(_ec(EditKind.MOVE_TO_LINE_START, True)))
    kb.add_binding(shift_ctrl, KC.HOME, edit_bind(_ec(EditKind.MOVE_TO_START, True)))
    kb.add_binding(shift_ctrl, _char("a"), edit_bind(_ec(EditKind.SELECT_ALL)))