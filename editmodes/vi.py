"""Vi-style parsing of terminal input."""

from __future__ import annotations

from typing import List, Optional

from editmodes.emacs import non_key_event
from editmodes.events import (
    EditCommand,
    EditKind,
    EditMode,
    EventKind,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    PromptEditMode,
    PromptViMode,
    RawEvent,
    ReedlineEvent,
)
from editmodes.keybindings import Keybindings, edit_bind
from editmodes.vi_keybindings import (
    default_vi_insert_keybindings,
    default_vi_normal_keybindings,
)
from editmodes.vi_motion import ViMode, ViState
from editmodes.vi_parser import parse

_INSERTING_MODIFIERS = (
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL | KeyModifiers.ALT,
    KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
)


def _ascii_lower(c: str) -> str:
    return c.lower() if c.isascii() else c


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


def _none() -> ReedlineEvent:
    return ReedlineEvent(EventKind.NONE)


def _esc_and_repaint() -> ReedlineEvent:
    return ReedlineEvent.multiple(
        [ReedlineEvent(EventKind.ESC), ReedlineEvent(EventKind.REPAINT)]
    )


class Vi(EditMode):
    """Parses input events like a vi-style editor."""

    def __init__(
        self,
        insert_keybindings: Optional[Keybindings] = None,
        normal_keybindings: Optional[Keybindings] = None,
        mode: ViMode = ViMode.INSERT,
    ) -> None:
        self.insert_keybindings = (
            insert_keybindings
            if insert_keybindings is not None
            else default_vi_insert_keybindings()
        )
        self.normal_keybindings = (
            normal_keybindings
            if normal_keybindings is not None
            else default_vi_normal_keybindings()
        )
        self.state = ViState(mode=mode)
        self._cache: List[str] = []

    @property
    def mode(self) -> ViMode:
        """The current vi sub-mode."""
        return self.state.mode

    @mode.setter
    def mode(self, value: ViMode) -> None:
        self.state.mode = value

    def parse_event(self, event: RawEvent) -> ReedlineEvent:
        if not isinstance(event, KeyEvent):
            return non_key_event(event)

        modifier = event.modifiers
        code = event.code
        char = code.char
        mode = self.mode
        normal_like = mode in (ViMode.NORMAL, ViMode.VISUAL)

        if mode is ViMode.NORMAL and modifier == KeyModifiers.NONE and char == "v":
            self._cache.clear()
            self.mode = ViMode.VISUAL
            return _esc_and_repaint()

        if char is not None and normal_like:
            return self._parse_normal_char(modifier, _ascii_lower(char))

        if char is not None:
            return self._parse_insert_char(modifier, char)

        if modifier == KeyModifiers.NONE and code == KeyCode.ESC:
            self._cache.clear()
            self.mode = ViMode.NORMAL
            return _esc_and_repaint()

        if modifier == KeyModifiers.NONE and code == KeyCode.ENTER:
            self.mode = ViMode.INSERT
            return ReedlineEvent(EventKind.ENTER)

        table = self.normal_keybindings if normal_like else self.insert_keybindings
        found = table.find_binding(modifier, code)
        return found if found is not None else _none()

    def _parse_normal_char(self, modifier: KeyModifiers, c: str) -> ReedlineEvent:
        found = self.normal_keybindings.find_binding(modifier, KeyCode.from_char(c))
        if found is not None:
            return found
        if modifier not in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return _none()

        self._cache.append(_ascii_upper(c) if modifier == KeyModifiers.SHIFT else c)
        sequence = parse(self._cache)

        if not sequence.is_valid():
            self._cache.clear()
            return _none()
        if not sequence.is_complete(self.mode):
            return _none()

        new_mode = sequence.changes_mode()
        if new_mode is not None:
            self.mode = new_mode
        result = sequence.to_reedline_event(self.state)
        self._cache.clear()
        return result

    def _parse_insert_char(self, modifier: KeyModifiers, char: str) -> ReedlineEvent:
        # Mixed modifiers such as Ctrl+Alt come from AltGr on non-US layouts.
        c = char if modifier == KeyModifiers.NONE else _ascii_lower(char)
        found = self.insert_keybindings.find_binding(modifier, KeyCode.from_char(c))
        if found is not None:
            return found
        if modifier in _INSERTING_MODIFIERS:
            inserted = _ascii_upper(c) if modifier == KeyModifiers.SHIFT else c
            return edit_bind(EditCommand(EditKind.INSERT_CHAR, inserted))
        return _none()

    def edit_mode(self) -> PromptEditMode:
        if self.mode is ViMode.INSERT:
            return PromptEditMode.vi(PromptViMode.INSERT)
        return PromptEditMode.vi(PromptViMode.NORMAL)