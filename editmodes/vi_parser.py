"""Parsing of vi normal- and visual-mode key sequences into editor events."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from editmodes.events import EventKind, ReedlineEvent
from editmodes.vi_command import (
    Command,
    is_valid_change_inside_left,
    is_valid_change_inside_right,
    parse_command,
)
from editmodes.vi_motion import (
    Motion,
    ParseResult,
    ReedlineOption,
    ViMode,
    ViState,
    parse_motion,
)

_ASCII_DIGITS = "0123456789"

# Commands that switch to insert mode when no motion follows them.
_INSERTING_COMMANDS = frozenset(
    {
        "EnterViInsert",
        "EnterViAppend",
        "ChangeToLineEnd",
        "AppendToEnd",
        "PrependToStart",
        "RewriteCurrentLine",
        "SubstituteCharWithInsert",
        "HistorySearch",
    }
)


def _none_event() -> ReedlineEvent:
    return ReedlineEvent(EventKind.NONE)


@dataclass(frozen=True)
class ParsedViSequence:
    """A vi key sequence: [multiplier] [command] [count] [motion]."""

    multiplier: Optional[int] = None
    command: Optional[Command] = None
    count: Optional[int] = None
    motion: ParseResult = field(default_factory=ParseResult.incomplete)

    def is_valid(self) -> bool:
        """False when the keys cannot start any vi sequence."""
        return not self.motion.is_invalid

    def is_complete(self, mode: ViMode) -> bool:
        """Whether the sequence is ready to run in normal or visual mode."""
        if mode not in (ViMode.NORMAL, ViMode.VISUAL):
            raise ValueError(f"vi sequences are only parsed in normal or visual mode, not {mode}")
        command, motion = self.command, self.motion
        if command is None:
            return motion.is_valid
        if command.name == "Incomplete":
            return False
        if motion.is_incomplete:
            return not command.requires_motion() or mode is ViMode.VISUAL
        return motion.is_valid

    def _total_multiplier(self) -> int:
        # vim only considers the product of multiplier and count
        return (self.multiplier or 1) * (self.count or 1)

    def _apply_multiplier(
        self, raw_events: Optional[List[ReedlineOption]]
    ) -> ReedlineEvent:
        if raw_events is None:
            return _none_event()
        repeated = itertools.chain.from_iterable(
            itertools.repeat(raw_events, self._total_multiplier())
        )
        events = [
            event
            for event in (option.into_reedline_event() for option in repeated)
            if event is not None
        ]
        if not events or _none_event() in events:
            return _none_event()
        return ReedlineEvent.multiple(events)

    def changes_mode(self) -> Optional[ViMode]:
        """The mode the editor switches to after running this sequence, if any."""
        command, motion = self.command, self.motion
        if command is None:
            return None
        if motion.is_incomplete:
            if command.name in _INSERTING_COMMANDS:
                return ViMode.INSERT
            if command.name == "ChangeInside" and command.char is not None and (
                is_valid_change_inside_left(command.char)
                or is_valid_change_inside_right(command.char)
            ):
                return ViMode.INSERT
            if command.name == "Delete":
                return ViMode.NORMAL
            return None
        if motion.is_valid and command.name == "Change":
            return ViMode.INSERT
        return None

    def to_reedline_event(self, vi_state: ViState) -> ReedlineEvent:
        """The editor event this sequence produces, updating ``vi_state``."""
        command, motion = self.command, self.motion
        if command is not None and self.count is None and motion.is_incomplete:
            events = self._apply_multiplier(command.to_reedline(vi_state))
            self._remember(events, vi_state)
            return events
        if command is not None and motion.is_valid:
            events = self._apply_multiplier(
                command.to_reedline_with_motion(motion.value, vi_state)
            )
            self._remember(events, vi_state)
            return events
        if command is None and motion.is_valid:
            return self._apply_multiplier(motion.value.to_reedline(vi_state))
        return _none_event()

    @staticmethod
    def _remember(events: ReedlineEvent, vi_state: ViState) -> None:
        if events.kind is not EventKind.NONE:
            vi_state.previous = events


def _parse_number(text: str) -> Tuple[Optional[int], str]:
    if not text or text[0] == "0" or text[0] not in _ASCII_DIGITS:
        return None, text
    digits = "".join(itertools.takewhile(lambda c: c in _ASCII_DIGITS, text))
    return int(digits), text[len(digits):]


def parse(chars: Sequence[str]) -> ParsedViSequence:
    """Parse a vi key sequence from its characters."""
    text = "".join(chars)
    multiplier, text = _parse_number(text)
    command, text = parse_command(text)
    count, text = _parse_number(text)
    whole_line = command.whole_line_char() if command is not None else None
    motion, _ = parse_motion(text, whole_line)
    return ParsedViSequence(multiplier, command, count, motion)