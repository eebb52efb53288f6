"""Vi motions, character searches and the shared pieces of vi parsing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Sequence, Tuple

from editmodes.events import EditCommand, EditKind, EventKind, ReedlineEvent


class ViMode(enum.Enum):
    """The sub-mode a vi editor is in."""

    NORMAL = "Normal"
    INSERT = "Insert"
    VISUAL = "Visual"


class ParseStatus(enum.Enum):
    """Outcome of parsing part of a vi key sequence."""

    VALID = "Valid"
    INCOMPLETE = "Incomplete"
    INVALID = "Invalid"


@dataclass(frozen=True)
class ParseResult:
    """A parsed value, or the note that more input is needed or none fits."""

    status: ParseStatus
    value: Any = None

    @classmethod
    def valid(cls, value: Any) -> "ParseResult":
        return cls(ParseStatus.VALID, value)

    @classmethod
    def incomplete(cls) -> "ParseResult":
        return cls(ParseStatus.INCOMPLETE)

    @classmethod
    def invalid(cls) -> "ParseResult":
        return cls(ParseStatus.INVALID)

    @property
    def is_valid(self) -> bool:
        return self.status is ParseStatus.VALID

    @property
    def is_incomplete(self) -> bool:
        return self.status is ParseStatus.INCOMPLETE

    @property
    def is_invalid(self) -> bool:
        return self.status is ParseStatus.INVALID


@dataclass(frozen=True)
class ReedlineOption:
    """One step produced by a vi sequence: an event, an edit, or incomplete."""

    event: Optional[ReedlineEvent] = None
    edit: Optional[EditCommand] = None

    def __post_init__(self) -> None:
        if self.event is not None and self.edit is not None:
            raise ValueError("an option holds either an event or an edit, not both")

    @classmethod
    def of_event(cls, event: ReedlineEvent) -> "ReedlineOption":
        return cls(event=event)

    @classmethod
    def of_edit(cls, edit: EditCommand) -> "ReedlineOption":
        return cls(edit=edit)

    @classmethod
    def incomplete(cls) -> "ReedlineOption":
        return cls()

    @property
    def is_incomplete(self) -> bool:
        return self.event is None and self.edit is None

    def into_reedline_event(self) -> Optional[ReedlineEvent]:
        """The editor event for this option; None when incomplete."""
        if self.event is not None:
            return self.event
        if self.edit is not None:
            return ReedlineEvent.edit([self.edit])
        return None


_SEARCH_KINDS = ("ToRight", "ToLeft", "TillRight", "TillLeft")
_REVERSED = {
    "ToRight": "ToLeft",
    "ToLeft": "ToRight",
    "TillRight": "TillLeft",
    "TillLeft": "TillRight",
}
_MOVE_KINDS = {
    "ToRight": EditKind.MOVE_RIGHT_UNTIL,
    "ToLeft": EditKind.MOVE_LEFT_UNTIL,
    "TillRight": EditKind.MOVE_RIGHT_BEFORE,
    "TillLeft": EditKind.MOVE_LEFT_BEFORE,
}
_CUT_KINDS = {
    "ToRight": EditKind.CUT_RIGHT_UNTIL,
    "ToLeft": EditKind.CUT_LEFT_UNTIL,
    "TillRight": EditKind.CUT_RIGHT_BEFORE,
    "TillLeft": EditKind.CUT_LEFT_BEFORE,
}


@dataclass(frozen=True)
class ViCharSearch:
    """A left or right motion to (f/F) or till (t/T) a character."""

    kind: str
    char: str

    def __post_init__(self) -> None:
        if self.kind not in _SEARCH_KINDS:
            raise ValueError(f"unknown character search kind: {self.kind!r}")

    @classmethod
    def to_right(cls, c: str) -> "ViCharSearch":
        return cls("ToRight", c)

    @classmethod
    def to_left(cls, c: str) -> "ViCharSearch":
        return cls("ToLeft", c)

    @classmethod
    def till_right(cls, c: str) -> "ViCharSearch":
        return cls("TillRight", c)

    @classmethod
    def till_left(cls, c: str) -> "ViCharSearch":
        return cls("TillLeft", c)

    def reverse(self) -> "ViCharSearch":
        """The same search in the opposite direction, as used by ','."""
        return ViCharSearch(_REVERSED[self.kind], self.char)

    def to_move(self, select_mode: bool) -> EditCommand:
        """The cursor movement this search performs."""
        return EditCommand(_MOVE_KINDS[self.kind], self.char, select_mode)

    def to_cut(self) -> EditCommand:
        """The cut this search performs when combined with an operator."""
        return EditCommand(_CUT_KINDS[self.kind], self.char)


@dataclass
class ViState:
    """State of a vi editor that parsed sequences read and update."""

    mode: ViMode = ViMode.INSERT
    previous: Optional[ReedlineEvent] = None
    last_char_search: Optional[ViCharSearch] = None


def _ev(kind: EventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _edit(kind: EditKind, select: bool) -> List[ReedlineOption]:
    return [ReedlineOption.of_edit(EditCommand(kind, select=select))]


@dataclass(frozen=True)
class Motion:
    """A vi motion; the character searches carry their target character."""

    name: str
    char: Optional[str] = None

    LEFT: ClassVar["Motion"]
    RIGHT: ClassVar["Motion"]
    UP: ClassVar["Motion"]
    DOWN: ClassVar["Motion"]
    NEXT_WORD: ClassVar["Motion"]
    NEXT_BIG_WORD: ClassVar["Motion"]
    NEXT_WORD_END: ClassVar["Motion"]
    NEXT_BIG_WORD_END: ClassVar["Motion"]
    PREVIOUS_WORD: ClassVar["Motion"]
    PREVIOUS_BIG_WORD: ClassVar["Motion"]
    LINE: ClassVar["Motion"]
    START: ClassVar["Motion"]
    END: ClassVar["Motion"]
    REPLAY_CHAR_SEARCH: ClassVar["Motion"]
    REVERSE_CHAR_SEARCH: ClassVar["Motion"]

    @classmethod
    def right_until(cls, c: str) -> "Motion":
        return cls("RightUntil", c)

    @classmethod
    def right_before(cls, c: str) -> "Motion":
        return cls("RightBefore", c)

    @classmethod
    def left_until(cls, c: str) -> "Motion":
        return cls("LeftUntil", c)

    @classmethod
    def left_before(cls, c: str) -> "Motion":
        return cls("LeftBefore", c)

    @property
    def char_search(self) -> Optional[ViCharSearch]:
        """The character search this motion starts, if it is one."""
        kind = _MOTION_SEARCH.get(self.name)
        if kind is None or self.char is None:
            return None
        return ViCharSearch(kind, self.char)

    def to_reedline(self, vi_state: ViState) -> List[ReedlineOption]:
        """The steps this motion performs on its own, outside any command."""
        select = vi_state.mode is ViMode.VISUAL
        name = self.name

        if name == "Left":
            return [
                ReedlineOption.of_event(
                    ReedlineEvent.until_found(
                        [
                            _ev(EventKind.MENU_LEFT),
                            ReedlineEvent.edit(
                                [EditCommand(EditKind.MOVE_LEFT, select=select)]
                            ),
                        ]
                    )
                )
            ]
        if name == "Right":
            return [
                ReedlineOption.of_event(
                    ReedlineEvent.until_found(
                        [
                            _ev(EventKind.HISTORY_HINT_COMPLETE),
                            _ev(EventKind.MENU_RIGHT),
                            ReedlineEvent.edit(
                                [EditCommand(EditKind.MOVE_RIGHT, select=select)]
                            ),
                        ]
                    )
                )
            ]
        if name == "Up":
            return [
                ReedlineOption.of_event(
                    ReedlineEvent.until_found(
                        [_ev(EventKind.MENU_UP), _ev(EventKind.UP)]
                    )
                )
            ]
        if name == "Down":
            return [
                ReedlineOption.of_event(
                    ReedlineEvent.until_found(
                        [_ev(EventKind.MENU_DOWN), _ev(EventKind.DOWN)]
                    )
                )
            ]
        if name in _SIMPLE_MOVES:
            return _edit(_SIMPLE_MOVES[name], select)
        if name == "Line":
            # Only meaningful combined with an operator such as dd or cc
            return []

        search = self.char_search
        if search is not None:
            vi_state.last_char_search = search
            return [ReedlineOption.of_edit(search.to_move(select))]

        last = vi_state.last_char_search
        if name == "ReplayCharSearch":
            return [] if last is None else [ReedlineOption.of_edit(last.to_move(select))]
        if name == "ReverseCharSearch":
            if last is None:
                return []
            return [ReedlineOption.of_edit(last.reverse().to_move(select))]
        raise ValueError(f"unknown motion: {name!r}")


_MOTION_SEARCH = {
    "RightUntil": "ToRight",
    "RightBefore": "TillRight",
    "LeftUntil": "ToLeft",
    "LeftBefore": "TillLeft",
}

_SIMPLE_MOVES = {
    "NextWord": EditKind.MOVE_WORD_RIGHT_START,
    "NextBigWord": EditKind.MOVE_BIG_WORD_RIGHT_START,
    "NextWordEnd": EditKind.MOVE_WORD_RIGHT_END,
    "NextBigWordEnd": EditKind.MOVE_BIG_WORD_RIGHT_END,
    "PreviousWord": EditKind.MOVE_WORD_LEFT,
    "PreviousBigWord": EditKind.MOVE_BIG_WORD_LEFT,
    "Start": EditKind.MOVE_TO_LINE_START,
    "End": EditKind.MOVE_TO_LINE_END,
}

for _attr, _name in (
    ("LEFT", "Left"),
    ("RIGHT", "Right"),
    ("UP", "Up"),
    ("DOWN", "Down"),
    ("NEXT_WORD", "NextWord"),
    ("NEXT_BIG_WORD", "NextBigWord"),
    ("NEXT_WORD_END", "NextWordEnd"),
    ("NEXT_BIG_WORD_END", "NextBigWordEnd"),
    ("PREVIOUS_WORD", "PreviousWord"),
    ("PREVIOUS_BIG_WORD", "PreviousBigWord"),
    ("LINE", "Line"),
    ("START", "Start"),
    ("END", "End"),
    ("REPLAY_CHAR_SEARCH", "ReplayCharSearch"),
    ("REVERSE_CHAR_SEARCH", "ReverseCharSearch"),
):
    setattr(Motion, _attr, Motion(_name))


_SINGLE_KEY_MOTIONS = {
    "h": Motion.LEFT,
    "l": Motion.RIGHT,
    "j": Motion.DOWN,
    "k": Motion.UP,
    "b": Motion.PREVIOUS_WORD,
    "B": Motion.PREVIOUS_BIG_WORD,
    "w": Motion.NEXT_WORD,
    "W": Motion.NEXT_BIG_WORD,
    "e": Motion.NEXT_WORD_END,
    "E": Motion.NEXT_BIG_WORD_END,
    "0": Motion.START,
    "^": Motion.START,
    "$": Motion.END,
    ";": Motion.REPLAY_CHAR_SEARCH,
    ",": Motion.REVERSE_CHAR_SEARCH,
}

_SEARCH_MOTIONS = {
    "f": Motion.right_until,
    "t": Motion.right_before,
    "F": Motion.left_until,
    "T": Motion.left_before,
}


def parse_motion(
    chars: Sequence[str], command_char: Optional[str] = None
) -> Tuple[ParseResult, str]:
    """Parse a motion from the front of ``chars``.

    ``command_char`` is the key that, repeated, makes the command act on the
    whole line (as in ``dd``). Returns the result and the unconsumed input.
    """
    text = "".join(chars)
    if not text:
        return ParseResult.incomplete(), text

    head, rest = text[0], text[1:]
    if head in _SINGLE_KEY_MOTIONS:
        return ParseResult.valid(_SINGLE_KEY_MOTIONS[head]), rest
    if head in _SEARCH_MOTIONS:
        if not rest:
            return ParseResult.incomplete(), rest
        return ParseResult.valid(_SEARCH_MOTIONS[head](rest[0])), rest[1:]
    if command_char is not None and head == command_char:
        return ParseResult.valid(Motion.LINE), rest
    return ParseResult.invalid(), text