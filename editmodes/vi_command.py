"""Vi operator commands such as d, c, p and x, and their parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple

from editmodes.events import EditCommand, EditKind, EventKind, ReedlineEvent
from editmodes.vi_motion import Motion, ReedlineOption, ViState

_CHANGE_INSIDE_LEFT = frozenset("([{\"'`<")
_CHANGE_INSIDE_RIGHT = frozenset(")]}\"'`>")

_BRACKET_PAIRS = {
    "(": ")",
    "[": "]",
    "{": "}",
    "<": ">",
    ")": "(",
    "]": "[",
    "}": "{",
    ">": "<",
}


def is_valid_change_inside_left(c: str) -> bool:
    """Whether ``c`` opens a region that ci/di can act inside."""
    return c in _CHANGE_INSIDE_LEFT


def is_valid_change_inside_right(c: str) -> bool:
    """Whether ``c`` closes a region that ci/di can act inside."""
    return c in _CHANGE_INSIDE_RIGHT


def _bracket_for(c: str) -> str:
    return _BRACKET_PAIRS.get(c, c)


def _edit(kind: EditKind, value: object = None, select: bool = False) -> ReedlineOption:
    return ReedlineOption.of_edit(EditCommand(kind, value, select))


# Commands that translate to one fixed edit with no argument.
_SIMPLE_EDITS: Dict[str, EditKind] = {
    "EnterViAppend": EditKind.MOVE_RIGHT,
    "PasteAfter": EditKind.PASTE_CUT_BUFFER_AFTER,
    "PasteBefore": EditKind.PASTE_CUT_BUFFER_BEFORE,
    "Undo": EditKind.UNDO,
    "ChangeToLineEnd": EditKind.CLEAR_TO_LINE_END,
    "DeleteToEnd": EditKind.CUT_TO_LINE_END,
    "AppendToEnd": EditKind.MOVE_TO_LINE_END,
    "PrependToStart": EditKind.MOVE_TO_LINE_START,
    "RewriteCurrentLine": EditKind.CUT_CURRENT_LINE,
    "DeleteChar": EditKind.CUT_CHAR,
    "SubstituteCharWithInsert": EditKind.CUT_CHAR,
    "Switchcase": EditKind.SWITCHCASE_CHAR,
    # With a motion still pending the command acts on the visual selection
    "Delete": EditKind.CUT_SELECTION,
    "Change": EditKind.CUT_SELECTION,
}

# Cuts performed by d<motion>; c<motion> differs only where overridden below.
_DELETE_MOTION_CUTS: Dict[str, EditKind] = {
    "End": EditKind.CUT_TO_LINE_END,
    "Line": EditKind.CUT_CURRENT_LINE,
    "NextWord": EditKind.CUT_WORD_RIGHT_TO_NEXT,
    "NextBigWord": EditKind.CUT_BIG_WORD_RIGHT_TO_NEXT,
    "NextWordEnd": EditKind.CUT_WORD_RIGHT,
    "NextBigWordEnd": EditKind.CUT_BIG_WORD_RIGHT,
    "PreviousWord": EditKind.CUT_WORD_LEFT,
    "PreviousBigWord": EditKind.CUT_BIG_WORD_LEFT,
    "Start": EditKind.CUT_FROM_LINE_START,
    "Left": EditKind.BACKSPACE,
    "Right": EditKind.DELETE,
}

_CHANGE_MOTION_CUTS: Dict[str, EditKind] = {
    **_DELETE_MOTION_CUTS,
    "NextWord": EditKind.CUT_WORD_RIGHT,
    "NextBigWord": EditKind.CUT_BIG_WORD_RIGHT,
}


@dataclass(frozen=True)
class Command:
    """A vi command; ReplaceChar, ChangeInside and DeleteInside carry a character."""

    name: str
    char: Optional[str] = None

    INCOMPLETE: ClassVar["Command"]
    DELETE: ClassVar["Command"]
    DELETE_CHAR: ClassVar["Command"]
    SUBSTITUTE_CHAR_WITH_INSERT: ClassVar["Command"]
    PASTE_AFTER: ClassVar["Command"]
    PASTE_BEFORE: ClassVar["Command"]
    ENTER_VI_APPEND: ClassVar["Command"]
    ENTER_VI_INSERT: ClassVar["Command"]
    UNDO: ClassVar["Command"]
    CHANGE_TO_LINE_END: ClassVar["Command"]
    DELETE_TO_END: ClassVar["Command"]
    APPEND_TO_END: ClassVar["Command"]
    PREPEND_TO_START: ClassVar["Command"]
    REWRITE_CURRENT_LINE: ClassVar["Command"]
    CHANGE: ClassVar["Command"]
    HISTORY_SEARCH: ClassVar["Command"]
    SWITCHCASE: ClassVar["Command"]
    REPEAT_LAST_ACTION: ClassVar["Command"]

    @classmethod
    def replace_char(cls, c: str) -> "Command":
        return cls("ReplaceChar", c)

    @classmethod
    def change_inside(cls, c: str) -> "Command":
        return cls("ChangeInside", c)

    @classmethod
    def delete_inside(cls, c: str) -> "Command":
        return cls("DeleteInside", c)

    def whole_line_char(self) -> Optional[str]:
        """The key that, repeated after this command, means the whole line."""
        if self.name == "Delete":
            return "d"
        if self.name == "Change":
            return "c"
        return None

    def requires_motion(self) -> bool:
        """Whether the command waits for a motion outside visual mode."""
        return self.name in ("Delete", "Change")

    def to_reedline(self, vi_state: ViState) -> List[ReedlineOption]:
        """The steps this command performs when no motion follows it."""
        name = self.name
        if name == "EnterViInsert":
            return [ReedlineOption.of_event(ReedlineEvent(EventKind.REPAINT))]
        if name == "HistorySearch":
            return [ReedlineOption.of_event(ReedlineEvent(EventKind.SEARCH_HISTORY))]
        if name == "Incomplete":
            return [ReedlineOption.incomplete()]
        if name in _SIMPLE_EDITS:
            return [_edit(_SIMPLE_EDITS[name])]
        if name == "ReplaceChar":
            return [_edit(EditKind.REPLACE_CHAR, self.char)]
        if name == "RepeatLastAction":
            previous = vi_state.previous
            return [] if previous is None else [ReedlineOption.of_event(previous)]
        if name in ("ChangeInside", "DeleteInside"):
            return self._inside_edits()
        raise ValueError(f"unknown command: {name!r}")

    def _inside_edits(self) -> List[ReedlineOption]:
        c = self.char or ""
        if is_valid_change_inside_left(c):
            left, right = c, _bracket_for(c)
        elif is_valid_change_inside_right(c):
            left, right = _bracket_for(c), c
        else:
            return []
        return [
            _edit(EditKind.CUT_LEFT_BEFORE, left),
            _edit(EditKind.CUT_RIGHT_BEFORE, right),
        ]

    def to_reedline_with_motion(
        self, motion: Motion, vi_state: ViState
    ) -> Optional[List[ReedlineOption]]:
        """The steps of this command applied over ``motion``; None if it has none."""
        if self.name == "Delete":
            return _cut_over_motion(motion, vi_state, _DELETE_MOTION_CUTS, change=False)
        if self.name == "Change":
            ops = _cut_over_motion(motion, vi_state, _CHANGE_MOTION_CUTS, change=True)
            if ops is None:
                return None
            # Repaint so the switch to insert mode is displayed
            return ops + [ReedlineOption.of_event(ReedlineEvent(EventKind.REPAINT))]
        return None


def _cut_over_motion(
    motion: Motion,
    vi_state: ViState,
    cuts: Dict[str, EditKind],
    change: bool,
) -> Optional[List[ReedlineOption]]:
    name = motion.name
    if change and name == "Line":
        return [
            _edit(EditKind.MOVE_TO_LINE_START),
            _edit(EditKind.CUT_TO_LINE_END),
        ]
    if name in cuts:
        return [_edit(cuts[name])]
    if name in ("Up", "Down"):
        return None

    search = motion.char_search
    if search is not None:
        vi_state.last_char_search = search
        return [ReedlineOption.of_edit(search.to_cut())]

    last = vi_state.last_char_search
    if name == "ReplayCharSearch":
        return None if last is None else [ReedlineOption.of_edit(last.to_cut())]
    if name == "ReverseCharSearch":
        return None if last is None else [ReedlineOption.of_edit(last.reverse().to_cut())]
    raise ValueError(f"unknown motion: {name!r}")


for _attr, _name in (
    ("INCOMPLETE", "Incomplete"),
    ("DELETE", "Delete"),
    ("DELETE_CHAR", "DeleteChar"),
    ("SUBSTITUTE_CHAR_WITH_INSERT", "SubstituteCharWithInsert"),
    ("PASTE_AFTER", "PasteAfter"),
    ("PASTE_BEFORE", "PasteBefore"),
    ("ENTER_VI_APPEND", "EnterViAppend"),
    ("ENTER_VI_INSERT", "EnterViInsert"),
    ("UNDO", "Undo"),
    ("CHANGE_TO_LINE_END", "ChangeToLineEnd"),
    ("DELETE_TO_END", "DeleteToEnd"),
    ("APPEND_TO_END", "AppendToEnd"),
    ("PREPEND_TO_START", "PrependToStart"),
    ("REWRITE_CURRENT_LINE", "RewriteCurrentLine"),
    ("CHANGE", "Change"),
    ("HISTORY_SEARCH", "HistorySearch"),
    ("SWITCHCASE", "Switchcase"),
    ("REPEAT_LAST_ACTION", "RepeatLastAction"),
):
    setattr(Command, _attr, Command(_name))


_SINGLE_KEY_COMMANDS = {
    "p": Command.PASTE_AFTER,
    "P": Command.PASTE_BEFORE,
    "i": Command.ENTER_VI_INSERT,
    "a": Command.ENTER_VI_APPEND,
    "u": Command.UNDO,
    "x": Command.DELETE_CHAR,
    "s": Command.SUBSTITUTE_CHAR_WITH_INSERT,
    "?": Command.HISTORY_SEARCH,
    "C": Command.CHANGE_TO_LINE_END,
    "D": Command.DELETE_TO_END,
    "I": Command.PREPEND_TO_START,
    "A": Command.APPEND_TO_END,
    "S": Command.REWRITE_CURRENT_LINE,
    "~": Command.SWITCHCASE,
    ".": Command.REPEAT_LAST_ACTION,
}

_OPERATORS = {
    "d": (Command.DELETE, Command.delete_inside),
    "c": (Command.CHANGE, Command.change_inside),
}


def parse_command(chars: Sequence[str]) -> Tuple[Optional[Command], str]:
    """Parse a command from the front of ``chars``.

    Returns the command, or None when none starts here, and the unconsumed
    input. An operator followed by ``i`` and an unsuitable character yields
    None with those keys consumed.
    """
    text = "".join(chars)
    if not text:
        return None, text

    head, rest = text[0], text[1:]
    if head in _OPERATORS:
        plain, inside = _OPERATORS[head]
        if not rest.startswith("i"):
            return plain, rest
        rest = rest[1:]
        if not rest:
            return None, rest
        target, rest = rest[0], rest[1:]
        if is_valid_change_inside_left(target) or is_valid_change_inside_right(target):
            return inside(target), rest
        return None, rest
    if head == "r":
        if not rest:
            return Command.INCOMPLETE, rest
        return Command.replace_char(rest[0]), rest[1:]
    if head in _SINGLE_KEY_COMMANDS:
        return _SINGLE_KEY_COMMANDS[head], rest
    return None, text