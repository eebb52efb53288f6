"""Terminal input events, editor commands and the edit-mode interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Optional, Union


class KeyModifiers(enum.Flag):
    """Modifier keys held while a key was pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


@dataclass(frozen=True)
class KeyCode:
    """A key on the keyboard: a named key, a character or a function key."""

    name: str
    value: Union[str, int, None] = None

    BACKSPACE: ClassVar["KeyCode"]
    ENTER: ClassVar["KeyCode"]
    LEFT: ClassVar["KeyCode"]
    RIGHT: ClassVar["KeyCode"]
    UP: ClassVar["KeyCode"]
    DOWN: ClassVar["KeyCode"]
    HOME: ClassVar["KeyCode"]
    END: ClassVar["KeyCode"]
    PAGE_UP: ClassVar["KeyCode"]
    PAGE_DOWN: ClassVar["KeyCode"]
    TAB: ClassVar["KeyCode"]
    BACK_TAB: ClassVar["KeyCode"]
    DELETE: ClassVar["KeyCode"]
    INSERT: ClassVar["KeyCode"]
    NULL: ClassVar["KeyCode"]
    ESC: ClassVar["KeyCode"]

    @classmethod
    def from_char(cls, c: str) -> "KeyCode":
        """Key code for a single printable character."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"a character key needs exactly one character, got {c!r}")
        return cls("Char", c)

    @classmethod
    def function(cls, number: int) -> "KeyCode":
        """Key code for a function key such as F1."""
        if number < 1:
            raise ValueError(f"function key number must be positive, got {number}")
        return cls("F", number)

    @property
    def char(self) -> Optional[str]:
        """The character of a character key, otherwise None."""
        if self.name == "Char" and isinstance(self.value, str):
            return self.value
        return None


for _attr, _name in (
    ("BACKSPACE", "Backspace"),
    ("ENTER", "Enter"),
    ("LEFT", "Left"),
    ("RIGHT", "Right"),
    ("UP", "Up"),
    ("DOWN", "Down"),
    ("HOME", "Home"),
    ("END", "End"),
    ("PAGE_UP", "PageUp"),
    ("PAGE_DOWN", "PageDown"),
    ("TAB", "Tab"),
    ("BACK_TAB", "BackTab"),
    ("DELETE", "Delete"),
    ("INSERT", "Insert"),
    ("NULL", "Null"),
    ("ESC", "Esc"),
):
    setattr(KeyCode, _attr, KeyCode(_name))


@dataclass(frozen=True)
class KeyEvent:
    """A key press."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a terminal cell."""

    kind: str = ""
    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int


@dataclass(frozen=True)
class FocusGained:
    """The terminal gained focus."""


@dataclass(frozen=True)
class FocusLost:
    """The terminal lost focus."""


@dataclass(frozen=True)
class PasteEvent:
    """Text pasted while bracketed paste was active."""

    text: str


class EditKind(enum.Enum):
    """Every kind of edit the line buffer understands."""

    MOVE_TO_START = "MoveToStart"
    MOVE_TO_LINE_START = "MoveToLineStart"
    MOVE_TO_END = "MoveToEnd"
    MOVE_TO_LINE_END = "MoveToLineEnd"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MOVE_WORD_LEFT = "MoveWordLeft"
    MOVE_BIG_WORD_LEFT = "MoveBigWordLeft"
    MOVE_WORD_RIGHT = "MoveWordRight"
    MOVE_WORD_RIGHT_START = "MoveWordRightStart"
    MOVE_BIG_WORD_RIGHT_START = "MoveBigWordRightStart"
    MOVE_WORD_RIGHT_END = "MoveWordRightEnd"
    MOVE_BIG_WORD_RIGHT_END = "MoveBigWordRightEnd"
    MOVE_TO_POSITION = "MoveToPosition"
    MOVE_RIGHT_UNTIL = "MoveRightUntil"
    MOVE_RIGHT_BEFORE = "MoveRightBefore"
    MOVE_LEFT_UNTIL = "MoveLeftUntil"
    MOVE_LEFT_BEFORE = "MoveLeftBefore"
    INSERT_CHAR = "InsertChar"
    INSERT_STRING = "InsertString"
    INSERT_NEWLINE = "InsertNewline"
    REPLACE_CHAR = "ReplaceChar"
    REPLACE_CHARS = "ReplaceChars"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    CUT_CHAR = "CutChar"
    BACKSPACE_WORD = "BackspaceWord"
    DELETE_WORD = "DeleteWord"
    CLEAR = "Clear"
    CLEAR_TO_LINE_END = "ClearToLineEnd"
    COMPLETE = "Complete"
    CUT_CURRENT_LINE = "CutCurrentLine"
    CUT_FROM_START = "CutFromStart"
    CUT_FROM_LINE_START = "CutFromLineStart"
    CUT_TO_END = "CutToEnd"
    CUT_TO_LINE_END = "CutToLineEnd"
    CUT_WORD_LEFT = "CutWordLeft"
    CUT_BIG_WORD_LEFT = "CutBigWordLeft"
    CUT_WORD_RIGHT = "CutWordRight"
    CUT_BIG_WORD_RIGHT = "CutBigWordRight"
    CUT_WORD_RIGHT_TO_NEXT = "CutWordRightToNext"
    CUT_BIG_WORD_RIGHT_TO_NEXT = "CutBigWordRightToNext"
    PASTE_CUT_BUFFER_BEFORE = "PasteCutBufferBefore"
    PASTE_CUT_BUFFER_AFTER = "PasteCutBufferAfter"
    UPPERCASE_WORD = "UppercaseWord"
    LOWERCASE_WORD = "LowercaseWord"
    CAPITALIZE_CHAR = "CapitalizeChar"
    SWITCHCASE_CHAR = "SwitchcaseChar"
    SWAP_WORDS = "SwapWords"
    SWAP_GRAPHEMES = "SwapGraphemes"
    UNDO = "Undo"
    REDO = "Redo"
    CUT_RIGHT_UNTIL = "CutRightUntil"
    CUT_RIGHT_BEFORE = "CutRightBefore"
    CUT_LEFT_UNTIL = "CutLeftUntil"
    CUT_LEFT_BEFORE = "CutLeftBefore"
    SELECT_ALL = "SelectAll"
    CUT_SELECTION = "CutSelection"
    COPY_SELECTION = "CopySelection"
    PASTE = "Paste"
    CUT_SELECTION_SYSTEM = "CutSelectionSystem"
    COPY_SELECTION_SYSTEM = "CopySelectionSystem"
    PASTE_SYSTEM = "PasteSystem"


@dataclass(frozen=True)
class EditCommand:
    """One edit of the line buffer.

    ``value`` carries the edit's argument: a character, a string, a position
    or, for ``REPLACE_CHARS``, a ``(count, text)`` pair. ``select`` marks
    movements that extend the selection.
    """

    kind: EditKind
    value: Any = None
    select: bool = False


class EventKind(enum.Enum):
    """Every kind of event the line editor reacts to."""

    NONE = "None"
    HISTORY_HINT_COMPLETE = "HistoryHintComplete"
    HISTORY_HINT_WORD_COMPLETE = "HistoryHintWordComplete"
    CTRL_D = "CtrlD"
    CTRL_C = "CtrlC"
    CLEAR_SCREEN = "ClearScreen"
    CLEAR_SCROLLBACK = "ClearScrollback"
    ENTER = "Enter"
    SUBMIT = "Submit"
    SUBMIT_OR_NEWLINE = "SubmitOrNewline"
    ESC = "Esc"
    MOUSE = "Mouse"
    RESIZE = "Resize"
    EDIT = "Edit"
    REPAINT = "Repaint"
    PREVIOUS_HISTORY = "PreviousHistory"
    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"
    NEXT_HISTORY = "NextHistory"
    SEARCH_HISTORY = "SearchHistory"
    MULTIPLE = "Multiple"
    UNTIL_FOUND = "UntilFound"
    MENU = "Menu"
    MENU_NEXT = "MenuNext"
    MENU_PREVIOUS = "MenuPrevious"
    MENU_UP = "MenuUp"
    MENU_DOWN = "MenuDown"
    MENU_LEFT = "MenuLeft"
    MENU_RIGHT = "MenuRight"
    MENU_PAGE_NEXT = "MenuPageNext"
    MENU_PAGE_PREVIOUS = "MenuPagePrevious"
    EXECUTE_HOST_COMMAND = "ExecuteHostCommand"
    OPEN_EDITOR = "OpenEditor"


@dataclass(frozen=True)
class ReedlineEvent:
    """An event for the line editor, possibly carrying a payload.

    Edit events carry a tuple of EditCommand, Multiple and UntilFound a tuple
    of events, Resize a ``(width, height)`` pair, Menu a menu name and
    ExecuteHostCommand the command text.
    """

    kind: EventKind
    payload: Any = None

    @classmethod
    def edit(cls, commands: Iterable[EditCommand]) -> "ReedlineEvent":
        return cls(EventKind.EDIT, tuple(commands))

    @classmethod
    def multiple(cls, events: Iterable["ReedlineEvent"]) -> "ReedlineEvent":
        return cls(EventKind.MULTIPLE, tuple(events))

    @classmethod
    def until_found(cls, events: Iterable["ReedlineEvent"]) -> "ReedlineEvent":
        return cls(EventKind.UNTIL_FOUND, tuple(events))

    @classmethod
    def resize(cls, width: int, height: int) -> "ReedlineEvent":
        return cls(EventKind.RESIZE, (width, height))

    @classmethod
    def menu(cls, name: str) -> "ReedlineEvent":
        return cls(EventKind.MENU, name)

    @classmethod
    def execute_host_command(cls, command: str) -> "ReedlineEvent":
        return cls(EventKind.EXECUTE_HOST_COMMAND, command)

    @property
    def commands(self) -> tuple:
        """The edit commands of an Edit event, otherwise empty."""
        return self.payload if self.kind is EventKind.EDIT else ()

    @property
    def events(self) -> tuple:
        """The inner events of a Multiple or UntilFound event, otherwise empty."""
        if self.kind in (EventKind.MULTIPLE, EventKind.UNTIL_FOUND):
            return self.payload
        return ()


class PromptViMode(enum.Enum):
    """The vi sub-mode shown by the prompt."""

    NORMAL = "Normal"
    INSERT = "Insert"


@dataclass(frozen=True)
class PromptEditMode:
    """What edit mode the prompt indicator should show."""

    mode: str = "Default"
    vi_mode: Optional[PromptViMode] = None
    custom: Optional[str] = None

    @classmethod
    def default(cls) -> "PromptEditMode":
        return cls("Default")

    @classmethod
    def emacs(cls) -> "PromptEditMode":
        return cls("Emacs")

    @classmethod
    def vi(cls, vi_mode: PromptViMode) -> "PromptEditMode":
        return cls("Vi", vi_mode=vi_mode)

    @classmethod
    def custom_mode(cls, name: str) -> "PromptEditMode":
        return cls("Custom", custom=name)


RawEvent = Union[KeyEvent, MouseEvent, ResizeEvent, FocusGained, FocusLost, PasteEvent]


class EditMode(abc.ABC):
    """Style of turning raw terminal input into editor events."""

    @abc.abstractmethod
    def parse_event(self, event: RawEvent) -> ReedlineEvent:
        """Translate a raw input event into an editor event."""

    @abc.abstractmethod
    def edit_mode(self) -> PromptEditMode:
        """What the prompt indicator should display."""


class CursorStyle(enum.Enum):
    """Terminal cursor shapes, valued by their DECSCUSR parameter."""

    DEFAULT_USER_SHAPE = 0
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERSCORE = 3
    STEADY_UNDERSCORE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6

    @property
    def escape(self) -> str:
        """The control sequence that selects this shape."""
        return f"\x1b[{self.value} q"


@dataclass
class CursorConfig:
    """Cursor shape for each edit mode; None leaves the cursor alone."""

    vi_insert: Optional[CursorStyle] = None
    vi_normal: Optional[CursorStyle] = None
    emacs: Optional[CursorStyle] = None