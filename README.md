# editmodes

Key event parsing for interactive line editors. The package turns raw
terminal input events (key presses, pastes, resizes, mouse and focus events)
into high-level editor events and edit commands, in either an Emacs style or
a modal Vi style.

It has no runtime dependencies and works with Python 3.10 and later.

## Events

`editmodes.events` defines the input side and the output side:

- Raw input: `KeyEvent` (a `KeyCode` plus `KeyModifiers` flags),
  `MouseEvent`, `ResizeEvent`, `FocusGained`, `FocusLost` and `PasteEvent`.
  Named keys are attributes such as `KeyCode.ENTER`, `KeyCode.ESC` or
  `KeyCode.LEFT`; `KeyCode.from_char("a")` and `KeyCode.function(1)` build
  character and function keys.
- Output: `ReedlineEvent`, an `EventKind` with an optional payload, and
  `EditCommand`, an `EditKind` with an optional value and a `select` flag.
  `ReedlineEvent.edit`, `multiple`, `until_found`, `resize`, `menu` and
  `execute_host_command` build events that carry payloads.
- `EditMode` is the abstract interface with `parse_event(event)` and
  `edit_mode()`, the latter returning a `PromptEditMode` for the prompt
  indicator.

## Emacs mode

`Emacs()` uses the bindings from `default_emacs_keybindings()` unless you
pass your own `Keybindings`:

```python
from editmodes.emacs import Emacs
from editmodes.events import EventKind, KeyCode, KeyEvent, KeyModifiers, ReedlineEvent

emacs = Emacs()
event = emacs.parse_event(KeyEvent(KeyCode.from_char("l"), KeyModifiers.CONTROL))
assert event == ReedlineEvent(EventKind.CLEAR_SCREEN)
```

Unbound characters typed plainly, with Shift, or with Ctrl+Alt (as AltGr
produces) become insert-character edits; Shift upper-cases ASCII letters.
Other unbound keys give a `NONE` event. Pasted text becomes an
insert-string edit with `\r\n` and `\r` turned into `\n`; resizes become
`RESIZE` events, mouse input `MOUSE`, and focus changes `NONE`.

## Vi mode

`Vi` keeps separate insert and normal mode tables
(`default_vi_insert_keybindings()` and `default_vi_normal_keybindings()`
from `editmodes.vi_keybindings`) and starts in insert mode. `Esc` switches
to normal mode, `v` in normal mode switches to visual mode, and `Enter`
submits and returns to insert mode. In normal and visual mode, keys not
bound in the normal table are collected into a sequence such as `2dw`,
`ci(`, `fa` then `;`, or `dd`, and parsed once complete:

```python
from editmodes.events import EditCommand, EditKind, KeyCode, KeyEvent, ReedlineEvent
from editmodes.vi import Vi
from editmodes.vi_motion import ViMode

vi = Vi()
vi.parse_event(KeyEvent(KeyCode.ESC))
assert vi.mode is ViMode.NORMAL

vi.parse_event(KeyEvent(KeyCode.from_char("d")))
event = vi.parse_event(KeyEvent(KeyCode.from_char("w")))
assert event == ReedlineEvent.multiple(
    [ReedlineEvent.edit([EditCommand(EditKind.CUT_WORD_RIGHT_TO_NEXT)])]
)
```

In visual mode motions extend the selection, and `d` or `c` cut it.
`.` repeats the last command, and `;` and `,` repeat the last `f`, `F`,
`t` or `T` search forwards or reversed.

The sequence parser in `editmodes.vi_parser` can be used on its own:

```python
from editmodes.vi_motion import ViMode, ViState
from editmodes.vi_parser import parse

sequence = parse("2dw")
assert sequence.is_valid()
assert sequence.is_complete(ViMode.NORMAL)
event = sequence.to_reedline_event(ViState(mode=ViMode.NORMAL))
```

`parse_command` (in `editmodes.vi_command`) and `parse_motion` (in
`editmodes.vi_motion`) parse the command and motion parts, returning the
result together with the unconsumed input.

## Custom bindings

```python
from editmodes.events import EditCommand, EditKind, KeyCode, KeyModifiers
from editmodes.keybindings import Keybindings, edit_bind

bindings = Keybindings()
bindings.add_binding(
    KeyModifiers.ALT, KeyCode.from_char("x"), edit_bind(EditCommand(EditKind.CLEAR))
)
```

`find_binding` looks a combination up, `remove_binding` removes it and
returns what it was bound to, and `get_keybindings` gives the whole mapping.
Binding an empty `until_found` event raises `ValueError`. The functions
`add_common_control_bindings`, `add_common_navigation_bindings`,
`add_common_edit_bindings` and `add_common_selection_bindings` add the
shared default sets to any `Keybindings`.

## Cursor shapes

`CursorConfig` maps each mode (Emacs, Vi insert, Vi normal) to an optional
`CursorStyle`; `CursorStyle.escape` is the control sequence that selects the
shape.

## What it does not do

The package only translates input events. It does not read from the
terminal, keep a line buffer, apply edit commands, store history, draw a
prompt or set the cursor shape; an editor built on it does those things.

## Running the tests

```
pip install "editmodes[test]"
pytest
```