import pytest

from editmodes.events import EditCommand, EditKind, EventKind, ReedlineEvent
from editmodes.vi_motion import (
    Motion,
    ParseResult,
    ParseStatus,
    ReedlineOption,
    ViCharSearch,
    ViMode,
    ViState,
    parse_motion,
)


@pytest.mark.parametrize(
    "key, motion",
    [
        ("h", Motion.LEFT),
        ("l", Motion.RIGHT),
        ("j", Motion.DOWN),
        ("k", Motion.UP),
        ("b", Motion.PREVIOUS_WORD),
        ("B", Motion.PREVIOUS_BIG_WORD),
        ("w", Motion.NEXT_WORD),
        ("W", Motion.NEXT_BIG_WORD),
        ("e", Motion.NEXT_WORD_END),
        ("E", Motion.NEXT_BIG_WORD_END),
        ("0", Motion.START),
        ("^", Motion.START),
        ("$", Motion.END),
        (";", Motion.REPLAY_CHAR_SEARCH),
        (",", Motion.REVERSE_CHAR_SEARCH),
    ],
)
def test_single_key_motions(key, motion):
    result, rest = parse_motion(key + "x", None)
    assert result == ParseResult.valid(motion)
    assert rest == "x"


@pytest.mark.parametrize(
    "key, motion",
    [
        ("f", Motion.right_until("a")),
        ("t", Motion.right_before("a")),
        ("F", Motion.left_until("a")),
        ("T", Motion.left_before("a")),
    ],
)
def test_char_search_motions(key, motion):
    result, rest = parse_motion([key, "a"], None)
    assert result.status is ParseStatus.VALID
    assert result.value == motion
    assert rest == ""


def test_search_without_target_is_incomplete():
    result, _ = parse_motion("f", None)
    assert result.is_incomplete


def test_empty_input_is_incomplete():
    result, rest = parse_motion("", "d")
    assert result == ParseResult.incomplete()
    assert rest == ""


def test_repeated_command_char_is_line():
    result, _ = parse_motion("d", "d")
    assert result.value == Motion.LINE


def test_unknown_key_is_invalid():
    result, rest = parse_motion("m", "d")
    assert result.is_invalid
    assert rest == "m"
    assert parse_motion("d", None)[0].is_invalid


def test_up_motion_to_reedline():
    options = Motion.UP.to_reedline(ViState())
    assert options == [
        ReedlineOption.of_event(
            ReedlineEvent.until_found(
                [ReedlineEvent(EventKind.MENU_UP), ReedlineEvent(EventKind.UP)]
            )
        )
    ]


def test_right_motion_selects_in_visual_mode():
    options = Motion.RIGHT.to_reedline(ViState(mode=ViMode.VISUAL))
    event = options[0].into_reedline_event()
    assert event.events[-1] == ReedlineEvent.edit(
        [EditCommand(EditKind.MOVE_RIGHT, select=True)]
    )


def test_word_motion_without_selection():
    options = Motion.NEXT_WORD.to_reedline(ViState(mode=ViMode.NORMAL))
    assert options == [
        ReedlineOption.of_edit(EditCommand(EditKind.MOVE_WORD_RIGHT_START))
    ]


def test_line_motion_alone_does_nothing():
    assert Motion.LINE.to_reedline(ViState()) == []


def test_char_search_is_remembered_and_replayed():
    state = ViState(mode=ViMode.NORMAL)
    first = Motion.right_until("a").to_reedline(state)
    assert state.last_char_search == ViCharSearch.to_right("a")
    assert Motion.REPLAY_CHAR_SEARCH.to_reedline(state) == first
    reversed_options = Motion.REVERSE_CHAR_SEARCH.to_reedline(state)
    assert reversed_options == [
        ReedlineOption.of_edit(EditCommand(EditKind.MOVE_LEFT_UNTIL, "a"))
    ]


def test_replay_without_previous_search_is_empty():
    state = ViState()
    assert Motion.REPLAY_CHAR_SEARCH.to_reedline(state) == []
    assert Motion.REVERSE_CHAR_SEARCH.to_reedline(state) == []


@pytest.mark.parametrize(
    "search",
    [
        ViCharSearch.to_right("x"),
        ViCharSearch.to_left("x"),
        ViCharSearch.till_right("x"),
        ViCharSearch.till_left("x"),
    ],
)
def test_reverse_is_an_involution(search):
    assert search.reverse() != search
    assert search.reverse().reverse() == search


def test_char_search_to_move_and_cut():
    search = ViCharSearch.till_left("q")
    assert search.to_move(True) == EditCommand(EditKind.MOVE_LEFT_BEFORE, "q", True)
    assert search.to_cut() == EditCommand(EditKind.CUT_LEFT_BEFORE, "q")


def test_unknown_search_kind_rejected():
    with pytest.raises(ValueError):
        ViCharSearch("Sideways", "a")


def test_option_into_event():
    edit = EditCommand(EditKind.UNDO)
    assert ReedlineOption.of_edit(edit).into_reedline_event() == ReedlineEvent.edit(
        [edit]
    )
    repaint = ReedlineEvent(EventKind.REPAINT)
    assert ReedlineOption.of_event(repaint).into_reedline_event() == repaint
    assert ReedlineOption.incomplete().into_reedline_event() is None


def test_option_rejects_both_payloads():
    with pytest.raises(ValueError):
        ReedlineOption(
            event=ReedlineEvent(EventKind.REPAINT), edit=EditCommand(EditKind.UNDO)
        )


def test_parse_result_flags():
    assert ParseResult.invalid().is_invalid
    assert not ParseResult.incomplete().is_invalid
    assert not ParseResult.valid(Motion.UP).is_invalid