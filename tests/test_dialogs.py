"""Tests for the dialog state machine."""

import pytest

from flickr_bot.domain.dialogs import DialogSession, DialogStatus, DialogStep
from flickr_bot.services.dialogs import (
    CANCELED,
    COUNT_GUIDANCE,
    COUNT_QUESTION,
    NOTHING_TO_CANCEL,
    SHOW_PICTURES,
    FetchPhotos,
    SendText,
    advance_dialog,
    begin_show_pictures,
    recognize_number,
)


def test_any_message_starts_count_prompt() -> None:
    transition = advance_dialog([], "hello")

    assert transition.effects == [SendText(COUNT_QUESTION)]
    assert len(transition.stack) == 1
    assert transition.stack[0].dialog_id == SHOW_PICTURES
    assert transition.stack[0].step is DialogStep.AWAITING_COUNT


def test_valid_count_pops_frame_and_fetches() -> None:
    stack = begin_show_pictures([]).stack

    transition = advance_dialog(stack, "5")

    assert transition.stack == []
    assert transition.effects == [FetchPhotos(5)]


def test_count_is_recognized_inside_text() -> None:
    stack = begin_show_pictures([]).stack

    transition = advance_dialog(stack, "show me 12 please")

    assert transition.effects == [FetchPhotos(12)]


@pytest.mark.parametrize("text", ["0", "101", "-3", "2.5", "1,000", "100,000"])
def test_out_of_range_count_reprompts(text: str) -> None:
    stack = begin_show_pictures([]).stack

    transition = advance_dialog(stack, text)

    assert transition.stack == stack
    assert transition.effects == [SendText(COUNT_GUIDANCE), SendText(COUNT_QUESTION)]


def test_non_numeric_reply_reasks_question() -> None:
    stack = begin_show_pictures([]).stack

    transition = advance_dialog(stack, "lots")

    assert transition.stack == stack
    assert transition.effects == [SendText(COUNT_QUESTION)]


@pytest.mark.parametrize("text", ["cancel", "  CANCEL ", "Cancel"])
def test_cancel_clears_active_dialog(text: str) -> None:
    stack = begin_show_pictures([]).stack

    transition = advance_dialog(stack, text)

    assert transition.stack == []
    assert transition.effects == [SendText(CANCELED)]


def test_cancel_when_idle() -> None:
    transition = advance_dialog([], "cancel")

    assert transition.stack == []
    assert transition.effects == [SendText(NOTHING_TO_CANCEL)]


def test_recognize_number_handles_missing_text() -> None:
    assert recognize_number(None) is None
    assert recognize_number("about 1,000 photos") == 1000.0
    assert recognize_number("3,0") == 3.0


def test_session_status_follows_stack() -> None:
    session = DialogSession(conversation_id="c")
    assert session.status is DialogStatus.IDLE
    assert session.active_dialog_id is None

    session.stack = begin_show_pictures([]).stack

    assert session.status is DialogStatus.AWAITING_COUNT
    assert session.active_dialog_id == SHOW_PICTURES
