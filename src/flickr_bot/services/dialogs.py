"""Dialog state machine for the photo count flow.

Transitions are pure: they take the current dialog stack and the user's
text and return the next stack plus the effects the caller should apply.
"""

import re
from dataclasses import dataclass, field

from flickr_bot.domain.dialogs import DialogFrame, DialogStep

SHOW_PICTURES = "show_pictures"
NUM_OF_PICTURES = "number_of_pictures"

MIN_PHOTOS = 1
MAX_PHOTOS = 100

COUNT_QUESTION = f"How many pictures should i fetch ({MIN_PHOTOS} to {MAX_PHOTOS})?"
COUNT_GUIDANCE = f"Please select a valid value, {MIN_PHOTOS} to {MAX_PHOTOS}"
CANCELED = "Ok... canceled."
NOTHING_TO_CANCEL = "Nothing to cancel."

# Commas only group thousands: "1,000" is one thousand.
_NUMBER_PATTERN = re.compile(r"[-+]?(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?")


@dataclass(frozen=True)
class SendText:
    """Reply with a plain text message."""

    text: str


@dataclass(frozen=True)
class FetchPhotos:
    """Fetch and display ``count`` photos."""

    count: int


Effect = SendText | FetchPhotos


@dataclass(frozen=True)
class Transition:
    """Result of feeding one message into the dialog."""

    stack: list[DialogFrame]
    effects: list[Effect] = field(default_factory=list)


def is_cancel(text: str | None) -> bool:
    """Return true when the utterance asks to cancel."""
    return (text or "").strip().lower() == "cancel"


def advance_dialog(stack: list[DialogFrame], text: str | None) -> Transition:
    """Advance the dialog stack with an inbound message."""
    if is_cancel(text):
        if stack:
            return Transition(stack=[], effects=[SendText(CANCELED)])
        return Transition(stack=[], effects=[SendText(NOTHING_TO_CANCEL)])

    if stack and stack[-1].step is DialogStep.AWAITING_COUNT:
        return _continue_count_prompt(stack, text)

    return begin_show_pictures(stack)


def begin_show_pictures(stack: list[DialogFrame]) -> Transition:
    """Start the show pictures dialog by asking for a count."""
    frame = DialogFrame(
        dialog_id=SHOW_PICTURES,
        step=DialogStep.AWAITING_COUNT,
        prompt_id=NUM_OF_PICTURES,
    )
    return Transition(stack=[*stack, frame], effects=[SendText(COUNT_QUESTION)])


def _continue_count_prompt(stack: list[DialogFrame], text: str | None) -> Transition:
    value = recognize_number(text)
    if value is None:
        return Transition(stack=list(stack), effects=[SendText(COUNT_QUESTION)])
    if not validate_count(value):
        return Transition(
            stack=list(stack),
            effects=[SendText(COUNT_GUIDANCE), SendText(COUNT_QUESTION)],
        )
    return Transition(stack=list(stack[:-1]), effects=[FetchPhotos(int(value))])


def recognize_number(text: str | None) -> float | None:
    """Return the first number found in the text, if any."""
    match = _NUMBER_PATTERN.search(text or "")
    if match is None:
        return None
    return float(match.group().replace(",", ""))


def validate_count(value: float) -> bool:
    """Accept whole numbers between 1 and 100 inclusive."""
    return value.is_integer() and MIN_PHOTOS <= value <= MAX_PHOTOS
