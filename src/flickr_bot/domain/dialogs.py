"""Domain models for dialog sessions."""

from dataclasses import dataclass, field
from enum import Enum


class DialogStep(Enum):
    """Steps a dialog frame can be waiting on."""

    AWAITING_COUNT = "AWAITING_COUNT"


class DialogStatus(Enum):
    """Conversation-level dialog status."""

    IDLE = "IDLE"
    AWAITING_COUNT = "AWAITING_COUNT"


@dataclass(frozen=True)
class DialogFrame:
    """One entry of a conversation's dialog stack."""

    dialog_id: str
    step: DialogStep
    prompt_id: str


@dataclass
class DialogSession:
    """Dialog state kept per conversation."""

    conversation_id: str
    stack: list[DialogFrame] = field(default_factory=list)

    @property
    def active_dialog_id(self) -> str | None:
        return self.stack[-1].dialog_id if self.stack else None

    @property
    def status(self) -> DialogStatus:
        if not self.stack:
            return DialogStatus.IDLE
        return DialogStatus(self.stack[-1].step.value)


@dataclass
class UserStateRecord:
    """Per-user state saved every turn."""

    user_id: str
    properties: dict[str, object] = field(default_factory=dict)
