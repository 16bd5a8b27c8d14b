"""Conversation and user state stores."""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Protocol

from flickr_bot.domain.dialogs import DialogSession, UserStateRecord


class ConversationStateStore(Protocol):
    """Storage interface for per-conversation dialog state."""

    async def load(self, conversation_id: str) -> DialogSession:
        """Return the session for a conversation, creating it if absent."""

    async def save(self, session: DialogSession) -> None:
        """Persist a session."""

    async def delete(self, conversation_id: str) -> None:
        """Drop all state for a conversation."""


class UserStateStore(Protocol):
    """Storage interface for per-user state."""

    async def load(self, user_id: str) -> UserStateRecord:
        """Return the state for a user, creating it if absent."""

    async def save(self, record: UserStateRecord) -> None:
        """Persist a user state record."""


@dataclass
class InMemoryConversationStateStore(ConversationStateStore):
    """Process-memory conversation state."""

    sessions: dict[str, DialogSession] = field(default_factory=dict)

    async def load(self, conversation_id: str) -> DialogSession:
        session = self.sessions.get(conversation_id)
        if session is None:
            return DialogSession(conversation_id=conversation_id)
        return deepcopy(session)

    async def save(self, session: DialogSession) -> None:
        self.sessions[session.conversation_id] = deepcopy(session)

    async def delete(self, conversation_id: str) -> None:
        self.sessions.pop(conversation_id, None)


@dataclass
class InMemoryUserStateStore(UserStateStore):
    """Process-memory user state."""

    records: dict[str, UserStateRecord] = field(default_factory=dict)

    async def load(self, user_id: str) -> UserStateRecord:
        record = self.records.get(user_id)
        if record is None:
            return UserStateRecord(user_id=user_id)
        return deepcopy(record)

    async def save(self, record: UserStateRecord) -> None:
        self.records[record.user_id] = deepcopy(record)
