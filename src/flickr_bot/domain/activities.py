"""Models for Bot Framework activity payloads."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ActivityType(str, Enum):
    """Activity types handled by the bot."""

    MESSAGE = "message"
    CONVERSATION_UPDATE = "conversationUpdate"


class ChannelAccount(BaseModel):
    """Sender, recipient or member account."""

    id: str
    name: str | None = None
    role: str | None = None


class ConversationAccount(BaseModel):
    """Conversation reference."""

    id: str
    name: str | None = None
    is_group: bool | None = Field(default=None, alias="isGroup")


class Activity(BaseModel):
    """Inbound activity payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str
    id: str | None = None
    text: str | None = None
    channel_id: str | None = Field(default=None, alias="channelId")
    service_url: str | None = Field(default=None, alias="serviceUrl")
    from_account: ChannelAccount | None = Field(default=None, alias="from")
    recipient: ChannelAccount | None = None
    conversation: ConversationAccount
    members_added: list[ChannelAccount] = Field(
        default_factory=list, alias="membersAdded"
    )
