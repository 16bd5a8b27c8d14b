"""Turn processing for inbound activities."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from flickr_bot.adapters.connector_client import ConnectorClient
from flickr_bot.domain.activities import Activity, ActivityType
from flickr_bot.services.state import ConversationStateStore

logger = logging.getLogger(__name__)

TURN_ERROR_MESSAGE = "Oops. Something went wrong!"


@dataclass
class TurnContext:
    """Inbound activity plus the replies produced while handling it."""

    activity: Activity
    replies: list[dict[str, object]] = field(default_factory=list)

    def send_activity(
        self,
        text: str | None = None,
        attachments: list[dict[str, object]] | None = None,
        attachment_layout: str | None = None,
    ) -> dict[str, object]:
        """Queue a reply addressed back to the sender."""
        reply: dict[str, object] = {
            "type": ActivityType.MESSAGE.value,
            "conversation": self.activity.conversation.model_dump(
                by_alias=True, exclude_none=True
            ),
        }
        if self.activity.recipient is not None:
            reply["from"] = self.activity.recipient.model_dump(exclude_none=True)
        if self.activity.from_account is not None:
            reply["recipient"] = self.activity.from_account.model_dump(
                exclude_none=True
            )
        if self.activity.id:
            reply["replyToId"] = self.activity.id
        if text is not None:
            reply["text"] = text
        if attachments is not None:
            reply["attachments"] = attachments
        if attachment_layout is not None:
            reply["attachmentLayout"] = attachment_layout
        self.replies.append(reply)
        return reply


TurnLogic = Callable[[TurnContext], Awaitable[None]]


@dataclass
class BotAdapter:
    """Run turn logic and deliver its replies."""

    connector_client: ConnectorClient
    conversation_state: ConversationStateStore

    async def process_activity(
        self, activity: Activity, logic: TurnLogic
    ) -> list[dict[str, object]]:
        """Handle one activity and return the replies that were sent."""
        context = TurnContext(activity=activity)
        try:
            await logic(context)
            await self._deliver(context)
        except Exception:
            logger.exception(
                "Turn failed",
                extra={
                    "conversation_id": activity.conversation.id,
                    "activity_type": activity.type,
                },
            )
            await self._on_turn_error(context)
        return context.replies

    async def _on_turn_error(self, context: TurnContext) -> None:
        context.replies.clear()
        context.send_activity(text=TURN_ERROR_MESSAGE)
        await self.conversation_state.delete(context.activity.conversation.id)
        try:
            await self._deliver(context)
        except Exception:
            logger.exception(
                "Failed to deliver turn error message",
                extra={"conversation_id": context.activity.conversation.id},
            )

    async def _deliver(self, context: TurnContext) -> None:
        service_url = context.activity.service_url
        if not service_url:
            return
        for reply in context.replies:
            await self.connector_client.send_activity(
                service_url, context.activity.conversation.id, reply
            )
