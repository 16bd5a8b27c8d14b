"""Turn handler for the photo bot conversation."""

import logging
from dataclasses import dataclass

from flickr_bot.domain.activities import ActivityType
from flickr_bot.domain.errors import StatePersistenceError
from flickr_bot.domain.photos import PhotoRecord
from flickr_bot.services.adapter import TurnContext
from flickr_bot.services.dialogs import Effect, FetchPhotos, SendText, advance_dialog
from flickr_bot.services.photos import PhotoService
from flickr_bot.services.state import ConversationStateStore, UserStateStore

logger = logging.getLogger(__name__)

HERO_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.hero"

INTRODUCTION = " ".join(
    [
        "I am a bot that fetches flickr photos",
        "Say anything to continue.",
    ]
)


@dataclass
class ConversationHandler:
    """Route activities through the dialog and save state each turn."""

    photo_service: PhotoService
    conversation_state: ConversationStateStore
    user_state: UserStateStore

    async def on_turn(self, context: TurnContext) -> None:
        """Handle one inbound activity."""
        activity = context.activity
        session = await self.conversation_state.load(activity.conversation.id)
        user_id = activity.from_account.id if activity.from_account else None
        user_record = await self.user_state.load(user_id) if user_id else None

        if activity.type == ActivityType.MESSAGE.value:
            transition = advance_dialog(session.stack, activity.text)
            session.stack = transition.stack
            for effect in transition.effects:
                await self._apply(context, effect)
        elif activity.type == ActivityType.CONVERSATION_UPDATE.value:
            await self._greet_new_members(context)

        try:
            if user_record is not None:
                await self.user_state.save(user_record)
            await self.conversation_state.save(session)
        except Exception as exc:
            raise StatePersistenceError("Failed to save turn state") from exc

    async def show_photos(self, context: TurnContext, count: int) -> None:
        """Fetch photos and reply with one card per photo."""
        photos = await self.photo_service.fetch_interesting(count)
        cards = [create_card(photo) for photo in photos]
        context.send_activity(attachments=cards, attachment_layout="carousel")
        logger.info(
            "Sent photo cards",
            extra={
                "conversation_id": context.activity.conversation.id,
                "count": len(cards),
            },
        )

    async def _apply(self, context: TurnContext, effect: Effect) -> None:
        if isinstance(effect, SendText):
            context.send_activity(text=effect.text)
        elif isinstance(effect, FetchPhotos):
            await self.show_photos(context, effect.count)

    async def _greet_new_members(self, context: TurnContext) -> None:
        activity = context.activity
        bot_id = activity.recipient.id if activity.recipient else None
        for member in activity.members_added:
            if member.id != bot_id:
                context.send_activity(text=INTRODUCTION)


def create_card(photo: PhotoRecord) -> dict[str, object]:
    """Build a hero card attachment for a photo."""
    image_url = photo.large_url or photo.thumbnail_url
    return {
        "contentType": HERO_CARD_CONTENT_TYPE,
        "content": {
            "title": photo.title,
            "subtitle": f"Author: {photo.owner_name}",
            "text": f"Date taken: {photo.date_taken}",
            "images": [{"url": image_url}] if image_url else [],
            "buttons": [
                {
                    "type": "imBack",
                    "title": "description",
                    "value": photo.description,
                }
            ],
        },
    }
