"""
Message Service

Sends outbound messages through POST /<phone_number_id>/messages.
The send_* helpers build the matching OutboundMessage variant; anything
else can go through send_message directly.
"""

import logging
from collections.abc import Sequence

from whatsapp_cloud.contracts.messages import (
    MESSAGING_PRODUCT,
    AudioMessage,
    BaseMessage,
    ContactObject,
    ContactsMessage,
    DocumentMessage,
    ImageMessage,
    InteractiveMessage,
    InteractiveObject,
    LocationMessage,
    LocationObject,
    MediaObject,
    MessageContext,
    ReactionMessage,
    ReactionObject,
    StickerMessage,
    TemplateComponent,
    TemplateLanguage,
    TemplateMessage,
    TemplateObject,
    TextMessage,
    TextObject,
    VideoMessage,
)
from whatsapp_cloud.contracts.responses import MessageResponse, SuccessResponse
from whatsapp_cloud.services.base import BaseService

logger = logging.getLogger(__name__)


def _context(reply_to: str | None) -> MessageContext | None:
    return MessageContext(message_id=reply_to) if reply_to else None


class MessageService(BaseService):
    """Send text, media, location, contact, template, interactive and reaction messages."""

    async def send_message(self, message: BaseMessage) -> MessageResponse:
        """Send any OutboundMessage variant."""
        response = await self._transport.request("POST", "/messages", json=message.to_payload())
        result = MessageResponse.model_validate(response)

        logger.info(
            "Sent message via Cloud API",
            extra={"type": getattr(message, "type", None), "message_id": result.message_id},
        )
        return result

    async def send_text(
        self,
        to: str,
        body: str,
        preview_url: bool = False,
        reply_to: str | None = None,
    ) -> MessageResponse:
        return await self.send_message(
            TextMessage(
                to=to,
                text=TextObject(body=body, preview_url=preview_url),
                context=_context(reply_to),
            )
        )

    async def send_image(
        self,
        to: str,
        media: str,
        caption: str | None = None,
        reply_to: str | None = None,
    ) -> MessageResponse:
        """Send an image by media ID or public URL."""
        return await self.send_message(
            ImageMessage(
                to=to,
                image=MediaObject.from_reference(media, caption=caption),
                context=_context(reply_to),
            )
        )

    async def send_document(
        self,
        to: str,
        media: str,
        caption: str | None = None,
        filename: str | None = None,
        reply_to: str | None = None,
    ) -> MessageResponse:
        return await self.send_message(
            DocumentMessage(
                to=to,
                document=MediaObject.from_reference(media, caption=caption, filename=filename),
                context=_context(reply_to),
            )
        )

    async def send_audio(self, to: str, media: str, reply_to: str | None = None) -> MessageResponse:
        return await self.send_message(
            AudioMessage(to=to, audio=MediaObject.from_reference(media), context=_context(reply_to))
        )

    async def send_video(
        self,
        to: str,
        media: str,
        caption: str | None = None,
        reply_to: str | None = None,
    ) -> MessageResponse:
        return await self.send_message(
            VideoMessage(
                to=to,
                video=MediaObject.from_reference(media, caption=caption),
                context=_context(reply_to),
            )
        )

    async def send_sticker(self, to: str, media: str, reply_to: str | None = None) -> MessageResponse:
        return await self.send_message(
            StickerMessage(to=to, sticker=MediaObject.from_reference(media), context=_context(reply_to))
        )

    async def send_location(
        self,
        to: str,
        location: LocationObject,
        reply_to: str | None = None,
    ) -> MessageResponse:
        return await self.send_message(
            LocationMessage(to=to, location=location, context=_context(reply_to))
        )

    async def send_contacts(
        self,
        to: str,
        contacts: Sequence[ContactObject],
        reply_to: str | None = None,
    ) -> MessageResponse:
        return await self.send_message(
            ContactsMessage(to=to, contacts=list(contacts), context=_context(reply_to))
        )

    async def send_template(
        self,
        to: str,
        template_name: str,
        language_code: str,
        components: Sequence[TemplateComponent] = (),
    ) -> MessageResponse:
        """
        Send an approved template message.

        Args:
            to: Recipient phone number
            template_name: Approved template name
            language_code: Template language code (e.g., "en_US")
            components: Header/body/button parameters, if the template has variables
        """
        template = TemplateObject(
            name=template_name,
            language=TemplateLanguage(code=language_code),
            components=list(components) or None,
        )
        return await self.send_message(TemplateMessage(to=to, template=template))

    async def send_interactive(
        self,
        to: str,
        interactive: InteractiveObject,
        reply_to: str | None = None,
    ) -> MessageResponse:
        return await self.send_message(
            InteractiveMessage(to=to, interactive=interactive, context=_context(reply_to))
        )

    async def send_reaction(self, to: str, message_id: str, emoji: str) -> MessageResponse:
        """React to a message. An empty emoji removes an existing reaction."""
        return await self.send_message(
            ReactionMessage(to=to, reaction=ReactionObject(message_id=message_id, emoji=emoji))
        )

    async def mark_as_read(self, message_id: str) -> SuccessResponse:
        """Mark an inbound message as read."""
        payload = {
            "messaging_product": MESSAGING_PRODUCT,
            "status": "read",
            "message_id": message_id,
        }
        response = await self._transport.request("POST", "/messages", json=payload)
        return SuccessResponse.model_validate(response)
