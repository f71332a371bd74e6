"""
WhatsApp Cloud Contracts

Outbound message payloads and Graph API response shapes.
"""

from whatsapp_cloud.contracts.messages import (
    MESSAGING_PRODUCT,
    AudioMessage,
    BaseMessage,
    ContactName,
    ContactObject,
    ContactPhone,
    ContactsMessage,
    DocumentMessage,
    ImageMessage,
    InteractiveAction,
    InteractiveButton,
    InteractiveMessage,
    InteractiveObject,
    InteractiveReply,
    InteractiveText,
    LocationMessage,
    LocationObject,
    MediaObject,
    MessageContext,
    OutboundMessage,
    ReactionMessage,
    ReactionObject,
    StickerMessage,
    TemplateComponent,
    TemplateLanguage,
    TemplateMessage,
    TemplateObject,
    TemplateParameter,
    TextMessage,
    TextObject,
    VideoMessage,
    message_adapter,
    parse_message,
)
from whatsapp_cloud.contracts.responses import (
    BusinessProfile,
    MediaUploadResponse,
    MediaUrlResponse,
    MessageResponse,
    QRCode,
    SuccessResponse,
    TemplateListResponse,
)

__all__ = [
    "MESSAGING_PRODUCT",
    "AudioMessage",
    "BaseMessage",
    "BusinessProfile",
    "ContactName",
    "ContactObject",
    "ContactPhone",
    "ContactsMessage",
    "DocumentMessage",
    "ImageMessage",
    "InteractiveAction",
    "InteractiveButton",
    "InteractiveMessage",
    "InteractiveObject",
    "InteractiveReply",
    "InteractiveText",
    "LocationMessage",
    "LocationObject",
    "MediaObject",
    "MediaUploadResponse",
    "MediaUrlResponse",
    "MessageContext",
    "MessageResponse",
    "OutboundMessage",
    "QRCode",
    "ReactionMessage",
    "ReactionObject",
    "StickerMessage",
    "SuccessResponse",
    "TemplateComponent",
    "TemplateLanguage",
    "TemplateListResponse",
    "TemplateMessage",
    "TemplateObject",
    "TemplateParameter",
    "TextMessage",
    "TextObject",
    "VideoMessage",
    "message_adapter",
    "parse_message",
]
