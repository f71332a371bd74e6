"""
Outbound Message Models

Pydantic models for every message kind the Cloud API accepts on
POST /<phone_number_id>/messages.

OutboundMessage is a discriminated union on ``type``. Each variant
forbids extra fields, so a message carries exactly the payload field
matching its tag.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

MESSAGING_PRODUCT = "whatsapp"

MessageKind = Literal[
    "text",
    "image",
    "audio",
    "document",
    "video",
    "sticker",
    "location",
    "contacts",
    "interactive",
    "template",
    "reaction",
]


class WhatsAppModel(BaseModel):
    """Base for payload objects: immutable, unknown fields rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# --- Shared objects ---------------------------------------------------------


class MessageContext(WhatsAppModel):
    """Reply context."""

    message_id: str = Field(..., min_length=1, description="Message ID being replied to")


class TextObject(WhatsAppModel):
    body: str = Field(..., min_length=1, max_length=4096)
    preview_url: bool = False


class MediaObject(WhatsAppModel):
    """
    Media reference, either an uploaded media ID or a public link.

    ``filename`` only applies to documents and ``caption`` is ignored by
    the API for audio and stickers.
    """

    id: str | None = None
    link: str | None = None
    caption: str | None = None
    filename: str | None = None
    provider: str | None = None

    @model_validator(mode="after")
    def _id_or_link(self) -> "MediaObject":
        if bool(self.id) == bool(self.link):
            raise ValueError("exactly one of 'id' or 'link' must be set")
        return self

    @classmethod
    def from_reference(cls, media: str, **kwargs: Any) -> "MediaObject":
        """Build from a string that is either a media ID or an http(s) URL."""
        if media.startswith(("http://", "https://")):
            return cls(link=media, **kwargs)
        return cls(id=media, **kwargs)


class LocationObject(WhatsAppModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    name: str | None = None
    address: str | None = None


class ContactAddress(WhatsAppModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None  # HOME, WORK


class ContactEmail(WhatsAppModel):
    email: str | None = None
    type: str | None = None


class ContactName(WhatsAppModel):
    formatted_name: str = Field(..., min_length=1)
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactOrg(WhatsAppModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactPhone(WhatsAppModel):
    phone: str | None = None
    type: str | None = None
    wa_id: str | None = None


class ContactUrl(WhatsAppModel):
    url: str | None = None
    type: str | None = None


class ContactObject(WhatsAppModel):
    """A contact card."""

    name: ContactName
    addresses: list[ContactAddress] | None = None
    birthday: str | None = None  # YYYY-MM-DD
    emails: list[ContactEmail] | None = None
    org: ContactOrg | None = None
    phones: list[ContactPhone] | None = None
    urls: list[ContactUrl] | None = None


class ReactionObject(WhatsAppModel):
    message_id: str = Field(..., min_length=1)
    emoji: str = Field(..., description="Emoji to react with; empty string removes the reaction")


# --- Templates --------------------------------------------------------------


class TemplateLanguage(WhatsAppModel):
    code: str = Field(..., min_length=1, description="Language code, e.g. en_US or pt_BR")


class TemplateCurrency(WhatsAppModel):
    fallback_value: str
    code: str
    amount_1000: int


class TemplateDateTime(WhatsAppModel):
    fallback_value: str


class TemplateParameter(WhatsAppModel):
    type: Literal["text", "currency", "date_time", "image", "document", "video", "payload"]
    text: str | None = None
    currency: TemplateCurrency | None = None
    date_time: TemplateDateTime | None = None
    image: MediaObject | None = None
    document: MediaObject | None = None
    video: MediaObject | None = None
    payload: str | None = None


class TemplateComponent(WhatsAppModel):
    type: Literal["header", "body", "footer", "button", "HEADER", "BODY", "FOOTER", "BUTTON"]
    sub_type: Literal["url", "quick_reply"] | None = None
    index: str | None = None
    parameters: list[TemplateParameter] = Field(default_factory=list)


class TemplateObject(WhatsAppModel):
    name: str = Field(..., min_length=1)
    language: TemplateLanguage
    components: list[TemplateComponent] | None = None


# --- Interactive ------------------------------------------------------------


class InteractiveReply(WhatsAppModel):
    id: str = Field(..., min_length=1, max_length=256)
    title: str = Field(..., min_length=1, max_length=20)


class InteractiveButton(WhatsAppModel):
    type: Literal["reply"] = "reply"
    reply: InteractiveReply


class InteractiveRow(WhatsAppModel):
    id: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=24)
    description: str | None = Field(None, max_length=72)


class InteractiveProductItem(WhatsAppModel):
    product_retailer_id: str


class InteractiveSection(WhatsAppModel):
    title: str | None = None
    rows: list[InteractiveRow] | None = None
    product_items: list[InteractiveProductItem] | None = None


class InteractiveAction(WhatsAppModel):
    button: str | None = None
    buttons: list[InteractiveButton] | None = Field(None, max_length=3)
    sections: list[InteractiveSection] | None = Field(None, max_length=10)
    catalog_id: str | None = None
    product_retailer_id: str | None = None
    name: str | None = None  # "flow" for flow messages
    parameters: dict[str, Any] | None = None


class InteractiveHeader(WhatsAppModel):
    type: Literal["text", "video", "image", "document"]
    text: str | None = None
    video: MediaObject | None = None
    image: MediaObject | None = None
    document: MediaObject | None = None


class InteractiveText(WhatsAppModel):
    text: str = Field(..., min_length=1)


class InteractiveObject(WhatsAppModel):
    type: Literal["button", "list", "product", "product_list", "flow"]
    header: InteractiveHeader | None = None
    body: InteractiveText | None = None
    footer: InteractiveText | None = None
    action: InteractiveAction

    @model_validator(mode="after")
    def _body_required(self) -> "InteractiveObject":
        if self.type != "product" and self.body is None:
            raise ValueError(f"interactive '{self.type}' messages require a body")
        return self


# --- Messages ---------------------------------------------------------------


class BaseMessage(WhatsAppModel):
    """Fields common to every outbound message."""

    messaging_product: Literal["whatsapp"] = MESSAGING_PRODUCT
    recipient_type: Literal["individual"] = "individual"
    to: str = Field(..., min_length=1, description="Recipient WhatsApp ID or phone number")
    context: MessageContext | None = None

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the messages endpoint."""
        return self.model_dump(mode="json", exclude_none=True)


class TextMessage(BaseMessage):
    type: Literal["text"] = "text"
    text: TextObject


class ImageMessage(BaseMessage):
    type: Literal["image"] = "image"
    image: MediaObject


class AudioMessage(BaseMessage):
    type: Literal["audio"] = "audio"
    audio: MediaObject


class DocumentMessage(BaseMessage):
    type: Literal["document"] = "document"
    document: MediaObject


class VideoMessage(BaseMessage):
    type: Literal["video"] = "video"
    video: MediaObject


class StickerMessage(BaseMessage):
    type: Literal["sticker"] = "sticker"
    sticker: MediaObject


class LocationMessage(BaseMessage):
    type: Literal["location"] = "location"
    location: LocationObject


class ContactsMessage(BaseMessage):
    type: Literal["contacts"] = "contacts"
    contacts: list[ContactObject] = Field(..., min_length=1)


class InteractiveMessage(BaseMessage):
    type: Literal["interactive"] = "interactive"
    interactive: InteractiveObject


class TemplateMessage(BaseMessage):
    type: Literal["template"] = "template"
    template: TemplateObject


class ReactionMessage(BaseMessage):
    type: Literal["reaction"] = "reaction"
    reaction: ReactionObject


OutboundMessage = Annotated[
    Union[
        TextMessage,
        ImageMessage,
        AudioMessage,
        DocumentMessage,
        VideoMessage,
        StickerMessage,
        LocationMessage,
        ContactsMessage,
        InteractiveMessage,
        TemplateMessage,
        ReactionMessage,
    ],
    Field(discriminator="type"),
]

message_adapter: TypeAdapter[OutboundMessage] = TypeAdapter(OutboundMessage)


def parse_message(data: dict[str, Any]) -> BaseMessage:
    """Validate a raw dict into the message variant named by its ``type``."""
    return message_adapter.validate_python(data)
