"""
Graph API Response Models

Typed views over the JSON the Cloud API returns. Unknown fields are
kept so newer API versions do not break parsing.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphResponse(BaseModel):
    model_config = ConfigDict(extra="allow")


class ContactResult(GraphResponse):
    input: str
    wa_id: str


class MessageResult(GraphResponse):
    id: str
    message_status: str | None = None


class MessageResponse(GraphResponse):
    """Response of POST /<phone_number_id>/messages."""

    messaging_product: str = "whatsapp"
    contacts: list[ContactResult] = Field(default_factory=list)
    messages: list[MessageResult] = Field(default_factory=list)

    @property
    def message_id(self) -> str | None:
        return self.messages[0].id if self.messages else None


class MediaUploadResponse(GraphResponse):
    id: str


class MediaUrlResponse(GraphResponse):
    """Response of GET /<media_id>. The URL expires after a few minutes."""

    url: str
    mime_type: str | None = None
    sha256: str | None = None
    file_size: int | None = None
    id: str
    messaging_product: str | None = None


class SuccessResponse(GraphResponse):
    success: bool = False


class BusinessProfile(GraphResponse):
    about: str | None = None
    address: str | None = None
    description: str | None = None
    email: str | None = None
    profile_picture_url: str | None = None
    websites: list[str] | None = None
    vertical: str | None = None


class PagingCursors(GraphResponse):
    before: str | None = None
    after: str | None = None


class Paging(GraphResponse):
    cursors: PagingCursors | None = None
    next: str | None = None
    previous: str | None = None


class TemplateInfo(GraphResponse):
    id: str
    name: str
    language: str | None = None
    status: str | None = None
    category: str | None = None
    components: list[dict[str, Any]] = Field(default_factory=list)


class TemplateListResponse(GraphResponse):
    data: list[TemplateInfo] = Field(default_factory=list)
    paging: Paging | None = None


class QRCode(GraphResponse):
    code: str
    prefilled_message: str | None = None
    deep_link_url: str | None = None
    qr_image_url: str | None = None
