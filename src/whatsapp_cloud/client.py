"""
WhatsApp Cloud Client

Facade exposing every resource service over one shared GraphTransport.

Usage:
    async with WhatsAppClient(config) as client:
        await client.messages.send_text("+15551234567", "hi")
"""

import logging
from typing import Any

import httpx

from whatsapp_cloud.config import ClientConfig, load_config_from_env
from whatsapp_cloud.services import (
    AnalyticsService,
    BusinessAccountService,
    BusinessProfileService,
    CommerceService,
    FlowService,
    MediaService,
    MessageService,
    PhoneNumberService,
    QRCodeService,
    TemplateService,
    UserService,
    WebhookSubscriptionService,
)
from whatsapp_cloud.transport import GraphTransport
from whatsapp_cloud.webhooks.verifier import WebhookVerifier

logger = logging.getLogger(__name__)


class WhatsAppClient:
    """
    Entry point for the Cloud API.

    Args:
        config: Client settings. Loaded from WA_* environment variables when omitted.
        transport: Optional httpx transport (for tests or custom connection pools)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or load_config_from_env()
        self._transport = GraphTransport(self.config, transport=transport)

        self.messages = MessageService(self._transport)
        self.media = MediaService(self._transport)
        self.profile = BusinessProfileService(self._transport)
        self.phone_numbers = PhoneNumberService(self._transport)
        self.business = BusinessAccountService(self._transport)
        self.qr_codes = QRCodeService(self._transport)
        self.templates = TemplateService(self._transport)
        self.analytics = AnalyticsService(self._transport)
        self.commerce = CommerceService(self._transport)
        self.subscriptions = WebhookSubscriptionService(self._transport)
        self.users = UserService(self._transport)
        self.flows = FlowService(self._transport)
        self.webhooks = WebhookVerifier(self.config)

        logger.debug(
            "WhatsApp client initialized",
            extra={"phone_number_id": self.config.phone_number_id, "version": self.config.version},
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._transport.aclose()

    async def __aenter__(self) -> "WhatsAppClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
