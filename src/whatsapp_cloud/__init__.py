"""
WhatsApp Cloud

Async client for the WhatsApp Business Cloud API: authenticated Graph
API requests, normalized errors, typed message payloads and webhook
verification.
"""

from whatsapp_cloud.client import WhatsAppClient
from whatsapp_cloud.config import ClientConfig, load_config_from_env
from whatsapp_cloud.errors import (
    ApiError,
    ConfigurationError,
    MediaFileNotFoundError,
    WebhookAuthError,
    WebhookChallengeMissingError,
    WebhookUnauthorizedError,
    WhatsAppError,
)
from whatsapp_cloud.transport import GraphTransport
from whatsapp_cloud.webhooks.verifier import WebhookSignature, WebhookVerifier

__all__ = [
    "ApiError",
    "ClientConfig",
    "ConfigurationError",
    "GraphTransport",
    "MediaFileNotFoundError",
    "WebhookAuthError",
    "WebhookChallengeMissingError",
    "WebhookSignature",
    "WebhookUnauthorizedError",
    "WebhookVerifier",
    "WhatsAppClient",
    "WhatsAppError",
    "load_config_from_env",
]
