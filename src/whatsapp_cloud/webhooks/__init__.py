"""Inbound webhook verification."""

from whatsapp_cloud.webhooks.verifier import (
    SIGNATURE_HEADER,
    WebhookSignature,
    WebhookVerifier,
)

__all__ = [
    "SIGNATURE_HEADER",
    "WebhookSignature",
    "WebhookVerifier",
]
