"""
Meta Webhook Verifier

Gates inbound webhook traffic:

- the GET subscription handshake (hub.mode / hub.verify_token / hub.challenge)
- the X-Hub-Signature-256 HMAC over the raw POST body

Stateless; safe to share across requests and threads.
"""

import hashlib
import hmac
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from whatsapp_cloud.config import ClientConfig
from whatsapp_cloud.errors import WebhookChallengeMissingError, WebhookUnauthorizedError

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_ALGORITHM = "sha256"
SUBSCRIBE_MODE = "subscribe"


@dataclass(frozen=True)
class WebhookSignature:
    """Parsed ``<algorithm>=<hex digest>`` header value."""

    algorithm: str
    digest: str

    @classmethod
    def parse(cls, header: str | None) -> "WebhookSignature | None":
        """Return None for absent, malformed or non-sha256 headers."""
        if not header:
            return None

        parts = header.split("=")
        if len(parts) != 2:
            return None

        algorithm, digest = parts
        if algorithm != SIGNATURE_ALGORITHM or not digest:
            return None

        return cls(algorithm=algorithm, digest=digest)

    def __str__(self) -> str:
        return f"{self.algorithm}={self.digest}"


class WebhookVerifier:
    """Handshake and signature checks bound to one ClientConfig."""

    def __init__(self, config: ClientConfig):
        self._verify_token = config.verify_token
        self._app_secret = config.app_secret

    def verify_get_request(self, params: Mapping[str, str | None]) -> str:
        """
        Handle the subscription handshake from its query parameters.

        Args:
            params: Query parameters (hub.mode, hub.verify_token, hub.challenge)

        Returns:
            The challenge, to be sent back verbatim

        Raises:
            WebhookUnauthorizedError: Mode or token mismatch
            WebhookChallengeMissingError: Authorized but no challenge
        """
        return self.verify_handshake(
            mode=params.get("hub.mode"),
            token=params.get("hub.verify_token"),
            challenge=params.get("hub.challenge"),
        )

    def verify_handshake(
        self,
        mode: str | None,
        token: str | None,
        challenge: str | None,
    ) -> str:
        """Same as verify_get_request, with the parameters already split out."""
        expected = self._verify_token.get_secret_value().encode("utf-8")
        token_ok = hmac.compare_digest((token or "").encode("utf-8"), expected)

        if mode != SUBSCRIBE_MODE or not token_ok:
            logger.warning("Webhook verification failed", extra={"mode": mode})
            raise WebhookUnauthorizedError("Webhook verification failed: invalid mode or verify token")

        if not challenge:
            logger.warning("Webhook verification missing challenge")
            raise WebhookChallengeMissingError("Missing hub.challenge")

        logger.info("Webhook verification successful")
        return challenge

    def compute_signature(self, payload: bytes) -> str:
        """Header value (``sha256=<hex>``) the platform would send for ``payload``."""
        return f"{SIGNATURE_ALGORITHM}={self._digest(_raw_bytes(payload))}"

    def validate_signature(self, payload: bytes, signature: str | None) -> bool:
        """
        Validate a webhook signature against the raw request body.

        The body must be the exact bytes received. Passing a str or a parsed
        JSON object raises TypeError: re-serialized content never matches
        what the platform signed.

        Args:
            payload: Raw request body bytes
            signature: X-Hub-Signature-256 header value

        Returns:
            True if the signature is valid
        """
        body = _raw_bytes(payload)

        parsed = WebhookSignature.parse(signature)
        if parsed is None:
            logger.warning("Missing or malformed webhook signature")
            return False

        expected = parsed.digest.encode("ascii", errors="replace")
        computed = self._digest(body).encode("ascii")

        if len(expected) != len(computed):
            logger.warning("Webhook signature length mismatch")
            return False

        is_valid = hmac.compare_digest(computed, expected)
        if not is_valid:
            logger.warning("Webhook signature validation failed")

        return is_valid

    def _digest(self, body: bytes) -> str:
        return hmac.new(
            self._app_secret.get_secret_value().encode("utf-8"),
            body,
            hashlib.sha256,
        ).hexdigest()


def _raw_bytes(payload: bytes | bytearray | memoryview) -> bytes:
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"webhook payload must be the raw request body bytes, got {type(payload).__name__}"
        )
    return bytes(payload)
