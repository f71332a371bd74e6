"""
Tests for the webhook subscription handshake.
"""

import pytest

from whatsapp_cloud.errors import (
    WebhookAuthError,
    WebhookChallengeMissingError,
    WebhookUnauthorizedError,
)
from whatsapp_cloud.webhooks.verifier import WebhookVerifier


@pytest.fixture
def verifier(config):
    return WebhookVerifier(config)


class TestHandshake:
    """Tests for verify_get_request / verify_handshake."""

    def test_returns_challenge(self, verifier):
        params = {"hub.mode": "subscribe", "hub.verify_token": "test_verify_token", "hub.challenge": "abc123"}
        assert verifier.verify_get_request(params) == "abc123"

    def test_wrong_token_unauthorized(self, verifier):
        params = {"hub.mode": "subscribe", "hub.verify_token": "wrong", "hub.challenge": "abc123"}
        with pytest.raises(WebhookUnauthorizedError):
            verifier.verify_get_request(params)

    def test_wrong_mode_unauthorized(self, verifier):
        with pytest.raises(WebhookUnauthorizedError):
            verifier.verify_handshake("unsubscribe", "test_verify_token", "abc123")

    def test_same_message_for_any_mismatch(self, verifier):
        """Test the error does not reveal which check failed."""
        with pytest.raises(WebhookUnauthorizedError) as bad_mode:
            verifier.verify_handshake("other", "test_verify_token", "abc123")
        with pytest.raises(WebhookUnauthorizedError) as bad_token:
            verifier.verify_handshake("subscribe", "wrong", "abc123")

        assert str(bad_mode.value) == str(bad_token.value)

    def test_missing_token_unauthorized(self, verifier):
        with pytest.raises(WebhookUnauthorizedError):
            verifier.verify_get_request({"hub.mode": "subscribe", "hub.challenge": "abc123"})

    def test_missing_challenge(self, verifier):
        """Test authorized request without a challenge is reported as malformed."""
        params = {"hub.mode": "subscribe", "hub.verify_token": "test_verify_token", "hub.challenge": None}
        with pytest.raises(WebhookChallengeMissingError):
            verifier.verify_get_request(params)

    def test_empty_challenge(self, verifier):
        with pytest.raises(WebhookChallengeMissingError):
            verifier.verify_handshake("subscribe", "test_verify_token", "")

    def test_unauthorized_checked_before_challenge(self, verifier):
        with pytest.raises(WebhookUnauthorizedError):
            verifier.verify_handshake("subscribe", "wrong", None)

    def test_error_hierarchy(self):
        assert issubclass(WebhookUnauthorizedError, WebhookAuthError)
        assert issubclass(WebhookChallengeMissingError, WebhookAuthError)
