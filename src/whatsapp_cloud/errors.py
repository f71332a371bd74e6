"""
WhatsApp Cloud Errors

Error taxonomy shared by the request pipeline, the webhook verifier
and the configuration loader.

Transport failures (httpx.HTTPError and subclasses) are not wrapped:
they propagate unchanged when the Graph API gives no error envelope.
"""

from typing import Any


class WhatsAppError(Exception):
    """Base class for errors raised by this library."""


class ConfigurationError(WhatsAppError, ValueError):
    """
    Required configuration is missing or invalid.

    Raised at construction time, before any network activity.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        lines = [f"{field}: {', '.join(problems)}" for field, problems in errors.items()]
        super().__init__("Invalid WhatsApp configuration:\n" + "\n".join(lines))


class ApiError(WhatsAppError):
    """
    Error envelope returned by the Graph API.

    Mirrors the fields of ``{"error": {...}}``. Use ``from_envelope`` to
    build one from a decoded response body.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        subcode: int | None = None,
        type: str | None = None,
        trace_id: str | None = None,
        error_data: Any = None,
        user_title: str | None = None,
        user_message: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.type = type
        self.trace_id = trace_id
        self.error_data = error_data
        self.user_title = user_title
        self.user_message = user_message
        self.status_code = status_code

    @classmethod
    def from_envelope(
        cls,
        error: dict[str, Any],
        status_code: int | None = None,
    ) -> "ApiError":
        """Build from the inner object of an ``{"error": {...}}`` body."""
        return cls(
            message=error.get("message") or "Unknown WhatsApp API error",
            code=error.get("code") or 0,
            subcode=error.get("error_subcode"),
            type=error.get("type"),
            trace_id=error.get("fbtrace_id"),
            error_data=error.get("error_data"),
            user_title=error.get("error_user_title"),
            user_message=error.get("error_user_msg"),
            status_code=status_code,
        )

    def __str__(self) -> str:
        code = f"{self.code}:{self.subcode}" if self.subcode else str(self.code)
        return f"[ApiError] {code} - {self.message} (Trace: {self.trace_id})"


class WebhookAuthError(WhatsAppError):
    """Webhook subscription handshake failed."""


class WebhookUnauthorizedError(WebhookAuthError):
    """Mode or verify token did not match."""


class WebhookChallengeMissingError(WebhookAuthError):
    """Handshake was authorized but carried no challenge."""


class MediaFileNotFoundError(WhatsAppError, FileNotFoundError):
    """Local file passed for upload does not exist."""
