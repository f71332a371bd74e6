"""
Client Configuration

Immutable credentials and endpoint settings for the Graph API.
Every component holds a read-only reference to one ClientConfig.
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from whatsapp_cloud.errors import ConfigurationError

DEFAULT_API_VERSION = "v24.0"
DEFAULT_BASE_URL = "https://graph.facebook.com/"
DEFAULT_TIMEOUT = 30.0

# ClientConfig field -> environment variable
ENV_VARS = {
    "access_token": "WA_ACCESS_TOKEN",
    "phone_number_id": "WA_PHONE_NUMBER_ID",
    "business_account_id": "WA_BUSINESS_ACCOUNT_ID",
    "version": "WA_VERSION",
    "app_secret": "WA_APP_SECRET",
    "verify_token": "WA_VERIFY_TOKEN",
    "base_url": "WA_BASE_URL",
    "timeout": "WA_TIMEOUT",
}


class ClientConfig(BaseModel):
    """
    Settings for a WhatsApp Cloud API client.

    Secrets are held as SecretStr so they never show up in reprs or logs.
    Missing or empty required values raise ConfigurationError, whether the
    config is built directly, through model_validate, or by model_copy(update=...).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    access_token: SecretStr = Field(..., description="System user or app access token")
    phone_number_id: str = Field(..., description="Business phone number ID")
    business_account_id: str = Field(..., description="WhatsApp Business Account (WABA) ID")
    version: str = Field(default=DEFAULT_API_VERSION, description="Graph API version")
    app_secret: SecretStr = Field(..., description="App secret, used for webhook signatures")
    verify_token: SecretStr = Field(..., description="Webhook handshake verify token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Graph API root URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigurationError(_collect_errors(exc)) from exc

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "ClientConfig":
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as exc:
            raise ConfigurationError(_collect_errors(exc)) from exc

    @classmethod
    def model_validate_json(cls, json_data: str | bytes, *args: Any, **kwargs: Any) -> "ClientConfig":
        try:
            return super().model_validate_json(json_data, *args, **kwargs)
        except ValidationError as exc:
            raise ConfigurationError(_collect_errors(exc)) from exc

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "ClientConfig":
        """Copy with ``update`` applied; updated configs are validated again."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{**dict(self), **update})

    @field_validator(
        "access_token",
        "phone_number_id",
        "business_account_id",
        "app_secret",
        "verify_token",
        "version",
        "base_url",
        mode="before",
    )
    @classmethod
    def _require_value(cls, value: Any) -> Any:
        raw = value.get_secret_value() if isinstance(value, SecretStr) else value
        if raw is None or not str(raw).strip():
            raise ValueError("is required")
        return value

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        return value if value.endswith("/") else f"{value}/"

    @property
    def graph_url(self) -> str:
        """Root of the versioned Graph API, e.g. https://graph.facebook.com/v24.0"""
        return f"{self.base_url}{self.version}"

    @property
    def phone_url(self) -> str:
        """Default target: the phone-number resource."""
        return f"{self.graph_url}/{self.phone_number_id}"


def _collect_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        message = error["msg"].removeprefix("Value error, ")
        errors.setdefault(field, []).append(message)
    return errors


def load_config_from_env(
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> ClientConfig:
    """
    Build a ClientConfig from WA_* environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        **overrides: Field values that take precedence over the environment

    Returns:
        Validated ClientConfig

    Raises:
        ConfigurationError: Listing each missing/invalid variable
    """
    environ = os.environ if environ is None else environ

    data: dict[str, Any] = {
        field: environ[name]
        for field, name in ENV_VARS.items()
        if environ.get(name)
    }
    data.update({field: value for field, value in overrides.items() if value is not None})

    try:
        return ClientConfig(**data)
    except ConfigurationError as exc:
        raise ConfigurationError(
            {ENV_VARS.get(field, field): problems for field, problems in exc.errors.items()}
        ) from exc
