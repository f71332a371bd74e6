"""Registration and status of the configured phone number."""

from typing import Any

from whatsapp_cloud.contracts.messages import MESSAGING_PRODUCT
from whatsapp_cloud.contracts.responses import SuccessResponse
from whatsapp_cloud.services.base import BaseService


class PhoneNumberService(BaseService):
    async def register(self, pin: str) -> SuccessResponse:
        """Register the number for Cloud API use with its two-step verification PIN."""
        response = await self._transport.request(
            "POST",
            "/register",
            json={"messaging_product": MESSAGING_PRODUCT, "pin": pin},
        )
        return SuccessResponse.model_validate(response)

    async def deregister(self) -> SuccessResponse:
        response = await self._transport.request(
            "POST",
            "/deregister",
            json={"messaging_product": MESSAGING_PRODUCT},
        )
        return SuccessResponse.model_validate(response)

    async def get_phone_number(self, fields: list[str] | None = None) -> dict[str, Any]:
        """Details of the phone-number node itself (quality rating, verified name...)."""
        params = {"fields": ",".join(fields)} if fields else None
        return await self._transport.request("GET", params=params)
