"""Prefilled-message QR codes for the configured phone number."""

from typing import Literal

from whatsapp_cloud.contracts.responses import QRCode, SuccessResponse
from whatsapp_cloud.services.base import BaseService


class QRCodeService(BaseService):
    async def create_qr_code(
        self,
        prefilled_message: str,
        image_format: Literal["PNG", "SVG"] = "PNG",
    ) -> QRCode:
        response = await self._transport.request(
            "POST",
            "/message_qrdls",
            json={"prefilled_message": prefilled_message, "generate_qr_image": image_format},
        )
        return QRCode.model_validate(response)

    async def get_qr_codes(self) -> list[QRCode]:
        response = await self._transport.request("GET", "/message_qrdls")
        return [QRCode.model_validate(item) for item in response.get("data", [])]

    async def get_qr_code(self, code: str) -> QRCode:
        response = await self._transport.request("GET", f"/message_qrdls/{code}")
        # The single-code lookup is wrapped in a one-element data list
        data = response.get("data")
        return QRCode.model_validate(data[0] if data else response)

    async def update_qr_code(self, code: str, prefilled_message: str) -> QRCode:
        response = await self._transport.request(
            "POST",
            "/message_qrdls",
            json={"code": code, "prefilled_message": prefilled_message},
        )
        return QRCode.model_validate(response)

    async def delete_qr_code(self, code: str) -> SuccessResponse:
        response = await self._transport.request("DELETE", f"/message_qrdls/{code}")
        return SuccessResponse.model_validate(response)
