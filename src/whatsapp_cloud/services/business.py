"""WhatsApp Business Account (WABA) level lookups."""

from typing import Any

from whatsapp_cloud.services.base import BaseService


class BusinessAccountService(BaseService):
    async def get_waba_info(self) -> dict[str, Any]:
        return await self._transport.request("GET", self.waba_id, base_url=self.graph_url)

    async def get_phone_numbers(self) -> dict[str, Any]:
        """Phone numbers attached to the WABA."""
        return await self._transport.request(
            "GET",
            f"{self.waba_id}/phone_numbers",
            base_url=self.graph_url,
        )
