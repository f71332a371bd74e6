"""Subscribe the app to webhooks of the WABA."""

from typing import Any

from whatsapp_cloud.contracts.responses import SuccessResponse
from whatsapp_cloud.services.base import BaseService


class WebhookSubscriptionService(BaseService):
    @property
    def _path(self) -> str:
        return f"{self.waba_id}/subscribed_apps"

    async def subscribe(self) -> SuccessResponse:
        response = await self._transport.request("POST", self._path, base_url=self.graph_url)
        return SuccessResponse.model_validate(response)

    async def unsubscribe(self) -> SuccessResponse:
        response = await self._transport.request("DELETE", self._path, base_url=self.graph_url)
        return SuccessResponse.model_validate(response)

    async def get_subscribed_apps(self) -> dict[str, Any]:
        return await self._transport.request("GET", self._path, base_url=self.graph_url)
