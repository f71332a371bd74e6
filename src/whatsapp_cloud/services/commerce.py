"""Product catalogs connected to the WABA."""

from typing import Any

from whatsapp_cloud.services.base import BaseService


class CommerceService(BaseService):
    async def get_catalogs(self) -> dict[str, Any]:
        return await self._transport.request(
            "GET",
            f"{self.waba_id}/product_catalogs",
            base_url=self.graph_url,
        )

    async def get_commerce_settings(self) -> dict[str, Any]:
        """Cart and catalog visibility for the phone number."""
        return await self._transport.request("GET", "/whatsapp_commerce_settings")

    async def update_commerce_settings(
        self,
        is_cart_enabled: bool | None = None,
        is_catalog_visible: bool | None = None,
    ) -> dict[str, Any]:
        params = {}
        if is_cart_enabled is not None:
            params["is_cart_enabled"] = str(is_cart_enabled).lower()
        if is_catalog_visible is not None:
            params["is_catalog_visible"] = str(is_catalog_visible).lower()
        return await self._transport.request("POST", "/whatsapp_commerce_settings", params=params)
