"""Block list of the configured phone number."""

from collections.abc import Sequence
from typing import Any

from whatsapp_cloud.contracts.messages import MESSAGING_PRODUCT
from whatsapp_cloud.services.base import BaseService


class UserService(BaseService):
    def _body(self, users: Sequence[str]) -> dict[str, Any]:
        return {
            "messaging_product": MESSAGING_PRODUCT,
            "block_users": [{"user": user} for user in users],
        }

    async def block_users(self, users: Sequence[str]) -> dict[str, Any]:
        """Block users by phone number or WhatsApp ID."""
        return await self._transport.request("POST", "/block_users", json=self._body(users))

    async def unblock_users(self, users: Sequence[str]) -> dict[str, Any]:
        return await self._transport.request("DELETE", "/block_users", json=self._body(users))

    async def get_block_list(self, limit: int | None = None) -> dict[str, Any]:
        params = {"limit": limit} if limit else None
        return await self._transport.request("GET", "/block_users", params=params)
