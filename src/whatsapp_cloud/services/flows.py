"""
WhatsApp Flows Management

Flows are created under the WABA; each flow is then its own node at
the Graph root (/<flow_id>, /<flow_id>/assets, /<flow_id>/publish).
"""

import json
from collections.abc import Sequence
from typing import Any

from whatsapp_cloud.contracts.responses import SuccessResponse
from whatsapp_cloud.services.base import BaseService

FLOW_JSON_FILENAME = "flow.json"


class FlowService(BaseService):
    async def create_flow(
        self,
        name: str,
        categories: Sequence[str],
        clone_flow_id: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"name": name, "categories": list(categories)}
        if clone_flow_id:
            body["clone_flow_id"] = clone_flow_id
        return await self._transport.request(
            "POST",
            f"{self.waba_id}/flows",
            json=body,
            base_url=self.graph_url,
        )

    async def get_flows(self) -> dict[str, Any]:
        return await self._transport.request("GET", f"{self.waba_id}/flows", base_url=self.graph_url)

    async def get_flow(self, flow_id: str, fields: Sequence[str] | None = None) -> dict[str, Any]:
        params = {"fields": ",".join(fields)} if fields else None
        return await self._transport.request("GET", flow_id, params=params, base_url=self.graph_url)

    async def update_flow_json(self, flow_id: str, flow_json: dict[str, Any]) -> dict[str, Any]:
        """
        Replace the Flow JSON asset.

        The asset endpoint only accepts a file upload, so the document is
        sent as a flow.json multipart part. The response lists any
        validation_errors found by the platform.
        """
        return await self._transport.request(
            "POST",
            f"{flow_id}/assets",
            data={"name": FLOW_JSON_FILENAME, "asset_type": "FLOW_JSON"},
            files={"file": (FLOW_JSON_FILENAME, json.dumps(flow_json).encode("utf-8"), "application/json")},
            base_url=self.graph_url,
        )

    async def publish_flow(self, flow_id: str) -> SuccessResponse:
        response = await self._transport.request("POST", f"{flow_id}/publish", base_url=self.graph_url)
        return SuccessResponse.model_validate(response)

    async def deprecate_flow(self, flow_id: str) -> SuccessResponse:
        response = await self._transport.request("POST", f"{flow_id}/deprecate", base_url=self.graph_url)
        return SuccessResponse.model_validate(response)

    async def delete_flow(self, flow_id: str) -> SuccessResponse:
        """Only draft flows can be deleted."""
        response = await self._transport.request("DELETE", flow_id, base_url=self.graph_url)
        return SuccessResponse.model_validate(response)
