"""Messaging and conversation analytics for the WABA."""

import json
from typing import Any, Literal

from pydantic import BaseModel, Field

from whatsapp_cloud.services.base import BaseService


class AnalyticsParams(BaseModel):
    start: int = Field(..., description="Unix timestamp, inclusive")
    end: int = Field(..., description="Unix timestamp, exclusive")
    granularity: Literal["HALF_HOUR", "DAY", "MONTH"]
    phone_numbers: list[str] | None = None
    country_codes: list[str] | None = None

    def to_field_expression(self, edge: str = "analytics") -> str:
        """Graph field-expansion syntax, e.g. analytics.start(1).end(2).granularity(DAY)"""
        parts = [edge, f"start({self.start})", f"end({self.end})", f"granularity({self.granularity})"]
        if self.phone_numbers:
            parts.append(f"phone_numbers({json.dumps(self.phone_numbers)})")
        if self.country_codes:
            parts.append(f"country_codes({json.dumps(self.country_codes)})")
        return ".".join(parts)


class AnalyticsService(BaseService):
    async def get_analytics(self, params: AnalyticsParams) -> dict[str, Any]:
        """Sent/delivered message counts per data point."""
        return await self._transport.request(
            "GET",
            self.waba_id,
            params={"fields": params.to_field_expression()},
            base_url=self.graph_url,
        )
