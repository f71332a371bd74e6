"""
Message Template Management

Templates are WABA-level resources, so every call targets
/<waba_id>/message_templates at the Graph root.
"""

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from whatsapp_cloud.contracts.responses import SuccessResponse, TemplateListResponse
from whatsapp_cloud.services.base import BaseService

logger = logging.getLogger(__name__)


class CreateTemplateRequest(BaseModel):
    """Body for template creation. Components use the creation schema (format/text/example/buttons)."""

    name: str = Field(..., min_length=1, max_length=512, pattern=r"^[a-z0-9_]+$")
    category: Literal["AUTHENTICATION", "MARKETING", "UTILITY"]
    language: str = Field(..., min_length=1)
    components: list[dict[str, Any]] = Field(default_factory=list)
    allow_category_change: bool | None = None


class TemplateService(BaseService):
    @property
    def _path(self) -> str:
        return f"{self.waba_id}/message_templates"

    async def get_templates(self, limit: int = 25, after: str | None = None) -> TemplateListResponse:
        """
        List templates, one page at a time.

        Args:
            limit: Page size
            after: Cursor from the previous page's paging.cursors.after
        """
        params: dict[str, Any] = {"limit": limit}
        if after:
            params["after"] = after

        response = await self._transport.request("GET", self._path, params=params, base_url=self.graph_url)
        return TemplateListResponse.model_validate(response)

    async def create_template(self, template: CreateTemplateRequest) -> dict[str, Any]:
        """Submit a template for review. Returns its id, status and category."""
        response = await self._transport.request(
            "POST",
            self._path,
            json=template.model_dump(exclude_none=True),
            base_url=self.graph_url,
        )
        logger.info("Created template", extra={"template": template.name, "template_id": response.get("id")})
        return response

    async def delete_template(self, name: str, template_id: str | None = None) -> SuccessResponse:
        """
        Delete a template by name.

        A name is shared by every language version of a template, so deleting
        by name alone removes all of them. Pass ``template_id`` to delete a
        single language version.
        """
        params = {"name": name}
        if template_id:
            params["hsm_id"] = template_id

        response = await self._transport.request("DELETE", self._path, params=params, base_url=self.graph_url)
        return SuccessResponse.model_validate(response)
