"""Business profile of the configured phone number."""

from collections.abc import Sequence

from whatsapp_cloud.contracts.messages import MESSAGING_PRODUCT
from whatsapp_cloud.contracts.responses import BusinessProfile, SuccessResponse
from whatsapp_cloud.services.base import BaseService

DEFAULT_PROFILE_FIELDS = (
    "about",
    "address",
    "description",
    "email",
    "profile_picture_url",
    "websites",
    "vertical",
)


class BusinessProfileService(BaseService):
    async def get_profile(self, fields: Sequence[str] | None = None) -> BusinessProfile:
        """Fetch the business profile, limited to ``fields`` when given."""
        response = await self._transport.request(
            "GET",
            "/whatsapp_business_profile",
            params={"fields": ",".join(fields or DEFAULT_PROFILE_FIELDS)},
        )
        data = response.get("data") or [{}]
        return BusinessProfile.model_validate(data[0])

    async def update_profile(self, profile: BusinessProfile) -> SuccessResponse:
        payload = {
            "messaging_product": MESSAGING_PRODUCT,
            **profile.model_dump(exclude_none=True),
        }
        response = await self._transport.request("POST", "/whatsapp_business_profile", json=payload)
        return SuccessResponse.model_validate(response)
