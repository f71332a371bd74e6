"""
Media Service

Upload, resolve, download and delete media.

Uploads go to the phone-number scope; media nodes (GET/DELETE
/<media_id>) live at the Graph root. Download URLs are absolute and
short-lived, and still need the bearer token.
"""

import logging
import mimetypes
from pathlib import Path

from whatsapp_cloud.contracts.responses import MediaUploadResponse, MediaUrlResponse, SuccessResponse
from whatsapp_cloud.errors import MediaFileNotFoundError
from whatsapp_cloud.services.base import BaseService

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


class MediaService(BaseService):
    async def upload_media(
        self,
        file_path: str | Path,
        mime_type: str | None = None,
    ) -> MediaUploadResponse:
        """
        Upload a local file.

        Args:
            file_path: Path to the file
            mime_type: MIME type; guessed from the extension when omitted

        Returns:
            MediaUploadResponse with the media ID

        Raises:
            MediaFileNotFoundError: The file does not exist (no request is sent)
        """
        path = Path(file_path)
        if not path.is_file():
            raise MediaFileNotFoundError(f"File not found at path: {path}")

        mime_type = mime_type or mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE

        with path.open("rb") as stream:
            response = await self._transport.upload(
                "/media",
                filename=path.name,
                content=stream,
                mime_type=mime_type,
            )

        result = MediaUploadResponse.model_validate(response)
        logger.info("Uploaded media", extra={"media_id": result.id, "mime_type": mime_type})
        return result

    async def upload_bytes(self, content: bytes, filename: str, mime_type: str) -> MediaUploadResponse:
        """Upload an in-memory buffer."""
        response = await self._transport.upload(
            "/media",
            filename=filename,
            content=content,
            mime_type=mime_type,
        )
        return MediaUploadResponse.model_validate(response)

    async def get_media_url(self, media_id: str) -> MediaUrlResponse:
        """Resolve a media ID to its (temporary) download URL."""
        response = await self._transport.request("GET", media_id, base_url=self.graph_url)
        return MediaUrlResponse.model_validate(response)

    async def download_media(self, url: str) -> bytes:
        """Download media bytes from a URL returned by get_media_url."""
        return await self._transport.get_bytes(url)

    async def delete_media(self, media_id: str) -> SuccessResponse:
        response = await self._transport.request("DELETE", media_id, base_url=self.graph_url)
        return SuccessResponse.model_validate(response)
