"""
GCS image uploader for generated infographics.

Backs up each generated image to a Google Cloud Storage bucket through the
JSON API media upload endpoint. Uploads are best effort: a missing
configuration skips the upload, and every failure is logged and reported as
`UploadStatus.FAILED` instead of propagating to the generation cycle.

Dependencies: httpx, base64, re, storage_config
System role: Fire-and-forget persistence of generated images
"""

import base64
import binascii
import logging
import re
from typing import Callable

import httpx

from infogenius.core.exceptions import GCSUploadError
from infogenius.models.storage import StorageConfig, UploadStatus

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_BASE_URL = "https://storage.googleapis.com/upload/storage/v1"
DEFAULT_MIME_TYPE = "image/png"

_DATA_URI_HEADER = re.compile(r"^data:([^;]+);base64,")


def object_name_for(image_id: str) -> str:
    """Deterministic object name for an image id."""
    return f"infographic_{image_id}.png"


def split_data_uri(data_uri: str) -> tuple[str, bytes]:
    """
    Detect MIME type and decode a base64 data URI.

    Args:
        data_uri: "data:<mime>;base64,<payload>" (bare base64 also accepted)

    Returns:
        tuple[str, bytes]: (mime_type, decoded bytes)

    Raises:
        ValueError: If the payload is not valid base64
    """
    match = _DATA_URI_HEADER.match(data_uri)
    mime_type = match.group(1) if match else DEFAULT_MIME_TYPE
    payload = data_uri[match.end():] if match else data_uri
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e


class GCSImageUploader:
    """
    Uploads generated images to a GCS bucket.

    Configuration is resolved on every call so overrides changed at runtime
    apply to the next upload.
    """

    def __init__(
        self,
        config_provider: Callable[[], StorageConfig],
        http_client: httpx.AsyncClient | None = None,
        base_url: str = DEFAULT_UPLOAD_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize GCS uploader.

        Args:
            config_provider: Returns the currently resolved storage config
            http_client: Shared async HTTP client (created lazily when omitted)
            base_url: GCS JSON API upload root
            timeout: Request timeout in seconds, None disables it
        """
        self._config_provider = config_provider
        self._http_client = http_client
        self._owns_client = http_client is None
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def is_configured(self) -> bool:
        return self._config_provider().is_configured

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def aclose(self) -> None:
        """Close the HTTP client if this uploader created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def upload_image(self, data_uri: str, image_id: str) -> UploadStatus:
        """
        Upload one image. Never raises.

        Args:
            data_uri: Image as a base64 data URI
            image_id: History entry id used to name the object

        Returns:
            UploadStatus: UPLOADED, SKIPPED (unconfigured) or FAILED
        """
        config = self._config_provider()
        if not config.is_configured:
            logger.warning(
                f"{__name__}:upload_image - GCS upload skipped: bucket or access token "
                f"not configured (source={config.source.value})"
            )
            return UploadStatus.SKIPPED

        file_name = object_name_for(image_id)
        try:
            mime_type, image_bytes = split_data_uri(data_uri)
            logger.debug(
                f"{__name__}:upload_image - Uploading {file_name} "
                f"size={len(image_bytes)} bytes, mime_type={mime_type}"
            )

            response = await self._client().post(
                f"{self._base_url}/b/{config.bucket}/o",
                params={"uploadType": "media", "name": file_name},
                headers={
                    "Authorization": f"Bearer {config.token}",
                    "Content-Type": mime_type,
                },
                content=image_bytes,
            )
            if not response.is_success:
                raise GCSUploadError(response.status_code, response.text)

            logger.info(
                f"{__name__}:upload_image - Successfully backed up {file_name} "
                f"to GCS bucket: {config.bucket}"
            )
            return UploadStatus.UPLOADED

        except GCSUploadError as e:
            if e.credential_expired:
                logger.error(
                    f"{__name__}:upload_image - GCS rejected credentials "
                    f"({e.status_code}); the access token has likely expired: {e.body}"
                )
            else:
                logger.error(f"{__name__}:upload_image - {e}")
            return UploadStatus.FAILED
        except ValueError as e:
            logger.error(f"{__name__}:upload_image - ValueError: {e}")
            return UploadStatus.FAILED
        except httpx.HTTPError as e:
            logger.error(f"{__name__}:upload_image - {type(e).__name__}: {e}")
            return UploadStatus.FAILED
        except Exception as e:
            logger.error(
                f"{__name__}:upload_image - {type(e).__name__}: {e}",
                exc_info=True,
            )
            return UploadStatus.FAILED
