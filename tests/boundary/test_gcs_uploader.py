"""
Tests for the GCS image uploader.

HTTP is served by httpx.MockTransport; every upload outcome is checked to
be reported as a status, never raised.
"""

import base64

import httpx
import pytest

from infogenius.boundary.gcs.gcs_uploader import (
    GCSImageUploader,
    object_name_for,
    split_data_uri,
)
from infogenius.core.exceptions import GCSUploadError
from infogenius.models.storage import StorageConfig, StorageSource, UploadStatus

BASE_URL = "https://storage.test/upload/storage/v1"

CONFIGURED = StorageConfig(
    bucket="my-bucket", token="secret-token", is_configured=True, source=StorageSource.MANUAL
)
UNCONFIGURED = StorageConfig(bucket="my-bucket", token=None, is_configured=False, source=StorageSource.MANUAL)


def _uploader(handler, config=CONFIGURED) -> GCSImageUploader:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GCSImageUploader(lambda: config, http_client=client, base_url=BASE_URL)


class TestHelpers:
    def test_object_name(self):
        assert object_name_for("1700000000000") == "infographic_1700000000000.png"

    def test_split_detects_mime_type(self):
        mime_type, data = split_data_uri("data:image/jpeg;base64," + base64.b64encode(b"jpg").decode())
        assert (mime_type, data) == ("image/jpeg", b"jpg")

    def test_split_defaults_to_png_for_bare_base64(self):
        mime_type, data = split_data_uri(base64.b64encode(b"raw").decode())
        assert (mime_type, data) == ("image/png", b"raw")

    def test_split_rejects_invalid_base64(self):
        with pytest.raises(ValueError, match="Invalid base64"):
            split_data_uri("data:image/png;base64,not*base64!")

    @pytest.mark.parametrize("status_code,expired", [(401, True), (403, True), (404, False), (500, False)])
    def test_credential_expired_classification(self, status_code, expired):
        error = GCSUploadError(status_code, "body")
        assert error.credential_expired is expired
        assert f"GCS API error ({status_code})" in error.message


class TestUploadImage:
    """Test GCSImageUploader.upload_image outcomes."""

    @pytest.mark.asyncio
    async def test_successful_upload_request_shape(self, png_data_uri, png_bytes):
        """POST to the bucket's object endpoint with media upload params and bearer auth."""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"name": "infographic_42.png"})

        uploader = _uploader(handler)

        status = await uploader.upload_image(png_data_uri, "42")

        assert status == UploadStatus.UPLOADED
        request = captured[0]
        assert request.method == "POST"
        assert request.url.path == "/upload/storage/v1/b/my-bucket/o"
        assert request.url.params["uploadType"] == "media"
        assert request.url.params["name"] == "infographic_42.png"
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert request.headers["Content-Type"] == "image/png"
        assert request.content == png_bytes

    @pytest.mark.asyncio
    async def test_unconfigured_is_skipped_without_request(self, png_data_uri):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        uploader = _uploader(handler, config=UNCONFIGURED)

        assert uploader.is_configured() is False
        assert await uploader.upload_image(png_data_uri, "42") == UploadStatus.SKIPPED
        assert calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403, 500])
    async def test_error_status_is_reported_as_failed(self, png_data_uri, status_code):
        """Non-2xx answers become FAILED instead of raising."""
        uploader = _uploader(lambda request: httpx.Response(status_code, text="denied"))

        assert await uploader.upload_image(png_data_uri, "42") == UploadStatus.FAILED

    @pytest.mark.asyncio
    async def test_transport_error_is_reported_as_failed(self, png_data_uri):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        uploader = _uploader(handler)

        assert await uploader.upload_image(png_data_uri, "42") == UploadStatus.FAILED

    @pytest.mark.asyncio
    async def test_invalid_payload_fails_before_network(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        uploader = _uploader(handler)

        assert await uploader.upload_image("data:image/png;base64,%%%", "42") == UploadStatus.FAILED
        assert calls == []

    @pytest.mark.asyncio
    async def test_config_is_resolved_per_upload(self, png_data_uri):
        """A configuration change applies to the next upload."""
        configs = [UNCONFIGURED]
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        uploader = GCSImageUploader(lambda: configs[-1], http_client=client, base_url=BASE_URL)

        assert await uploader.upload_image(png_data_uri, "1") == UploadStatus.SKIPPED
        configs.append(CONFIGURED)
        assert await uploader.upload_image(png_data_uri, "2") == UploadStatus.UPLOADED
