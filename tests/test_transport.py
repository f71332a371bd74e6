"""
Tests for the Graph API request pipeline.
"""

import httpx
import pytest

from whatsapp_cloud.errors import ApiError
from whatsapp_cloud.transport import GraphTransport


@pytest.fixture
def transport(config, mock_transport):
    return GraphTransport(config, transport=mock_transport)


ERROR_ENVELOPE = {
    "error": {
        "message": "(#131030) Recipient phone number not in allowed list",
        "type": "OAuthException",
        "code": 131030,
        "error_subcode": 2494010,
        "error_data": {"messaging_product": "whatsapp", "details": "Recipient not allowed"},
        "error_user_title": "Recipient not allowed",
        "error_user_msg": "Add the number to the allowed list",
        "fbtrace_id": "AbCdEf123",
    }
}


class TestAuthentication:
    """Every request carries the bearer token."""

    @pytest.mark.asyncio
    async def test_default_scope(self, transport, graph):
        """Test relative paths target the phone-number node."""
        async with transport:
            await transport.request("GET", "/whatsapp_business_profile")

        request = graph.last
        assert str(request.url) == "https://graph.facebook.com/v24.0/1234567890/whatsapp_business_profile"
        assert request.headers["Authorization"] == "Bearer test-access-token"

    @pytest.mark.asyncio
    async def test_overridden_base_url(self, transport, graph):
        """Test a WABA-scoped call keeps the auth header."""
        async with transport:
            await transport.request("GET", "9876543210/message_templates", base_url=transport.graph_url)

        request = graph.last
        assert str(request.url) == "https://graph.facebook.com/v24.0/9876543210/message_templates"
        assert request.headers["Authorization"] == "Bearer test-access-token"

    @pytest.mark.asyncio
    async def test_absolute_url_download(self, transport, graph):
        """Test binary download from another host keeps the auth header."""
        graph.reply(content=b"\x89PNG\r\n", headers={"Content-Type": "image/png"})

        async with transport:
            data = await transport.get_bytes("https://lookaside.fbsbx.com/whatsapp_business/attachments/?mid=1")

        assert data == b"\x89PNG\r\n"
        assert graph.last.url.host == "lookaside.fbsbx.com"
        assert graph.last.headers["Authorization"] == "Bearer test-access-token"

    @pytest.mark.asyncio
    async def test_multipart_upload(self, transport, graph):
        """Test uploads send messaging_product and the file part."""
        graph.reply(json={"id": "media-1"})

        async with transport:
            response = await transport.upload(
                "/media",
                filename="photo.jpg",
                content=b"jpeg-bytes",
                mime_type="image/jpeg",
            )

        request = graph.last
        assert response == {"id": "media-1"}
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert request.headers["Authorization"] == "Bearer test-access-token"
        assert b'name="messaging_product"' in request.content
        assert b"whatsapp" in request.content
        assert b'filename="photo.jpg"' in request.content
        assert b"jpeg-bytes" in request.content

    @pytest.mark.asyncio
    async def test_root_path(self, transport, graph):
        """Test an empty path targets the phone-number node itself."""
        async with transport:
            await transport.request("GET")

        assert str(graph.last.url) == "https://graph.facebook.com/v24.0/1234567890"


class TestErrorTranslation:
    """Tests for error envelope handling."""

    @pytest.mark.asyncio
    async def test_envelope_raises_api_error(self, transport, graph):
        """Test envelope fields are mirrored onto ApiError."""
        graph.reply(400, json=ERROR_ENVELOPE)

        async with transport:
            with pytest.raises(ApiError) as exc_info:
                await transport.request("POST", "/messages", json={})

        error = exc_info.value
        assert error.code == 131030
        assert error.subcode == 2494010
        assert error.type == "OAuthException"
        assert error.trace_id == "AbCdEf123"
        assert error.error_data == {"messaging_product": "whatsapp", "details": "Recipient not allowed"}
        assert error.user_title == "Recipient not allowed"
        assert error.user_message == "Add the number to the allowed list"
        assert error.status_code == 400
        assert isinstance(error.__cause__, httpx.HTTPStatusError)
        assert str(error) == (
            "[ApiError] 131030:2494010 - (#131030) Recipient phone number not in allowed list "
            "(Trace: AbCdEf123)"
        )

    @pytest.mark.asyncio
    async def test_minimal_envelope(self, transport, graph):
        """Test missing envelope fields fall back to defaults."""
        graph.reply(500, json={"error": {}})

        async with transport:
            with pytest.raises(ApiError) as exc_info:
                await transport.request("GET", "/")

        assert exc_info.value.code == 0
        assert exc_info.value.subcode is None
        assert exc_info.value.message == "Unknown WhatsApp API error"

    @pytest.mark.asyncio
    async def test_non_json_error_propagates_unchanged(self, transport, graph):
        """Test an opaque failure surfaces as the original httpx error."""
        graph.reply(502, content=b"<html>Bad Gateway</html>")

        async with transport:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await transport.request("GET", "/")

        assert not isinstance(exc_info.value, ApiError)
        assert exc_info.value.response.status_code == 502

    @pytest.mark.asyncio
    async def test_json_without_envelope_propagates_unchanged(self, transport, graph):
        graph.reply(404, json={"message": "not here"})

        async with transport:
            with pytest.raises(httpx.HTTPStatusError):
                await transport.request("GET", "/")

    @pytest.mark.asyncio
    async def test_non_dict_error_field_propagates_unchanged(self, transport, graph):
        graph.reply(400, json={"error": "bad"})

        async with transport:
            with pytest.raises(httpx.HTTPStatusError):
                await transport.request("GET", "/")

    @pytest.mark.asyncio
    async def test_network_error_not_wrapped(self, config):
        """Test connection failures are not caught or retried."""
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        transport = GraphTransport(config, transport=httpx.MockTransport(handler))

        async with transport:
            with pytest.raises(httpx.ConnectError):
                await transport.request("GET", "/")

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_success_body_returned(self, transport, graph):
        graph.reply(200, json={"data": [1, 2]})

        async with transport:
            assert await transport.request("GET", "/") == {"data": [1, 2]}

    @pytest.mark.asyncio
    async def test_empty_success_body(self, transport, graph):
        graph.reply(200, content=b"")

        async with transport:
            assert await transport.request("DELETE", "/") == {}

    @pytest.mark.asyncio
    async def test_closed_transport_rejects_requests(self, transport, graph):
        """Test a closed transport does not open a new connection pool."""
        async with transport:
            await transport.request("GET", "/")

        with pytest.raises(RuntimeError):
            await transport.request("GET", "/")

        assert len(graph.requests) == 1


class TestUrlResolution:
    def test_resolve_relative(self, transport):
        assert transport.resolve_url("/messages") == "https://graph.facebook.com/v24.0/1234567890/messages"

    def test_resolve_with_base(self, transport):
        assert transport.resolve_url("media-1", transport.graph_url) == "https://graph.facebook.com/v24.0/media-1"

    def test_absolute_untouched(self, transport):
        url = "https://example.com/file?x=1"
        assert transport.resolve_url(url) == url
