"""
Tests for the command-line interface.
"""

import hashlib
import hmac

import pytest
from typer.testing import CliRunner

from whatsapp_cloud.cli import main as cli
from whatsapp_cloud.client import WhatsAppClient

runner = CliRunner()

WA_VARS = (
    "WA_ACCESS_TOKEN",
    "WA_PHONE_NUMBER_ID",
    "WA_BUSINESS_ACCOUNT_ID",
    "WA_APP_SECRET",
    "WA_VERIFY_TOKEN",
)


@pytest.fixture
def patched_client(monkeypatch, config, mock_transport):
    """Route CLI commands to the recording Graph API."""
    monkeypatch.setattr(cli, "get_client", lambda: WhatsAppClient(config, transport=mock_transport))


class TestCli:
    def test_send_text(self, patched_client, graph):
        graph.reply(json={"messaging_product": "whatsapp", "messages": [{"id": "wamid.CLI"}]})

        result = runner.invoke(cli.app, ["send-text", "15551234567", "hello"])

        assert result.exit_code == 0, result.output
        assert "wamid.CLI" in result.output
        assert graph.last.url.path == "/v24.0/1234567890/messages"

    def test_api_error_exit_code(self, patched_client, graph):
        graph.reply(400, json={"error": {"message": "Invalid parameter", "code": 100}})

        result = runner.invoke(cli.app, ["send-text", "15551234567", "hello"])

        assert result.exit_code == 1
        assert "Invalid parameter" in result.output

    def test_templates_table(self, patched_client, graph):
        graph.reply(json={"data": [{"id": "t1", "name": "hello_world", "language": "en_US", "status": "APPROVED"}]})

        result = runner.invoke(cli.app, ["templates", "--limit", "5"])

        assert result.exit_code == 0, result.output
        assert "hello_world" in result.output
        assert graph.last.url.params["limit"] == "5"

    def test_upload_missing_file(self, patched_client, graph, tmp_path):
        result = runner.invoke(cli.app, ["upload-media", str(tmp_path / "nope.png")])

        assert result.exit_code == 1
        assert graph.requests == []

    def test_missing_configuration(self, monkeypatch):
        for name in WA_VARS:
            monkeypatch.delenv(name, raising=False)

        result = runner.invoke(cli.app, ["profile"])

        assert result.exit_code == 1
        assert "WA_ACCESS_TOKEN" in result.output

    def test_sign(self, wa_env, tmp_path):
        payload = b'{"object":"whatsapp_business_account"}'
        path = tmp_path / "body.json"
        path.write_bytes(payload)

        result = runner.invoke(cli.app, ["sign", str(path)])

        expected = hmac.new(b"test_app_secret", payload, hashlib.sha256).hexdigest()
        assert result.exit_code == 0, result.output
        assert result.output.strip() == f"sha256={expected}"

    def test_profile_table(self, patched_client, graph):
        """Test list fields of any item type are rendered."""
        graph.reply(json={
            "data": [{
                "about": "Open 9-18",
                "websites": ["https://example.com"],
                "messaging_product": "whatsapp",
                "hours": [{"day": "MON", "open": "09:00"}],
            }]
        })

        result = runner.invoke(cli.app, ["profile"])

        assert result.exit_code == 0, result.output
        assert "Open 9-18" in result.output
        assert "hours" in result.output
