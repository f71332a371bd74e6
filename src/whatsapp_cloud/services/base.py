"""
Resource Service Base

Every resource service receives the shared GraphTransport and issues
all of its calls through it. Services never hold a raw httpx client.
"""

from whatsapp_cloud.config import ClientConfig
from whatsapp_cloud.transport import GraphTransport


class BaseService:
    """Base for Graph API resource wrappers."""

    def __init__(self, transport: GraphTransport):
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._transport.config

    @property
    def waba_id(self) -> str:
        return self.config.business_account_id

    @property
    def graph_url(self) -> str:
        """Base for nodes outside the phone-number scope (WABA, media, flows)."""
        return self._transport.graph_url
