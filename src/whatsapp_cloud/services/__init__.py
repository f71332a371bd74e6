"""
WhatsApp Cloud Resource Services

One service per platform capability, all sharing a GraphTransport.
"""

from whatsapp_cloud.services.analytics import AnalyticsParams, AnalyticsService
from whatsapp_cloud.services.base import BaseService
from whatsapp_cloud.services.business import BusinessAccountService
from whatsapp_cloud.services.commerce import CommerceService
from whatsapp_cloud.services.flows import FlowService
from whatsapp_cloud.services.media import MediaService
from whatsapp_cloud.services.messages import MessageService
from whatsapp_cloud.services.phone_numbers import PhoneNumberService
from whatsapp_cloud.services.profile import BusinessProfileService
from whatsapp_cloud.services.qr_codes import QRCodeService
from whatsapp_cloud.services.subscriptions import WebhookSubscriptionService
from whatsapp_cloud.services.templates import CreateTemplateRequest, TemplateService
from whatsapp_cloud.services.users import UserService

__all__ = [
    "AnalyticsParams",
    "AnalyticsService",
    "BaseService",
    "BusinessAccountService",
    "BusinessProfileService",
    "CommerceService",
    "CreateTemplateRequest",
    "FlowService",
    "MediaService",
    "MessageService",
    "PhoneNumberService",
    "QRCodeService",
    "TemplateService",
    "UserService",
    "WebhookSubscriptionService",
]
