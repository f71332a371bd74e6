"""
WhatsApp Webhook Router

FastAPI routes that put the WebhookVerifier in front of a caller's
event handler.

- GET  <path>: subscription handshake, returns hub.challenge as text/plain
- POST <path>: checks X-Hub-Signature-256 over the raw body, then hands
  the decoded JSON to the handler
"""

import inspect
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request, Response

from whatsapp_cloud.errors import WebhookChallengeMissingError, WebhookUnauthorizedError
from whatsapp_cloud.webhooks.verifier import SIGNATURE_HEADER, WebhookVerifier

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict[str, Any]], Awaitable[None] | None]


def create_webhook_router(
    verifier: WebhookVerifier,
    handler: EventHandler,
    path: str = "/webhook",
) -> APIRouter:
    """
    Build the webhook routes.

    Args:
        verifier: Verifier bound to the app's verify token and app secret
        handler: Called with each authenticated event payload (sync or async)
        path: Route path for both GET and POST

    Returns:
        APIRouter to include in the caller's FastAPI app
    """
    router = APIRouter()

    @router.get(path)
    async def verify_webhook(
        hub_mode: str | None = Query(None, alias="hub.mode"),
        hub_verify_token: str | None = Query(None, alias="hub.verify_token"),
        hub_challenge: str | None = Query(None, alias="hub.challenge"),
    ):
        """Meta calls this once when the webhook URL is registered."""
        try:
            challenge = verifier.verify_handshake(hub_mode, hub_verify_token, hub_challenge)
        except WebhookChallengeMissingError:
            raise HTTPException(status_code=400, detail="Missing hub.challenge")
        except WebhookUnauthorizedError:
            raise HTTPException(status_code=403, detail="Verification failed")

        return Response(content=challenge, media_type="text/plain")

    @router.post(path)
    async def receive_webhook(request: Request):
        # Signature is computed over the body exactly as received
        body = await request.body()

        if not verifier.validate_signature(body, request.headers.get(SIGNATURE_HEADER)):
            raise HTTPException(status_code=403, detail="Invalid signature")

        try:
            payload = json.loads(body)
        except json.JSONDecodeError:
            logger.warning("Invalid JSON payload")
            raise HTTPException(status_code=400, detail="Invalid JSON")

        if not isinstance(payload, dict):
            raise HTTPException(status_code=400, detail="Invalid payload")

        result = handler(payload)
        if inspect.isawaitable(result):
            await result

        logger.info("Webhook event accepted", extra={"object": payload.get("object")})
        return {"status": "accepted"}

    return router
