"""Webhook management and signature verification."""

from __future__ import annotations

import json
from collections.abc import Mapping

from unipay.client import PayPalClient
from unipay.models.webhooks import (
    CreateWebhookRequest,
    ListWebhookResponse,
    VerifyWebhookResponse,
    Webhook,
    WebhookEventTypesResponse,
    WebhookField,
)

ANCHOR_TYPE_APPLICATION = "APPLICATION"
ANCHOR_TYPE_ACCOUNT = "ACCOUNT"

# Transmission headers PayPal attaches to every webhook delivery
_SIGNATURE_HEADERS = {
    "auth_algo": "PAYPAL-AUTH-ALGO",
    "cert_url": "PAYPAL-CERT-URL",
    "transmission_id": "PAYPAL-TRANSMISSION-ID",
    "transmission_sig": "PAYPAL-TRANSMISSION-SIG",
    "transmission_time": "PAYPAL-TRANSMISSION-TIME",
}


def _header(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    if value is None:
        lowered = {k.lower(): v for k, v in headers.items()}
        value = lowered.get(name.lower(), "")
    return value


class WebhookService:
    """Service for webhook subscriptions and incoming-event verification."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, request: CreateWebhookRequest) -> Webhook:
        """Subscribe a listener URL to event types."""
        return self._client.post("/v1/notifications/webhooks", request, into=Webhook)

    def get(self, webhook_id: str) -> Webhook:
        return self._client.get(f"/v1/notifications/webhooks/{webhook_id}", into=Webhook)

    def update(self, webhook_id: str, fields: list[WebhookField]) -> Webhook:
        return self._client.patch(
            f"/v1/notifications/webhooks/{webhook_id}", fields, into=Webhook
        )

    def list(self, anchor_type: str = ANCHOR_TYPE_APPLICATION) -> ListWebhookResponse:
        return self._client.get(
            "/v1/notifications/webhooks",
            params={"anchor_type": anchor_type or ANCHOR_TYPE_APPLICATION},
            into=ListWebhookResponse,
        )

    def delete(self, webhook_id: str) -> None:
        self._client.delete(f"/v1/notifications/webhooks/{webhook_id}")

    def event_types(self) -> WebhookEventTypesResponse:
        return self._client.get(
            "/v1/notifications/webhooks-event-types", into=WebhookEventTypesResponse
        )

    def verify_signature(
        self, headers: Mapping[str, str], body: bytes, webhook_id: str
    ) -> VerifyWebhookResponse:
        """Ask PayPal to verify a webhook delivery received by the application.

        Args:
            headers: Headers of the incoming delivery.
            body: Raw delivery body, forwarded byte for byte as the
                webhook_event so the signed content is not re-encoded.
            webhook_id: ID of the webhook the delivery was sent for.
        """
        payload = {field: _header(headers, name) for field, name in _SIGNATURE_HEADERS.items()}
        payload = {k: v for k, v in payload.items() if v}
        payload["webhook_id"] = webhook_id

        if isinstance(body, str):
            body = body.encode()
        event = body.strip() or b"null"
        content = json.dumps(payload)[:-1].encode() + b', "webhook_event": ' + event + b"}"

        return self._client.post(
            "/v1/notifications/verify-webhook-signature", content, into=VerifyWebhookResponse
        )
