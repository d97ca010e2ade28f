"""Webhook data models."""

from __future__ import annotations

from unipay.models.common import Link, Patch, PayPalModel


class WebhookEventType(PayPalModel):
    name: str
    description: str | None = None
    status: str | None = None
    resource_versions: list[str] | None = None


class CreateWebhookRequest(PayPalModel):
    url: str
    event_types: list[WebhookEventType]


class Webhook(PayPalModel):
    id: str = ""
    url: str = ""
    event_types: list[WebhookEventType] = []
    links: list[Link] = []


class WebhookField(Patch):
    pass


class ListWebhookResponse(PayPalModel):
    webhooks: list[Webhook] = []


class WebhookEventTypesResponse(PayPalModel):
    event_types: list[WebhookEventType] = []


class VerifyWebhookResponse(PayPalModel):
    verification_status: str = ""  # SUCCESS or FAILURE

    @property
    def verified(self) -> bool:
        return self.verification_status == "SUCCESS"
