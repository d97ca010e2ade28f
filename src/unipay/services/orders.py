"""Checkout orders service (v2 Orders API)."""

from __future__ import annotations

from unipay.client import PayPalClient
from unipay.models.orders import (
    ApplicationContext,
    AuthorizeOrderRequest,
    CaptureOrderRequest,
    CaptureOrderResponse,
    CreateOrderPayer,
    Order,
    PurchaseUnitRequest,
)
from unipay.models.payments import Authorization
from unipay.services.payments import request_id_headers


class OrderService:
    """Service for creating, authorizing and capturing checkout orders."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def get(self, order_id: str) -> Order:
        return self._client.get(f"/v2/checkout/orders/{order_id}", into=Order)

    def create(
        self,
        intent: str,
        purchase_units: list[PurchaseUnitRequest],
        payer: CreateOrderPayer | None = None,
        application_context: ApplicationContext | None = None,
        request_id: str | None = None,
    ) -> Order:
        """Create an order.

        Args:
            intent: CAPTURE or AUTHORIZE.
            purchase_units: What the payer is paying for.
            payer: Prefill for the payer's details.
            application_context: Branding and redirect URLs.
            request_id: Idempotency key sent as PayPal-Request-Id.
        """
        body: dict = {"intent": intent, "purchase_units": purchase_units}
        if payer is not None:
            body["payer"] = payer
        if application_context is not None:
            body["application_context"] = application_context

        return self._client.post(
            "/v2/checkout/orders", body, into=Order, headers=request_id_headers(request_id)
        )

    def update(self, order_id: str, purchase_units: list[PurchaseUnitRequest]) -> Order:
        return self._client.patch(f"/v2/checkout/orders/{order_id}", purchase_units, into=Order)

    def authorize(
        self, order_id: str, request: AuthorizeOrderRequest | None = None
    ) -> Authorization:
        return self._client.post(
            f"/v2/checkout/orders/{order_id}/authorize",
            request or AuthorizeOrderRequest(),
            into=Authorization,
        )

    def capture(
        self,
        order_id: str,
        request: CaptureOrderRequest | None = None,
        request_id: str | None = None,
    ) -> CaptureOrderResponse:
        """Capture an approved order, asking for the full representation back."""
        headers = {"Prefer": "return=representation"}
        headers.update(request_id_headers(request_id) or {})
        return self._client.post(
            f"/v2/checkout/orders/{order_id}/capture",
            request or CaptureOrderRequest(),
            into=CaptureOrderResponse,
            headers=headers,
        )
