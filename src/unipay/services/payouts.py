"""Payout (mass payment) service."""

from __future__ import annotations

from unipay.client import PayPalClient
from unipay.models.payouts import Payout, PayoutItemResponse, PayoutResponse


class PayoutService:
    """Service for PayPal payouts."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, payout: Payout) -> PayoutResponse:
        """Submit a payout batch. PayPal processes it asynchronously.

        For email payouts set recipient_type="EMAIL" and the address as receiver.
        Endpoint: POST /v1/payments/payouts
        """
        return self._client.post("/v1/payments/payouts", payout, into=PayoutResponse)

    def get(self, payout_batch_id: str) -> PayoutResponse:
        """Latest status of a batch payout and its items."""
        return self._client.get(f"/v1/payments/payouts/{payout_batch_id}", into=PayoutResponse)

    def get_item(self, payout_item_id: str) -> PayoutItemResponse:
        return self._client.get(
            f"/v1/payments/payouts-item/{payout_item_id}", into=PayoutItemResponse
        )

    def cancel_item(self, payout_item_id: str) -> PayoutItemResponse:
        """Cancel an unclaimed payout item before the automatic 30-day refund."""
        return self._client.post(
            f"/v1/payments/payouts-item/{payout_item_id}/cancel", into=PayoutItemResponse
        )
