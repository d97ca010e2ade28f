"""Sales, refunds, authorizations and captures."""

from __future__ import annotations

from unipay.client import REQUEST_ID_HEADER, PayPalClient
from unipay.models.common import Amount, Money
from unipay.models.payments import (
    Authorization,
    Capture,
    PaymentCaptureRequest,
    PaymentCaptureResponse,
    Refund,
    Sale,
    TransactionSearchRequest,
    TransactionSearchResponse,
)


def request_id_headers(request_id: str | None) -> dict[str, str] | None:
    """Idempotency header for a caller-supplied request ID, passed through verbatim."""
    if not request_id:
        return None
    return {REQUEST_ID_HEADER: request_id}


class PaymentService:
    """Service for payments made through the v1 and v2 Payments APIs."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    # ── Sales ────────────────────────────────────────────────────────

    def get_sale(self, sale_id: str) -> Sale:
        """Only sales created through the REST API are returned."""
        return self._client.get(f"/v1/payments/sale/{sale_id}", into=Sale)

    def refund_sale(self, sale_id: str, amount: Amount | None = None) -> Refund:
        """Refund a completed sale. Omit the amount for a full refund."""
        body = {"amount": amount} if amount is not None else {}
        return self._client.post(f"/v1/payments/sale/{sale_id}/refund", body, into=Refund)

    # ── Authorizations ───────────────────────────────────────────────

    def get_authorization(self, auth_id: str) -> Authorization:
        return self._client.get(f"/v2/payments/authorizations/{auth_id}", into=Authorization)

    def capture_authorization(
        self,
        auth_id: str,
        request: PaymentCaptureRequest | None = None,
        request_id: str | None = None,
    ) -> PaymentCaptureResponse:
        """Capture an authorized payment (the original intent must be "authorize").

        Args:
            auth_id: Authorization to capture.
            request: Optional amount, invoice and final-capture flag.
            request_id: Idempotency key; retries with the same key are deduplicated.
        """
        return self._client.post(
            f"/v2/payments/authorizations/{auth_id}/capture",
            request or PaymentCaptureRequest(),
            into=PaymentCaptureResponse,
            headers=request_id_headers(request_id),
        )

    def void_authorization(self, auth_id: str) -> Authorization:
        return self._client.post(
            f"/v2/payments/authorizations/{auth_id}/void", into=Authorization
        )

    def reauthorize_authorization(self, auth_id: str, amount: Amount) -> Authorization:
        """Reauthorize a payment, recommended roughly three days after authorizing."""
        body = {"amount": Money(currency=amount.currency, value=amount.total)}
        return self._client.post(
            f"/v2/payments/authorizations/{auth_id}/reauthorize", body, into=Authorization
        )

    # ── Captures and refunds ─────────────────────────────────────────

    def get_captured_payment(self, capture_id: str) -> Capture:
        return self._client.get(f"/v1/payments/capture/{capture_id}", into=Capture)

    def get_refund(self, refund_id: str) -> Refund:
        return self._client.get(f"/v2/payments/refund/{refund_id}", into=Refund)

    # ── Reporting ────────────────────────────────────────────────────

    def list_transactions(self, search: TransactionSearchRequest) -> TransactionSearchResponse:
        """Search transactions from the last 31 days."""
        return self._client.get(
            "/v1/reporting/transactions",
            params=search.to_params(),
            into=TransactionSearchResponse,
        )
