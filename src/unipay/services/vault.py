"""Credit card vault service."""

from __future__ import annotations

from unipay.client import PayPalClient
from unipay.models.vault import CreditCard, CreditCardField, CreditCards, CreditCardsFilter


class VaultService:
    """Store and manage credit cards in the PayPal vault."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def store(self, card: CreditCard) -> CreditCard:
        return self._client.post("/v1/vault/credit-cards", card, into=CreditCard)

    def get(self, card_id: str) -> CreditCard:
        return self._client.get(f"/v1/vault/credit-cards/{card_id}", into=CreditCard)

    def list(self, card_filter: CreditCardsFilter | None = None) -> CreditCards:
        """List stored cards, first page of ten unless a filter says otherwise."""
        card_filter = card_filter or CreditCardsFilter()
        params = {
            "page": max(card_filter.page, 1),
            "page_size": card_filter.page_size if card_filter.page_size > 0 else 10,
        }
        return self._client.get("/v1/vault/credit-cards", params=params, into=CreditCards)

    def patch(self, card_id: str, fields: list[CreditCardField]) -> CreditCard:
        return self._client.patch(f"/v1/vault/credit-cards/{card_id}", fields, into=CreditCard)

    def delete(self, card_id: str) -> None:
        self._client.delete(f"/v1/vault/credit-cards/{card_id}")
