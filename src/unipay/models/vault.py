"""Credit card vault data models."""

from __future__ import annotations

from pydantic import BaseModel

from unipay.models.common import Address, Link, Patch, PayPalModel, SharedListResponse


class CreditCard(PayPalModel):
    id: str | None = None
    payer_id: str | None = None
    external_customer_id: str | None = None
    number: str
    type: str
    expire_month: str
    expire_year: str
    cvv2: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    billing_address: Address | None = None
    state: str | None = None
    valid_until: str | None = None
    links: list[Link] | None = None


class CreditCards(SharedListResponse):
    items: list[CreditCard] = []


class CreditCardsFilter(BaseModel):
    page: int = 1
    page_size: int = 10


class CreditCardField(Patch):
    """A JSON-patch operation against a stored card."""
    value: str
