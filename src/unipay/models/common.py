"""Shared PayPal data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class PayPalModel(BaseModel):
    """Base for PayPal payloads. Unknown fields are kept, not rejected."""

    model_config = {"extra": "allow", "populate_by_name": True}


class Link(PayPalModel):
    href: str
    rel: str | None = None
    method: str | None = None
    description: str | None = None
    enctype: str | None = None


class Money(PayPalModel):
    """v2 APIs money: currency_code + value."""
    currency: str = Field(alias="currency_code")
    value: str  # string keeps decimal precision


class AmountDetails(PayPalModel):
    subtotal: str | None = None
    shipping: str | None = None
    tax: str | None = None
    handling_fee: str | None = None
    shipping_discount: str | None = None
    insurance: str | None = None
    gift_wrap: str | None = None


class Amount(PayPalModel):
    """v1 APIs amount: currency + total."""
    currency: str
    total: str
    details: AmountDetails | None = None


class AmountPayout(PayPalModel):
    currency: str
    value: str


class Address(PayPalModel):
    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    country_code: str | None = None
    postal_code: str | None = None
    state: str | None = None
    phone: str | None = None


class Patch(PayPalModel):
    """A JSON-patch operation."""
    operation: str = Field(default="replace", alias="op")
    path: str
    value: Any = None


class ListParams(BaseModel):
    page: str | None = None
    page_size: str | None = None
    total_required: str | None = None


class SharedListResponse(PayPalModel):
    total_items: int | None = None
    total_pages: int | None = None
    links: list[Link] = []
