"""Checkout order data models (v2 Orders API)."""

from __future__ import annotations

from datetime import datetime

from unipay.models.common import Link, Money, PayPalModel


class PurchaseUnitRequest(PayPalModel):
    amount: Money
    reference_id: str | None = None
    description: str | None = None
    custom_id: str | None = None
    invoice_id: str | None = None
    soft_descriptor: str | None = None
    items: list[dict] | None = None


class CreateOrderPayer(PayPalModel):
    email_address: str | None = None
    payer_id: str | None = None
    name: dict | None = None


class ApplicationContext(PayPalModel):
    brand_name: str | None = None
    locale: str | None = None
    shipping_preference: str | None = None
    user_action: str | None = None
    return_url: str | None = None
    cancel_url: str | None = None


class PurchaseUnit(PayPalModel):
    reference_id: str | None = None
    amount: Money | None = None
    description: str | None = None
    payments: dict | None = None


class Order(PayPalModel):
    id: str = ""
    status: str | None = None
    intent: str | None = None
    purchase_units: list[PurchaseUnit] = []
    payer: dict | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class AuthorizeOrderRequest(PayPalModel):
    payment_source: dict | None = None


class CaptureOrderRequest(PayPalModel):
    payment_source: dict | None = None


class CaptureOrderResponse(PayPalModel):
    id: str = ""
    status: str | None = None
    payer: dict | None = None
    purchase_units: list[PurchaseUnit] = []
    links: list[Link] = []
