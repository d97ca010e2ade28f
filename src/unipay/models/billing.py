"""Billing plan and billing agreement data models (v1 Payments API)."""

from __future__ import annotations

from datetime import datetime

from unipay.models.common import (
    AmountPayout,
    Link,
    ListParams,
    PayPalModel,
    SharedListResponse,
)


class BillingPlanListParams(ListParams):
    status: str | None = None  # CREATED, ACTIVE, INACTIVE, ALL


class ChargeModel(PayPalModel):
    type: str | None = None
    amount: AmountPayout | None = None


class PaymentDefinition(PayPalModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    frequency: str | None = None
    frequency_interval: str | None = None
    amount: AmountPayout | None = None
    cycles: str | None = None
    charge_models: list[ChargeModel] | None = None


class MerchantPreferences(PayPalModel):
    setup_fee: AmountPayout | None = None
    return_url: str | None = None
    cancel_url: str | None = None
    auto_bill_amount: str | None = None
    initial_fail_amount_action: str | None = None
    max_fail_attempts: str | None = None


class BillingPlan(PayPalModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    state: str | None = None
    payment_definitions: list[PaymentDefinition] | None = None
    merchant_preferences: MerchantPreferences | None = None


class BillingPlanListResponse(SharedListResponse):
    plans: list[BillingPlan] = []


class CreateBillingResponse(PayPalModel):
    id: str = ""
    state: str | None = None
    payment_definitions: list[PaymentDefinition] = []
    merchant_preferences: MerchantPreferences | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class Payer(PayPalModel):
    payment_method: str
    payer_info: dict | None = None
    funding_instruments: list[dict] | None = None


class BillingAgreement(PayPalModel):
    name: str
    description: str
    start_date: str
    plan: BillingPlan
    payer: Payer
    shipping_address: dict | None = None
    override_merchant_preferences: MerchantPreferences | None = None


class CreateAgreementResponse(PayPalModel):
    name: str | None = None
    description: str | None = None
    plan: BillingPlan | None = None
    start_time: datetime | None = None
    links: list[Link] = []


class ExecuteAgreementResponse(PayPalModel):
    id: str = ""
    state: str | None = None
    description: str | None = None
    payer: Payer | None = None
    plan: BillingPlan | None = None
    start_date: datetime | None = None
    agreement_details: dict | None = None
    links: list[Link] = []
