"""Subscription plan and subscription data models (v1 Subscriptions API)."""

from __future__ import annotations

from datetime import datetime

from unipay.models.common import (
    AmountPayout,
    Link,
    ListParams,
    Money,
    Patch,
    PayPalModel,
    SharedListResponse,
)
from unipay.models.orders import ApplicationContext

PLAN_STATUS_CREATED = "CREATED"
PLAN_STATUS_ACTIVE = "ACTIVE"
PLAN_STATUS_INACTIVE = "INACTIVE"

TENURE_TYPE_REGULAR = "REGULAR"
TENURE_TYPE_TRIAL = "TRIAL"

CAPTURE_TYPE_OUTSTANDING_BALANCE = "OUTSTANDING_BALANCE"


# ── Plans ────────────────────────────────────────────────────────────

class Frequency(PayPalModel):
    interval_unit: str  # DAY, WEEK, MONTH, YEAR
    interval_count: int = 1


class PricingScheme(PayPalModel):
    version: int | None = None
    fixed_price: Money | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None


class BillingCycle(PayPalModel):
    frequency: Frequency
    tenure_type: str = TENURE_TYPE_REGULAR
    sequence: int = 1
    total_cycles: int = 0  # 0 runs until cancelled
    pricing_scheme: PricingScheme | None = None  # free trials have none


class PaymentPreferences(PayPalModel):
    auto_bill_outstanding: bool | None = None
    setup_fee: Money | None = None
    setup_fee_failure_action: str | None = None  # CONTINUE, CANCEL
    payment_failure_threshold: int | None = None


class Taxes(PayPalModel):
    percentage: str
    inclusive: bool | None = None


class SubscriptionPlan(PayPalModel):
    id: str | None = None
    product_id: str | None = None
    name: str | None = None
    status: str | None = None
    description: str | None = None
    billing_cycles: list[BillingCycle] | None = None
    payment_preferences: PaymentPreferences | None = None
    taxes: Taxes | None = None
    quantity_supported: bool | None = None

    def update_patch(self) -> list[Patch]:
        """Replace operations for the plan fields that can change after creation."""
        patches = [
            Patch(operation="replace", path=f"/{field}", value=getattr(self, field))
            for field in ("description", "name")
            if getattr(self, field)
        ]
        prefs = self.payment_preferences
        if prefs is not None:
            for field, value in prefs.model_dump(mode="json", by_alias=True, exclude_none=True).items():
                patches.append(
                    Patch(operation="replace", path=f"/payment_preferences/{field}", value=value)
                )
        if self.taxes is not None:
            patches.append(
                Patch(operation="replace", path="/taxes/percentage", value=self.taxes.percentage)
            )
        return patches


class CreateSubscriptionPlanResponse(SubscriptionPlan):
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class SubscriptionPlanListParams(ListParams):
    product_id: str | None = None
    plan_ids: str | None = None  # comma separated, at most 10


class ListSubscriptionPlansResponse(SharedListResponse):
    plans: list[SubscriptionPlan] = []


class PricingSchemeUpdate(PayPalModel):
    billing_cycle_sequence: int
    pricing_scheme: PricingScheme


# ── Subscriptions ────────────────────────────────────────────────────

class SubscriberName(PayPalModel):
    given_name: str | None = None
    surname: str | None = None


class ShippingAddress(PayPalModel):
    address_line_1: str | None = None
    address_line_2: str | None = None
    admin_area_1: str | None = None
    admin_area_2: str | None = None
    postal_code: str | None = None
    country_code: str | None = None


class ShippingDetail(PayPalModel):
    name: dict | None = None
    address: ShippingAddress | None = None


class Subscriber(PayPalModel):
    name: SubscriberName | None = None
    email_address: str | None = None
    shipping_address: ShippingDetail | None = None


class SubscriptionBase(PayPalModel):
    plan_id: str | None = None
    start_time: datetime | None = None
    effective_time: datetime | None = None
    quantity: str | None = None
    shipping_amount: Money | None = None
    subscriber: Subscriber | None = None
    auto_renewal: bool | None = None
    application_context: ApplicationContext | None = None
    custom_id: str | None = None


class CycleExecution(PayPalModel):
    tenure_type: str | None = None
    sequence: int | None = None
    cycles_completed: int | None = None
    cycles_remaining: int | None = None
    total_cycles: int | None = None


class LastPayment(PayPalModel):
    amount: Money | None = None
    time: datetime | None = None


class BillingInfo(PayPalModel):
    outstanding_balance: AmountPayout | None = None
    cycle_executions: list[CycleExecution] = []
    last_payment: LastPayment | None = None
    next_billing_time: datetime | None = None
    failed_payments_count: int | None = None


class Subscription(SubscriptionBase):
    id: str | None = None
    status: str | None = None  # APPROVAL_PENDING, APPROVED, ACTIVE, SUSPENDED, CANCELLED, EXPIRED
    status_change_note: str | None = None
    status_update_time: datetime | None = None
    billing_info: BillingInfo | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []

    def update_patch(self) -> list[Patch]:
        """Replace operations for the subscription fields that can change after creation."""
        patches = []
        if self.custom_id:
            patches.append(Patch(operation="replace", path="/custom_id", value=self.custom_id))
        if self.shipping_amount is not None:
            patches.append(Patch(
                operation="replace",
                path="/shipping_amount",
                value=self.shipping_amount.model_dump(mode="json", by_alias=True),
            ))
        balance = self.billing_info.outstanding_balance if self.billing_info else None
        if balance is not None:
            patches.append(Patch(
                operation="replace",
                path="/billing_info/outstanding_balance",
                value=balance.model_dump(mode="json", by_alias=True),
            ))
        return patches


class SubscriptionCaptureRequest(PayPalModel):
    note: str
    amount: Money
    capture_type: str = CAPTURE_TYPE_OUTSTANDING_BALANCE


class AmountWithBreakdown(PayPalModel):
    gross_amount: Money | None = None
    fee_amount: Money | None = None
    shipping_amount: Money | None = None
    tax_amount: Money | None = None
    net_amount: Money | None = None


class SubscriptionTransaction(PayPalModel):
    id: str | None = None
    status: str | None = None  # COMPLETED, DECLINED, PARTIALLY_REFUNDED, PENDING, REFUNDED
    amount_with_breakdown: AmountWithBreakdown | None = None
    payer_name: dict | None = None
    payer_email: str | None = None
    time: datetime | None = None


class SubscriptionTransactionsResponse(SharedListResponse):
    transactions: list[SubscriptionTransaction] = []
