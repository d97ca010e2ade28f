"""Subscription plans and subscriptions (v1 Subscriptions API)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from unipay.client import PayPalClient
from unipay.models.subscriptions import (
    CreateSubscriptionPlanResponse,
    ListSubscriptionPlansResponse,
    PricingSchemeUpdate,
    Subscription,
    SubscriptionBase,
    SubscriptionCaptureRequest,
    SubscriptionPlan,
    SubscriptionPlanListParams,
    SubscriptionTransaction,
    SubscriptionTransactionsResponse,
)

logger = logging.getLogger(__name__)

PLANS_PATH = "/v1/billing/plans"
SUBSCRIPTIONS_PATH = "/v1/billing/subscriptions"


def _timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


class SubscriptionService:
    """Service for subscription plans and the subscriptions made against them."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    # ── Plans ────────────────────────────────────────────────────────

    def create_plan(self, plan: SubscriptionPlan) -> CreateSubscriptionPlanResponse:
        return self._client.post(PLANS_PATH, plan, into=CreateSubscriptionPlanResponse)

    def update_plan(self, plan: SubscriptionPlan) -> None:
        """Patch the mutable fields that are set on ``plan``. Its ``id`` names the target."""
        self._client.patch(f"{PLANS_PATH}/{plan.id}", plan.update_patch())

    def get_plan(self, plan_id: str) -> SubscriptionPlan:
        return self._client.get(f"{PLANS_PATH}/{plan_id}", into=SubscriptionPlan)

    def list_plans(
        self, params: SubscriptionPlanListParams | None = None
    ) -> ListSubscriptionPlansResponse:
        query = params.model_dump() if params else None
        return self._client.get(PLANS_PATH, params=query, into=ListSubscriptionPlansResponse)

    def activate_plan(self, plan_id: str) -> None:
        self._client.post(f"{PLANS_PATH}/{plan_id}/activate")

    def deactivate_plan(self, plan_id: str) -> None:
        self._client.post(f"{PLANS_PATH}/{plan_id}/deactivate")

    def update_plan_pricing(self, plan_id: str, schemes: list[PricingSchemeUpdate]) -> None:
        """Replace the price of one or more billing cycles.

        Existing subscribers move to the new price on their next cycle.
        """
        self._client.post(
            f"{PLANS_PATH}/{plan_id}/update-pricing-schemes", {"pricing_schemes": schemes}
        )

    # ── Subscriptions ────────────────────────────────────────────────

    def create(self, subscription: SubscriptionBase) -> Subscription:
        """Create a subscription. The payer still has to approve it via the approve link."""
        return self._client.post(
            SUBSCRIPTIONS_PATH,
            subscription,
            into=Subscription,
            headers={"Prefer": "return=representation"},
        )

    def update(self, subscription: Subscription) -> None:
        self._client.patch(
            f"{SUBSCRIPTIONS_PATH}/{subscription.id}", subscription.update_patch()
        )

    def get(self, subscription_id: str) -> Subscription:
        return self._client.get(f"{SUBSCRIPTIONS_PATH}/{subscription_id}", into=Subscription)

    def activate(self, subscription_id: str, reason: str) -> None:
        self._change_status(subscription_id, "activate", reason)

    def suspend(self, subscription_id: str, reason: str) -> None:
        self._change_status(subscription_id, "suspend", reason)

    def cancel(self, subscription_id: str, reason: str) -> None:
        self._change_status(subscription_id, "cancel", reason)

    def _change_status(self, subscription_id: str, action: str, reason: str) -> None:
        logger.info("Subscription %s: %s (%s)", subscription_id, action, reason)
        self._client.post(f"{SUBSCRIPTIONS_PATH}/{subscription_id}/{action}", {"reason": reason})

    def capture(
        self, subscription_id: str, request: SubscriptionCaptureRequest
    ) -> SubscriptionTransaction:
        """Charge the subscriber's outstanding balance."""
        return self._client.post(
            f"{SUBSCRIPTIONS_PATH}/{subscription_id}/capture",
            request,
            into=SubscriptionTransaction,
        )

    def revise(self, subscription_id: str, revision: SubscriptionBase) -> Subscription:
        """Move a subscription to another plan or change its quantity."""
        return self._client.post(
            f"{SUBSCRIPTIONS_PATH}/{subscription_id}/revise", revision, into=Subscription
        )

    def list_transactions(
        self, subscription_id: str, start_time: datetime, end_time: datetime
    ) -> SubscriptionTransactionsResponse:
        """List the payments made for a subscription in a time window."""
        return self._client.get(
            f"{SUBSCRIPTIONS_PATH}/{subscription_id}/transactions",
            params={"start_time": _timestamp(start_time), "end_time": _timestamp(end_time)},
            into=SubscriptionTransactionsResponse,
        )
