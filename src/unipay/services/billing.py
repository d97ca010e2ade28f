"""Billing plans and billing agreements (v1 Payments API)."""

from __future__ import annotations

import logging
from typing import Any

from unipay.client import PayPalClient
from unipay.errors import AgreementExecutionError
from unipay.models.billing import (
    BillingAgreement,
    BillingPlan,
    BillingPlanListParams,
    BillingPlanListResponse,
    CreateAgreementResponse,
    CreateBillingResponse,
    ExecuteAgreementResponse,
)
from unipay.models.common import Patch

logger = logging.getLogger(__name__)

PLAN_STATE_ACTIVE = "ACTIVE"


class BillingService:
    """Service for billing plans and the agreements subscribed to them."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def list_plans(self, params: BillingPlanListParams | None = None) -> BillingPlanListResponse:
        query = params.model_dump() if params else None
        return self._client.get(
            "/v1/payments/billing-plans", params=query, into=BillingPlanListResponse
        )

    def create_plan(self, plan: BillingPlan) -> CreateBillingResponse:
        return self._client.post("/v1/payments/billing-plans", plan, into=CreateBillingResponse)

    def update_plan(self, plan_id: str, path_values: dict[str, dict[str, Any]]) -> None:
        """Replace values inside a plan, one JSON-patch operation per path."""
        patches = [
            Patch(operation="replace", path=path, value=value)
            for path, value in path_values.items()
        ]
        self._client.patch(f"/v1/payments/billing-plans/{plan_id}", patches)

    def activate_plan(self, plan_id: str) -> None:
        """New plans start out inactive."""
        self.update_plan(plan_id, {"/": {"state": PLAN_STATE_ACTIVE}})

    def create_agreement(self, agreement: BillingAgreement) -> CreateAgreementResponse:
        """Create an agreement for a plan. Only the plan ID is sent."""
        body = agreement.model_copy(update={"plan": BillingPlan(id=agreement.plan.id)})
        return self._client.post(
            "/v1/payments/billing-agreements", body, into=CreateAgreementResponse
        )

    def execute_agreement(self, token: str) -> ExecuteAgreementResponse:
        """Execute an agreement the payer has approved.

        Raises:
            AgreementExecutionError: PayPal answered 2xx without an agreement ID.
        """
        response = self._client.post(
            f"/v1/payments/billing-agreements/{token}/agreement-execute",
            into=ExecuteAgreementResponse,
        )
        if response is None or not response.id:
            logger.warning("Agreement execution returned no ID for token %s", token)
            raise AgreementExecutionError(f"Unable to execute agreement with token={token}")
        return response
