"""Payment data models: sales, refunds, authorizations and captures."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from unipay.models.common import Amount, Link, Money, PayPalModel


class Sale(PayPalModel):
    id: str = ""
    amount: Amount | None = None
    description: str | None = None
    state: str | None = None
    parent_payment: str | None = None
    payment_mode: str | None = None
    reason_code: str | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class Refund(PayPalModel):
    id: str = ""
    amount: Amount | None = None
    state: str | None = None
    status: str | None = None
    capture_id: str | None = None
    parent_payment: str | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class Authorization(PayPalModel):
    id: str = ""
    status: str | None = None
    custom_id: str | None = None
    invoice_id: str | None = None
    amount: Money | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    expiration_time: datetime | None = None
    links: list[Link] = []


class PaymentCaptureRequest(PayPalModel):
    invoice_id: str | None = None
    note_to_payer: str | None = None
    soft_descriptor: str | None = None
    amount: Money | None = None
    final_capture: bool | None = None


class PaymentCaptureResponse(PayPalModel):
    id: str = ""
    status: str | None = None
    amount: Money | None = None
    invoice_id: str | None = None
    final_capture: bool | None = None
    disbursement_mode: str | None = None
    links: list[Link] = []


class Capture(PayPalModel):
    id: str = ""
    amount: Amount | None = None
    state: str | None = None
    parent_payment: str | None = None
    transaction_fee: str | None = None
    is_final_capture: bool = False
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class TransactionSearchRequest(BaseModel):
    """Filters for GET /v1/reporting/transactions (at most 31 days apart)."""
    start_date: datetime
    end_date: datetime
    transaction_id: str | None = None
    transaction_type: str | None = None
    transaction_status: str | None = None
    transaction_amount: str | None = None
    transaction_currency: str | None = None
    payment_instrument_type: str | None = None
    store_id: str | None = None
    terminal_id: str | None = None
    fields: str | None = None
    balance_affecting_records_only: str | None = None
    page_size: int | None = None
    page: int | None = None

    def to_params(self) -> dict[str, str | int | None]:
        params = self.model_dump(exclude={"start_date", "end_date"})
        params["start_date"] = self.start_date.isoformat()
        params["end_date"] = self.end_date.isoformat()
        return params


class TransactionSearchResponse(PayPalModel):
    transaction_details: list[dict] = []
    account_number: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    last_refreshed_datetime: datetime | None = None
    page: int | None = None
    total_items: int | None = None
    total_pages: int | None = None
    links: list[Link] = []
