"""Payout data models."""

from __future__ import annotations

from datetime import datetime

from unipay.models.common import AmountPayout, Link, PayPalModel


class SenderBatchHeader(PayPalModel):
    email_subject: str
    email_message: str | None = None
    sender_batch_id: str | None = None


class PayoutItem(PayPalModel):
    recipient_type: str  # EMAIL, PHONE or PAYPAL_ID
    receiver: str
    amount: AmountPayout
    recipient_wallet: str | None = None
    note: str | None = None
    sender_item_id: str | None = None


class Payout(PayPalModel):
    sender_batch_header: SenderBatchHeader
    items: list[PayoutItem]


class BatchHeader(PayPalModel):
    payout_batch_id: str | None = None
    batch_status: str | None = None
    amount: AmountPayout | None = None
    fees: AmountPayout | None = None
    time_created: datetime | None = None
    time_completed: datetime | None = None
    sender_batch_header: SenderBatchHeader | None = None


class PayoutItemResponse(PayPalModel):
    payout_item_id: str = ""
    transaction_id: str | None = None
    transaction_status: str | None = None
    payout_batch_id: str | None = None
    payout_item_fee: AmountPayout | None = None
    payout_item: PayoutItem | None = None
    time_processed: datetime | None = None
    links: list[Link] = []


class PayoutResponse(PayPalModel):
    batch_header: BatchHeader | None = None
    items: list[PayoutItemResponse] = []
    links: list[Link] = []
