"""Identity (OpenID Connect) and web experience profile models."""

from __future__ import annotations

from pydantic import Field

from unipay.models.common import Address, PayPalModel


class UserInfo(PayPalModel):
    id: str = Field(default="", alias="user_id")
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    email: str | None = None
    verified: bool | None = None
    gender: str | None = None
    birthdate: str | None = None
    zoneinfo: str | None = None
    locale: str | None = None
    phone_number: str | None = None
    address: Address | None = None
    verified_account: bool | None = None
    account_type: str | None = None
    age_range: str | None = None
    payer_id: str | None = None


class FlowConfig(PayPalModel):
    landing_page_type: str | None = None
    bank_txn_pending_url: str | None = None
    user_action: str | None = None


class InputFields(PayPalModel):
    allow_note: bool | None = None
    no_shipping: int | None = None
    address_override: int | None = None


class Presentation(PayPalModel):
    brand_name: str | None = None
    logo_image: str | None = None
    locale_code: str | None = None


class WebProfile(PayPalModel):
    id: str | None = None
    name: str
    temporary: bool | None = None
    presentation: Presentation | None = None
    input_fields: InputFields | None = None
    flow_config: FlowConfig | None = None
