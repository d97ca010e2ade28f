"""Tests for payouts, vault and identity services."""
import json

import pytest

from unipay.errors import ProfileLookupError
from unipay.models.common import AmountPayout
from unipay.models.identity import UserInfo, WebProfile
from unipay.models.payouts import Payout, PayoutItem, SenderBatchHeader
from unipay.models.vault import CreditCard, CreditCardField, CreditCards, CreditCardsFilter
from unipay.services.identity import IdentityService
from unipay.services.payouts import PayoutService
from unipay.services.vault import VaultService


# ── Payouts ──────────────────────────────────────────────────────────

def test_create_payout(paypal_client, fake_paypal):
    fake_paypal.reply("POST", "/v1/payments/payouts", status=201, json={
        "batch_header": {"payout_batch_id": "BATCH-1", "batch_status": "PENDING"},
    })
    payout = Payout(
        sender_batch_header=SenderBatchHeader(sender_batch_id="Payouts_1", email_subject="You have a payout"),
        items=[PayoutItem(
            recipient_type="EMAIL",
            receiver="receiver@example.com",
            amount=AmountPayout(currency="USD", value="9.87"),
        )],
    )

    result = PayoutService(paypal_client).create(payout)

    assert result.batch_header.payout_batch_id == "BATCH-1"
    body = json.loads(fake_paypal.calls("POST", "/v1/payments/payouts")[0].content)
    assert body["items"][0]["amount"] == {"currency": "USD", "value": "9.87"}


def test_payout_item_paths(mock_client):
    service = PayoutService(mock_client)
    service.get("BATCH-1")
    service.get_item("ITEM-1")
    service.cancel_item("ITEM-1")

    assert [c.args[0] for c in mock_client.get.call_args_list] == [
        "/v1/payments/payouts/BATCH-1",
        "/v1/payments/payouts-item/ITEM-1",
    ]
    assert mock_client.post.call_args.args[0] == "/v1/payments/payouts-item/ITEM-1/cancel"


# ── Vault ────────────────────────────────────────────────────────────

def test_list_cards_defaults(mock_client):
    mock_client.get.return_value = CreditCards()
    VaultService(mock_client).list()

    _, kwargs = mock_client.get.call_args
    assert kwargs["params"] == {"page": 1, "page_size": 10}


def test_list_cards_normalizes_filter(mock_client):
    VaultService(mock_client).list(CreditCardsFilter(page=0, page_size=0))
    _, kwargs = mock_client.get.call_args
    assert kwargs["params"] == {"page": 1, "page_size": 10}


def test_list_cards_filter(paypal_client, fake_paypal):
    fake_paypal.reply("GET", "/v1/vault/credit-cards", json={
        "items": [{"id": "CARD-1", "number": "xxxxxxxxxxxx0331", "type": "visa", "expire_month": "11", "expire_year": "2030"}],
        "total_items": 1,
        "total_pages": 1,
    })

    cards = VaultService(paypal_client).list(CreditCardsFilter(page=2, page_size=5))

    assert cards.items[0].id == "CARD-1"
    params = fake_paypal.calls("GET", "/v1/vault/credit-cards")[0].url.params
    assert (params["page"], params["page_size"]) == ("2", "5")


def test_store_and_patch_card(mock_client):
    service = VaultService(mock_client)
    card = CreditCard(number="4417119669820331", type="visa", expire_month="11", expire_year="2030")
    service.store(card)
    service.patch("CARD-1", [CreditCardField(operation="replace", path="/billing_address/line1", value="52 N Main St")])
    service.delete("CARD-1")

    mock_client.post.assert_called_once_with("/v1/vault/credit-cards", card, into=CreditCard)
    assert mock_client.patch.call_args.args[0] == "/v1/vault/credit-cards/CARD-1"
    mock_client.delete.assert_called_once_with("/v1/vault/credit-cards/CARD-1")


# ── Identity ─────────────────────────────────────────────────────────

def test_user_info(paypal_client, fake_paypal):
    path = "/v1/identity/openidconnect/userinfo/"
    fake_paypal.reply("GET", path, json={"user_id": "https://www.paypal.com/webapps/auth/identity/user/U-1", "name": "Ada"})

    info = IdentityService(paypal_client).user_info()

    assert isinstance(info, UserInfo)
    assert info.id.endswith("U-1")
    assert fake_paypal.calls("GET", path)[0].url.params["schema"] == "openid"


def test_get_web_profile(mock_client):
    mock_client.get.return_value = WebProfile(id="XP-1", name="checkout")
    assert IdentityService(mock_client).get_web_profile("XP-1").id == "XP-1"


def test_get_web_profile_without_id(mock_client):
    mock_client.get.return_value = WebProfile(name="checkout")
    with pytest.raises(ProfileLookupError, match="XP-404"):
        IdentityService(mock_client).get_web_profile("XP-404")


def test_set_web_profile_requires_id(mock_client):
    with pytest.raises(ProfileLookupError):
        IdentityService(mock_client).set_web_profile(WebProfile(name="checkout"))
    mock_client.put.assert_not_called()


def test_set_web_profile(mock_client):
    profile = WebProfile(id="XP-1", name="checkout")
    IdentityService(mock_client).set_web_profile(profile)
    mock_client.put.assert_called_once_with("/v1/payment-experience/web-profiles/XP-1", profile)


def test_list_web_profiles(paypal_client, fake_paypal):
    fake_paypal.reply("GET", "/v1/payment-experience/web-profiles", json=[
        {"id": "XP-1", "name": "one"},
        {"id": "XP-2", "name": "two"},
    ])
    profiles = IdentityService(paypal_client).list_web_profiles()
    assert [p.name for p in profiles] == ["one", "two"]
