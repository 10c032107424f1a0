import pytest
import requests

from skinvend_sdk.deposits import Deposits
from skinvend_sdk.errors import ConfigurationError, NoResponseError, ServerError, SkinVendSDKError
from skinvend_sdk.http import HttpClient
from skinvend_sdk.signers import compute_signature
from skinvend_sdk.types import OfferStatus, OfferStep

from helpers import SECRET, RecordingRequestor, make_response

ITEMS = [{"id": 17, "name": "AK-47 | Redline"}]


def make_deposits(config, signer, *responses):
    requestor = RecordingRequestor(*responses)
    return Deposits(config, HttpClient(config, signer=signer, requestor=requestor)), requestor


def test_create_offer_signs_each_step_separately(config, signer):
    trade_payload = {"status": "created", "trade_id": "T7", "bot_name": "bot-1"}
    deposits, requestor = make_deposits(
        config,
        signer,
        make_response(200, {"trade_id": "T7"}),
        make_response(200, trade_payload),
    )

    result = deposits.create_offer(
        "D1", steam_id="765", app_id=570, trade_url="https://trade.example", item_array=ITEMS
    )

    assert result.completed
    assert result.status is OfferStatus.COMPLETED
    assert result.trade_id == "T7"
    assert result.deposit == {"trade_id": "T7"}
    assert result.trade == trade_payload
    assert result.failed_step is None

    assert requestor.urls() == [
        "https://skinvend.example/v1/api/deposit",
        "https://skinvend.example/v1/api/deposit",
    ]
    assert requestor.body(0) == {"deposit_id": "D1", "steam_id": "765"}
    assert requestor.body(1) == {
        "app_id": 570,
        "trade_id": "T7",
        "trade_url": "https://trade.example",
        "item_array": ITEMS,
    }

    first, second = requestor.headers(0), requestor.headers(1)
    assert first["X-Timestamp"] == "1700000000000"
    assert second["X-Timestamp"] == "1700000000001"
    assert first["X-Signature"] == compute_signature(SECRET, "D1765", 1_700_000_000_000)
    # item_array is sent but not signed.
    assert second["X-Signature"] == compute_signature(
        SECRET, "570T7https://trade.example", 1_700_000_000_001
    )


def test_create_offer_uses_default_game(config, signer):
    deposits, requestor = make_deposits(
        config, signer, make_response(200, {"trade_id": "T7"}), make_response(200, {})
    )

    deposits.create_offer("D1")

    assert requestor.body(1)["app_id"] == 730
    assert requestor.body(1)["item_array"] == []


def test_deposit_step_failure_reports_step(config, signer):
    deposits, requestor = make_deposits(config, signer, make_response(500, {"error": "down"}))

    with pytest.raises(ServerError) as excinfo:
        deposits.create_offer("D1")

    details = excinfo.value.details
    assert details["step"] == "deposit"
    assert details["offer"].status is OfferStatus.DEPOSIT_FAILED
    assert details["offer"].failed_step is OfferStep.DEPOSIT
    assert details["status"] == 500
    assert len(requestor.calls) == 1


def test_trade_step_failure_keeps_deposit_result(config, signer):
    deposits, requestor = make_deposits(
        config,
        signer,
        make_response(200, {"trade_id": "T7"}),
        requests.exceptions.ReadTimeout("slow"),
    )

    with pytest.raises(NoResponseError) as excinfo:
        deposits.create_offer("D1", item_array=ITEMS)

    offer = excinfo.value.details["offer"]
    assert excinfo.value.details["step"] == "trade"
    assert offer.status is OfferStatus.TRADE_FAILED
    assert offer.failed_step is OfferStep.TRADE
    assert offer.deposit_succeeded
    assert offer.trade_id == "T7"
    assert offer.trade is None
    assert len(requestor.calls) == 2


def test_deposit_response_without_trade_id_is_rejected(config, signer):
    deposits, requestor = make_deposits(config, signer, make_response(200, {"url": "u"}))

    with pytest.raises(SkinVendSDKError) as excinfo:
        deposits.create_offer("D1")

    assert excinfo.value.code == "INVALID_RESPONSE"
    assert excinfo.value.details["step"] == "deposit"
    assert len(requestor.calls) == 1


def test_workflow_can_be_driven_step_by_step(config, signer):
    deposits, requestor = make_deposits(
        config, signer, make_response(200, {"trade_id": 99}), make_response(200, {"status": "ok"})
    )
    workflow = deposits.offer_workflow("D1")

    with pytest.raises(SkinVendSDKError) as excinfo:
        workflow.send_trade()
    assert excinfo.value.code == "OFFER_STEP_ORDER"
    assert requestor.calls == []

    assert workflow.open_deposit().status is OfferStatus.TRADE_PENDING
    assert workflow.result.trade_id == 99

    with pytest.raises(SkinVendSDKError):
        workflow.open_deposit()

    assert workflow.send_trade().completed


def test_numeric_trade_id_is_forwarded_unchanged(config, signer):
    deposits, requestor = make_deposits(
        config, signer, make_response(200, {"trade_id": 99}), make_response(200, {"status": "ok"})
    )

    result = deposits.create_offer("D1", app_id=730)

    assert result.trade_id == 99
    assert requestor.body(1)["trade_id"] == 99
    assert requestor.headers(1)["X-Signature"] == compute_signature(
        SECRET, "73099", 1_700_000_000_001
    )


def test_create_offer_requires_deposit_id(config, signer):
    deposits, requestor = make_deposits(config, signer)

    with pytest.raises(ConfigurationError):
        deposits.create_offer(None)
    assert requestor.calls == []
