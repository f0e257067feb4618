"""Tests for CashrampService against a mocked GraphQL endpoint."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from cashramp.application.cashramp_service import CashrampService
from cashramp.domain.errors import RequestFailedError
from cashramp.domain.response import CashrampResponse
from cashramp.domain.types import (
    AddPaymentMethodInput,
    CancelHostedPaymentInput,
    ConfirmTransactionInput,
    CreateCustomerInput,
    InitiateHostedPaymentInput,
    PaymentMethodFieldValue,
    PaymentStatus,
    WithdrawOnchainInput,
)
from cashramp.infrastructure import mutations, queries
from cashramp.infrastructure.cashramp_client import CashrampClient, initialise_client
from cashramp.shared.settings import CashrampSettings


class _GraphQLServer:
    """Records requests and answers each with ``{"data": {name: result}}``."""

    def __init__(self, name: str, result: object, errors: list[str] | None = None) -> None:
        body: dict = {"data": {name: result}}
        if errors:
            body = {"data": None, "errors": [{"message": m} for m in errors]}
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=self.body)

    @property
    def raw_body(self) -> str:
        return self.requests[-1].content.decode()

    @property
    def variables(self) -> dict:
        return json.loads(self.requests[-1].content)["variables"]


def _service(server: _GraphQLServer) -> CashrampService:
    client = initialise_client(
        "test",
        "dummy-secret",
        http_client=httpx.Client(transport=httpx.MockTransport(server)),
        settings=CashrampSettings(_env_file=None),
    )
    return CashrampService(client)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def test_get_available_countries() -> None:
    server = _GraphQLServer(
        "availableCountries",
        [
            {"id": "1", "name": "Nigeria", "code": "NG"},
            {"id": "2", "name": "United States", "code": "US"},
        ],
    )

    countries = _service(server).get_available_countries()

    assert len(countries) == 2
    assert (countries[0].id, countries[0].name, countries[0].code) == ("1", "Nigeria", "NG")
    assert countries[1].code == "US"
    assert server.variables is None
    assert server.requests[0].headers["Authorization"] == "Bearer dummy-secret"


def test_get_market_rate_sends_country_code() -> None:
    server = _GraphQLServer("marketRate", {"depositRate": 1520.0, "withdrawalRate": 1515.0})

    rate = _service(server).get_market_rate("NG")

    assert '"countryCode":"NG"' in server.raw_body
    assert rate.deposit_rate == 1520.0
    assert rate.withdrawal_rate == 1515.0


def test_get_payment_method_types_sends_country() -> None:
    server = _GraphQLServer(
        "p2pPaymentMethodTypes",
        [
            {
                "id": "1",
                "identifier": "BANK_TRANSFER",
                "label": "Bank Transfer",
                "fields": [{"label": "Account number", "identifier": "account_number", "required": True}],
            },
            {"id": "2", "identifier": "MOBILE_MONEY", "label": "Mobile Money"},
        ],
    )

    types = _service(server).get_payment_method_types("1")

    assert '"country":"1"' in server.raw_body
    assert [t.identifier for t in types] == ["BANK_TRANSFER", "MOBILE_MONEY"]
    assert types[0].fields[0].required is True
    assert types[1].fields == []


def test_get_rampable_assets() -> None:
    server = _GraphQLServer(
        "rampableAssets",
        [
            {"name": "USDT", "symbol": "USDT", "networks": ["TRC20", "CELO"]},
            {"name": "USDC", "symbol": "USDC", "networks": ["TRC20"], "contractAddress": "0xa0b8"},
        ],
    )

    assets = _service(server).get_rampable_assets()

    assert [a.symbol for a in assets] == ["USDT", "USDC"]
    assert assets[0].networks == ["TRC20", "CELO"]
    assert assets[1].contract_address == "0xa0b8"


def test_get_ramp_limits_with_partial_fields() -> None:
    server = _GraphQLServer("rampLimits", {"minimumDepositUsd": 100.0, "maximumDepositUsd": 10000.0})

    limits = _service(server).get_ramp_limits()

    assert limits.minimum_deposit_usd == 100.0
    assert limits.maximum_deposit_usd == 10000.0
    assert limits.daily_limit_usd is None


def test_get_payment_request_sends_reference() -> None:
    server = _GraphQLServer(
        "merchantPaymentRequest",
        {
            "id": "1",
            "paymentType": "ONCHAIN",
            "hostedLink": "https://payment-link.com",
            "amount": 100.0,
            "currency": "USD",
            "reference": "test_ref_1",
            "status": "PENDING",
        },
    )

    request = _service(server).get_payment_request("test_ref_1")

    assert '"reference":"test_ref_1"' in server.raw_body
    assert request.id == "1"
    assert request.status == "PENDING"
    assert request.hosted_link == "https://payment-link.com"


def test_get_account() -> None:
    server = _GraphQLServer(
        "account", {"id": "1", "accountBalance": 100.0, "depositAddress": "deposit-address"}
    )

    account = _service(server).get_account()

    assert account.id == "1"
    assert account.account_balance == 100.0
    assert account.deposit_address == "deposit-address"


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


def test_confirm_transaction() -> None:
    server = _GraphQLServer("confirmTransaction", True)
    payment = ConfirmTransactionInput(payment_request="1", transaction_hash="tx_hash")

    confirmed = _service(server).confirm_transaction(payment)

    assert confirmed is True
    assert '"paymentRequest":"1"' in server.raw_body
    assert '"transactionHash":"tx_hash"' in server.raw_body


def test_initiate_hosted_payment() -> None:
    server = _GraphQLServer(
        "initiateHostedPayment",
        {"id": "1", "hostedLink": "https://payment-link.com", "status": "created"},
    )
    payment = InitiateHostedPaymentInput(
        payment_type="deposit",
        amount=100.0,
        currency="usd",
        country_code="NG",
        reference="ref123",
        redirect_url="https://redirect.com",
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
    )

    hosted = _service(server).initiate_hosted_payment(payment)

    assert hosted.id == "1"
    assert hosted.hosted_link == "https://payment-link.com"
    assert hosted.status == PaymentStatus.created
    assert server.variables == {
        "paymentType": "deposit",
        "amount": 100.0,
        "currency": "usd",
        "countryCode": "NG",
        "reference": "ref123",
        "redirectUrl": "https://redirect.com",
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
    }


def test_cancel_hosted_payment() -> None:
    server = _GraphQLServer("cancelHostedPayment", True)

    cancelled = _service(server).cancel_hosted_payment(CancelHostedPaymentInput(payment_request="1"))

    assert cancelled is True
    assert '"paymentRequest":"1"' in server.raw_body


def test_create_customer() -> None:
    server = _GraphQLServer(
        "createCustomer",
        {
            "id": "c1",
            "email": "ada@example.com",
            "firstName": "Ada",
            "lastName": "Obi",
            "country": {"id": "1", "name": "Nigeria", "code": "NG"},
        },
    )
    customer_input = CreateCustomerInput(
        email="ada@example.com", first_name="Ada", last_name="Obi", country_id="1"
    )

    customer = _service(server).create_customer(customer_input)

    assert server.variables == {
        "email": "ada@example.com",
        "firstName": "Ada",
        "lastName": "Obi",
        "country": "1",
    }
    assert customer.first_name == "Ada"
    assert customer.country.code == "NG"


def test_add_payment_method() -> None:
    server = _GraphQLServer(
        "addPaymentMethod",
        {
            "id": "pm1",
            "value": "0123456789",
            "fields": [{"identifier": "account_number", "value": "0123456789"}],
        },
    )
    payment_method_input = AddPaymentMethodInput(
        customer_id="c1",
        payment_method_type_id="t1",
        fields=[PaymentMethodFieldValue(identifier="account_number", value="0123456789")],
    )

    payment_method = _service(server).add_payment_method(payment_method_input)

    assert server.variables == {
        "customer": "c1",
        "paymentMethodType": "t1",
        "fields": [{"identifier": "account_number", "value": "0123456789"}],
    }
    assert payment_method.id == "pm1"
    assert payment_method.fields[0].identifier == "account_number"


def test_withdraw_onchain() -> None:
    server = _GraphQLServer("withdrawOnchain", {"id": "w1", "status": "PENDING"})

    withdrawal = _service(server).withdraw_onchain(
        WithdrawOnchainInput(address="0xdeadbeef", amount_usd="25.50")
    )

    assert '"address":"0xdeadbeef"' in server.raw_body
    assert '"amountUsd":"25.50"' in server.raw_body
    assert withdrawal.id == "w1"
    assert withdrawal.status == "PENDING"


# ---------------------------------------------------------------------------
# Failures and call routing
# ---------------------------------------------------------------------------


def test_service_raises_request_failed_on_graphql_error() -> None:
    server = _GraphQLServer("account", None, errors=["Your account has been restricted."])

    with pytest.raises(RequestFailedError, match="Your account has been restricted."):
        _service(server).get_account()


def test_service_uses_fixed_operation_names_and_documents() -> None:
    """Each wrapper passes its own operation name and document to the client."""
    client = MagicMock(spec=CashrampClient)
    client.send_request.return_value = CashrampResponse.ok(True)
    service = CashrampService(client)

    service.cancel_hosted_payment(CancelHostedPaymentInput(payment_request="9"))

    client.send_request.assert_called_once_with(
        "cancelHostedPayment", mutations.CANCEL_HOSTED_PAYMENT, {"paymentRequest": "9"}
    )


def test_service_query_without_variables_passes_none() -> None:
    client = MagicMock(spec=CashrampClient)
    client.send_request.return_value = CashrampResponse.ok([])
    service = CashrampService(client)

    assert service.get_rampable_assets() == []
    client.send_request.assert_called_once_with("rampableAssets", queries.RAMPABLE_ASSETS, None)
