from typing import Any, TypeVar

from cashramp.application.typed_request import send_request_typed
from cashramp.domain.interfaces import IRequestSender
from cashramp.domain.types import (
    Account,
    AddPaymentMethodInput,
    CancelHostedPaymentInput,
    CashrampModel,
    ConfirmTransactionInput,
    Country,
    CreateCustomerInput,
    Customer,
    HostedPayment,
    InitiateHostedPaymentInput,
    MarketRate,
    OnchainWithdrawal,
    PaymentMethod,
    PaymentMethodType,
    PaymentRequest,
    RampableAsset,
    RampLimits,
    WithdrawOnchainInput,
)
from cashramp.infrastructure import mutations, queries

T = TypeVar("T")


def _variables(payload: CashrampModel) -> dict[str, Any]:
    return payload.model_dump(mode="json", by_alias=True)


class CashrampService:
    """One method per Cashramp query or mutation, each returning a typed result."""

    def __init__(self, client: IRequestSender) -> None:
        self._client = client

    def _call(
        self, result_type: type[T], name: str, query: str, variables: Any = None
    ) -> T | None:
        return send_request_typed(self._client, result_type, name, query, variables)

    # --- queries ---

    def get_available_countries(self) -> list[Country] | None:
        return self._call(list[Country], "availableCountries", queries.AVAILABLE_COUNTRIES)

    def get_market_rate(self, country_code: str) -> MarketRate | None:
        return self._call(
            MarketRate, "marketRate", queries.MARKET_RATE, {"countryCode": country_code}
        )

    def get_payment_method_types(self, country_id: str) -> list[PaymentMethodType] | None:
        return self._call(
            list[PaymentMethodType],
            "p2pPaymentMethodTypes",
            queries.PAYMENT_METHOD_TYPES,
            {"country": country_id},
        )

    def get_rampable_assets(self) -> list[RampableAsset] | None:
        return self._call(list[RampableAsset], "rampableAssets", queries.RAMPABLE_ASSETS)

    def get_ramp_limits(self) -> RampLimits | None:
        return self._call(RampLimits, "rampLimits", queries.RAMP_LIMITS)

    def get_payment_request(self, reference: str) -> PaymentRequest | None:
        return self._call(
            PaymentRequest,
            "merchantPaymentRequest",
            queries.PAYMENT_REQUEST,
            {"reference": reference},
        )

    def get_account(self) -> Account | None:
        return self._call(Account, "account", queries.ACCOUNT)

    # --- mutations ---

    def confirm_transaction(self, payment: ConfirmTransactionInput) -> bool | None:
        return self._call(
            bool, "confirmTransaction", mutations.CONFIRM_TRANSACTION, _variables(payment)
        )

    def initiate_hosted_payment(self, payment: InitiateHostedPaymentInput) -> HostedPayment | None:
        return self._call(
            HostedPayment,
            "initiateHostedPayment",
            mutations.INITIATE_HOSTED_PAYMENT,
            _variables(payment),
        )

    def cancel_hosted_payment(self, payment: CancelHostedPaymentInput) -> bool | None:
        return self._call(
            bool, "cancelHostedPayment", mutations.CANCEL_HOSTED_PAYMENT, _variables(payment)
        )

    def create_customer(self, customer: CreateCustomerInput) -> Customer | None:
        return self._call(
            Customer, "createCustomer", mutations.CREATE_CUSTOMER, _variables(customer)
        )

    def add_payment_method(self, payment_method: AddPaymentMethodInput) -> PaymentMethod | None:
        return self._call(
            PaymentMethod,
            "addPaymentMethod",
            mutations.ADD_PAYMENT_METHOD,
            _variables(payment_method),
        )

    def withdraw_onchain(self, withdrawal: WithdrawOnchainInput) -> OnchainWithdrawal | None:
        return self._call(
            OnchainWithdrawal,
            "withdrawOnchain",
            mutations.WITHDRAW_ONCHAIN,
            _variables(withdrawal),
        )
