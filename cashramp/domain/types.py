"""Records exchanged with the Cashramp GraphQL API.

Python attributes are snake_case; the wire names are the camelCase aliases
generated by ``CashrampModel``. Inputs are dumped ``by_alias`` into GraphQL
variables, results are validated from the camelCase ``data`` payload.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CashrampModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaymentStatus(StrEnum):
    created = "created"
    picked_up = "picked_up"
    completed = "completed"
    cancelled = "cancelled"


# ---------------------------------------------------------------------------
# Query results
# ---------------------------------------------------------------------------


class Country(CashrampModel):
    id: str
    name: str
    code: str  # ISO 3166 alpha-2, e.g. "NG"


class MarketRate(CashrampModel):
    deposit_rate: float
    withdrawal_rate: float


class PaymentMethodField(CashrampModel):
    label: str | None = None
    identifier: str
    required: bool = False


class PaymentMethodType(CashrampModel):
    id: str
    identifier: str  # e.g. "BANK_TRANSFER"
    label: str
    fields: list[PaymentMethodField] = Field(default_factory=list)


class RampableAsset(CashrampModel):
    name: str
    symbol: str
    networks: list[str] = Field(default_factory=list)
    contract_address: str | None = None


class RampLimits(CashrampModel):
    minimum_deposit_usd: float | None = None
    maximum_deposit_usd: float | None = None
    minimum_withdrawal_usd: float | None = None
    maximum_withdrawal_usd: float | None = None
    daily_limit_usd: float | None = None


class PaymentRequest(CashrampModel):
    id: str
    payment_type: str | None = None
    hosted_link: str | None = None
    amount: float | None = None
    currency: str | None = None
    reference: str | None = None
    status: str | None = None


class Account(CashrampModel):
    id: str
    account_balance: float | None = None
    deposit_address: str | None = None


# ---------------------------------------------------------------------------
# Mutation inputs
# ---------------------------------------------------------------------------


class ConfirmTransactionInput(CashrampModel):
    payment_request: str
    transaction_hash: str


class InitiateHostedPaymentInput(CashrampModel):
    payment_type: str
    amount: float
    currency: str | None = None
    country_code: str
    reference: str
    redirect_url: str | None = None
    first_name: str
    last_name: str
    email: str


class CancelHostedPaymentInput(CashrampModel):
    payment_request: str


class CreateCustomerInput(CashrampModel):
    email: str
    first_name: str
    last_name: str
    country_id: str = Field(alias="country")


class PaymentMethodFieldValue(CashrampModel):
    identifier: str
    value: str


class AddPaymentMethodInput(CashrampModel):
    customer_id: str = Field(alias="customer")
    payment_method_type_id: str = Field(alias="paymentMethodType")
    fields: list[PaymentMethodFieldValue] = Field(default_factory=list)


class WithdrawOnchainInput(CashrampModel):
    address: str
    amount_usd: str  # decimal string, sent as-is


# ---------------------------------------------------------------------------
# Mutation results
# ---------------------------------------------------------------------------


class HostedPayment(CashrampModel):
    id: str
    hosted_link: str
    status: PaymentStatus | str | None = None


class Customer(CashrampModel):
    id: str
    email: str
    first_name: str
    last_name: str
    country: Country | None = None


class PaymentMethod(CashrampModel):
    id: str
    value: str | None = None
    fields: list[PaymentMethodFieldValue] = Field(default_factory=list)


class OnchainWithdrawal(CashrampModel):
    id: str
    status: str | None = None
