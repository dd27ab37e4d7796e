"""Invoice domain models.

Amounts are stored in cents (integer column). Forms submit dollars; the
handlers convert at the boundary. $10.00 = 1000 cents.
"""

from datetime import date as date_type
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class InvoiceStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"


CUSTOMER_REQUIRED = "Please select a customer."
AMOUNT_NOT_POSITIVE = "amount must be greater than zero."
AMOUNT_NOT_A_NUMBER = "Expected number, received nan"
STATUS_REQUIRED = "Please select an invoice status."

# invoices.amount is a PostgreSQL integer column holding cents.
MAX_AMOUNT_CENTS = 2_147_483_647
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS).scaleb(-2)
AMOUNT_TOO_LARGE = f"amount must not exceed {MAX_AMOUNT}."


def coerce_amount(value: Any) -> Decimal:
    """
    Coerce a submitted amount to a number.

    Missing and blank values coerce to zero, so they fail the positive-amount
    rule rather than the number rule. Decimal keeps "49.995" exact.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal(0)
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise PydanticCustomError("amount_not_a_number", AMOUNT_NOT_A_NUMBER)
    if not amount.is_finite():
        raise PydanticCustomError("amount_not_a_number", AMOUNT_NOT_A_NUMBER)
    return amount


class InvoiceFields(BaseModel):
    """
    The user-editable invoice fields and their rules.

    Validates from form names (customerId) or attribute names (customer_id).
    """

    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(..., alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def _require_customer(cls, value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise PydanticCustomError("customer_required", CUSTOMER_REQUIRED)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        return coerce_amount(value)

    @field_validator("amount")
    @classmethod
    def _check_range(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)
        # Compared in dollars: multiplying a huge amount by 100 can overflow Decimal.
        if value > MAX_AMOUNT:
            raise PydanticCustomError("amount_too_large", AMOUNT_TOO_LARGE)
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _require_status(cls, value: Any) -> str:
        if not isinstance(value, str) or value not in {s.value for s in InvoiceStatus}:
            raise PydanticCustomError("status_required", STATUS_REQUIRED)
        return value


class InvoiceForm(InvoiceFields):
    """Full invoice form shape, including the fields the user never edits."""

    id: str
    date: str


class CreateInvoice(InvoiceFields):
    """Create form: InvoiceForm without id and date."""


class UpdateInvoice(InvoiceFields):
    """Edit form: InvoiceForm without id and date."""


class Invoice(BaseModel):
    """Invoice row as stored."""

    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: date_type

    model_config = {"from_attributes": True}

    @field_validator("id", "customer_id", mode="before")
    @classmethod
    def _stringify_keys(cls, value: Any) -> str:
        # uuid and serial keys both surface as strings
        return str(value)

    @property
    def amount_dollars(self) -> float:
        """Amount in dollars for display."""
        return self.amount / 100

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID
