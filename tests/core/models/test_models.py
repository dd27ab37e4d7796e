"""Tests for invoice and form-state models."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.models import (
    FormState,
    Invoice,
    InvoiceForm,
    InvoiceStatus,
    Redirect,
    StateKind,
    StateUpdate,
)


class TestInvoiceForm:
    """The base form declares id and date on top of the editable fields."""

    def test_requires_id_and_date(self):
        with pytest.raises(ValidationError) as exc_info:
            InvoiceForm.model_validate({"customerId": "c1", "amount": "5", "status": "paid"})

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"id", "date"}

    def test_accepts_attribute_names(self):
        form = InvoiceForm(id="1", customer_id="c1", amount="5", status="paid", date="2026-03-01")

        assert form.customer_id == "c1"
        assert form.amount == Decimal("5")


class TestInvoice:

    def test_from_row(self):
        invoice = Invoice.model_validate({
            "id": 12,
            "customer_id": "c1",
            "amount": 15795,
            "status": "pending",
            "date": date(2026, 2, 3),
        })

        assert invoice.id == "12"
        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.amount_dollars == 157.95
        assert invoice.is_paid is False

    def test_status_limited_to_pending_and_paid(self):
        with pytest.raises(ValidationError):
            Invoice.model_validate({
                "id": "1", "customer_id": "c1", "amount": 100,
                "status": "void", "date": "2026-02-03",
            })

    def test_json_dump(self):
        invoice = Invoice(id="1", customer_id="c1", amount=100, status="paid", date="2026-02-03")

        assert invoice.model_dump(mode="json") == {
            "id": "1",
            "customer_id": "c1",
            "amount": 100,
            "status": "paid",
            "date": "2026-02-03",
        }


class TestHandlerResults:

    def test_invalid_carries_errors_and_message(self):
        update = StateUpdate.invalid({"amount": ["bad"]}, "Missing Fields.")

        assert update.kind == StateKind.INVALID
        assert update.state == FormState(errors={"amount": ["bad"]}, message="Missing Fields.")

    def test_failed_has_message_only(self):
        update = StateUpdate.failed("Error while creating invoice")

        assert update.kind == StateKind.FAILED
        assert update.state.errors is None
        assert update.state.message == "Error while creating invoice"

    def test_redirect_is_immutable(self):
        redirect = Redirect("/dashboard/invoices")

        with pytest.raises(AttributeError):
            redirect.path = "/elsewhere"
