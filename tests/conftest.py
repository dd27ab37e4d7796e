"""Shared test fixtures for the invoices test suite."""

from unittest.mock import Mock

import pytest

from core.config import InvoicingConfig
from core.exceptions import StorageError
from core.models import Invoice, InvoiceStatus
from core.page_cache import PageCache


# =============================================================================
# TEST DATA CONSTANTS
# =============================================================================

TEST_CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"
TEST_CUSTOMER_B_ID = "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa"


# =============================================================================
# IN-MEMORY STORAGE
# =============================================================================


class InMemoryInvoiceService:
    """
    Dict-backed stand-in for InvoiceService.

    Records every write in `calls`. Set `fail_with` to make the next writes
    raise StorageError.
    """

    def __init__(self):
        self.rows: dict[str, dict] = {}
        self.calls: list[tuple] = []
        self.fail_with: str | None = None
        self._next_id = 1

    def _check(self) -> None:
        if self.fail_with is not None:
            raise StorageError(self.fail_with)

    def seed(self, customer_id: str, amount: int, status: str, date: str) -> str:
        invoice_id = str(self._next_id)
        self._next_id += 1
        self.rows[invoice_id] = {
            "id": invoice_id,
            "customer_id": customer_id,
            "amount": amount,
            "status": status,
            "date": date,
        }
        return invoice_id

    def create(self, customer_id, amount_cents, status, invoice_date) -> None:
        self.calls.append(("create", customer_id, amount_cents, status, invoice_date))
        self._check()
        self.seed(customer_id, amount_cents, InvoiceStatus(status).value, invoice_date)

    def update(self, invoice_id, customer_id, amount_cents, status) -> None:
        self.calls.append(("update", invoice_id, customer_id, amount_cents, status))
        self._check()
        row = self.rows.get(invoice_id)
        if row is not None:
            row.update(customer_id=customer_id, amount=amount_cents, status=InvoiceStatus(status).value)

    def delete(self, invoice_id) -> None:
        self.calls.append(("delete", invoice_id))
        self._check()
        self.rows.pop(invoice_id, None)

    def list_invoices(self, limit: int = 100):
        rows = sorted(self.rows.values(), key=lambda r: r["date"], reverse=True)
        return [Invoice.model_validate(row) for row in rows[:limit]]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def config() -> InvoicingConfig:
    return InvoicingConfig()


@pytest.fixture
def delete_enabled_config() -> InvoicingConfig:
    return InvoicingConfig(invoice_delete_enabled=True)


@pytest.fixture
def invoice_store() -> InMemoryInvoiceService:
    return InMemoryInvoiceService()


@pytest.fixture
def page_cache():
    """Mock PageCache; nothing is cached unless a test says so."""
    mock = Mock(spec=PageCache)
    mock.get_page.return_value = None
    return mock


@pytest.fixture
def valid_form(customer_id) -> dict:
    return {"customerId": customer_id, "amount": "125.50", "status": "pending"}


@pytest.fixture
def seeded_invoice(invoice_store) -> str:
    """An existing invoice of $10.00, pending, dated 2026-01-15."""
    return invoice_store.seed(TEST_CUSTOMER_ID, 1000, "pending", "2026-01-15")


@pytest.fixture
def customer_id() -> str:
    return TEST_CUSTOMER_ID


@pytest.fixture
def customer_b_id() -> str:
    return TEST_CUSTOMER_B_ID
