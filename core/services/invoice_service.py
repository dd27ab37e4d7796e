"""
Invoice storage.

All SQL touching the invoices table lives here:

    invoices(id, customer_id, amount, status, date)

amount is in cents, date is a calendar date. Every database failure is
raised as StorageError so callers never see driver exceptions.
"""

import logging
from decimal import Decimal

import psycopg2

from clients.postgres_client import PostgresClient
from core.exceptions import StorageError
from core.models import Invoice, InvoiceStatus

logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice persistence."""

    def __init__(self, postgres: PostgresClient):
        self.postgres = postgres

    def _run(self, action: str, query: str, params: tuple) -> list[dict]:
        try:
            return self.postgres.execute(query, params)
        except psycopg2.Error as e:
            logger.error(f"Failed to {action} invoice: {e}")
            raise StorageError(f"Failed to {action} invoice") from e

    def create(
        self,
        customer_id: str,
        amount_cents: int | Decimal,
        status: InvoiceStatus,
        invoice_date: str,
    ) -> None:
        """
        Insert a new invoice.

        Args:
            customer_id: Customer the invoice bills
            amount_cents: Amount in cents, written as given
            status: Initial status
            invoice_date: ISO calendar date

        Raises:
            StorageError: If the insert fails
        """
        self._run(
            "create",
            """
            INSERT INTO invoices (customer_id, amount, status, date)
            VALUES (%s, %s, %s, %s)
            """,
            (customer_id, amount_cents, InvoiceStatus(status).value, invoice_date),
        )
        logger.info(f"Created invoice for customer {customer_id}")

    def update(
        self,
        invoice_id: str,
        customer_id: str,
        amount_cents: int,
        status: InvoiceStatus,
    ) -> None:
        """
        Overwrite the editable fields of an invoice. The date is never changed.

        Updating an id that matches no row is not an error.

        Raises:
            StorageError: If the update fails
        """
        self._run(
            "update",
            """
            UPDATE invoices
            SET customer_id = %s, amount = %s, status = %s
            WHERE id = %s
            """,
            (customer_id, amount_cents, InvoiceStatus(status).value, invoice_id),
        )
        logger.info(f"Updated invoice {invoice_id}")

    def delete(self, invoice_id: str) -> None:
        """
        Delete an invoice by ID.

        Raises:
            StorageError: If the delete fails
        """
        self._run("delete", "DELETE FROM invoices WHERE id = %s", (invoice_id,))
        logger.info(f"Deleted invoice {invoice_id}")

    def list_invoices(self, limit: int = 100) -> list[Invoice]:
        """Newest invoices first."""
        rows = self._run(
            "list",
            """
            SELECT id, customer_id, amount, status, date
            FROM invoices
            ORDER BY date DESC, id DESC
            LIMIT %s
            """,
            (limit,),
        )
        return [Invoice.model_validate(row) for row in rows]
