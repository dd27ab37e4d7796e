"""
Handler for the create-invoice form.

Validates the submission, inserts the invoice dated today (UTC), then
invalidates the invoices listing and redirects to it.
"""

from typing import Any, Callable, Mapping

from core.config import InvoicingConfig
from core.exceptions import StorageError
from core.models import ActionResult, CreateInvoice, FormState, Redirect, StateUpdate
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService
from core.validation import validate_invoice_form
from utils.timezone import today_iso


def handle_create_invoice(
    invoice_service: InvoiceService,
    page_cache: PageCache,
    config: InvoicingConfig,
) -> Callable[[FormState | None, Mapping[str, Any]], ActionResult]:
    """
    Factory that returns the create-invoice handler.

    Returns:
        handler(prev_state, form_data) -> Redirect | StateUpdate
    """

    def handler(prev_state: FormState | None, form_data: Mapping[str, Any]) -> ActionResult:
        validated = validate_invoice_form(CreateInvoice, form_data)
        if not validated.success:
            return StateUpdate.invalid(
                validated.errors, "Missing Fields. Failed to Create Invoice."
            )

        data = validated.data
        # Not rounded: "49.995" is stored as 4999.5 cents. The edit form rounds.
        amount_cents = data.amount * 100

        try:
            invoice_service.create(data.customer_id, amount_cents, data.status, today_iso())
        except StorageError:
            return StateUpdate.failed("Error while creating invoice")

        page_cache.revalidate_path(config.invoices_path)
        return Redirect(config.invoices_path)

    return handler
