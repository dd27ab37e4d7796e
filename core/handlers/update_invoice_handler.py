"""
Handler for the edit-invoice form.

Same validation as create. The amount is rounded to whole cents and the
invoice date is left untouched.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Mapping

from core.config import InvoicingConfig
from core.exceptions import StorageError
from core.models import ActionResult, FormState, Redirect, StateUpdate, UpdateInvoice
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService
from core.validation import validate_invoice_form

logger = logging.getLogger(__name__)


def dollars_to_cents(amount: Decimal) -> int:
    """Whole cents, halves rounded up: 49.995 -> 5000."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def handle_update_invoice(
    invoice_service: InvoiceService,
    page_cache: PageCache,
    config: InvoicingConfig,
) -> Callable[[str, FormState | None, Mapping[str, Any]], ActionResult]:
    """
    Factory that returns the edit-invoice handler.

    Returns:
        handler(invoice_id, prev_state, form_data) -> Redirect | StateUpdate
    """

    def handler(
        invoice_id: str, prev_state: FormState | None, form_data: Mapping[str, Any]
    ) -> ActionResult:
        validated = validate_invoice_form(UpdateInvoice, form_data)
        if not validated.success:
            return StateUpdate.invalid(
                validated.errors, "Missing Fields. Failed to Edit Invoice."
            )

        data = validated.data
        amount_cents = dollars_to_cents(data.amount)
        logger.debug("Invoice %s amount %s -> %d cents", invoice_id, data.amount, amount_cents)

        try:
            invoice_service.update(invoice_id, data.customer_id, amount_cents, data.status)
        except StorageError:
            return StateUpdate.failed("Error while updating edited invoice")

        page_cache.revalidate_path(config.invoices_path)
        return Redirect(config.invoices_path)

    return handler
