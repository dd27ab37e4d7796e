"""
Handler for the delete-invoice button.

Deleting is switched off by default (InvoicingConfig.invoice_delete_enabled):
every call raises InvoiceDeleteDisabledError and no row is touched. With the
switch on, the invoice is deleted and the listing invalidated.
"""

import logging
from typing import Callable

from core.config import InvoicingConfig
from core.exceptions import InvoiceDeleteDisabledError, StorageError
from core.models import ActionResult, StateUpdate
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)


def handle_delete_invoice(
    invoice_service: InvoiceService,
    page_cache: PageCache,
    config: InvoicingConfig,
) -> Callable[[str], ActionResult]:
    """
    Factory that returns the delete-invoice handler.

    Returns:
        handler(invoice_id) -> StateUpdate

    The handler raises InvoiceDeleteDisabledError while deleting is off.
    """

    def handler(invoice_id: str) -> ActionResult:
        if not config.invoice_delete_enabled:
            logger.warning("Rejected delete of invoice %s: deleting is disabled", invoice_id)
            raise InvoiceDeleteDisabledError("Failed to delete invoice")

        try:
            invoice_service.delete(invoice_id)
        except StorageError:
            return StateUpdate.failed("Error while deleting invoice")

        page_cache.revalidate_path(config.invoices_path)
        return StateUpdate.done("Invoice Deleted!")

    return handler
