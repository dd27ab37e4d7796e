"""GET invoices listing, served from the page cache when fresh."""

import logging

from fastapi import APIRouter

from api.base import success_response
from core.config import InvoicingConfig
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)


def create_data_router(
    invoice_service: InvoiceService,
    page_cache: PageCache,
    config: InvoicingConfig,
) -> APIRouter:
    router = APIRouter(tags=["invoices"])

    path = config.invoices_path

    @router.get(path)
    async def list_invoices():
        rows = page_cache.get_page(path)
        if rows is None:
            invoices = invoice_service.list_invoices(config.listing_limit)
            rows = [invoice.model_dump(mode="json") for invoice in invoices]
            page_cache.set_page(path, rows)
            logger.debug("Rendered %s with %d invoices", path, len(rows))
        return success_response(rows).model_dump(mode="json")

    return router
