"""POST form actions for invoices: create, edit, delete."""

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse, RedirectResponse, Response

from core.config import InvoicingConfig
from core.handlers.create_invoice_handler import handle_create_invoice
from core.handlers.delete_invoice_handler import handle_delete_invoice
from core.handlers.update_invoice_handler import handle_update_invoice
from core.models import ActionResult, FormState, Redirect, StateKind
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService

STATUS_CODES = {
    StateKind.INVALID: 422,
    StateKind.FAILED: 503,
    StateKind.DONE: 200,
}


def to_response(result: ActionResult) -> Response:
    """Perform the navigation for a Redirect, or render the returned form state."""
    if isinstance(result, Redirect):
        # 303 so the browser follows up with a GET
        return RedirectResponse(result.path, status_code=303)
    return JSONResponse(
        status_code=STATUS_CODES[result.kind],
        content=result.state.model_dump(mode="json"),
    )


def create_invoice_actions_router(
    invoice_service: InvoiceService,
    page_cache: PageCache,
    config: InvoicingConfig,
) -> APIRouter:
    router = APIRouter(tags=["invoices"])

    create_invoice = handle_create_invoice(invoice_service, page_cache, config)
    update_invoice = handle_update_invoice(invoice_service, page_cache, config)
    delete_invoice = handle_delete_invoice(invoice_service, page_cache, config)

    base = config.invoices_path

    @router.post(f"{base}/create")
    async def create(request: Request):
        form = await request.form()
        return to_response(create_invoice(FormState(), form))

    @router.post(f"{base}/{{invoice_id}}/edit")
    async def edit(invoice_id: str, request: Request):
        form = await request.form()
        return to_response(update_invoice(invoice_id, FormState(), form))

    @router.post(f"{base}/{{invoice_id}}/delete")
    async def delete(invoice_id: str):
        return to_response(delete_invoice(invoice_id))

    return router
