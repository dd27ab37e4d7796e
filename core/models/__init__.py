"""Core domain models."""

from core.models.invoice import (
    Invoice,
    InvoiceStatus,
    InvoiceFields,
    InvoiceForm,
    CreateInvoice,
    UpdateInvoice,
)
from core.models.form_state import (
    FormState,
    StateKind,
    StateUpdate,
    Redirect,
    ActionResult,
)

__all__ = [
    # Invoice
    "Invoice", "InvoiceStatus", "InvoiceFields", "InvoiceForm", "CreateInvoice", "UpdateInvoice",
    # Handler results
    "FormState", "StateKind", "StateUpdate", "Redirect", "ActionResult",
]
