"""Typed exceptions for invoice operations."""


class InvoiceError(Exception):
    """Base class for invoice failures."""


class StorageError(InvoiceError):
    """
    The invoices table could not be read or written.

    Raised by InvoiceService with the driver error chained as __cause__.
    Form handlers turn it into a generic message for the user.
    """


class InvoiceDeleteDisabledError(InvoiceError):
    """Deleting invoices is switched off. Not recovered by the delete handler."""
