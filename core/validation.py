"""
Form validation for invoice submissions.

validate_invoice_form is pure: it reads the submitted mapping and returns a
ValidationResult. It never raises for bad input and never touches storage.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import ValidationError

from core.models import InvoiceFields

# Form field names read from a submission, in the order errors are reported.
FORM_FIELDS = ("customerId", "amount", "status")

FieldErrors = dict[str, list[str]]


@dataclass
class ValidationResult:
    """Either normalized data (success) or field errors (failure)."""

    success: bool
    data: InvoiceFields | None = None
    errors: FieldErrors = field(default_factory=dict)


def flatten_field_errors(exc: ValidationError) -> FieldErrors:
    """
    Group pydantic errors by form field name.

    Messages keep the order pydantic reported them in. Errors without a
    field location are collected under "_form".
    """
    errors: FieldErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ("_form",)
        errors.setdefault(str(loc[0]), []).append(error["msg"])
    return errors


def validate_invoice_form(
    schema: type[InvoiceFields], form_data: Mapping[str, Any]
) -> ValidationResult:
    """
    Validate the invoice fields of a form submission against schema.

    Fields missing from the submission are validated as None, the same as
    an unselected input.
    """
    raw = {name: form_data.get(name) for name in FORM_FIELDS}
    try:
        data = schema.model_validate(raw)
    except ValidationError as e:
        return ValidationResult(success=False, errors=flatten_field_errors(e))
    return ValidationResult(success=True, data=data)
