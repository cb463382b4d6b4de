from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from django.db import DatabaseError, IntegrityError, InterfaceError, OperationalError
from django.utils import timezone

from core.cache import invalidate_path
from core.results import Failure, MutationResult, PersistenceErrorKind, Success

from .forms import InvoiceForm, to_cents
from .models import Invoice
from .queries import listing_path

logger = logging.getLogger(__name__)


def classify_db_error(exc: DatabaseError) -> PersistenceErrorKind:
    if isinstance(exc, IntegrityError):
        return PersistenceErrorKind.CONSTRAINT
    if isinstance(exc, (OperationalError, InterfaceError)):
        return PersistenceErrorKind.CONNECTIVITY
    return PersistenceErrorKind.UNKNOWN


def _storage_failure(exc: DatabaseError, *, action: str) -> Failure:
    """Log the real cause; the user only ever sees the generic message."""
    kind = classify_db_error(exc)
    logger.error("Failed to %s invoice (%s fault)", action.lower(), kind.value, exc_info=exc)
    return Failure(message=f"Database Error: Failed to {action} Invoice.", error_kind=kind)


def _validate(data: Mapping[str, Any], *, action: str) -> tuple[dict | None, Failure | None]:
    # Queries customers: call inside the caller's DatabaseError guard
    form = InvoiceForm(data)
    if not form.is_valid():
        return None, Failure(
            errors=form.error_report(),
            message=f"Missing Fields. Failed to {action} Invoice.",
        )
    cleaned = form.cleaned_data
    return {
        "customer_id": cleaned["customer_id"],
        "amount": to_cents(cleaned["amount"]),
        "status": cleaned["status"],
    }, None


def create_invoice(data: Mapping[str, Any]) -> MutationResult:
    """Validate a submission and insert one invoice dated today."""
    try:
        fields, failure = _validate(data, action="Create")
        if failure:
            return failure
        invoice = Invoice.objects.create(date=timezone.localdate(), **fields)
    except DatabaseError as exc:
        return _storage_failure(exc, action="Create")

    logger.info("Created invoice %s", invoice.pk)
    invalidate_path(listing_path())
    return Success(redirect_to=listing_path(), message="Created Invoice.")


def update_invoice(invoice_id: str, data: Mapping[str, Any]) -> MutationResult:
    """Overwrite customer, amount and status. The id and date never change."""
    try:
        fields, failure = _validate(data, action="Update")
        if failure:
            return failure
        updated = Invoice.objects.filter(pk=invoice_id).update(**fields)
    except DatabaseError as exc:
        return _storage_failure(exc, action="Update")

    logger.info("Updated invoice %s (%d row)", invoice_id, updated)
    invalidate_path(listing_path())
    return Success(redirect_to=listing_path(), message="Updated Invoice.")


def delete_invoice(invoice_id: str) -> MutationResult:
    """Remove one invoice. A missing id is not an error at this layer."""
    try:
        deleted, _ = Invoice.objects.filter(pk=invoice_id).delete()
    except DatabaseError as exc:
        return _storage_failure(exc, action="Delete")

    logger.info("Deleted invoice %s (%d row)", invoice_id, deleted)
    invalidate_path(listing_path())
    return Success(message="Deleted Invoice.")
