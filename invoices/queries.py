# invoices/queries.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from django.db.models import CharField, Q
from django.db.models.functions import Cast
from django.urls import reverse

from core.cache import cached_for_path
from customers.models import Customer

from .models import Invoice

ITEMS_PER_PAGE = 6


@dataclass(frozen=True)
class InvoiceRow:
    id: str
    amount: int  # cents
    date: date
    status: str
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class InvoiceFormData:
    id: str
    customer_id: str
    amount: Decimal  # dollars
    status: str


def listing_path() -> str:
    """Logical path of the invoice listing; the cache is keyed by it."""
    return reverse("invoices:invoice_list")


def _filtered_invoices(query: str):
    qs = Invoice.objects.select_related("customer").annotate(
        amount_text=Cast("amount", CharField()),
        date_text=Cast("date", CharField()),
    )
    query = (query or "").strip()
    if query:
        qs = qs.filter(
            Q(customer__name__icontains=query)
            | Q(customer__email__icontains=query)
            | Q(amount_text__icontains=query)
            | Q(date_text__icontains=query)
            | Q(status__icontains=query)
        )
    return qs.order_by("-date", "id")


def fetch_filtered_invoices(query: str, current_page: int) -> list[InvoiceRow]:
    """One page of invoices matching `query`, newest first."""
    current_page = max(int(current_page or 1), 1)
    offset = (current_page - 1) * ITEMS_PER_PAGE

    def compute() -> list[InvoiceRow]:
        rows = _filtered_invoices(query).values(
            "id", "amount", "date", "status", "customer__name", "customer__email", "customer__image_url",
        )[offset:offset + ITEMS_PER_PAGE]
        return [
            InvoiceRow(
                id=r["id"],
                amount=r["amount"],
                date=r["date"],
                status=r["status"],
                name=r["customer__name"],
                email=r["customer__email"],
                image_url=r["customer__image_url"],
            )
            for r in rows
        ]

    return cached_for_path(listing_path(), f"rows|{current_page}|{query}", compute)


def fetch_invoice_pages(query: str) -> int:
    """Number of listing pages for `query` (0 when nothing matches)."""

    def compute() -> int:
        return math.ceil(_filtered_invoices(query).count() / ITEMS_PER_PAGE)

    return cached_for_path(listing_path(), f"pages|{query}", compute)


def fetch_invoice_by_id(invoice_id: str) -> InvoiceFormData | None:
    invoice = Invoice.objects.filter(pk=invoice_id).only("id", "customer_id", "amount", "status").first()
    if invoice is None:
        return None
    return InvoiceFormData(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=invoice.amount_dollars,
        status=invoice.status,
    )


def fetch_customers() -> list[Customer]:
    return list(Customer.objects.order_by("name").only("id", "name"))
