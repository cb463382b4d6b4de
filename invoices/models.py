from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import models
from django.db.models import Q
from django.utils import timezone

from customers.models import Customer


def new_invoice_id() -> str:
    return str(uuid.uuid4())


class Invoice(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        PAID = "paid", "Paid"

    id       = models.CharField(primary_key=True, max_length=36, default=new_invoice_id, editable=False)
    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name="invoices")
    amount   = models.PositiveIntegerField(help_text="Amount in cents.")
    status   = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    date     = models.DateField(default=timezone.localdate, editable=False)  # set once, at insert

    class Meta:
        ordering = ["-date", "id"]
        constraints = [
            models.CheckConstraint(condition=Q(amount__gt=0), name="invoice_amount_positive"),
            models.CheckConstraint(condition=Q(status__in=["pending", "paid"]), name="invoice_status_valid"),
        ]

    def __str__(self) -> str:
        return f"Invoice {self.id} ({self.customer_id})"

    @property
    def amount_dollars(self) -> Decimal:
        return Decimal(self.amount) / 100
