from __future__ import annotations

import uuid

from django.db import models


def new_customer_id() -> str:
    return str(uuid.uuid4())


class Customer(models.Model):
    """Someone invoices are billed to."""

    id         = models.CharField(primary_key=True, max_length=36, default=new_customer_id, editable=False)
    name       = models.CharField(max_length=255)
    email      = models.EmailField()
    image_url  = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
