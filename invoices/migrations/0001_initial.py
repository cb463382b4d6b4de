import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import invoices.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("customers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Invoice",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=invoices.models.new_invoice_id,
                        editable=False,
                        max_length=36,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("amount", models.PositiveIntegerField(help_text="Amount in cents.")),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("paid", "Paid")],
                        default="pending",
                        max_length=10,
                    ),
                ),
                ("date", models.DateField(default=django.utils.timezone.localdate, editable=False)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="invoices",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "ordering": ["-date", "id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("amount__gt", 0)),
                        name="invoice_amount_positive",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["pending", "paid"])),
                        name="invoice_status_valid",
                    ),
                ],
            },
        ),
    ]
