from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django import forms
from django.forms.utils import ErrorDict
from django.utils.choices import CallableChoiceIterator
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Div, Field, Layout

from customers.models import Customer
from .models import Invoice
from .queries import fetch_customers


CUSTOMER_REQUIRED = "Please select a customer."
AMOUNT_INVALID = "Please enter an amount greater than $0."
STATUS_REQUIRED = "Please select an invoice status."


def coerce_amount(raw) -> Decimal:
    """Raw form value -> Decimal. Anything that is not a finite number reads as 0."""
    s = str(raw if raw is not None else "").strip()
    if not s:
        return Decimal("0")
    try:
        amount = Decimal(s)
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return amount


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))


def customer_choices() -> list[tuple[str, str]]:
    return [("", "Select a customer")] + [(c.id, c.name) for c in fetch_customers()]


class InvoiceForm(forms.Form):
    """Shape of an invoice submission (create and edit).

    Every field is plain text on the way in; each `clean_*` coerces and
    range-checks its own value, so one bad field never hides another.
    """

    customer_id = forms.CharField(required=False, label="Choose customer")
    amount = forms.CharField(
        required=False,
        label="Choose an amount",
        widget=forms.NumberInput(attrs={"step": "0.01", "placeholder": "Enter USD amount"}),
    )
    status = forms.CharField(
        required=False,
        label="Set the invoice status",
        widget=forms.RadioSelect(choices=Invoice.Status.choices),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.fields["customer_id"].widget = forms.Select(
            # Options are only queried when the widget renders
            choices=CallableChoiceIterator(customer_choices),
            attrs={"class": "form-select"},
        )

        self.helper = FormHelper()
        self.helper.form_tag = False
        self.helper.layout = Layout(
            Field("customer_id"),
            Field("amount"),
            Div(Field("status"), css_class="rounded-md border p-3"),
        )

    def clean_customer_id(self):
        customer_id = (self.cleaned_data.get("customer_id") or "").strip()
        if not customer_id or not Customer.objects.filter(pk=customer_id).exists():
            raise forms.ValidationError(CUSTOMER_REQUIRED)
        return customer_id

    def clean_amount(self):
        amount = coerce_amount(self.cleaned_data.get("amount"))
        # Sub-cent amounts would round to a zero-cent invoice
        if amount <= 0 or to_cents(amount) <= 0:
            raise forms.ValidationError(AMOUNT_INVALID)
        return amount

    def clean_status(self):
        status = (self.cleaned_data.get("status") or "").strip()
        if status not in Invoice.Status.values:
            raise forms.ValidationError(STATUS_REQUIRED)
        return status

    def error_report(self) -> dict[str, list[str]]:
        """Field name -> messages, for every failing field."""
        return {name: list(errors) for name, errors in self.errors.items()}

    def attach_report(self, report: dict[str, list[str]]) -> InvoiceForm:
        """Show an existing error report on this bound form without cleaning it again."""
        self._errors = ErrorDict(
            {name: self.error_class(messages, renderer=self.renderer) for name, messages in report.items()},
            renderer=self.renderer,
        )
        self.cleaned_data = {}
        return self
