from __future__ import annotations

from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST
from django.views.generic import TemplateView

from core.navigation import follow_result
from core.results import Failure

from .forms import InvoiceForm
from .queries import fetch_filtered_invoices, fetch_invoice_by_id, fetch_invoice_pages, listing_path
from .services import create_invoice, delete_invoice, update_invoice


def _page_number(raw) -> int:
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return max(page, 1)


class InvoiceListView(LoginRequiredMixin, TemplateView):
    template_name = "invoices/invoice_list.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)

        query = (self.request.GET.get("query") or "").strip()
        current_page = _page_number(self.request.GET.get("page"))
        total_pages = fetch_invoice_pages(query)

        ctx["query"] = query
        ctx["current_page"] = current_page
        ctx["total_pages"] = total_pages
        ctx["page_range"] = range(1, total_pages + 1)
        ctx["invoices"] = fetch_filtered_invoices(query, current_page)

        # for pagination links (preserve search)
        params = self.request.GET.copy()
        params.pop("page", None)
        ctx["qs"] = params.urlencode()
        return ctx


def _render_form(request: HttpRequest, form: InvoiceForm, invoice=None) -> HttpResponse:
    return render(request, "invoices/invoice_form.html", {"form": form, "invoice": invoice})


@login_required
def invoice_create(request: HttpRequest) -> HttpResponse:
    if request.method != "POST":
        return _render_form(request, InvoiceForm())

    result = create_invoice(request.POST)

    def on_failure(failure: Failure) -> HttpResponse:
        return _render_form(request, InvoiceForm(request.POST).attach_report(failure.errors))

    return follow_result(request, result, on_failure=on_failure)


@login_required
def invoice_update(request: HttpRequest, pk: str) -> HttpResponse:
    invoice = fetch_invoice_by_id(pk)
    if invoice is None:
        raise Http404("Invoice not found.")

    if request.method != "POST":
        form = InvoiceForm(
            initial={
                "customer_id": invoice.customer_id,
                "amount": invoice.amount,
                "status": invoice.status,
            }
        )
        return _render_form(request, form, invoice)

    result = update_invoice(invoice.id, request.POST)

    def on_failure(failure: Failure) -> HttpResponse:
        return _render_form(request, InvoiceForm(request.POST).attach_report(failure.errors), invoice)

    return follow_result(request, result, on_failure=on_failure)


@login_required
@require_POST
def invoice_delete(request: HttpRequest, pk: str) -> HttpResponse:
    result = delete_invoice(pk)
    return follow_result(
        request,
        result,
        on_failure=lambda failure: redirect(listing_path()),
        fallback=listing_path(),
    )
