from django.urls import path

from .views import InvoiceListView, invoice_create, invoice_delete, invoice_update

app_name = "invoices"

urlpatterns = [
    path("", InvoiceListView.as_view(), name="invoice_list"),
    path("create/", invoice_create, name="invoice_create"),
    path("<str:pk>/edit/", invoice_update, name="invoice_update"),
    path("<str:pk>/delete/", invoice_delete, name="invoice_delete"),
]
