from __future__ import annotations

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path
from django.views.generic import RedirectView

from project.views import home


def healthcheck(_request):
    return JsonResponse({"status": "ok"})


urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", healthcheck, name="healthcheck"),
    path("", home, name="home"),

    path("", include("accounts.urls")),

    path("dashboard/", RedirectView.as_view(pattern_name="invoices:invoice_list"), name="dashboard"),
    path("dashboard/invoices/", include("invoices.urls")),
]
