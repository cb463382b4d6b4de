from __future__ import annotations

from datetime import date, timedelta

import pytest

from core.results import Failure, PersistenceErrorKind
from invoices import views as invoice_views
from invoices.forms import AMOUNT_INVALID, CUSTOMER_REQUIRED, STATUS_REQUIRED
from invoices.models import Invoice

from .conftest import PASSWORD

pytestmark = pytest.mark.django_db

LISTING = "/dashboard/invoices/"


def _seed(customer, count, start=date(2023, 1, 1)):
    return [
        Invoice.objects.create(customer=customer, amount=1000 + i, status="pending", date=start + timedelta(days=i))
        for i in range(count)
    ]


def test_root_sends_anonymous_users_to_login(client):
    response = client.get("/")

    assert response.status_code == 302
    assert response["Location"] == "/login/"


def test_dashboard_requires_login(client):
    response = client.get(LISTING)

    assert response.status_code == 302
    assert response["Location"] == "/login/?next=/dashboard/invoices/"


def test_signed_in_user_skips_login_page(logged_in_client):
    response = logged_in_client.get("/login/")

    assert response.status_code == 302
    assert response["Location"] == "/dashboard/"


def test_dashboard_root_redirects_to_listing(logged_in_client):
    response = logged_in_client.get("/dashboard/")

    assert response.status_code == 302
    assert response["Location"] == LISTING


def test_login_form_signs_in(client, user):
    response = client.post("/login/", {"email": "user@nextmail.com", "password": PASSWORD})

    assert response.status_code == 302
    assert response["Location"] == "/dashboard/"
    assert client.get(LISTING).status_code == 200


def test_login_form_follows_safe_next(client, user):
    response = client.post(
        "/login/",
        {"email": "user@nextmail.com", "password": PASSWORD, "next": "/dashboard/invoices/create/"},
    )

    assert response["Location"] == "/dashboard/invoices/create/"


def test_login_form_ignores_offsite_next(client, user):
    response = client.post(
        "/login/",
        {"email": "user@nextmail.com", "password": PASSWORD, "next": "https://evil.example.com/"},
    )

    assert response["Location"] == "/dashboard/"


def test_login_form_shows_generic_error(client, user):
    response = client.post("/login/", {"email": "user@nextmail.com", "password": "nope-nope"})

    assert response.status_code == 200
    assert response.context["error"] == "Invalid credentials."
    assert b"Invalid credentials." in response.content


def test_logout_ends_session(logged_in_client):
    response = logged_in_client.post("/logout/")

    assert response.status_code == 302
    assert logged_in_client.get(LISTING).status_code == 302


def test_listing_paginates_six_per_page(logged_in_client, customer):
    invoices = _seed(customer, 7)

    first = logged_in_client.get(LISTING)
    second = logged_in_client.get(LISTING, {"page": 2})

    assert first.context["total_pages"] == 2
    assert [row.id for row in first.context["invoices"]] == [inv.id for inv in reversed(invoices)][:6]
    assert [row.id for row in second.context["invoices"]] == [invoices[0].id]


def test_listing_bad_page_falls_back_to_first(logged_in_client, customer):
    _seed(customer, 2)

    response = logged_in_client.get(LISTING, {"page": "abc"})

    assert response.context["current_page"] == 1
    assert len(response.context["invoices"]) == 2


def test_listing_search_matches_customer_status_and_amount(logged_in_client, customer, other_customer):
    Invoice.objects.create(customer=customer, amount=15795, status="pending")
    Invoice.objects.create(customer=other_customer, amount=20348, status="paid")

    by_name = logged_in_client.get(LISTING, {"query": "lee"})
    by_email = logged_in_client.get(LISTING, {"query": "OLIVEIRA.COM"})
    by_status = logged_in_client.get(LISTING, {"query": "paid"})
    by_amount = logged_in_client.get(LISTING, {"query": "157"})

    assert [r.name for r in by_name.context["invoices"]] == ["Lee Robinson"]
    assert [r.name for r in by_email.context["invoices"]] == ["Delba de Oliveira"]
    assert [r.status for r in by_status.context["invoices"]] == ["paid"]
    assert [r.amount for r in by_amount.context["invoices"]] == [15795]
    assert by_name.context["qs"] == "query=lee"


def test_listing_renders_money_and_dates(logged_in_client, customer):
    Invoice.objects.create(customer=customer, amount=4500, status="paid", date=date(2022, 12, 6))

    response = logged_in_client.get(LISTING)

    assert b"$45.00" in response.content
    assert b"Dec 6, 2022" in response.content


def test_create_page_renders(logged_in_client, customer):
    response = logged_in_client.get("/dashboard/invoices/create/")

    assert response.status_code == 200
    assert customer.name.encode() in response.content


def test_create_post_redirects_to_listing(logged_in_client, customer):
    response = logged_in_client.post(
        "/dashboard/invoices/create/",
        {"customer_id": customer.id, "amount": "45", "status": "pending"},
    )

    assert response.status_code == 302
    assert response["Location"] == LISTING
    assert Invoice.objects.get().amount == 4500


def test_create_post_with_errors_rerenders_form(logged_in_client, customer):
    response = logged_in_client.post("/dashboard/invoices/create/", {"amount": "abc"})

    assert response.status_code == 200
    assert response.context["form"].errors == {
        "customer_id": [CUSTOMER_REQUIRED],
        "amount": [AMOUNT_INVALID],
        "status": [STATUS_REQUIRED],
    }
    assert "Missing Fields. Failed to Create Invoice." in [str(m) for m in response.context["messages"]]
    assert not Invoice.objects.exists()


def test_failed_create_renders_the_service_report(logged_in_client, customer, monkeypatch):
    report = {"status": ["Please select an invoice status."]}
    monkeypatch.setattr(
        invoice_views,
        "create_invoice",
        lambda data: Failure(errors=report, message="Missing Fields. Failed to Create Invoice."),
    )

    response = logged_in_client.post(
        "/dashboard/invoices/create/",
        {"customer_id": customer.id, "amount": "abc", "status": "paid"},
    )

    assert response.status_code == 200
    assert response.context["form"].errors == report


def test_storage_failure_rerenders_form_without_field_errors(logged_in_client, customer, monkeypatch):
    monkeypatch.setattr(
        invoice_views,
        "create_invoice",
        lambda data: Failure(
            message="Database Error: Failed to Create Invoice.",
            error_kind=PersistenceErrorKind.CONNECTIVITY,
        ),
    )

    response = logged_in_client.post(
        "/dashboard/invoices/create/",
        {"customer_id": customer.id, "amount": "45", "status": "paid"},
    )

    assert response.status_code == 200
    assert response.context["form"].errors == {}
    assert "Database Error: Failed to Create Invoice." in [str(m) for m in response.context["messages"]]


def test_edit_page_prefills_dollars(logged_in_client, customer):
    invoice = Invoice.objects.create(customer=customer, amount=4550, status="paid")

    response = logged_in_client.get(f"/dashboard/invoices/{invoice.id}/edit/")

    assert response.status_code == 200
    form = response.context["form"]
    assert form.initial["amount"] == invoice.amount_dollars
    assert form.initial["status"] == "paid"


def test_edit_unknown_invoice_is_404(logged_in_client):
    assert logged_in_client.get("/dashboard/invoices/missing/edit/").status_code == 404


def test_edit_post_updates_and_redirects(logged_in_client, customer):
    invoice = Invoice.objects.create(customer=customer, amount=100, status="pending")

    response = logged_in_client.post(
        f"/dashboard/invoices/{invoice.id}/edit/",
        {"customer_id": customer.id, "amount": "2.50", "status": "paid"},
    )

    assert response["Location"] == LISTING
    invoice.refresh_from_db()
    assert (invoice.amount, invoice.status) == (250, "paid")


def test_delete_requires_post(logged_in_client, customer):
    invoice = Invoice.objects.create(customer=customer, amount=100, status="pending")

    assert logged_in_client.get(f"/dashboard/invoices/{invoice.id}/delete/").status_code == 405
    assert Invoice.objects.filter(pk=invoice.pk).exists()


def test_delete_post_removes_row_and_refreshes_listing(logged_in_client, customer):
    invoice = Invoice.objects.create(customer=customer, amount=100, status="pending")
    assert logged_in_client.get(LISTING).context["total_pages"] == 1

    response = logged_in_client.post(f"/dashboard/invoices/{invoice.id}/delete/")

    assert response.status_code == 302
    assert response["Location"] == LISTING
    assert not Invoice.objects.exists()
    assert logged_in_client.get(LISTING).context["total_pages"] == 0


def test_healthcheck(client):
    assert client.get("/health/").json() == {"status": "ok"}
