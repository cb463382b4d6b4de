# core/middleware.py
from __future__ import annotations

from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect
from django.urls import reverse


class DashboardAccessMiddleware:
    """
    Gates the dashboard behind a session.

    - Anonymous requests under the dashboard prefix go to the login page
      (with ?next= so they come back afterwards).
    - Signed-in users asking for the login page go to the dashboard.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        prefix = getattr(settings, "DASHBOARD_PATH_PREFIX", "/dashboard/")
        is_logged_in = request.user.is_authenticated

        if request.path.startswith(prefix):
            if not is_logged_in:
                return redirect_to_login(request.get_full_path())
            return self.get_response(request)

        if is_logged_in and request.path == reverse("accounts:login"):
            return redirect(prefix)

        return self.get_response(request)
