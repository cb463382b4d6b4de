from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.csrf import csrf_protect
from django.views.decorators.debug import sensitive_post_parameters

from .forms import CredentialsForm
from .services import sign_in


def _next_url(request: HttpRequest) -> str:
    candidate = request.POST.get("next") or request.GET.get("next") or ""
    if candidate and url_has_allowed_host_and_scheme(
        candidate,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return candidate
    return settings.LOGIN_REDIRECT_URL


@sensitive_post_parameters("password")
@csrf_protect
def login_view(request: HttpRequest) -> HttpResponse:
    """Email/password login form."""
    error = None
    if request.method == "POST":
        error = sign_in(request, request.POST)
        if error is None:
            return redirect(_next_url(request))
        form = CredentialsForm(initial={"email": request.POST.get("email", "")})
    else:
        form = CredentialsForm()

    return render(
        request,
        "accounts/login.html",
        {"form": form, "error": error, "next": request.POST.get("next") or request.GET.get("next", "")},
    )
