from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from django.contrib.auth import authenticate, login
from django.http import HttpRequest

from .backends import UserLookupError
from .forms import CredentialsForm

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."
UNEXPECTED_ERROR = "Something went wrong."


def sign_in(request: HttpRequest, credentials: Mapping[str, Any]) -> str | None:
    """Check credentials and start a session.

    Returns ``None`` on success, otherwise the message to show. Malformed
    input, unknown email, wrong password and lockout all read as the same
    "Invalid credentials." so the response never says which part was wrong.
    """
    form = CredentialsForm(credentials)
    if not form.is_valid():
        logger.info("Invalid credentials")
        return INVALID_CREDENTIALS

    try:
        user = authenticate(
            request,
            email=form.cleaned_data["email"],
            password=form.cleaned_data["password"],
        )
    except UserLookupError:
        return UNEXPECTED_ERROR

    if user is None:
        logger.info("Invalid credentials")
        return INVALID_CREDENTIALS

    login(request, user, backend="accounts.backends.EmailBackend")
    return None
