# core/navigation.py
from __future__ import annotations

from typing import Callable

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect

from core.results import Failure, MutationResult, Success


def follow_result(
    request: HttpRequest,
    result: MutationResult,
    *,
    on_failure: Callable[[Failure], HttpResponse],
    fallback: str | None = None,
) -> HttpResponse:
    """Turn a mutation result into the response the user sees.

    - Success with a target: redirect there.
    - Success without one: redirect to `fallback`.
    - Failure: let the caller re-render its form with the error report.

    Call this after the service returned, never inside a try block.
    """
    if isinstance(result, Success):
        if result.message:
            messages.success(request, result.message)
        target = result.redirect_to or fallback
        if target is None:
            raise ValueError("A success without redirect target needs a fallback.")
        return redirect(target)

    if result.message:
        messages.error(request, result.message)
    return on_failure(result)
