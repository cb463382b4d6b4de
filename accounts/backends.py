from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.db import DatabaseError

logger = logging.getLogger(__name__)


class UserLookupError(Exception):
    """The user store could not be queried (not the same as "no such user")."""


def get_user_by_email(email: str):
    UserModel = get_user_model()
    try:
        return UserModel._default_manager.get(email=email)
    except UserModel.DoesNotExist:
        return None
    except (DatabaseError, UserModel.MultipleObjectsReturned) as exc:
        logger.error("Failed to fetch user", exc_info=exc)
        raise UserLookupError("Failed to fetch user.") from exc


class EmailBackend(ModelBackend):
    """Email + password sign in.

    The password is checked with the configured hasher (constant-time compare).
    Unknown emails still run the hasher once so response time does not tell
    which half of the credentials was wrong.
    """

    def authenticate(self, request, email=None, password=None, **kwargs):
        if email is None or password is None:
            return None

        user = get_user_by_email(email)
        if user is None:
            get_user_model()().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
