from __future__ import annotations

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache

from customers.models import Customer

PASSWORD = "123456"


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def customer(db):
    return Customer.objects.create(name="Delba de Oliveira", email="delba@oliveira.com")


@pytest.fixture
def other_customer(db):
    return Customer.objects.create(name="Lee Robinson", email="lee@robinson.com")


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username="user",
        email="user@nextmail.com",
        password=PASSWORD,
    )


@pytest.fixture
def logged_in_client(client, user):
    client.force_login(user, backend="accounts.backends.EmailBackend")
    return client
