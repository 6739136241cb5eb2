"""
Pytest fixtures for checkout tests.
"""

import pytest

from checkout.tests.factories import OrderFactory, UserFactory


@pytest.fixture
def user(db):
    """Create a test user."""
    return UserFactory()


@pytest.fixture
def guest_order(db):
    """Create an order placed without an account."""
    return OrderFactory()


@pytest.fixture
def user_order(db, user):
    """Create an order placed by a registered user."""
    return OrderFactory(user=user)
