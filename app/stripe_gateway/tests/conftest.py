"""
Pytest fixtures for Stripe gateway tests.

Slugs depend on how many payment methods exist, so fixtures that
create payment methods document the slug they end up with.
"""

import pytest

from checkout.tests.factories import OrderFactory, PaymentFactory, UserFactory
from stripe_gateway.tests.factories import StripePaymentMethodFactory


@pytest.fixture
def user(db):
    """Create a test user."""
    return UserFactory()


@pytest.fixture
def test_payment_method(db):
    """The only payment method, in test mode (slug "test")."""
    return StripePaymentMethodFactory(test_mode=True)


@pytest.fixture
def live_payment_method(db):
    """The only payment method, in live mode (slug "live")."""
    return StripePaymentMethodFactory(
        test_mode=False,
        api_key="sk_live_123",
        publishable_key="pk_live_123",
    )


@pytest.fixture
def order(db):
    """Create a guest order."""
    return OrderFactory()


@pytest.fixture
def payment(db, order, test_payment_method):
    """Payment without a transaction id for ``order``."""
    return PaymentFactory(order=order, payment_method=test_payment_method)
