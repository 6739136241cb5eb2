"""
Choice enums and constants for the Stripe gateway app.

Usage:
    from stripe_gateway.choices import PartialKind, SetupFutureUsage

    payment_method.setup_future_usage = SetupFutureUsage.OFF_SESSION
    payment_method.partial_name(PartialKind.CART)  # "stripe"
"""

from django.db import models

# Every checkout partial (payment form, cart, product page, risk review)
# renders the same Stripe template.
PARTIAL_NAME = "stripe"

STRIPE_DASHBOARD_URL = "https://dashboard.stripe.com"


class SetupFutureUsage(models.TextChoices):
    """
    Allowed values for Stripe's setup_future_usage option.

    Values:
        NONE: Don't save the payment method for later use
        ON_SESSION: Save for payments while the customer is present
        OFF_SESSION: Save for payments without the customer present

    See https://stripe.com/docs/api/payment_intents/create#create_payment_intent-setup_future_usage
    """

    NONE = "", "None"
    ON_SESSION = "on_session", "On session"
    OFF_SESSION = "off_session", "Off session"


class PartialKind(models.TextChoices):
    """Checkout templates that ask a payment method for its partial name."""

    PAYMENT = "payment", "Payment form"
    CART = "cart", "Cart"
    PRODUCT_PAGE = "product_page", "Product page"
    RISKY = "risky", "Risk review"
