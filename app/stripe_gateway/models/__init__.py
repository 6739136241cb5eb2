"""
Stripe gateway models.

This module contains all Stripe integration models:
- StripePaymentMethod: Stripe credentials and options for one account/mode
- SlugEntry: Unique slug identifying a StripePaymentMethod
- PaymentIntent: Stripe PaymentIntent created for an order
- PaymentSource: Stripe payment method attached to checkout payments
"""

from stripe_gateway.models.payment_intent import PaymentIntent
from stripe_gateway.models.payment_method import (
    StripePaymentMethod,
    StripePaymentMethodQuerySet,
)
from stripe_gateway.models.payment_source import PaymentSource
from stripe_gateway.models.slug_entry import SlugEntry

__all__ = [
    "PaymentIntent",
    "PaymentSource",
    "SlugEntry",
    "StripePaymentMethod",
    "StripePaymentMethodQuerySet",
]
