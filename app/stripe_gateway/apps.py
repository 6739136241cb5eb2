"""
Django app configuration for stripe_gateway.
"""

from django.apps import AppConfig


class StripeGatewayConfig(AppConfig):
    """Configuration for the Stripe gateway application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "stripe_gateway"
    verbose_name = "Stripe Gateway"
