"""
Stripe gateway built from a payment method's credentials.

StripePaymentMethod.gateway resolves the class named by
settings.STRIPE_GATEWAY_CLASS (StripeGateway by default) and builds it
from GatewayOptions. Code that talks to Stripe gets its client from the
gateway so every call uses the credentials of the right account.

Usage:
    gateway = payment_method.gateway
    gateway.client.payment_intents.retrieve("pi_xxx")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property

import stripe
from django.conf import settings

from stripe_gateway.exceptions import GatewayConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewayOptions:
    """
    Credentials and options a gateway is built from.

    Attributes:
        api_key: Stripe secret key
        publishable_key: Stripe publishable key
        test_mode: Whether the payment method is in test mode
        webhook_endpoint_signing_secret: Webhook endpoint signing secret
        setup_future_usage: Stripe setup_future_usage option
    """

    api_key: str
    publishable_key: str = ""
    test_mode: bool = False
    webhook_endpoint_signing_secret: str = ""
    setup_future_usage: str = ""

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks.
        return (
            f"GatewayOptions(publishable_key={self.publishable_key!r}, "
            f"test_mode={self.test_mode!r}, "
            f"setup_future_usage={self.setup_future_usage!r})"
        )


class StripeGateway:
    """
    Default PaymentGateway implementation backed by the stripe SDK.

    Raises:
        GatewayConfigurationError: options carry no API key
    """

    def __init__(self, options: GatewayOptions):
        if not options.api_key:
            raise GatewayConfigurationError(
                "Stripe API key is not configured",
                details={"test_mode": options.test_mode},
            )

        self.options = options
        self.test_mode = options.test_mode

        if options.test_mode and options.api_key.startswith("sk_live_"):
            logger.warning("Test mode payment method is configured with a live key")

    @cached_property
    def client(self) -> stripe.StripeClient:
        """Stripe client scoped to this gateway's secret key."""
        return stripe.StripeClient(
            self.options.api_key,
            max_network_retries=settings.STRIPE_MAX_RETRIES,
        )

    @property
    def publishable_key(self) -> str:
        return self.options.publishable_key

    @property
    def webhook_endpoint_signing_secret(self) -> str:
        return self.options.webhook_endpoint_signing_secret
