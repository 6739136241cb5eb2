"""
PaymentSource model for Stripe-backed checkout payments.

A PaymentSource wraps a Stripe PaymentMethod (pm_xxx) attached to a
customer. Sources saved to a user's wallet are offered again on later
checkouts.
"""

from __future__ import annotations

from django.contrib.contenttypes.fields import GenericRelation
from django.db import models

from core.models import BaseModel


class PaymentSource(BaseModel):
    """
    Stripe payment method stored for checkout payments.

    Fields:
        payment_method: Stripe payment method configuration it belongs to
        stripe_payment_method_id: Stripe PaymentMethod ID (pm_xxx), set
            once the customer has confirmed the payment details
    """

    payment_method = models.ForeignKey(
        "stripe_gateway.StripePaymentMethod",
        on_delete=models.CASCADE,
        related_name="payment_sources",
        help_text="Stripe payment method configuration",
    )

    stripe_payment_method_id = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Stripe PaymentMethod ID (pm_xxx)",
    )

    # Wallet rows point here through a generic relation; deleting the
    # source deletes them too.
    wallet_entries = GenericRelation(
        "checkout.WalletPaymentSource",
        content_type_field="source_type",
        object_id_field="source_id",
        related_query_name="stripe_payment_source",
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Payment Source"
        verbose_name_plural = "Payment Sources"

    def __str__(self) -> str:
        return f"PaymentSource({self.stripe_payment_method_id or 'unconfirmed'})"

    def reusable(self) -> bool:
        """A source can be charged again once Stripe has a payment method for it."""
        return bool(self.stripe_payment_method_id)
