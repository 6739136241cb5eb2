"""
PaymentIntent model recording Stripe PaymentIntents per order.

Only the identifiers are stored here; intent state lives in Stripe.
"""

from __future__ import annotations

from django.db import models

from core.models import BaseModel


class PaymentIntent(BaseModel):
    """
    Stripe PaymentIntent created for an order with a payment method.

    Fields:
        order: Order the intent was created for
        payment_method: Stripe payment method whose account owns the intent
        stripe_intent_id: Stripe PaymentIntent ID (pi_xxx)
    """

    order = models.ForeignKey(
        "checkout.Order",
        on_delete=models.CASCADE,
        related_name="stripe_payment_intents",
        help_text="Order the intent was created for",
    )

    payment_method = models.ForeignKey(
        "stripe_gateway.StripePaymentMethod",
        on_delete=models.PROTECT,
        related_name="payment_intents",
        help_text="Payment method whose Stripe account owns the intent",
    )

    stripe_intent_id = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        db_index=True,
        help_text="Stripe PaymentIntent ID (pi_xxx)",
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Payment Intent"
        verbose_name_plural = "Payment Intents"
        constraints = [
            models.UniqueConstraint(
                fields=["order", "payment_method"],
                name="stripe_payment_intent_unique_order_method",
            ),
        ]

    def __str__(self) -> str:
        return f"PaymentIntent({self.stripe_intent_id or 'pending'})"
