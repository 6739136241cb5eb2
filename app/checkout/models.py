"""
Checkout models consumed by payment method integrations.

This module contains:
- PaymentMethod: Abstract base every payment method integration extends
- Order: Customer order that payments are collected for
- Payment: A single payment attempt against an order
- RefundReason: Named reason attached to refunds
- WalletPaymentSource: Reusable payment source saved to a user's wallet

Usage:
    from checkout.models import Order, Payment

    order = Order.objects.create(number="R123456789", user=user)
    payment = Payment.objects.create(
        order=order,
        payment_method=stripe_method,
        amount_cents=5000,
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

if TYPE_CHECKING:
    from typing import Any


class PaymentMethod(BaseModel):
    """
    Abstract base for payment method configuration records.

    Concrete integrations (see stripe_gateway.StripePaymentMethod) add
    their own credentials and override the capability checks below.

    Fields:
        name: Display name shown to customers and admins
        description: Optional internal notes
        active: Whether the method can be used for new payments
        test_mode: Whether the method talks to the provider's test environment
    """

    name = models.CharField(
        max_length=255,
        help_text="Display name shown at checkout",
    )

    description = models.TextField(
        blank=True,
        default="",
        help_text="Internal description for admins",
    )

    active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Whether this payment method can be used for new payments",
    )

    test_mode = models.BooleanField(
        default=True,
        help_text="Use the provider's test environment",
    )

    class Meta:
        abstract = True

    def __str__(self) -> str:
        return self.name

    def source_required(self) -> bool:
        """Whether payments with this method need a payment source."""
        return True

    def payment_profiles_supported(self) -> bool:
        """Whether the method stores customer profiles with the provider."""
        return False

    def previous_sources(self, order: Order) -> list[Any]:
        """Sources the customer already used that can be offered again."""
        return []


class Order(UUIDPrimaryKeyMixin, BaseModel):
    """
    Customer order.

    Fields:
        number: Human-facing order number (unique)
        user: Customer who placed the order (None for guest checkout)
        email: Contact email for the order
    """

    number = models.CharField(
        max_length=32,
        unique=True,
        help_text="Human-facing order number",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
        help_text="Customer who placed the order (empty for guests)",
    )

    email = models.EmailField(
        blank=True,
        default="",
        help_text="Contact email for the order",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Order({self.number})"


class Payment(UUIDPrimaryKeyMixin, BaseModel):
    """
    A payment collected (or attempted) for an order.

    Fields:
        order: Order being paid
        payment_method: Stripe payment method configuration used
        amount_cents: Amount in smallest currency unit
        currency: ISO 4217 currency code (lowercase)
        transaction_id: Provider transaction reference once known
            (a Stripe PaymentIntent id, pi_xxx)
    """

    order = models.ForeignKey(
        "checkout.Order",
        on_delete=models.CASCADE,
        related_name="payments",
        help_text="Order being paid",
    )

    payment_method = models.ForeignKey(
        "stripe_gateway.StripePaymentMethod",
        on_delete=models.PROTECT,
        related_name="payments",
        help_text="Payment method configuration used for this payment",
    )

    amount_cents = models.PositiveBigIntegerField(
        help_text="Payment amount in smallest currency unit (e.g., cents)",
    )

    currency = models.CharField(
        max_length=3,
        default="usd",
        help_text="ISO 4217 currency code (lowercase)",
    )

    transaction_id = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        db_index=True,
        help_text="Provider transaction reference (e.g., pi_xxx)",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Payment({self.pk}, {self.amount_cents} {self.currency})"


class RefundReason(BaseModel):
    """
    Named reason attached to refunds.

    Integrations look reasons up by name, so names are unique.
    """

    name = models.CharField(
        max_length=255,
        unique=True,
        help_text="Reason name (unique)",
    )

    active = models.BooleanField(
        default=True,
        help_text="Whether the reason can be selected for new refunds",
    )

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class WalletPaymentSource(BaseModel):
    """
    A payment source saved to a user's wallet for reuse.

    The source is a generic relation so any integration's source
    model can be stored in the wallet.

    Fields:
        user: Wallet owner
        payment_source: The stored source (generic relation)
        default: Whether this is the user's default source
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="wallet_payment_sources",
        help_text="Wallet owner",
    )

    source_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        help_text="Model of the stored payment source",
    )

    source_id = models.PositiveBigIntegerField(
        help_text="Primary key of the stored payment source",
    )

    payment_source = GenericForeignKey("source_type", "source_id")

    default = models.BooleanField(
        default=False,
        help_text="Whether this is the user's default payment source",
    )

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "source_type", "source_id"],
                name="wallet_payment_source_unique_per_user",
            ),
        ]

    def __str__(self) -> str:
        return f"WalletPaymentSource(user={self.user_id}, source={self.source_id})"
