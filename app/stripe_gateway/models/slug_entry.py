"""
SlugEntry model mapping a unique slug to a Stripe payment method.

Slugs identify payment methods in URLs (for example the webhook
endpoint registered with Stripe), so they must never change once
assigned. Uniqueness is enforced by the database, not by application
checks.

Usage:
    from stripe_gateway.models import SlugEntry

    SlugEntry.objects.get(slug="live").payment_method
"""

from __future__ import annotations

from django.db import models

from core.models import BaseModel


class SlugEntry(BaseModel):
    """
    Unique slug owned by exactly one StripePaymentMethod.

    Created by SlugAssignmentService right after the payment method is
    inserted and deleted together with it.

    Fields:
        payment_method: Owning payment method (one-to-one)
        slug: "test", "live" or 32 hex characters
    """

    payment_method = models.OneToOneField(
        "stripe_gateway.StripePaymentMethod",
        on_delete=models.CASCADE,
        related_name="slug_entry",
        help_text="Payment method identified by this slug",
    )

    slug = models.SlugField(
        max_length=255,
        unique=True,
        help_text="URL-safe identifier, unique across all payment methods",
    )

    class Meta:
        ordering = ["created_at"]
        verbose_name = "Slug Entry"
        verbose_name_plural = "Slug Entries"

    def __str__(self) -> str:
        return self.slug
