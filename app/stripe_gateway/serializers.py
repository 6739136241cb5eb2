"""
Serializers for the Stripe gateway API.

Only publishable configuration is serialized. The secret key and the
webhook signing secret never leave the server.
"""

from __future__ import annotations

from rest_framework import serializers

from stripe_gateway.models import StripePaymentMethod


class PublicPaymentMethodSerializer(serializers.ModelSerializer):
    """
    Client-side configuration of a Stripe payment method.

    Example response:
        {
            "slug": "live",
            "name": "Stripe",
            "publishable_key": "pk_live_xxx",
            "test_mode": false,
            "setup_future_usage": "off_session",
            "partial_name": "stripe"
        }
    """

    slug = serializers.CharField(source="slug_entry.slug", read_only=True)
    partial_name = serializers.SerializerMethodField()

    class Meta:
        model = StripePaymentMethod
        fields = [
            "slug",
            "name",
            "publishable_key",
            "test_mode",
            "setup_future_usage",
            "partial_name",
        ]
        read_only_fields = fields

    def get_partial_name(self, obj: StripePaymentMethod) -> str:
        return obj.partial_name()
