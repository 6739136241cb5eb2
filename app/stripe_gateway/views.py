"""
DRF views for the Stripe gateway app.

Endpoints:
    GET /api/v1/stripe/payment-methods/{slug}/ - Publishable configuration

Security:
    - Anonymous access: the response contains only publishable data
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework.exceptions import NotFound
from rest_framework.generics import RetrieveAPIView
from rest_framework.permissions import AllowAny

from stripe_gateway.models import StripePaymentMethod
from stripe_gateway.serializers import PublicPaymentMethodSerializer

logger = logging.getLogger(__name__)


@extend_schema(tags=["Stripe - Payment Methods"])
class PaymentMethodConfigView(RetrieveAPIView):
    """
    Publishable configuration of an active Stripe payment method.

    GET /api/v1/stripe/payment-methods/{slug}/

    Returns:
        PublicPaymentMethodSerializer data, or 404 for unknown or
        inactive slugs
    """

    permission_classes = [AllowAny]
    serializer_class = PublicPaymentMethodSerializer

    def get_object(self) -> StripePaymentMethod:
        slug = self.kwargs["slug"]
        payment_method = (
            StripePaymentMethod.objects.active()
            .with_slug(slug)
            .select_related("slug_entry")
            .first()
        )
        if payment_method is None:
            logger.info("No active Stripe payment method with slug %r", slug)
            raise NotFound("Payment method not found.")
        return payment_method
