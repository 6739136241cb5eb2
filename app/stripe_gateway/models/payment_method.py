"""
StripePaymentMethod model holding Stripe credentials and options.

Each record is one Stripe account in one mode (test or live). Records
are identified by a unique slug assigned when they are created.

Usage:
    from stripe_gateway.models import StripePaymentMethod

    payment_method = StripePaymentMethod.objects.create(
        name="Stripe",
        api_key="sk_test_xxx",
        publishable_key="pk_test_xxx",
        test_mode=True,
    )
    payment_method.slug  # "test" when it is the only Stripe payment method

    StripePaymentMethod.objects.with_slug("test")
    StripePaymentMethod.intent_id_for_payment(payment)
    payment_method.stripe_dashboard_url("pi_123")
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from django.apps import apps
from django.conf import settings
from django.core.exceptions import FieldDoesNotExist, ValidationError
from django.db import models, transaction
from django.utils.module_loading import import_string

from checkout.models import PaymentMethod, RefundReason
from core.protocols import PaymentGateway
from stripe_gateway.choices import (
    PARTIAL_NAME,
    STRIPE_DASHBOARD_URL,
    PartialKind,
    SetupFutureUsage,
)
from stripe_gateway.exceptions import (
    GatewayConfigurationError,
    RefundReasonNotConfiguredError,
)
from stripe_gateway.gateway import GatewayOptions
from stripe_gateway.models.payment_intent import PaymentIntent
from stripe_gateway.models.slug_entry import SlugEntry

if TYPE_CHECKING:
    from typing import Any

    from checkout.models import Order, Payment

logger = logging.getLogger(__name__)

# Only PaymentIntents have a dashboard page under /payments/.
PAYMENT_INTENT_ID_PATTERN = re.compile(r"^pi_")


class StripePaymentMethodQuerySet(models.QuerySet):
    """QuerySet with lookups used by checkout and webhook routing."""

    def active(self) -> StripePaymentMethodQuerySet:
        """Filter to payment methods enabled for new payments."""
        return self.filter(active=True)

    def with_slug(self, slug: str) -> StripePaymentMethodQuerySet:
        """
        Filter to payment methods whose slug entry matches ``slug``.

        Example:
            StripePaymentMethod.objects.with_slug("live").first()
        """
        return self.filter(
            id__in=SlugEntry.objects.filter(slug=slug).values("payment_method_id")
        )


class StripePaymentMethod(PaymentMethod):
    """
    Stripe payment method configuration.

    Fields (in addition to PaymentMethod's name/description/active/test_mode):
        api_key: Stripe secret key (sk_xxx)
        publishable_key: Stripe publishable key (pk_xxx), safe to expose
        setup_future_usage: Stripe setup_future_usage option
        webhook_endpoint_signing_secret: Signing secret (whsec_xxx) of the
            webhook endpoint registered for this payment method

    Related:
        slug_entry: Unique slug (created on insert, see assign_slug)
        payment_intents, payment_sources, payments

    Note:
        Saving validates setup_future_usage, and the insert plus slug
        assignment run in one transaction: if no slug can be assigned
        the payment method is not created.
    """

    api_key = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Stripe secret API key (sk_test_... or sk_live_...)",
    )

    publishable_key = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Stripe publishable key (pk_test_... or pk_live_...)",
    )

    setup_future_usage = models.CharField(
        max_length=20,
        blank=True,
        default=SetupFutureUsage.NONE,
        choices=SetupFutureUsage.choices,
        help_text="Save payment methods for future on/off session payments",
    )

    # https://stripe.com/docs/webhooks/signatures
    webhook_endpoint_signing_secret = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Signing secret of this payment method's webhook endpoint",
    )

    objects = StripePaymentMethodQuerySet.as_manager()

    class Meta:
        ordering = ["created_at"]
        verbose_name = "Stripe Payment Method"
        verbose_name_plural = "Stripe Payment Methods"

    # ==========================================================================
    # Persistence
    # ==========================================================================

    def save(self, *args: Any, **kwargs: Any) -> None:
        """Validate options, save, and assign a slug when the record is new."""
        self.validate_setup_future_usage()
        creating = self._state.adding

        with transaction.atomic():
            super().save(*args, **kwargs)
            if creating:
                self.assign_slug()

    def validate_setup_future_usage(self) -> None:
        """
        Raise ValidationError unless setup_future_usage is an allowed value.

        Raises:
            ValidationError: keyed by field name, like full_clean()
        """
        if self.setup_future_usage not in SetupFutureUsage.values:
            raise ValidationError(
                {
                    "setup_future_usage": (
                        f"'{self.setup_future_usage}' is not one of "
                        f"{', '.join(repr(v) for v in SetupFutureUsage.values)}."
                    )
                },
                code="invalid_choice",
            )

    def assign_slug(self) -> SlugEntry:
        """Create this payment method's slug entry. See SlugAssignmentService."""
        from stripe_gateway.services import SlugAssignmentService

        return SlugAssignmentService.assign(self)

    @property
    def slug(self) -> str:
        return self.slug_entry.slug

    # ==========================================================================
    # Lookups
    # ==========================================================================

    @classmethod
    def refund_reason(cls) -> RefundReason:
        """
        Return the reason recorded on refunds that originate from Stripe.

        Raises:
            RefundReasonNotConfiguredError: no RefundReason is named
                settings.STRIPE_REFUND_REASON_NAME
        """
        name = settings.STRIPE_REFUND_REASON_NAME
        try:
            return RefundReason.objects.get(name=name)
        except RefundReason.DoesNotExist as exc:
            logger.error("Refund reason %r is not configured", name)
            raise RefundReasonNotConfiguredError(
                f"Refund reason {name!r} does not exist",
                details={"refund_reason_name": name},
            ) from exc

    @classmethod
    def intent_id_for_payment(cls, payment: Payment | None) -> str | None:
        """
        Return the Stripe PaymentIntent ID for a payment.

        Uses the payment's own transaction_id when it has one. Otherwise
        falls back to the PaymentIntent recorded for the payment's order
        and payment method.

        Returns:
            PaymentIntent ID, or None if the payment is missing or no
            intent has been recorded
        """
        if not payment:
            return None

        if payment.transaction_id:
            return payment.transaction_id

        # TODO: route callers through the intent records directly once
        # every payment stores its transaction_id.
        return (
            PaymentIntent.objects.filter(
                order_id=payment.order_id,
                payment_method_id=payment.payment_method_id,
            )
            .values_list("stripe_intent_id", flat=True)
            .first()
        )

    def stripe_dashboard_url(self, intent_id: str | None) -> str | None:
        """
        Link to an intent in the Stripe dashboard.

        Example:
            >>> test_method.stripe_dashboard_url("pi_123")
            'https://dashboard.stripe.com/test/payments/pi_123'
            >>> test_method.stripe_dashboard_url("seti_123") is None
            True
        """
        if not isinstance(intent_id, str) or not PAYMENT_INTENT_ID_PATTERN.match(
            intent_id
        ):
            return None

        path_prefix = "/test" if self.test_mode else ""
        return f"{STRIPE_DASHBOARD_URL}{path_prefix}/payments/{intent_id}"

    def previous_sources(self, order: Order) -> list[Any]:
        """
        Payment sources saved to the order user's wallet.

        Guest orders have no wallet and get an empty list. The result
        is what the admin payment form lists as previous cards.
        """
        if not order.user_id:
            return []

        wallet = order.user.wallet_payment_sources.prefetch_related("payment_source")
        return [entry.payment_source for entry in wallet]

    # ==========================================================================
    # Capabilities
    # ==========================================================================

    def partial_name(self, kind: PartialKind | str = PartialKind.PAYMENT) -> str:
        """
        Template partial used to render this method in a checkout context.

        Raises:
            ValueError: kind is not a PartialKind
        """
        PartialKind(kind)
        return PARTIAL_NAME

    def source_required(self) -> bool:
        return True

    def payment_profiles_supported(self) -> bool:
        # Stripe customers are managed by the payment sources themselves,
        # not through provider payment profiles.
        return False

    @staticmethod
    def gateway_class() -> type[PaymentGateway]:
        """
        Gateway implementation configured by settings.STRIPE_GATEWAY_CLASS.

        Raises:
            GatewayConfigurationError: the path does not name a class
        """
        path = settings.STRIPE_GATEWAY_CLASS
        try:
            gateway_class = import_string(path)
        except ImportError as exc:
            raise GatewayConfigurationError(
                f"Gateway class {path!r} cannot be imported",
                details={"setting": "STRIPE_GATEWAY_CLASS", "value": path},
            ) from exc

        if not isinstance(gateway_class, type):
            raise GatewayConfigurationError(
                f"{path!r} is not a class",
                details={"setting": "STRIPE_GATEWAY_CLASS", "value": path},
            )
        return gateway_class

    @staticmethod
    def payment_source_class() -> type[models.Model]:
        """
        Source model configured by settings.STRIPE_PAYMENT_SOURCE_MODEL.

        The model must satisfy PaymentSourceRecord: a ``payment_method``
        field and a ``reusable()`` method.

        Raises:
            GatewayConfigurationError: the model is unknown or does not
                satisfy PaymentSourceRecord
        """
        label = settings.STRIPE_PAYMENT_SOURCE_MODEL
        details = {"setting": "STRIPE_PAYMENT_SOURCE_MODEL", "value": label}
        try:
            source_class = apps.get_model(label)
        except (LookupError, ValueError) as exc:
            raise GatewayConfigurationError(
                f"Payment source model {label!r} is not installed",
                details=details,
            ) from exc

        try:
            source_class._meta.get_field("payment_method")
        except FieldDoesNotExist as exc:
            raise GatewayConfigurationError(
                f"Payment source model {label!r} has no payment_method field",
                details=details,
            ) from exc

        if not callable(getattr(source_class, "reusable", None)):
            raise GatewayConfigurationError(
                f"Payment source model {label!r} does not define reusable()",
                details=details,
            )
        return source_class

    def gateway_options(self) -> GatewayOptions:
        return GatewayOptions(
            api_key=self.api_key,
            publishable_key=self.publishable_key,
            test_mode=self.test_mode,
            webhook_endpoint_signing_secret=self.webhook_endpoint_signing_secret,
            setup_future_usage=self.setup_future_usage,
        )

    @property
    def gateway(self) -> PaymentGateway:
        """
        Gateway built from this record's current credentials.

        Raises:
            GatewayConfigurationError: the configured class does not build
                a PaymentGateway
        """
        gateway = self.gateway_class()(self.gateway_options())
        if not isinstance(gateway, PaymentGateway):
            raise GatewayConfigurationError(
                f"{type(gateway).__name__} does not implement PaymentGateway",
                details={
                    "setting": "STRIPE_GATEWAY_CLASS",
                    "value": settings.STRIPE_GATEWAY_CLASS,
                },
            )
        return gateway
