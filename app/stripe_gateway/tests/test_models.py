"""
Tests for Stripe gateway models.

Tests slug assignment on creation, lookups (slug, intent id, refund
reason, dashboard URL, previous sources), option validation and the
settings-driven gateway/source classes.
"""

import re

import pytest
from django.core.exceptions import ValidationError
from django.test import override_settings

from checkout.models import WalletPaymentSource
from checkout.tests.factories import (
    OrderFactory,
    PaymentFactory,
    RefundReasonFactory,
    WalletPaymentSourceFactory,
)
from stripe_gateway.choices import PartialKind, SetupFutureUsage
from stripe_gateway.exceptions import (
    GatewayConfigurationError,
    RefundReasonNotConfiguredError,
)
from stripe_gateway.gateway import GatewayOptions, StripeGateway
from stripe_gateway.models import PaymentSource, SlugEntry, StripePaymentMethod
from stripe_gateway.tests.factories import (
    PaymentIntentFactory,
    PaymentSourceFactory,
    StripePaymentMethodFactory,
)

HEX_SLUG = re.compile(r"^[0-9a-f]{32}$")


# =============================================================================
# Slug Assignment on Creation
# =============================================================================


class TestSlugOnCreate:
    """Every payment method gets a unique slug when it is created."""

    def test_only_test_mode_method_gets_test_slug(self, db):
        payment_method = StripePaymentMethodFactory(test_mode=True)

        assert payment_method.slug == "test"

    def test_only_live_mode_method_gets_live_slug(self, db):
        payment_method = StripePaymentMethodFactory(test_mode=False)

        assert payment_method.slug == "live"

    def test_second_method_gets_random_hex_slug(self, test_payment_method):
        second = StripePaymentMethodFactory(test_mode=True)

        assert HEX_SLUG.match(second.slug)
        assert second.slug != test_payment_method.slug

    def test_second_method_gets_random_slug_even_if_default_is_free(
        self, test_payment_method
    ):
        """A live method created after a test one does not get "live"."""
        second = StripePaymentMethodFactory(test_mode=False)

        assert HEX_SLUG.match(second.slug)

    def test_slugs_are_unique_across_methods(self, db):
        methods = [StripePaymentMethodFactory() for _ in range(5)]

        slugs = [m.slug for m in methods]
        assert len(set(slugs)) == 5
        assert SlugEntry.objects.count() == 5

    def test_slug_persisted(self, test_payment_method):
        reloaded = StripePaymentMethod.objects.get(pk=test_payment_method.pk)

        assert reloaded.slug == "test"

    def test_update_keeps_slug(self, test_payment_method):
        StripePaymentMethodFactory()
        test_payment_method.name = "Stripe (renamed)"
        test_payment_method.save()

        test_payment_method.refresh_from_db()
        assert test_payment_method.slug == "test"
        assert SlugEntry.objects.count() == 2

    def test_delete_removes_slug_entry(self, test_payment_method):
        test_payment_method.delete()

        assert not SlugEntry.objects.filter(slug="test").exists()

    def test_slug_reusable_after_delete(self, test_payment_method):
        test_payment_method.delete()

        again = StripePaymentMethodFactory(test_mode=True)

        assert again.slug == "test"


# =============================================================================
# QuerySet
# =============================================================================


class TestStripePaymentMethodQuerySet:
    """Tests for with_slug() and active()."""

    def test_with_slug_returns_matching_method(self, test_payment_method):
        StripePaymentMethodFactory()

        result = list(StripePaymentMethod.objects.with_slug("test"))

        assert result == [test_payment_method]

    def test_with_slug_unknown_slug_is_empty(self, test_payment_method):
        assert not StripePaymentMethod.objects.with_slug("live").exists()

    def test_with_slug_random_slug(self, test_payment_method):
        second = StripePaymentMethodFactory()

        assert StripePaymentMethod.objects.with_slug(second.slug).get() == second

    def test_active_excludes_inactive(self, test_payment_method):
        inactive = StripePaymentMethodFactory(active=False)

        active = list(StripePaymentMethod.objects.active())

        assert test_payment_method in active
        assert inactive not in active

    def test_chaining(self, test_payment_method):
        test_payment_method.active = False
        test_payment_method.save()

        assert not StripePaymentMethod.objects.active().with_slug("test").exists()


# =============================================================================
# Validation
# =============================================================================


class TestSetupFutureUsageValidation:
    """setup_future_usage is validated when saving."""

    @pytest.mark.parametrize(
        "value",
        [SetupFutureUsage.NONE, SetupFutureUsage.ON_SESSION, SetupFutureUsage.OFF_SESSION],
    )
    def test_allowed_values(self, db, value):
        payment_method = StripePaymentMethodFactory(setup_future_usage=value)

        assert payment_method.setup_future_usage == value

    def test_default_is_empty(self, db):
        payment_method = StripePaymentMethod.objects.create(name="Stripe")

        assert payment_method.setup_future_usage == ""

    def test_invalid_value_rejected_on_create(self, db):
        with pytest.raises(ValidationError) as exc_info:
            StripePaymentMethodFactory(setup_future_usage="always")

        assert "setup_future_usage" in exc_info.value.message_dict
        assert StripePaymentMethod.objects.count() == 0
        assert SlugEntry.objects.count() == 0

    def test_invalid_value_rejected_on_update(self, test_payment_method):
        test_payment_method.setup_future_usage = "sometimes"

        with pytest.raises(ValidationError):
            test_payment_method.save()

        test_payment_method.refresh_from_db()
        assert test_payment_method.setup_future_usage == ""


# =============================================================================
# Lookups
# =============================================================================


class TestIntentIdForPayment:
    """Tests for StripePaymentMethod.intent_id_for_payment()."""

    def test_none_payment(self, db):
        assert StripePaymentMethod.intent_id_for_payment(None) is None

    def test_uses_transaction_id_without_querying(
        self, test_payment_method, django_assert_num_queries
    ):
        payment = PaymentFactory(
            payment_method=test_payment_method,
            transaction_id="pi_from_payment",
        )
        PaymentIntentFactory(
            order=payment.order,
            payment_method=test_payment_method,
            stripe_intent_id="pi_from_intent",
        )

        with django_assert_num_queries(0):
            intent_id = StripePaymentMethod.intent_id_for_payment(payment)

        assert intent_id == "pi_from_payment"

    def test_falls_back_to_stored_intent(self, payment):
        PaymentIntentFactory(
            order=payment.order,
            payment_method=payment.payment_method,
            stripe_intent_id="pi_stored",
        )

        assert StripePaymentMethod.intent_id_for_payment(payment) == "pi_stored"

    def test_no_intent_returns_none(self, payment):
        assert StripePaymentMethod.intent_id_for_payment(payment) is None

    def test_ignores_intents_of_other_payment_methods(self, payment):
        other_method = StripePaymentMethodFactory()
        PaymentIntentFactory(
            order=payment.order,
            payment_method=other_method,
            stripe_intent_id="pi_other_method",
        )

        assert StripePaymentMethod.intent_id_for_payment(payment) is None

    def test_ignores_intents_of_other_orders(self, payment):
        PaymentIntentFactory(
            order=OrderFactory(),
            payment_method=payment.payment_method,
            stripe_intent_id="pi_other_order",
        )

        assert StripePaymentMethod.intent_id_for_payment(payment) is None


class TestStripeDashboardUrl:
    """Tests for stripe_dashboard_url()."""

    def test_test_mode_url(self, test_payment_method):
        url = test_payment_method.stripe_dashboard_url("pi_123")

        assert url == "https://dashboard.stripe.com/test/payments/pi_123"

    def test_live_mode_url(self, live_payment_method):
        url = live_payment_method.stripe_dashboard_url("pi_123")

        assert url == "https://dashboard.stripe.com/payments/pi_123"

    @pytest.mark.parametrize("intent_id", ["seti_123", "ch_123", "xpi_123", "", None])
    def test_non_payment_intent_ids(self, test_payment_method, intent_id):
        assert test_payment_method.stripe_dashboard_url(intent_id) is None


class TestRefundReason:
    """Tests for StripePaymentMethod.refund_reason()."""

    def test_returns_configured_reason(self, db):
        reason = RefundReasonFactory(name="Stripe refund")
        RefundReasonFactory(name="Damaged item")

        assert StripePaymentMethod.refund_reason() == reason

    @override_settings(STRIPE_REFUND_REASON_NAME="Chargeback")
    def test_uses_setting(self, db):
        RefundReasonFactory(name="Stripe refund")
        chargeback = RefundReasonFactory(name="Chargeback")

        assert StripePaymentMethod.refund_reason() == chargeback

    def test_missing_reason_raises(self, db):
        with pytest.raises(RefundReasonNotConfiguredError) as exc_info:
            StripePaymentMethod.refund_reason()

        assert exc_info.value.details == {"refund_reason_name": "Stripe refund"}


class TestPreviousSources:
    """Tests for previous_sources()."""

    def test_guest_order_has_no_sources(self, test_payment_method):
        order = OrderFactory(user=None)

        assert test_payment_method.previous_sources(order) == []

    def test_returns_wallet_sources(self, test_payment_method, user):
        first = PaymentSourceFactory(payment_method=test_payment_method)
        second = PaymentSourceFactory(payment_method=test_payment_method)
        WalletPaymentSourceFactory(user=user, payment_source=first)
        WalletPaymentSourceFactory(user=user, payment_source=second, default=True)
        order = OrderFactory(user=user)

        assert set(test_payment_method.previous_sources(order)) == {first, second}

    def test_excludes_other_users_sources(self, test_payment_method, user):
        WalletPaymentSourceFactory(
            payment_source=PaymentSourceFactory(payment_method=test_payment_method)
        )
        order = OrderFactory(user=user)

        assert test_payment_method.previous_sources(order) == []

    def test_deleted_source_removed_from_wallet(self, test_payment_method, user):
        kept = PaymentSourceFactory(payment_method=test_payment_method)
        removed = PaymentSourceFactory(payment_method=test_payment_method)
        WalletPaymentSourceFactory(user=user, payment_source=kept)
        WalletPaymentSourceFactory(user=user, payment_source=removed)
        order = OrderFactory(user=user)

        removed.delete()

        assert test_payment_method.previous_sources(order) == [kept]
        assert user.wallet_payment_sources.count() == 1

    def test_deleted_payment_method_empties_wallet(self, test_payment_method, user):
        WalletPaymentSourceFactory(
            user=user,
            payment_source=PaymentSourceFactory(payment_method=test_payment_method),
        )
        order = OrderFactory(user=user)

        test_payment_method.delete()

        assert test_payment_method.previous_sources(order) == []
        assert not WalletPaymentSource.objects.exists()


# =============================================================================
# Capabilities
# =============================================================================


class TestCapabilities:
    """Tests for partial names, capability flags and delegated classes."""

    @pytest.mark.parametrize("kind", list(PartialKind))
    def test_partial_name_is_stripe_for_every_kind(self, test_payment_method, kind):
        assert test_payment_method.partial_name(kind) == "stripe"

    def test_partial_name_default(self, test_payment_method):
        assert test_payment_method.partial_name() == "stripe"

    def test_partial_name_accepts_plain_strings(self, test_payment_method):
        assert test_payment_method.partial_name("cart") == "stripe"

    def test_partial_name_unknown_kind(self, test_payment_method):
        with pytest.raises(ValueError):
            test_payment_method.partial_name("checkout_summary")

    def test_source_required(self, test_payment_method):
        assert test_payment_method.source_required() is True

    def test_payment_profiles_not_supported(self, test_payment_method):
        assert test_payment_method.payment_profiles_supported() is False

    def test_default_gateway_class(self):
        assert StripePaymentMethod.gateway_class() is StripeGateway

    @override_settings(STRIPE_GATEWAY_CLASS="stripe_gateway.tests.test_models.FakeGateway")
    def test_gateway_class_from_settings(self):
        assert StripePaymentMethod.gateway_class() is FakeGateway

    def test_default_payment_source_class(self):
        assert StripePaymentMethod.payment_source_class() is PaymentSource

    @override_settings(STRIPE_PAYMENT_SOURCE_MODEL="checkout.Order")
    def test_payment_source_class_without_payment_method_field(self):
        with pytest.raises(GatewayConfigurationError) as exc_info:
            StripePaymentMethod.payment_source_class()

        assert exc_info.value.details == {
            "setting": "STRIPE_PAYMENT_SOURCE_MODEL",
            "value": "checkout.Order",
        }

    @override_settings(STRIPE_PAYMENT_SOURCE_MODEL="checkout.Payment")
    def test_payment_source_class_without_reusable(self):
        with pytest.raises(GatewayConfigurationError):
            StripePaymentMethod.payment_source_class()

    @override_settings(STRIPE_PAYMENT_SOURCE_MODEL="stripe_gateway.MissingSource")
    def test_payment_source_class_unknown_model(self):
        with pytest.raises(GatewayConfigurationError):
            StripePaymentMethod.payment_source_class()

    @override_settings(STRIPE_GATEWAY_CLASS="stripe_gateway.gateway.MissingGateway")
    def test_gateway_class_unknown_path(self):
        with pytest.raises(GatewayConfigurationError):
            StripePaymentMethod.gateway_class()

    @override_settings(STRIPE_GATEWAY_CLASS="stripe_gateway.choices.PARTIAL_NAME")
    def test_gateway_class_not_a_class(self):
        with pytest.raises(GatewayConfigurationError):
            StripePaymentMethod.gateway_class()

    @override_settings(
        STRIPE_GATEWAY_CLASS="stripe_gateway.tests.test_models.ClientlessGateway"
    )
    def test_gateway_without_client_rejected(self, test_payment_method):
        with pytest.raises(GatewayConfigurationError) as exc_info:
            test_payment_method.gateway

        assert "ClientlessGateway" in exc_info.value.message

    def test_gateway_options(self, test_payment_method):
        options = test_payment_method.gateway_options()

        assert options == GatewayOptions(
            api_key=test_payment_method.api_key,
            publishable_key=test_payment_method.publishable_key,
            test_mode=True,
            webhook_endpoint_signing_secret=test_payment_method.webhook_endpoint_signing_secret,
            setup_future_usage="",
        )

    def test_gateway_built_from_record(self, live_payment_method):
        gateway = live_payment_method.gateway

        assert isinstance(gateway, StripeGateway)
        assert gateway.test_mode is False
        assert gateway.options.api_key == "sk_live_123"

    @override_settings(STRIPE_GATEWAY_CLASS="stripe_gateway.tests.test_models.FakeGateway")
    def test_gateway_uses_configured_class(self, test_payment_method):
        gateway = test_payment_method.gateway

        assert isinstance(gateway, FakeGateway)
        assert gateway.options.api_key == test_payment_method.api_key

    def test_str(self, test_payment_method):
        assert str(test_payment_method) == "Stripe"


class FakeGateway:
    """Gateway stand-in selected through STRIPE_GATEWAY_CLASS."""

    def __init__(self, options):
        self.options = options
        self.test_mode = options.test_mode
        self.client = object()


class ClientlessGateway:
    """Gateway class missing the client attribute."""

    def __init__(self, options):
        self.test_mode = options.test_mode
