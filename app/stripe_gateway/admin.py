"""
Stripe gateway admin configuration.

Slugs are shown but never editable: they are assigned on creation and
used in URLs registered with Stripe.
"""

from django.contrib import admin
from django.utils.html import format_html

from stripe_gateway.models import (
    PaymentIntent,
    PaymentSource,
    SlugEntry,
    StripePaymentMethod,
)

__all__ = [
    "StripePaymentMethodAdmin",
    "SlugEntryAdmin",
    "PaymentIntentAdmin",
    "PaymentSourceAdmin",
]


@admin.register(StripePaymentMethod)
class StripePaymentMethodAdmin(admin.ModelAdmin):
    """
    Admin configuration for StripePaymentMethod.

    Credentials live in a collapsed fieldset so they are not displayed
    by default.
    """

    list_display = ["id", "name", "slug_display", "test_mode", "active", "created_at"]
    list_filter = ["active", "test_mode", "setup_future_usage"]
    search_fields = ["name", "slug_entry__slug"]
    readonly_fields = ["slug_display", "created_at", "updated_at"]
    ordering = ["created_at"]

    fieldsets = (
        (
            None,
            {
                "fields": ("name", "description", "slug_display", "active", "test_mode"),
            },
        ),
        (
            "Options",
            {
                "fields": ("setup_future_usage",),
            },
        ),
        (
            "Credentials",
            {
                "fields": (
                    "publishable_key",
                    "api_key",
                    "webhook_endpoint_signing_secret",
                ),
                "classes": ("collapse",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
            },
        ),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("slug_entry")

    @admin.display(description="Slug", ordering="slug_entry__slug")
    def slug_display(self, obj: StripePaymentMethod) -> str:
        entry = getattr(obj, "slug_entry", None) if obj.pk else None
        return entry.slug if entry else "-"


@admin.register(SlugEntry)
class SlugEntryAdmin(admin.ModelAdmin):
    """Read-only view of assigned slugs."""

    list_display = ["slug", "payment_method", "created_at"]
    search_fields = ["slug", "payment_method__name"]
    readonly_fields = ["slug", "payment_method", "created_at", "updated_at"]

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False


@admin.register(PaymentIntent)
class PaymentIntentAdmin(admin.ModelAdmin):
    """Admin configuration for PaymentIntent with a link to the Stripe dashboard."""

    list_display = ["stripe_intent_id", "order", "payment_method", "dashboard_link", "created_at"]
    list_filter = ["payment_method"]
    search_fields = ["stripe_intent_id", "order__number"]
    readonly_fields = ["dashboard_link", "created_at", "updated_at"]
    list_select_related = ["order", "payment_method"]

    @admin.display(description="Stripe dashboard")
    def dashboard_link(self, obj: PaymentIntent) -> str:
        url = obj.payment_method.stripe_dashboard_url(obj.stripe_intent_id)
        if not url:
            return "-"
        return format_html('<a href="{}" target="_blank" rel="noopener">{}</a>', url, obj.stripe_intent_id)


@admin.register(PaymentSource)
class PaymentSourceAdmin(admin.ModelAdmin):
    """Admin configuration for PaymentSource."""

    list_display = ["id", "stripe_payment_method_id", "payment_method", "created_at"]
    list_filter = ["payment_method"]
    search_fields = ["stripe_payment_method_id"]
    readonly_fields = ["created_at", "updated_at"]
