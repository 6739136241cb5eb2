"""
Checkout admin configuration.
"""

from django.contrib import admin

from checkout.models import Order, Payment, RefundReason, WalletPaymentSource

__all__ = [
    "OrderAdmin",
    "PaymentAdmin",
    "RefundReasonAdmin",
    "WalletPaymentSourceAdmin",
]


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    fields = ["payment_method", "amount_cents", "currency", "transaction_id"]
    readonly_fields = fields


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order."""

    list_display = ["number", "user", "email", "created_at"]
    search_fields = ["number", "email", "user__email"]
    readonly_fields = ["id", "created_at", "updated_at"]
    inlines = [PaymentInline]
    date_hierarchy = "created_at"


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """Admin configuration for Payment."""

    list_display = ["id", "order", "payment_method", "amount_display", "transaction_id", "created_at"]
    list_filter = ["payment_method", "currency"]
    search_fields = ["id", "transaction_id", "order__number"]
    readonly_fields = ["id", "created_at", "updated_at"]
    list_select_related = ["order", "payment_method"]

    @admin.display(description="Amount")
    def amount_display(self, obj: Payment) -> str:
        """Display the amount formatted as currency."""
        return f"{obj.amount_cents / 100:.2f} {obj.currency.upper()}"


@admin.register(RefundReason)
class RefundReasonAdmin(admin.ModelAdmin):
    """Admin configuration for RefundReason."""

    list_display = ["name", "active", "created_at"]
    list_filter = ["active"]
    search_fields = ["name"]


@admin.register(WalletPaymentSource)
class WalletPaymentSourceAdmin(admin.ModelAdmin):
    """Admin configuration for WalletPaymentSource."""

    list_display = ["user", "source_type", "source_id", "default", "created_at"]
    list_filter = ["default", "source_type"]
    search_fields = ["user__email"]
