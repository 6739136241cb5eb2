"""
URL configuration for the Stripe gateway app.

Routes:
    - GET payment-methods/<slug>/ - Publishable payment method configuration

All routes are prefixed with /api/v1/stripe/ when included in the main URLconf.
"""

from django.urls import path

from stripe_gateway.views import PaymentMethodConfigView

app_name = "stripe_gateway"

urlpatterns = [
    path(
        "payment-methods/<slug:slug>/",
        PaymentMethodConfigView.as_view(),
        name="payment_method_config",
    ),
]
