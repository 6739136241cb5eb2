"""
Stripe payment method integration.

Stores Stripe payment method configuration records, identifies each
record by a unique slug, and exposes the lookups checkout code needs
(records by slug, payment to PaymentIntent reconciliation, Stripe
dashboard links, refund reason).

Calls to the Stripe API, webhook verification and the PaymentIntent
lifecycle are handled elsewhere.
"""
