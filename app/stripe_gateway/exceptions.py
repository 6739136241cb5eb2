"""
Exceptions for the Stripe gateway app.

Exception Hierarchy:
    StripeGatewayError (base, inherits BaseApplicationError)
    ├── SlugAssignmentError - No unique slug found within the attempt budget
    ├── GatewayConfigurationError - Gateway cannot be built from the record
    └── RefundReasonNotConfiguredError - Configured refund reason is missing

    SlugAlreadyAssignedError - Record already has a slug (inherits ConflictError)

Usage:
    from stripe_gateway.exceptions import SlugAssignmentError

    try:
        StripePaymentMethod.objects.create(name="Stripe", api_key="sk_test_x")
    except SlugAssignmentError as e:
        logger.error("Could not create payment method: %s", e)
"""

from __future__ import annotations

from core.exceptions import BaseApplicationError, ConflictError


class StripeGatewayError(BaseApplicationError):
    """Base exception for the Stripe gateway app."""

    default_error_code: str = "STRIPE_GATEWAY_ERROR"


class SlugAssignmentError(StripeGatewayError):
    """
    Raised when every slug candidate was already taken.

    Each candidate after the first is 128 random bits, so reaching
    this almost always means the store is failing inserts for another
    reason. The enclosing payment method creation is rolled back.
    """

    default_error_code: str = "SLUG_ASSIGNMENT_FAILED"


class GatewayConfigurationError(StripeGatewayError):
    """
    Raised when a gateway cannot be built from a payment method.

    Example:
        raise GatewayConfigurationError(
            "Stripe API key is not configured",
            details={"test_mode": True},
        )
    """

    default_error_code: str = "GATEWAY_NOT_CONFIGURED"


class RefundReasonNotConfiguredError(StripeGatewayError):
    """
    Raised when STRIPE_REFUND_REASON_NAME has no matching RefundReason.

    This is a deployment error: refunds coming from Stripe cannot be
    recorded until the reason exists.
    """

    default_error_code: str = "REFUND_REASON_NOT_CONFIGURED"


class SlugAlreadyAssignedError(ConflictError):
    """Raised when assigning a slug to a payment method that already has one."""

    default_error_code: str = "SLUG_ALREADY_ASSIGNED"
