"""
Protocol definitions for pluggable payment collaborators.

A payment method record does not hard-code the classes it delegates to.
It resolves them from settings and only relies on these contracts:

Available Protocols:
    PaymentGateway: Gateway built from a payment method's credentials
    PaymentSourceRecord: Stored payment source usable with a payment method

Usage:
    from core.protocols import PaymentGateway

    def client_for(gateway: PaymentGateway):
        return gateway.client

Note:
    - Protocols are primarily for type checking
    - @runtime_checkable allows isinstance() checks in tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any


@runtime_checkable
class PaymentGateway(Protocol):
    """
    Protocol for gateways built from payment method options.

    Example:
        class StripeGateway:
            def __init__(self, options: GatewayOptions): ...
            test_mode: bool
            @property
            def client(self): ...
    """

    test_mode: bool

    @property
    def client(self) -> Any:
        """Return the SDK client bound to this gateway's credentials."""
        ...


@runtime_checkable
class PaymentSourceRecord(Protocol):
    """
    Protocol for stored payment sources.

    Any model with a payment_method relation and a reusable() check
    can back a payment method's sources.
    """

    payment_method: Any

    def reusable(self) -> bool:
        """Return True if the source can be charged again later."""
        ...
