"""
Core Application - Infrastructure & Base Classes

Generic, reusable base classes shared by the domain apps
(checkout, stripe_gateway). No business logic lives here.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key

Services (import from core.services):
    - BaseService: Logger and transaction helpers for service classes

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ConflictError: State conflicts (duplicates, etc.)

Protocols (import from core.protocols):
    - PaymentGateway: Gateway built from payment method options
    - PaymentSourceRecord: Stored payment source contract

Note:
    Django models and model mixins are NOT imported here to avoid
    AppRegistryNotReady errors. Import them directly from their modules.
"""

from .exceptions import BaseApplicationError, ConflictError
from .protocols import PaymentGateway, PaymentSourceRecord
from .services import BaseService

__all__ = [
    "BaseService",
    "BaseApplicationError",
    "ConflictError",
    "PaymentGateway",
    "PaymentSourceRecord",
]
