"""
Base service layer patterns for business logic encapsulation.

Services encapsulate business logic separate from views and models.
Views handle HTTP concerns, models handle data, services handle logic.

Usage:
    from core.services import BaseService

    class SlugAssignmentService(BaseService):
        @classmethod
        def assign(cls, payment_method):
            with cls.atomic():
                entry = SlugEntry.objects.create(...)

            cls.get_logger().info("Assigned slug %s", entry.slug)
            return entry
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from django.db import transaction

if TYPE_CHECKING:
    from collections.abc import Generator


class BaseService:
    """
    Base class for service layer classes.

    Provides common utilities for services:
    - Logging setup per service
    - Database transaction management

    Design Notes:
        - Use @staticmethod or @classmethod (no instance state)
        - Raise exceptions from core.exceptions for failures
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    @contextmanager
    def atomic(cls) -> Generator[None, None, None]:
        """
        Execute operations in a database transaction.

        Nested use creates a savepoint, so a failure inside the block
        rolls back only the block and leaves the outer transaction usable.

        Example:
            with cls.atomic():
                SlugEntry.objects.create(payment_method=pm, slug=slug)
        """
        with transaction.atomic():
            yield
