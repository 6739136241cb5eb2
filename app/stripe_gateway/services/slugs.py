"""
Slug assignment for Stripe payment methods.

The only payment method of its kind gets a readable slug, "test" or
"live" depending on its mode. Every other payment method gets 32 random
hex characters.

The unique index on SlugEntry.slug is what guarantees uniqueness. The
existence check before each insert only skips candidates that are
known to be taken. Each insert runs in a savepoint, and an
IntegrityError (another request claimed the slug first) moves on to
the next candidate.

Usage:
    from stripe_gateway.services import SlugAssignmentService

    entry = SlugAssignmentService.assign(payment_method)
    entry.slug  # "live"
"""

from __future__ import annotations

import secrets
from itertools import islice
from typing import TYPE_CHECKING

from django.conf import settings
from django.db import IntegrityError

from core.services import BaseService
from stripe_gateway.exceptions import SlugAlreadyAssignedError, SlugAssignmentError
from stripe_gateway.models import SlugEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stripe_gateway.models import StripePaymentMethod

RANDOM_SLUG_BYTES = 16


def default_slug(test_mode: bool) -> str:
    """Readable slug for the only payment method of its kind."""
    return "test" if test_mode else "live"


def random_slug() -> str:
    """128 random bits as 32 lowercase hex characters."""
    return secrets.token_hex(RANDOM_SLUG_BYTES)


class SlugAssignmentService(BaseService):
    """Creates the SlugEntry of a newly inserted payment method."""

    @classmethod
    def candidates(cls, payment_method: StripePaymentMethod) -> Iterator[str]:
        """
        Yield slugs to try, in order.

        The readable default comes first only when this is the sole
        payment method of its class; random slugs follow indefinitely.
        """
        if type(payment_method).objects.count() == 1:
            yield default_slug(payment_method.test_mode)

        while True:
            yield random_slug()

    @classmethod
    def is_taken(cls, slug: str) -> bool:
        """Whether a SlugEntry already uses ``slug``."""
        return SlugEntry.objects.filter(slug=slug).exists()

    @classmethod
    def assigned_slug(cls, payment_method: StripePaymentMethod) -> str | None:
        """Slug already assigned to ``payment_method``, if any."""
        return (
            SlugEntry.objects.filter(payment_method_id=payment_method.pk)
            .values_list("slug", flat=True)
            .first()
        )

    @staticmethod
    def _already_assigned(
        payment_method: StripePaymentMethod, slug: str
    ) -> SlugAlreadyAssignedError:
        return SlugAlreadyAssignedError(
            f"Payment method {payment_method.pk} already has slug {slug!r}",
            details={"payment_method_id": payment_method.pk, "slug": slug},
        )

    @classmethod
    def assign(
        cls,
        payment_method: StripePaymentMethod,
        candidates: Iterable[str] | None = None,
        max_attempts: int | None = None,
    ) -> SlugEntry:
        """
        Create a SlugEntry for ``payment_method``.

        Args:
            payment_method: Saved payment method without a slug
            candidates: Slugs to try (defaults to ``cls.candidates``)
            max_attempts: Candidates to try before giving up
                (defaults to settings.STRIPE_SLUG_MAX_ATTEMPTS)

        Returns:
            The created SlugEntry

        Raises:
            SlugAlreadyAssignedError: the payment method already has a slug
            SlugAssignmentError: no candidate could be inserted
        """
        logger = cls.get_logger()

        existing = cls.assigned_slug(payment_method)
        if existing is not None:
            raise cls._already_assigned(payment_method, existing)

        if max_attempts is None:
            max_attempts = settings.STRIPE_SLUG_MAX_ATTEMPTS
        if candidates is None:
            candidates = cls.candidates(payment_method)

        attempts = 0
        for slug in islice(candidates, max_attempts):
            attempts += 1

            if cls.is_taken(slug):
                logger.debug("Slug %r is taken, trying another", slug)
                continue

            try:
                with cls.atomic():
                    entry = SlugEntry.objects.create(
                        payment_method=payment_method,
                        slug=slug,
                    )
            except IntegrityError:
                # The one-to-one on payment_method fails too when another
                # request assigned this record first.
                claimed = (
                    SlugEntry.objects.filter(payment_method_id=payment_method.pk)
                    .values_list("slug", flat=True)
                    .first()
                )
                if claimed is not None:
                    logger.warning(
                        "Payment method %s was assigned slug %r concurrently",
                        payment_method.pk,
                        claimed,
                    )
                    raise cls._already_assigned(payment_method, claimed) from None

                logger.warning(
                    "Slug %r was claimed concurrently, retrying for payment method %s",
                    slug,
                    payment_method.pk,
                )
                continue

            logger.info(
                "Assigned slug %r to payment method %s after %d attempt(s)",
                slug,
                payment_method.pk,
                attempts,
            )
            return entry

        logger.error(
            "Could not assign a slug to payment method %s after %d attempt(s)",
            payment_method.pk,
            attempts,
        )
        raise SlugAssignmentError(
            f"Could not assign a unique slug after {attempts} attempt(s)",
            details={"payment_method_id": payment_method.pk, "attempts": attempts},
        )
