"""
Stripe gateway services.

Services:
    SlugAssignmentService: Assign unique slugs to new payment methods
"""

from stripe_gateway.services.slugs import (
    SlugAssignmentService,
    default_slug,
    random_slug,
)

__all__ = [
    "SlugAssignmentService",
    "default_slug",
    "random_slug",
]
