"""Domain Types - enums shared by core rules, services and logs.

Invariants:
    - All valid states encoded as Enums - no raw string matching
    - str Enums: serialize to JSON log fields without custom encoders
"""

from enum import Enum


class PaymentTransition(str, Enum):
    """Effect of an invoice edit on its paid flag."""
    MARKED_PAID = "marked_paid"
    MARKED_UNPAID = "marked_unpaid"
    UNCHANGED = "unchanged"
