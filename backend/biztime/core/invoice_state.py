"""Invoice Payment Rule - computes paid_date when an invoice is edited.

Invariants:
    - paid_date is non-null iff paid is true, provided every write goes
      through next_paid_date()
    - false -> true sets paid_date to `today`
    - true -> false clears paid_date
    - unchanged flag keeps the existing paid_date untouched
"""

from datetime import date

from biztime.core.domain_types import PaymentTransition


def classify_transition(current_paid: bool, requested_paid: bool) -> PaymentTransition:
    if requested_paid and not current_paid:
        return PaymentTransition.MARKED_PAID
    if not requested_paid and current_paid:
        return PaymentTransition.MARKED_UNPAID
    return PaymentTransition.UNCHANGED


def next_paid_date(
    current_paid: bool,
    current_paid_date: date | None,
    requested_paid: bool,
    today: date,
) -> date | None:
    """Return the paid_date to persist alongside `requested_paid`. Pure, no IO."""
    transition = classify_transition(current_paid, requested_paid)
    if transition is PaymentTransition.MARKED_PAID:
        return today
    if transition is PaymentTransition.MARKED_UNPAID:
        return None
    return current_paid_date
