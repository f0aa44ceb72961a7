"""Clearance status calculator.

``classify`` is pure: the caller always supplies ``today`` so results are
reproducible and tests can pin the date.

Unknown expiry policy: a missing or unparseable expiry date classifies as
EXPIRED with ``days_remaining=None``. Clearance that cannot be established
blocks access rather than granting it.
"""

from __future__ import annotations

from datetime import date

from ..common.datetime_utils import DateLike, coerce_date
from ..core.constants import WARNING_THRESHOLD_DAYS
from ..core.enums import SubscriptionStatus
from .model import ClearanceInfo

UNKNOWN_EXPIRY_POLICY = SubscriptionStatus.EXPIRED


def days_between(today: date, expiry: date) -> int:
    """Whole calendar days from ``today`` until ``expiry`` (negative once past)."""
    return (expiry - today).days


def classify(expiry_date: DateLike, today: date, *, warning_days: int = WARNING_THRESHOLD_DAYS) -> ClearanceInfo:
    expiry = coerce_date(expiry_date)
    if expiry is None:
        return ClearanceInfo(status=UNKNOWN_EXPIRY_POLICY, days_remaining=None)

    days_remaining = days_between(today, expiry)
    if days_remaining < 0:
        status = SubscriptionStatus.EXPIRED
    elif days_remaining <= warning_days:
        status = SubscriptionStatus.WARNING
    else:
        status = SubscriptionStatus.VALID
    return ClearanceInfo(status=status, days_remaining=days_remaining)
