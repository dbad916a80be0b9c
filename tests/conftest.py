"""
Shared fixtures for the tool rental test suite.
"""

from datetime import date

import pytest

from toolrental.data import DEFAULT_CATALOG, LADDER
from toolrental.schema import ChargePolicy


def make_policy(weekday: bool = True, weekend: bool = True, holiday: bool = True, cents: int = 199) -> ChargePolicy:
    return ChargePolicy(
        tool_type="Test",
        daily_charge_cents=cents,
        charged_on_weekday=weekday,
        charged_on_weekend=weekend,
        charged_on_holiday=holiday,
    )


@pytest.fixture
def all_days_policy():
    """Policy that bills every day."""
    return make_policy()


@pytest.fixture
def no_days_policy():
    """Policy that bills no day at all."""
    return make_policy(weekday=False, weekend=False, holiday=False)


@pytest.fixture
def ladder_policy():
    return DEFAULT_CATALOG.lookup_policy(LADDER)


@pytest.fixture
def december_checkout():
    """Sunday; the following 31 days run Dec 2 2024 - Jan 1 2025."""
    return date(2024, 12, 1)
