"""Canonical fixtures shared across engine and API tests.

Fixture mix: 1,000,000 ILS split across fixed (4.5%, 25y), prime (5.2%, 30y)
and CPI-linked (2.1%, 15y) tracks.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from mashkanta.models.mix import Mix, Track, TrackType
from tests.factories import make_track


@pytest.fixture
def fixed_track() -> Track:
    """1M at 5% for 25 years."""
    return make_track()


@pytest.fixture
def canonical_mix() -> Mix:
    return Mix(
        id="mix-a",
        name="תמהיל מאוזן",
        total_amount=Decimal("1000000"),
        tracks=(
            make_track("fixed", "400000", "4.5", 25, TrackType.FIXED, "40"),
            make_track("prime", "350000", "5.2", 30, TrackType.PRIME, "35"),
            make_track("madad", "250000", "2.1", 15, TrackType.MADAD, "25"),
        ),
        created_at=datetime(2025, 1, 1),
    )


@pytest.fixture
def variable_mix() -> Mix:
    """No prime: scenario rate moves apply to every track."""
    return Mix(
        id="mix-b",
        name="קבועה ומשתנה",
        total_amount=Decimal("800000"),
        tracks=(
            make_track("fixed", "400000", "4.5", 20, TrackType.FIXED),
            make_track("variable", "400000", "3.8", 20, TrackType.VARIABLE),
        ),
    )
