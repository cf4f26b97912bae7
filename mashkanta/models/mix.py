from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TrackType(Enum):
    FIXED = "fixed"
    VARIABLE = "variable"
    PRIME = "prime"
    MADAD = "madad"  # CPI-linked


TRACK_TYPE_LABELS: dict[TrackType, str] = {
    TrackType.FIXED: "ריבית קבועה",
    TrackType.VARIABLE: "ריבית משתנה",
    TrackType.PRIME: "פריים",
    TrackType.MADAD: "צמוד מדד",
}

# Annual percent
DEFAULT_INTEREST_RATES: dict[TrackType, Decimal] = {
    TrackType.FIXED: Decimal("4.5"),
    TrackType.VARIABLE: Decimal("3.8"),
    TrackType.PRIME: Decimal("5.2"),
    TrackType.MADAD: Decimal("2.1"),
}


@dataclass(frozen=True)
class Track:
    """One rate/term tranche of a blended mortgage."""
    id: str
    name: str
    type: TrackType
    amount: Decimal  # ILS
    interest_rate: Decimal  # Annual percent, e.g. Decimal("4.5")
    years: int
    percentage: Decimal = Decimal("0")  # Share of the mix as entered in the builder; informational only

    @property
    def label(self) -> str:
        return TRACK_TYPE_LABELS[self.type]


@dataclass(frozen=True)
class Mix:
    """A portfolio of tracks making up one mortgage.

    total_amount is what the borrower asked for; it is not forced to equal
    the sum of track amounts.
    """
    id: str
    name: str
    total_amount: Decimal
    tracks: tuple[Track, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)
    notes: str = ""

    @property
    def tracks_amount(self) -> Decimal:
        return sum((t.amount for t in self.tracks), Decimal("0"))

    @property
    def has_prime(self) -> bool:
        return any(t.type is TrackType.PRIME for t in self.tracks)
