from dataclasses import dataclass, field
from datetime import date as date_type, datetime
from enum import Enum
from typing import Any, Optional

class ClaimPolicy(Enum):
    """What happens after a slot claim fails."""
    AUTONOMOUS = "autonomous"  # move on to the next candidate
    SUPERVISED = "supervised"  # ask the operator first

class AttemptOutcome(Enum):
    BOOKED = "booked"
    NO_SLOT_AVAILABLE = "no_slot_available"
    TRANSIENT_ERROR = "transient_error"
    RETRY_LIMIT_EXCEEDED = "retry_limit_exceeded"
    OPERATOR_ABORTED = "operator_aborted"
    DRY_RUN = "dry_run"

@dataclass(frozen=True)
class BookingRequest:
    """A venue, date and party size, plus the instant to start booking at."""
    venue_url: str
    date: date_type
    party_size: int
    book_time: Optional[datetime] = None

    def query(self):
        return f"date={self.date:%Y-%m-%d}&seats={self.party_size}"

    def venue_page_url(self):
        return f"{self.venue_url}?{self.query()}"

@dataclass(frozen=True)
class Credentials:
    email: str
    password: str = field(repr=False)

@dataclass(frozen=True)
class RuntimeFlags:
    dry_run: bool = False
    headless: bool = False
    auto_quit: bool = False

@dataclass
class Slot:
    """A reservation button as rendered during one poll pass; label is its displayed time."""
    label: str
    is_notify_only: bool
    element: Any = field(repr=False)
