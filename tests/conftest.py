import os
import tempfile
from datetime import date
from unittest.mock import MagicMock

import pytest

# Keep the rotating log out of the working tree
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "resy_booker_tests.log"))

from resy_booker.models import BookingRequest, ClaimPolicy, Credentials, RuntimeFlags  # noqa: E402
from resy_booker.settings import BookerConfig  # noqa: E402


@pytest.fixture
def booking_request():
    return BookingRequest(
        venue_url="https://resy.com/cities/ny/hip-cool-venue",
        date=date(2024, 7, 15),
        party_size=2,
    )


@pytest.fixture
def make_config(booking_request):
    def _make(**overrides):
        values = dict(
            request=booking_request,
            credentials=Credentials(email="diner@example.com", password="hunter2"),
            flags=RuntimeFlags(),
            policy=ClaimPolicy.AUTONOMOUS,
            shuffle=False,
            sleep_time=0,
        )
        values.update(overrides)
        return BookerConfig(**values)
    return _make


@pytest.fixture
def driver():
    return MagicMock(name="driver")


@pytest.fixture
def pause():
    return MagicMock(name="pause")
