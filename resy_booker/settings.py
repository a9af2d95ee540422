import argparse
import math
import os
import pytz
from dataclasses import dataclass
from resy_booker.config import logger, DEFAULT_TIMEZONE, MAX_RETRIES, SLEEP_TIME
from resy_booker.errors import ConfigurationError, MissingArgument
from resy_booker.models import BookingRequest, ClaimPolicy, Credentials, RuntimeFlags
from resy_booker.utils import parse_book_time, strip_query, validate_date, validate_party_size

REQUIRED_OPTIONS = ("date", "venue_url", "party_size")

@dataclass(frozen=True)
class BookerConfig:
    """Everything a single booking run needs, fixed at start-up."""
    request: BookingRequest
    credentials: Credentials
    flags: RuntimeFlags = RuntimeFlags()
    policy: ClaimPolicy = ClaimPolicy.SUPERVISED
    shuffle: bool = True
    sleep_time: float = SLEEP_TIME
    max_retries: int = MAX_RETRIES
    browser_url: str = ""
    timezone: str = DEFAULT_TIMEZONE

def build_parser():
    # Required options are checked by hand so a missing one raises MissingArgument
    parser = argparse.ArgumentParser(
        prog="resy-booker",
        description="Book a Resy reservation as soon as a slot opens.",
    )
    parser.add_argument("--date", help="reservation date, YYYY-MM-DD (required)")
    parser.add_argument("--venue-url", help="Resy venue page URL (required)")
    parser.add_argument("--party-size", help="number of seats (required)")
    parser.add_argument(
        "--book-time",
        help="start booking at this time, e.g. 12:00PM or '2024-07-01 09:59:58'",
    )
    return parser

def env_flag(environ, name):
    """A flag is on whenever the variable is set, whatever its value."""
    return name in environ

def _env_number(environ, name, cast, default):
    raw = environ.get(name)
    if raw in (None, ""):
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    # float() parses "nan" and "inf"
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {raw!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {raw!r}")
    return value

def load_config(argv=None, environ=None):
    """
    Parses command line options and environment variables into a BookerConfig.
    Raises MissingArgument or ConfigurationError before any browser is started.
    """
    environ = os.environ if environ is None else environ
    logger.info("parsing command line arguments")
    options = build_parser().parse_args(argv)
    logger.debug("options: %s", vars(options))

    for name in REQUIRED_OPTIONS:
        if getattr(options, name) is None:
            raise MissingArgument(f"missing required option: --{name.replace('_', '-')}")

    tz_name = environ.get("BOOK_TIMEZONE") or DEFAULT_TIMEZONE
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError as e:
        raise ConfigurationError(f"unknown BOOK_TIMEZONE {tz_name!r}") from e

    try:
        request = BookingRequest(
            venue_url=strip_query(options.venue_url),
            date=validate_date(options.date),
            party_size=validate_party_size(options.party_size),
            book_time=parse_book_time(options.book_time, tz) if options.book_time else None,
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    email = environ.get("RESY_EMAIL")
    password = environ.get("RESY_PASSWORD")
    if not email or not password:
        raise ConfigurationError("RESY_EMAIL and RESY_PASSWORD must be set")

    config = BookerConfig(
        request=request,
        credentials=Credentials(email=email, password=password),
        flags=RuntimeFlags(
            dry_run=env_flag(environ, "DRY_RUN"),
            headless=env_flag(environ, "HEADLESS"),
            auto_quit=env_flag(environ, "QUIT_DRIVER"),
        ),
        policy=ClaimPolicy.AUTONOMOUS if env_flag(environ, "AUTONOMOUS") else ClaimPolicy.SUPERVISED,
        shuffle=not env_flag(environ, "NO_SHUFFLE"),
        sleep_time=_env_number(environ, "SLEEP_TIME", float, SLEEP_TIME),
        max_retries=_env_number(environ, "MAX_RETRIES", int, MAX_RETRIES),
        browser_url=environ.get("BROWSER_URL", ""),
        timezone=tz_name,
    )
    logger.info("command line arguments parsed")
    return config
