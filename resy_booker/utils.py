import time
from datetime import datetime
from urllib.parse import urlsplit, urlunsplit
from dateutil import parser as date_parser
from selenium.common.exceptions import NoSuchElementException, TimeoutException
from resy_booker.config import logger, SLEEP_TIME

def find_element_with_timing(driver, by, value, description):
    """
    Attempts to find an element with timing and logs the process.
    """
    start = time.perf_counter()
    try:
        element = driver.find_element(by, value)
        elapsed = time.perf_counter() - start
        logger.debug("Found '%s' (%s: '%s') in %.4f seconds.", description, by, value, elapsed)
        return element
    except NoSuchElementException:
        elapsed = time.perf_counter() - start
        logger.warning("Element '%s' (%s: '%s') not found in %.4f seconds.", description, by, value, elapsed)
        raise
    except TimeoutException:
        elapsed = time.perf_counter() - start
        logger.error("Timeout while searching for '%s' (%s: '%s') after %.4f seconds.", description, by, value, elapsed)
        raise

def find_elements_with_timing(driver, by, value, description):
    """
    Attempts to find multiple elements with timing and logs the process.
    An empty list is returned when nothing matches.
    """
    start = time.perf_counter()
    try:
        elements = driver.find_elements(by, value)
    except (NoSuchElementException, TimeoutException) as e:
        elapsed = time.perf_counter() - start
        logger.warning("Lookup of '%s' (%s: '%s') failed after %.4f seconds: %s", description, by, value, elapsed, e)
        return []
    elapsed = time.perf_counter() - start
    if elements:
        logger.debug("Found %d '%s' elements (%s: '%s') in %.4f seconds.", len(elements), description, by, value, elapsed)
    else:
        logger.info("No '%s' elements found (%s: '%s') in %.4f seconds.", description, by, value, elapsed)
    return elements

def wait(amt=SLEEP_TIME):
    """Fixed pause so the page can finish rendering."""
    time.sleep(amt)

def wait_until(target, sleep=time.sleep, clock=None):
    """
    Blocks until the given aware datetime. Returns at once when target is None
    or already in the past.
    """
    if target is None:
        return

    logger.info("waiting until %s", target.isoformat())
    current = clock() if clock else datetime.now(target.tzinfo)
    diff = (target - current).total_seconds()
    if diff > 0:
        sleep(diff)

def validate_date(date_str: str, fmt: str = "%Y-%m-%d"):
    """
    Parses a date string in the expected format and returns the date.
    """
    try:
        return datetime.strptime(date_str, fmt).date()
    except ValueError as e:
        logger.error("Invalid date '%s'. Expected format '%s'. Error: %s", date_str, fmt, e)
        raise ValueError(f"Invalid date '{date_str}'. Expected format {fmt}.") from e

def validate_party_size(party_size: str) -> int:
    try:
        size = int(party_size)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid party size '{party_size}'. Must be a whole number.") from e
    if size < 1:
        raise ValueError(f"Invalid party size '{party_size}'. Must be at least 1.")
    return size

def strip_query(url: str) -> str:
    """
    Drops the query string and fragment from a venue URL.
    """
    parts = urlsplit(url.strip())
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Invalid venue url '{url}'. Expected an http(s) URL.")
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))

def parse_book_time(value: str, tz, now=None):
    """
    Parses a start time such as "12:00PM" or "2024-07-01 09:59:58".
    Missing date parts default to today and naive values are localized to tz.
    """
    current = now or datetime.now(tz)
    try:
        parsed = date_parser.parse(value, default=current.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid book time '{value}'.") from e
    if parsed.tzinfo is None:
        parsed = tz.localize(parsed)
    return parsed
