from resy_booker.config import logger, set_log_timezone
from resy_booker.driver import setup_driver
from resy_booker.errors import ConfigurationError
from resy_booker.login import login
from resy_booker.models import AttemptOutcome
from resy_booker.reservation import book_reservation
from resy_booker.settings import load_config
from resy_booker.utils import wait_until

def finalize(driver, flags, prompt=input):
    """
    Releases the browser. Unless auto-quit is set, the window stays open
    until the operator presses enter so the result can be inspected.
    """
    try:
        if not flags.auto_quit:
            prompt("press enter to quit")
    except EOFError:
        logger.info("no operator input available, quitting")
    finally:
        driver.quit()
        logger.info("WebDriver session closed.")

def main(argv=None, environ=None, prompt=input):
    """
    Runs one booking attempt end to end and returns its AttemptOutcome.
    """
    config = load_config(argv, environ)
    set_log_timezone(config.timezone)
    request = config.request

    logger.info("starting web driver")
    driver = setup_driver(headless=config.flags.headless, browser_url=config.browser_url)
    try:
        login(driver, config)
        wait_until(request.book_time)

        logger.info("beginning reservation booking for venue: %s", request.venue_url)
        outcome = book_reservation(driver, config, prompt=prompt)
    finally:
        finalize(driver, config.flags, prompt)

    if outcome is AttemptOutcome.BOOKED:
        logger.info("reservation complete")
    else:
        logger.info("reservation not booked: %s", outcome.value)
    return outcome

def cli():
    """Console script entrypoint."""
    try:
        main()
    except ConfigurationError as e:
        logger.error("configuration error: %s", e)
        raise SystemExit(2) from e

if __name__ == '__main__':
    cli()
