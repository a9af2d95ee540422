import random
from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException, WebDriverException
from resy_booker import locators
from resy_booker.config import logger, SLEEP_TIME
from resy_booker.errors import SlotClaimError
from resy_booker.models import AttemptOutcome, ClaimPolicy, Slot
from resy_booker.utils import find_element_with_timing, find_elements_with_timing, wait

ABORT_KEY = "c"
ABORT_PROMPT = f"awaiting confirmation for next booking (type {ABORT_KEY} to exit): "

def _time_label(element, text):
    try:
        return element.find_element(*locators.RESERVATION_TIME).text.strip()
    except NoSuchElementException:
        lines = text.splitlines()
        return lines[0].strip() if lines else text

def discover_slots(driver):
    """
    Reads the reservation buttons currently rendered on the venue page.
    Buttons that go stale while being read are skipped; the next pass sees
    them again if they are still there.
    """
    slots = []
    for element in find_elements_with_timing(driver, *locators.RESERVATION_BUTTON, "reservation button"):
        try:
            text = element.text.strip()
            if text == locators.NOTIFY_LABEL:
                slots.append(Slot(label=text, is_notify_only=True, element=element))
                continue
            label = _time_label(element, text)
        except StaleElementReferenceException:
            logger.debug("reservation button went stale before it could be read")
            continue
        slots.append(Slot(label=label, is_notify_only=False, element=element))
    return slots

def claim_slot(driver, slot, pause=wait, sleep_time=SLEEP_TIME):
    """
    Clicks a slot and confirms it inside the "Book Now" iframe.
    Raises SlotClaimError when any step fails.
    """
    logger.info("slot available at %s, booking slot...", slot.label)
    try:
        slot.element.click()
        pause(sleep_time)

        logger.debug("switching to iframe")
        iframe = find_element_with_timing(driver, *locators.BOOK_NOW_IFRAME, "booking iframe")
        driver.switch_to.frame(iframe)
        pause(sleep_time)

        logger.debug("confirming")
        find_element_with_timing(driver, *locators.CONFIRM_BUTTON, "confirm button").click()
        pause(sleep_time)
    except WebDriverException as e:
        raise SlotClaimError(slot.label, e.msg or e.__class__.__name__) from e
    logger.info("slot booked")

def _leave_iframe(driver):
    try:
        driver.switch_to.default_content()
    except WebDriverException as e:
        logger.warning("could not switch back to the venue page: %s", e.msg or e.__class__.__name__)

def _operator_aborts(prompt):
    try:
        answer = prompt(ABORT_PROMPT)
    except EOFError:
        logger.warning("no operator input available, stopping")
        return True
    return answer.strip() == ABORT_KEY

def run_pass(driver, config, pause=wait, prompt=input, rng=random):
    """
    One poll pass: discover the rendered slots and try to claim each
    bookable one until a claim succeeds.
    """
    candidates = [slot for slot in discover_slots(driver) if not slot.is_notify_only]
    if not candidates:
        logger.info("no bookable slots rendered")
        return AttemptOutcome.NO_SLOT_AVAILABLE

    if config.shuffle:
        rng.shuffle(candidates)

    for slot in candidates:
        try:
            claim_slot(driver, slot, pause, config.sleep_time)
            return AttemptOutcome.BOOKED
        except SlotClaimError as e:
            logger.error("error booking slot: %s", e)
            _leave_iframe(driver)
            if config.policy is ClaimPolicy.SUPERVISED and _operator_aborts(prompt):
                logger.info("booking cancelled by operator")
                return AttemptOutcome.OPERATOR_ABORTED
    return AttemptOutcome.TRANSIENT_ERROR

def book_reservation(driver, config, pause=wait, prompt=input, rng=random):
    """
    Opens the venue page and polls it until a slot is booked, the operator
    aborts, or more than config.max_retries passes have failed.

    Returns the terminal AttemptOutcome: BOOKED, OPERATOR_ABORTED,
    RETRY_LIMIT_EXCEEDED, or DRY_RUN when the dry-run flag is on.
    """
    logger.info("booking reservation")
    driver.get(config.request.venue_page_url())
    pause(config.sleep_time)

    if config.flags.dry_run:
        logger.info("dry run, not booking slot")
        return AttemptOutcome.DRY_RUN

    attempt_count = 0
    while True:
        outcome = run_pass(driver, config, pause, prompt, rng)
        if outcome in (AttemptOutcome.BOOKED, AttemptOutcome.OPERATOR_ABORTED):
            return outcome

        attempt_count += 1
        logger.info("pass %d finished without a booking (%s)", attempt_count, outcome.value)
        if attempt_count > config.max_retries:
            logger.warning("giving up after %d passes", attempt_count)
            return AttemptOutcome.RETRY_LIMIT_EXCEEDED
        pause(config.sleep_time)
