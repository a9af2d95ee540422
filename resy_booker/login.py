from selenium.common.exceptions import WebDriverException
from resy_booker import locators
from resy_booker.config import logger, HOME, LOGIN_SETTLE_TIME
from resy_booker.errors import AuthenticationError
from resy_booker.utils import find_element_with_timing, wait

def login(driver, config, pause=wait):
    """
    Logs in to Resy with the configured email and password.

    The home page is opened with the booking date and party size so the
    session lands on the right search once the login modal closes. Every
    step is followed by a fixed pause; there is no retry and any failure is
    raised as AuthenticationError.
    """
    logger.info("logging in")
    request = config.request
    credentials = config.credentials

    try:
        driver.get(f"{HOME}?{request.query()}")

        find_element_with_timing(driver, *locators.LOGIN_BUTTON, "Log in button").click()
        pause(config.sleep_time)
        find_element_with_timing(driver, *locators.EMAIL_LOGIN_BUTTON, "email login option").click()
        pause(config.sleep_time)

        logger.debug("filling out login form")
        find_element_with_timing(driver, *locators.EMAIL_INPUT, "email field").send_keys(credentials.email)
        find_element_with_timing(driver, *locators.PASSWORD_INPUT, "password field").send_keys(credentials.password)
        find_element_with_timing(driver, *locators.LOGIN_FORM, "login form").submit()
    except WebDriverException as e:
        logger.error("login failed: %s", e.msg or e.__class__.__name__)
        raise AuthenticationError(f"login failed: {e.msg or e.__class__.__name__}") from e

    logger.info("logged in")
    pause(LOGIN_SETTLE_TIME)
