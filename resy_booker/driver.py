from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from resy_booker.config import logger

PAGE_LOAD_TIMEOUT = 30

def build_options(headless=False):
    """
    Chrome options for the booking session.
    """
    options = webdriver.ChromeOptions()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--window-size=1920,1080")
    return options

def setup_driver(headless=False, browser_url=""):
    """
    Initialize a Chrome webdriver, local or on a remote Selenium endpoint.
    """
    logger.info("Starting driver setup.")
    options = build_options(headless)

    try:
        if browser_url:
            logger.info("Initializing remote WebDriver at URL: %s", browser_url)
            driver = webdriver.Remote(command_executor=browser_url, options=options)
        else:
            logger.info("Initializing local Chrome WebDriver (headless=%s).", headless)
            driver = webdriver.Chrome(options=options)
    except WebDriverException:
        logger.critical("WebDriver initialization failed.", exc_info=True)
        raise

    driver.set_page_load_timeout(PAGE_LOAD_TIMEOUT)
    logger.info("WebDriver setup completed successfully.")
    return driver
