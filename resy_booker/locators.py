"""Every Resy DOM locator the booker relies on.

The site markup is not under our control. When Resy changes its pages this
is the only module that should need editing.
"""

from selenium.webdriver.common.by import By

# Login flow
LOGIN_BUTTON = (By.XPATH, '//button[normalize-space(text())="Log in"]')
EMAIL_LOGIN_BUTTON = (By.XPATH, '//div[@class="AuthView__Footer"]/button')
EMAIL_INPUT = (By.XPATH, '//input[@name="email"]')
PASSWORD_INPUT = (By.XPATH, '//input[@name="password"]')
LOGIN_FORM = (By.XPATH, '//form[@name="login_form"]')

# Venue page
RESERVATION_BUTTON = (By.XPATH, '//button[contains(@class, "ReservationButton")]')
RESERVATION_TIME = (By.CLASS_NAME, "ReservationButton__time")
NOTIFY_LABEL = "Notify"

# Booking widget
BOOK_NOW_IFRAME = (By.XPATH, '//iframe[@title="Resy - Book Now"]')
CONFIRM_BUTTON = (By.XPATH, '//div[@class="SummaryPage__book"]/button')
