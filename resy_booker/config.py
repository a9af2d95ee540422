import logging
import os
import pytz
from datetime import datetime
from logging.handlers import RotatingFileHandler

# Home page of resy
HOME = "http://resy.com"
# Seconds to wait between browser actions
SLEEP_TIME = 0.5
# Seconds to wait after submitting the login form
LOGIN_SETTLE_TIME = 2
# Failed poll passes tolerated before giving up
MAX_RETRIES = 10
# Resy's home market; bare --book-time values are read in this zone
DEFAULT_TIMEZONE = "America/New_York"

class BookingTimeFormatter(logging.Formatter):
    """Custom formatter to log times in the booking time zone."""
    tz = pytz.timezone(DEFAULT_TIMEZONE)

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        return dt.strftime(datefmt or "%Y-%m-%d %H:%M:%S %Z")

def set_log_timezone(name):
    """Render log timestamps in the given pytz zone from now on."""
    BookingTimeFormatter.tz = pytz.timezone(name)

# Log format and date format
log_format = "%(asctime)s %(levelname)s: %(message)s"
date_format = "%Y-%m-%d %H:%M:%S %Z"
log_file = os.environ.get("LOG_FILE") or "resy_booker.log"
log_level = logging.getLevelName((os.environ.get("LOG_LEVEL") or "INFO").upper())
if not isinstance(log_level, int):
    log_level = logging.INFO

# Create rotating file handler, the file is only opened on the first record
file_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=3, delay=True)
file_formatter = BookingTimeFormatter(fmt=log_format, datefmt=date_format)
file_handler.setFormatter(file_formatter)

# Create console handler
console_handler = logging.StreamHandler()
console_formatter = BookingTimeFormatter(fmt=log_format, datefmt=date_format)
console_handler.setFormatter(console_formatter)

# Configure package logger
logger = logging.getLogger("resy_booker")
logger.setLevel(log_level)
if not logger.handlers:
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
