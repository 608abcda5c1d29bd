# Configuration file for Interest Calculator Application

import logging
import os

from dotenv import load_dotenv

from validation import ValidationPolicy

# Load environment variables from .env file
load_dotenv()

# Application Settings
APP_NAME = "Interest Calculator"
APP_VERSION = "2.0.0"

# Server Settings
HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', 3000))
OPEN_BROWSER = os.environ.get('OPEN_BROWSER', 'false').strip().lower() in ('1', 'true', 'yes')

# Logging Settings
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Validation Settings
VALIDATION_POLICY = ValidationPolicy.from_value(os.environ.get('INTEREST_VALIDATION_POLICY', 'enforce'))

# Default Values
DEFAULT_SIMPLE_RATE = "10"
DEFAULT_COMPOUND_RATE = "5"
CURRENCY_SYMBOL = "₹"

# UI Settings
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 640
PADDING = 16
RATE_SLIDER_MIN = 0.0
RATE_SLIDER_MAX = 100.0


def configure_logging(app=None, level=None):
    """Apply LOG_LEVEL to the root logger and, if given, the Flask app logger"""
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)
    if app is not None:
        app.logger.setLevel(log_level)
    return log_level
