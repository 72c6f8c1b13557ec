"""
Configuration module - app version, fallback entry text, request limits
"""
import os
from dotenv import load_dotenv
from whatsnew.utils.logger import logger

load_dotenv()

# Version of the running application, shown on the fallback entry
APP_VERSION = os.getenv('APP_VERSION', '1.0.0')

# Shown when a user has nothing new to see
FALLBACK_RELEASE = {
    'title': os.getenv('FALLBACK_TITLE', 'Minor Improvements'),
    'change_title': os.getenv('FALLBACK_CHANGE_TITLE', 'General Enhancements'),
    'change_description': os.getenv(
        'FALLBACK_CHANGE_DESCRIPTION', 'Bug fixes and performance improvements.'
    ),
}

# Upper bound on releases accepted in one request body
try:
    MAX_CATALOG_SIZE = int(os.getenv('MAX_CATALOG_SIZE', '1000'))
except ValueError:
    logger.warning("MAX_CATALOG_SIZE is not an integer, using default of 1000")
    MAX_CATALOG_SIZE = 1000

if 'APP_VERSION' not in os.environ:
    logger.info(f"APP_VERSION not set, defaulting to {APP_VERSION}")
