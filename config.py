"""
config.py - Application Configuration

Centralized configuration for the advocate directory API including:
- Environment settings
- Record source selection
- Pagination defaults
- Validation constants
- Logging configuration
"""

import os
import logging

from dotenv import load_dotenv, find_dotenv

# ==============================================================================
# LOGGING CONFIGURATION
# ==============================================================================

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

# ==============================================================================
# ENVIRONMENT SETTINGS
# ==============================================================================

# A .env file is optional; real environment variables always win
env_file = find_dotenv(usecwd=True)
if env_file:
    load_dotenv(env_file)
    logger.info(f"Loaded environment from: {env_file}")

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

# ==============================================================================
# RECORD SOURCE CONFIGURATION
# ==============================================================================

# "seed" serves the static seed collection, "database" reads the advocates table
RECORD_SOURCE_SEED = "seed"
RECORD_SOURCE_DATABASE = "database"

RECORD_SOURCE = os.getenv("RECORD_SOURCE", RECORD_SOURCE_SEED).strip().lower()

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "postgresql://postgres@localhost:5432/solaceassignment"
)

# ==============================================================================
# PAGINATION CONFIGURATION
# ==============================================================================

DEFAULT_PAGE = int(os.getenv("DEFAULT_PAGE", 1))
DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", 20))
MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", 100))

# ==============================================================================
# VALIDATION CONSTANTS
# ==============================================================================

VALID_DEGREES = ["MD", "PhD", "MSW"]

PHONE_NUMBER_DIGITS = 10

# ==============================================================================
# ERROR MESSAGES
# ==============================================================================

INTERNAL_SERVER_MSG_ERROR = "Internal server error"
FETCH_ADVOCATES_MSG_ERROR = "Failed to fetch advocates"
