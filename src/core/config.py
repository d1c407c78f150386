"""
Configuration constants and environment setup.
"""

import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# LESSON SCHEDULE API (from environment)
# =============================================================================

API_BASE_URL = os.environ.get("LESSON_API_BASE_URL", "http://localhost:8000")
API_TOKEN = os.environ.get("LESSON_API_TOKEN", "")
API_TIMEOUT_SECONDS = float(os.environ.get("LESSON_API_TIMEOUT_SECONDS", "5"))
LESSON_SCHEDULES_PATH = "/lesson-schedules/"
LOGIN_PATH = os.environ.get("LESSON_LOGIN_PATH", "/inventory/tutor/login")

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

DEFAULT_EVENT_COLOR = "#FFDDC1"
DEFAULT_EVENT_DURATION = timedelta(hours=1)

GRID_WEEKS = 6
DAYS_PER_WEEK = 7
GRID_CELLS = GRID_WEEKS * DAYS_PER_WEEK

# Sunday-first column headers
WEEKDAY_LABELS = ["日", "月", "火", "水", "木", "金", "土"]

DRAFT_DATE_FORMAT = "%Y-%m-%d"
DRAFT_TIME_FORMAT = "%H:%M"

# =============================================================================
# DEVELOPMENT API CONFIGURATION
# =============================================================================

DEV_API_TOKEN = os.environ.get("DEV_API_TOKEN", "dev-token")
DEV_API_HOST = os.environ.get("DEV_API_HOST", "127.0.0.1")
DEV_API_PORT = int(os.environ.get("DEV_API_PORT", "8000"))
DEV_API_DEBUG = os.environ.get("DEV_API_DEBUG", "false").lower() == "true"
DEV_API_SEED = os.environ.get("DEV_API_SEED", "true").lower() == "true"
API_VERSION = "1.0.0"
