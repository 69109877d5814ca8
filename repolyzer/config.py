"""Configuration constants for repolyzer."""

import os
import tempfile

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

# Contributor key used when a commit has no author name
UNKNOWN_AUTHOR = ">UNKNOWN<"

SECONDS_PER_DAY = 86_400
SECONDS_PER_YEAR = 31_536_000

# Slots in the trailing-year commit calendar
CALENDAR_DAYS = 365

# Heat grid intensity levels: none, low, more, even more, a lot
INTENSITY_LEVELS = 5
INTENSITY_SYMBOLS = ["~", "·", "▪", "●", "⬟"]

# Named slices in the contributor pie chart
TOP_CONTRIBUTORS = 5
OTHERS_LABEL = "Others"

# Pie slice colors: five named contributors, then "Others"
SLICE_COLORS = ["#ff6384", "#36a2eb", "#ffce56", "#4bc0c0", "#9966ff", "#ff9f40"]

# Width of a 100% share bar in the contributor table
SHARE_BAR_WIDTH = 20

# Width of the longest bar in the weekday histogram
WEEKDAY_BAR_WIDTH = 20

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Environment settings
CLONE_DIR = os.getenv("REPOLYZER_CLONE_DIR", tempfile.gettempdir())
LOG_LEVEL = os.getenv("REPOLYZER_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("REPOLYZER_LOG_FILE")
