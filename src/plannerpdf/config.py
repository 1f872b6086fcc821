"""Configuration constants for planner generation."""

# Fonts
DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_BOLD_FONT_NAME = "Helvetica-Bold"
DEFAULT_FONT_SIZE = 10.0

# Colors
DEFAULT_FILL_COLOR = "#505050"
DEFAULT_OUTLINE_COLOR = "#000000"
DEFAULT_TEXT_COLOR = "#000000"

# Stroke width in points
DEFAULT_OUTLINE_THICKNESS = 1.0

# Layout, in millimeters
PAGE_PADDING_MM = 5.0
DAILY_SECTION_GAP_MM = 4.0

# Fraction of a day block used by its day-number badge.
DAY_BADGE_FACTOR = 0.25

# File output
DEFAULT_FILENAME_TEMPLATE = "planner_{year}.pdf"

# Calendar header labels, Monday first.
WEEKDAY_LABELS = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)

MONTH_LABELS = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)
