"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PHONE_SUFFIX_LENGTH = 4

LOOKUP_ERROR_SECONDS = 2
PUNCH_MESSAGE_SECONDS = 3

SNAPSHOT_WIDTH = 320
SNAPSHOT_HEIGHT = 240
SNAPSHOT_JPEG_QUALITY = 80

REPORT_DAYS = 7
MAX_SHIFT_HOURS = 14
MAX_PAIR_HOURS = 24

ASSISTANT_LOG_LIMIT = 50
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

DEFAULT_WEBHOOK_TIMEOUT = 10
DEFAULT_TIMEZONE = "America/Sao_Paulo"

WEEKDAY_LABELS = ("Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom")
WEEKDAY_SHORT_NAMES = ("seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom.")
