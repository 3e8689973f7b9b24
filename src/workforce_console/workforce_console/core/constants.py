"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_BUSINESS_TIMEZONE = "Asia/Jakarta"
DEFAULT_WORK_START = time(9, 0)
DEFAULT_LATE_GRACE_MINUTES = 15
DEFAULT_HISTORY_LIMIT = 30

DEFAULT_NATIONALITY = "WNI"
DEFAULT_VALID_UNTIL = "SEUMUR HIDUP"

DEFAULT_VISION_MODEL = "gpt-4.1-mini"

WHATSAPP_SHARE_BASE = "https://wa.me/"
