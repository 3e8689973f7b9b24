import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_console_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

BUSINESS_TIMEZONE = "Asia/Jakarta"
WORK_START = "09:00"
LATE_GRACE_MINUTES = 15

OPENAI_API_KEY = None
VISION_MODEL = "gpt-4.1-mini"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
