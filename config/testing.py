import os
import tempfile

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_test_db"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

DEFAULT_SHIFT_HOURS = 8.0

LOG_DIR = os.getenv("LOG_DIR", os.path.join(tempfile.gettempdir(), "warehouse-timesheet-logs"))
LOG_LEVEL = "WARNING"
LOG_TO_CONSOLE = False
