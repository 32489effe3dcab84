import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_db"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

DEFAULT_SHIFT_HOURS = float(os.getenv("DEFAULT_SHIFT_HOURS", "8"))

LOG_DIR = os.getenv("LOG_DIR", "/var/log/warehouse-timesheet")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
