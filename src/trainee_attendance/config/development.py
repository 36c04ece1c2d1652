import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "lms_attendance"),
}

# Institution standard hours, used when a course has no scheduled times.
WORK_START_TIME = os.getenv("WORK_START_TIME", "9:00")
WORK_END_TIME = os.getenv("WORK_END_TIME", "18:00")

# Hour at which the training day rolls over (0 = midnight).
TRAINING_DAY_ROLLOVER_HOUR = int(os.getenv("TRAINING_DAY_ROLLOVER_HOUR", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True

# If enabled, bootstrap applies schema.sql (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
