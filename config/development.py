import os

from config import parse_weekend_days

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

ENGINE_CONFIG = {
    "weekend_days": parse_weekend_days(os.getenv("WEEKEND_DAYS", "4,5")),
    "full_work_day_minutes": int(os.getenv("FULL_WORK_DAY_MINUTES", "540")),
    "time_picker_interval": int(os.getenv("TIME_PICKER_INTERVAL", "15")),
}
