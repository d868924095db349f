SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Fixed values so tests do not depend on the environment
ENGINE_CONFIG = {
    "weekend_days": (4, 5),
    "full_work_day_minutes": 540,
    "time_picker_interval": 15,
}
