import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def parse_weekend_days(value: str) -> tuple[int, ...]:
    """"4,5" -> (4, 5); weekday numbers as in datetime.weekday()."""
    return tuple(int(part) for part in value.split(",") if part.strip())
