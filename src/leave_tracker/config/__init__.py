import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, defaulting to development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "leave_tracker.config.production"

    if env in {"test", "testing"}:
        return "leave_tracker.config.testing"

    return "leave_tracker.config.development"


def parse_approvers(value: str) -> tuple:
    return tuple(name.strip() for name in (value or "").split(",") if name.strip())
