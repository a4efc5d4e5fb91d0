import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, defaulting to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "pankti_manager.config.production"

    if env in {"test", "testing"}:
        return "pankti_manager.config.testing"

    return "pankti_manager.config.development"
