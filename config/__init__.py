"""Settings modules, one per environment.

APP_ENV picks the module (development by default). SETTINGS_MODULE, when set,
names a module directly and wins over APP_ENV.
"""
import os

_MODULE_BY_ENV = {
    "dev": "config.development",
    "development": "config.development",
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    explicit = os.getenv("SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    return _MODULE_BY_ENV.get(env, "config.development")
