import importlib
import os
from types import ModuleType

_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown runs as development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _MODULES.get(env, "config.development")


def load_settings() -> ModuleType:
    return importlib.import_module(get_settings_module())
