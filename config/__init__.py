import importlib
import os
from types import ModuleType


def get_settings_module() -> str:
    # Read the environment from APP_ENV, default is 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"

    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"

    # 3. Everything else falls back to development
    return "config.development"


def load_settings() -> ModuleType:
    return importlib.import_module(get_settings_module())
