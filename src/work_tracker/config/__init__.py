from __future__ import annotations

import os
from typing import Optional


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"
