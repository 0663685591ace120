from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import DeductionMode
from ..core.exceptions import ValidationError
from . import get_settings_module
from .logging import resolve_level


@dataclass(frozen=True)
class Settings:
    module: str
    deduction_mode: DeductionMode = DeductionMode.FLAT
    report_days: int = DEFAULT_REPORT_DAYS
    log_level: str = "INFO"
    log_json: bool = False
    debug: bool = False


def load_settings(env: Optional[str] = None) -> Settings:
    """Load ``.env`` (without overriding the real environment) and read the settings module."""
    load_dotenv(override=False)
    module_name = get_settings_module(env)
    settings = importlib.import_module(module_name)

    raw_mode = str(getattr(settings, "DEDUCTION_MODE", DeductionMode.FLAT.value)).strip().lower()
    try:
        mode = DeductionMode(raw_mode)
    except ValueError:
        raise ValidationError(f"DEDUCTION_MODE must be 'flat' or 'bracket', got {raw_mode!r}") from None

    report_days = int(getattr(settings, "REPORT_DAYS", DEFAULT_REPORT_DAYS))
    if report_days <= 0:
        raise ValidationError(f"REPORT_DAYS must be positive, got {report_days}")

    raw_level = getattr(settings, "LOG_LEVEL", "INFO")
    resolve_level(raw_level)
    log_level = str(raw_level).strip().upper()

    return Settings(
        module=module_name,
        deduction_mode=mode,
        report_days=report_days,
        log_level=log_level,
        log_json=bool(getattr(settings, "LOG_JSON", False)),
        debug=bool(getattr(settings, "DEBUG", False)),
    )
