from __future__ import annotations
import logging
import os

from radixcalc.reader.token import NumberBase

# Defaults
_DEFAULT_PROMPT = ">>> "
_DEFAULT_LOG_LEVEL = "WARNING"
_FALSEY = {"0", "false", "no", "off"}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSEY


def get_prompt() -> str:
    return os.environ.get('RADIXCALC_PROMPT', _DEFAULT_PROMPT)


def resolve_log_level(name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else default


def get_log_level() -> int:
    return resolve_log_level(os.environ.get('RADIXCALC_LOG_LEVEL', _DEFAULT_LOG_LEVEL))


def color_enabled() -> bool:
    if 'NO_COLOR' in os.environ:
        return False
    return flag_from_env('RADIXCALC_COLOR', True)


def get_display_base() -> NumberBase:
    raw = os.environ.get('RADIXCALC_BASE')
    if not raw:
        return NumberBase.DECIMAL
    try:
        return NumberBase.from_name(raw)
    except ValueError:
        return NumberBase.DECIMAL
