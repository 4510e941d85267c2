"""
EIRSCOPE configuration.

Values come from EIRSCOPE_* environment variables; invalid values fall back
to the defaults.
"""

from __future__ import annotations

import os


def _get_env(name: str, default: str) -> str:
    return os.environ.get(f'EIRSCOPE_{name}', default)


def _get_env_int(name: str, default: int) -> int:
    try:
        return int(_get_env(name, str(default)))
    except ValueError:
        return default


def _get_env_bool(name: str, default: bool) -> bool:
    value = _get_env(name, '').strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off'):
        return False
    return default


HOST = _get_env('HOST', '0.0.0.0')
PORT = _get_env_int('PORT', 5050)
DEBUG = _get_env_bool('DEBUG', False)

LOG_LEVEL = _get_env('LOG_LEVEL', 'INFO').upper()
if LOG_LEVEL not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
    LOG_LEVEL = 'INFO'
