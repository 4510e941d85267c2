from __future__ import annotations

import re
from typing import Any


def is_valid_mac(mac: str | None) -> bool:
    """Validate MAC address format."""
    if not mac:
        return False
    return bool(re.match(r'^([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}$', mac))


def is_int_in_range(value: Any, low: int, high: int) -> bool:
    """Check that value is a plain integer within [low, high]."""
    # bool is an int subclass but never a valid numeric field value
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return low <= value <= high


def parse_hex_bytes(value: str) -> bytes | None:
    """Parse a hex string, tolerating ':' and '-' separators."""
    cleaned = re.sub(r'[:\-\s]', '', value)
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        return None
