"""
Service UUID helpers.

16 and 32-bit service UUIDs are shorthands for UUIDs inside the Bluetooth
Base UUID. Reports keep every service in its canonical 128-bit textual form so
equal services compare equal whatever form they were supplied in.
"""

from __future__ import annotations

import uuid
from typing import Union

from .constants import BLUETOOTH_BASE_UUID_SUFFIX
from .errors import InvalidArgument

UUIDLike = Union[str, uuid.UUID]


def normalize_uuid(value: UUIDLike) -> str:
    """
    Convert a 16, 32 or 128-bit UUID to canonical lowercase 128-bit form.

    Args:
        value: '180f', '0x180F', '0000180f', a full UUID string or uuid.UUID.

    Returns:
        The canonical 'xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx' string.

    Raises:
        InvalidArgument: If the value is None or cannot be parsed.
    """
    if value is None:
        raise InvalidArgument('uuid null')
    if isinstance(value, uuid.UUID):
        return str(value)
    if not isinstance(value, str):
        raise InvalidArgument(f'uuid must be a string, got {type(value).__name__}')

    text = value.strip().lower()
    if text.startswith('0x'):
        text = text[2:]

    if len(text) in (4, 8):
        try:
            int(text, 16)
        except ValueError:
            raise InvalidArgument(f'invalid short uuid {value!r}') from None
        return text.rjust(8, '0') + BLUETOOTH_BASE_UUID_SUFFIX

    try:
        return str(uuid.UUID(text))
    except ValueError:
        raise InvalidArgument(f'invalid uuid {value!r}') from None


def uuid_type_size(canonical: str) -> int:
    """Smallest representation in bytes (2, 4 or 16) of a canonical UUID."""
    if not canonical.endswith(BLUETOOTH_BASE_UUID_SUFFIX):
        return 16
    if canonical.startswith('0000'):
        return 2
    return 4
