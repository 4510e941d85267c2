# Utility modules for EIRSCOPE
from .validation import is_valid_mac, is_int_in_range, parse_hex_bytes
from .logging import (
    get_logger,
    app_logger,
    bluetooth_logger,
    routes_logger,
)
