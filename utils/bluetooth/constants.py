"""
Bluetooth-specific constants for extended inquiry / advertising reports.
"""

from __future__ import annotations

# =============================================================================
# FIELD WIDTHS
# =============================================================================

# EUI48 device address length in bytes
ADDRESS_LENGTH = 6

# Secure Simple Pairing OOB hash / randomizer length in bytes
SSP_VALUE_LENGTH = 16

# Maximum value of a 24-bit Class of Device
DEVICE_CLASS_MAX = 0xFFFFFF

# Extended advertising event properties defined so far (bits 0-6)
EAD_EVENT_TYPE_MAX = 0x7F

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
INT8_MIN = -128
INT8_MAX = 127

# =============================================================================
# SENTINELS
# =============================================================================

# RSSI / TX power value reported when the field is absent
RSSI_NOT_AVAILABLE = -128
TX_POWER_NOT_AVAILABLE = -128

# Raw advertising address type for an undefined address type
AD_ADDRESS_TYPE_UNDEFINED = 4

# =============================================================================
# UUIDS
# =============================================================================

# Bluetooth Base UUID, 16 and 32-bit UUIDs are aliases inside it
BLUETOOTH_BASE_UUID = '00000000-0000-1000-8000-00805f9b34fb'
BLUETOOTH_BASE_UUID_SUFFIX = '-0000-1000-8000-00805f9b34fb'

# =============================================================================
# DEVICE ID SOURCES (Device ID Profile)
# =============================================================================

DEVICE_ID_SOURCE_BLUETOOTH = 0x0001
DEVICE_ID_SOURCE_USB = 0x0002

# =============================================================================
# MANUFACTURER IDS (Bluetooth SIG company identifiers, common subset)
# =============================================================================

MANUFACTURER_NAMES = {
    0x0000: 'Ericsson',
    0x0002: 'Intel',
    0x0006: 'Microsoft',
    0x000A: 'Qualcomm',
    0x000D: 'Texas Instruments',
    0x000F: 'Broadcom',
    0x001D: 'Qualcomm',
    0x0046: 'MediaTek',
    0x0059: 'Nordic Semiconductor',
    0x0075: 'Samsung',
    0x0087: 'Garmin',
    0x009E: 'Bose',
    0x00E0: 'Google',
    0x0131: 'Cypress Semiconductor',
    0x0157: 'Huami',
    0x0171: 'Amazon',
    0x01DA: 'Logitech',
    0x02E5: 'Espressif',
    0x038F: 'Xiaomi',
    0x004C: 'Apple',
    0x0499: 'Ruuvi Innovations',
    0x067C: 'Tile',
}
