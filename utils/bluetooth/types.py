"""
Closed value types used by EInfoReport.

Presence and change masks are both expressed as EIRDataType flag sets, one bit
per field group.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .constants import MANUFACTURER_NAMES


class EIRDataType(enum.IntFlag):
    """Bit mask of report field groups."""

    NONE = 0
    EVT_TYPE = 1 << 0
    EXT_EVT_TYPE = 1 << 1
    BDADDR_TYPE = 1 << 2
    BDADDR = 1 << 3
    FLAGS = 1 << 4
    NAME = 1 << 5
    NAME_SHORT = 1 << 6
    RSSI = 1 << 7
    TX_POWER = 1 << 8
    MANUF_DATA = 1 << 9
    DEVICE_CLASS = 1 << 10
    APPEARANCE = 1 << 11
    HASH = 1 << 12
    RANDOMIZER = 1 << 13
    DEVICE_ID = 1 << 14
    CONN_IVAL = 1 << 15
    SERVICES_COMPLETE = 1 << 16
    SERVICE_UUID = 1 << 30

    @classmethod
    def bits(cls) -> list['EIRDataType']:
        """All single-bit members in ascending bit order."""
        return sorted(
            (member for member in cls.__members__.values() if member.value),
            key=lambda member: member.value,
        )

    def names(self) -> list[str]:
        """Names of the bits set in this mask, ascending."""
        return [bit.name for bit in self.bits() if self & bit]

    def to_string(self) -> str:
        return '[' + ', '.join(self.names()) + ']'


class Source(enum.Enum):
    """Protocol that produced a report."""

    NA = 0        # not available / unset
    AD = 1        # LE Advertising Data
    EAD = 2       # LE Extended Advertising Data
    EIR = 3       # Classic Extended Inquiry Response
    EIR_MGMT = 4  # Classic EIR delivered by the kernel management interface

    def to_string(self) -> str:
        return 'N/A' if self is Source.NA else self.name


class GAPFlags(enum.IntFlag):
    """GAP advertising flags (Core Specification Supplement, Part A, 1.3)."""

    NONE = 0
    LE_LTD_DISCOVERABLE = 1 << 0
    LE_GEN_DISCOVERABLE = 1 << 1
    BREDR_UNSUPPORTED = 1 << 2
    DUAL_LE_BREDR_SAME_CTRL = 1 << 3
    DUAL_LE_BREDR_SAME_HOST = 1 << 4
    RESERVED1 = 1 << 5
    RESERVED2 = 1 << 6
    RESERVED3 = 1 << 7

    def names(self) -> list[str]:
        return [
            flag.name for flag in GAPFlags.__members__.values()
            if flag.value and self & flag
        ]

    def to_string(self) -> str:
        return '[' + ', '.join(self.names()) + ']'


class BDAddressType(enum.IntEnum):
    """Device address type."""

    BDADDR_BREDR = 0x00
    BDADDR_LE_PUBLIC = 0x01
    BDADDR_LE_RANDOM = 0x02
    BDADDR_UNDEFINED = 0xFF


class ADPDUType(enum.IntEnum):
    """LE advertising PDU (event) type, legacy and extended-legacy variants."""

    ADV_IND = 0x00
    ADV_DIRECT_IND = 0x01
    ADV_SCAN_IND = 0x02
    ADV_NONCONN_IND = 0x03
    SCAN_RSP = 0x04
    ADV_IND2 = 0b0010011
    DIRECT_IND2 = 0b0010101
    SCAN_IND2 = 0b0010010
    NONCONN_IND2 = 0b0010000
    SCAN_RSP_TO_ADV_IND = 0b0011011
    SCAN_RSP_TO_ADV_SCAN_IND = 0b0011010
    UNDEFINED = 0xFF


class EADEventType(enum.IntFlag):
    """LE extended advertising report event properties."""

    NONE = 0
    CONN_ADV = 1 << 0
    SCAN_ADV = 1 << 1
    DIR_ADV = 1 << 2
    SCAN_RSP = 1 << 3
    LEGACY_PDU = 1 << 4
    DATA_B0 = 1 << 5
    DATA_B1 = 1 << 6

    def names(self) -> list[str]:
        return [
            prop.name for prop in EADEventType.__members__.values()
            if prop.value and self & prop
        ]

    def to_string(self) -> str:
        return '[' + ', '.join(self.names()) + ']'


class AppearanceCat(enum.IntEnum):
    """GAP appearance categories (common subset)."""

    UNKNOWN = 0
    GENERIC_PHONE = 64
    GENERIC_COMPUTER = 128
    GENERIC_WATCH = 192
    SPORTS_WATCH = 193
    GENERIC_CLOCK = 256
    GENERIC_DISPLAY = 320
    GENERIC_REMOTE_CONTROL = 384
    GENERIC_EYE_GLASSES = 448
    GENERIC_TAG = 512
    GENERIC_KEYRING = 576
    GENERIC_MEDIA_PLAYER = 640
    GENERIC_BARCODE_SCANNER = 704
    GENERIC_THERMOMETER = 768
    GENERIC_THERMOMETER_EAR = 769
    GENERIC_HEART_RATE_SENSOR = 832
    HEART_RATE_SENSOR_BELT = 833
    GENERIC_BLOOD_PRESSURE = 896
    HID = 960
    HID_KEYBOARD = 961
    HID_MOUSE = 962
    HID_JOYSTICK = 963
    HID_GAMEPAD = 964
    GENERIC_GLUCOSE_METER = 1024
    GENERIC_RUNNING_WALKING_SENSOR = 1088
    GENERIC_CYCLING = 1152
    GENERIC_PULSE_OXIMETER = 3136
    GENERIC_WEIGHT_SCALE = 3200
    GENERIC_OUTDOOR_SPORTS_ACTIVITY = 5184

    @staticmethod
    def describe(value: int) -> str:
        try:
            return AppearanceCat(value).name
        except ValueError:
            return f'Unknown AppearanceCat 0x{value:04x}'


@dataclass(frozen=True)
class ManufacturerSpecificData:
    """A single company identifier with its opaque payload."""

    company: int
    data: bytes = b''

    @property
    def company_name(self) -> str:
        return MANUFACTURER_NAMES.get(self.company, f'Unknown (0x{self.company:04X})')

    def to_string(self) -> str:
        return f'MSD[company[{self.company} {self.company_name}], data[{self.data.hex()}]]'
