"""
Bluetooth report package for EIRSCOPE.

Provides the field-presence tracked Extended Inquiry / Advertising report,
its merge algorithm, and the value types it is built from.
"""

from .constants import (
    ADDRESS_LENGTH,
    RSSI_NOT_AVAILABLE,
    TX_POWER_NOT_AVAILABLE,
    MANUFACTURER_NAMES,
)
from .errors import EIRError, InvalidArgument, InternalError
from .report import EInfoReport
from .types import (
    ADPDUType,
    AppearanceCat,
    BDAddressType,
    EADEventType,
    EIRDataType,
    GAPFlags,
    ManufacturerSpecificData,
    Source,
)
from .uuids import normalize_uuid, uuid_type_size

__all__ = [
    # Report
    'EInfoReport',

    # Types
    'EIRDataType',
    'Source',
    'GAPFlags',
    'BDAddressType',
    'ADPDUType',
    'EADEventType',
    'AppearanceCat',
    'ManufacturerSpecificData',

    # Errors
    'EIRError',
    'InvalidArgument',
    'InternalError',

    # UUIDs
    'normalize_uuid',
    'uuid_type_size',

    # Constants
    'ADDRESS_LENGTH',
    'RSSI_NOT_AVAILABLE',
    'TX_POWER_NOT_AVAILABLE',
    'MANUFACTURER_NAMES',
]
