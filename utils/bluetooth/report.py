"""
Extended Inquiry / Advertising report.

An EInfoReport collects the data elements of Classic Extended Inquiry
Responses (EIR) and LE advertising / scan response packets for one device.
Every field group has a presence bit in the report's EIRDataType mask; a
discovery engine folds newer partial reports into a stored one via merge()
and uses the returned change mask to decide whether to notify observers.

A report is not synchronized. The owner serializes mutators and merges.
"""

from __future__ import annotations

import time
from typing import Any, Iterable, Optional, Union

from ..logging import bluetooth_logger as logger
from ..validation import is_int_in_range, is_valid_mac, parse_hex_bytes
from .constants import (
    ADDRESS_LENGTH,
    AD_ADDRESS_TYPE_UNDEFINED,
    DEVICE_CLASS_MAX,
    DEVICE_ID_SOURCE_BLUETOOTH,
    DEVICE_ID_SOURCE_USB,
    EAD_EVENT_TYPE_MAX,
    INT8_MAX,
    INT8_MIN,
    RSSI_NOT_AVAILABLE,
    SSP_VALUE_LENGTH,
    TX_POWER_NOT_AVAILABLE,
    UINT16_MAX,
    UINT8_MAX,
)
from .errors import EIRError, InternalError, InvalidArgument
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
from .uuids import UUIDLike, normalize_uuid, uuid_type_size

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]

# Groups compared and copied as whole units by merge(); services are handled apart.
_MERGE_GROUPS: tuple[tuple[EIRDataType, tuple[str, ...]], ...] = (
    (EIRDataType.EVT_TYPE, ('_evt_type',)),
    (EIRDataType.EXT_EVT_TYPE, ('_ead_type',)),
    (EIRDataType.BDADDR_TYPE, ('_address_type', '_ad_address_type')),
    (EIRDataType.BDADDR, ('_address',)),
    (EIRDataType.FLAGS, ('_flags',)),
    (EIRDataType.NAME, ('_name',)),
    (EIRDataType.NAME_SHORT, ('_name_short',)),
    (EIRDataType.RSSI, ('_rssi',)),
    (EIRDataType.TX_POWER, ('_tx_power',)),
    (EIRDataType.MANUF_DATA, ('_msd',)),
    (EIRDataType.DEVICE_CLASS, ('_device_class',)),
    (EIRDataType.APPEARANCE, ('_appearance',)),
    (EIRDataType.HASH, ('_hash',)),
    (EIRDataType.RANDOMIZER, ('_randomizer',)),
    (EIRDataType.DEVICE_ID, ('_did_source', '_did_vendor', '_did_product', '_did_version')),
    (EIRDataType.CONN_IVAL, ('_conn_interval_min', '_conn_interval_max')),
    (EIRDataType.SERVICES_COMPLETE, ('_services_complete',)),
)


def address_type_from_ad(ad_address_type: int) -> BDAddressType:
    """Map the raw advertising address type byte to a BDAddressType."""
    if ad_address_type == 0x00:
        return BDAddressType.BDADDR_LE_PUBLIC
    if ad_address_type in (0x01, 0x02, 0x03):
        return BDAddressType.BDADDR_LE_RANDOM
    return BDAddressType.BDADDR_UNDEFINED


def ad_address_type_from(address_type: BDAddressType) -> int:
    """Inverse of address_type_from_ad for the canonical raw values."""
    if address_type in (BDAddressType.BDADDR_BREDR, BDAddressType.BDADDR_LE_PUBLIC):
        return 0
    if address_type == BDAddressType.BDADDR_LE_RANDOM:
        return 1
    return AD_ADDRESS_TYPE_UNDEFINED


def _require_int(name: str, value: Any, low: int, high: int) -> int:
    if value is None:
        raise InvalidArgument(f'{name} null')
    if not is_int_in_range(value, low, high):
        raise InvalidArgument(f'{name} {value!r} not in [{low}, {high}]')
    return value


def _require_bytes(name: str, value: Optional[BytesLike]) -> bytes:
    if value is None:
        raise InvalidArgument(f'{name} null')
    if isinstance(value, str):
        parsed = parse_hex_bytes(value)
        if parsed is None:
            raise InvalidArgument(f'{name} is not a hex string: {value!r}')
        return parsed
    if isinstance(value, int):
        raise InvalidArgument(f'{name} is not a byte sequence: {value!r}')
    try:
        return bytes(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f'{name} is not a byte sequence: {e}') from e


def _require_text(name: str, value: Union[str, bytes, None]) -> str:
    if value is None:
        raise InvalidArgument(f'{name} null')
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('utf-8', errors='replace')
    if not isinstance(value, str):
        raise InvalidArgument(f'{name} must be a string, got {type(value).__name__}')
    return value


class EInfoReport:
    """
    Field-presence tracked collection of EIR / AD data for one device.

    Accessors return the stored value whether or not it is present; absent
    groups read as zero / empty values. Use is_set() or eir_data_mask to test
    presence.
    """

    def __init__(self) -> None:
        self._reset()
        self._timestamp: float = time.monotonic()

    def _reset(self) -> None:
        self._source = Source.NA
        self._eir_data_mask = EIRDataType.NONE
        self._evt_type = ADPDUType.UNDEFINED
        self._ead_type = EADEventType.NONE
        self._ad_address_type = 0
        self._address_type = BDAddressType.BDADDR_UNDEFINED
        self._address = bytes(ADDRESS_LENGTH)
        self._flags = GAPFlags.NONE
        self._name = ''
        self._name_short = ''
        self._rssi = RSSI_NOT_AVAILABLE
        self._tx_power = TX_POWER_NOT_AVAILABLE
        self._msd: Optional[ManufacturerSpecificData] = None
        self._services: list[str] = []
        self._services_complete = False
        self._device_class = 0
        self._appearance = int(AppearanceCat.UNKNOWN)
        self._hash = bytes(SSP_VALUE_LENGTH)
        self._randomizer = bytes(SSP_VALUE_LENGTH)
        self._did_source = 0
        self._did_vendor = 0
        self._did_product = 0
        self._did_version = 0
        self._conn_interval_min = 0
        self._conn_interval_max = 0

    def _mark(self, bit: EIRDataType) -> None:
        self._eir_data_mask |= bit
        self._timestamp = time.monotonic()

    # ------------------------------------------------------------------
    # Copy / reset
    # ------------------------------------------------------------------

    def copy(self) -> EInfoReport:
        """Independent snapshot of this report."""
        clone = EInfoReport.__new__(EInfoReport)
        clone.__dict__.update(self.__dict__)
        clone._services = list(self._services)
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> EInfoReport:
        # every other attribute is immutable
        return self.copy()

    def clear(self) -> None:
        """Reset every field, the presence mask and the provenance."""
        self._reset()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_source(self, source: Source) -> None:
        if not isinstance(source, Source):
            raise InvalidArgument(f'source must be a Source, got {source!r}')
        self._source = source

    def set_timestamp(self, timestamp: float) -> None:
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise InvalidArgument(f'timestamp must be a number, got {timestamp!r}')
        self._timestamp = float(timestamp)

    def set_evt_type(self, evt_type: Union[ADPDUType, int]) -> None:
        try:
            self._evt_type = ADPDUType(evt_type)
        except ValueError:
            raise InvalidArgument(f'unknown advertising PDU type {evt_type!r}') from None
        self._mark(EIRDataType.EVT_TYPE)

    def set_ext_evt_type(self, ead_type: Union[EADEventType, int]) -> None:
        """Set the event properties of an extended advertising report."""
        self._ead_type = EADEventType(_require_int('ext_evt_type', ead_type, 0, EAD_EVENT_TYPE_MAX))
        self._mark(EIRDataType.EXT_EVT_TYPE)

    def set_ad_address_type(self, ad_address_type: int) -> None:
        _require_int('ad_address_type', ad_address_type, 0, UINT8_MAX)
        self._ad_address_type = ad_address_type
        self._address_type = address_type_from_ad(ad_address_type)
        self._mark(EIRDataType.BDADDR_TYPE)

    def set_address_type(self, address_type: Union[BDAddressType, int]) -> None:
        try:
            at = BDAddressType(address_type)
        except ValueError:
            raise InvalidArgument(f'unknown address type {address_type!r}') from None
        self._address_type = at
        self._ad_address_type = ad_address_type_from(at)
        self._mark(EIRDataType.BDADDR_TYPE)

    def set_address(self, address: Union[str, BytesLike]) -> None:
        """
        Set the device address.

        Args:
            address: 'AA:BB:CC:DD:EE:FF' or a buffer of at least 6 bytes,
                of which the first 6 are used.

        Raises:
            InvalidArgument: If the address is None, malformed or too short.
        """
        if isinstance(address, str):
            if not is_valid_mac(address):
                raise InvalidArgument(f'invalid address {address!r}')
            value = bytes.fromhex(address.replace(':', ''))
        else:
            value = _require_bytes('address', address)
        if len(value) < ADDRESS_LENGTH:
            raise InvalidArgument(f'address byte size {len(value)} < {ADDRESS_LENGTH}')
        self._address = value[:ADDRESS_LENGTH]
        self._mark(EIRDataType.BDADDR)

    def set_rssi(self, rssi: int) -> None:
        self._rssi = _require_int('rssi', rssi, INT8_MIN, INT8_MAX)
        self._mark(EIRDataType.RSSI)

    def set_tx_power(self, tx_power: int) -> None:
        self._tx_power = _require_int('tx_power', tx_power, INT8_MIN, INT8_MAX)
        self._mark(EIRDataType.TX_POWER)

    def set_flags(self, flags: Union[GAPFlags, int]) -> None:
        self._flags = GAPFlags(_require_int('flags', flags, 0, UINT8_MAX))
        self._mark(EIRDataType.FLAGS)

    def add_flag(self, flag: Union[GAPFlags, int]) -> None:
        self._flags = self._flags | GAPFlags(_require_int('flag', flag, 0, UINT8_MAX))
        self._mark(EIRDataType.FLAGS)

    def set_name(self, name: Union[str, bytes]) -> None:
        self._name = _require_text('name', name)
        self._mark(EIRDataType.NAME)

    def set_short_name(self, name: Union[str, bytes]) -> None:
        self._name_short = _require_text('short name', name)
        self._mark(EIRDataType.NAME_SHORT)

    def set_manufacturer_data(self, company: int, data: Optional[BytesLike] = None) -> None:
        """Replace the manufacturer specific data slot."""
        _require_int('company', company, 0, UINT16_MAX)
        payload = b'' if data is None else _require_bytes('data', data)
        self._msd = ManufacturerSpecificData(company, payload)
        self._mark(EIRDataType.MANUF_DATA)

    def add_service(self, service_uuid: UUIDLike) -> bool:
        """
        Add a service UUID unless already listed.

        Returns:
            True if the UUID was added.
        """
        canonical = normalize_uuid(service_uuid)
        if canonical in self._services:
            return False
        self._services.append(canonical)
        self._mark(EIRDataType.SERVICE_UUID)
        return True

    def set_services_complete(self, complete: bool) -> None:
        if not isinstance(complete, bool):
            raise InvalidArgument(f'services complete must be a bool, got {complete!r}')
        self._services_complete = complete
        self._mark(EIRDataType.SERVICES_COMPLETE)

    def set_device_class(self, device_class: int) -> None:
        self._device_class = _require_int('device_class', device_class, 0, DEVICE_CLASS_MAX)
        self._mark(EIRDataType.DEVICE_CLASS)

    def set_appearance(self, appearance: Union[AppearanceCat, int]) -> None:
        self._appearance = int(_require_int('appearance', appearance, 0, UINT16_MAX))
        self._mark(EIRDataType.APPEARANCE)

    def set_hash(self, value: BytesLike) -> None:
        self._hash = self._ssp_value('hash', value)
        self._mark(EIRDataType.HASH)

    def set_randomizer(self, value: BytesLike) -> None:
        self._randomizer = self._ssp_value('randomizer', value)
        self._mark(EIRDataType.RANDOMIZER)

    @staticmethod
    def _ssp_value(name: str, value: BytesLike) -> bytes:
        data = _require_bytes(name, value)
        if len(data) != SSP_VALUE_LENGTH:
            raise InvalidArgument(f'{name} byte size {len(data)} != {SSP_VALUE_LENGTH}')
        return data

    def set_device_id(self, source: int, vendor: int, product: int, version: int) -> None:
        for name, value in (('source', source), ('vendor', vendor),
                            ('product', product), ('version', version)):
            _require_int(f'device id {name}', value, 0, UINT16_MAX)
        self._did_source = source
        self._did_vendor = vendor
        self._did_product = product
        self._did_version = version
        self._mark(EIRDataType.DEVICE_ID)

    def set_conn_interval(self, minimum: int, maximum: int) -> None:
        """
        Set the peripheral connection interval range.

        Both values are in units of 1.25ms (Supplement, Part A, 1.9).
        """
        _require_int('conn_interval_min', minimum, 0, UINT16_MAX)
        _require_int('conn_interval_max', maximum, 0, UINT16_MAX)
        self._conn_interval_min = minimum
        self._conn_interval_max = maximum
        self._mark(EIRDataType.CONN_IVAL)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def source(self) -> Source:
        return self._source

    @property
    def timestamp(self) -> float:
        return self._timestamp

    @property
    def eir_data_mask(self) -> EIRDataType:
        return self._eir_data_mask

    def is_set(self, bit: EIRDataType) -> bool:
        return bool(self._eir_data_mask & bit)

    @property
    def evt_type(self) -> ADPDUType:
        return self._evt_type

    @property
    def ext_evt_type(self) -> EADEventType:
        return self._ead_type

    @property
    def ad_address_type(self) -> int:
        return self._ad_address_type

    @property
    def address_type(self) -> BDAddressType:
        return self._address_type

    @property
    def address(self) -> bytes:
        return self._address

    @property
    def address_str(self) -> str:
        return ':'.join(f'{b:02X}' for b in self._address)

    @property
    def flags(self) -> GAPFlags:
        return self._flags

    @property
    def name(self) -> str:
        return self._name

    @property
    def short_name(self) -> str:
        return self._name_short

    @property
    def rssi(self) -> int:
        return self._rssi

    @property
    def tx_power(self) -> int:
        return self._tx_power

    @property
    def manufacturer_specific_data(self) -> Optional[ManufacturerSpecificData]:
        return self._msd

    @property
    def manufacturer_data(self) -> dict[int, bytes]:
        """Company identifier to payload, holding zero or one entry."""
        if self._msd is None:
            return {}
        return {self._msd.company: self._msd.data}

    @property
    def services(self) -> list[str]:
        return list(self._services)

    @property
    def services_complete(self) -> bool:
        return self._services_complete

    @property
    def device_class(self) -> int:
        return self._device_class

    @property
    def appearance(self) -> int:
        return self._appearance

    @property
    def hash(self) -> bytes:
        return self._hash

    @property
    def randomizer(self) -> bytes:
        return self._randomizer

    @property
    def device_id(self) -> tuple[int, int, int, int]:
        """(source, vendor, product, version)"""
        return self._did_source, self._did_vendor, self._did_product, self._did_version

    @property
    def device_id_modalias(self) -> str:
        ids = f'v{self._did_vendor:04X}p{self._did_product:04X}d{self._did_version:04X}'
        if self._did_source == DEVICE_ID_SOURCE_BLUETOOTH:
            return f'bluetooth:{ids}'
        if self._did_source == DEVICE_ID_SOURCE_USB:
            return f'usb:{ids}'
        return f'source<0x{self._did_source:X}>:{ids}'

    @property
    def conn_interval(self) -> tuple[int, int]:
        """(min, max) in units of 1.25ms"""
        return self._conn_interval_min, self._conn_interval_max

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def merge(self, other: EInfoReport) -> EIRDataType:
        """
        Fold the groups present in `other` into this report.

        Groups absent in `other` are left untouched. Services are merged as a
        set union, every other group is replaced as a unit when it differs.

        Args:
            other: A newer, possibly partial report for the same device.

        Returns:
            The groups whose value changed in this report.
        """
        changed = EIRDataType.NONE
        if other is self:
            return changed

        incoming = other._eir_data_mask
        for bit, attrs in _MERGE_GROUPS:
            if not incoming & bit:
                continue
            if self._eir_data_mask & bit and all(
                getattr(self, attr) == getattr(other, attr) for attr in attrs
            ):
                continue
            for attr in attrs:
                setattr(self, attr, getattr(other, attr))
            self._eir_data_mask |= bit
            changed |= bit

        if incoming & EIRDataType.SERVICE_UUID:
            added = [uuid for uuid in other._services if uuid not in self._services]
            if added:
                self._services.extend(added)
                changed |= EIRDataType.SERVICE_UUID
            self._eir_data_mask |= EIRDataType.SERVICE_UUID

        if other._source is not Source.NA:
            self._source = other._source

        if changed:
            self._timestamp = max(self._timestamp, other._timestamp)
            logger.debug(f"Report {self.address_str} changed {changed.to_string()}")
        return changed

    # the discovery engine calls this set()
    set = merge

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def eir_data_mask_to_string(self) -> str:
        return 'DataSet' + self._eir_data_mask.to_string()

    def to_string(self, include_services: bool = True) -> str:
        msd = self._msd.to_string() if self._msd is not None else 'MSD[null]'
        out = (
            f"EInfoReport::{self._source.to_string()}"
            f"[address[{self.address_str}, {self._address_type.name}/{self._ad_address_type}], "
            f"name['{self._name}'/'{self._name_short}'], {self.eir_data_mask_to_string()}, "
            f"evt-type {self._evt_type.name}, ext-evt-type {self._ead_type.to_string()}, "
            f"rssi {self._rssi}, tx-power {self._tx_power}, "
            f"flags {self._flags.to_string()}, dev-class 0x{self._device_class:x}, "
            f"appearance 0x{self._appearance:04x} ({AppearanceCat.describe(self._appearance)}), "
            f"hash[{self._hash.hex()}], randomizer[{self._randomizer.hex()}], "
            f"device-id[source 0x{self._did_source:04x}, vendor 0x{self._did_vendor:04x}, "
            f"product 0x{self._did_product:04x}, version 0x{self._did_version:04x}], "
            f"conn-interval[min {self._conn_interval_min}, max {self._conn_interval_max}], "
            f"{msd}]"
        )
        if include_services and self._services:
            out += '\n'
            for uuid in self._services:
                out += f'  {uuid}, {uuid_type_size(uuid)} bytes\n'
        return out

    def __str__(self) -> str:
        return self.to_string(True)

    def __repr__(self) -> str:
        return f'<EInfoReport {self._source.to_string()} {self.address_str} {self.eir_data_mask_to_string()}>'

    # ------------------------------------------------------------------
    # JSON boundary
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization; absent groups are None."""
        def present(bit: EIRDataType, value: Any) -> Any:
            return value if self._eir_data_mask & bit else None

        msd = None
        if self._msd is not None:
            msd = {
                'company': self._msd.company,
                'company_name': self._msd.company_name,
                'data': self._msd.data.hex(),
            }

        return {
            'source': self._source.name,
            'timestamp': self._timestamp,
            'eir_data_mask': self._eir_data_mask.names(),
            'evt_type': present(EIRDataType.EVT_TYPE, self._evt_type.name),
            'ext_evt_type': present(EIRDataType.EXT_EVT_TYPE, int(self._ead_type)),
            'address': present(EIRDataType.BDADDR, self.address_str),
            'address_type': present(EIRDataType.BDADDR_TYPE, self._address_type.name),
            'ad_address_type': present(EIRDataType.BDADDR_TYPE, self._ad_address_type),
            'name': present(EIRDataType.NAME, self._name),
            'name_short': present(EIRDataType.NAME_SHORT, self._name_short),
            'rssi': present(EIRDataType.RSSI, self._rssi),
            'tx_power': present(EIRDataType.TX_POWER, self._tx_power),
            'flags': present(EIRDataType.FLAGS, int(self._flags)),
            'flag_names': self._flags.names(),
            'manufacturer_data': present(EIRDataType.MANUF_DATA, msd),
            'services': list(self._services),
            'services_complete': present(EIRDataType.SERVICES_COMPLETE, self._services_complete),
            'device_class': present(EIRDataType.DEVICE_CLASS, self._device_class),
            'appearance': present(EIRDataType.APPEARANCE, self._appearance),
            'hash': present(EIRDataType.HASH, self._hash.hex()),
            'randomizer': present(EIRDataType.RANDOMIZER, self._randomizer.hex()),
            'device_id': present(EIRDataType.DEVICE_ID, {
                'source': self._did_source,
                'vendor': self._did_vendor,
                'product': self._did_product,
                'version': self._did_version,
                'modalias': self.device_id_modalias,
            }),
            'conn_interval': present(EIRDataType.CONN_IVAL, {
                'min': self._conn_interval_min,
                'max': self._conn_interval_max,
            }),
        }

    @classmethod
    def from_dict(cls, data: Any) -> EInfoReport:
        """
        Build a report from a to_dict() style mapping.

        Every present, non-null key goes through its setter; derived keys
        (eir_data_mask, flag_names, company_name, modalias) are ignored.

        Raises:
            InvalidArgument: If the mapping or one of its fields is invalid.
            InternalError: If the report could not be built for another reason.
        """
        if not isinstance(data, dict):
            raise InvalidArgument(f'report must be an object, got {type(data).__name__}')

        report = cls()
        try:
            report._apply_dict(data)
        except EIRError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidArgument(f'invalid report field: {e}') from e
        except Exception as e:
            raise InternalError(f'failed to build report: {e}') from e
        return report

    def _apply_dict(self, data: dict) -> None:
        def get(key: str) -> Any:
            return data.get(key)

        if get('source') is not None:
            self.set_source(Source[get('source')])
        if get('evt_type') is not None:
            value = get('evt_type')
            self.set_evt_type(ADPDUType[value] if isinstance(value, str) else value)
        if get('ext_evt_type') is not None:
            value = get('ext_evt_type')
            if isinstance(value, list):
                ead_type = EADEventType.NONE
                for prop_name in value:
                    ead_type |= EADEventType[prop_name]
                value = ead_type
            self.set_ext_evt_type(value)
        if get('address') is not None:
            self.set_address(get('address'))

        address_type = get('address_type')
        ad_address_type = get('ad_address_type')
        if address_type is not None:
            at = BDAddressType[address_type] if isinstance(address_type, str) else address_type
            self.set_address_type(at)
            # keep the raw value when it agrees with the address type (e.g. random static = 2)
            if ad_address_type is not None and address_type_from_ad(ad_address_type) == self._address_type:
                self._ad_address_type = _require_int('ad_address_type', ad_address_type, 0, UINT8_MAX)
        elif ad_address_type is not None:
            self.set_ad_address_type(ad_address_type)

        if get('name') is not None:
            self.set_name(get('name'))
        if get('name_short') is not None:
            self.set_short_name(get('name_short'))
        if get('rssi') is not None:
            self.set_rssi(get('rssi'))
        if get('tx_power') is not None:
            self.set_tx_power(get('tx_power'))
        if get('flags') is not None:
            flags = get('flags')
            if isinstance(flags, list):
                self.set_flags(GAPFlags.NONE)
                for flag_name in flags:
                    self.add_flag(GAPFlags[flag_name])
            else:
                self.set_flags(flags)

        msd = get('manufacturer_data')
        if msd is not None:
            if not isinstance(msd, dict):
                raise InvalidArgument('manufacturer_data must be an object')
            self.set_manufacturer_data(msd.get('company'), msd.get('data'))

        for service_uuid in get('services') or []:
            self.add_service(service_uuid)
        if get('services_complete') is not None:
            self.set_services_complete(get('services_complete'))
        if get('device_class') is not None:
            self.set_device_class(get('device_class'))
        if get('appearance') is not None:
            value = get('appearance')
            self.set_appearance(AppearanceCat[value] if isinstance(value, str) else value)
        if get('hash') is not None:
            self.set_hash(get('hash'))
        if get('randomizer') is not None:
            self.set_randomizer(get('randomizer'))

        did = get('device_id')
        if did is not None:
            self.set_device_id(did['source'], did['vendor'], did['product'], did['version'])
        ival = get('conn_interval')
        if ival is not None:
            self.set_conn_interval(ival['min'], ival['max'])

        if get('timestamp') is not None:
            self.set_timestamp(get('timestamp'))
