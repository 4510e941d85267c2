"""Tests for EInfoReport.merge()."""

import pytest

from utils.bluetooth import EADEventType, EInfoReport, EIRDataType, GAPFlags, Source

BATTERY_SERVICE = '0000180f-0000-1000-8000-00805f9b34fb'
DEVICE_INFO_SERVICE = '0000180a-0000-1000-8000-00805f9b34fb'


def _full_report() -> EInfoReport:
    report = EInfoReport()
    report.set_source(Source.EIR)
    report.set_address('00:1A:7D:DA:71:13')
    report.set_address_type(0)
    report.set_name('Headset')
    report.set_short_name('HS')
    report.set_rssi(-71)
    report.set_tx_power(4)
    report.set_flags(GAPFlags.LE_GEN_DISCOVERABLE)
    report.set_manufacturer_data(0x000F, b'\x01\x02')
    report.add_service('110b')
    report.set_services_complete(False)
    report.set_device_class(0x240404)
    report.set_appearance(961)
    report.set_device_id(1, 0x000F, 0x0001, 0x0100)
    report.set_conn_interval(6, 24)
    report.set_hash(bytes(range(16)))
    report.set_randomizer(bytes(range(16)))
    report.set_evt_type(0)
    report.set_ext_evt_type(EADEventType.CONN_ADV | EADEventType.LEGACY_PDU)
    return report


class TestMergeScenario:
    """The partial-report scenario from a later advertising packet."""

    def test_thermo_update(self, thermo_report):
        """Test the RSSI / TX power / services update of a known sensor."""
        update = EInfoReport()
        update.set_rssi(-55)
        update.set_tx_power(-4)
        update.add_service('180f')
        update.add_service('180a')

        changed = thermo_report.merge(update)

        assert changed == EIRDataType.RSSI | EIRDataType.TX_POWER | EIRDataType.SERVICE_UUID
        assert thermo_report.name == 'Thermo-1'
        assert thermo_report.rssi == -55
        assert thermo_report.tx_power == -4
        assert thermo_report.services == [BATTERY_SERVICE, DEVICE_INFO_SERVICE]

    def test_set_alias(self, thermo_report):
        """Test set() is the same operation as merge()."""
        update = EInfoReport()
        update.set_rssi(-50)
        assert thermo_report.set(update) == EIRDataType.RSSI


class TestMergeProperties:
    """Invariants of the merge operation."""

    def test_self_merge_is_noop(self):
        """Test merging a report into itself."""
        report = _full_report()
        before = report.to_dict()

        assert report.merge(report) == EIRDataType.NONE
        assert report.to_dict() == before

    def test_remerge_returns_empty(self, thermo_report):
        """Test merging the same update twice."""
        update = _full_report()

        assert thermo_report.merge(update) != EIRDataType.NONE
        assert thermo_report.merge(update) == EIRDataType.NONE

    def test_monotonic_presence(self, thermo_report):
        """Test presence after merge is the union of both masks."""
        update = EInfoReport()
        update.set_tx_power(0)
        update.set_device_class(0x1F00)
        before = thermo_report.eir_data_mask

        thermo_report.merge(update)

        assert thermo_report.eir_data_mask == before | update.eir_data_mask

    def test_merge_into_empty_copies_everything(self):
        """Test an empty report absorbs every present group."""
        source = _full_report()
        target = EInfoReport()

        changed = target.merge(source)

        assert changed == source.eir_data_mask
        assert target.eir_data_mask == source.eir_data_mask

        # target was created later, so it keeps its own timestamp
        target_dict = target.to_dict()
        source_dict = source.to_dict()
        target_dict.pop('timestamp')
        source_dict.pop('timestamp')
        assert target_dict == source_dict

    def test_equal_values_not_reported(self):
        """Test groups present and identical in both stay out of the change mask."""
        a = _full_report()
        b = _full_report()
        b.set_rssi(-20)

        assert a.merge(b) == EIRDataType.RSSI

    def test_absent_groups_untouched(self, thermo_report):
        """Test groups absent in the update keep their values."""
        update = EInfoReport()
        update.set_short_name('T1')

        changed = thermo_report.merge(update)

        assert changed == EIRDataType.NAME_SHORT
        assert thermo_report.name == 'Thermo-1'
        assert thermo_report.rssi == -60

    @pytest.mark.parametrize('setter, args, bit', [
        ('set_name', ('Thermo-2',), EIRDataType.NAME),
        ('set_rssi', (-61,), EIRDataType.RSSI),
        ('set_address', ('C0:26:DA:01:02:04',), EIRDataType.BDADDR),
        ('set_address_type', (2,), EIRDataType.BDADDR_TYPE),
        ('set_flags', (GAPFlags.LE_LTD_DISCOVERABLE,), EIRDataType.FLAGS),
        ('set_device_class', (0x200404,), EIRDataType.DEVICE_CLASS),
        ('set_appearance', (962,), EIRDataType.APPEARANCE),
        ('set_services_complete', (True,), EIRDataType.SERVICES_COMPLETE),
        ('set_hash', (bytes(16),), EIRDataType.HASH),
        ('set_randomizer', (bytes(16),), EIRDataType.RANDOMIZER),
        ('set_evt_type', (4,), EIRDataType.EVT_TYPE),
        ('set_ext_evt_type', (EADEventType.SCAN_ADV,), EIRDataType.EXT_EVT_TYPE),
    ])
    def test_changed_group_reported(self, setter, args, bit):
        """Test each differing group appears in the change mask alone."""
        current = _full_report()
        update = EInfoReport()
        getattr(update, setter)(*args)

        assert current.merge(update) == bit


class TestMergeUnits:
    """Single-slot and atomic-unit groups."""

    def test_manufacturer_data_replaced(self):
        """Test manufacturer data is replaced, never accumulated."""
        current = _full_report()
        update = EInfoReport()
        update.set_manufacturer_data(0x004C, b'\x10')

        assert current.merge(update) == EIRDataType.MANUF_DATA
        assert current.manufacturer_data == {0x004C: b'\x10'}

    def test_manufacturer_payload_change(self):
        """Test a new payload for the same company counts as a change."""
        current = _full_report()
        update = EInfoReport()
        update.set_manufacturer_data(0x000F, b'\x01\x03')

        assert current.merge(update) == EIRDataType.MANUF_DATA
        assert current.manufacturer_data == {0x000F: b'\x01\x03'}

    def test_device_id_atomic(self):
        """Test the device ID unit is copied whole."""
        current = _full_report()
        update = EInfoReport()
        update.set_device_id(1, 0x000F, 0x0001, 0x0200)

        assert current.merge(update) == EIRDataType.DEVICE_ID
        assert current.device_id == (1, 0x000F, 0x0001, 0x0200)

    def test_conn_interval_atomic(self):
        """Test the connection interval unit is copied whole."""
        current = _full_report()
        update = EInfoReport()
        update.set_conn_interval(6, 40)

        assert current.merge(update) == EIRDataType.CONN_IVAL
        assert current.conn_interval == (6, 40)

    def test_services_union_without_new(self):
        """Test a subset of known services is not a change."""
        current = EInfoReport()
        current.add_service('180f')
        current.add_service('180a')
        update = EInfoReport()
        update.add_service('180a')

        assert current.merge(update) == EIRDataType.NONE
        assert current.services == [BATTERY_SERVICE, DEVICE_INFO_SERVICE]

    def test_services_complete_only_when_carried(self):
        """Test the complete flag is kept when the update does not carry one."""
        current = EInfoReport()
        current.set_services_complete(True)
        update = EInfoReport()
        update.add_service('180f')

        current.merge(update)

        assert current.services_complete is True


class TestMergeMetadata:
    """Provenance and timestamp handling."""

    def test_provenance_overwritten(self, thermo_report):
        update = EInfoReport()
        update.set_source(Source.EIR)

        thermo_report.merge(update)

        assert thermo_report.source is Source.EIR

    def test_unset_provenance_kept(self, thermo_report):
        update = EInfoReport()
        update.set_rssi(-30)

        thermo_report.merge(update)

        assert thermo_report.source is Source.AD

    def test_timestamp_takes_later_on_change(self, thermo_report):
        """Test the timestamp moves to the later one when a group changed."""
        thermo_report.set_timestamp(100.0)
        update = EInfoReport()
        update.set_rssi(-30)
        update.set_timestamp(250.0)

        thermo_report.merge(update)

        assert thermo_report.timestamp == 250.0

    def test_timestamp_kept_without_change(self, thermo_report):
        """Test an unchanged merge leaves the timestamp alone."""
        thermo_report.set_timestamp(100.0)
        update = EInfoReport()
        update.set_rssi(-60)
        update.set_timestamp(250.0)

        assert thermo_report.merge(update) == EIRDataType.NONE
        assert thermo_report.timestamp == 100.0

    def test_timestamp_not_moved_backwards(self, thermo_report):
        thermo_report.set_timestamp(300.0)
        update = EInfoReport()
        update.set_rssi(-30)
        update.set_timestamp(250.0)

        thermo_report.merge(update)

        assert thermo_report.timestamp == 300.0
