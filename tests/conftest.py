"""Pytest configuration and fixtures."""

import pytest
from app import app as flask_app
from routes import register_blueprints
from utils.bluetooth import EInfoReport, Source


@pytest.fixture
def app():
    """Create application for testing."""
    register_blueprints(flask_app)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def thermo_report():
    """LE report with name, RSSI and one service."""
    report = EInfoReport()
    report.set_source(Source.AD)
    report.set_address('C0:26:DA:01:02:03')
    report.set_name('Thermo-1')
    report.set_rssi(-60)
    report.add_service('180f')
    return report
