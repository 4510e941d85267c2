# Route blueprints for EIRSCOPE
from __future__ import annotations

from flask import Flask


def register_blueprints(app: Flask) -> None:
    """Register all route blueprints with the Flask app."""
    from .eir import eir_bp

    if 'eir' not in app.blueprints:
        app.register_blueprint(eir_bp)
