"""
EIRSCOPE - Bluetooth inquiry / advertising report service

Flask application.
"""

from __future__ import annotations

from flask import Flask, jsonify, Response

import config
from utils.bluetooth import EIRDataType
from utils.logging import app_logger as logger


# Create Flask app
app = Flask(__name__)


# ============================================
# MAIN ROUTES
# ============================================

@app.route('/health')
def health() -> Response:
    return jsonify({'status': 'ok', 'data_types': len(EIRDataType.bits())})


def main() -> None:
    """Main entry point."""
    print("=" * 50)
    print("  EIRSCOPE // Bluetooth Report Service")
    print("  EIR / AD report merge and rendering")
    print("=" * 50)
    print()

    # Register blueprints
    from routes import register_blueprints
    register_blueprints(app)

    logger.info(f"Listening on {config.HOST}:{config.PORT}")
    print(f"Open http://localhost:{config.PORT}/health in your browser")
    print()
    print("Press Ctrl+C to stop")
    print()

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, threaded=True)
