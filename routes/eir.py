"""Extended inquiry / advertising report routes."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request, Response

from utils.bluetooth import EInfoReport, EIRDataType, EIRError, InternalError
from utils.logging import routes_logger as logger

eir_bp = Blueprint('eir', __name__, url_prefix='/eir')


def _error(e: EIRError) -> tuple[Response, int]:
    status = 500 if isinstance(e, InternalError) else 400
    return jsonify({'status': 'error', 'message': str(e)}), status


def _json_body() -> Any:
    return request.get_json(silent=True)


@eir_bp.route('/data-types')
def data_types() -> Response:
    """List the report field group bits."""
    return jsonify({'data_types': {bit.name: bit.value for bit in EIRDataType.bits()}})


@eir_bp.route('/merge', methods=['POST'])
def merge_reports() -> Response | tuple[Response, int]:
    """Merge an update report into the current report and return the changed groups."""
    data = _json_body() or {}
    try:
        current = EInfoReport.from_dict(data.get('current', {}))
        update = EInfoReport.from_dict(data.get('update', {}))
    except EIRError as e:
        logger.warning(f"Rejected merge request: {e}")
        return _error(e)
    except AttributeError:
        return jsonify({'status': 'error', 'message': 'Request body must be an object'}), 400

    changed = current.merge(update)
    if changed:
        logger.info(f"Report {current.address_str} updated: {changed.to_string()}")

    return jsonify({
        'status': 'ok',
        'changed': changed.names(),
        'report': current.to_dict(),
    })


@eir_bp.route('/render', methods=['POST'])
def render_report() -> Response | tuple[Response, int]:
    """Render a report as diagnostic text."""
    include_services = request.args.get('services', '1') not in ('0', 'false', 'no')
    try:
        report = EInfoReport.from_dict(_json_body())
    except EIRError as e:
        logger.warning(f"Rejected render request: {e}")
        return _error(e)

    return jsonify({
        'status': 'ok',
        'data_set': report.eir_data_mask_to_string(),
        'text': report.to_string(include_services),
    })
