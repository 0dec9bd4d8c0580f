"""
Routes exposing the timezone lookup over HTTP.
"""
from flask import Blueprint, jsonify, request

from tz_bridge.exceptions import TimezoneLookupError
from flask_app.services.timezone_service import TimezoneService

main_bp = Blueprint('main', __name__)

RESULT_STATUS_CODES = {
    'success': 200,
    'error': 500,
    'not_implemented': 501,
}


@main_bp.route('/timezone', methods=['GET'])
def get_timezone():
    """Return the device timezone identifier."""
    service = TimezoneService()
    try:
        timezone_id = service.get_timezone()
    except TimezoneLookupError as e:
        return jsonify({'error': str(e)}), 500
    return jsonify({'timezone': timezone_id})


@main_bp.route('/channel/<path:channel_name>', methods=['POST'])
def invoke_channel(channel_name):
    """Dispatch a method-channel call such as {"method": "getTimeZone"}."""
    service = TimezoneService()
    if not service.has_channel(channel_name):
        return jsonify({'error': f'Unknown channel: {channel_name}'}), 404

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or not payload.get('method'):
        return jsonify({'error': 'Request body must be JSON with a "method" field.'}), 400

    arguments = payload.get('arguments')
    result = service.invoke(payload['method'], arguments if isinstance(arguments, dict) else None)
    return jsonify(result.to_dict()), RESULT_STATUS_CODES[result.status]


@main_bp.route('/health', methods=['GET'])
def health():
    """Liveness check."""
    return jsonify({'status': 'ok'})
