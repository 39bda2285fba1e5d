"""
API Routes - Contact form relay
"""

from flask import request, jsonify, current_app
from utils.relay import relay_submission, GENERIC_ERROR
from . import api_bp


@api_bp.route('/send', methods=['POST'])
def send():
    """Relay a contact form submission to the email provider"""
    try:
        payload = request.get_json(force=True)
    except Exception:
        current_app.logger.exception('Could not decode contact payload')
        return jsonify({'error': GENERIC_ERROR}), 500

    body, status = relay_submission(payload)
    return jsonify(body), status
