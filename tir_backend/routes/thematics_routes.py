"""
Thematics Proxy Routes

Architecture:
    Client → HTTP/JSON → This Proxy → gRPC → Thematics Service
"""

from flask import Blueprint, current_app, jsonify

from tir_backend.routes._auth import require_auth

bp = Blueprint('thematics', __name__, url_prefix='/thematics')


@bp.route('', methods=['GET'])
@require_auth
def list_thematics(caller):
    client = current_app.extensions['thematics_client']
    result = client.list_thematics(caller.id)

    if not result.get('success'):
        return jsonify({
            'code': 502,
            'type': 'BAD_GATEWAY',
            'message': result.get('error', 'Thematics service unavailable'),
        }), 502

    return jsonify({'thematics': result['thematics']}), 200
