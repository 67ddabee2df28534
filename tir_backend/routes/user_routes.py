# tir_backend/routes/user_routes.py
from flask import Blueprint, jsonify, request

from tir_backend.routes._auth import (
    ACCESS_TOKEN_HEADER,
    bad_request,
    ensure_can_manage,
    ensure_supervisor,
    error_response,
    get_account_service,
    json_body,
    require_auth,
)
from tir_backend.services.errors import AccountError

user_bp = Blueprint('users', __name__, url_prefix='/users')


@user_bp.errorhandler(AccountError)
def handle_account_error(error):
    return error_response(error)


MAX_ACCOUNT_ID = 2**31 - 1


def _parse_id(raw_id):
    """Plain ASCII digits within the id column range, else None"""
    if not raw_id.isascii() or not raw_id.isdigit():
        return None
    account_id = int(raw_id)
    if not 1 <= account_id <= MAX_ACCOUNT_ID:
        return None
    return account_id


@user_bp.route('', methods=['POST'])
def register():
    """
    POST /users
    Body: {
        "email": "user@example.com",
        "password": "Str0ng!Pass"
    }
    """
    data = json_body('email', 'password')
    if data is None:
        return bad_request()

    account = get_account_service().register(data['email'], data['password'])
    return jsonify(account.to_view(include_api_key=True)), 201


@user_bp.route('/login', methods=['POST'])
def login():
    """
    POST /users/login
    Body: {
        "email": "user@example.com",
        "password": "Str0ng!Pass"
    }
    """
    data = json_body('email', 'password')
    if data is None:
        return bad_request()

    account = get_account_service().authenticate(data['email'], data['password'])
    return jsonify(account.to_view(include_api_key=True)), 200


@user_bp.route('/me', methods=['GET'])
@require_auth
def get_profile(caller):
    return jsonify(caller.to_view(include_api_key=True)), 200


@user_bp.route('/<account_id>', methods=['PUT'])
@require_auth
def update_profile(caller, account_id):
    """
    PUT /users/<id>
    Body: {
        "email": "user@example.com",
        "bio": "optional",
        "fullName": "optional"
    }
    """
    account_id = _parse_id(account_id)
    data = json_body('email', optional=('bio', 'fullName'))
    if account_id is None or data is None or not data['email'].strip():
        return bad_request()

    ensure_can_manage(caller, account_id)
    account = get_account_service().update_profile(
        account_id, data['email'], bio=data['bio'], full_name=data['fullName']
    )
    return jsonify(account.to_view()), 200


@user_bp.route('/<account_id>/password', methods=['PUT'])
@require_auth
def update_password(caller, account_id):
    """
    PUT /users/<id>/password
    Body: {"password": "N3w!Password"}
    """
    account_id = _parse_id(account_id)
    data = json_body('password')
    if account_id is None or data is None:
        return bad_request()

    account = get_account_service().update_password(
        account_id, request.headers.get(ACCESS_TOKEN_HEADER, ''), data['password']
    )
    return jsonify(account.to_view()), 200


@user_bp.route('/<account_id>/role', methods=['PUT'])
@require_auth
def add_role(caller, account_id):
    """
    PUT /users/<id>/role
    Body: {"role": "Member" | "SUPERVISOR"}
    """
    account_id = _parse_id(account_id)
    data = json_body('role')
    if account_id is None or data is None:
        return bad_request()

    ensure_supervisor(caller)
    account = get_account_service().add_role(account_id, data['role'])
    return jsonify(account.to_view()), 200


@user_bp.route('/<account_id>', methods=['DELETE'])
@require_auth
def delete_profile(caller, account_id):
    account_id = _parse_id(account_id)
    if account_id is None:
        return bad_request()

    ensure_can_manage(caller, account_id)
    return jsonify(get_account_service().delete(account_id)), 200


# Export bp for auto-registration
bp = user_bp
