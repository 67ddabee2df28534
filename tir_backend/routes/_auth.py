# tir_backend/routes/_auth.py
"""
Shared request helpers for authenticated routes
"""
from functools import wraps

from flask import current_app, jsonify, request

from tir_backend.models import Role
from tir_backend.services.errors import AccountError, Unauthorized

ACCESS_TOKEN_HEADER = 'x-access-token'

BAD_REQUEST_BODY = {
    'code': 400,
    'type': 'BAD_REQUEST',
    'message': 'Invalid input or missing data',
}


def get_account_service():
    return current_app.extensions['account_service']


def bad_request():
    return jsonify(BAD_REQUEST_BODY), 400


def error_response(error):
    return jsonify(error.to_dict()), error.code


def json_body(*required, optional=()):
    """
    Read a JSON object body with string fields

    Returns:
        dict or None: the requested fields, None if the body is malformed
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None

    fields = {}
    for name in required:
        value = data.get(name)
        if not isinstance(value, str):
            return None
        fields[name] = value
    for name in optional:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            return None
        fields[name] = value
    return fields


def require_auth(f):
    """Require a valid x-access-token header; passes the caller account"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        api_key = request.headers.get(ACCESS_TOKEN_HEADER, '')
        try:
            caller = get_account_service().authenticate_by_api_key(api_key)
        except AccountError as e:
            return error_response(e)
        return f(caller, *args, **kwargs)
    return decorated_function


def ensure_can_manage(caller, account_id):
    """Callers may act on their own account; supervisors on any"""
    if caller.id != account_id and caller.account_role != Role.SUPERVISOR:
        raise Unauthorized()


def ensure_supervisor(caller):
    """Role changes are reserved to supervisors"""
    if caller.account_role != Role.SUPERVISOR:
        raise Unauthorized()
