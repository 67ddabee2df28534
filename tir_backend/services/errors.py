# tir_backend/services/errors.py
"""
Account error taxonomy

Every error knows its HTTP status and renders as {code, type, message}.
"""
from tir_backend.utils.validation import PASSWORD_RULES_MESSAGE


class AccountError(Exception):
    code = 500
    type = "INTERNAL_SERVER_ERROR"
    message = "Internal Server Error"

    def __init__(self, message=None, code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code

    def to_dict(self):
        return {'code': self.code, 'type': self.type, 'message': self.message}


class ValidationError(AccountError):
    code = 422
    type = "UNPROCESSABLE_ENTITY"
    message = PASSWORD_RULES_MESSAGE


class InvalidRole(ValidationError):
    code = 400
    type = "BAD_REQUEST"
    message = "Invalid role"


class InvalidCredentials(AccountError):
    code = 422
    type = "UNPROCESSABLE_ENTITY"
    message = "Invalid e-mail or password"


class Unauthorized(AccountError):
    code = 401
    type = "Unauthorized"
    message = "Missing x-access-token header variable"


class NotFound(Unauthorized):
    """Unknown account id, rendered exactly like Unauthorized"""


class Conflict(AccountError):
    code = 400
    type = "BAD_REQUEST"
    message = "E-mail already exists"


class InternalError(AccountError):
    pass


class StoreError(InternalError):
    pass
