# tir_backend/utils/validation.py
"""
Input validation utilities
"""
import re

MIN_PASSWORD_LENGTH = 10

PASSWORD_RULES_MESSAGE = (
    "The password must be at least 10 characters, contains numeric characters, "
    "minimum 1 uppercase letter [A-Z] and minimum 1 special character"
)

_UPPERCASE_RE = re.compile(r'[A-Z]')
_DIGIT_RE = re.compile(r'[0-9]')
_SPECIAL_CHAR_RE = re.compile(r'[!@#$%^&*()_+\-=\[\]{};:\'",<>./?\\|`]')

def validate_password(password):
    """Validate password strength (10+ chars, uppercase, digit, special char)"""
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        return False

    if not _UPPERCASE_RE.search(password):
        return False

    if not _DIGIT_RE.search(password):
        return False

    if not _SPECIAL_CHAR_RE.search(password):
        return False

    return True
