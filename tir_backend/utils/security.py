# tir_backend/utils/security.py
"""
Credential helpers: bcrypt hashing and API key generation
"""
import secrets

import bcrypt

DEFAULT_API_KEY_LENGTH = 50


class EntropyError(RuntimeError):
    """The system random source could not supply bytes"""


def generate_api_key(length=DEFAULT_API_KEY_LENGTH):
    """
    Generate a random hexadecimal API key

    Args:
        length (int): Number of hex characters. Odd lengths round down,
            since every random byte encodes to two characters.

    Returns:
        str: Lowercase hex string of length (length // 2) * 2
    """
    byte_length = length // 2
    try:
        raw = secrets.token_bytes(byte_length)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(str(e)) from e
    return raw.hex()


def hash_password(password):
    """Hash a plaintext password with a fresh bcrypt salt"""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def check_password(password, password_hash):
    """Compare a plaintext password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Malformed hash or a password bcrypt refuses (over 72 bytes)
        return False
