"""Password hashing utilities (PBKDF2-HMAC-SHA256).

Stored hashes look like ``v1:<iterations>:<salt_b64>:<key_b64>`` so the
iteration count can be raised later without invalidating old hashes.
"""

import binascii
import os
from base64 import b64decode, b64encode

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

FORMAT_MARKER = "v1"
ITERATIONS = 100_000
SALT_SIZE = 16  # 128-bit
KEY_SIZE = 32  # 256-bit


def _kdf(salt: bytes, iterations: int, length: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=length,
        salt=salt,
        iterations=iterations,
    )


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt.

    Args:
        password: Raw password

    Returns:
        Encoded hash carrying the format marker, iteration count and salt

    Raises:
        ValueError: If password is blank
    """
    if not password or not password.strip():
        raise ValueError("Password is required")

    salt = os.urandom(SALT_SIZE)
    key = _kdf(salt, ITERATIONS, KEY_SIZE).derive(password.encode("utf-8"))
    return ":".join(
        [
            FORMAT_MARKER,
            str(ITERATIONS),
            b64encode(salt).decode("ascii"),
            b64encode(key).decode("ascii"),
        ]
    )


def verify_password(password: str, password_hash: str) -> bool:
    """Check a raw password against a stored hash.

    The key comparison is constant-time. Malformed hashes never verify.

    Args:
        password: Raw password
        password_hash: Stored hash produced by hash_password

    Returns:
        True if the password matches
    """
    if not password or not password_hash or not password_hash.strip():
        return False

    parts = password_hash.split(":", 3)
    if len(parts) != 4 or parts[0] != FORMAT_MARKER:
        return False

    _, iterations_text, salt_b64, key_b64 = parts
    if not (iterations_text.isascii() and iterations_text.isdigit()):
        return False
    if int(iterations_text) <= 0:
        return False

    try:
        salt = b64decode(salt_b64, validate=True)
        stored_key = b64decode(key_b64, validate=True)
    except binascii.Error:
        return False
    if not stored_key:
        return False

    kdf = _kdf(salt, int(iterations_text), len(stored_key))
    try:
        kdf.verify(password.encode("utf-8"), stored_key)
    except InvalidKey:
        return False
    return True
