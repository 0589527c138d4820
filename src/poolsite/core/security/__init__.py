"""Security utilities - crypto, headers and slug validators.

Re-exports all security-related functions for convenience.
"""

from src.poolsite.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.poolsite.core.security.validators import make_slug, validate_slug_format

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Validators
    "make_slug",
    "validate_slug_format",
]
