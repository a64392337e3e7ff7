"""Credential primitives: password hashing, strength estimation, and tokens."""
from __future__ import annotations

import math
import secrets
import string

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from zxcvbn import zxcvbn

from lodge_chat.core.settings import settings

TOKEN_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
# zxcvbn refuses longer inputs; the prefix is a lower bound on the full estimate.
ESTIMATOR_MAX_LENGTH = 72

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Return a salted Argon2id hash of ``password``."""
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check ``password`` against a stored Argon2 hash.

    Returns:
        True when the hash matches; False for a mismatch, a malformed hash, or
        a user without a stored hash.
    """
    if not password_hash:
        return False
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def password_entropy(password: str, excluded_words: list[str] | None = None) -> float:
    """Estimate the entropy of ``password`` in bits.

    ``excluded_words`` are added to the estimator's dictionaries so that
    passwords derived from them (for example the display name) score low.
    """
    result = zxcvbn(
        password[:ESTIMATOR_MAX_LENGTH],
        user_inputs=[word for word in excluded_words or [] if word],
    )
    return float(result["guesses_log10"]) / math.log10(2)


def is_strong_password(password: str, excluded_words: list[str] | None = None) -> bool:
    """Return True when the estimated entropy meets the configured minimum."""
    return password_entropy(password, excluded_words) >= settings.min_password_entropy


def generate_token(length: int | None = None) -> str:
    """Return a random alphanumeric token from a cryptographically secure source."""
    size = length or settings.token_length
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(size))
