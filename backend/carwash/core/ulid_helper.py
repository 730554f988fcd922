"""ULID and confirmation code helpers.

Booking identifiers are ULIDs: a 48-bit millisecond timestamp followed by
80 random bits, so ids sort by creation time and two bookings created in the
same millisecond still differ with overwhelming probability. No collision
detection is performed; the chance of two ids colliding within one
millisecond is about 2^-80 per pair and is treated as negligible.

Confirmation codes are independent of the id: short strings drawn with
``secrets`` from the Crockford base32 alphabet (no I, L, O or U) so they
can be read over the phone and typed without ambiguity.
"""

import secrets
from typing import Optional

import ulid

CONFIRMATION_CODE_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
DEFAULT_CONFIRMATION_CODE_LENGTH = 8


def generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ulid.ULID())


def parse_ulid(ulid_str: str) -> Optional[ulid.ULID]:
    """Parse and validate a ULID string."""
    try:
        return ulid.ULID.from_str(ulid_str)
    except (ValueError, TypeError, AttributeError):
        return None


def is_valid_ulid(ulid_str: str) -> bool:
    """Check if a string is a valid ULID."""
    return parse_ulid(ulid_str) is not None


def generate_confirmation_code(length: int = DEFAULT_CONFIRMATION_CODE_LENGTH) -> str:
    """Generate a short, human-typable confirmation code."""
    if length < 1:
        raise ValueError("length must be positive")
    return "".join(secrets.choice(CONFIRMATION_CODE_ALPHABET) for _ in range(length))


def normalize_confirmation_code(code: str) -> str:
    """Normalize user input: strip, uppercase and map look-alike characters."""
    cleaned = code.strip().upper().replace("-", "").replace(" ", "")
    return cleaned.translate(str.maketrans({"O": "0", "I": "1", "L": "1"}))
