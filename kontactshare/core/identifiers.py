"""Generators for profile codes, external ids and PINs."""

import re
import secrets
import string
from datetime import date

UNIQUE_CODE_ALPHABET = string.ascii_lowercase + string.digits
UNIQUE_CODE_LENGTH = 16

PIN_PATTERN = re.compile(r"[0-9]{5}")


def generate_unique_code() -> str:
    """Public, URL-safe profile code."""
    return "".join(secrets.choice(UNIQUE_CODE_ALPHABET) for _ in range(UNIQUE_CODE_LENGTH))


def generate_external_id(today: date | None = None) -> str:
    """External id in the form ``YYYYMMDD-0000-NNNN``."""
    today = today or date.today()
    return f"{today:%Y%m%d}-0000-{secrets.randbelow(10000):04d}"


def generate_pin() -> str:
    """Five digit PIN between 10000 and 99999."""
    return str(10000 + secrets.randbelow(90000))


def is_valid_pin(pin: object) -> bool:
    """True when ``pin`` is a string of exactly five digits."""
    return isinstance(pin, str) and PIN_PATTERN.fullmatch(pin) is not None
