"""
Input validation helper functions.
Provides validation for common input types.
"""

import re


def parse_integer(value) -> int | None:
    """
    Parse an integer from JSON input.

    Accepts ints and digit strings ('3', ' 3 '); rejects booleans, floats
    with a fractional part and anything else.

    Args:
        value: Raw value

    Returns:
        int or None if not a valid integer
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and re.match(r'^\s*-?\d+\s*$', value):
        return int(value)
    return None


def validate_phone(phone: str) -> bool:
    """
    Validate Peruvian mobile number format.
    Accepts: +51 9XX XXX XXX, 519XXXXXXXX, 9XX XXX XXX

    Args:
        phone: Phone number to validate

    Returns:
        True if valid phone format
    """
    if not phone:
        return False

    # Remove spaces and common separators
    cleaned = re.sub(r'[\s\-\(\)]', '', phone)

    patterns = [
        r'^\+519[0-9]{8}$',  # +519XXXXXXXX
        r'^519[0-9]{8}$',    # 519XXXXXXXX
        r'^9[0-9]{8}$'       # 9XXXXXXXX
    ]

    return any(bool(re.match(pattern, cleaned)) for pattern in patterns)


def normalize_phone(phone: str) -> str:
    """Strip separators and the +51 prefix so one number has one spelling."""
    cleaned = re.sub(r'[\s\-\(\)]', '', phone or '')
    if cleaned.startswith('+51'):
        cleaned = cleaned[3:]
    elif cleaned.startswith('51') and len(cleaned) == 11:
        cleaned = cleaned[2:]
    return cleaned


def sanitize_input(text: str, max_length: int = None) -> str:
    """
    Sanitize text input by trimming and limiting length.

    Args:
        text: Text to sanitize
        max_length: Maximum length (optional)

    Returns:
        Sanitized text
    """
    if not text:
        return ''

    sanitized = text.strip()

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized
