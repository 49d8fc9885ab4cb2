"""
Helper Functions

Contains utility functions used throughout the application.
"""

import re
import string
from typing import Dict, Optional, Type
from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from .errors import ValidationError


def get_user_identity(request_obj=None, session_id: Optional[str] = None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = request_obj.remote_addr or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': session_id
    }


def parse_category_id(raw_id) -> int:
    """Category ids arrive as path strings; anything but an integer is a 400."""
    try:
        return int(raw_id)
    except (TypeError, ValueError):
        raise ValidationError("Invalid category ID")


def parse_count(raw_count, default: int) -> int:
    """Positive integer query parameter; invalid, zero or negative values fall back to the default."""
    try:
        count = int(raw_count)
    except (TypeError, ValueError):
        return default
    return count if count > 0 else default


def normalize_letter(value) -> Optional[str]:
    """Uppercased A-Z letter, or None for anything else (digits, accents, multi-char case maps)."""
    if not isinstance(value, str):
        return None
    letter = value.strip().upper()
    return letter if len(letter) == 1 and letter in string.ascii_uppercase else None


INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_integer(value) -> Optional[int]:
    """Whole number from an int, an integral float or a plain digit string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def validation_error_from_pydantic(error: PydanticValidationError,
                                   message: Optional[str] = None) -> ValidationError:
    """Flatten pydantic's error list into {field, message} entries."""
    details = [
        {'field': '.'.join(str(part) for part in item['loc']), 'message': item['msg']}
        for item in error.errors(include_url=False, include_context=False)
    ]
    return ValidationError(message, errors=details)


def parse_body(schema: Type[BaseModel], data, message: Optional[str] = None):
    """Validate a JSON body against a request schema, raising a 400 with field errors."""
    try:
        return schema.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        raise validation_error_from_pydantic(e, message)
