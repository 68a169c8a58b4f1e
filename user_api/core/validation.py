"""Identifier and password validation for both API versions.

Version 1 identifies users by email address, version 2 by phone number.
Validators never raise on bad input; they return the normalized value or
the list of reasons it was rejected.
"""
from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Any, List, Optional

EMAIL_PATTERN = re.compile(r"[^\s\ufeff@]+@[^\s\ufeff@]+\.[^\s\ufeff@]+")
TRIM_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
PHONE_PATTERN = re.compile(r"\+?[1-9][0-9]{0,15}")
PHONE_STRIP_PATTERN = re.compile(r"[^0-9+]")
PASSWORD_MIN_LENGTH = 6

ID_REQUIRED = "ID is required"
INVALID_EMAIL = "ID must be a valid email address"
INVALID_PHONE = "ID must be a valid phone number"
INVALID_VERSION = "Invalid API version"
BODY_NOT_OBJECT = "User data must be an object"


class ApiVersion(str, Enum):
    BY_EMAIL = "v1"
    BY_PHONE = "v2"


@dataclass
class NormalizedRecord:
    id: str
    password: str


@dataclass
class RecordValidation:
    valid: bool
    errors: List[str] = field(default_factory=list)
    normalized: Optional[NormalizedRecord] = None


@dataclass
class IdentifierValidation:
    valid: bool
    errors: List[str] = field(default_factory=list)
    normalized: Optional[str] = None


def is_missing(value: Any) -> bool:
    """True for the values a client sends to mean "not provided".

    Empty containers count as provided, so ``[]`` fails the format check
    instead of being reported as missing.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def trim(value: str) -> str:
    # str.strip() leaves the byte order mark in place.
    return TRIM_PATTERN.sub("", value)


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(trim(value)) is not None


def normalize_phone(value: str) -> str:
    # Keeps digits and every "+"; the pattern only accepts a leading one.
    return PHONE_STRIP_PATTERN.sub("", value)


def is_valid_phone(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return PHONE_PATTERN.fullmatch(normalize_phone(value)) is not None


def validate_password(password: Any) -> Optional[str]:
    """Return the rejection message for ``password``, or None when it is acceptable."""
    if is_missing(password):
        return "Password is required"
    if not isinstance(password, str):
        return "Password must be a string"
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    return None


def _check_identifier(identifier: Any, version: Any, errors: List[str]) -> Optional[str]:
    if is_missing(identifier):
        errors.append(ID_REQUIRED)
        return None

    if version is ApiVersion.BY_EMAIL:
        if not is_valid_email(identifier):
            errors.append(INVALID_EMAIL)
            return None
        return trim(identifier).lower()

    if version is ApiVersion.BY_PHONE:
        if not is_valid_phone(identifier):
            errors.append(INVALID_PHONE)
            return None
        return normalize_phone(identifier)

    errors.append(INVALID_VERSION)
    return None


def validate_record(body: Any, version: Any) -> RecordValidation:
    """Validate a create request body.

    Identifier and password are both checked so the caller sees every
    problem at once. ``normalized`` is only populated when there are no
    errors.
    """
    if not isinstance(body, (dict, list)):
        return RecordValidation(valid=False, errors=[BODY_NOT_OBJECT])

    # Arrays carry no named fields.
    fields = body if isinstance(body, dict) else {}

    errors: List[str] = []
    user_id = _check_identifier(fields.get("id"), version, errors)

    password = fields.get("password")
    password_error = validate_password(password)
    if password_error:
        errors.append(password_error)

    if errors:
        return RecordValidation(valid=False, errors=errors)
    return RecordValidation(
        valid=True,
        normalized=NormalizedRecord(id=user_id, password=password),
    )


def validate_identifier(identifier: Any, version: Any) -> IdentifierValidation:
    errors: List[str] = []
    normalized = _check_identifier(identifier, version, errors)
    if errors:
        return IdentifierValidation(valid=False, errors=errors)
    return IdentifierValidation(valid=True, normalized=normalized)
