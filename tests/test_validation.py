import pytest

from user_api.core.validation import (
    ApiVersion,
    is_valid_email,
    is_valid_phone,
    validate_identifier,
    validate_password,
    validate_record,
)


def test_record_email_is_trimmed_and_lowercased():
    result = validate_record({"id": "  USER@Example.com ", "password": "secret1"}, ApiVersion.BY_EMAIL)
    assert result.valid
    assert result.errors == []
    assert result.normalized.id == "user@example.com"
    assert result.normalized.password == "secret1"


def test_record_rejects_invalid_email():
    result = validate_record({"id": "notanemail", "password": "secret1"}, ApiVersion.BY_EMAIL)
    assert not result.valid
    assert "ID must be a valid email address" in result.errors
    assert result.normalized is None


def test_record_rejects_short_password():
    result = validate_record({"id": "user@x.com", "password": "ab"}, ApiVersion.BY_EMAIL)
    assert not result.valid
    assert result.errors == ["Password must be at least 6 characters long"]


def test_record_accumulates_identifier_and_password_errors():
    result = validate_record({"id": "12", "password": "ab"}, ApiVersion.BY_EMAIL)
    assert result.errors == [
        "ID must be a valid email address",
        "Password must be at least 6 characters long",
    ]


def test_record_missing_fields():
    result = validate_record({}, ApiVersion.BY_PHONE)
    assert result.errors == ["ID is required", "Password is required"]


def test_record_non_string_password():
    result = validate_record({"id": "a@b.com", "password": 1234567}, ApiVersion.BY_EMAIL)
    assert result.errors == ["Password must be a string"]


@pytest.mark.parametrize("body", [None, "a@b.com", 42])
def test_record_body_must_be_object(body):
    result = validate_record(body, ApiVersion.BY_EMAIL)
    assert not result.valid
    assert result.errors == ["User data must be an object"]


def test_record_phone_is_stripped():
    result = validate_record({"id": "(555) 123-4567", "password": "secret1"}, ApiVersion.BY_PHONE)
    assert result.valid
    assert result.normalized.id == "5551234567"


def test_identifier_phone_keeps_leading_plus():
    result = validate_identifier("+1 (234) 567-8901", ApiVersion.BY_PHONE)
    assert result.valid
    assert result.normalized == "+12345678901"


@pytest.mark.parametrize("identifier", ["", None])
def test_identifier_required_short_circuits(identifier):
    result = validate_identifier(identifier, ApiVersion.BY_EMAIL)
    assert result.errors == ["ID is required"]
    assert result.normalized is None


def test_identifier_rejects_unknown_version():
    result = validate_identifier("a@b.com", "v3")
    assert result.errors == ["Invalid API version"]


def test_identifier_raw_string_version_is_not_accepted():
    assert not validate_identifier("a@b.com", "v1").valid


def test_identifier_email_in_phone_version():
    result = validate_identifier("user@example.com", ApiVersion.BY_PHONE)
    assert result.errors == ["ID must be a valid phone number"]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("user@example.com", True),
        ("  first.last@sub.example.org  ", True),
        ("user@example", False),
        ("user@@example.com", False),
        ("us er@example.com", False),
        ("@example.com", False),
        ("user@.com", False),
        (123, False),
    ],
)
def test_is_valid_email(value, expected):
    assert is_valid_email(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1", True),
        ("+44 20 7946 0958", True),
        ("1234567890123456", True),
        ("12345678901234567", False),
        ("0123456789", False),
        ("+0123", False),
        ("1+234", False),
        ("++1234", False),
        ("call me", False),
        ("١٢٣٤", False),
        (5551234, False),
    ],
)
def test_is_valid_phone(value, expected):
    assert is_valid_phone(value) is expected


@pytest.mark.parametrize(
    "password,message",
    [
        (None, "Password is required"),
        ("", "Password is required"),
        (["secret1"], "Password must be a string"),
        ("12345", "Password must be at least 6 characters long"),
        ("123456", None),
    ],
)
def test_validate_password(password, message):
    assert validate_password(password) == message


def test_record_array_body_has_no_fields():
    result = validate_record(["a@b.com", "secret1"], ApiVersion.BY_EMAIL)
    assert result.errors == ["ID is required", "Password is required"]


@pytest.mark.parametrize("identifier", ["", None, False, 0, 0.0])
def test_record_missing_identifier_values(identifier):
    result = validate_record({"id": identifier, "password": "secret1"}, ApiVersion.BY_EMAIL)
    assert result.errors == ["ID is required"]


@pytest.mark.parametrize("identifier", [[], {}, True])
def test_record_empty_containers_are_present_but_invalid(identifier):
    result = validate_record({"id": identifier, "password": "secret1"}, ApiVersion.BY_EMAIL)
    assert result.errors == ["ID must be a valid email address"]


@pytest.mark.parametrize("password", [{}, [], True, 1234567])
def test_record_non_string_password_values(password):
    result = validate_record({"id": "a@b.com", "password": password}, ApiVersion.BY_EMAIL)
    assert result.errors == ["Password must be a string"]


@pytest.mark.parametrize("password", [False, 0, ""])
def test_record_missing_password_values(password):
    result = validate_record({"id": "a@b.com", "password": password}, ApiVersion.BY_EMAIL)
    assert result.errors == ["Password is required"]


def test_email_with_byte_order_mark_inside_is_rejected():
    assert not is_valid_email("a\ufeff@b.com")


def test_email_byte_order_mark_is_trimmed():
    result = validate_identifier("\ufeff User@B.com\ufeff", ApiVersion.BY_EMAIL)
    assert result.valid
    assert result.normalized == "user@b.com"
