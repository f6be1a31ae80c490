"""
Unit tests for payload and identifier validation
"""

import pytest

from utils.validation import validate_user_payload, parse_user_id, is_valid_email


class TestValidateUserPayload:

    def test_valid_payload_has_no_errors(self):
        result = validate_user_payload("Test User", "test@example.com")

        assert result.valid
        assert result.errors == []

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_blank_names_are_rejected(self, name):
        result = validate_user_payload(name, "test@example.com")

        assert not result.valid
        assert [e.field for e in result.errors] == ["name"]

    @pytest.mark.parametrize("email", ["invalid-email", "user@", "@example.com", "a b@example.com", "user@@example.com"])
    def test_malformed_emails_are_rejected(self, email):
        result = validate_user_payload("Test User", email)

        assert not result.valid
        assert result.errors[0].field == "email"
        assert "well-formed" in result.errors[0].message

    def test_missing_email_is_reported_as_blank(self):
        result = validate_user_payload("Test User", None)

        assert result.errors[0].message == "must not be blank"

    def test_every_failing_field_is_reported(self):
        result = validate_user_payload("", "invalid-email")

        assert [e.field for e in result.errors] == ["name", "email"]
        assert result.summary() == "name: must not be blank; email: must be a well-formed email address"


class TestIsValidEmail:

    @pytest.mark.parametrize("email", ["test@example.com", "first.last+tag@sub.example.org"])
    def test_accepts_common_addresses(self, email):
        assert is_valid_email(email)


class TestParseUserId:

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), ("007", 7), ("-3", -3), ("+5", 5)])
    def test_integers_are_parsed(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize("raw", [
        "invalid", "", "1.5", " 1", "1 ", "1e3", "-", "0x10", "١٢",
        "99999999999999999999", "9223372036854775808", "-9223372036854775809",
    ])
    def test_non_integers_are_rejected(self, raw):
        assert parse_user_id(raw) is None

    @pytest.mark.parametrize("raw,expected", [
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -2**63),
    ])
    def test_bigint_bounds_are_accepted(self, raw, expected):
        assert parse_user_id(raw) == expected


class TestEmailDomainPolicy:

    @pytest.mark.parametrize("email", ["a@localhost", "admin@intranet"])
    def test_domains_without_a_dot_are_rejected(self, email):
        result = validate_user_payload("Test User", email)

        assert [e.field for e in result.errors] == ["email"]
