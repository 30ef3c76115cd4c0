"""Tests for SmtpProviderOptions."""

import pydantic
import pytest

from notify_smtp.options import SmtpProviderOptions


def test_defaults():
    """Test unconfigured options."""
    options = SmtpProviderOptions()

    assert options.server == ""
    assert options.port == 587
    assert options.username is None
    assert options.password is None
    assert options.use_ssl is False
    assert options.default_from_address is None
    assert options.timeout == 30.0


def test_options_are_frozen(smtp_options):
    """Test options cannot change after construction."""
    with pytest.raises(pydantic.ValidationError):
        smtp_options.server = "other.example.com"


def test_password_is_not_in_repr(smtp_options):
    """Test the password never leaks through repr()."""
    assert "secret" not in repr(smtp_options)
    assert "smtp.example.com" in repr(smtp_options)


def test_empty_strings_become_none():
    """Test blank credentials and sender mean "not configured"."""
    options = SmtpProviderOptions(username="", password="  ", default_from_address="")

    assert options.username is None
    assert options.password is None
    assert options.default_from_address is None


@pytest.mark.parametrize("kwargs", [{"port": -1}, {"port": 70000}, {"timeout": 0}])
def test_invalid_values_raise(kwargs):
    """Test out-of-range values are rejected."""
    with pytest.raises(pydantic.ValidationError):
        SmtpProviderOptions(**kwargs)


def test_from_parameters_coerces_strings():
    """Test string parameter values are coerced to typed fields."""
    options = SmtpProviderOptions.from_parameters(
        {
            "smtp_Server": "smtp.example.com",
            "smtp_Port": "2525",
            "smtp_Username": "mailer",
            "smtp_Password": "secret",
            "smtp_UseSSL": "true",
            "smtp_DefaultFromAddress": "noreply@example.com",
            "smtp_Timeout": "5",
            "sms_From": "+1234567890",
        }
    )

    assert options.server == "smtp.example.com"
    assert options.port == 2525
    assert options.username == "mailer"
    assert options.password == "secret"
    assert options.use_ssl is True
    assert options.default_from_address == "noreply@example.com"
    assert options.timeout == 5.0


def test_from_parameters_rejects_malformed_port():
    """Test a non-numeric port raises."""
    with pytest.raises(pydantic.ValidationError):
        SmtpProviderOptions.from_parameters({"smtp_Port": "smtp"})


def test_to_parameters_round_trip(smtp_options):
    """Test options survive a parameter round trip."""
    parameters = smtp_options.to_parameters()

    assert parameters["smtp_Port"] == "587"
    assert parameters["smtp_UseSSL"] == "true"
    assert SmtpProviderOptions.from_parameters(parameters) == smtp_options


def test_to_parameters_skips_unset_values():
    """Test None fields are left out."""
    parameters = SmtpProviderOptions(server="localhost").to_parameters()

    assert "smtp_Username" not in parameters
    assert "smtp_Password" not in parameters
    assert "smtp_DefaultFromAddress" not in parameters
