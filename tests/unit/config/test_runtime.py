import pytest

from twofloats.config.errors import ConfigurationError
from twofloats.config.runtime import env_float, env_int, env_str

_CONST_42 = 42


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("TEST_INT", "42")
    monkeypatch.setenv("TEST_FLOAT", "3.14")
    monkeypatch.setenv("TEST_STR", "  value  ")

    assert env_int("TEST_INT") == _CONST_42
    assert env_float("TEST_FLOAT") == pytest.approx(3.14)
    assert env_str("TEST_STR") == "value"
    assert env_str("TEST_STR", strip=False) == "  value  "


def test_env_helpers_defaults(monkeypatch):
    monkeypatch.delenv("MISSING_VALUE", raising=False)
    monkeypatch.setenv("BLANK_VALUE", "")

    assert env_int("MISSING_VALUE", 7) == 7
    assert env_float("MISSING_VALUE") is None
    assert env_str("BLANK_VALUE", "fallback") == "fallback"
    assert env_str("BLANK_VALUE", allow_blank=True) == ""


def test_env_helpers_errors(monkeypatch):
    monkeypatch.delenv("MISSING_INT", raising=False)
    with pytest.raises(ConfigurationError, match="missing or empty"):
        env_int("MISSING_INT", required=True)
    with pytest.raises(ConfigurationError, match="missing or empty"):
        env_str("MISSING_INT", required=True)

    monkeypatch.setenv("BAD_FLOAT", "not-a-float")
    with pytest.raises(ConfigurationError, match="Expected a float"):
        env_float("BAD_FLOAT")

    monkeypatch.setenv("BAD_INT", "1.5")
    with pytest.raises(ConfigurationError, match="Expected an integer"):
        env_int("BAD_INT")


def test_configuration_error_builders():
    assert "mutually exclusive" in str(ConfigurationError.conflicting_values("A", "B"))
    assert str(ConfigurationError.invalid_value("X", 3, "Too big")) == "Invalid value for X: 3. Too big"
    assert isinstance(ConfigurationError.missing_value("Y"), RuntimeError)
