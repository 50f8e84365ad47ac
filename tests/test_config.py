import pytest

from config import ConfigError, Settings


ENV_VARS = ("PROFILES_LOG_LEVEL", "PROFILES_LONG_MONTHS", "PROFILES_IN_ON", "PROFILES_INDENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.log_level == "WARNING"
    assert settings.indent_string == "    "


def test_overrides(monkeypatch):
    monkeypatch.setenv("PROFILES_LOG_LEVEL", "debug")
    monkeypatch.setenv("PROFILES_LONG_MONTHS", "yes")
    monkeypatch.setenv("PROFILES_IN_ON", "0")
    monkeypatch.setenv("PROFILES_INDENT", "2")

    settings = Settings.from_env()
    assert settings == Settings(log_level="DEBUG", long_month_names=True, in_on=False, indent_width=2)
    assert settings.indent_string == "  "


@pytest.mark.parametrize(
    "name, value",
    [
        ("PROFILES_LOG_LEVEL", "chatty"),
        ("PROFILES_LONG_MONTHS", "maybe"),
        ("PROFILES_INDENT", "four"),
        ("PROFILES_INDENT", "-1"),
    ],
)
def test_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        Settings.from_env()
