from __future__ import annotations

import pytest

from pything.config import ValueComparison, ValueConfig
from pything.exceptions import PyThingConfigError


def test_defaults() -> None:
    config = ValueConfig()
    assert config.comparison is ValueComparison.EQUALITY
    assert config.log_updates is False
    assert config.log_max_string == 512


def test_plain_string_comparison_is_normalised() -> None:
    config = ValueConfig(comparison="identity")  # type: ignore[arg-type]
    assert config.comparison is ValueComparison.IDENTITY


def test_unknown_comparison_rejected() -> None:
    with pytest.raises(PyThingConfigError):
        ValueConfig(comparison="deep")  # type: ignore[arg-type]


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTHING_VALUE_COMPARISON", " Identity ")
    monkeypatch.setenv("PYTHING_LOG_UPDATES", "yes")
    monkeypatch.setenv("PYTHING_LOG_MAX_STRING", "64")

    config = ValueConfig.from_env()

    assert config.comparison is ValueComparison.IDENTITY
    assert config.log_updates is True
    assert config.log_max_string == 64


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTHING_VALUE_COMPARISON", "identity")
    monkeypatch.setenv("PYTHING_LOG_UPDATES", "on")

    config = ValueConfig.from_env(comparison=ValueComparison.EQUALITY, log_updates=False)

    assert config.comparison is ValueComparison.EQUALITY
    assert config.log_updates is False


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PYTHING_VALUE_COMPARISON", "PYTHING_LOG_UPDATES", "PYTHING_LOG_MAX_STRING"):
        monkeypatch.delenv(name, raising=False)

    assert ValueConfig.from_env() == ValueConfig()


@pytest.mark.parametrize(
    ("name", "raw"),
    [
        ("PYTHING_LOG_UPDATES", "maybe"),
        ("PYTHING_LOG_MAX_STRING", "lots"),
        ("PYTHING_LOG_MAX_STRING", "0"),
    ],
)
def test_from_env_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, raw: str) -> None:
    monkeypatch.setenv(name, raw)
    with pytest.raises(PyThingConfigError):
        ValueConfig.from_env()


@pytest.mark.parametrize("raw", ["64", 12.5, True])
def test_non_integer_log_max_string_rejected(raw: object) -> None:
    with pytest.raises(PyThingConfigError):
        ValueConfig(log_max_string=raw)  # type: ignore[arg-type]
