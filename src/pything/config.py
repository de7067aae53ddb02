"""Value configuration for pything."""

from __future__ import annotations

import dataclasses
import os
from enum import StrEnum
from typing import Any

from pything.exceptions import PyThingConfigError


class ValueComparison(StrEnum):
    """How a candidate value is compared against the stored one."""

    EQUALITY = "equality"
    IDENTITY = "identity"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise PyThingConfigError(f"Not a boolean: {value!r}")


@dataclasses.dataclass(frozen=True)
class ValueConfig:
    """Per-value behaviour settings.

    Parameters
    ----------
    comparison : ValueComparison
        ``EQUALITY`` compares with ``==``, so lists, dicts and pydantic
        models are compared structurally.  ``IDENTITY`` compares with
        ``is`` and treats every new object as a change.
    log_updates : bool
        Emit a DEBUG record for every committed change.
    log_max_string : int
        Longest string rendered verbatim in log records.
    """

    comparison: ValueComparison = ValueComparison.EQUALITY
    log_updates: bool = False
    log_max_string: int = 512

    def __post_init__(self) -> None:
        try:
            comparison = ValueComparison(self.comparison)
        except ValueError as exc:
            raise PyThingConfigError(f"Unknown comparison mode: {self.comparison!r}") from exc
        # Frozen dataclass; normalise plain strings to the enum.
        object.__setattr__(self, "comparison", comparison)
        if not isinstance(self.log_max_string, int) or isinstance(self.log_max_string, bool):
            raise PyThingConfigError(f"log_max_string must be an integer, got {self.log_max_string!r}")
        if self.log_max_string <= 0:
            raise PyThingConfigError("log_max_string must be positive")

    @classmethod
    def from_env(cls, **overrides: Any) -> ValueConfig:
        """Create configuration from environment variables.

        Reads ``PYTHING_VALUE_COMPARISON``, ``PYTHING_LOG_UPDATES`` and
        ``PYTHING_LOG_MAX_STRING``.  Explicit keyword arguments override
        environment values.

        Raises
        ------
        PyThingConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        comparison_env = env.get("PYTHING_VALUE_COMPARISON")
        if comparison_env is not None:
            config_kwargs["comparison"] = comparison_env.strip().lower()

        log_updates_env = env.get("PYTHING_LOG_UPDATES")
        if log_updates_env is not None and "log_updates" not in overrides:
            config_kwargs["log_updates"] = _env_bool(log_updates_env, False)

        max_string_env = env.get("PYTHING_LOG_MAX_STRING")
        if max_string_env is not None and "log_max_string" not in overrides:
            try:
                config_kwargs["log_max_string"] = int(max_string_env)
            except ValueError as exc:
                raise PyThingConfigError(f"PYTHING_LOG_MAX_STRING is not an integer: {max_string_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
