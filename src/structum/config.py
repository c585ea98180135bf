"""Configuration utilities for STRUCTUM.

This module centralizes the environment variables the library reads and the
small helpers that turn them into typed settings.
"""

import logging
import os
from enum import Enum

ID_STRATEGY_ENV = "STRUCTUM_ID_STRATEGY"  # pragma: no mutate
LOG_LEVEL_ENV = "STRUCTUM_LOG_LEVEL"  # pragma: no mutate


class IdStrategy(Enum):
    """Strategies for generating identifiers of new entities."""

    UUID4 = "uuid4"
    ULID = "ulid"


DEFAULT_ID_STRATEGY = IdStrategy.UUID4


class UnknownIdStrategyError(ValueError):
    """Raised when an identifier strategy name is not recognized."""

    def __init__(self, strategy: str) -> None:
        choices = ", ".join(s.value for s in IdStrategy)
        super().__init__(
            f"Unknown ID strategy {strategy!r}; expected one of: {choices}."
        )
        self.strategy = strategy


class InvalidLogLevelError(ValueError):
    """Raised when a log level name is not a standard logging level."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Invalid log level: {level!r}")
        self.level = level


def parse_id_strategy(value: str) -> IdStrategy:
    """Convert a strategy name (case-insensitive) into an `IdStrategy`.

    Raises:
        UnknownIdStrategyError: If the name does not match any strategy.
    """
    try:
        return IdStrategy(value.strip().lower())
    except ValueError as e:
        raise UnknownIdStrategyError(value) from e


def parse_log_level(value: str) -> int:
    """Convert a textual level name such as ``"debug"`` into its numeric value.

    Raises:
        InvalidLogLevelError: If the name is not a standard logging level.
    """
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise InvalidLogLevelError(value)
    return level


def get_id_strategy() -> IdStrategy:
    """Get the identifier strategy from the environment.

    Returns:
        The strategy named by `STRUCTUM_ID_STRATEGY`, or `DEFAULT_ID_STRATEGY`
        when the variable is unset or empty.

    Raises:
        UnknownIdStrategyError: If the variable names an unknown strategy.
    """
    if not (value := os.environ.get(ID_STRATEGY_ENV)):
        return DEFAULT_ID_STRATEGY
    return parse_id_strategy(value)


def get_log_level() -> int | None:
    """Get the console log level from the environment.

    Returns:
        The numeric level named by `STRUCTUM_LOG_LEVEL`, or None when unset.

    Raises:
        InvalidLogLevelError: If the variable holds an unknown level name.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV)):
        return None
    return parse_log_level(value)
