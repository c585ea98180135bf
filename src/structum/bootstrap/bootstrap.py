"""Wire the configured adapters into the domain defaults."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from structum import __version__, config
from structum.adapters.id_generators import ULIDGenerator, UUIDv4Generator
from structum.config import IdStrategy
from structum.domain.entities import Entity
from structum.interfaces.id_generator import IdGenerator
from structum.logging import attach_console_handler, config_console_handler, log_startup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired components."""

    id_generator: IdGenerator
    id_strategy: IdStrategy


def build_id_generator(strategy: IdStrategy) -> IdGenerator:
    """Build the identifier generator for `strategy`."""
    match strategy:
        case IdStrategy.ULID:
            return ULIDGenerator()
        case IdStrategy.UUID4:
            return UUIDv4Generator()
        case _:  # pragma: no cover
            raise ValueError(f"unknown id strategy: {strategy}")


def bootstrap(
    id_strategy: IdStrategy | None = None, log_level: int | None = None
) -> AppContainer:
    """Install the configured defaults and return what was wired.

    Arguments take precedence over the environment (see `structum.config`).

    Args:
        id_strategy: Strategy used to generate ids of new entities.
        log_level: If given (or configured), attach a Rich console handler to
            the ``structum`` logger at this level.

    Returns:
        The wired components.

    Raises:
        UnknownIdStrategyError: If the environment names an unknown strategy.
        InvalidLogLevelError: If the environment names an unknown log level.
    """
    strategy = id_strategy or config.get_id_strategy()
    level = log_level if log_level is not None else config.get_log_level()

    if level is not None:
        attach_console_handler(config_console_handler(level=level), level)

    id_generator = build_id_generator(strategy)
    Entity.id_generator = id_generator.new_id

    log_startup(
        logger, app_version=__version__, level=level, id_strategy=strategy.value
    )
    return AppContainer(id_generator=id_generator, id_strategy=strategy)


def reset_defaults() -> None:
    """Restore the built-in defaults (random UUIDv4 identifiers)."""
    Entity.id_generator = uuid.uuid4
    logger.debug("Entity id generator reset to uuid4")
