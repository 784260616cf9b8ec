"""Logging configuration for Vocalis.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed by applications (or the CLI) through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Union

ROOT_LOGGER = "vocalis"

# Third-party loggers that are chatty at INFO/DEBUG.
_NOISY_LOGGERS = ("httpx", "httpcore")

_HANDLER_FLAG = "_vocalis_handler"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Install a stream handler on the ``vocalis`` logger.

    Calling this more than once only adjusts levels.

    Args:
        verbose: Log at DEBUG (including HTTP client internals) when True.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if not any(getattr(h, _HANDLER_FLAG, False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "INFO") or numeric constants.
    Components outside the ``vocalis`` namespace (other than the HTTP client
    loggers) are resolved under it, so ``"models.providers"`` targets
    ``vocalis.models.providers``.
    """
    if isinstance(level, str):
        level_value = getattr(logging, level.upper(), logging.INFO)
    else:
        level_value = level
    in_namespace = component == ROOT_LOGGER or component.startswith(f"{ROOT_LOGGER}.")
    if in_namespace or component in _NOISY_LOGGERS:
        name = component
    else:
        name = f"{ROOT_LOGGER}.{component}"
    logging.getLogger(name).setLevel(level_value)


__all__ = ["configure_logging", "get_logger", "set_component_level"]
