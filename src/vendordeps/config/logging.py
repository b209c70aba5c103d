"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

# httpx logs every request at INFO; those lines only matter when debugging a fetch
HTTP_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for CLI output.

    HTTP client loggers stay at WARNING unless ``level`` is DEBUG, so a normal
    run shows catalog warnings and the run summary only. Pass ``force=True`` to
    reconfigure an already configured root logger.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    http_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
