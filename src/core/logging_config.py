"""Configuración de logging del cliente y la CLI.

Por qué aquí:
- Los módulos de librería solo crean `logging.getLogger(__name__)`.
- Los handlers se instalan una sola vez, desde el entry-point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGERS = ("adapters", "core", "cli")


def setup_logging(level: str | int = logging.WARNING, *, console: Console | None = None) -> None:
    """Instala un handler Rich en los loggers del paquete."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    for name in _PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.setLevel(level)
        logger.propagate = False

    # httpx registra cada request en INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
