"""Errores del dominio del cliente.

Solo el fallo a nivel de envelope (`success: false`) tiene tipo propio.
Los fallos de transporte (red, timeouts, HTTP no-2xx, JSON inválido) se
propagan tal cual desde httpx/pydantic.
"""

from __future__ import annotations


class CoordinadorClientError(Exception):
    """Base de los errores propios del cliente."""


class EnvelopeError(CoordinadorClientError):
    """El backend respondió con `success: false`.

    El mensaje es `error` si viene informado, si no `message`. No se conserva
    ningún código estructurado: quien captura distingue por el texto.
    """

    def __init__(self, reason: str, *, message: str = "", error: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.message = message
        self.error = error
