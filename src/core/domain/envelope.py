"""Envelope común de respuestas del backend (Pydantic v2).

Por qué un modelo genérico:
- Todas las respuestas comparten `{success, message, data?, error?}`; el tipo
  de `data` cambia según el endpoint.
- `PaginatedData[T]` describe la ventana de resultados de los listados.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Envelope uniforme de la API."""

    model_config = ConfigDict(extra="ignore")

    success: bool = Field(
        ...,
        description="Indica si la operación fue exitosa.",
    )
    message: str = Field(
        default="",
        description="Mensaje legible del backend.",
    )
    data: T | None = Field(
        default=None,
        description="Carga útil (ausente en operaciones tipo delete).",
    )
    error: str | None = Field(
        default=None,
        description="Motivo del fallo cuando success es false.",
    )


class PaginatedData(BaseModel, Generic[T]):
    """Página de resultados.

    `len(items) <= limit` es lo esperado pero no se verifica: el backend manda.
    """

    items: list[T] = Field(default_factory=list)
    total: int = Field(..., description="Total de registros que cumplen el filtro.")
    limit: int = Field(...)
    offset: int = Field(...)
