"""Desenvuelve el envelope `{success, message, data?, error?}`.

Dos niveles de error:
- Transporte (red, timeout, HTTP no-2xx, JSON inválido, forma incorrecta):
  no se captura aquí, sube tal cual.
- Dominio (`success: false`): se convierte en `EnvelopeError`.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, TypeVar, cast

import httpx
from pydantic import TypeAdapter

from core.domain.envelope import APIResponse
from core.errors import EnvelopeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def api_call(request: Awaitable[httpx.Response], payload_type: type[T] | Any = None) -> T:
    """Espera la llamada pendiente y devuelve `data` o lanza `EnvelopeError`.

    - `payload_type`: tipo esperado de `data` (modelo Pydantic, genérico,
      `list[...]`, ...). Si es `None`, `data` se devuelve sin tocar.
    - Con `success: true` y sin `data` devuelve `None` (p.ej. delete).
    """

    response = await request
    response.raise_for_status()

    envelope = APIResponse[Any].model_validate(response.json())
    if not envelope.success:
        reason = envelope.error or envelope.message
        logger.warning(
            "API call failed: %s",
            reason,
            extra={"url": str(response.request.url), "status_code": response.status_code},
        )
        raise EnvelopeError(reason, message=envelope.message, error=envelope.error)

    if envelope.data is None or payload_type is None:
        return cast(T, envelope.data)
    return TypeAdapter(payload_type).validate_python(envelope.data)
