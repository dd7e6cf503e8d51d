"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Las funciones de recursos reciben el transporte inyectado, así que un
  doble de test (o un cliente con otra base URL) se sustituye sin estado
  global.
"""

from __future__ import annotations

from typing import Any, Awaitable, Mapping, Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    """Verbos HTTP relativos a una base URL fija.

    Reglas de diseño:
    - Cada verbo devuelve una llamada pendiente (awaitable); quien la consume
      es `adapters.envelope.api_call`.
    - `path` puede llevar ya la query string embebida.
    - `headers` sobreescribe los headers por defecto solo para esa llamada.
    """

    def get(self, path: str, *, headers: Mapping[str, str] | None = None) -> Awaitable[httpx.Response]:
        ...

    def post(
        self,
        path: str,
        body: Any = None,
        *,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Awaitable[httpx.Response]:
        ...

    def put(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Awaitable[httpx.Response]:
        ...

    def delete(self, path: str, *, headers: Mapping[str, str] | None = None) -> Awaitable[httpx.Response]:
        ...
