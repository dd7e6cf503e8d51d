"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts y headers por defecto (JSON).
- Facilita testeo: se inyecta un `httpx.MockTransport` o cualquier objeto que
  cumpla `core.interfaces.transport.Transport`.

Sin reintentos ni interceptores: los fallos de red y los HTTP no-2xx llegan
tal cual a quien llama.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from core.config import ClientSettings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    base_url: str | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a la API.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los recursos se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": JSON_CONTENT_TYPE,
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=base_url or settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class ApiClient:
    """Cliente de la API construido explícitamente (sin instancia global).

    Cada verbo es una corrutina: llamarlo devuelve la llamada pendiente, que
    luego consume `api_call`.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._client = build_async_client(
            self._settings,
            base_url=base_url,
            extra_headers=headers,
            transport=transport,
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._client.base_url

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def get(self, path: str, *, headers: Mapping[str, str] | None = None) -> httpx.Response:
        return await self._send("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self._send("POST", path, json=body, files=files, headers=headers)

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self._send("PUT", path, json=body, headers=headers)

    async def delete(self, path: str, *, headers: Mapping[str, str] | None = None) -> httpx.Response:
        return await self._send("DELETE", path, headers=headers)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        response = await self._client.request(
            method,
            path,
            json=json,
            files=files,
            headers=dict(headers) if headers else None,
        )
        logger.debug(
            "%s %s -> %s",
            method,
            response.request.url,
            response.status_code,
            extra={"method": method, "status_code": response.status_code},
        )
        return response

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


async def check_health(client: ApiClient) -> dict[str, Any]:
    """Consulta `GET /health` en la raíz del servidor (fuera de /api/v1).

    No usa envelope: devuelve el JSON crudo (`status`, `service`, `version`,
    `database`).
    """

    url = client.base_url.join("/health")
    response = await client.get(str(url))
    response.raise_for_status()
    data = response.json()
    if not isinstance(data, dict):
        raise ValueError(f"unexpected health payload: {data!r}")
    return data
