"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y comandos lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_BASE_URL = "http://localhost:8080/api/v1"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "coordinador"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "coordinador"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "coordinador"
    return Path.home() / ".config" / "coordinador"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves con valor `None` se ignoran; el resto del archivo se conserva.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# coordinador client config (.env)"]
    for key in sorted(existing):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar los adaptadores.
    - Un único contrato de configuración para CLI y cliente HTTP.
    """

    model_config = SettingsConfigDict(
        env_prefix="COORDINADOR_",
        extra="ignore",
        case_sensitive=False,
        # El .env global de usuario se resuelve en cada instancia (ver abajo).
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="URL base de la API (incluye el prefijo /api/v1).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="coordinador-client/0.1",
        min_length=1,
        description="User-Agent enviado al backend.",
    )
    export_page_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Tamaño de página al recorrer todos los estudiantes (export).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto de la CLI.",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Añade el .env global de usuario, resuelto en tiempo de ejecución.

        Orden: init > env vars > .env de usuario > .env del proyecto.
        Con `_env_file=None` no se lee ningún archivo.
        """

        if getattr(dotenv_settings, "env_file", None) is None:
            return init_settings, env_settings, dotenv_settings, file_secret_settings

        user_dotenv = DotEnvSettingsSource(settings_cls, env_file=get_user_env_file(), env_file_encoding="utf-8")
        return init_settings, env_settings, user_dotenv, dotenv_settings, file_secret_settings
