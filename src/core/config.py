"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- La CLI construye `AppSettings` una sola vez y la pasa por parámetro al
  cliente de Storefront; los tests inyectan una instancia propia.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Las variables se leen sin prefijo (`SHOPIFY_STORE_URL`, `ACCESS_TOKEN`)
    para mantener compatibilidad con los `.env` existentes de la tienda.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    shopify_store_url: str | None = Field(
        default=None,
        description="Endpoint GraphQL de la Storefront API.",
    )
    access_token: str | None = Field(
        default=None,
        description="Storefront access token (header X-Shopify-Storefront-Access-Token).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    max_retries: int = Field(
        default=1,
        ge=0,
        le=5,
        description="Reintentos ante fallos de transporte (la query es de solo lectura).",
    )
    user_agent: str = Field(
        default="storefront-variants/0.1",
        min_length=1,
        description="User-Agent de las peticiones.",
    )
