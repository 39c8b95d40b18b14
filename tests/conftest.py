"""Fixtures compartidas: settings inyectadas y respuestas GraphQL falsas."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

from payloads import STORE_URL, TOKEN


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        shopify_store_url=STORE_URL,
        access_token=TOKEN,
        http_timeout_seconds=5.0,
        max_retries=1,
        _env_file=None,
    )


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """Transporte que responde siempre el mismo JSON y guarda las requests."""

    def factory(payload: Any, status_code: int = 200, seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(status_code, json=payload)

        return httpx.MockTransport(handler)

    return factory
