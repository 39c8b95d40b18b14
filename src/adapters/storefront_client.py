"""Cliente GraphQL de la Storefront API.

- Envía la query fija `getProductsByTitle` con el título como variable.
- Traduce cualquier fallo (red, status, JSON, shape) a un `FetchResult`;
  no se propagan excepciones al caller.
- Solo reintenta errores de transporte: la query es de solo lectura, así que
  repetir el POST es idempotente.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import ProductQuery, ProductsResponse
from core.domain.results import FetchResult, FetchSuccess, GraphQLFailure, TransportFailure
from core.interfaces.catalog import ProductCatalog

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"

GET_PRODUCTS_BY_TITLE = """
query getProductsByTitle($title: String!) {
  products(first: 10, query: $title) {
    edges {
      node {
        title
        variants(first: 100) {
          edges {
            node {
              title
              price {
                amount
              }
            }
          }
        }
      }
    }
  }
}
"""


def build_payload(query: ProductQuery) -> dict[str, Any]:
    return {
        "query": GET_PRODUCTS_BY_TITLE,
        "variables": {"title": query.title},
    }


def _graphql_error_messages(payload: dict[str, Any]) -> list[str]:
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors:
        return []
    messages: list[str] = []
    for err in errors:
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            messages.append(err["message"])
        else:
            messages.append(str(err))
    return messages


def parse_response(status_code: int, payload: object) -> FetchResult:
    """Clasifica un cuerpo JSON ya decodificado."""

    if isinstance(payload, dict):
        messages = _graphql_error_messages(payload)
        if messages:
            return GraphQLFailure(messages=messages)

    if not 200 <= status_code < 300:
        return TransportFailure(cause=f"HTTP {status_code}", status_code=status_code)

    try:
        response = ProductsResponse.model_validate(payload)
    except ValidationError as exc:
        return TransportFailure(
            cause=f"unexpected response shape ({exc.error_count()} errors)",
            status_code=status_code,
        )
    return FetchSuccess(products=response.product_nodes())


class StorefrontClient(ProductCatalog):
    """Busca productos por título en la Storefront API."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            ACCESS_TOKEN_HEADER: self._settings.access_token or "",
        }

    async def _post(self, client: httpx.AsyncClient, url: str, body: dict[str, Any]) -> httpx.Response:
        attempts = self._settings.max_retries + 1
        attempt = 0
        while True:
            attempt += 1
            try:
                logger.debug("POST %s (attempt %d/%d)", url, attempt, attempts)
                return await client.post(url, json=body)
            except httpx.TransportError as exc:
                if attempt >= attempts:
                    raise
                logger.warning("Transport error on attempt %d: %s; retrying", attempt, exc)

    async def fetch_products(self, query: ProductQuery) -> FetchResult:
        url = self._settings.shopify_store_url
        if not url:
            return TransportFailure(cause="SHOPIFY_STORE_URL is not configured")

        body = build_payload(query)
        try:
            async with build_async_client(
                self._settings,
                extra_headers=self._headers(),
                transport=self._transport,
            ) as client:
                response = await self._post(client, url, body)
        except httpx.HTTPError as exc:
            logger.debug("Request failed: %r", exc)
            return TransportFailure(cause=str(exc) or exc.__class__.__name__)

        try:
            payload = response.json()
        except ValueError:
            logger.debug("Non-JSON body (HTTP %d)", response.status_code)
            return TransportFailure(
                cause=f"invalid JSON in response (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        result = parse_response(response.status_code, payload)
        logger.debug("Storefront result: %s", type(result).__name__)
        return result
