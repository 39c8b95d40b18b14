"""Resultado de una consulta a la Storefront API.

`FetchResult` es una unión cerrada: quien llama debe tratar explícitamente
los tres casos (éxito, errores GraphQL, fallo de transporte).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from core.domain.models import Product


@dataclass(frozen=True)
class FetchSuccess:
    """La API devolvió `data.products` con la forma esperada."""

    products: list[Product] = field(default_factory=list)


@dataclass(frozen=True)
class GraphQLFailure:
    """La API respondió con un array `errors` de GraphQL."""

    messages: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TransportFailure:
    """Red, status HTTP, cuerpo no-JSON o shape inesperado."""

    cause: str
    status_code: int | None = None


FetchResult = Union[FetchSuccess, GraphQLFailure, TransportFailure]
