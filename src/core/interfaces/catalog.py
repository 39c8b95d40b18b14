"""Contrato del catálogo de productos.

Por qué Protocol:
- La CLI depende de esta abstracción y no del cliente httpx concreto, así
  un test puede sustituirlo por un catálogo en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ProductQuery
from core.domain.results import FetchResult


@runtime_checkable
class ProductCatalog(Protocol):
    """Contrato mínimo para buscar productos por título.

    Reglas de diseño:
    - `fetch_products` es asíncrono porque hace I/O (HTTP).
    - Nunca lanza por fallos de red o de datos: devuelve un `FetchResult`.
    """

    async def fetch_products(self, query: ProductQuery) -> FetchResult:
        """Busca productos cuyo título coincida con `query.title`."""

        ...
