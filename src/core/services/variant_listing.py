"""Orquestación de la búsqueda de variantes.

This module holds the pure steps of the lookup (title validation,
flattening, ordering) plus a small coroutine that glues them to any
`ProductCatalog`. Printing and process exit codes stay in the CLI layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from core.domain.errors import MissingArgumentError
from core.domain.models import Product, ProductQuery, VariantRecord
from core.domain.results import FetchResult, FetchSuccess
from core.interfaces.catalog import ProductCatalog

NAME_FLAG = "--name"


def read_title(args: Sequence[str], flag: str = NAME_FLAG) -> str:
    """Extrae el título del primer argumento `--name=<title>`.

    Solo se separa por el primer `=`: `--name=Shirt=Blue` -> `Shirt=Blue`.
    Una cadena vacía (`--name=`) cuenta como título proporcionado. Cualquier
    otro argumento (incluido un `--name` sin `=`) se ignora.
    """

    prefix = f"{flag}="
    for arg in args:
        if arg.startswith(prefix):
            return arg.partition("=")[2]
    raise MissingArgumentError(flag)


def flatten_variants(products: Iterable[Product]) -> list[VariantRecord]:
    """Aplana producto -> variantes respetando el orden de la respuesta."""

    records: list[VariantRecord] = []
    for product in products:
        for edge in product.variants.edges:
            records.append(
                VariantRecord(
                    product_title=product.title,
                    variant_title=edge.node.title,
                    price=float(edge.node.price.amount),
                )
            )
    return records


def sort_by_price(records: Iterable[VariantRecord]) -> list[VariantRecord]:
    # sorted() es estable: a igual precio se mantiene el orden de la respuesta.
    return sorted(records, key=lambda record: record.price)


@dataclass
class SearchOutcome:
    """Salida de `search_variants`: el resultado crudo y las variantes ordenadas."""

    result: FetchResult
    variants: list[VariantRecord] = field(default_factory=list)


async def search_variants(catalog: ProductCatalog, title: str) -> SearchOutcome:
    """Consulta el catálogo y, si hubo éxito, devuelve las variantes por precio."""

    result = await catalog.fetch_products(ProductQuery(title=title))
    if isinstance(result, FetchSuccess):
        return SearchOutcome(result=result, variants=sort_by_price(flatten_variants(result.products)))
    return SearchOutcome(result=result)
