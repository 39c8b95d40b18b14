"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Las líneas de texto plano se imprimen sin markup ni resaltado para que la
  salida sea exactamente `"<producto> - <variante> - price $<precio>"`.
"""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console
from rich.table import Table

from core.domain.models import VariantRecord
from core.domain.output_format import OutputFormat
from core.domain.results import FetchResult, GraphQLFailure, TransportFailure

NO_PRODUCTS_MESSAGE = "There are no products with that name, please try another one."
MISSING_NAME_MESSAGE = "Please provide a product title using --name argument."
FETCH_ERROR_PREFIX = "Error fetching products:"


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_variant_line(record: VariantRecord) -> str:
    return f"{record.product_title} - {record.variant_title} - price {format_price(record.price)}"


def _print_plain(console: Console, line: str) -> None:
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def build_variants_table(records: Sequence[VariantRecord]) -> Table:
    """Tabla Rich con las variantes ya ordenadas."""

    table = Table(title="Variants by price")
    table.add_column("Product", style="cyan", no_wrap=True)
    table.add_column("Variant", style="white")
    table.add_column("Price", style="green", justify="right")
    for record in records:
        table.add_row(record.product_title, record.variant_title, format_price(record.price))
    return table


def variants_to_json(records: Sequence[VariantRecord]) -> str:
    payload = [record.model_dump(mode="json") for record in records]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def print_variants(
    console: Console,
    records: Sequence[VariantRecord],
    output: OutputFormat = OutputFormat.TEXT,
) -> None:
    """Imprime las variantes (o el aviso de "sin productos")."""

    if not records:
        _print_plain(console, NO_PRODUCTS_MESSAGE)
        return

    if output is OutputFormat.TABLE:
        console.print(build_variants_table(records))
    elif output is OutputFormat.JSON:
        _print_plain(console, variants_to_json(records))
    else:
        for record in records:
            _print_plain(console, format_variant_line(record))


def print_fetch_error(console: Console, result: FetchResult) -> None:
    """Renderiza un fallo de la consulta en la consola de errores."""

    if isinstance(result, GraphQLFailure):
        for message in result.messages or ["unknown GraphQL error"]:
            _print_plain(console, f"{FETCH_ERROR_PREFIX} {message}")
    elif isinstance(result, TransportFailure):
        _print_plain(console, f"{FETCH_ERROR_PREFIX} {result.cause}")
