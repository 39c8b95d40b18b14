from __future__ import annotations

import io

from rich.console import Console

from cli.ui_components import (
    NO_PRODUCTS_MESSAGE,
    format_variant_line,
    print_fetch_error,
    print_variants,
)
from core.domain.models import VariantRecord
from core.domain.results import GraphQLFailure, TransportFailure


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=40, color_system=None), buffer


def test_format_variant_line():
    record = VariantRecord(product_title="Shirt", variant_title="Blue / M", price=19.9)

    assert format_variant_line(record) == "Shirt - Blue / M - price $19.90"


def test_markup_like_titles_are_printed_literally():
    console, buffer = _console()
    record = VariantRecord(product_title="[bold]Shirt[/bold]", variant_title="S", price=1)

    print_variants(console, [record])

    assert buffer.getvalue() == "[bold]Shirt[/bold] - S - price $1.00\n"


def test_long_lines_are_not_wrapped():
    console, buffer = _console()
    record = VariantRecord(product_title="A very long product title " * 3, variant_title="S", price=2)

    print_variants(console, [record])

    assert buffer.getvalue().count("\n") == 1


def test_empty_list_prints_single_line():
    console, buffer = _console()

    print_variants(console, [])

    assert buffer.getvalue() == NO_PRODUCTS_MESSAGE + "\n"


def test_fetch_errors():
    console, buffer = _console()

    print_fetch_error(console, GraphQLFailure(messages=["one", "two"]))
    print_fetch_error(console, TransportFailure(cause="HTTP 500", status_code=500))

    assert buffer.getvalue().splitlines() == [
        "Error fetching products: one",
        "Error fetching products: two",
        "Error fetching products: HTTP 500",
    ]
