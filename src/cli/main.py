"""CLI principal (Typer).

Un único comando: busca productos por título en la Storefront API e imprime
sus variantes ordenadas por precio.

Exit codes:
- 0: ejecución normal (incluye "sin productos" y fallos de la consulta).
- 1: ningún argumento `--name=<title>` o la configuración no es válida.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.storefront_client import StorefrontClient
from cli.ui_components import MISSING_NAME_MESSAGE, print_fetch_error, print_variants
from core.config import AppSettings
from core.domain.errors import MissingArgumentError
from core.domain.output_format import OutputFormat
from core.domain.results import FetchSuccess
from core.services.variant_listing import read_title, search_variants

app = typer.Typer(
    add_completion=False,
    help="List storefront product variants sorted by price.",
)

_console = Console()
_err_console = Console(stderr=True)


def load_settings() -> AppSettings:
    return AppSettings()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )
    # httpx loguea cada request a INFO; solo lo queremos en modo verbose.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    options_metavar="--name=<title> [OPTIONS]",
)
def search(
    ctx: typer.Context,
    output: OutputFormat = typer.Option(
        OutputFormat.default(),
        "--output",
        "-o",
        case_sensitive=False,
        help="Output format.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Print every variant of the matching products, cheapest first.

    The product title is read from the first `--name=<title>` argument;
    any other extra argument is ignored.
    """

    _configure_logging(verbose)

    try:
        title = read_title(ctx.args)
    except MissingArgumentError:
        _err_console.print(MISSING_NAME_MESSAGE, markup=False, highlight=False)
        raise typer.Exit(code=1)

    try:
        settings = load_settings()
    except ValidationError as exc:
        _err_console.print(f"Invalid configuration: {exc}", markup=False, highlight=False)
        raise typer.Exit(code=1)

    client = StorefrontClient(settings)
    outcome = asyncio.run(search_variants(client, title))

    if isinstance(outcome.result, FetchSuccess):
        print_variants(_console, outcome.variants, output)
    else:
        print_fetch_error(_err_console, outcome.result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
