"""Lanzador de `storefront-variants` desde un checkout sin instalar.

Uso:
- `python main.py --name=Shirt`
- `python main.py --name=Shirt --output table`
- `python main.py --name=Shirt --verbose`

Equivale al script `storefront-variants` que instala `pip install -e .`;
añade `src/` al path para poder importar `cli`, `core` y `adapters`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # Títulos con acentos o emojis en consolas cp1252 de Windows.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
