"""Errores del dominio."""

from __future__ import annotations


class MissingArgumentError(Exception):
    """No se proporcionó el título de producto (`--name`)."""

    def __init__(self, flag: str = "--name") -> None:
        super().__init__(f"Missing required argument: {flag}")
        self.flag = flag
