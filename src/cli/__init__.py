"""Capa CLI (Typer + Rich): parseo de argumentos, presentación y exit codes."""
