"""Adaptadores de I/O (HTTP hacia la Storefront API)."""
