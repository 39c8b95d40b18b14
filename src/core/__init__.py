"""Core: configuración, dominio, contratos y servicios (sin I/O de consola)."""
