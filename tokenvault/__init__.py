# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del almacén cifrado de tokens.
# --------------------------------------------------------------
"""Inicializa el paquete `tokenvault` y documenta sus módulos principales."""

__all__ = [
    "cli",
    "commands",
    "config",
    "crypto_sym",
    "errors",
    "keys",
    "models",
    "storage",
]
