# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "algorithms",
    "config",
    "crypto_rsa",
    "crypto_sym",
    "errors",
    "models",
]
