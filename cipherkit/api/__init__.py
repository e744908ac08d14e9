# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de conveniencia sobre el paquete core.
# --------------------------------------------------------------
"""Atajos por algoritmo y generación de claves en segundo plano."""

__all__ = ["aes", "keys"]
