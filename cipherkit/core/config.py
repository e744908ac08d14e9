# --------------------------------------------------------------
# File: config.py
# Description: Parámetros por defecto leídos del entorno y de un fichero .env.
# --------------------------------------------------------------
"""Configuración de cipherkit basada en variables de entorno."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Lee un entero del entorno, usando `default` si la variable no existe.

    Args:
        name (str): Nombre de la variable de entorno.
        default (int): Valor utilizado cuando la variable no está definida.

    Returns:
        int: Valor entero configurado.

    Raises:
        ValueError: Si la variable existe pero no es un entero.
    """

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} debe ser un entero, recibido {raw!r}") from exc


def _env_seconds(name: str) -> Optional[float]:
    """Lee un número de segundos opcional; vacío o ausente equivale a sin límite."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} debe ser un número de segundos, recibido {raw!r}") from exc
    return value if value > 0 else None


DEFAULT_RSA_KEY_SIZE = _env_int("CIPHERKIT_DEFAULT_RSA_KEY_SIZE", 2048)
RSA_PUBLIC_EXPONENT = _env_int("CIPHERKIT_RSA_PUBLIC_EXPONENT", 65537)
KEYGEN_WORKERS = max(1, _env_int("CIPHERKIT_KEYGEN_WORKERS", 2))
KEYGEN_TIMEOUT = _env_seconds("CIPHERKIT_KEYGEN_TIMEOUT")

# Longitud fija de la etiqueta de autenticación en los modos AEAD.
AUTH_TAG_LENGTH = 16
