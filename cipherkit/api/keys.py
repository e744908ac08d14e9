# --------------------------------------------------------------
# File: keys.py
# Description: Generación de pares RSA en segundo plano (Future y asyncio).
# --------------------------------------------------------------
"""Puntos de entrada no bloqueantes para la generación de claves RSA."""

import asyncio
import functools
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Union

from cipherkit.core import config
from cipherkit.core.algorithms import KeySize
from cipherkit.core.crypto_rsa import coerce_key_size, generate_key_pair
from cipherkit.core.errors import KeyGenerationTimeoutError
from cipherkit.core.models import KeyPair

logger = logging.getLogger(__name__)

_EXECUTOR = ThreadPoolExecutor(
    max_workers=config.KEYGEN_WORKERS,
    thread_name_prefix="cipherkit-keygen",
)

# Marca "usar el timeout configurado" frente a None explícito (sin límite).
_DEFAULT = object()


def submit_key_pair_generation(
    key_size: Union[int, KeySize, None] = None,
    passphrase: Union[str, bytes] = "",
    encrypted: bool = False,
) -> "Future[KeyPair]":
    """Lanza la generación en el pool de hilos y devuelve un `Future`.

    El tamaño se valida antes de encolar, de modo que un tamaño no soportado
    falla de inmediato en el hilo llamante.

    Args:
        key_size (Union[int, KeySize, None]): Tamaño del módulo en bits.
        passphrase (Union[str, bytes]): Passphrase para cifrar la clave privada.
        encrypted (bool): Si la clave privada se exporta cifrada.

    Returns:
        Future[KeyPair]: Futuro que resuelve al par generado o a `KeyGenerationError`.

    """

    size = coerce_key_size(key_size)
    logger.debug("Queueing RSA-%d key generation", int(size))
    return _EXECUTOR.submit(generate_key_pair, size, passphrase, encrypted)


def _discard_orphan(size: int, work: "Future[KeyPair]") -> None:
    """Registra el desenlace de un trabajo cuyo llamante ya no espera."""

    if work.cancelled():
        logger.debug("Queued RSA-%d key generation cancelled after timeout", size)
    elif work.exception() is not None:
        logger.warning("Orphaned RSA-%d key generation failed: %s", size, work.exception())
    else:
        logger.info("Orphaned RSA-%d key generation finished; result discarded", size)


async def generate_key_pair_async(
    key_size: Union[int, KeySize, None] = None,
    passphrase: Union[str, bytes] = "",
    encrypted: bool = False,
    *,
    timeout: Optional[float] = _DEFAULT,  # type: ignore[assignment]
) -> KeyPair:
    """Genera un par RSA sin bloquear el bucle de eventos.

    Args:
        key_size (Union[int, KeySize, None]): Tamaño del módulo en bits.
        passphrase (Union[str, bytes]): Passphrase para cifrar la clave privada.
        encrypted (bool): Si la clave privada se exporta cifrada.
        timeout (Optional[float]): Segundos máximos de espera; ``None`` espera
            sin límite. Por defecto, ``CIPHERKIT_KEYGEN_TIMEOUT``. Acota la
            espera del llamante, incluida la cola del pool: un trabajo ya en
            curso no se interrumpe y ocupa su hilo hasta terminar, mientras
            que uno aún encolado se cancela.

    Returns:
        KeyPair: Claves pública y privada en PEM.

    Raises:
        KeyGenerationTimeoutError: Si se supera `timeout`.
        KeyGenerationError: Si el proveedor rechaza los parámetros.

    """

    if timeout is _DEFAULT:
        timeout = config.KEYGEN_TIMEOUT
    size = coerce_key_size(key_size)
    work = _EXECUTOR.submit(generate_key_pair, size, passphrase, encrypted)
    try:
        return await asyncio.wait_for(asyncio.wrap_future(work), timeout)
    except asyncio.TimeoutError as exc:
        work.add_done_callback(functools.partial(_discard_orphan, int(size)))
        logger.warning("RSA-%d key generation exceeded %.3fs", int(size), timeout)
        raise KeyGenerationTimeoutError(f"RSA key generation exceeded {timeout}s") from exc
