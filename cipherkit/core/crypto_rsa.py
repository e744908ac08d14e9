# --------------------------------------------------------------
# File: crypto_rsa.py
# Description: Generación, importación y exportación de claves RSA en PEM.
# --------------------------------------------------------------
"""Gestión de claves RSA: generación y canonicalización PKCS8/SPKI."""

import base64
import binascii
import logging
import time
from typing import Callable, Optional, Type, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from cipherkit.core import config
from cipherkit.core.algorithms import KeySize
from cipherkit.core.errors import (
    Base64DecodeError,
    KeyGenerationError,
    KeyParseError,
    UnsupportedKeySizeError,
)
from cipherkit.core.models import KeyPair

logger = logging.getLogger(__name__)

KeyData = Union[str, bytes, bytearray]

_PEM_MARKER = b"-----BEGIN"


def coerce_key_size(key_size: Union[int, KeySize, None]) -> KeySize:
    """Valida el tamaño de módulo contra la enumeración `KeySize`.

    Args:
        key_size (Union[int, KeySize, None]): Tamaño solicitado en bits;
            ``None`` usa el valor configurado por defecto.

    Returns:
        KeySize: Miembro de la enumeración correspondiente.

    Raises:
        UnsupportedKeySizeError: Si el tamaño no está soportado.

    """

    if key_size is None:
        key_size = config.DEFAULT_RSA_KEY_SIZE
    if isinstance(key_size, bool) or not isinstance(key_size, int):
        raise UnsupportedKeySizeError(f"key size must be an integer, got {key_size!r}")
    try:
        return KeySize(key_size)
    except ValueError as exc:
        supported = ", ".join(str(int(size)) for size in KeySize)
        raise UnsupportedKeySizeError(f"unsupported RSA key size {key_size}; use one of {supported}") from exc


def _as_bytes(data: KeyData) -> bytes:
    """Normaliza la clave de entrada a bytes; el texto se codifica en UTF-8."""

    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    raise KeyParseError(f"key data must be str or bytes, got {type(data).__name__}")


def _password(passphrase: Optional[KeyData], error: Type[Exception]) -> Optional[bytes]:
    """Convierte la passphrase a bytes; solo admite texto o bytes."""

    if passphrase is None:
        return None
    if isinstance(passphrase, str):
        return passphrase.encode("utf-8")
    if isinstance(passphrase, (bytes, bytearray)):
        return bytes(passphrase)
    raise error(f"passphrase must be str or bytes, got {type(passphrase).__name__}")


def generate_key_pair(
    key_size: Union[int, KeySize, None] = None,
    passphrase: Union[str, bytes] = "",
    encrypted: bool = False,
) -> KeyPair:
    """Genera un par RSA con la pública en SPKI y la privada en PKCS8.

    Args:
        key_size (Union[int, KeySize, None]): Tamaño del módulo en bits.
        passphrase (Union[str, bytes]): Passphrase para cifrar la clave privada.
        encrypted (bool): Si es ``True`` la privada se protege con AES-256-CBC
            (PBES2) derivado de `passphrase`.

    Returns:
        KeyPair: Claves pública y privada en PEM.

    Raises:
        UnsupportedKeySizeError: Si `key_size` no pertenece a `KeySize`.
        KeyGenerationError: Si el proveedor rechaza los parámetros.

    """

    size = coerce_key_size(key_size)
    password = _password(passphrase, KeyGenerationError) if encrypted else None
    started = time.perf_counter()
    try:
        private_key = rsa.generate_private_key(
            public_exponent=config.RSA_PUBLIC_EXPONENT,
            key_size=int(size),
        )
        if encrypted:
            protection = serialization.BestAvailableEncryption(password)
        else:
            protection = serialization.NoEncryption()
        priv_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=protection,
        )
        pub_pem = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        logger.error("RSA-%d key generation failed: %s", int(size), exc)
        raise KeyGenerationError(f"RSA key generation failed: {exc}") from exc

    logger.debug(
        "Generated RSA-%d key pair in %.3fs (encrypted=%s)",
        int(size),
        time.perf_counter() - started,
        encrypted,
    )
    return KeyPair(public_key=pub_pem.decode("ascii"), private_key=priv_pem.decode("ascii"))


def _load_private(raw: bytes, password: Optional[bytes]):
    """Carga una clave privada PEM o DER según la cabecera."""

    if raw.lstrip().startswith(_PEM_MARKER):
        return serialization.load_pem_private_key(raw, password=password)
    return serialization.load_der_private_key(raw, password=password)


def load_private_key(data: KeyData, passphrase: Optional[KeyData] = None) -> str:
    """Carga una clave privada en PEM o DER y la devuelve como PKCS8 PEM sin cifrar.

    Args:
        data (KeyData): Clave privada en cualquier codificación reconocida.
        passphrase (Optional[KeyData]): Passphrase si la clave está cifrada.

    Returns:
        str: Clave privada canónica en PEM PKCS8.

    Raises:
        KeyParseError: Si la entrada no es una clave privada válida.

    """

    raw = _as_bytes(data)
    password = _password(passphrase, KeyParseError)
    try:
        key = _load_private(raw, password)
        pem = key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyParseError(f"invalid private key: {exc}") from exc
    return pem.decode("ascii")


def load_public_key(data: KeyData) -> str:
    """Carga una clave pública (o la deriva de una privada) y la exporta en SPKI PEM.

    Args:
        data (KeyData): Clave pública o privada en PEM o DER.

    Returns:
        str: Clave pública canónica en PEM SubjectPublicKeyInfo.

    Raises:
        KeyParseError: Si la entrada no contiene una clave válida.

    """

    raw = _as_bytes(data)
    is_pem = raw.lstrip().startswith(_PEM_MARKER)
    try:
        if is_pem:
            key = serialization.load_pem_public_key(raw)
        else:
            key = serialization.load_der_public_key(raw)
    except (ValueError, UnsupportedAlgorithm):
        # Una clave privada también sirve: se exporta su mitad pública.
        try:
            key = _load_private(raw, None).public_key()
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise KeyParseError(f"invalid public key: {exc}") from exc

    pem = key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return pem.decode("ascii")


def _b64decode(data: KeyData) -> bytes:
    """Decodifica Base64 estándar de forma estricta, ignorando espacios y saltos de línea."""

    text = data.decode("ascii", errors="replace") if isinstance(data, (bytes, bytearray)) else data
    if not isinstance(text, str):
        raise Base64DecodeError(f"base64 data must be str or bytes, got {type(data).__name__}")
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise Base64DecodeError(f"invalid base64 input: {exc}") from exc


def _load_from_base64(load_fn: Callable[[bytes], str], data: KeyData) -> str:
    """Decodifica Base64 y delega en el cargador indicado."""

    return load_fn(_b64decode(data))


def _b64encode(pem: str) -> str:
    """Codifica un PEM en Base64 estándar."""

    return base64.b64encode(pem.encode("ascii")).decode("ascii")


def load_private_key_from_base64(data: KeyData, passphrase: Optional[KeyData] = None) -> str:
    """Decodifica un PEM privado envuelto en Base64 y lo canonicaliza."""

    return _load_from_base64(lambda raw: load_private_key(raw, passphrase), data)


def load_public_key_from_base64(data: KeyData) -> str:
    """Decodifica un PEM público envuelto en Base64 y lo canonicaliza."""

    return _load_from_base64(load_public_key, data)


def load_private_key_as_base64(data: KeyData, passphrase: Optional[KeyData] = None) -> str:
    """Canonicaliza una clave privada y devuelve su PEM codificado en Base64."""

    return _b64encode(load_private_key(data, passphrase))


def load_public_key_as_base64(data: KeyData) -> str:
    """Canonicaliza una clave pública y devuelve su PEM codificado en Base64."""

    return _b64encode(load_public_key(data))
