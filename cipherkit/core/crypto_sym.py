# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado y descifrado simétrico AES (CBC/GCM/CCM/OCB) y ChaCha20-Poly1305.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico con framing hexadecimal estable.

El resultado de `encrypt` es un `EncryptionResult` con dos cadenas
hexadecimales: ``nonce`` y ``encrypted``. En los modos autenticados
``encrypted`` es ``hex(ciphertext) + hex(tag)``; en CBC es solo el ciphertext.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Optional, Tuple, Union

from cryptography.exceptions import InternalError, InvalidTag
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESCCM, AESGCM, AESOCB3, ChaCha20Poly1305
from pydantic import ValidationError

from cipherkit.core.algorithms import AlgorithmSpec, Mode, resolve_algorithm_spec
from cipherkit.core.config import AUTH_TAG_LENGTH
from cipherkit.core.errors import (
    AuthenticationFailedError,
    DecryptionError,
    InvalidInputError,
    InvalidKeyLengthError,
)
from cipherkit.core.models import EncryptionResult

logger = logging.getLogger(__name__)

AES_BLOCK_BITS = 128

# Mensaje común a todos los fallos de descifrado.
_DECRYPTION_FAILED = "decryption failed"

KeyMaterial = Union[str, bytes, bytearray]
Plaintext = Union[str, bytes, bytearray]


def _to_bytes(value: Union[str, bytes, bytearray, None]) -> Optional[bytes]:
    """Codifica texto en UTF-8; devuelve ``None`` si el tipo no es admitido."""

    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return None


def _check_key(spec: AlgorithmSpec, key: KeyMaterial) -> bytes:
    """Convierte la clave a bytes y exige la longitud del algoritmo.

    Args:
        spec (AlgorithmSpec): Parámetros del algoritmo resuelto.
        key (KeyMaterial): Clave en texto (UTF-8) o binario.

    Returns:
        bytes: Clave lista para el proveedor.

    Raises:
        InvalidKeyLengthError: Si la longitud no coincide o la clave no es
            texto ni bytes.

    """

    key_bytes = _to_bytes(key)
    if key_bytes is None:
        raise InvalidKeyLengthError(spec.expected_key_length, 0)
    if len(key_bytes) != spec.expected_key_length:
        raise InvalidKeyLengthError(spec.expected_key_length, len(key_bytes))
    return key_bytes


def _check_plaintext(spec: AlgorithmSpec, plaintext: Plaintext) -> bytes:
    """Convierte el texto en claro a bytes y aplica el límite de longitud de CCM."""

    data = _to_bytes(plaintext)
    if data is None:
        raise InvalidInputError(f"plaintext must be str or bytes, got {type(plaintext).__name__}")
    # CCM reserva 15 - len(nonce) bytes para el contador de longitud.
    if spec.mode is Mode.CCM and len(data) >= 1 << (8 * (15 - spec.iv_length)):
        raise InvalidInputError(f"plaintext too long for {spec.identifier}")
    return data


def _aead(spec: AlgorithmSpec, key: bytes):
    """Instancia la primitiva AEAD del proveedor para el modo indicado."""

    if spec.mode is Mode.GCM:
        return AESGCM(key)
    if spec.mode is Mode.CCM:
        return AESCCM(key, tag_length=AUTH_TAG_LENGTH)
    if spec.mode is Mode.OCB:
        return AESOCB3(key)
    if spec.mode is Mode.CHACHA20_POLY1305:
        return ChaCha20Poly1305(key)
    raise ValueError(f"{spec.identifier} is not an authenticated mode")


def _cbc_encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Aplica relleno PKCS7 y cifra en AES-CBC."""

    padder = padding.PKCS7(AES_BLOCK_BITS).padder()
    padded = padder.update(data) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def _cbc_decrypt(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra AES-CBC y retira el relleno PKCS7."""

    if not ciphertext or len(ciphertext) % (AES_BLOCK_BITS // 8):
        raise DecryptionError(_DECRYPTION_FAILED)
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(AES_BLOCK_BITS).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise DecryptionError(_DECRYPTION_FAILED) from exc


def _encrypt_aead(spec: AlgorithmSpec, key: bytes, nonce: bytes, data: bytes) -> Tuple[bytes, bytes]:
    """Cifra con un modo AEAD y separa ciphertext y etiqueta.

    Returns:
        Tuple[bytes, bytes]: Ciphertext sin etiqueta y etiqueta de 16 bytes.

    Raises:
        InvalidInputError: Si el proveedor rechaza la entrada.

    """

    try:
        ct_full = _aead(spec, key).encrypt(nonce, data, None)
    except (ValueError, OverflowError, InternalError) as exc:
        logger.warning("Provider rejected %d bytes for %s", len(data), spec.identifier)
        raise InvalidInputError(f"plaintext rejected by {spec.identifier}") from exc
    return ct_full[:-AUTH_TAG_LENGTH], ct_full[-AUTH_TAG_LENGTH:]


def _decrypt_aead(spec: AlgorithmSpec, key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes) -> bytes:
    """Verifica la etiqueta y descifra; cualquier fallo es `AuthenticationFailedError`."""

    try:
        return _aead(spec, key).decrypt(nonce, ciphertext + tag, None)
    except InvalidTag as exc:
        logger.warning("Authentication tag mismatch for %s", spec.identifier)
        raise AuthenticationFailedError(_DECRYPTION_FAILED) from exc


def _coerce_result(data: Any) -> EncryptionResult:
    """Acepta un `EncryptionResult` o un mapeo con ``nonce`` y ``encrypted``."""

    if isinstance(data, EncryptionResult):
        return data
    if not isinstance(data, Mapping):
        raise InvalidInputError("data param should be an EncryptionResult or a mapping")
    try:
        return EncryptionResult.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidInputError(f"malformed encryption result: {exc.error_count()} invalid field(s)") from exc


def encrypt(algorithm: Union[str, AlgorithmSpec], key: KeyMaterial, plaintext: Plaintext) -> EncryptionResult:
    """Cifra `plaintext` con el algoritmo indicado y un nonce aleatorio.

    Args:
        algorithm (Union[str, AlgorithmSpec]): Identificador, p. ej. ``aes-256-gcm``.
        key (KeyMaterial): Clave de exactamente la longitud del algoritmo.
        plaintext (Plaintext): Texto (se codifica en UTF-8) o bytes.

    Returns:
        EncryptionResult: Nonce y ciphertext (más etiqueta) en hexadecimal.

    Raises:
        InvalidAlgorithmError: Si el identificador no es válido.
        InvalidKeyLengthError: Si la clave no tiene la longitud esperada.
        InvalidInputError: Si el texto en claro no es admitido por el modo.

    """

    spec = resolve_algorithm_spec(algorithm)
    key_bytes = _check_key(spec, key)
    data = _check_plaintext(spec, plaintext)
    nonce = os.urandom(spec.iv_length)

    if spec.has_auth_tag:
        ciphertext, tag = _encrypt_aead(spec, key_bytes, nonce, data)
        encrypted = ciphertext.hex() + tag.hex()
    else:
        encrypted = _cbc_encrypt(key_bytes, nonce, data).hex()

    logger.debug("Encrypted %d bytes with %s", len(data), spec.identifier)
    return EncryptionResult(nonce=nonce.hex(), encrypted=encrypted)


def decrypt(algorithm: Union[str, AlgorithmSpec], key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado producido por `encrypt`.

    Args:
        algorithm (Union[str, AlgorithmSpec]): Mismo identificador usado al cifrar.
        key (KeyMaterial): Clave simétrica original.
        data (Any): `EncryptionResult` o mapeo con ``nonce`` y ``encrypted``.

    Returns:
        str: Texto en claro recuperado.

    Raises:
        InvalidInputError: Si `data` no tiene la estructura esperada.
        InvalidKeyLengthError: Si la clave no tiene la longitud esperada.
        AuthenticationFailedError: Si la etiqueta no verifica.
        DecryptionError: Si el relleno CBC o la decodificación UTF-8 fallan.

    """

    result = _coerce_result(data)
    spec = resolve_algorithm_spec(algorithm)
    key_bytes = _check_key(spec, key)

    nonce = bytes.fromhex(result.nonce)
    buf = bytes.fromhex(result.encrypted)
    if len(nonce) != spec.iv_length:
        raise InvalidInputError(f"nonce must be {spec.iv_length} bytes for {spec.identifier}")

    if spec.has_auth_tag:
        if len(buf) < AUTH_TAG_LENGTH:
            raise InvalidInputError("encrypted payload is shorter than the authentication tag")
        split = len(buf) - AUTH_TAG_LENGTH
        plain = _decrypt_aead(spec, key_bytes, nonce, buf[:split], buf[split:])
    else:
        plain = _cbc_decrypt(key_bytes, nonce, buf)

    try:
        text = plain.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionError(_DECRYPTION_FAILED) from exc
    logger.debug("Decrypted %d bytes with %s", len(plain), spec.identifier)
    return text
