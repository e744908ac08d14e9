# --------------------------------------------------------------
# File: aes.py
# Description: Atajos de cifrado con el algoritmo fijado en el nombre de la función.
# --------------------------------------------------------------
"""Funciones de conveniencia sobre `encrypt` y `decrypt`.

Cada función fija un identificador de algoritmo y delega sin lógica adicional.
"""

from typing import Any

from cipherkit.core import algorithms as alg
from cipherkit.core.crypto_sym import KeyMaterial, Plaintext, decrypt, encrypt
from cipherkit.core.models import EncryptionResult

__all__ = [
    "encrypt_with_aes_128_cbc",
    "encrypt_with_aes_192_cbc",
    "encrypt_with_aes_256_cbc",
    "decrypt_with_aes_128_cbc",
    "decrypt_with_aes_192_cbc",
    "decrypt_with_aes_256_cbc",
    "encrypt_with_aes_128_gcm",
    "encrypt_with_aes_192_gcm",
    "encrypt_with_aes_256_gcm",
    "decrypt_with_aes_128_gcm",
    "decrypt_with_aes_192_gcm",
    "decrypt_with_aes_256_gcm",
    "encrypt_with_aes_128_ccm",
    "encrypt_with_aes_192_ccm",
    "encrypt_with_aes_256_ccm",
    "decrypt_with_aes_128_ccm",
    "decrypt_with_aes_192_ccm",
    "decrypt_with_aes_256_ccm",
    "encrypt_with_aes_128_ocb",
    "encrypt_with_aes_192_ocb",
    "encrypt_with_aes_256_ocb",
    "decrypt_with_aes_128_ocb",
    "decrypt_with_aes_192_ocb",
    "decrypt_with_aes_256_ocb",
    "encrypt_with_chacha20_poly1305",
    "decrypt_with_chacha20_poly1305",
]


# CBC


def encrypt_with_aes_128_cbc(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-128-CBC."""

    return encrypt(alg.AES_128_CBC, key, data)


def encrypt_with_aes_192_cbc(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-192-CBC."""

    return encrypt(alg.AES_192_CBC, key, data)


def encrypt_with_aes_256_cbc(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-256-CBC."""

    return encrypt(alg.AES_256_CBC, key, data)


def decrypt_with_aes_128_cbc(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-128-CBC."""

    return decrypt(alg.AES_128_CBC, key, data)


def decrypt_with_aes_192_cbc(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-192-CBC."""

    return decrypt(alg.AES_192_CBC, key, data)


def decrypt_with_aes_256_cbc(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-256-CBC."""

    return decrypt(alg.AES_256_CBC, key, data)


# GCM


def encrypt_with_aes_128_gcm(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-128-GCM."""

    return encrypt(alg.AES_128_GCM, key, data)


def encrypt_with_aes_192_gcm(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-192-GCM."""

    return encrypt(alg.AES_192_GCM, key, data)


def encrypt_with_aes_256_gcm(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-256-GCM."""

    return encrypt(alg.AES_256_GCM, key, data)


def decrypt_with_aes_128_gcm(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-128-GCM."""

    return decrypt(alg.AES_128_GCM, key, data)


def decrypt_with_aes_192_gcm(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-192-GCM."""

    return decrypt(alg.AES_192_GCM, key, data)


def decrypt_with_aes_256_gcm(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-256-GCM."""

    return decrypt(alg.AES_256_GCM, key, data)


# CCM


def encrypt_with_aes_128_ccm(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-128-CCM."""

    return encrypt(alg.AES_128_CCM, key, data)


def encrypt_with_aes_192_ccm(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-192-CCM."""

    return encrypt(alg.AES_192_CCM, key, data)


def encrypt_with_aes_256_ccm(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-256-CCM."""

    return encrypt(alg.AES_256_CCM, key, data)


def decrypt_with_aes_128_ccm(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-128-CCM."""

    return decrypt(alg.AES_128_CCM, key, data)


def decrypt_with_aes_192_ccm(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-192-CCM."""

    return decrypt(alg.AES_192_CCM, key, data)


def decrypt_with_aes_256_ccm(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-256-CCM."""

    return decrypt(alg.AES_256_CCM, key, data)


# OCB


def encrypt_with_aes_128_ocb(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-128-OCB."""

    return encrypt(alg.AES_128_OCB, key, data)


def encrypt_with_aes_192_ocb(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-192-OCB."""

    return encrypt(alg.AES_192_OCB, key, data)


def encrypt_with_aes_256_ocb(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con AES-256-OCB."""

    return encrypt(alg.AES_256_OCB, key, data)


def decrypt_with_aes_128_ocb(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-128-OCB."""

    return decrypt(alg.AES_128_OCB, key, data)


def decrypt_with_aes_192_ocb(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-192-OCB."""

    return decrypt(alg.AES_192_OCB, key, data)


def decrypt_with_aes_256_ocb(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de AES-256-OCB."""

    return decrypt(alg.AES_256_OCB, key, data)


# ChaCha20-Poly1305


def encrypt_with_chacha20_poly1305(key: KeyMaterial, data: Plaintext) -> EncryptionResult:
    """Cifra con ChaCha20-Poly1305 (clave de 32 bytes)."""

    return encrypt(alg.CHACHA20_POLY1305, key, data)


def decrypt_with_chacha20_poly1305(key: KeyMaterial, data: Any) -> str:
    """Descifra un resultado de ChaCha20-Poly1305."""

    return decrypt(alg.CHACHA20_POLY1305, key, data)
