# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de la capa criptográfica.
# --------------------------------------------------------------
"""Excepciones públicas lanzadas por cipherkit."""

__all__ = [
    "CipherKitError",
    "InvalidAlgorithmError",
    "InvalidKeyLengthError",
    "InvalidInputError",
    "DecryptionError",
    "AuthenticationFailedError",
    "KeyParseError",
    "Base64DecodeError",
    "KeyGenerationError",
    "UnsupportedKeySizeError",
    "KeyGenerationTimeoutError",
]


class CipherKitError(Exception):
    """Base común de todos los errores del paquete."""


class InvalidAlgorithmError(CipherKitError, ValueError):
    """El identificador de algoritmo está mal formado o no se soporta."""


class InvalidKeyLengthError(CipherKitError, ValueError):
    """La clave no tiene la longitud que exige el algoritmo."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"invalid key length, key length should be {expected}")
        self.expected = expected
        self.actual = actual


class InvalidInputError(CipherKitError, ValueError):
    """El payload entregado a decrypt no tiene la estructura esperada."""


class DecryptionError(CipherKitError):
    """Fallo genérico al descifrar; nunca acompaña texto parcial."""


class AuthenticationFailedError(DecryptionError):
    """La etiqueta de autenticación no coincide con el ciphertext."""


class KeyParseError(CipherKitError, ValueError):
    """El material de clave no es una clave RSA reconocible."""


class Base64DecodeError(KeyParseError):
    """La entrada no es Base64 válido."""


class KeyGenerationError(CipherKitError):
    """El proveedor rechazó los parámetros de generación del par RSA."""


class UnsupportedKeySizeError(KeyGenerationError, ValueError):
    """Tamaño de módulo RSA fuera de la enumeración soportada."""


class KeyGenerationTimeoutError(KeyGenerationError):
    """La generación en segundo plano superó el tiempo máximo de espera."""
