# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

import re

from pydantic import BaseModel, ConfigDict, field_validator

HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


class EncryptionResult(BaseModel):
    """Representa el resultado serializable de un cifrado simétrico.

    Attributes:
        nonce (str): Vector de inicialización en hexadecimal.
        encrypted (str): Ciphertext en hexadecimal; en los modos autenticados
            le sigue la etiqueta de 16 bytes, también en hexadecimal.

    """

    model_config = ConfigDict(frozen=True)

    nonce: str
    encrypted: str

    @field_validator("nonce", "encrypted")
    @classmethod
    def _must_be_hex(cls, value: str) -> str:
        """Normaliza a minúsculas y rechaza contenido que no sea hexadecimal."""

        if not HEX_RE.fullmatch(value):
            raise ValueError("el valor debe ser una cadena hexadecimal de longitud par")
        return value.lower()


class KeyPair(BaseModel):
    """Par de claves RSA codificado en PEM.

    Attributes:
        public_key (str): Clave pública en formato SubjectPublicKeyInfo.
        private_key (str): Clave privada PKCS8, opcionalmente cifrada.

    """

    model_config = ConfigDict(frozen=True)

    public_key: str
    private_key: str
