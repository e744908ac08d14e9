# --------------------------------------------------------------
# File: algorithms.py
# Description: Catálogo de modos, tamaños de clave e identificadores soportados.
# --------------------------------------------------------------
"""Resolución de identificadores de algoritmo a parámetros concretos.

Un identificador tiene la forma ``<cifrado>-<bits>-<modo>`` (por ejemplo
``aes-256-gcm``). Cada llamada a `resolve_algorithm_spec` produce un
`AlgorithmSpec` nuevo con la longitud de IV, la longitud de clave esperada y
si el modo añade etiqueta de autenticación.
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from cipherkit.core.errors import InvalidAlgorithmError

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Modos de operación con sus capacidades declaradas en la definición."""

    CBC = ("cbc", False)
    GCM = ("gcm", True)
    CCM = ("ccm", True)
    OCB = ("ocb", True)
    CHACHA20_POLY1305 = ("chacha20-poly1305", True)

    def __init__(self, label: str, has_auth_tag: bool) -> None:
        self.label = label
        self.has_auth_tag = has_auth_tag

    @property
    def iv_length(self) -> int:
        """Bytes de nonce/IV: 16 en CBC, 12 en el resto."""

        return 16 if self is Mode.CBC else 12

    @classmethod
    def from_label(cls, label: str) -> "Mode":
        """Devuelve el modo cuya etiqueta coincide o lanza `InvalidAlgorithmError`."""

        for mode in cls:
            if mode.label == label:
                return mode
        raise InvalidAlgorithmError(f"unsupported cipher mode {label!r}")


class KeySize(IntEnum):
    """Tamaños de módulo RSA admitidos por la generación de claves."""

    KEY_SIZE_1KB = 1024
    KEY_SIZE_2KB = 2048
    KEY_SIZE_3KB = 3072
    KEY_SIZE_4KB = 4096


AES_KEY_SIZES = (128, 192, 256)

AES_128_CBC = "aes-128-cbc"
AES_192_CBC = "aes-192-cbc"
AES_256_CBC = "aes-256-cbc"
AES_128_GCM = "aes-128-gcm"
AES_192_GCM = "aes-192-gcm"
AES_256_GCM = "aes-256-gcm"
AES_128_CCM = "aes-128-ccm"
AES_192_CCM = "aes-192-ccm"
AES_256_CCM = "aes-256-ccm"
AES_128_OCB = "aes-128-ocb"
AES_192_OCB = "aes-192-ocb"
AES_256_OCB = "aes-256-ocb"
CHACHA20_POLY1305 = "chacha20-poly1305"

SUPPORTED_ALGORITHMS = (
    AES_128_CBC,
    AES_192_CBC,
    AES_256_CBC,
    AES_128_GCM,
    AES_192_GCM,
    AES_256_GCM,
    AES_128_CCM,
    AES_192_CCM,
    AES_256_CCM,
    AES_128_OCB,
    AES_192_OCB,
    AES_256_OCB,
    CHACHA20_POLY1305,
)


@dataclass(frozen=True)
class AlgorithmSpec:
    """Parámetros derivados de un identificador de algoritmo.

    Attributes:
        cipher (str): Familia de cifrado (``aes`` o ``chacha20``).
        key_size_bits (int): Tamaño de clave declarado en bits.
        mode (Mode): Modo de operación.

    """

    cipher: str
    key_size_bits: int
    mode: Mode

    def __post_init__(self) -> None:
        if self.mode is Mode.CHACHA20_POLY1305:
            if self.cipher != "chacha20" or self.key_size_bits != 256:
                raise InvalidAlgorithmError("chacha20-poly1305 requires a 256-bit chacha20 key")
            return
        if self.cipher != "aes":
            raise InvalidAlgorithmError(f"unsupported cipher {self.cipher!r}")
        if self.key_size_bits not in AES_KEY_SIZES:
            raise InvalidAlgorithmError(f"unsupported aes key size {self.key_size_bits}")

    @property
    def iv_length(self) -> int:
        """Bytes de nonce/IV del modo."""

        return self.mode.iv_length

    @property
    def expected_key_length(self) -> int:
        """Longitud de clave exigida, en bytes."""

        return self.key_size_bits // 8

    @property
    def has_auth_tag(self) -> bool:
        """Si el modo añade una etiqueta de 16 bytes."""

        return self.mode.has_auth_tag

    @property
    def identifier(self) -> str:
        """Identificador canónico, p. ej. ``aes-256-gcm``."""

        if self.mode is Mode.CHACHA20_POLY1305:
            return CHACHA20_POLY1305
        return f"{self.cipher}-{self.key_size_bits}-{self.mode.label}"


def resolve_algorithm_spec(algorithm: Union[str, AlgorithmSpec]) -> AlgorithmSpec:
    """Traduce un identificador como ``aes-256-gcm`` a su `AlgorithmSpec`.

    Args:
        algorithm (Union[str, AlgorithmSpec]): Identificador textual, o una
            especificación ya resuelta que se devuelve tal cual.

    Returns:
        AlgorithmSpec: Modo, longitud de IV y longitud de clave esperada.

    Raises:
        InvalidAlgorithmError: Si el identificador no tiene tres segmentos o
            alguno de ellos no está soportado.

    """

    if isinstance(algorithm, AlgorithmSpec):
        return algorithm
    if not isinstance(algorithm, str):
        raise InvalidAlgorithmError(f"algorithm must be a string, got {type(algorithm).__name__}")

    identifier = algorithm.strip().lower()
    if identifier == CHACHA20_POLY1305:
        return AlgorithmSpec("chacha20", 256, Mode.CHACHA20_POLY1305)

    parts = identifier.split("-")
    if len(parts) != 3:
        raise InvalidAlgorithmError(f"invalid aes algorithm {algorithm!r}")

    cipher, bits, label = parts
    if not (bits.isascii() and bits.isdigit()):
        raise InvalidAlgorithmError(f"invalid key size segment {bits!r}")

    spec = AlgorithmSpec(cipher, int(bits), Mode.from_label(label))
    logger.debug(
        "Resolved %s: key=%d bytes iv=%d bytes auth_tag=%s",
        spec.identifier,
        spec.expected_key_length,
        spec.iv_length,
        spec.has_auth_tag,
    )
    return spec
