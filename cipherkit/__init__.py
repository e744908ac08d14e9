# --------------------------------------------------------------
# File: __init__.py
# Description: API pública de cipherkit.
# --------------------------------------------------------------
"""Capa fina sobre `cryptography` para claves RSA y cifrado AES.

Uso típico::

    from cipherkit import encrypt, decrypt, AES_256_GCM

    result = encrypt(AES_256_GCM, key32, "hello world")
    assert decrypt(AES_256_GCM, key32, result) == "hello world"
"""

import logging

from cipherkit.api.aes import *  # noqa: F401,F403
from cipherkit.api.aes import __all__ as _aes_all
from cipherkit.api.keys import generate_key_pair_async, submit_key_pair_generation
from cipherkit.core.algorithms import (
    AES_128_CBC,
    AES_128_CCM,
    AES_128_GCM,
    AES_128_OCB,
    AES_192_CBC,
    AES_192_CCM,
    AES_192_GCM,
    AES_192_OCB,
    AES_256_CBC,
    AES_256_CCM,
    AES_256_GCM,
    AES_256_OCB,
    CHACHA20_POLY1305,
    SUPPORTED_ALGORITHMS,
    AlgorithmSpec,
    KeySize,
    Mode,
    resolve_algorithm_spec,
)
from cipherkit.core.crypto_rsa import (
    generate_key_pair,
    load_private_key,
    load_private_key_as_base64,
    load_private_key_from_base64,
    load_public_key,
    load_public_key_as_base64,
    load_public_key_from_base64,
)
from cipherkit.core.crypto_sym import decrypt, encrypt
from cipherkit.core.errors import *  # noqa: F401,F403
from cipherkit.core.errors import __all__ as _errors_all
from cipherkit.core.models import EncryptionResult, KeyPair

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AES_128_CBC",
    "AES_128_CCM",
    "AES_128_GCM",
    "AES_128_OCB",
    "AES_192_CBC",
    "AES_192_CCM",
    "AES_192_GCM",
    "AES_192_OCB",
    "AES_256_CBC",
    "AES_256_CCM",
    "AES_256_GCM",
    "AES_256_OCB",
    "CHACHA20_POLY1305",
    "SUPPORTED_ALGORITHMS",
    "AlgorithmSpec",
    "EncryptionResult",
    "KeyPair",
    "KeySize",
    "Mode",
    "decrypt",
    "encrypt",
    "generate_key_pair",
    "generate_key_pair_async",
    "load_private_key",
    "load_private_key_as_base64",
    "load_private_key_from_base64",
    "load_public_key",
    "load_public_key_as_base64",
    "load_public_key_from_base64",
    "resolve_algorithm_spec",
    "submit_key_pair_generation",
    *_errors_all,
    *_aes_all,
]
