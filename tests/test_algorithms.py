# --------------------------------------------------------------
# File: test_algorithms.py
# Description: Pruebas de la resolución de identificadores de algoritmo.
# --------------------------------------------------------------

import pytest

from cipherkit.core.algorithms import (
    SUPPORTED_ALGORITHMS,
    AlgorithmSpec,
    Mode,
    resolve_algorithm_spec,
)
from cipherkit.core.errors import InvalidAlgorithmError


def test_aes_128_cbc_spec():
    """Comprueba los parámetros derivados de aes-128-cbc.

    Returns:
        None: Las aserciones revisan longitudes y modo.
    """
    spec = resolve_algorithm_spec("aes-128-cbc")
    assert spec.expected_key_length == 16
    assert spec.iv_length == 16
    assert spec.mode is Mode.CBC
    assert spec.has_auth_tag is False


@pytest.mark.parametrize(
    "identifier, key_len, mode",
    [
        ("aes-192-gcm", 24, Mode.GCM),
        ("aes-256-ccm", 32, Mode.CCM),
        ("aes-128-ocb", 16, Mode.OCB),
        ("chacha20-poly1305", 32, Mode.CHACHA20_POLY1305),
    ],
)
def test_authenticated_specs_use_12_byte_nonce(identifier, key_len, mode):
    spec = resolve_algorithm_spec(identifier)
    assert spec.expected_key_length == key_len
    assert spec.iv_length == 12
    assert spec.mode is mode
    assert spec.has_auth_tag


def test_mode_capabilities_declared_on_enum():
    assert [m for m in Mode if not m.has_auth_tag] == [Mode.CBC]
    assert {m.iv_length for m in Mode if m is not Mode.CBC} == {12}


def test_identifier_is_case_insensitive():
    spec = resolve_algorithm_spec("AES-256-GCM")
    assert spec.identifier == "aes-256-gcm"


@pytest.mark.parametrize("identifier", SUPPORTED_ALGORITHMS)
def test_identifier_roundtrip(identifier):
    assert resolve_algorithm_spec(identifier).identifier == identifier


def test_spec_instance_passes_through():
    spec = AlgorithmSpec("aes", 256, Mode.OCB)
    assert resolve_algorithm_spec(spec) is spec


@pytest.mark.parametrize(
    "identifier",
    [
        "aes256gcm",  # sin guiones
        "aes-256",  # solo dos segmentos
        "aes-256-gcm-extra",
        "aes-256-xts",  # modo desconocido
        "aes-512-gcm",  # tamaño no soportado
        "aes-abc-gcm",
        "aes--gcm",
        "des-128-cbc",  # cifrado no soportado
        "",
    ],
)
def test_invalid_identifiers_fail_fast(identifier):
    """Verifica que los identificadores mal formados o desconocidos sean rechazados.

    Args:
        identifier (str): Identificador inválido parametrizado.

    Returns:
        None: Se espera InvalidAlgorithmError.
    """
    with pytest.raises(InvalidAlgorithmError):
        resolve_algorithm_spec(identifier)


def test_non_string_identifier_rejected():
    with pytest.raises(InvalidAlgorithmError):
        resolve_algorithm_spec(256)


def test_spec_construction_validates_variant():
    with pytest.raises(InvalidAlgorithmError):
        AlgorithmSpec("aes", 512, Mode.GCM)
    with pytest.raises(InvalidAlgorithmError):
        AlgorithmSpec("aes", 128, Mode.CHACHA20_POLY1305)


def test_invalid_algorithm_error_is_value_error():
    with pytest.raises(ValueError):
        resolve_algorithm_spec("nope")
