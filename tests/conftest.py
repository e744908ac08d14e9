# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para claves RSA, claves simétricas y configuración.
# --------------------------------------------------------------

import importlib
import os
from typing import Callable, Iterator

import pytest

from cipherkit.core.algorithms import resolve_algorithm_spec
from cipherkit.core.crypto_rsa import generate_key_pair
from cipherkit.core.models import KeyPair


@pytest.fixture(scope="session")
def rsa_pair() -> KeyPair:
    """Genera una única vez un par RSA-2048 sin cifrar para toda la sesión.

    Returns:
        KeyPair: Par de claves en PEM reutilizado por las pruebas de importación.
    """
    return generate_key_pair(2048)


@pytest.fixture
def key_for() -> Callable[[str], bytes]:
    """Devuelve una fábrica de claves aleatorias con la longitud del algoritmo.

    Returns:
        Callable[[str], bytes]: Función que recibe un identificador y devuelve la clave.
    """

    def _make(algorithm: str) -> bytes:
        return os.urandom(resolve_algorithm_spec(algorithm).expected_key_length)

    return _make


@pytest.fixture
def reload_config(monkeypatch) -> Iterator[Callable[..., object]]:
    """Permite fijar variables de entorno y recargar `cipherkit.core.config`.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[Callable[..., object]]: Función que aplica el entorno y devuelve el módulo recargado.
    """
    import cipherkit.core.config as config_module

    def _reload(**env: str):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config_module)

    yield _reload

    # Restaura el entorno antes de recargar para no dejar valores de prueba.
    monkeypatch.undo()
    importlib.reload(config_module)
