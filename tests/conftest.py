# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el directorio de datos y la clave.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from tokenvault import commands
from tokenvault.crypto_sym import CipherCodec
from tokenvault.keys import encode_key
from tokenvault.storage import TokenStore

FIXED_KEY = bytes(range(32))


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla STORAGE_PATH y la clave del entorno para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    data_dir = tmp_path / "_data"
    data_dir.mkdir()
    monkeypatch.setenv("STORAGE_PATH", str(data_dir))
    monkeypatch.setenv("TOKEN_VAULT_KEY", encode_key(FIXED_KEY))
    monkeypatch.delenv("TOKEN_VAULT_CIPHER", raising=False)
    commands.reset()

    yield

    commands.reset()


@pytest.fixture
def data_dir(tmp_path):
    """Directorio de datos de la aplicación ya creado."""
    return tmp_path / "_data"


@pytest.fixture
def codec():
    """Codec AES-256-GCM con la clave fija de pruebas."""
    return CipherCodec.from_key(FIXED_KEY)


@pytest.fixture
def store(codec):
    """TokenStore enlazado al codec de pruebas."""
    return TokenStore(codec)
