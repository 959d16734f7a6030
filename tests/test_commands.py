# --------------------------------------------------------------
# File: test_commands.py
# Description: Pruebas de integración de los comandos de frontera con el host.
# --------------------------------------------------------------

import os

import pytest

from tokenvault import commands
from tokenvault.errors import (
    DecryptionFailedError,
    KeyConfigurationError,
    TokenNotFoundError,
)
from tokenvault.keys import encode_key, generate_key
from tokenvault.models import CodecConfig


def test_token_path_uses_historical_name(data_dir):
    """Comprueba que el fichero se resuelva como `<dir>/token.json`.

    Returns:
        None: La aserción compara la ruta resultante.
    """
    assert commands.token_path(data_dir) == os.path.join(str(data_dir), "token.json")


def test_save_get_remove_lifecycle(data_dir):
    """Valida el flujo de vida completo del token usando la clave del entorno.

    Returns:
        None: Las aserciones verifican cada transición de estado.
    """
    assert not commands.has_token(data_dir)

    commands.save_token(data_dir, "hello")
    assert commands.has_token(data_dir)
    assert (data_dir / "token.json").stat().st_size == 33
    assert commands.get_token(data_dir) == "hello"

    commands.remove_token(data_dir)
    assert not commands.has_token(data_dir)
    with pytest.raises(TokenNotFoundError):
        commands.get_token(data_dir)
    with pytest.raises(TokenNotFoundError):
        commands.remove_token(data_dir)


def test_persistence_after_restart(data_dir):
    """Confirma que el token sobreviva a un reinicio con la misma clave.

    Returns:
        None: Las aserciones comparan el token tras reiniciar la configuración.
    """
    commands.save_token(str(data_dir), "persisted")
    commands.reset()
    assert commands.get_token(str(data_dir)) == "persisted"


def test_missing_key_fails_loudly(data_dir, monkeypatch):
    """Sin TOKEN_VAULT_KEY los comandos fallan con error de configuración.

    Returns:
        None: Se espera KeyConfigurationError sin crear el fichero.
    """
    monkeypatch.delenv("TOKEN_VAULT_KEY")
    with pytest.raises(KeyConfigurationError):
        commands.save_token(data_dir, "hello")
    assert not (data_dir / "token.json").exists()


def test_short_key_in_env_fails_loudly(data_dir, monkeypatch):
    """Una clave de longitud incorrecta no se trunca ni se rellena.

    Returns:
        None: Se espera KeyConfigurationError.
    """
    monkeypatch.setenv("TOKEN_VAULT_KEY", encode_key(b"k" * 16))
    with pytest.raises(KeyConfigurationError):
        commands.get_token(data_dir)


def test_configure_overrides_environment(data_dir):
    """Una configuración explícita del host sustituye a la del entorno.

    Returns:
        None: Las aserciones verifican que la clave del entorno ya no sirve.
    """
    commands.configure(CodecConfig(key=generate_key()))
    commands.save_token(data_dir, "from-keychain")
    assert commands.get_token(data_dir) == "from-keychain"

    commands.reset()
    with pytest.raises(DecryptionFailedError):
        commands.get_token(data_dir)


def test_cipher_selected_from_environment(data_dir, monkeypatch):
    """TOKEN_VAULT_CIPHER permite elegir ChaCha20-Poly1305.

    Returns:
        None: Las aserciones comprueban el cifrador y el cambio de formato.
    """
    monkeypatch.setenv("TOKEN_VAULT_CIPHER", "chacha20-poly1305")
    assert commands.get_codec().cipher == "chacha20-poly1305"
    commands.save_token(data_dir, "hello")

    monkeypatch.setenv("TOKEN_VAULT_CIPHER", "aes-256-gcm")
    commands.reset()
    with pytest.raises(DecryptionFailedError):
        commands.get_token(data_dir)


def test_has_token_does_not_need_key(data_dir, monkeypatch):
    """Comprobar la presencia del token no requiere la clave configurada.

    Returns:
        None: Las aserciones validan ambos estados sin TOKEN_VAULT_KEY.
    """
    commands.save_token(data_dir, "hello")
    commands.reset()
    monkeypatch.delenv("TOKEN_VAULT_KEY")
    assert commands.has_token(data_dir)
    (data_dir / "token.json").unlink()
    assert not commands.has_token(data_dir)
