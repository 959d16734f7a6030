# --------------------------------------------------------------
# File: commands.py
# Description: Operaciones de frontera que invoca la capa de comandos del host.
# --------------------------------------------------------------
"""Puntos de entrada `save_token`, `get_token` y `remove_token`.

El host resuelve su directorio de datos y lo pasa en cada llamada; aquí solo se
deriva la ruta del fichero de token y se delega en `TokenStore`. La
configuración del cifrador se inicializa una vez por proceso, bien desde el
entorno, bien con `configure` si el host obtiene la clave de un llavero.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from tokenvault import config
from tokenvault.crypto_sym import CipherCodec
from tokenvault.keys import key_from_env
from tokenvault.models import CodecConfig
from tokenvault.storage import PathLike, TokenStore

__all__ = [
    "TOKEN_FILE",
    "configure",
    "get_codec",
    "get_token",
    "has_token",
    "remove_token",
    "reset",
    "save_token",
    "token_path",
]

logger = logging.getLogger(__name__)

# El nombre es histórico: el contenido es binario, no JSON.
TOKEN_FILE = "token.json"

_codec: Optional[CipherCodec] = None


def configure(codec_config: CodecConfig) -> CipherCodec:
    """Instala una configuración explícita para todo el proceso.

    Args:
        codec_config (CodecConfig): Clave y cifrador aprovisionados por el host.

    Returns:
        CipherCodec: Codec ya validado.

    Raises:
        KeyConfigurationError: Si la clave o el cifrador no son válidos.

    """

    global _codec
    _codec = CipherCodec(codec_config)
    logger.info("Codec de tokens configurado (%s)", _codec.cipher)
    return _codec


def reset() -> None:
    """Olvida la configuración instalada; la siguiente llamada relee el entorno."""

    global _codec
    _codec = None


def get_codec() -> CipherCodec:
    """Devuelve el codec del proceso, construyéndolo desde el entorno si hace falta.

    Raises:
        KeyConfigurationError: Si `TOKEN_VAULT_KEY` falta o no es válida.

    """

    if _codec is None:
        cipher = os.getenv(config.CIPHER_ENV_VAR, config.TOKEN_VAULT_CIPHER)
        return configure(CodecConfig(key=key_from_env(), cipher=cipher))
    return _codec


def token_path(app_data_dir: PathLike) -> str:
    """Ruta del fichero de token dentro del directorio de datos de la aplicación."""

    return os.path.join(os.fspath(app_data_dir), TOKEN_FILE)


def _store() -> TokenStore:
    return TokenStore(get_codec())


def save_token(path: PathLike, token: str) -> None:
    """Cifra y guarda el token en `<path>/token.json`.

    Args:
        path (PathLike): Directorio de datos ya resuelto por el host.
        token (str): Token en claro.

    """

    _store().save(token_path(path), token)
    logger.info("Token guardado")


def get_token(path: PathLike) -> str:
    """Recupera el token guardado en `<path>/token.json`.

    Args:
        path (PathLike): Directorio de datos ya resuelto por el host.

    Returns:
        str: Token en claro.

    Raises:
        TokenNotFoundError: Si todavía no hay token; el llamador decide si eso
            equivale a "sin sesión".

    """

    return _store().load(token_path(path))


def remove_token(path: PathLike) -> None:
    """Borra el fichero de token de `path`."""

    _store().remove(token_path(path))
    logger.info("Token eliminado")


def has_token(path: PathLike) -> bool:
    """Indica si hay un token guardado en `path`, sin necesitar la clave.

    Args:
        path (PathLike): Directorio de datos ya resuelto por el host.

    Returns:
        bool: True si el fichero de token existe.

    """

    return os.path.isfile(token_path(path))
