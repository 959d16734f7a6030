# --------------------------------------------------------------
# File: storage.py
# Description: Persistencia del token cifrado en un único fichero local.
# --------------------------------------------------------------
"""Enlaza `CipherCodec` con una ruta de fichero con guardado atómico."""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Union

from tokenvault.crypto_sym import CipherCodec
from tokenvault.errors import InvalidEncodingError, TokenIOError, TokenNotFoundError

__all__ = ["TokenStore"]

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

FILE_MODE = 0o600


def _write_atomic(path: str, data: bytes) -> None:
    """Escribe en un temporal del mismo directorio y lo renombra sobre `path`.

    Un lector concurrente ve el fichero anterior o el nuevo, nunca uno a medias.
    No crea el directorio padre.

    """

    parent = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(
        prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=parent
    )
    try:
        with os.fdopen(fd, "wb") as handler:
            handler.write(data)
            handler.flush()
            os.fsync(handler.fileno())
        os.chmod(tmp_path, FILE_MODE)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


class TokenStore:
    """Guarda, lee y borra un token cifrado en la ruta que indique el llamador.

    El fichero tiene dos estados observables, AUSENTE y PRESENTE. `save` lleva a
    PRESENTE desde cualquiera, `load` solo es válido en PRESENTE y `remove` pasa
    de PRESENTE a AUSENTE.

    """

    def __init__(self, codec: CipherCodec) -> None:
        self.codec = codec

    def save(self, path: PathLike, token: str) -> None:
        """Cifra el token y reemplaza el fichero de forma atómica.

        Args:
            path (PathLike): Ruta del fichero de token.
            token (str): Token en claro.

        Raises:
            TokenIOError: Si falla la escritura (permisos, disco lleno, ruta o
                directorio padre inexistente).

        """

        target = os.fspath(path)
        blob = self.codec.seal(token.encode("utf-8"))
        try:
            _write_atomic(target, blob)
        except OSError as exc:
            logger.warning("No se pudo guardar el token en %s: %s", target, exc)
            raise TokenIOError(f"{target}: {exc}") from exc
        logger.debug("Token guardado en %s (%d bytes)", target, len(blob))

    def load(self, path: PathLike) -> str:
        """Lee el fichero, lo descifra y decodifica el token.

        Args:
            path (PathLike): Ruta del fichero de token.

        Returns:
            str: Token en claro.

        Raises:
            TokenNotFoundError: Si el fichero no existe.
            TokenIOError: Si la lectura falla por otro motivo.
            MalformedBlobError: Si el contenido es demasiado corto.
            DecryptionFailedError: Si la autenticación falla.
            InvalidEncodingError: Si el resultado no es UTF-8 válido.

        """

        target = os.fspath(path)
        try:
            with open(target, "rb") as handler:
                blob = handler.read()
        except FileNotFoundError as exc:
            raise TokenNotFoundError(target) from exc
        except OSError as exc:
            logger.warning("No se pudo leer el token en %s: %s", target, exc)
            raise TokenIOError(f"{target}: {exc}") from exc

        plaintext = self.codec.open(blob)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(f"{target}: {exc.reason}") from exc

    def remove(self, path: PathLike) -> None:
        """Borra el fichero de token.

        Raises:
            TokenNotFoundError: Si el fichero no existe.
            TokenIOError: Para cualquier otro fallo del sistema de ficheros.

        """

        target = os.fspath(path)
        try:
            os.remove(target)
        except FileNotFoundError as exc:
            raise TokenNotFoundError(target) from exc
        except OSError as exc:
            logger.warning("No se pudo borrar el token en %s: %s", target, exc)
            raise TokenIOError(f"{target}: {exc}") from exc
        logger.debug("Token borrado de %s", target)

    def exists(self, path: PathLike) -> bool:
        """Indica si el fichero de token está presente, sin descifrarlo."""

        return os.path.isfile(os.fspath(path))
