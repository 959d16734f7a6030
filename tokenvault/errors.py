# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía plana de errores del almacén cifrado de tokens.
# --------------------------------------------------------------
"""Excepciones que la capa de persistencia devuelve al host."""

from __future__ import annotations

__all__ = [
    "TokenVaultError",
    "TokenNotFoundError",
    "TokenIOError",
    "MalformedBlobError",
    "DecryptionFailedError",
    "InvalidEncodingError",
    "KeyConfigurationError",
    "EncryptionError",
]


class TokenVaultError(Exception):
    """Error base del paquete.

    Attributes:
        kind (str): Identificador estable del tipo de error, pensado para que
            la capa de comandos del host lo traduzca a mensajes propios.

    """

    kind = "TokenVaultError"

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.kind}: {message}" if message else self.kind


class TokenNotFoundError(TokenVaultError):
    """No existe fichero de token en la ruta indicada."""

    kind = "NotFound"


class TokenIOError(TokenVaultError):
    """Fallo del sistema de ficheros distinto de la ausencia del fichero."""

    kind = "IoError"


class MalformedBlobError(TokenVaultError):
    """El contenido almacenado es más corto que nonce + tag."""

    kind = "MalformedBlob"


class DecryptionFailedError(TokenVaultError):
    """La etiqueta de autenticación no verifica (manipulación o clave distinta)."""

    kind = "DecryptionFailed"


class InvalidEncodingError(TokenVaultError):
    """Los bytes descifrados no son UTF-8 válido."""

    kind = "InvalidEncoding"


class KeyConfigurationError(TokenVaultError):
    """Clave o cifrador mal configurados. Es fatal en el arranque."""

    kind = "KeyConfigurationError"


class EncryptionError(TokenVaultError):
    """La primitiva AEAD no pudo cifrar. Error interno no recuperable."""

    kind = "EncryptionFailed"
