# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que describen la configuración del cifrador y el blob sellado."""

from __future__ import annotations

from pydantic import BaseModel

from tokenvault.errors import MalformedBlobError

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
MIN_BLOB_SIZE = NONCE_SIZE + TAG_SIZE

DEFAULT_CIPHER = "aes-256-gcm"


class CodecConfig(BaseModel):
    """Configuración explícita que recibe el constructor de `CipherCodec`.

    Attributes:
        key (bytes): Clave simétrica de 256 bits.
        cipher (str): Nombre de la primitiva AEAD (`aes-256-gcm` o
            `chacha20-poly1305`).

    """

    key: bytes
    cipher: str = DEFAULT_CIPHER

    def __repr__(self) -> str:
        return f"CodecConfig(key=<{len(self.key)} bytes>, cipher={self.cipher!r})"

    __str__ = __repr__


class SealedBlob(BaseModel):
    """Representa el contenido de un fichero de token ya separado en partes.

    Attributes:
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        nonce (bytes): Nonce de 96 bits, almacenado al final del fichero.

    """

    ciphertext: bytes
    tag: bytes
    nonce: bytes

    @classmethod
    def from_bytes(cls, blob: bytes) -> "SealedBlob":
        """Separa `ciphertext || tag || nonce` validando la longitud mínima.

        Args:
            blob (bytes): Contenido leído del fichero de token.

        Returns:
            SealedBlob: Partes del blob listas para descifrar.

        Raises:
            MalformedBlobError: Si el blob tiene menos de 28 bytes.

        """

        if len(blob) < MIN_BLOB_SIZE:
            raise MalformedBlobError(
                f"blob de {len(blob)} bytes, mínimo {MIN_BLOB_SIZE}"
            )
        body, nonce = blob[:-NONCE_SIZE], blob[-NONCE_SIZE:]
        return cls(ciphertext=body[:-TAG_SIZE], tag=body[-TAG_SIZE:], nonce=nonce)

    def to_bytes(self) -> bytes:
        """Serializa el blob con el formato de disco."""

        return self.ciphertext + self.tag + self.nonce
