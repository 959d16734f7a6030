# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AEAD para sellar y abrir el token en reposo.
# --------------------------------------------------------------
"""Cifrado autenticado del token con AES-256-GCM o ChaCha20-Poly1305."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from tokenvault.errors import (
    DecryptionFailedError,
    EncryptionError,
    KeyConfigurationError,
)
from tokenvault.models import (
    DEFAULT_CIPHER,
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    CodecConfig,
    SealedBlob,
)

__all__ = ["CIPHERS", "CipherCodec"]

# Ambas primitivas usan nonce de 96 bits y tag de 128 bits.
CIPHERS = {
    "aes-256-gcm": AESGCM,
    "chacha20-poly1305": ChaCha20Poly1305,
}


class CipherCodec:
    """Convierte bytes en claro en un blob autenticado y viceversa.

    El formato producido es `ciphertext || tag(16) || nonce(12)`, sin cabecera
    ni versión. Cambiar de cifrador deja ilegibles los ficheros existentes.

    """

    def __init__(self, config: CodecConfig) -> None:
        """Construye la primitiva AEAD validando la configuración.

        Args:
            config (CodecConfig): Clave de 32 bytes y nombre del cifrador.

        Raises:
            KeyConfigurationError: Si la clave no mide 32 bytes o el cifrador
                no está soportado.

        """

        if len(config.key) != KEY_SIZE:
            raise KeyConfigurationError(
                f"la clave debe medir {KEY_SIZE} bytes, recibidos {len(config.key)}"
            )
        try:
            primitive = CIPHERS[config.cipher]
        except KeyError:
            raise KeyConfigurationError(
                f"cifrador no soportado: {config.cipher!r}"
            ) from None
        self.cipher = config.cipher
        self._aead = primitive(config.key)

    @classmethod
    def from_key(cls, key: bytes, cipher: str = DEFAULT_CIPHER) -> "CipherCodec":
        """Atajo para construir el codec a partir de una clave en binario."""

        return cls(CodecConfig(key=key, cipher=cipher))

    def __repr__(self) -> str:
        return f"CipherCodec(cipher={self.cipher!r})"

    def seal(self, plaintext: bytes) -> bytes:
        """Cifra datos con un nonce aleatorio nuevo y lo añade al final.

        Args:
            plaintext (bytes): Datos en claro.

        Returns:
            bytes: Blob `ciphertext || tag || nonce`.

        Raises:
            EncryptionError: Si la primitiva falla al cifrar.

        """

        nonce = os.urandom(NONCE_SIZE)
        try:
            ct_full = self._aead.encrypt(nonce, plaintext, None)
        except (ValueError, OverflowError, TypeError) as exc:
            raise EncryptionError(str(exc)) from exc
        sealed = SealedBlob(
            ciphertext=ct_full[:-TAG_SIZE], tag=ct_full[-TAG_SIZE:], nonce=nonce
        )
        return sealed.to_bytes()

    def open(self, blob: bytes) -> bytes:
        """Verifica y descifra un blob producido por `seal`.

        Args:
            blob (bytes): Contenido sellado.

        Returns:
            bytes: Mensaje original en claro.

        Raises:
            MalformedBlobError: Si el blob mide menos de 28 bytes.
            DecryptionFailedError: Si la etiqueta no verifica.

        """

        sealed = SealedBlob.from_bytes(blob)
        try:
            return self._aead.decrypt(sealed.nonce, sealed.ciphertext + sealed.tag, None)
        except InvalidTag as exc:
            raise DecryptionFailedError("la etiqueta de autenticación no verifica") from exc
