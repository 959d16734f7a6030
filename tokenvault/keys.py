# --------------------------------------------------------------
# File: keys.py
# Description: Utilidades para generar, codificar y cargar la clave simétrica.
# --------------------------------------------------------------
"""Ayudas de aprovisionamiento de la clave de 256 bits fuera del código fuente."""

from __future__ import annotations

import base64
import binascii
import os
from typing import Optional

from tokenvault import config
from tokenvault.errors import KeyConfigurationError
from tokenvault.models import KEY_SIZE


def _b64u(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno."""

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _unb64u(value: str) -> bytes:
    """Decodifica datos codificados en Base64 URL-safe gestionando el relleno."""

    pad = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + pad)


def generate_key() -> bytes:
    """Genera una clave aleatoria de 256 bits con el CSPRNG del sistema."""

    return os.urandom(KEY_SIZE)


def encode_key(key: bytes) -> str:
    """Codifica la clave para guardarla en el entorno o en un llavero.

    Args:
        key (bytes): Clave simétrica en binario.

    Returns:
        str: Clave en Base64 URL-safe sin relleno.

    """

    return _b64u(key)


def decode_key(text: str) -> bytes:
    """Decodifica una clave en hex (64 caracteres) o en Base64 URL-safe.

    La longitud no se valida aquí: la comprueba `CipherCodec` al construirse.

    Args:
        text (str): Clave codificada.

    Returns:
        bytes: Clave en binario.

    Raises:
        KeyConfigurationError: Si el texto no es decodificable.

    """

    value = text.strip()
    if len(value) == KEY_SIZE * 2:
        try:
            return bytes.fromhex(value)
        except ValueError:
            pass
    try:
        return _unb64u(value)
    except (binascii.Error, ValueError) as exc:
        raise KeyConfigurationError("la clave no es hex ni base64url válido") from exc


def key_from_env(var: Optional[str] = None) -> bytes:
    """Carga la clave desde una variable de entorno.

    Args:
        var (Optional[str]): Nombre de la variable; por defecto `TOKEN_VAULT_KEY`.

    Returns:
        bytes: Clave decodificada.

    Raises:
        KeyConfigurationError: Si la variable no existe, está vacía o no se
            puede decodificar.

    """

    name = var or config.KEY_ENV_VAR
    value = os.getenv(name, "")
    if not value.strip():
        raise KeyConfigurationError(f"variable de entorno {name} no definida")
    return decode_key(value)
