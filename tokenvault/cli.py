# --------------------------------------------------------------
# File: cli.py
# Description: Interfaz de línea de comandos para aprovisionar la clave y probar el almacén.
# --------------------------------------------------------------
"""Comandos `keygen`, `save`, `get` y `remove` sobre el directorio de datos."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from tokenvault import commands, config
from tokenvault.errors import TokenVaultError
from tokenvault.keys import encode_key, generate_key

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser con un subcomando por operación."""

    parser = argparse.ArgumentParser(
        prog="tokenvault",
        description="Almacén local del token de autenticación cifrado con AEAD.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Trazas DEBUG.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("keygen", help="Genera una clave de 256 bits para TOKEN_VAULT_KEY.")

    save = sub.add_parser("save", help="Cifra y guarda un token.")
    save.add_argument("dir", help="Directorio de datos.")
    save.add_argument("token")

    for name, text in (("get", "Muestra el token guardado."), ("remove", "Borra el token.")):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument(
            "dir", nargs="?", default=config.DATA_DIR, help="Directorio de datos (STORAGE_PATH)."
        )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Ejecuta la CLI y devuelve el código de salida.

    Args:
        argv (Optional[List[str]]): Argumentos; por defecto `sys.argv[1:]`.

    Returns:
        int: 0 si la operación termina bien, 1 si falla.

    """

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    try:
        if args.command == "keygen":
            print(encode_key(generate_key()))
        elif args.command == "save":
            commands.save_token(args.dir, args.token)
        elif args.command == "get":
            print(commands.get_token(args.dir))
        elif args.command == "remove":
            commands.remove_token(args.dir)
    except TokenVaultError as exc:
        logger.debug("Fallo en %s", args.command, exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1
    return 0
