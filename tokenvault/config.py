# --------------------------------------------------------------
# File: config.py
# Description: Configuración por entorno del almacén cifrado de tokens.
# --------------------------------------------------------------
"""Lee la configuración del proceso desde variables de entorno y `.env`."""

import os

from dotenv import load_dotenv

load_dotenv()

KEY_ENV_VAR = "TOKEN_VAULT_KEY"
CIPHER_ENV_VAR = "TOKEN_VAULT_CIPHER"

TOKEN_VAULT_CIPHER = os.getenv(CIPHER_ENV_VAR, "aes-256-gcm")
DATA_DIR = os.getenv("STORAGE_PATH", "./_data")
