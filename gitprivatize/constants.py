import os


# ===== Git integration =====
FILTER_NAME = "git-privatize"
PROGRAM = os.environ.get("GIT_PRIVATIZE_PROGRAM", "git-privatize")
GIT = os.environ.get("GIT", "git")

# ===== Key store =====
STORE_DIR_NAME = "git-privatize"  # created inside the repo's git dir
KEY_FILE_NAME = "key"
KEY_FILE_MODE = 0o600

# ===== Formats & constants =====
CIPHER_KEY_LEN = 32  # AES-256
IV_SECRET_LEN = 16  # HMAC key for IV derivation
KEY_LEN = CIPHER_KEY_LEN + IV_SECRET_LEN
IV_LEN = 16  # hex characters, used as the 16-byte CTR counter block

# ===== Block markers =====
OPEN_MARKER = "<<PRIVATE"  # opening line ends with this
CLOSE_MARKER = "PRIVATE"  # closing line starts with this

USAGE = f"""
Usage: {PROGRAM} COMMAND [ARGS ...]

Commands:
  init                 generate a key and prepare repo to use {PROGRAM}
  export FILENAME      export this repo's symmetric key to the given file
  unlock KEYFILE       decrypt this repo using the given symmetric key

Mark files for encryption in .gitattributes:

  secrets.env filter={FILTER_NAME} diff={FILTER_NAME}

See '{PROGRAM} COMMAND --help' for more information on a specific command.
"""
