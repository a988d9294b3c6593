# edkey_core/constants.py

KEY_LENGTH = 32                 # raw Ed25519 public key, bytes
SIGNATURE_LENGTH = 64           # R || S
HEX_PREFIX = "0x"

DEFAULT_LOGGER_NAME = "edkey_core"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "EDKEY_LOG_LEVEL"
LOG_FILE_ENV = "EDKEY_LOG_FILE"
