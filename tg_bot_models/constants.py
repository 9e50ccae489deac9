"""
Constants for tg-bot-models.

Limits documented by the Bot API and defaults shared by the CLI and the
configuration layer.
"""

from pathlib import Path

# Bot API limits
CALLBACK_DATA_MAX_BYTES = 64
CALLBACK_ANSWER_MAX_LENGTH = 200
CURRENCY_CODE_LENGTH = 3

# Compact JSON, matching what the Bot API itself emits
JSON_SEPARATORS = (",", ":")

# Configuration
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tg-bot-models" / "config.toml"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "text"
DEFAULT_LOG_MAX_BYTES = 10485760  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5

# Exit Codes (for CLI commands)
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

__all__ = [
    "CALLBACK_ANSWER_MAX_LENGTH",
    "CALLBACK_DATA_MAX_BYTES",
    "CURRENCY_CODE_LENGTH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOG_BACKUP_COUNT",
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_MAX_BYTES",
    "EXIT_ERROR",
    "EXIT_SUCCESS",
    "EXIT_USAGE_ERROR",
    "JSON_SEPARATORS",
]
