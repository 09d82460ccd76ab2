import os
import sys

from .collector import config as collector_config
from .collector.schema import Budgets

# ==============================================================================
#  RUNTIME CONFIGURATION & DEFAULTS
# ==============================================================================

"""
Defines the runtime configuration for the manifest tool server and CLI.

Every value can be overridden through environment variables (set by the MCP
client configuration, the shell, or a `.env` file loaded by the CLI).
Values are read once, at import time.
"""


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        # stdout is reserved for the MCP stdio transport
        print(f"⚠️ Warning: Ignoring invalid {name}={raw!r}, using {default}", file=sys.stderr)
        return default
    return value


# 1. Budgets: 'PHASET_*' environment variables, else the collector defaults.
MAX_DEPTH = _env_int("PHASET_MAX_DEPTH", collector_config.MAX_DEPTH)
MAX_FILE_CHARS = _env_int("PHASET_MAX_FILE_CHARS", collector_config.MAX_FILE_CHARS)
MAX_TOTAL_TOKENS = _env_int("PHASET_MAX_TOTAL_TOKENS", collector_config.MAX_TOTAL_TOKENS)

# 2. Schema returned by 'get_phaset_schema'. Defaults to the copy shipped with the package.
DEFAULT_SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "integration.schema.yml")
SCHEMA_PATH = os.path.abspath(os.getenv("PHASET_SCHEMA_PATH", DEFAULT_SCHEMA_PATH))

LOG_LEVEL = os.getenv("PHASET_LOG_LEVEL", "INFO").upper()


def default_budgets() -> Budgets:
    return Budgets(
        max_depth=MAX_DEPTH,
        max_file_chars=MAX_FILE_CHARS,
        max_total_tokens=MAX_TOTAL_TOKENS,
    )
