"""Configuration constants for the besrest client."""

import os

DEFAULT_PORT = 52311
API_PREFIX = "/api/"
SITE_RESOURCE_PREFIX = "/api/site/"

# Connection defaults can also be supplied via the BES_* env vars
DEFAULT_ROOT_SERVER = os.environ.get("BES_ROOT_SERVER", "")
DEFAULT_USER = os.environ.get("BES_USER_NAME", "")
DEFAULT_PASSWORD = os.environ.get("BES_PASSWORD", "")
DEFAULT_VERIFY_SSL = os.environ.get("BES_VERIFY_SSL", "").lower() in ("1", "true", "yes")

# None leaves the timeout to the transport (requests waits forever)
_timeout = os.environ.get("BES_REQUEST_TIMEOUT", "")
REQUEST_TIMEOUT: float | None = float(_timeout) if _timeout else None

MAX_RETRIES = 3                    # urllib3 retries on 5xx for idempotent verbs
USER_AGENT = "besrest/1.0"

# Export layout
DEFAULT_NAME_TRIM = 70             # max characters of an item name in a file name
EXPORT_EXTENSION = ".bes"
EXTERNAL_SITE_MARKER = "external/"

# Characters that survive sanitize_txt (after slashes become dashes)
SAFE_FILENAME_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.() "
)
