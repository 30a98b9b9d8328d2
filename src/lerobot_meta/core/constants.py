"""Constants and default values."""

# Artifact host
DEFAULT_DATASET_URL = "https://huggingface.co/datasets"
RESOLVE_MAIN = "resolve/main"

# Environment variables
DATASET_URL_ENV = "DATASET_URL"
TOKEN_ENVS = ("HF_TOKEN", "HUGGINGFACE_TOKEN")

# File names
META_DIR = "meta"
INFO_JSON = "info.json"
INFO_JSON_PATH = f"{META_DIR}/{INFO_JSON}"

# Network settings
REQUEST_TIMEOUT_SECONDS = 10.0
MAX_ATTEMPTS = 2
RETRY_BACKOFF_SECONDS = 0.3

# Status codes reported as access-denied
ACCESS_DENIED_STATUSES = frozenset({401, 403})
