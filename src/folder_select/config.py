"""Configuration constants for folder-select."""

import os
from pathlib import Path

# Environment variable overriding the response source (URL or file path).
SOURCE_ENV_VAR = "FOLDER_SELECT_SOURCE"

# Local response files. First file found is used when no source is given.
RESPONSE_FILES: list[Path] = [
    Path("response.json"),
    Path("public/response.json"),
    Path("~/.config/folder-select/response.json").expanduser(),
]

# Used when neither the environment nor a local response file provides a source.
DEFAULT_SOURCE_URL: str = "http://localhost:3000/response.json"

# Cache prefix, used only when --cache is passed.
API_CACHE_PREFIX: str = "/tmp/folder-select-cache/cache-"

# Seconds before an HTTP fetch is abandoned.
REQUEST_TIMEOUT: float = 10.0

UNNAMED_FOLDER = "Unnamed Folder"
UNNAMED_ITEM = "Unnamed Item"


def resolve_source() -> str:
    """Return $FOLDER_SELECT_SOURCE, else the first local response file, else the default URL."""
    env_source = os.environ.get(SOURCE_ENV_VAR)
    if env_source:
        return env_source
    for candidate in RESPONSE_FILES:
        if candidate.is_file():
            return str(candidate)
    return DEFAULT_SOURCE_URL
