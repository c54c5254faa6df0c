"""Fixed names and paths used by the init command."""

from __future__ import annotations

__all__ = [
    "LIBRARY_NAME",
    "CONFIG_SCHEMA_URL",
    "CONFIG_FILE",
    "CONFIG_PATTERN",
    "CONFIG_EXTENSIONS",
    "MANIFEST_FILE",
    "MANIFEST_CONFIG_KEY",
    "USER_AGENT_ENV",
]

LIBRARY_NAME = "release-hub"

CONFIG_SCHEMA_URL = (
    "https://cdn.jsdelivr.net/npm/release-hub@latest/schema/release-hub.schema.json"
)

# Written relative to the project directory.
CONFIG_FILE = "release-hub.json"

# Dedicated config file names, e.g. release-hub.json or .release-hub.config.ts
CONFIG_PATTERN = "{.,}release-hub{,.config}.{json,js,cjs,mjs,ts,cts,mts}"
CONFIG_EXTENSIONS = ("json", "js", "cjs", "mjs", "ts", "cts", "mts")

MANIFEST_FILE = "package.json"
MANIFEST_CONFIG_KEY = "release-hub"

USER_AGENT_ENV = "npm_config_user_agent"
