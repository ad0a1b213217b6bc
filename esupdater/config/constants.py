"""Centralized constants for esupdater.

Resource naming conventions and client defaults live here.
Environment-specific values (URLs, API keys) stay in Settings (.env).
"""

# ---------------------------------------------------------------------------
# Resource layout
# ---------------------------------------------------------------------------
CONFIG_DIR = "es"  # Default root holding index and template definitions

TEMPLATE_DIR = "_template"  # <root>/_template/<template>.json
INDEX_SETTINGS_FILE = "_settings"  # <root>/<index>/_settings.json
UPDATE_SETTINGS_FILE = "_update_settings"  # <root>/<index>/_update_settings.json
JSON_EXT = ".json"

# Top-level keys that mark a create-index payload as a full request body
# rather than a bare settings document
CREATE_INDEX_BODY_KEYS = ("settings", "mappings", "aliases")

# ---------------------------------------------------------------------------
# ES Client Defaults
# ---------------------------------------------------------------------------
ES_REQUEST_TIMEOUT = 30  # seconds
ES_MAX_RETRIES = 3

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"
