"""esupdater configuration."""

from esupdater.config.settings import Settings, get_es_client, get_settings

__all__ = ["Settings", "get_es_client", "get_settings"]
