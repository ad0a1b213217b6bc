"""esupdater configuration and Elasticsearch client."""

from __future__ import annotations

import logging
from functools import lru_cache

import structlog
from elasticsearch import Elasticsearch
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from esupdater.config.constants import (
    CONFIG_DIR,
    DEFAULT_LOG_LEVEL,
    ES_MAX_RETRIES,
    ES_REQUEST_TIMEOUT,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    elastic_url: str = ""
    elastic_api_key: str = ""

    # Updater config (env prefix ESUPDATER_)
    config_dir: str = Field(default=CONFIG_DIR, alias="ESUPDATER_CONFIG_DIR")
    request_timeout: int = Field(default=ES_REQUEST_TIMEOUT, alias="ESUPDATER_REQUEST_TIMEOUT")
    max_retries: int = Field(default=ES_MAX_RETRIES, alias="ESUPDATER_MAX_RETRIES")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, alias="ESUPDATER_LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton."""
    settings = Settings()
    _configure_logging(settings.log_level)
    return settings


def _configure_logging(level: str) -> None:
    """Configure structlog console output at the given level."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Elasticsearch client
# ---------------------------------------------------------------------------

_es_client: Elasticsearch | None = None


def build_es_client(settings: Settings | None = None) -> Elasticsearch:
    """Build a synchronous Elasticsearch client from settings.

    The API key is optional so that unsecured local clusters work too.
    """
    settings = settings or get_settings()
    if not settings.elastic_url:
        raise ValueError("ELASTIC_URL must be set")

    kwargs = {
        "request_timeout": settings.request_timeout,
        "retry_on_timeout": True,
        "max_retries": settings.max_retries,
    }
    if settings.elastic_api_key:
        kwargs["api_key"] = settings.elastic_api_key
    logger.debug("building_es_client", url=settings.elastic_url)
    return Elasticsearch(settings.elastic_url, **kwargs)


def get_es_client() -> Elasticsearch:
    """Return a module-level Elasticsearch singleton."""
    global _es_client
    if _es_client is None:
        _es_client = build_es_client()
    return _es_client


def close_es_client() -> None:
    """Close and forget the module-level client, if one was built."""
    global _es_client
    if _es_client is not None:
        _es_client.close()
        _es_client = None
