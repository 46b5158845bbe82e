"""Configuration management for rss2notion."""

from .loader import (
    CONTENT_DATABASE_ENV,
    FEEDS_DATABASE_ENV,
    TOKEN_ENV,
    Config,
    load_config,
    load_credentials,
)
from .models import ConfigModel, ContentSchema, Credentials, FeedsSchema

__all__ = [
    "Config",
    "ConfigModel",
    "ContentSchema",
    "Credentials",
    "FeedsSchema",
    "load_config",
    "load_credentials",
    "TOKEN_ENV",
    "CONTENT_DATABASE_ENV",
    "FEEDS_DATABASE_ENV",
]
