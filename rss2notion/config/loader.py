"""Configuration loader."""

import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import ConfigModel, Credentials

TOKEN_ENV = "NOTION_API_TOKEN"
CONTENT_DATABASE_ENV = "NOTION_RSS_CONTENT_DATABASE_ID"
FEEDS_DATABASE_ENV = "NOTION_RSS_FEEDS_DATABASE_ID"
CONFIG_PATH_ENV = "RSS2NOTION_CONFIG"


def default_config_path() -> Path:
    """Get the config file path, honouring RSS2NOTION_CONFIG."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "rss2notion" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = default_config_path()
        self.config_path = config_path
        self.environ = os.environ if environ is None else environ
        self._config: Optional[ConfigModel] = None
        self._credentials: Optional[Credentials] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    def validate(self) -> None:
        """Load settings and credentials, raising ConfigurationError early."""
        self._config = load_config(self.config_path) if self.config_path.exists() else ConfigModel()
        self._credentials = load_credentials(self.environ)

    @property
    def credentials(self) -> Credentials:
        """Get credentials from the environment."""
        if self._credentials is None:
            self._credentials = load_credentials(self.environ)
        return self._credentials


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}")
    except (TypeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def load_credentials(environ: Mapping[str, str]) -> Credentials:
    """
    Read the Notion token and database IDs from the environment.

    Raises:
        ConfigurationError: naming every variable that is missing or empty
    """
    names = (TOKEN_ENV, CONTENT_DATABASE_ENV, FEEDS_DATABASE_ENV)
    missing = [name for name in names if not environ.get(name, "").strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )

    return Credentials(
        token=environ[TOKEN_ENV].strip(),
        content_database_id=environ[CONTENT_DATABASE_ENV].strip(),
        feeds_database_id=environ[FEEDS_DATABASE_ENV].strip(),
    )
