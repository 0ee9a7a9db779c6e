"""Configuration management utilities."""

import tomllib
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from ..core.constants import CONFIG_FILE_NAMES
from ..models.config import DevspaceConfig
from ..services.exceptions import ConfigError


class ConfigManager:
    """Reads the project configuration from the project's config directory."""

    def __init__(self, config_dir: Path):
        """Initialize config manager."""
        self.config_dir = Path(config_dir)
        self._config: Optional[DevspaceConfig] = None

    @property
    def config_file(self) -> Path:
        """Path of the config file; ``config`` wins over ``config.toml``."""
        for name in CONFIG_FILE_NAMES:
            candidate = self.config_dir / name
            if candidate.is_file():
                return candidate
        return self.config_dir / CONFIG_FILE_NAMES[0]

    def load_config(self) -> DevspaceConfig:
        """Load and validate the config file.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if self._config is not None:
            return self._config

        path = self.config_file
        try:
            with open(path, 'rb') as f:
                raw = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"config file not found: {path}") from e
        except OSError as e:
            raise ConfigError(f"error reading config file {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"error parsing config file {path}: {e}") from e

        try:
            self._config = DevspaceConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(f"invalid config file {path}: {e}") from e
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Validated value for ``key`` as spelled in the file, defaults applied."""
        values = self.load_config().model_dump(by_alias=True)
        return values.get(key, default)

    def get_string(self, key: str, default: str = "") -> str:
        value = self.get(key)
        if value is None or value == "":
            return default
        return str(value)

    def get_string_list(self, key: str, default: Optional[List[str]] = None) -> List[str]:
        value = self.get(key)
        if not value:
            return list(default or [])
        return [str(v) for v in value]
