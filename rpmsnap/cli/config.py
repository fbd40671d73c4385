"""Configuration for rpmsnap runs."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..errors import ConfigError
from ..host.location import DEFAULT_LOCATION_RULES, LocationRule
from ..utils.paths import INSTALL_ROOT_ENV, get_data_root, get_default_tool_path, get_install_root

logger = logging.getLogger(__name__)

CONFIG_ENV = "RPMSNAP_CONFIG"
HOSTNAME_ENV = "RPMSNAP_HOSTNAME"
LOG_LEVEL_ENV = "RPMSNAP_LOG_LEVEL"
DEFAULT_CONFIG_FILE = Path("/etc/rpmsnap/config.yaml")


@dataclass
class Config:
    """Deployment settings passed explicitly into the runner."""

    install_root: Path = field(default_factory=get_install_root)
    hostname: Optional[str] = None
    tool: Optional[Path] = None
    tool_args: List[str] = field(default_factory=lambda: ["--verify"])
    command_timeout: Optional[float] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None
    location_rules: List[LocationRule] = field(default_factory=lambda: list(DEFAULT_LOCATION_RULES))

    @property
    def data_root(self) -> Path:
        return get_data_root(self.install_root)

    @property
    def tool_path(self) -> Path:
        """Inventory command; defaults to <install_root>/sbin/rpmsnap.pl."""
        return self.tool if self.tool else get_default_tool_path(self.install_root)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create configuration from a parsed YAML mapping.

        Raises:
            ConfigError: If a value has the wrong shape
        """
        config = cls(install_root=get_install_root(data.get('install_root')))

        if data.get('hostname'):
            config.hostname = str(data['hostname'])
        if data.get('tool'):
            config.tool = Path(data['tool']).expanduser()
        if 'tool_args' in data:
            if not isinstance(data['tool_args'], list):
                raise ConfigError("'tool_args' must be a list")
            config.tool_args = [str(a) for a in data['tool_args']]
        if data.get('command_timeout') is not None:
            try:
                config.command_timeout = float(data['command_timeout'])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid 'command_timeout': {data['command_timeout']}") from e
        if data.get('log_level'):
            config.log_level = str(data['log_level']).upper()
        if data.get('log_file'):
            config.log_file = str(Path(data['log_file']).expanduser())
        if 'location_rules' in data:
            try:
                config.location_rules = [LocationRule.from_dict(r) for r in data['location_rules'] or []]
            except (TypeError, ValueError, AttributeError) as e:
                raise ConfigError(f"Invalid 'location_rules': {e}") from e

        return config

    @classmethod
    def load(cls, config_file: Optional[Union[str, Path]] = None) -> 'Config':
        """Load configuration.

        Precedence for the file: parameter > RPMSNAP_CONFIG > /etc/rpmsnap/config.yaml
        (only if present). Environment variables override file values.

        Raises:
            ConfigError: If an explicitly named file is missing or any file is malformed
        """
        explicit = config_file or os.environ.get(CONFIG_ENV)
        path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_FILE

        data: Dict[str, Any] = {}
        if path.is_file():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Could not read configuration file '{path}': {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Configuration file '{path}' must contain a mapping")
            logger.debug(f"Loaded configuration from {path}")
        elif explicit:
            raise ConfigError(f"Configuration file '{path}' not found")

        config = cls.from_dict(data)

        if os.environ.get(INSTALL_ROOT_ENV):
            config.install_root = get_install_root(os.environ[INSTALL_ROOT_ENV])
        if os.environ.get(HOSTNAME_ENV):
            config.hostname = os.environ[HOSTNAME_ENV]
        if os.environ.get(LOG_LEVEL_ENV):
            config.log_level = os.environ[LOG_LEVEL_ENV].upper()

        return config
