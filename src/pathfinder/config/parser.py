"""
Configuration resolution for pathfinder.

This module turns command-line options, plus an optional YAML file of defaults,
into the single immutable SearchConfig shared by the whole search. It handles
defaults file discovery, parsing, validation, and reports configuration
problems as ConfigurationError.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from ..models.config import SearchConfig


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Result of loading a defaults file.

    Attributes:
        defaults: Default option values read from the file
        config_path: Path to the file used, None if no file was found
        is_default: Whether built-in defaults were used
    """
    defaults: Dict[str, Any] = field(default_factory=dict)
    config_path: Optional[Path] = None
    is_default: bool = True


class ConfigurationError(Exception):
    """Raised when the search cannot be configured."""
    pass


class ConfigParser:
    """
    Resolves search options into a SearchConfig.

    Options given on the command line take precedence over values from the
    YAML defaults file, which take precedence over built-in defaults.
    """

    DEFAULT_CONFIG_NAMES = [
        '.pathfinder.yaml',
        '.pathfinder.yml'
    ]

    KNOWN_KEYS = {'root', 'json'}

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_defaults(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Load default option values from a YAML file.

        Args:
            config_path: Path to the defaults file. If None, searches the default locations.

        Returns:
            ConfigParseResult with the defaults that were found

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        if config_path:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_path}")
        else:
            config_path = self._find_config()
            if config_path is None:
                return ConfigParseResult()

        defaults = self._load_yaml_file(config_path)
        self._validate_defaults(defaults, config_path)
        self.logger.debug(f"Loaded defaults from {config_path}")

        return ConfigParseResult(defaults=defaults, config_path=config_path, is_default=False)

    def _find_config(self) -> Optional[Path]:
        """
        Find a defaults file in the current or the home directory.

        Returns:
            Path of the first file found, or None
        """
        search_paths = [Path.cwd()]
        try:
            search_paths.append(Path.home())
        except (RuntimeError, KeyError):
            pass

        for search_path in search_paths:
            for config_name in self.DEFAULT_CONFIG_NAMES:
                config_file = search_path / config_name
                if config_file.is_file():
                    return config_file

        return None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML data as dictionary

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                self.logger.warning(f"Configuration file is empty: {file_path}")
                return {}

            data = yaml.safe_load(content)

            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

    def _validate_defaults(self, defaults: Dict[str, Any], config_path: Path) -> None:
        unknown = set(defaults) - self.KNOWN_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown keys in {config_path}: {', '.join(sorted(unknown))}")

        if 'root' in defaults and not isinstance(defaults['root'], str):
            raise ConfigurationError(f"'root' in {config_path} must be a string")

        if 'json' in defaults and not isinstance(defaults['json'], bool):
            raise ConfigurationError(f"'json' in {config_path} must be true or false")

    def resolve_root(self, root: str) -> str:
        """
        Resolve the root option to an absolute path.

        An empty root means the user's home directory; a relative root is
        resolved against the current working directory.

        Args:
            root: Root option as given

        Returns:
            Absolute root path

        Raises:
            ConfigurationError: If the home directory cannot be determined
        """
        if root == "":
            try:
                return str(Path.home())
            except (RuntimeError, KeyError) as e:
                raise ConfigurationError(f"Error getting user home directory: {e}") from e

        if not os.path.isabs(root):
            return os.path.abspath(root)

        return root

    def resolve(
        self,
        root: Optional[str] = None,
        query: Optional[str] = None,
        positional: Optional[str] = None,
        as_json: bool = False,
        defaults: Optional[Dict[str, Any]] = None
    ) -> SearchConfig:
        """
        Build the search configuration from the given options.

        Args:
            root: Root option, None when not given on the command line
            query: Query option
            positional: First positional argument, used when the query option is empty
            as_json: Whether JSON output was requested
            defaults: Default values from a defaults file

        Returns:
            The immutable SearchConfig

        Raises:
            ConfigurationError: If no query was provided or the root cannot be resolved
        """
        defaults = defaults or {}

        if root is None:
            root = defaults.get('root', '.')

        query = query or positional or ""
        if not query:
            raise ConfigurationError("No query provided")

        try:
            return SearchConfig(
                root=self.resolve_root(root),
                query=query,
                as_json=as_json or defaults.get('json', False)
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid search configuration: {e}") from e


def load_config(
    root: Optional[str] = None,
    query: Optional[str] = None,
    positional: Optional[str] = None,
    as_json: bool = False,
    config_path: Optional[Union[str, Path]] = None
) -> SearchConfig:
    """
    Convenience function to load defaults and resolve a search configuration.

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    parser = ConfigParser()
    result = parser.load_defaults(config_path)
    return parser.resolve(root=root, query=query, positional=positional,
                          as_json=as_json, defaults=result.defaults)
