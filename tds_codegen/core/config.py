"""
Configuration management for name resolution.

Handles loading and merging configuration from JSON files,
providing defaults and validation for resolver settings.
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from .errors import CodegenError
from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(CodegenError):
    """Exception raised for configuration-related errors."""
    pass


DEFAULT_PLURAL_FIELD_TYPES = [
    "treelist",
    "treelistex",
    "treelist descriptive",
    "checklist",
    "multilist",
]


@dataclass
class ResolverConfig:
    """Settings for the name resolver."""

    # Accepted for compatibility, namespaces come from the items themselves
    default_namespace: str = ""

    # Namespace handling
    template_suffix: str = ".sitecore.templates"
    global_prefix: str = "global::"

    # Field handling
    plural_field_types: List[str] = field(
        default_factory=lambda: list(DEFAULT_PLURAL_FIELD_TYPES)
    )
    include_base_fields: bool = False

    # Naming
    interface_prefix: str = "I"

    # Custom settings (template-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("default_namespace", "template_suffix", "global_prefix", "interface_prefix"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string: {getattr(self, name)!r}")
        if not isinstance(self.include_base_fields, bool):
            raise ConfigError(
                f"include_base_fields must be true or false: {self.include_base_fields!r}"
            )
        if not isinstance(self.custom, dict):
            raise ConfigError(f"custom must be an object: {self.custom!r}")
        if not isinstance(self.plural_field_types, list) or not all(
            isinstance(t, str) for t in self.plural_field_types
        ):
            raise ConfigError(
                f"plural_field_types must be a list of strings: {self.plural_field_types!r}"
            )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(ResolverConfig())

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> ResolverConfig:
        """
        Get complete resolver configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = copy.deepcopy(self._defaults)

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> ResolverConfig:
        """Convert dictionary to ResolverConfig instance."""
        known_fields = {f.name for f in fields(ResolverConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom') or {})
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return ResolverConfig(**config_args)

    def save_config(self, config: ResolverConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: ResolverConfig) -> List[str]:
        """
        Validate a configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.template_suffix and not config.template_suffix.startswith("."):
            warnings.append(
                f"template_suffix should start with '.': {config.template_suffix}"
            )

        for type_name in config.plural_field_types:
            if type_name != type_name.lower():
                warnings.append(
                    f"plural_field_types entries should be lower-case: {type_name!r}"
                )

        if config.interface_prefix and not config.interface_prefix.isidentifier():
            warnings.append(f"Invalid interface_prefix: {config.interface_prefix}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> ResolverConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)

