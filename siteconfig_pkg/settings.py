#!/usr/bin/env python3
"""
Settings loader for the site configuration record.
Supports overrides from siteconfig.yml, siteconfig.yaml, or siteconfig.json files.
"""

import os
import json
import logging
import yaml
from typing import Dict, Any, Optional

from .core import SiteConfig, get_config


class SiteSettings:
    """Load site configuration overrides from disk."""

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['siteconfig.yml', 'siteconfig.yaml', 'siteconfig.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.config = get_config()
        self.config_file_path = None
        self.logger = logging.getLogger('SiteConfig.settings')

    def load_settings(self) -> SiteConfig:
        """
        Load settings from configuration file if it exists.

        Returns:
            The literal record overlaid with the file's values, or the literal
            record when no file is found or the file cannot be loaded
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            try:
                self.config = self.load_file(config_file)
                self.logger.info(f"Loaded configuration from: {os.path.relpath(config_file)}")
            except (ValueError, OSError) as e:
                self.logger.warning(f"Failed to load config file {config_file}: {e}")

        return self.config

    def load_file(self, config_path: str) -> SiteConfig:
        """
        Load a record from one configuration file.

        Args:
            config_path: Path to the configuration file

        Returns:
            The literal record overlaid with the file's values
        """
        loaded_settings = self._load_config_file(config_path)
        if not isinstance(loaded_settings, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping, got {type(loaded_settings).__name__}")
        return SiteConfig.from_dict(loaded_settings, base=get_config())

    def _find_config_file(self) -> Optional[str]:
        """
        Find the first available configuration file.

        Returns:
            Path to config file or None if not found
        """
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Any:
        """
        Parse a configuration file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Parsed document (empty dict for an empty file)
        """
        file_ext = os.path.splitext(config_path)[1].lower()
        if file_ext not in ['.yml', '.yaml', '.json']:
            raise ValueError(f"Unsupported config file format: {file_ext}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading configuration file: {config_path}")
        except UnicodeDecodeError as e:
            raise ValueError(f"Configuration file {config_path} is not valid UTF-8: {e}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except OSError as e:
            raise IOError(f"Error reading configuration file {config_path}: {e}")

        return {} if data is None else data

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file holding the current values.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        if file_format not in ['yml', 'yaml', 'json']:
            raise ValueError(f"Unsupported config file format: {file_format}")

        values = get_config().to_dict()
        filename = f'siteconfig.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        sections = [
            ('Site information', ['siteTitle', 'siteTitleShort', 'siteTitleAlt', 'siteLogo',
                                  'siteUrl', 'pathPrefix', 'siteDescription', 'siteRss']),
            ('Integrations', ['siteFBAppID', 'googleAnalyticsID']),
            ('Dates', ['dateFromFormat', 'dateFormat']),
            ('Author', ['userName', 'userEmail', 'userTwitter', 'userGitHub',
                        'userLocation', 'userAvatar', 'userDescription']),
            ('Footer and theme', ['copyright', 'themeColor', 'backgroundColor']),
        ]

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format in ['yml', 'yaml']:
                    f.write("# Site Configuration File\n")
                    f.write("# Values here override the built-in site metadata\n")
                    for title, keys in sections:
                        f.write(f"\n# {title}\n")
                        f.write(yaml.safe_dump({key: values[key] for key in keys},
                                               sort_keys=False, allow_unicode=True,
                                               default_flow_style=False, width=1000))
                else:
                    json.dump(values, f, indent=2, ensure_ascii=False)
                    f.write("\n")
        except PermissionError:
            raise PermissionError(f"Permission denied creating configuration file: {config_path}")
        except OSError as e:
            raise IOError(f"Error writing configuration file {config_path}: {e}")

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> SiteConfig:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Mapping of field keys to override values

        Returns:
            Merged configuration record
        """
        overrides = {key: value for key, value in args_dict.items() if value is not None}
        return SiteConfig.from_dict(overrides, base=self.config)
