#!/usr/bin/env python3
"""
Site configuration record for the blog.

Defines the immutable SiteConfig record, the process-wide instance returned by
get_config(), and the logging setup shared by the loader and CLI.
"""

import os
import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

# Attribute name -> key the site generator reads.
FIELD_KEYS = {
    'site_title': 'siteTitle',
    'site_title_short': 'siteTitleShort',
    'site_title_alt': 'siteTitleAlt',
    'site_logo': 'siteLogo',
    'site_url': 'siteUrl',
    'path_prefix': 'pathPrefix',
    'site_description': 'siteDescription',
    'site_rss': 'siteRss',
    'site_fb_app_id': 'siteFBAppID',
    'google_analytics_id': 'googleAnalyticsID',
    'date_from_format': 'dateFromFormat',
    'date_format': 'dateFormat',
    'user_name': 'userName',
    'user_email': 'userEmail',
    'user_twitter': 'userTwitter',
    'user_github': 'userGitHub',
    'user_location': 'userLocation',
    'user_avatar': 'userAvatar',
    'user_description': 'userDescription',
    'copyright': 'copyright',
    'theme_color': 'themeColor',
    'background_color': 'backgroundColor',
}

KEY_ATTRIBUTES = {key: attr for attr, key in FIELD_KEYS.items()}


@dataclass(frozen=True)
class SiteConfig:
    """Static metadata for the blog, read by the site generator."""

    site_title: str = "Iqbal Khan"
    # Homescreen (PWA) title, keep it short to avoid truncation.
    site_title_short: str = "Iqbal Khan blog"
    site_title_alt: str = "Iqbal Khan Gatsby blog"
    site_logo: str = "/logos/logo-1024.png"
    # Domain only, without path_prefix.
    site_url: str = "https://iqbalyarkhan.github.io"
    path_prefix: str = ""
    site_description: str = "My personal blog"
    site_rss: str = "/rss.xml"
    site_fb_app_id: str = "1825356251115265"
    google_analytics_id: str = "UA-143381023-1"
    # Date format used in front matter, then the one used for display.
    date_from_format: str = "YYYY-MM-DD"
    date_format: str = "MM/DD/YYYY"
    user_name: str = "Iqbal Khan"
    user_email: str = "iqbalyarkhan@icloud.com"
    user_twitter: str = "iqbalyarkhan"
    user_github: str = "iqbalyarkhan"
    user_location: str = "Dallas, TX"
    user_avatar: str = "https://i.ibb.co/WPz9CNk/avatar.jpg"
    user_description: str = "SWE with a passion for swimming, running and competitive programming"
    copyright: str = "Copyright © 2021. All rights reserved."
    theme_color: str = "#c62828"
    background_color: str = "red"

    @staticmethod
    def field_names() -> Tuple[str, ...]:
        """Return the external key names in schema order."""
        return tuple(FIELD_KEYS[f.name] for f in fields(SiteConfig))

    def get(self, key: str) -> str:
        """
        Read a single field.

        Args:
            key: External key (``siteTitle``) or attribute name (``site_title``)

        Returns:
            The field value

        Raises:
            KeyError: If the key is not part of the schema
        """
        attr = KEY_ATTRIBUTES.get(key, key)
        if attr not in FIELD_KEYS:
            raise KeyError(f"Unknown site config key: {key}")
        return getattr(self, attr)

    def to_dict(self) -> Dict[str, str]:
        """Return the complete record keyed by external key names."""
        return {FIELD_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True, default_flow_style=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: Optional['SiteConfig'] = None) -> 'SiteConfig':
        """
        Build a record from a mapping of overrides.

        Keys may be external key names or attribute names. Unknown keys are
        logged and skipped, None values keep the value from ``base``, other
        scalars are converted with ``str()``.

        Args:
            data: Mapping of overrides
            base: Record supplying values for keys not in ``data``. Defaults
                to the literal record.

        Returns:
            A new SiteConfig

        Raises:
            ValueError: If a value is a list or mapping
        """
        base = base or SITE_CONFIG
        values = {attr: getattr(base, attr) for attr in FIELD_KEYS}

        for key, value in data.items():
            attr = KEY_ATTRIBUTES.get(key, key)
            if attr not in FIELD_KEYS:
                logger.warning(f"Ignoring unknown site config key: {key}")
                continue
            if value is None:
                continue
            if isinstance(value, (list, tuple, dict, set)):
                raise ValueError(f"Site config key '{key}' must be a single value, got {type(value).__name__}")
            values[attr] = value if isinstance(value, str) else str(value)
            logger.debug(f"Overriding {FIELD_KEYS[attr]}")

        return cls(**values)


logger = logging.getLogger('SiteConfig')

# The process-wide record, built once at import.
SITE_CONFIG = SiteConfig()


def get_config() -> SiteConfig:
    """Return the site configuration record."""
    return SITE_CONFIG


def setup_logging(log_file: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Set up logging configuration.

    Safe to call more than once: later calls adjust the console level and
    attach a file handler for a log file not yet attached.
    """
    console_level = logging.DEBUG if verbose else logging.INFO

    console_handlers = [h for h in logger.handlers
                        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)]
    if console_handlers:
        for console_handler in console_handlers:
            console_handler.setLevel(console_level)
    else:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_formatter = logging.Formatter('%(message)s')
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = os.path.abspath(log_file)
        attached = [h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)]
        if log_path not in attached:
            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

    # File handlers get DEBUG records even when the console does not.
    has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    logger.setLevel(logging.DEBUG if verbose or has_file else logging.INFO)

    return logger
