"""
Site configuration for Iqbal Khan's blog.

Holds the static metadata (titles, URLs, author profile, date formats, theme
colors) that the static-site generator reads when rendering the blog. The
record is immutable and built once per process.
"""

__version__ = "1.0.0"
__author__ = "Iqbal Khan"
__email__ = "iqbalyarkhan@icloud.com"

from .core import SiteConfig, SITE_CONFIG, get_config, setup_logging
from .settings import SiteSettings

__all__ = ['SiteConfig', 'SITE_CONFIG', 'get_config', 'setup_logging', 'SiteSettings']
