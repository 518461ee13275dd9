"""Test configuration and fixtures for siteconfig tests."""

import pytest
import tempfile
import shutil
import json
import logging
from pathlib import Path
import yaml

@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)

@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers added by setup_logging so each test starts clean."""
    yield
    logger = logging.getLogger('SiteConfig')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)

@pytest.fixture
def expected_values():
    """The literal record, keyed the way the site generator reads it."""
    return {
        'siteTitle': 'Iqbal Khan',
        'siteTitleShort': 'Iqbal Khan blog',
        'siteTitleAlt': 'Iqbal Khan Gatsby blog',
        'siteLogo': '/logos/logo-1024.png',
        'siteUrl': 'https://iqbalyarkhan.github.io',
        'pathPrefix': '',
        'siteDescription': 'My personal blog',
        'siteRss': '/rss.xml',
        'siteFBAppID': '1825356251115265',
        'googleAnalyticsID': 'UA-143381023-1',
        'dateFromFormat': 'YYYY-MM-DD',
        'dateFormat': 'MM/DD/YYYY',
        'userName': 'Iqbal Khan',
        'userEmail': 'iqbalyarkhan@icloud.com',
        'userTwitter': 'iqbalyarkhan',
        'userGitHub': 'iqbalyarkhan',
        'userLocation': 'Dallas, TX',
        'userAvatar': 'https://i.ibb.co/WPz9CNk/avatar.jpg',
        'userDescription': 'SWE with a passion for swimming, running and competitive programming',
        'copyright': 'Copyright © 2021. All rights reserved.',
        'themeColor': '#c62828',
        'backgroundColor': 'red',
    }

@pytest.fixture
def yaml_config_dir(temp_dir):
    """Directory holding a siteconfig.yml with a few overrides."""
    config_file = Path(temp_dir) / 'siteconfig.yml'
    config_file.write_text(yaml.safe_dump({
        'siteTitle': 'Staging Blog',
        'theme_color': '#1565c0',
        'siteFBAppID': 42,
    }), encoding='utf-8')
    return temp_dir

@pytest.fixture
def json_config_dir(temp_dir):
    """Directory holding a siteconfig.json with a few overrides."""
    config_file = Path(temp_dir) / 'siteconfig.json'
    config_file.write_text(json.dumps({
        'userLocation': 'Austin, TX',
        'pathPrefix': '/blog',
    }), encoding='utf-8')
    return temp_dir
