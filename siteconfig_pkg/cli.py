#!/usr/bin/env python3
"""
Command-line interface for the site configuration record.
"""

import sys
import argparse
from typing import Dict, List, Optional

from . import __version__
from .core import SiteConfig, setup_logging
from .settings import SiteSettings


def parse_overrides(pairs: List[str]) -> Dict[str, str]:
    """Turn repeated KEY=VALUE arguments into a mapping."""
    overrides = {}
    for pair in pairs:
        if '=' not in pair:
            raise ValueError(f"Override must look like KEY=VALUE, got: {pair}")
        key, value = pair.split('=', 1)
        overrides[key.strip()] = value
    return overrides


def render(config: SiteConfig, output_format: str) -> str:
    if output_format == 'yaml':
        return config.to_yaml().rstrip('\n')
    return config.to_json()


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description='Site configuration for the blog generator')
    parser.add_argument('--config-dir', type=str,
                        help='Directory searched for siteconfig.yml, siteconfig.yaml or siteconfig.json')
    parser.add_argument('--config', type=str,
                        help='Explicit configuration file to load')
    parser.add_argument('--format', type=str, choices=['json', 'yaml'], default='json',
                        help='Output format for the full record')
    parser.add_argument('--get', type=str, metavar='KEY',
                        help='Print a single field (e.g. siteTitle or site_title)')
    parser.add_argument('--fields', action='store_true',
                        help='List the field keys of the record')
    parser.add_argument('--set', type=str, action='append', default=[], metavar='KEY=VALUE',
                        help='Override a field for this invocation (repeatable)')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file')
    parser.add_argument('--log-file', type=str, help='Also write debug logs to this file')
    parser.add_argument('--verbose', action='store_true', help='Show debug output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, verbose=args.verbose)

    try:
        settings_loader = SiteSettings(config_dir=args.config_dir)

        if args.init:
            config_path = settings_loader.create_sample_config(args.init)
            print(f"Created sample configuration file: {config_path}")
            return

        if args.fields:
            print('\n'.join(SiteConfig.field_names()))
            return

        if args.config:
            settings_loader.config = settings_loader.load_file(args.config)
        else:
            settings_loader.load_settings()

        config = settings_loader.merge_with_args(parse_overrides(args.set))

        if args.get:
            print(config.get(args.get))
        else:
            print(render(config, args.format))

    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
