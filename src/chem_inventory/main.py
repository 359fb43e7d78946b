#!/usr/bin/env python3
"""Show the inventory configuration and optionally check it is filled in"""

import argparse
import json
import sys
from dataclasses import asdict

from .errors import ConfigurationError
from .logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chem-inventory-config",
        description="Show the chemical inventory configuration",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="fail if the form or spreadsheet ID is still a placeholder",
    )
    parser.add_argument("--json", action="store_true", help="print settings as JSON")
    return parser


def print_summary(config):
    """Print a human-readable summary of the settings"""
    enabled = [name for name, on in asdict(config.features).items() if on]

    print("\n" + "=" * 50)
    print("🧪 Chemical Inventory Configuration")
    print("=" * 50)
    print(f"Form ID: {config.form_id}")
    print(f"Spreadsheet ID: {config.spreadsheet_id}")
    print(f"Environment: {config.environment.value}")
    print(f"Features: {', '.join(enabled) if enabled else 'none'}")
    print(f"Notifications: {config.notification_recipient or 'disabled'}")
    print(f"Timezone: {config.system.default_timezone}")
    print(f"Date format: {config.system.date_format}")
    print(f"Decimal places: {config.system.decimal_places}")
    print("=" * 50 + "\n")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        # Import here so a bad environment override is reported, not a traceback
        from .settings import get_config, validate_config

        config = get_config()
        configure_logging(advanced_logging=config.features.advanced_logging)

        if args.json:
            print(json.dumps(config.to_dict(), indent=2))
        else:
            print_summary(config)

        if args.validate:
            validate_config(config)
            # Keep --json output parseable
            if not args.json:
                print("✓ Configuration is ready")
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
