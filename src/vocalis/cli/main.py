"""Vocalis CLI entrypoint."""

import argparse
import sys
from typing import Optional, Sequence

from vocalis.cli.commands.configure import cmd_configure
from vocalis.cli.commands.models import cmd_info, cmd_models
from vocalis.utils.logging import configure_logging

DEFAULT_PROVIDER = "elevenlabs"


def cmd_version(args: argparse.Namespace) -> int:
    import vocalis

    print(f"Vocalis {vocalis.__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vocalis", description="Vocalis - speech provider model catalogs"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # Models command
    models_parser = subparsers.add_parser("models", help="List models offered by a provider")
    models_parser.add_argument("--provider", default=DEFAULT_PROVIDER, help="Provider to query")
    models_parser.add_argument("--providers", action="store_true", help="List providers instead")
    models_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show detailed information"
    )
    models_parser.set_defaults(func=cmd_models)

    # Info command
    info_parser = subparsers.add_parser("info", help="Show model details")
    info_parser.add_argument("model_id", help="Model identifier")
    info_parser.add_argument("--provider", default=DEFAULT_PROVIDER, help="Provider to query")
    info_parser.set_defaults(func=cmd_info)

    # Configure command
    config_parser = subparsers.add_parser("configure", help="Manage provider credentials")
    config_parser.add_argument("--provider", default=DEFAULT_PROVIDER, help="Provider to configure")
    config_subparsers = config_parser.add_subparsers(dest="action", help="Action to perform")

    set_key_parser = config_subparsers.add_parser("set-key", help="Store an API key")
    set_key_parser.add_argument("api_key", help="API key to store")
    config_subparsers.add_parser("delete-key", help="Remove the stored API key")
    config_subparsers.add_parser("show", help="Show configured credential (masked)")

    config_parser.set_defaults(func=cmd_configure)

    # Set default to help
    parser.set_defaults(func=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code for the shell
            - 0: Success
            - 1: General error
            - 2: Incorrect usage (shows help)
            - 130: Interrupted by user (Ctrl+C)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Show help if no command specified
    if args.func is None:
        parser.print_help()
        return 2

    configure_logging(verbose=args.debug)

    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        print("\nOperation cancelled.")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
