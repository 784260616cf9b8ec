"""`vocalis configure` command."""

import argparse
import sys

from vocalis.core.credentials import CredentialManager, CredentialNotFoundError


def _mask(api_key: str) -> str:
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}...{api_key[-4:]}"


def cmd_configure(args: argparse.Namespace) -> int:
    manager = CredentialManager()
    provider = args.provider

    if args.action == "set-key":
        try:
            manager.save_api_key(provider, args.api_key)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Saved {provider} credential to {manager.config_file}")
        return 0

    if args.action == "delete-key":
        manager.delete(provider)
        print(f"Removed {provider} credential")
        return 0

    if args.action == "show":
        print(f"Config file: {manager.config_file}")
        try:
            api_key = manager.get_api_key(provider)
        except CredentialNotFoundError:
            print(f"{provider}: Not configured")
        else:
            print(f"{provider}: {_mask(api_key)}")
        base_url = manager.get_setting(provider, "base_url")
        if base_url:
            print(f"Base URL: {base_url}")
        return 0

    print("Error: choose one of set-key, delete-key, show", file=sys.stderr)
    return 2
