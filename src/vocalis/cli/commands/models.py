"""`vocalis models` and `vocalis info` subcommands."""

import argparse
import sys

from vocalis._internal.exceptions import InvalidArgumentError
from vocalis.models import providers


def _format_capabilities(capabilities) -> str:
    if not capabilities:
        return "unsupported"
    return ", ".join(str(capability) for capability in capabilities)


def cmd_models(args: argparse.Namespace) -> int:
    if args.providers:
        print("Available providers:")
        for name in providers.list_providers():
            print(f"  - {name}")
        return 0

    provider = args.provider
    with providers.create_catalog(provider) as catalog:
        models = catalog.get_models()

    print(f"Available {provider} models:")
    for model_id, entry in models.items():
        capabilities = entry["capabilities"]
        if args.verbose:
            print(f"  {model_id}")
            print(f"    Class: {entry['class'].__name__}")
            print(f"    Capabilities: {_format_capabilities(capabilities)}")
        else:
            print(f"  {model_id:<30} {_format_capabilities(capabilities)}")

    return 0


def cmd_info(args: argparse.Namespace) -> int:
    model_id = args.model_id
    with providers.create_catalog(args.provider) as catalog:
        try:
            model = catalog.get_model(model_id)
        except InvalidArgumentError as exc:
            print(str(exc), file=sys.stderr)
            return 1

    print(f"Model: {model.name}")
    print(f"Provider: {args.provider}")
    print(f"Capabilities: {_format_capabilities(model.capabilities)}")
    return 0
