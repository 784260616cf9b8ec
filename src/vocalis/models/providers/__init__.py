"""Lookup of provider catalog factories.

Each built-in provider maps to a factory that builds a configured
:class:`~vocalis.models.catalog.ModelCatalog`. Factories are referenced by
module path and imported on first use, so ``import vocalis`` does not pull in
every bridge.

Examples:
    >>> from vocalis.models.providers import create_catalog
    >>> catalog = create_catalog("elevenlabs")  # doctest: +SKIP
"""

from __future__ import annotations

import importlib
from typing import Any, Callable, TypeAlias

from vocalis.models.catalog import ModelCatalog

CatalogFactory: TypeAlias = Callable[..., ModelCatalog]
CatalogRef: TypeAlias = str | CatalogFactory

CATALOGS: dict[str, CatalogRef] = {
    "elevenlabs": "vocalis.models.providers.elevenlabs:create_catalog",
}


def _load_factory(name: str, entry: CatalogRef) -> CatalogFactory:
    if isinstance(entry, str):
        if ":" not in entry:
            raise ValueError(f"Invalid catalog entry for '{name}': '{entry}'")
        module_path, attr = entry.split(":", 1)
        module = importlib.import_module(module_path)
        factory = getattr(module, attr)
    else:
        factory = entry

    if not callable(factory):
        raise TypeError(f"Catalog '{name}' must resolve to a callable (got {factory!r})")

    CATALOGS[name] = factory
    return factory


def get_catalog_factory(name: str) -> CatalogFactory:
    """Return the catalog factory registered under ``name``.

    Raises:
        ValueError: If no catalog is registered under ``name``.
    """
    entry = CATALOGS.get(name)
    if entry is None:
        available = ", ".join(list_providers()) or "<none>"
        raise ValueError(f"Unknown provider: '{name}'. Available providers: {available}")
    return _load_factory(name, entry)


def create_catalog(name: str, **kwargs: Any) -> ModelCatalog:
    """Build the catalog for provider ``name`` from the active configuration."""
    return get_catalog_factory(name)(**kwargs)


def list_providers() -> list[str]:
    """Return the names of providers with a catalog bridge."""
    return sorted(CATALOGS)


__all__ = [
    "CATALOGS",
    "create_catalog",
    "get_catalog_factory",
    "list_providers",
]
