"""Model descriptors, catalog contracts and provider bridges."""

from .base import Model  # noqa: F401
from .catalog import CatalogEntry, ModelCatalog  # noqa: F401

__all__ = ["CatalogEntry", "Model", "ModelCatalog"]
