"""Contract that every model catalog implements.

Catalogs resolve a model name to a :class:`~vocalis.models.base.Model` and can
enumerate the entries they know about. Entries carry the descriptor class to
instantiate along with the capabilities assigned to the model.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, TypedDict

from vocalis.capabilities import Capability
from vocalis.models.base import Model

# "class" is a keyword, so the functional TypedDict form is required.
CatalogEntry = TypedDict(
    "CatalogEntry",
    {
        "class": type[Model],
        "capabilities": List[Capability],
    },
)


class ModelCatalog(ABC):
    """Abstract contract for resolving and listing models."""

    @abstractmethod
    def get_model(self, model_name: str) -> Model:
        """Return the descriptor for ``model_name``.

        Raises:
            InvalidArgumentError: If the model cannot be resolved.
        """

    @abstractmethod
    def get_models(self) -> Dict[str, CatalogEntry]:
        """Return every known model keyed by its identifier."""

    def close(self) -> None:
        """Release resources held by the catalog."""

    def __enter__(self) -> "ModelCatalog":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["CatalogEntry", "ModelCatalog"]
