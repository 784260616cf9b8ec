"""Model descriptors handed out by catalogs.

A descriptor is a plain record: the provider model identifier, the ordered
capabilities the catalog assigned to it and optional invocation options.
Provider bridges subclass :class:`Model` so the class itself marks which
provider a descriptor belongs to.

Examples:
    >>> from vocalis.capabilities import Capability
    >>> from vocalis.models.base import Model
    >>> model = Model("demo", [Capability.TEXT_TO_SPEECH])
    >>> model.supports(Capability.TEXT_TO_SPEECH)
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from vocalis.capabilities import Capability


@dataclass
class Model:
    """A model identifier paired with its capabilities.

    Attributes:
        name: Provider-specific model identifier.
        capabilities: Capabilities in the order the catalog assigned them.
        options: Default invocation options for the model.
    """

    name: str
    capabilities: List[Capability] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    def supports(self, capability: Capability) -> bool:
        """Return True when ``capability`` was assigned to this model."""
        return capability in self.capabilities


__all__ = ["Model"]
