"""
Vocalis: Model Catalog Bridges for Speech Providers
===================================================

Vocalis translates the model listings of remote speech/voice AI providers into
capability-tagged catalog entries that a model-orchestration layer can use to
select and validate models at runtime.

Examples:
    import httpx

    from vocalis.models.providers.elevenlabs import ElevenLabsApiCatalog

    with httpx.Client() as client:
        catalog = ElevenLabsApiCatalog(client, "xi-...")
        model = catalog.get_model("eleven_multilingual_v2")
        print(model.name, model.capabilities)
"""

from __future__ import annotations

from vocalis.capabilities import Capability
from vocalis.models.base import Model
from vocalis.models.catalog import CatalogEntry, ModelCatalog

__version__ = "0.1.0"

__all__ = [
    "Capability",
    "CatalogEntry",
    "Model",
    "ModelCatalog",
    "__version__",
]
