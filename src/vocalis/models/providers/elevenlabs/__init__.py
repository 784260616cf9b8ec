from ._catalog import DEFAULT_HOST_URL, ElevenLabsApiCatalog, classify_capabilities
from ._client import create_catalog, resolve_elevenlabs_api_key
from ._model import ElevenLabs

__all__ = [
    "DEFAULT_HOST_URL",
    "ElevenLabs",
    "ElevenLabsApiCatalog",
    "classify_capabilities",
    "create_catalog",
    "resolve_elevenlabs_api_key",
]
