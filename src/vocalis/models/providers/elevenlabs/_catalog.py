"""Model catalog backed by the live ElevenLabs ``/models`` endpoint.

Every call fetches the provider listing again; nothing is cached. The
catalog adds no handling of its own for transport failures: ``httpx``
status and connection errors, and JSON decoding errors, reach the caller
unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

import httpx

from vocalis._internal.exceptions import ModelNotFoundError, UnsupportedModelError
from vocalis.capabilities import Capability
from vocalis.models.catalog import CatalogEntry, ModelCatalog

from ._model import ElevenLabs

logger = logging.getLogger(__name__)

DEFAULT_HOST_URL = "https://api.elevenlabs.io/v1"
PROVIDER_LABEL = "ElevenLabs"

_TEXT_TO_SPEECH = (Capability.TEXT_TO_SPEECH, Capability.INPUT_TEXT, Capability.OUTPUT_AUDIO)
_SPEECH_TO_TEXT = (Capability.SPEECH_TO_TEXT, Capability.INPUT_AUDIO, Capability.OUTPUT_TEXT)


def classify_capabilities(
    can_do_text_to_speech: bool, can_do_voice_conversion: bool
) -> List[Capability]:
    """Map the provider's capability flags to an ordered capability list.

    Text-to-speech wins when both flags are set. A model with neither flag
    gets an empty list.
    """
    if can_do_text_to_speech:
        return list(_TEXT_TO_SPEECH)
    if can_do_voice_conversion:
        return list(_SPEECH_TO_TEXT)
    return []


def capabilities_for(payload: Mapping[str, Any]) -> List[Capability]:
    """Classify one entry of the ``/models`` response.

    Only JSON ``true`` sets a flag; strings and numbers count as unset.
    """
    return classify_capabilities(
        payload["can_do_text_to_speech"] is True,
        payload["can_do_voice_conversion"] is True,
    )


class ElevenLabsApiCatalog(ModelCatalog):
    """Resolve ElevenLabs models and their capabilities from the live API.

    Args:
        http_client: Client used for the request. Timeouts, proxies and
            transport come from its configuration.
        api_key: Value sent in the ``xi-api-key`` header.
        host_url: API root; ``/models`` is appended to it.
        owns_client: Close ``http_client`` when the catalog is closed.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        api_key: str,
        host_url: str = DEFAULT_HOST_URL,
        *,
        owns_client: bool = False,
    ) -> None:
        self._http_client = http_client
        self._api_key = api_key
        self.host_url = host_url.rstrip("/")
        self._owns_client = owns_client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host_url={self.host_url!r})"

    def close(self) -> None:
        """Close the HTTP client when this catalog created it."""
        if self._owns_client:
            self._http_client.close()

    def get_model(self, model_name: str) -> ElevenLabs:
        """Return the descriptor for ``model_name``.

        Raises:
            ModelNotFoundError: The API does not list ``model_name``.
            UnsupportedModelError: The model is listed but exposes neither
                text-to-speech nor voice conversion.
        """
        models = self.list_models()

        if model_name not in models:
            raise ModelNotFoundError.for_model(model_name)

        capabilities = models[model_name]["capabilities"]
        if not capabilities:
            raise UnsupportedModelError.for_model(model_name, PROVIDER_LABEL)

        return ElevenLabs(model_name, capabilities)

    def get_models(self) -> Dict[str, CatalogEntry]:
        return self.list_models()

    def list_models(self) -> Dict[str, CatalogEntry]:
        """Fetch the provider listing and classify every model in it."""
        return {
            payload["model_id"]: {
                "class": ElevenLabs,
                "capabilities": capabilities_for(payload),
            }
            for payload in self.fetch_payloads()
        }

    def fetch_payloads(self) -> List[Dict[str, Any]]:
        """Return the raw ``/models`` response entries."""
        url = f"{self.host_url}/models"
        logger.debug("Fetching ElevenLabs models from %s", url)

        response = self._http_client.get(url, headers={"xi-api-key": self._api_key})
        response.raise_for_status()
        payloads = response.json()

        logger.debug("ElevenLabs returned %d models", len(payloads))
        return payloads


__all__ = [
    "DEFAULT_HOST_URL",
    "ElevenLabsApiCatalog",
    "PROVIDER_LABEL",
    "capabilities_for",
    "classify_capabilities",
]
