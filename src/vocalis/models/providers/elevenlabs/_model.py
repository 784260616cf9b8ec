from __future__ import annotations

from vocalis.models.base import Model


class ElevenLabs(Model):
    """Descriptor for models served by the ElevenLabs API."""
