"""Capability tags attached to catalog models.

A capability names either the operation a model performs (text-to-speech,
speech-to-text) or a media type it accepts or produces. Values are stable
strings so they can be written to logs and CLI output.

Examples:
    >>> from vocalis.capabilities import Capability
    >>> Capability.TEXT_TO_SPEECH.value
    'text-to-speech'
"""

from __future__ import annotations

from enum import StrEnum


class Capability(StrEnum):
    """Closed set of capabilities a speech model can advertise."""

    TEXT_TO_SPEECH = "text-to-speech"
    SPEECH_TO_TEXT = "speech-to-text"
    INPUT_TEXT = "input-text"
    INPUT_AUDIO = "input-audio"
    OUTPUT_TEXT = "output-text"
    OUTPUT_AUDIO = "output-audio"


__all__ = ["Capability"]
