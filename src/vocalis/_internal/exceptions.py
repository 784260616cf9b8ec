"""Exception hierarchy shared across Vocalis.

Catalog adapters only raise the argument errors defined here. Transport
failures (``httpx`` errors, JSON decoding errors) are left to propagate with
their original types.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class VocalisError(Exception):
    """Base class for all custom exceptions in Vocalis.

    Attributes:
        message: Human readable description of the failure.
        context: Structured details about the failure (model id, provider...).
    """

    def __init__(self, message: str, *, context: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})


class InvalidArgumentError(VocalisError, ValueError):
    """Raised when a caller supplies an argument the catalog cannot honour."""


class ModelNotFoundError(InvalidArgumentError):
    """Raised when a requested model is absent from the provider listing."""

    @classmethod
    def for_model(cls, model_id: str) -> "ModelNotFoundError":
        return cls(
            f'The model "{model_id}" cannot be retrieved from the API.',
            context={"model_id": model_id},
        )


class UnsupportedModelError(InvalidArgumentError):
    """Raised when a model exists upstream but exposes no known capability."""

    @classmethod
    def for_model(cls, model_id: str, provider: str) -> "UnsupportedModelError":
        return cls(
            f'The model "{model_id}" is not supported, please check the {provider} API.',
            context={"model_id": model_id, "provider": provider},
        )


class ConfigurationError(VocalisError):
    """Raised when there's a configuration error."""


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "ModelNotFoundError",
    "UnsupportedModelError",
    "VocalisError",
]
