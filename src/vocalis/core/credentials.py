"""Credential storage utilities for Vocalis.

Credentials and provider settings are stored in ~/.vocalis/config.yaml under
the providers section:

    providers:
      elevenlabs:
        api_key: "xi-..."
        base_url: "https://api.elevenlabs.io/v1"

Set ``VOCALIS_CONFIG_DIR`` to use another directory.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_DIR_ENV = "VOCALIS_CONFIG_DIR"


class CredentialError(RuntimeError):
    """Base class for credential related failures."""


class CredentialNotFoundError(CredentialError):
    """Raised when a credential cannot be located."""


def default_config_dir() -> Path:
    """Return the configuration directory, honouring ``VOCALIS_CONFIG_DIR``."""
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".vocalis"


def _is_placeholder(value: str) -> bool:
    return value.startswith("${") and value.endswith("}")


@dataclass(slots=True)
class CredentialManager:
    """Store and retrieve API keys from ``config.yaml``.

    Credentials are stored under providers.<provider>.api_key; other
    provider settings (``base_url``...) live next to them.
    """

    config_dir: Path = field(default_factory=default_config_dir)
    config_file: Path = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.config_dir, Path):
            self.config_dir = Path(self.config_dir)
        self.config_file = self.config_dir / "config.yaml"

    def get_api_key(self, provider: str) -> str:
        """Return the stored API key for *provider* or raise if missing."""
        provider_cfg = self._provider_config(provider)
        if provider_cfg is None:
            raise CredentialNotFoundError(f"No credentials stored for provider '{provider}'")

        api_key = provider_cfg.get("api_key")
        if not isinstance(api_key, str) or not api_key.strip():
            raise CredentialNotFoundError(f"Credential for '{provider}' is empty or invalid")

        cleaned = api_key.strip()
        if _is_placeholder(cleaned):
            raise CredentialNotFoundError(
                f"Credential for '{provider}' contains unresolved placeholder: {cleaned}"
            )

        return cleaned

    def get_setting(self, provider: str, name: str) -> Optional[Any]:
        """Return providers.<provider>.<name>, or ``None`` when unset."""
        provider_cfg = self._provider_config(provider)
        if provider_cfg is None:
            return None
        value = provider_cfg.get(name)
        if isinstance(value, str):
            value = value.strip()
            if not value or _is_placeholder(value):
                return None
        return value

    def save_api_key(self, provider: str, api_key: str) -> None:
        """Persist *api_key* under providers.<provider>.api_key in config.yaml."""
        if not isinstance(provider, str) or not provider.strip():
            raise ValueError("Provider name must be a non-empty string")
        if not isinstance(api_key, str) or not api_key.strip():
            raise ValueError("API key must be a non-empty string")

        cleaned_provider = provider.strip()
        cleaned_key = api_key.strip()

        if len(cleaned_key) < 5:
            raise ValueError("API key appears to be too short")
        if cleaned_key.startswith('"') and cleaned_key.endswith('"'):
            raise ValueError("API key should not be quoted")
        if " " in cleaned_key:
            raise ValueError("API key should not contain spaces")

        config = self._load_config()
        providers = config.setdefault("providers", {})
        if not isinstance(providers, dict):
            providers = {}
            config["providers"] = providers

        provider_cfg = providers.setdefault(cleaned_provider, {})
        if not isinstance(provider_cfg, dict):
            provider_cfg = {}
            providers[cleaned_provider] = provider_cfg

        provider_cfg["api_key"] = cleaned_key
        self._write_config(config)

    def delete(self, provider: str) -> None:
        """Remove stored credentials for *provider*."""
        config = self._load_config()
        providers = config.get("providers", {})
        if isinstance(providers, dict) and provider in providers:
            provider_cfg = providers[provider]
            if isinstance(provider_cfg, dict) and "api_key" in provider_cfg:
                del provider_cfg["api_key"]
                # Remove empty provider config
                if not provider_cfg:
                    del providers[provider]
                self._write_config(config)

    def list_providers(self) -> list[str]:
        """Return the providers that currently have stored credentials."""
        config = self._load_config()
        providers = config.get("providers", {})
        if not isinstance(providers, dict):
            return []

        result = []
        for name, cfg in providers.items():
            if isinstance(cfg, dict):
                api_key = cfg.get("api_key")
                if isinstance(api_key, str) and api_key.strip():
                    if not _is_placeholder(api_key.strip()):
                        result.append(name)
        return sorted(result)

    # Internal helpers -------------------------------------------------
    def _provider_config(self, provider: str) -> Optional[Dict[str, Any]]:
        providers = self._load_config().get("providers", {})
        if not isinstance(providers, dict):
            return None
        provider_cfg = providers.get(provider)
        if not isinstance(provider_cfg, dict):
            return None
        return provider_cfg

    def _load_config(self) -> Dict[str, Any]:
        """Load the config.yaml file, returning empty dict if missing."""
        if not self.config_file.exists():
            return {}

        try:
            with self.config_file.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise CredentialError(
                f"Config file {self.config_file} contains invalid YAML"
            ) from exc
        except OSError as exc:
            raise CredentialError(f"Unable to read {self.config_file}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise CredentialError(
                f"Config file {self.config_file} must contain a mapping"
            )
        return data

    def _write_config(self, config: Dict[str, Any]) -> None:
        """Atomically write config to config.yaml with secure permissions."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.config_dir), prefix="config-", suffix=".yaml.tmp"
        )
        os.close(fd)
        tmp_path = Path(tmp_name)

        try:
            with tmp_path.open("w", encoding="utf-8") as fh:
                yaml.dump(config, fh, default_flow_style=False, sort_keys=False)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.config_file)
        finally:
            tmp_path.unlink(missing_ok=True)


def get_api_key(provider: str) -> str:
    """Convenience wrapper around a default CredentialManager."""
    return CredentialManager().get_api_key(provider)


def get_setting(provider: str, name: str) -> Optional[Any]:
    return CredentialManager().get_setting(provider, name)


def save_api_key(provider: str, api_key: str) -> None:
    CredentialManager().save_api_key(provider, api_key)


def delete_api_key(provider: str) -> None:
    CredentialManager().delete(provider)


def list_providers() -> list[str]:
    return CredentialManager().list_providers()


__all__ = [
    "CONFIG_DIR_ENV",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialManager",
    "default_config_dir",
    "delete_api_key",
    "get_api_key",
    "get_setting",
    "list_providers",
    "save_api_key",
]
