"""Tests for the vocalis CLI."""

import logging

import pytest

from vocalis.cli.main import main
from vocalis.core.credentials import CredentialManager
from vocalis.models import providers
from vocalis.models.providers.elevenlabs import ElevenLabsApiCatalog


@pytest.fixture(autouse=True)
def restore_vocalis_logger():
    logger = logging.getLogger("vocalis")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def patched_catalog(monkeypatch, fake_api, payload):
    """Route catalog creation through a fake ElevenLabs API."""
    api = fake_api(
        [
            payload("eleven_v3", tts=True),
            payload("eleven_sts", conversion=True),
            payload("legacy"),
        ]
    )

    def factory(**kwargs):
        return ElevenLabsApiCatalog(api.client(), "xi-test", owns_client=True)

    monkeypatch.setitem(providers.CATALOGS, "elevenlabs", factory)
    return api


def test_no_command_shows_help(capsys):
    assert main([]) == 2
    assert "usage: vocalis" in capsys.readouterr().out


def test_version(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.startswith("Vocalis ")


def test_models_lists_capabilities(patched_catalog, capsys):
    assert main(["models"]) == 0

    output = capsys.readouterr().out
    assert "Available elevenlabs models:" in output
    assert "eleven_v3" in output
    assert "text-to-speech, input-text, output-audio" in output
    assert "speech-to-text, input-audio, output-text" in output
    assert "unsupported" in output
    assert patched_catalog.request_count == 1


def test_models_verbose_shows_class(patched_catalog, capsys):
    assert main(["models", "--verbose"]) == 0

    output = capsys.readouterr().out
    assert "Class: ElevenLabs" in output


def test_models_lists_providers(capsys):
    assert main(["models", "--providers"]) == 0
    assert "- elevenlabs" in capsys.readouterr().out


def test_info_shows_model(patched_catalog, capsys):
    assert main(["info", "eleven_sts"]) == 0

    output = capsys.readouterr().out
    assert "Model: eleven_sts" in output
    assert "Capabilities: speech-to-text, input-audio, output-text" in output


@pytest.mark.parametrize(
    ("model_id", "message"),
    [
        ("missing", 'The model "missing" cannot be retrieved from the API.'),
        ("legacy", 'The model "legacy" is not supported, please check the ElevenLabs API.'),
    ],
)
def test_info_reports_invalid_models(patched_catalog, capsys, model_id, message):
    assert main(["info", model_id]) == 1
    assert message in capsys.readouterr().err


def test_models_without_credentials_fails(capsys):
    assert main(["models"]) == 1
    assert "ElevenLabs credential not configured" in capsys.readouterr().err


def test_configure_set_show_and_delete_key(isolated_config, capsys):
    assert main(["configure", "set-key", "xi-1234567890"]) == 0
    assert CredentialManager(isolated_config).get_api_key("elevenlabs") == "xi-1234567890"

    assert main(["configure", "show"]) == 0
    output = capsys.readouterr().out
    assert "elevenlabs: xi-1...7890" in output
    assert "xi-1234567890" not in output

    assert main(["configure", "delete-key"]) == 0
    assert main(["configure", "show"]) == 0
    assert "elevenlabs: Not configured" in capsys.readouterr().out


def test_configure_rejects_bad_key(capsys):
    assert main(["configure", "set-key", "abc"]) == 1
    assert "too short" in capsys.readouterr().err
