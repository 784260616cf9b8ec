import pytest

from vocalis import Capability, Model, ModelCatalog
from vocalis.models import providers
from vocalis.models.providers.elevenlabs import ElevenLabs, ElevenLabsApiCatalog


def test_capability_values_are_stable_strings():
    assert [capability.value for capability in Capability] == [
        "text-to-speech",
        "speech-to-text",
        "input-text",
        "input-audio",
        "output-text",
        "output-audio",
    ]
    assert Capability("input-audio") is Capability.INPUT_AUDIO


def test_model_defaults():
    model = Model("demo")

    assert model.capabilities == []
    assert model.options == {}
    assert not model.supports(Capability.TEXT_TO_SPEECH)


def test_elevenlabs_marks_provider_models():
    model = ElevenLabs("eleven_v3", [Capability.TEXT_TO_SPEECH])

    assert isinstance(model, Model)
    assert model.supports(Capability.TEXT_TO_SPEECH)
    assert model == ElevenLabs("eleven_v3", [Capability.TEXT_TO_SPEECH])


def test_model_catalog_is_abstract():
    with pytest.raises(TypeError):
        ModelCatalog()


def test_catalog_factory_lookup():
    assert providers.list_providers() == ["elevenlabs"]
    factory = providers.get_catalog_factory("elevenlabs")

    catalog = factory(api_key="xi-explicit")
    try:
        assert isinstance(catalog, ElevenLabsApiCatalog)
    finally:
        catalog.close()


def test_unknown_catalog_provider():
    with pytest.raises(ValueError, match="Unknown provider: 'nope'"):
        providers.create_catalog("nope")
