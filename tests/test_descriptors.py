import pytest

from DynParamUtils.exceptions import UnknownParameterTypeError
from DynParamUtils.i18n import get_message
from DynParamUtils.parameters import (
    DescriptorRegistry,
    ParameterDescriptor,
    SelectStrategy,
    default_registry,
)
from DynParamUtils.scripts import Script


def test_defaults_are_registered_in_order():
    assert default_registry().names() == ["string", "choice", "boolean"]


def test_unknown_type_raises():
    with pytest.raises(UnknownParameterTypeError, match="nope"):
        default_registry().get("nope")


def test_unknown_type_is_a_key_error():
    with pytest.raises(KeyError):
        DescriptorRegistry().get("choice")


def test_display_names_are_localized():
    descriptor = default_registry().get("choice")
    assert descriptor.display_name("en") == "Dynamic Choice Parameter (Script)"
    assert descriptor.display_name("de_DE") == "Dynamischer Auswahl-Parameter (Skript)"
    assert descriptor.display_name("fr") == "Dynamic Choice Parameter (Script)"


def test_locale_from_environment(monkeypatch):
    monkeypatch.setenv("DYNPARAM_LOCALE", "de")
    assert default_registry().get("boolean").display_name() == "Dynamischer Boolescher Parameter (Skript)"


def test_unknown_message_key_is_returned():
    assert get_message("Missing.Key", "en") == "Missing.Key"


def test_scripts_are_delegated_to_registry(script_registry):
    script_registry.add(Script(id="a.py", name="A", source="1"))
    script_registry.add(Script(id="b.py", name="B", source="2"))
    scripts = default_registry().get("choice").scripts(script_registry)
    assert {s.id for s in scripts} == {"a.py", "b.py"}


def test_explicit_registration(provider):
    registry = DescriptorRegistry()
    registry.register(ParameterDescriptor("select", SelectStrategy, "ChoiceParameterDefinition.DisplayName"))
    definition = registry.create(
        "select",
        name="X",
        description="",
        uuid=None,
        script_id="x.py",
        parameters=[],
        remote=False,
        provider=provider,
    )
    assert isinstance(definition.strategy, SelectStrategy)
    assert definition.type_name == "choice"


def test_each_definition_gets_its_own_strategy(make_definition):
    first = make_definition("choice", name="A")
    second = make_definition("choice", name="B")
    assert first.strategy is not second.strategy
