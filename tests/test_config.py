# tests/test_config.py

from __future__ import annotations

import pytest

from namefully import Config, ConfigRegistry, NameOrder, Separator, Surname, Title, load_settings
from namefully.config import Settings, coerce_enum


def test_defaults():
    config = Config()
    assert config.name == "default"
    assert config.ordered_by is NameOrder.FIRST_NAME
    assert config.separator is Separator.SPACE
    assert config.title is Title.UK
    assert config.surname is Surname.FATHER
    assert config.bypass is True
    assert config.ending is False


def test_flipped_toggles_the_order_only():
    config = Config(title=Title.US)
    flipped = config.flipped()
    assert flipped.ordered_by is NameOrder.LAST_NAME
    assert flipped.flipped().ordered_by is NameOrder.FIRST_NAME
    assert flipped.title is Title.US
    assert config.ordered_by is NameOrder.FIRST_NAME


def test_merge_prefers_other_then_overrides():
    base = Config()
    other = Config(name="other", ending=True)

    assert base.merge() is base
    assert base.merge(other) is other
    assert base.merge(ordered_by=None) is base

    merged = base.merge(other, title=Title.US)
    assert merged.name == "other"
    assert merged.ending is True
    assert merged.title is Title.US


def test_copy_with_appends_copy_suffix():
    config = Config(name="csv", separator=Separator.COMMA)
    copied = config.copy_with()
    assert copied.name == "csv_copy"
    assert copied.separator is Separator.COMMA
    assert config.copy_with(name="mine", bypass=False).bypass is False


def test_to_dict_uses_enum_values():
    data = Config(ordered_by=NameOrder.LAST_NAME).to_dict()
    assert data["ordered_by"] == "lastName"
    assert data["bypass"] is True
    assert "parser" not in data


def test_coerce_enum_accepts_members_values_and_names():
    assert coerce_enum(NameOrder, NameOrder.LAST_NAME) is NameOrder.LAST_NAME
    assert coerce_enum(NameOrder, "lastName") is NameOrder.LAST_NAME
    assert coerce_enum(NameOrder, "last_name") is NameOrder.LAST_NAME
    with pytest.raises(ValueError):
        coerce_enum(NameOrder, "sideways")


def test_from_mapping():
    config = Config.from_mapping("csv", {"separator": "comma", "ending": 1})
    assert config.name == "csv"
    assert config.separator is Separator.COMMA
    assert config.ending is True

    with pytest.raises(ValueError):
        Config.from_mapping("bad", {"colour": "blue"})


def test_registry_get_creates_defaults():
    registry = ConfigRegistry()
    config = registry.get("fresh")
    assert config == Config(name="fresh")
    assert "fresh" in registry
    assert registry.get("fresh") is config


def test_registry_copy_names_are_unique():
    registry = ConfigRegistry()
    default = registry.get()

    first = registry.copy(default)
    second = registry.copy(default)
    assert first.name == "default_copy"
    assert second.name == "default_copy_copy"
    assert registry.names() == ["default", "default_copy", "default_copy_copy"]


def test_registry_inline_and_reset():
    registry = ConfigRegistry()
    registry.inline("us", title=Title.US, ending=True)
    assert registry.get("us").title is Title.US

    registry.reset("us")
    assert registry.get("us").title is Title.UK


def test_registry_from_settings():
    settings = Settings({"configs": {"lasts": {"ordered_by": "lastName"}, "plain": None}})
    registry = ConfigRegistry.from_settings(settings)
    assert len(registry) == 2
    assert registry.get("lasts").ordered_by is NameOrder.LAST_NAME
    assert registry.get("plain") == Config(name="plain")


def test_project_settings_define_named_configs():
    registry = ConfigRegistry.from_settings(load_settings())
    assert registry.get("by_last_name").ordered_by is NameOrder.LAST_NAME
    assert registry.get("strict").bypass is False
    assert registry.get("csv").separator is Separator.COMMA


def test_load_settings_from_yaml(settings_file):
    path = settings_file(
        "debug: true\n"
        "logging:\n"
        "  level: DEBUG\n"
        "configs:\n"
        "  us:\n"
        "    title: us\n"
    )
    settings = load_settings(path)
    assert settings.debug is True
    assert settings.logging["level"] == "DEBUG"
    assert settings.configs == {"us": {"title": "us"}}
    assert ConfigRegistry.from_settings(settings).get("us").title is Title.US


def test_load_settings_empty_file(settings_file):
    settings = load_settings(settings_file(""))
    assert settings.configs == {}
    assert settings.debug is False


def test_load_settings_missing_explicit_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yml")
