import json

import pytest

from tds_codegen.core.config import (
    ConfigError,
    ConfigManager,
    DEFAULT_PLURAL_FIELD_TYPES,
    ResolverConfig,
)


def test_defaults():
    config = ConfigManager().get_config()
    assert config.template_suffix == ".sitecore.templates"
    assert config.global_prefix == "global::"
    assert config.plural_field_types == DEFAULT_PLURAL_FIELD_TYPES
    assert config.include_base_fields is False


def test_defaults_are_not_shared():
    manager = ConfigManager()
    first = manager.get_config()
    first.plural_field_types.append("droplink")
    assert "droplink" not in manager.get_config().plural_field_types


def test_file_then_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"include_base_fields": True, "interface_prefix": "X", "output_dir": "Models"}),
        encoding="utf-8",
    )

    config = ConfigManager().get_config({"interface_prefix": "I"}, path)

    assert config.include_base_fields is True
    assert config.interface_prefix == "I"
    assert config.custom == {"output_dir": "Models"}


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.json", "{oops"),
        ("config.json", "[1, 2]"),
        ("config.yaml", "{}"),
    ],
)
def test_bad_config_files(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager().get_config(config_file=path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager().get_config(config_file=tmp_path / "nope.json")


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    config = ResolverConfig(global_prefix="", custom={"output_dir": "Models"})
    path = tmp_path / "saved.json"

    manager.save_config(config, path)
    reloaded = manager.get_config(config_file=path)

    assert reloaded == config


@pytest.mark.parametrize(
    "override",
    [
        {"plural_field_types": "multilist"},
        {"plural_field_types": ["multilist", 3]},
        {"template_suffix": None},
        {"global_prefix": 1},
        {"include_base_fields": "yes"},
        {"custom": []},
    ],
)
def test_wrongly_typed_values_rejected(override):
    with pytest.raises(ConfigError):
        ConfigManager().get_config(override)


def test_resolver_config_rejects_string_plural_types():
    with pytest.raises(ConfigError):
        ResolverConfig(plural_field_types="multilist")


def test_validate_config():
    manager = ConfigManager()
    assert manager.validate_config(ResolverConfig()) == []

    warnings = manager.validate_config(
        ResolverConfig(
            template_suffix="sitecore.templates",
            plural_field_types=["Multilist"],
            interface_prefix="1-",
        )
    )
    assert len(warnings) == 3
