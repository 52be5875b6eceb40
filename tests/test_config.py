# tests/test_config.py

from __future__ import annotations

import pytest

from gedcomx_converter.config import CONFIG_PATH, GXConfig, get_config, load_config
from gedcomx_converter.core.exceptions import ConfigError, ConversionError
from gedcomx_converter.model.conclusion import ScriptTag
from gedcomx_converter.names.settings import NameSettings


def test_project_config_loads() -> None:
    cfg = load_config(CONFIG_PATH)
    assert cfg.id_mode == "pointer"
    assert cfg.names["scripts"]["phonetic"] == "ja-Hrkt"
    assert get_config() is get_config()


def test_missing_config_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_non_mapping_root_raises(tmp_path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)
    assert issubclass(ConfigError, ConversionError)


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    cfg = load_config(path)
    assert cfg.debug is False
    assert cfg.id_mode == "pointer"


def test_name_settings_from_config() -> None:
    cfg = GXConfig({
        "names": {
            "scripts": {"primary": "zh", "romanized": "zh-Latn"},
            "honorifics": {"female": {"token": "夫人", "romanized": "Furen"}},
        }
    })
    settings = NameSettings.from_config(cfg)

    assert settings.lang_for(ScriptTag.PRIMARY) == "zh"
    assert settings.lang_for(ScriptTag.PHONETIC) == "ja-Hrkt"
    assert settings.lang_for(ScriptTag.ROMANIZED) == "zh-Latn"
    assert settings.honorific_for(ScriptTag.ROMANIZED) == "Furen"
    assert settings.honorific_for(ScriptTag.PHONETIC) == "フジン"


def test_default_name_settings() -> None:
    settings = NameSettings()
    assert settings.female_honorific == "夫人"
    assert settings.honorific_for(ScriptTag.PRIMARY) == "夫人"
