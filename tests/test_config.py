from pathlib import Path

import pytest

from spellcheck_segmenter.config import (
    SegmenterConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    cfg = load_config()
    assert cfg == SegmenterConfig()
    assert cfg.language == "en-US"
    assert cfg.skip_numeric is True


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"language": "de-DE", "dictionary_path": "/tmp/de.dic"})
    assert cfg.language == "de-DE"
    assert config_from_dict(None) == SegmenterConfig()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "language: fr-FR\nextra_mid_letters: '+'\nlog_level: DEBUG\n", encoding="utf-8"
    )
    cfg = config_from_yaml(path)
    assert cfg.language == "fr-FR"
    assert cfg.extra_mid_letters == "+"
    assert cfg.to_dict()["log_level"] == "DEBUG"


def test_config_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- en-US\n- fr-FR\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
