from pathlib import Path

import pytest

from pw_entropy.config import (
    EntropyConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    cfg = load_config()
    assert cfg == EntropyConfig()
    assert cfg.zeroize is False
    assert cfg.ignore_sequence_case is False


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"zeroize": True, "unknown": 1})
    assert cfg.zeroize is True
    assert config_from_dict(None) == EntropyConfig()


def test_config_from_yaml_reads_nested_section(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "pw_entropy:\n  zeroize: true\n  ignore_sequence_case: true\n",
        encoding="utf-8",
    )
    cfg = config_from_yaml(path)
    assert cfg.zeroize is True
    assert cfg.ignore_sequence_case is True


def test_config_from_yaml_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == EntropyConfig()


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- zeroize\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)


def test_to_dict_round_trips():
    cfg = EntropyConfig(zeroize=True)
    assert config_from_dict(cfg.to_dict()) == cfg
