import pytest

from operette import ConfigError, OperetteConfig, load_config


def test_defaults():
    cfg = load_config()
    assert cfg == OperetteConfig()
    assert cfg.delay_ms == 1
    assert cfg.city == "New York, NY"
    assert cfg.log_level == "info"


def test_load_yaml(tmp_path):
    p = tmp_path / "operette.yml"
    p.write_text("delay_ms: 5\ncity: Philadelphia, PA\nlog_level: DEBUG\n")
    cfg = load_config(p)
    assert cfg.delay_ms == 5
    assert cfg.city == "Philadelphia, PA"
    assert cfg.log_level == "debug"


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "empty.yml"
    p.write_text("")
    assert load_config(p) == OperetteConfig()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yml")


def test_invalid_values(tmp_path):
    p = tmp_path / "bad.yml"
    p.write_text("delay_ms: -3\n")
    with pytest.raises(ConfigError, match="invalid config"):
        load_config(p)


def test_unknown_log_level(tmp_path):
    p = tmp_path / "bad.yml"
    p.write_text("log_level: chatty\n")
    with pytest.raises(ConfigError):
        load_config(p)


def test_non_mapping_root(tmp_path):
    p = tmp_path / "list.yml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(p)


def test_broken_yaml(tmp_path):
    p = tmp_path / "broken.yml"
    p.write_text("city: [unclosed\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_config(p)
