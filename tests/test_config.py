import json

from uking_mod_manager.utils import Config


def test_defaults_without_file(tmp_path):
    config = Config(config_dir=tmp_path)
    assert config.get("api_url") == "http://127.0.0.1:6776"
    assert config.get("log_poll_interval_ms") == 100
    assert config.get("missing", "fallback") == "fallback"
    assert config.log_dir == tmp_path / "logs"


def test_file_values_override_defaults(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"api_url": "http://other:1", "extra": True}))
    config = Config(config_dir=tmp_path)
    assert config.get("api_url") == "http://other:1"
    assert config.get("extra") is True
    assert config.get("request_timeout") == 10


def test_broken_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "config.json").write_text("{not json")
    config = Config(config_dir=tmp_path)
    assert config.data == Config.DEFAULTS


def test_set_persists(tmp_path):
    config_dir = tmp_path / "nested"
    config = Config(config_dir=config_dir)
    config.set("log_level", "DEBUG")

    assert json.loads((config_dir / "config.json").read_text())["log_level"] == "DEBUG"
    assert Config(config_dir=config_dir).get("log_level") == "DEBUG"
