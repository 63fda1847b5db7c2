import json
import logging
import pytest
from unittest.mock import patch
from heroes_engine.core.config import EngineConfig, configure_logging

def test_defaults():
    config = EngineConfig()
    assert config.action_delay == 0.5
    assert config.clear_delay == 1.0
    assert config.ai_delay == 1.5
    assert config.max_squad_size == 4
    assert config.data_path is None

def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown config keys"):
        EngineConfig.from_dict({"fps": 60})

def test_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"title": "Test", "ai_delay": 0.0, "data_path": "content"}))

    config = EngineConfig.from_file(path)

    assert config.title == "Test"
    assert config.ai_delay == 0.0
    assert config.data_path.name == "content"

def test_to_dict_round_trip():
    config = EngineConfig(save_path="slots", log_level="DEBUG")
    again = EngineConfig.from_dict(config.to_dict())
    assert again.to_dict() == config.to_dict()

def test_configure_logging_sets_level():
    with patch("heroes_engine.core.config.logging.basicConfig") as basic:
        configure_logging(EngineConfig(log_level="debug"))
    assert basic.call_args.kwargs["level"] == logging.DEBUG

def test_configure_logging_rejects_bad_level():
    with pytest.raises(ValueError):
        configure_logging(EngineConfig(log_level="LOUD"))
