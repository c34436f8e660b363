import pytest

from maglev import DEFAULT_TABLE_SIZE, InvalidTableSize, KeyedHasher, MaglevConfig, MaglevMetrics, MaglevTable
from maglev.hashing.keyed_hash import OFFSET_KEY, SKIP_KEY

ENV_VARS = [
    "MAGLEV_TABLE_SIZE",
    "MAGLEV_BACKENDS",
    "MAGLEV_HASH_KEY_OFFSET",
    "MAGLEV_HASH_KEY_SKIP",
    "MAGLEV_LOG_LEVEL",
    "LOG_LEVEL",
    "MAGLEV_ENABLE_METRICS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = MaglevConfig.from_env()
    assert config.table_size == DEFAULT_TABLE_SIZE
    assert config.backends == []
    assert config.offset_key == OFFSET_KEY
    assert config.skip_key == SKIP_KEY
    assert config.log_level == "info"
    assert config.enable_metrics is False
    config.validate()


def test_from_env(monkeypatch):
    monkeypatch.setenv("MAGLEV_TABLE_SIZE", "13")
    monkeypatch.setenv("MAGLEV_BACKENDS", "backend-1, backend-0,,")
    monkeypatch.setenv("MAGLEV_HASH_KEY_OFFSET", "0x10")
    monkeypatch.setenv("MAGLEV_HASH_KEY_SKIP", "32")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MAGLEV_ENABLE_METRICS", "true")

    config = MaglevConfig.from_env()
    assert config.table_size == 13
    assert config.backends == ["backend-1", "backend-0"]
    assert config.offset_key == 16
    assert config.skip_key == 32
    assert config.log_level == "debug"
    assert config.enable_metrics is True


def test_log_level_prefers_maglev_variable(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("MAGLEV_LOG_LEVEL", "error")
    assert MaglevConfig.from_env().log_level == "error"


@pytest.mark.parametrize("overrides", [
    {"table_size": 0},
    {"offset_key": 1, "skip_key": 1},
    {"log_level": "verbose"},
])
def test_validate_rejects(overrides):
    with pytest.raises(ValueError):
        MaglevConfig(**overrides).validate()


def test_table_from_config():
    config = MaglevConfig(table_size=13, backends=["b", "a"], enable_metrics=True)
    table = MaglevTable.from_config(config)

    assert table.backends == ("a", "b")
    assert table.table_size == 13
    assert isinstance(table.metrics, MaglevMetrics)
    assert table.hasher.offset_key == OFFSET_KEY


def test_table_from_config_uses_configured_keys():
    config = MaglevConfig(table_size=13, backends=["a"], offset_key=1, skip_key=2)
    table = MaglevTable.from_config(config)
    assert table.hasher.offset_key == 1
    assert table.hasher.skip_key == 2
    assert table.metrics is None


def test_table_from_config_overrides():
    hasher = KeyedHasher(3, 4)
    table = MaglevTable.from_config(MaglevConfig(table_size=13), hasher=hasher)
    assert table.hasher is hasher


def test_table_from_config_rejects_composite_size():
    with pytest.raises(InvalidTableSize):
        MaglevTable.from_config(MaglevConfig(table_size=12, backends=["a"]))


def test_to_dict():
    config = MaglevConfig(table_size=13, backends=["a"])
    assert config.to_dict()["table_size"] == 13
    assert config.to_dict()["backends"] == ["a"]
