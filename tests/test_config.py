import importlib

import pytest

import backend.config as config


@pytest.fixture()
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch):
    for key in ("PORT", "HOST", "CORS_ORIGINS", "STRICT_SCHEMA_INIT", "SQLITE_DB_PATH"):
        monkeypatch.delenv(key, raising=False)
    cfg = reload_config()
    assert cfg.PORT == 8080
    assert cfg.HOST == "0.0.0.0"
    assert cfg.CORS_ORIGINS == ["*"]
    assert cfg.STRICT_SCHEMA_INIT is False
    assert cfg.SQLITE_DB_PATH.endswith("mydb.sqlite")


def test_environment_overrides(reload_config, tmp_path):
    cfg = reload_config(
        PORT="9090",
        CORS_ORIGINS="http://a.test, http://b.test",
        STRICT_SCHEMA_INIT="TRUE",
        SQLITE_DB_PATH=str(tmp_path / "x.sqlite"),
        LOG_LEVEL="debug",
    )
    assert cfg.PORT == 9090
    assert cfg.CORS_ORIGINS == ["http://a.test", "http://b.test"]
    assert cfg.STRICT_SCHEMA_INIT is True
    assert cfg.SQLITE_DB_PATH == str(tmp_path / "x.sqlite")
    assert cfg.LOG_LEVEL == "DEBUG"
