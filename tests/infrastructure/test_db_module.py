"""Tests for the infrastructure.db module."""

import pytest

from gemdash.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("GEMDASH_STORE_URL", "sqlite:///store.db")

    assert db_module._get_env_var("GEMDASH_STORE_URL") == "sqlite:///store.db"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("GEMDASH_STORE_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("GEMDASH_STORE_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://store")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://store"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_store_engine_caches_engine(monkeypatch):
    """get_store_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_store_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("GEMDASH_STORE_URL", "postgresql://store")

    engine_one = db_module.get_store_engine()
    engine_two = db_module.get_store_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://store"
    assert created == ["postgresql://store"]


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(db_module, "get_store_engine", lambda: "store_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_store_engine() == "store_engine"
