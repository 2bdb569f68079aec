"""Tests for the composition root."""

from pathlib import Path

import pytest

from gemdash.application.use_cases.assemble_dashboard import (
    AssembleDashboardUseCase,
)
from gemdash.infrastructure import container
from gemdash.infrastructure.record_store import (
    InMemoryRecordStore,
    JsonFileRecordStore,
    SqlAlchemyRecordStore,
)
from gemdash.infrastructure.settings import StoreSettings


def test_build_record_store_uses_json_backend(tmp_path: Path) -> None:
    """The JSON backend wraps the configured export file."""
    settings = StoreSettings(backend="json", json_file=tmp_path / "s.json")

    store = container.build_record_store(settings=settings)

    assert isinstance(store, JsonFileRecordStore)


def test_build_record_store_requires_json_file() -> None:
    """A JSON backend without a file is a configuration error."""
    with pytest.raises(RuntimeError):
        container.build_record_store(settings=StoreSettings(backend="json"))


def test_build_record_store_defaults_to_sqlalchemy() -> None:
    """The SQLAlchemy backend reuses the provided database port."""
    db_port = object()

    store = container.build_record_store(
        db_port=db_port,
        settings=StoreSettings(table="kv"),
    )

    assert isinstance(store, SqlAlchemyRecordStore)
    assert store._db_port is db_port


def test_build_dashboard_assembler_with_store() -> None:
    """The assembler can be wired to an explicit store."""
    assembler = container.build_dashboard_assembler(InMemoryRecordStore())

    assert isinstance(assembler, AssembleDashboardUseCase)
    assert assembler.execute("payable_dashboard").metrics["hasData"] is False
