from pathlib import Path

from worldkeeper.core.errors import (
    PersistenceError,
    ResolutionError,
    ValidationError,
    WorldConfigError,
)
from worldkeeper.core.results import LoadResult, SaveResult, SnapshotResult
from worldkeeper.core.world import WorldConfiguration


def test_error_hierarchy():
    for error in (
        ValidationError("no name", field="name"),
        PersistenceError("unreadable", path=Path("a.json")),
        ResolutionError("no owner", world_name="a"),
    ):
        assert isinstance(error, WorldConfigError)
        assert str(error) == error.message
        assert error.context == {}


def test_error_types():
    assert ValidationError("x", field="name").error_type == "validation"
    assert PersistenceError("x").error_type == "persistence"
    assert ResolutionError("x").error_type == "resolution"


def test_load_result_states():
    path = Path("w.json")
    record = WorldConfiguration(name="w")

    assert LoadResult.loaded(path, record).ok
    assert not LoadResult.missing(path).ok
    failed = LoadResult.failed(path, PersistenceError("bad", path=path))
    assert not failed.ok
    assert failed.record is None


def test_save_and_snapshot_results():
    assert SaveResult(Path("w.json")).ok
    assert not SaveResult(Path("w.json"), PersistenceError("bad")).ok

    record = WorldConfiguration(name="w")
    assert SnapshotResult(record).complete
    assert not SnapshotResult(record, ResolutionError("x")).complete
