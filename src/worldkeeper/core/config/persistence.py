"""World configuration file persistence."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError as SchemaError

from worldkeeper.core.config.schema import WorldConfigDocument
from worldkeeper.core.errors import PersistenceError
from worldkeeper.core.results import LoadResult, SaveResult
from worldkeeper.core.utils.logger import log_debug, log_error, log_file_operation
from worldkeeper.core.world.configuration import WorldConfiguration

CONFIG_SUFFIX = ".json"
DEFAULT_INDENT = 2
DEFAULT_ENCODING = "utf-8"


def _persistence_error(message: str, path: Path, cause: Exception) -> PersistenceError:
    error = PersistenceError(message, path=path)
    error.__cause__ = cause
    return error


class WorldConfigCodec:
    """
    Reads and writes one world configuration per JSON file.

    The codec holds only formatting options. ``load`` and ``save`` never raise
    for I/O or decoding problems; they return a result carrying the error.
    """

    def __init__(self, indent: Optional[int] = DEFAULT_INDENT, encoding: str = DEFAULT_ENCODING):
        self.indent = indent
        self.encoding = encoding

    def encode(self, record: WorldConfiguration) -> str:
        """
        Serialize a record to JSON text.

        Raises:
            PersistenceError: If the record cannot be represented on disk
        """
        try:
            document = WorldConfigDocument.model_validate(record.to_dict())
        except SchemaError as e:
            raise PersistenceError(
                f"World '{record.name}' cannot be serialized: {e.error_count()} error(s)",
                context={"errors": e.errors(include_url=False)},
            ) from e
        return json.dumps(document.to_storage(), indent=self.indent, ensure_ascii=False)

    def decode(self, text: str) -> WorldConfiguration:
        """
        Parse JSON text into a record.

        Raises:
            PersistenceError: If the text is not a valid configuration document
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Invalid JSON at line {e.lineno}: {e.msg}") from e
        return WorldConfiguration.from_dict(payload)

    def load(self, path: Path | str) -> LoadResult:
        """Load the configuration stored at ``path``."""
        target = Path(path)
        try:
            if not target.is_file():
                return LoadResult.missing(target)
        except (OSError, ValueError) as e:
            return LoadResult.failed(
                target, _persistence_error(f"Could not stat {target}: {e}", target, e)
            )
        try:
            with target.open("r", encoding=self.encoding) as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            return LoadResult.failed(
                target, _persistence_error(f"Could not read {target}: {e}", target, e)
            )
        try:
            record = self.decode(text)
        except PersistenceError as e:
            e.path = target
            return LoadResult.failed(target, e)
        return LoadResult.loaded(target, record)

    def save(self, record: WorldConfiguration, path: Path | str) -> SaveResult:
        """
        Write ``record`` to ``path``, replacing any previous content.

        A missing file is created; a missing parent directory is not. A
        symlinked path is written through to the file it points at, and a
        file that is not writable is left untouched.
        """
        target = Path(path)
        try:
            if not target.exists():
                target.touch(exist_ok=True)
        except (OSError, ValueError) as e:
            return SaveResult(
                target,
                _persistence_error(f"Could not create {target}: {e}", target, e),
            )
        if not os.access(target, os.W_OK):
            return SaveResult(
                target, PersistenceError(f"{target} is not writable", path=target)
            )
        try:
            self._write(target.resolve(), self.encode(record))
        except PersistenceError as e:
            e.path = target
            return SaveResult(target, e)
        except Exception as e:
            return SaveResult(
                target, _persistence_error(f"Could not write {target}: {e}", target, e)
            )
        return SaveResult(target)

    def _write(self, target: Path, text: str) -> None:
        # Write next to the target and swap it in, so readers never see a partial file
        tmp_path: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                delete=False,
                dir=str(target.parent),
                prefix=f".{target.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_path, stat.S_IMODE(target.stat().st_mode))
            os.replace(tmp_path, target)
        except Exception:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise


def get_world_config_path(config_dir: Path | str, world_name: str) -> Path:
    """Return the file holding the configuration of ``world_name``."""
    return Path(config_dir) / f"{world_name}{CONFIG_SUFFIX}"


def load_world_config(
    path: Path | str, codec: Optional[WorldConfigCodec] = None
) -> Optional[WorldConfiguration]:
    """
    Load a configuration, logging failures.

    Returns None both when no file exists and when the file is unreadable or
    corrupt; callers treat either case as "not configured".
    """
    result = (codec or WorldConfigCodec()).load(path)
    if result.status == "failed":
        log_error(
            "persistence",
            f"Could not load world configuration: {result.error}",
            context=str(result.path),
            exception=result.error,
        )
    elif result.status == "missing":
        log_debug("persistence", "No world configuration found", context=str(result.path))
    else:
        log_file_operation("load", str(result.path), True)
    return result.record


def save_world_config(
    record: WorldConfiguration, path: Path | str, codec: Optional[WorldConfigCodec] = None
) -> bool:
    """Save a configuration, logging failures. Returns True on success."""
    result = (codec or WorldConfigCodec()).save(record, path)
    if result.ok:
        log_file_operation("save", str(result.path), True)
    else:
        log_error(
            "persistence",
            f"Could not save world configuration '{record.name}': {result.error}",
            context=str(result.path),
            exception=result.error,
        )
    return result.ok


def load_world_configs(
    config_dir: Path | str, codec: Optional[WorldConfigCodec] = None
) -> Dict[str, WorldConfiguration]:
    """
    Load every configuration file in ``config_dir``, keyed by world name.

    Files that fail to load are logged and skipped. A missing directory
    yields an empty mapping.
    """
    directory = Path(config_dir)
    codec = codec or WorldConfigCodec()
    records: Dict[str, WorldConfiguration] = {}
    try:
        if not directory.is_dir():
            return records
        paths = sorted(directory.glob(f"*{CONFIG_SUFFIX}"))
    except OSError as e:
        log_error(
            "persistence",
            f"Could not list world configurations: {e}",
            context=str(directory),
            exception=e,
        )
        return records
    for path in paths:
        record = load_world_config(path, codec)
        if record is not None:
            records[record.name] = record
    return records
