"""Public API for loading scenes and writing reports.

This module provides the file-facing API of crimelink:
- Loading crime-scene records from JSONL files
- Writing records, comparisons or series to JSONL
- Looking up scenes by id
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Protocol

import jsonschema

from crimelink.models import RECORD_SCHEMA, CrimeSceneRecord, InvalidArgumentError

__all__ = [
    "load_records",
    "write_jsonl",
    "find_record",
    "RecordLoadError",
]


class _Serializable(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


class RecordLoadError(Exception):
    """Raised when a record file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialize load error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        line : int | None, optional
            1-based line number of the offending record.
        """
        super().__init__(message)
        self.file = file
        self.line = line


def load_records(path: str | Path) -> list[CrimeSceneRecord]:
    """Load crime-scene records from a JSONL file.

    Each non-blank line holds one record object validated against
    ``RECORD_SCHEMA``.

    Parameters
    ----------
    path : str | Path
        Path to JSONL file.

    Returns
    -------
    list[CrimeSceneRecord]
        Records in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    RecordLoadError
        If a line is not valid JSON or violates the record schema.

    Examples
    --------
        >>> from crimelink import load_records
        >>> scenes = load_records("scenes.jsonl")
        >>> print(len(scenes))
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    records: list[CrimeSceneRecord] = []
    with file_path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue

            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise RecordLoadError(
                    f"{file_path.name}:{line_no}: invalid JSON: {e.msg}",
                    file=str(file_path),
                    line=line_no,
                ) from e

            try:
                jsonschema.validate(instance=data, schema=RECORD_SCHEMA)
            except jsonschema.ValidationError as e:
                raise RecordLoadError(
                    f"{file_path.name}:{line_no}: {e.message}",
                    file=str(file_path),
                    line=line_no,
                ) from e

            records.append(CrimeSceneRecord.from_dict(data))

    return records


def write_jsonl(
    items: Iterable[_Serializable],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> int:
    """Write objects with a ``to_dict`` method to a JSONL file.

    Output is deterministic with consistent field ordering and UTF-8 encoding.

    Parameters
    ----------
    items : Iterable
        Records, comparison results or series groups.
    path : str | Path
        Output file path. Parent directories are created.
    sort_keys : bool, optional
        Whether to sort dictionary keys, by default True.

    Returns
    -------
    int
        Number of lines written.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for item in items:
            f.write(json.dumps(item.to_dict(), ensure_ascii=False, sort_keys=sort_keys) + "\n")
            count += 1
    return count


def find_record(records: Sequence[CrimeSceneRecord], scene_id: int) -> CrimeSceneRecord:
    """Return the first record with the given id.

    Raises
    ------
    InvalidArgumentError
        If no record has that id.
    """
    for record in records:
        if record.scene_id == scene_id:
            return record
    raise InvalidArgumentError(f"No scene with id {scene_id}")
