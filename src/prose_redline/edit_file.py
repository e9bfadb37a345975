"""
Loading and saving edit collections as YAML or JSON files.

An edit file holds a mapping with an ``edits`` key (a bare list is also
accepted). Each entry describes one edit against a fixed original text:

    ```yaml
    edits:
      - id: e1
        start: 4
        end: 9
        replacement: slow
        note: "Pick a word that fits the tone"
        author: ms.rivera
    ```

Entries exported from the review database may use the stored column names
instead (``start_index``, ``end_index``, ``new_text``, ``comment``, ...).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from .errors import ValidationError
from .models.edit import Correction, Edit

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("yaml", "json")


def _infer_format(path: Path, format: str | None) -> str:
    if format is None:
        return "json" if path.suffix.lower() == ".json" else "yaml"
    if format not in SUPPORTED_FORMATS:
        raise ValidationError(f"Unsupported format: {format}")
    return format


def _read_entries(path: str | Path, format: str | None) -> tuple[Path, list[Any]]:
    """Read the raw edit entries from a file."""
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"Edit file not found: {path}")

    file_format = _infer_format(file_path, format)

    try:
        with open(file_path, encoding="utf-8") as f:
            if file_format == "yaml":
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"Failed to parse YAML file: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to parse JSON file: {e}") from e
    except UnicodeDecodeError as e:
        raise ValidationError(f"Edit file is not valid UTF-8: {e}") from e

    if data is None:
        return file_path, []
    if isinstance(data, list):
        return file_path, data
    if not isinstance(data, dict):
        raise ValidationError("Edit file must contain a dictionary/object or a list")
    if "edits" not in data:
        raise ValidationError("Edit file must contain an 'edits' key")

    entries = data["edits"] or []
    if not isinstance(entries, list):
        raise ValidationError("'edits' must be a list")
    return file_path, entries


def _build(entries: list[Any], factory: Any, path: Path) -> list[Any]:
    """Turn raw entries into model objects, collecting every problem."""
    built: list[Any] = []
    errors: list[str] = []
    seen_ids: set[str] = set()

    for index, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Edit {index}: expected a mapping, got {type(entry).__name__}")
            continue
        try:
            item = factory(entry)
        except (ValueError, TypeError) as e:
            errors.append(f"Edit {index}: {e}")
            continue
        if item.id in seen_ids:
            errors.append(f"Edit {index}: duplicate id '{item.id}'")
            continue
        seen_ids.add(item.id)
        built.append(item)

    if errors:
        raise ValidationError(f"Invalid edits in {path}", errors)

    logger.debug("Loaded %d edits from %s", len(built), path)
    return built


def load_edit_file(path: str | Path, format: str | None = None) -> list[Edit]:
    """Load edits from a YAML or JSON file.

    Args:
        path: Path to the edit file
        format: "yaml" or "json"; inferred from the suffix when omitted
            (``.json`` is JSON, anything else YAML)

    Returns:
        List of Edit objects in file order

    Raises:
        ValidationError: If the file cannot be parsed or an entry is invalid
        FileNotFoundError: If the file does not exist
    """
    file_path, entries = _read_entries(path, format)
    return _build(entries, Edit.from_dict, file_path)


def load_corrections(path: str | Path, text: str, format: str | None = None) -> list[Correction]:
    """Load corrections from a YAML or JSON file.

    Entries that carry an ``original_text`` keep it, so stale corrections can
    be detected; entries without one capture the snippet from ``text``.

    Args:
        path: Path to the edit file
        text: The original text the corrections refer to
        format: "yaml" or "json"; inferred from the suffix when omitted

    Returns:
        List of Correction objects in file order
    """

    def factory(entry: dict[str, Any]) -> Correction:
        if entry.get("original_text"):
            return Correction.from_dict(entry)
        return Correction.from_edit(Edit.from_dict(entry), text)

    file_path, entries = _read_entries(path, format)
    return _build(entries, factory, file_path)


def dump_edits(edits: Iterable[Edit], format: str = "yaml") -> str:
    """Serialize edits to the edit file format.

    Args:
        edits: Edits (or corrections) to serialize
        format: "yaml" or "json"

    Returns:
        The file content as a string
    """
    if format not in SUPPORTED_FORMATS:
        raise ValidationError(f"Unsupported format: {format}")

    data = {"edits": [edit.to_dict() for edit in edits]}
    if format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
