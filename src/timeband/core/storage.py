"""Timeline files and single-entry codecs.

- Timeline files are YAML sequences of entries (see `Entry` for the shape).
- Single entries are written as JSON (compact or indented) or YAML.

JSON is a subset of YAML, so `loads_entry` reads either format back.

Usage
-----
>>> entries = load_entries(Path("history.yml"))
>>> print(dump_entry(entries[0], yaml_output=True))
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from timeband.core.contracts.entry import Entry
from timeband.core.errors import MalformedSourceError, SourceUnavailableError
from timeband.core.settings import get_logger

logger = get_logger(__name__)

_ENTRY_LIST = TypeAdapter(list[Entry])


def load_entries(path: Path) -> list[Entry]:
    """Load and validate every entry in the YAML timeline at ``path``.

    Raises
    ------
    SourceUnavailableError
        If the file cannot be opened or read.
    MalformedSourceError
        If the content is not YAML, not a sequence, or an item is not an entry.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise MalformedSourceError(path, f"not UTF-8 text: {e}") from e
    except yaml.YAMLError as e:
        raise MalformedSourceError(path, f"invalid YAML: {e}") from e

    if data is None:
        data = []
    if not isinstance(data, list):
        raise MalformedSourceError(
            path, f"expected a sequence of entries, got {type(data).__name__}"
        )

    try:
        entries = _ENTRY_LIST.validate_python(data)
    except ValidationError as e:
        raise MalformedSourceError(path, str(e)) from e

    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries


def entry_payload(entry: Entry) -> dict[str, Any]:
    """Return the wire-shaped mapping for ``entry`` (label, tag, date)."""
    return entry.model_dump(mode="json")


def dump_entry(entry: Entry, *, yaml_output: bool = False, pretty: bool = False) -> str:
    """Serialize one entry as JSON (default) or YAML.

    ``pretty`` indents JSON by two spaces; YAML output is always block style.
    """
    payload = entry_payload(entry)
    if yaml_output:
        return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False)
    if pretty:
        return json.dumps(payload, ensure_ascii=False, indent=2)
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def loads_entry(text: str) -> Entry:
    """Parse one serialized entry (JSON or YAML)."""
    return Entry.model_validate(yaml.safe_load(text))


__all__ = ["dump_entry", "entry_payload", "load_entries", "loads_entry"]
