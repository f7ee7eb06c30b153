from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from schemey.config import get_load_roots
from schemey.errors import GenericError

log = logging.getLogger(__name__)


def resolve_path(path: str) -> Path:
    """Map a `load` path to a file, searching the load roots for relative paths."""
    p = Path(path)
    if p.is_absolute():
        return p
    for root in get_load_roots():
        candidate = root / p
        if candidate.is_file():
            log.debug("resolved %s to %s", path, candidate)
            return candidate
    return p


def read_source(path: str, encoding: Optional[str] = 'utf-8') -> str:
    """Return the full text of the file at `path`."""
    resolved = resolve_path(path)
    log.debug("reading %s", resolved)
    try:
        return resolved.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as ex:
        raise GenericError(f"Could not read file {path}: {ex}") from ex
