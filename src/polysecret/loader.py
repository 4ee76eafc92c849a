"""Reading share-set documents from JSON or YAML files."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from polysecret.models import ShareSet

_logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class LoaderError(RuntimeError):
    """Raised when a share document cannot be read or has the wrong shape."""


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoaderError(f"cannot read {path}: {exc}") from exc
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            # scalars stay strings; share values are decoded later in their own base
            return yaml.load(text, Loader=yaml.BaseLoader)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LoaderError(f"cannot parse {path}: {exc}") from exc


def _is_share_set(obj: Any) -> bool:
    return isinstance(obj, dict) and "keys" in obj


def load_share_sets(path: os.PathLike[str] | str) -> list[ShareSet]:
    """Load every share set stored in *path*.

    A document holds a single share set, a list of share sets, or a mapping
    of names to share sets. Unnamed sets are named after the file and their
    position.
    """

    path = Path(path)
    doc = _read_document(path)
    if _is_share_set(doc):
        entries = [(path.stem, doc)]
    elif isinstance(doc, list):
        entries = [(f"{path.stem}[{i}]", item) for i, item in enumerate(doc)]
    elif isinstance(doc, dict) and doc and all(_is_share_set(v) for v in doc.values()):
        entries = [(str(name), item) for name, item in doc.items()]
    else:
        raise LoaderError(f"{path} does not contain share sets")

    sets = [ShareSet.from_mapping(item, name=name) for name, item in entries]
    _logger.debug("loaded %d share set(s) from %s", len(sets), path)
    return sets


__all__ = ["LoaderError", "load_share_sets"]
