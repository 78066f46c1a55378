"""Editor configuration loaded from config/editor.json."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Optional

from doceditor.storage import STORAGE_KINDS

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "editor.json")


@dataclass
class EditorConfig:
    storage: str = "file"
    # None lets the storage backend pick its own default file name
    output_path: Optional[str] = None
    encoding: Optional[str] = None


def _parse(raw: dict) -> EditorConfig:
    cfg = EditorConfig()

    storage = raw.get("storage", cfg.storage)
    if not isinstance(storage, str):
        raise TypeError("'storage' must be a string.")
    storage = storage.strip().lower()
    if storage not in STORAGE_KINDS:
        raise ValueError(f"Unknown storage backend in config: {storage!r}. Expected one of: {', '.join(STORAGE_KINDS)}")
    cfg.storage = storage

    output_path = raw.get("output_path")
    if output_path is not None:
        if not isinstance(output_path, str) or not output_path.strip():
            raise TypeError("'output_path' must be a non-empty string.")
        cfg.output_path = output_path

    encoding = raw.get("encoding")
    if encoding is not None and not isinstance(encoding, str):
        raise TypeError("'encoding' must be a string or null.")
    cfg.encoding = encoding or None
    return cfg


def load_config(path: str = CONFIG_PATH) -> EditorConfig:
    """Load editor settings, falling back to defaults on a missing or unreadable file.

    Doxygen:
    - @param path: Path to the JSON configuration file.
    - @return: Parsed `EditorConfig`.
    - @throws ValueError: If the file names an unknown storage backend.
    """
    if not os.path.exists(path):
        print(f"Warning: editor config not found at {path}; using defaults")
        return EditorConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f) or {}
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"Warning: Could not parse editor config {path}: {exc}; using defaults")
        return EditorConfig()
    except OSError as exc:
        print(f"Warning: Could not read editor config {path}: {exc}; using defaults")
        return EditorConfig()

    if not isinstance(raw, dict):
        print(f"Warning: editor config {path} must contain a JSON object; using defaults")
        return EditorConfig()

    try:
        return _parse(raw)
    except TypeError as exc:
        print(f"Warning: Invalid editor config {path}: {exc}; using defaults")
        return EditorConfig()
