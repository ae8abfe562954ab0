from __future__ import annotations

import hashlib
import pathlib
from datetime import date, datetime
from typing import Any

import yaml


def read_yaml(path: pathlib.Path) -> Any:
    if path.exists():
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {}


def text_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:16]


def coerce_date_like(v):
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        s = v.strip().strip('"').strip("'")
        try:
            return date.fromisoformat(s)
        except ValueError:
            return v
    return v


def write_if_changed(path: pathlib.Path, text: str) -> bool:
    """
    Write `text` to `path` unless the file already holds the same content.
    Returns True when the file was (re)written.
    """
    if path.exists():
        old = path.read_text(encoding="utf-8")
        if text_hash(old) == text_hash(text):
            return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return True
