"""File-based document store.

Stands in for the platform's headless content store. Documents are plain
dicts with a ``_type``; each type is kept as a JSONL file under
``~/.campus/documents/``.
"""

from __future__ import annotations

import json
import re
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Protocol


class DocumentStore(Protocol):
    """The subset of the content store used by content creation."""

    def create(self, doc: dict[str, Any]) -> dict[str, Any]:
        ...

    def get(self, doc_type: str, doc_id: str) -> Optional[dict[str, Any]]:
        ...

    def fetch(self, doc_type: str, **filters: Any) -> list[dict[str, Any]]:
        ...


def _safe_filename(name: str) -> str:
    """Sanitise a name for use as part of a filename."""
    return re.sub(r"[^\w\-.]", "_", name)


class JsonDocumentStore:
    """JSONL-backed document store."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base = Path(base_dir) if base_dir else Path.home() / ".campus" / "documents"
        self._base.mkdir(parents=True, exist_ok=True)

    # -- helpers -------------------------------------------------------------

    def _file_for(self, doc_type: str) -> Path:
        return self._base / f"{_safe_filename(doc_type)}.jsonl"

    def _read_file(self, path: Path) -> list[dict[str, Any]]:
        docs: list[dict[str, Any]] = []
        if not path.exists():
            return docs
        for line in path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                docs.append(json.loads(line))
            except json.JSONDecodeError:
                continue
        return docs

    # -- public API ----------------------------------------------------------

    def create(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Persist *doc* and return it with ``_id`` and ``_createdAt`` set."""
        doc_type = doc.get("_type")
        if not doc_type:
            raise ValueError("document must have a '_type'")
        stored = {k: v for k, v in doc.items() if v is not None}
        stored["_id"] = uuid.uuid4().hex
        stored["_createdAt"] = datetime.now(timezone.utc).isoformat()
        with self._file_for(doc_type).open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(stored) + "\n")
        return stored

    def get(self, doc_type: str, doc_id: str) -> Optional[dict[str, Any]]:
        """Return the document with *doc_id*, or None."""
        for doc in self._read_file(self._file_for(doc_type)):
            if doc.get("_id") == doc_id:
                return doc
        return None

    def fetch(self, doc_type: str, **filters: Any) -> list[dict[str, Any]]:
        """Return documents of *doc_type* whose fields equal *filters*."""
        docs = self._read_file(self._file_for(doc_type))
        return [d for d in docs if all(d.get(k) == v for k, v in filters.items())]
