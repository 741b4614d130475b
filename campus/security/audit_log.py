"""Flagged-content audit trail.

Provides append-only, file-based JSON logging of moderation violations with
filtering and export. Records are stored as newline-delimited JSON in daily
files under ``~/.campus/flagged_content/``. Nothing here ever rewrites or
deletes a record.
"""

from __future__ import annotations

import csv
import io
import json
import logging
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from campus.moderation.models import ContentType, FlaggedContentRecord

logger = logging.getLogger(__name__)

_CSV_FIELDS = ["id", "created_at", "user", "type", "reason", "content"]


class FlaggedContentLog:
    """File-based JSON log of flagged content.

    Events are persisted as newline-delimited JSON in daily log files.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir else Path.home() / ".campus" / "flagged_content"
        self._base_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _log_file_for_date(self, dt: datetime) -> Path:
        """Return the log file path for a given date."""
        return self._base_dir / f"{dt.strftime('%Y-%m-%d')}.jsonl"

    def _read_all_records(self) -> list[FlaggedContentRecord]:
        """Read every record from all log files, skipping corrupt lines."""
        records: list[FlaggedContentRecord] = []
        for path in sorted(self._base_dir.glob("*.jsonl")):
            for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
                if not line.strip():
                    continue
                try:
                    records.append(FlaggedContentRecord(**json.loads(line)))
                except (json.JSONDecodeError, TypeError):
                    logger.warning("Skipping corrupt flagged-content line %s:%d", path.name, lineno)
        return records

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def record(
        self,
        content: str,
        user: str,
        content_type: Union[str, ContentType],
        reason: str,
    ) -> FlaggedContentRecord:
        """Append a flagged-content record and return it."""
        now = datetime.now(timezone.utc)
        entry = FlaggedContentRecord(
            id=uuid.uuid4().hex[:16],
            content=content,
            user=user,
            type=content_type.value if isinstance(content_type, ContentType) else str(content_type),
            reason=reason,
            created_at=now.isoformat(),
        )
        with self._log_file_for_date(now).open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(entry)) + "\n")
        logger.info("Flagged %s from user %s: %s", entry.type, user, reason)
        return entry

    def get_records(
        self,
        *,
        user: Optional[str] = None,
        content_type: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        limit: int = 200,
    ) -> list[FlaggedContentRecord]:
        """Return filtered records, newest first.

        A date-only *end_date* (``YYYY-MM-DD``) includes that whole day.
        """
        records = self._read_all_records()

        if user:
            records = [r for r in records if r.user == user]
        if content_type:
            records = [r for r in records if r.type == content_type]
        if start_date:
            records = [r for r in records if r.created_at >= start_date]
        if end_date:
            if "T" not in end_date:
                end_date += "T23:59:59.999999+00:00"
            records = [r for r in records if r.created_at <= end_date]

        records.sort(key=lambda r: r.created_at, reverse=True)
        return records[:limit]

    def export_records(
        self,
        fmt: str = "json",
        *,
        user: Optional[str] = None,
        content_type: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        limit: int = 10000,
    ) -> str:
        """Export records in the specified format (``json`` or ``csv``)."""
        records = self.get_records(
            user=user,
            content_type=content_type,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
        )

        if fmt == "csv":
            buf = io.StringIO()
            writer = csv.DictWriter(buf, fieldnames=_CSV_FIELDS, lineterminator="\n")
            writer.writeheader()
            for r in records:
                writer.writerow({k: getattr(r, k) for k in _CSV_FIELDS})
            return buf.getvalue().rstrip("\n")

        return json.dumps([asdict(r) for r in records], indent=2)
