"""JSON session files.

A session is written as one UTF-8 JSON document (see
wolf_survival.models.session for the layout). Writes go to a temporary
file next to the target and are renamed into place, so a failed save
never leaves a half-written session behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from wolf_survival.core.exceptions import SaveFileError
from wolf_survival.core.logging import get_logger
from wolf_survival.models.session import SessionRecord


logger = get_logger(__name__)


def write_session(path: str | Path, record: SessionRecord) -> Path:
    """Write a session record to disk atomically.

    Args:
        path: Destination file.
        record: Session to persist.

    Returns:
        The path written.

    Raises:
        SaveFileError: If the file cannot be written.
    """
    target = Path(path)
    payload = record.model_dump_json(indent=2)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise SaveFileError(
            f"Could not write session file: {exc}",
            path=str(target),
        ) from exc

    logger.info("Session written", path=str(target), day=record.day)
    return target


def read_session(path: str | Path) -> SessionRecord:
    """Read and validate a session record.

    Args:
        path: Session file to read.

    Returns:
        The parsed session record.

    Raises:
        SaveFileError: If the file is missing, unreadable or malformed.
    """
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SaveFileError(
            f"Could not read session file: {exc}",
            path=str(source),
        ) from exc

    try:
        record = SessionRecord.model_validate_json(raw)
    except ValidationError as exc:
        raise SaveFileError(
            "Session file is corrupt or from an unsupported version",
            path=str(source),
            details={"errors": exc.error_count()},
        ) from exc

    logger.info("Session read", path=str(source), day=record.day)
    return record


__all__ = [
    "write_session",
    "read_session",
]
