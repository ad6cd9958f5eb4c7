"""Document store adapter: read, back up and rewrite markdown files."""

from __future__ import annotations

import datetime as dt
import logging
import os
import tempfile
from pathlib import Path

from linecleaner.config.schema import CleanerConfig
from linecleaner.errors.exceptions import BackupError, DocumentReadError, DocumentWriteError
from linecleaner.pipeline.engine import clean_text
from linecleaner.types import FileCleanResult
from linecleaner.utils.timestamps import backup_path_for, timestamp_regex

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".md"}


def find_documents(path: str | Path, backup_format: str | None = None) -> list[Path]:
    """Expand ``path`` to the markdown files it names, sorted.

    When ``backup_format`` is given, a directory scan leaves out backups:
    files named after a sibling document's stem plus a timestamp rendered
    with that format.
    """
    path = Path(path)
    if not path.is_dir():
        return [path]

    found = sorted(
        p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
    )
    if backup_format is None:
        return found

    stamp = timestamp_regex(backup_format)
    stems: dict[tuple[Path, str], set[str]] = {}
    for p in found:
        stems.setdefault((p.parent, p.suffix), set()).add(p.stem)

    documents = []
    for p in found:
        siblings = stems[(p.parent, p.suffix)]
        if any(
            s != p.stem and p.stem.startswith(s) and stamp.fullmatch(p.stem[len(s) :])
            for s in siblings
        ):
            logger.debug("Skipping backup %s", p)
            continue
        documents.append(p)
    return documents


def read_document(path: Path) -> str:
    try:
        # newline="" keeps CRLF documents byte-for-byte on rewrite
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"Could not read {path}: {e}", path=path, original=e) from e


def write_backup(path: Path, content: str, pattern: str, when: dt.datetime | None = None) -> Path:
    """Write ``content`` next to ``path`` under a timestamped name.

    Never overwrites an existing file.
    """
    backup = backup_path_for(path, pattern, when)
    try:
        with open(backup, "x", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise BackupError(f"Could not create backup {backup.name}: {e}", path=path, original=e) from e
    logger.info("Backup created: %s", backup)
    return backup


def write_document(path: Path, content: str) -> None:
    """Replace the file contents atomically via a temp file in the same directory."""
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise DocumentWriteError(f"Could not write {path}: {e}", path=path, original=e) from e


def clean_file(
    path: str | Path,
    config: CleanerConfig | None = None,
    dry_run: bool = False,
    now: dt.datetime | None = None,
) -> FileCleanResult:
    """Clean one document on disk.

    The file is only touched when the cleaned text differs. The backup (if
    enabled) holds the original content and is written before the document;
    a failed backup leaves the document unmodified.
    """
    path = Path(path)
    config = config or CleanerConfig()

    original = read_document(path)
    result = clean_text(original, config)
    outcome = FileCleanResult(path=path, removals=result.removals, changed=result.changed)

    if not result.changed:
        logger.info("No changes for %s", path)
        return outcome
    if dry_run:
        logger.info("Dry run: %s would change (%d removal(s))", path, result.removals)
        return outcome

    if config.create_backup:
        outcome.backup_path = write_backup(path, original, config.backup_file_name_format, now)

    write_document(path, result.content)
    outcome.written = True
    logger.info("Cleaned %s (%d removal(s))", path, result.removals)
    return outcome
