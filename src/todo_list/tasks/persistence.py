# src/todo_list/tasks/persistence.py

"""
Task list <-> save file.

On-disk format: one task per record, four double-quoted fields:

    "title","description","due_date","completed"

completed is "1" or "0". Files are handled with the csv module (QUOTE_ALL), so
plain values produce exactly the classic line format while a literal quote is
doubled and an embedded newline stays inside its quoted field instead of
breaking the record.
"""

from __future__ import annotations

import contextlib
import csv
import io
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

FIELD_COUNT = 4

# Largest value csv.field_size_limit() accepts on every platform (C long).
FIELD_SIZE_LIMIT = 2**31 - 1

# Text typed in a non-UTF-8 terminal reaches us as lone surrogates (PEP 383);
# surrogateescape writes them back as the original bytes instead of failing.
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"


def _task_to_row(task: Task) -> list[str]:
    return [task.title, task.description, task.due_date, "1" if task.completed else "0"]


def _row_to_task(row: list[str]) -> Task:
    title, description, due_date, completed = row
    return Task(
        title=title,
        description=description,
        due_date=due_date,
        completed=completed == "1",
    )


def serialize_tasks(tasks: Iterable[Task]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for task in tasks:
        writer.writerow(_task_to_row(task))
    return buf.getvalue()


def deserialize_tasks(text: str) -> list[Task]:
    """
    Parse save-file text into tasks.

    Blank lines are ignored. A record without exactly four fields is skipped
    with a warning; nothing from a bad record leaks into the next task.
    """
    # Descriptions may be longer than the csv module's default 128 KiB field limit.
    if csv.field_size_limit() < FIELD_SIZE_LIMIT:
        csv.field_size_limit(FIELD_SIZE_LIMIT)

    tasks: list[Task] = []
    reader = csv.reader(io.StringIO(text, newline=""))
    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error:
            # The reader resumes on the next line; only this record is lost.
            logger.warning(
                "Skipping unparsable record at line %d", reader.line_num, exc_info=True
            )
            continue
        if not row:
            continue
        if len(row) != FIELD_COUNT:
            logger.warning(
                "Skipping malformed record at line %d: expected %d fields, got %d",
                reader.line_num,
                FIELD_COUNT,
                len(row),
            )
            continue
        tasks.append(_row_to_task(row))
    return tasks


def load_tasks(path: str | Path) -> list[Task]:
    """
    Read tasks from `path`.

    A missing or unreadable file yields an empty list; the reason is only logged.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No save file at %s, starting with an empty list.", path)
        return []
    try:
        with path.open("r", encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="") as f:
            text = f.read()
    except OSError:
        logger.warning("Could not read save file %s, starting with an empty list.", path, exc_info=True)
        return []

    tasks = deserialize_tasks(text)
    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """
    Overwrite `path` with `tasks`.

    Writes a sibling temp file first and swaps it in, so a failed write leaves
    the previous save intact (the temp file is removed on any failure).
    OSError and UnicodeEncodeError propagate to the caller.
    """
    path = Path(path)
    tasks = list(tasks)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("w", encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="") as f:
            f.write(serialize_tasks(tasks))
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise
    logger.info("Saved %d tasks to %s", len(tasks), path)
