"""Storage layer for Eve using a line-based text file.

One task per line, fields separated by ``|``::

    T | 1 | read book
    D | 0 | return book | 2019-12-02T18:00
    E | 0 | meeting | 2019-12-02T14:00 | 2019-12-02T16:00

Dates are written as ISO tokens when they parsed and as the user's text
when they did not. Lines that cannot be read back are skipped one by one so
a single bad line never costs the rest of the file.
"""

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .task import Deadline, Event, Task, TaskType, Todo

logger = logging.getLogger(__name__)

FIELD_SEPARATOR_RE = re.compile(r"\s*\|\s*")


class TaskLineFormat:
    """Handles conversion between Task objects and storage lines."""

    @staticmethod
    def to_line(task: Task) -> str:
        """Convert a task to its storage line."""
        done = "1" if task.done else "0"
        fields = [task.type_tag, done, task.description]

        if isinstance(task, Deadline):
            fields.append(task.due.token())
        elif isinstance(task, Event):
            fields.extend([task.start.token(), task.end.token()])

        return " | ".join(fields)

    @staticmethod
    def split_fields(line: str) -> List[str]:
        """Split a line on ``|``, dropping trailing empty fields."""
        fields = FIELD_SEPARATOR_RE.split(line.strip())
        while fields and not fields[-1]:
            fields.pop()
        return fields

    @staticmethod
    def from_line(line: str) -> Optional[Task]:
        """Parse a storage line back to a Task.

        Returns:
            The task, or None if the line is blank or corrupted
        """
        fields = TaskLineFormat.split_fields(line)
        if len(fields) < 3:
            return None

        tag = fields[0]
        done = fields[1] == "1"
        description = fields[2]

        try:
            if tag == TaskType.TODO.value:
                return Todo(description, done=done)

            if tag == TaskType.DEADLINE.value:
                if len(fields) < 4:
                    return None
                return Deadline.from_text(description, fields[3], done=done)

            if tag == TaskType.EVENT.value:
                start = fields[3] if len(fields) >= 4 else ""
                end = fields[4] if len(fields) >= 5 else ""
                return Event.from_text(description, start, end, done=done)
        except Exception as e:
            logger.debug(f"Could not build task from line {line!r}: {e}")
            return None

        return None


class TaskStore:
    """File-based storage for Eve's task list."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _ensure_parent(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> List[Task]:
        """Load all readable tasks, in file order.

        A missing file is not an error: its directory is created and an
        empty list returned. I/O failures are logged and also yield an
        empty list.
        """
        try:
            if not self.path.exists():
                self._ensure_parent()
                logger.debug(f"No data file at {self.path}, starting empty")
                return []

            tasks = []
            skipped = 0
            with open(self.path, "r", encoding="utf-8") as f:
                for line_no, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    task = TaskLineFormat.from_line(line)
                    if task is None:
                        skipped += 1
                        logger.debug(f"Skipping corrupted line {line_no} in {self.path}")
                        continue
                    tasks.append(task)

            if skipped:
                logger.info(f"Skipped {skipped} unreadable line(s) in {self.path}")
            return tasks

        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load tasks from {self.path}: {e}")
            return []

    def save(self, tasks: Iterable[Task]) -> bool:
        """Overwrite the data file with ``tasks``.

        The file is written to a temporary sibling and then moved into
        place. A symlinked data file is written through to its target and
        the existing permissions are kept. Failures are logged, not raised;
        the in-memory list stays authoritative until the next successful
        save.

        Returns:
            True if the file was written
        """
        tmp_name = None
        try:
            target = self.path.resolve()
            target.parent.mkdir(parents=True, exist_ok=True)
            content = "".join(TaskLineFormat.to_line(task) + "\n" for task in tasks)

            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
            tmp_name = None
            return True

        except OSError as e:
            logger.warning(f"Failed to save tasks to {self.path}: {e}")
            return False

        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
