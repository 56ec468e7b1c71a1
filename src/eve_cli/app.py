"""Command handling for Eve.

``Eve`` owns the task list and the store it is persisted to, applies one
command line at a time and describes the outcome as a ``Reply``. It does no
printing itself; see ``eve_cli.ui`` for presentation.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from . import parser
from .config import ConfigModel
from .exceptions import CommandValidationError, EveError
from .parser import Command
from .storage import TaskStore
from .task import Deadline, Event, Task, Todo
from .task_list import TaskList

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = "Sorry, I don't understand that. Type 'help' to see available commands."


class ReplyKind(Enum):
    """What happened in response to a command line."""
    EMPTY = "empty"
    HELP = "help"
    LIST = "list"
    ADDED = "added"
    MARKED = "marked"
    UNMARKED = "unmarked"
    DELETED = "deleted"
    FOUND = "found"
    ERROR = "error"
    UNKNOWN = "unknown"
    GOODBYE = "goodbye"


@dataclass
class Reply:
    """Structured outcome of a single command."""
    kind: ReplyKind
    message: str = ""
    task: Optional[Task] = None
    tasks: List[Task] = field(default_factory=list)
    count: Optional[int] = None
    exit: bool = False

    @property
    def is_error(self) -> bool:
        return self.kind in (ReplyKind.ERROR, ReplyKind.UNKNOWN)


class Eve:
    """Applies parsed commands to a task list and keeps it saved."""

    def __init__(self, store: TaskStore, tasks: Optional[TaskList] = None):
        self.store = store
        self.tasks = tasks if tasks is not None else TaskList(store.load())
        logger.debug(f"Loaded {len(self.tasks)} task(s) from {store.path}")

    @classmethod
    def from_config(cls, config: ConfigModel) -> "Eve":
        return cls(TaskStore(config.data_path))

    def handle(self, line: Optional[str]) -> Reply:
        """Process one raw input line."""
        line = (line or "").strip()
        if not line:
            return Reply(ReplyKind.EMPTY)

        parsed = parser.parse(line)
        if parsed is None:
            return self._unknown(line)

        logger.debug(f"Handling {parsed.command.value!r} with args {parsed.args!r}")
        try:
            return self._dispatch(parsed.command, parsed.args)
        except EveError as e:
            return Reply(ReplyKind.ERROR, message=e.message)

    def _dispatch(self, command: Command, args: str) -> Reply:
        if command is Command.HELP:
            return Reply(ReplyKind.HELP)
        if command is Command.LIST:
            return Reply(ReplyKind.LIST, tasks=self.tasks.as_list())
        if command is Command.BYE:
            return Reply(ReplyKind.GOODBYE, exit=True)
        if command is Command.FIND:
            keyword = parser.parse_find(args)
            return Reply(ReplyKind.FOUND, tasks=self.tasks.find(keyword))

        if command is Command.TODO:
            return self._add(Todo(parser.parse_todo(args)))
        if command is Command.DEADLINE:
            parts = parser.parse_deadline(args)
            return self._add(Deadline.from_text(parts.description, parts.by))
        if command is Command.EVENT:
            parts = parser.parse_event(args)
            return self._add(Event.from_text(parts.description, parts.start, parts.end))

        index = self._resolve_index(args, command)
        if command is Command.DELETE:
            removed = self.tasks.delete_at(index)
            self._save()
            return Reply(ReplyKind.DELETED, task=removed, count=len(self.tasks))

        done = command is Command.MARK
        task = self.tasks.set_done(index, done)
        self._save()
        return Reply(ReplyKind.MARKED if done else ReplyKind.UNMARKED, task=task)

    def _resolve_index(self, args: str, command: Command) -> int:
        # An empty list is reported before the number is even looked at.
        if len(self.tasks) == 0:
            raise CommandValidationError(parser.NO_TASKS)
        number = parser.parse_index(args, command)
        return parser.check_index(number, len(self.tasks))

    def _add(self, task: Task) -> Reply:
        self.tasks.add(task)
        self._save()
        return Reply(ReplyKind.ADDED, task=task, count=len(self.tasks))

    def _save(self):
        if not self.store.save(self.tasks):
            logger.warning("Changes are kept in memory but were not written to disk")

    def _unknown(self, line: str) -> Reply:
        word = line.split(None, 1)[0]
        message = UNKNOWN_COMMAND
        suggestion = parser.suggest_command(word)
        if suggestion:
            message += f" Did you mean '{suggestion}'?"
        return Reply(ReplyKind.UNKNOWN, message=message)
