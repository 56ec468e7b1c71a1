"""Eve - a personal task tracker driven by typed commands."""

__version__ = "0.2.0"

from .task import Todo, Deadline, Event, Task, TaskType, ParsedWhen, RawWhen
from .task_list import TaskList
from .storage import TaskStore
from .app import Eve, Reply, ReplyKind

__all__ = [
    "Todo",
    "Deadline",
    "Event",
    "Task",
    "TaskType",
    "ParsedWhen",
    "RawWhen",
    "TaskList",
    "TaskStore",
    "Eve",
    "Reply",
    "ReplyKind",
    "__version__",
]
