"""Task data model for Eve."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Union

from .utils.datetime import encode_datetime, parse_datetime, render_datetime


class TaskType(Enum):
    """Display tag of each task kind."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(frozen=True)
class ParsedWhen:
    """A date field that parsed into a datetime."""
    value: datetime

    def display(self) -> str:
        return render_datetime(self.value)

    def token(self) -> str:
        return encode_datetime(self.value)


@dataclass(frozen=True)
class RawWhen:
    """A date field kept as the user's text because no format matched."""
    text: str

    def display(self) -> str:
        return self.text

    def token(self) -> str:
        return self.text


When = Union[ParsedWhen, RawWhen]


def when_from_text(text: str) -> When:
    """Parse ``text`` into a ``ParsedWhen``, falling back to ``RawWhen``."""
    parsed = parse_datetime(text)
    if parsed is None:
        return RawWhen(text)
    return ParsedWhen(parsed)


@dataclass
class Task:
    """Fields and behaviour shared by every task kind."""

    task_type: ClassVar[TaskType]

    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self):
        if not self.description or not self.description.strip():
            raise ValueError("Task description cannot be empty")

    @property
    def type_tag(self) -> str:
        return self.task_type.value

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_done(self):
        """Mark the task as done."""
        self.done = True

    def mark_not_done(self):
        """Mark the task as not done yet."""
        self.done = False

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring search on the description."""
        return keyword.lower() in self.description.lower()

    def __str__(self) -> str:
        return f"[{self.type_tag}][{self.status_icon}] {self.description}"


@dataclass
class Todo(Task):
    """A plain to-do with no date."""

    task_type: ClassVar[TaskType] = TaskType.TODO


@dataclass
class Deadline(Task):
    """A task due by a point in time."""

    task_type: ClassVar[TaskType] = TaskType.DEADLINE

    due: When

    @classmethod
    def from_text(cls, description: str, by: str, done: bool = False) -> "Deadline":
        return cls(description, when_from_text(by), done=done)

    def __str__(self) -> str:
        return f"{super().__str__()} (by: {self.due.display()})"


@dataclass
class Event(Task):
    """A task spanning a start and an end."""

    task_type: ClassVar[TaskType] = TaskType.EVENT

    start: When
    end: When

    @classmethod
    def from_text(cls, description: str, start: str, end: str, done: bool = False) -> "Event":
        return cls(description, when_from_text(start), when_from_text(end), done=done)

    def __str__(self) -> str:
        return (f"{super().__str__()} "
                f"(from: {self.start.display()} to: {self.end.display()})")
