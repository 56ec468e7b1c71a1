"""Command parser for Eve.

Turns a raw input line into a ``Command`` plus its argument text, and
decomposes the arguments of each command into validated parts. Malformed
arguments raise ``CommandSyntaxError`` with a usage hint; the messages are
shown to the user verbatim.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fuzzywuzzy import fuzz, process

from .exceptions import CommandSyntaxError, CommandValidationError
from .utils.datetime import parse_datetime


class Command(Enum):
    """Commands Eve understands, keyed by their keyword."""
    HELP = "help"
    LIST = "list"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    BYE = "bye"


TODO_USAGE = "Oops, I need more info. Usage: todo <description>"
DEADLINE_USAGE = "Oops, I need more info. Usage: deadline <description> /by <when>"
EVENT_USAGE = "Oops, I need more info. Usage: event <description> /from <start> /to <end>"
FIND_USAGE = "Oops, I need more info. Usage: find <keyword>"
INVALID_RANGE = "Sorry, that time range looks invalid: start is after end."
NO_TASKS = 'No tasks yet. Add one first with "todo <description>".'

_INDEX_EXAMPLES = {
    Command.MARK: "mark 2",
    Command.UNMARK: "unmark 2",
    Command.DELETE: "delete 3",
}

_BY_RE = re.compile(r"\s*/by\s+", re.IGNORECASE)
_FROM_RE = re.compile(r"\s*/from\s+", re.IGNORECASE)
_TO_RE = re.compile(r"\s*/to\s+", re.IGNORECASE)
_DIGITS_RE = re.compile(r"[0-9]+")
_LINE_BREAK_RE = re.compile(r"[\r\n]")


@dataclass(frozen=True)
class ParsedCommand:
    """A recognised command and its (trimmed) argument text."""
    command: Command
    args: str


@dataclass(frozen=True)
class DeadlineParts:
    description: str
    by: str


@dataclass(frozen=True)
class EventParts:
    description: str
    start: str
    end: str


def parse_command(line: Optional[str]) -> Optional[Command]:
    """Map the first word of ``line`` to a Command.

    Returns:
        The matching Command, or None for blank or unknown input
    """
    if line is None:
        return None
    words = line.split(None, 1)
    if not words:
        return None
    try:
        return Command(words[0].lower())
    except ValueError:
        return None


def split_args(line: str) -> str:
    """Everything after the first word, trimmed; empty if there is none."""
    words = line.split(None, 1)
    return words[1].strip() if len(words) > 1 else ""


def parse(line: str) -> Optional[ParsedCommand]:
    """Split ``line`` into a command and its arguments.

    Unknown keywords are not an error: they return None so the caller can
    point the user at ``help``.
    """
    command = parse_command(line)
    if command is None:
        return None
    return ParsedCommand(command, split_args(line))


def suggest_command(word: str) -> Optional[str]:
    """Suggest the closest known keyword for a mistyped one."""
    if not word:
        return None
    keywords = [command.value for command in Command]
    match = process.extractOne(word.lower(), keywords, scorer=fuzz.ratio, score_cutoff=70)
    return match[0] if match else None


def _single_line(args: str, usage: str) -> str:
    """Trim ``args``; text spanning several lines cannot be stored."""
    text = (args or "").strip()
    if _LINE_BREAK_RE.search(text):
        raise CommandSyntaxError(usage)
    return text


def parse_todo(args: str) -> str:
    """Return the description of a ``todo`` command."""
    description = _single_line(args, TODO_USAGE)
    if not description:
        raise CommandSyntaxError(TODO_USAGE)
    return description


def parse_deadline(args: str) -> DeadlineParts:
    """Split ``<description> /by <when>``."""
    parts = _BY_RE.split(_single_line(args, DEADLINE_USAGE), maxsplit=1)
    if len(parts) < 2:
        raise CommandSyntaxError(DEADLINE_USAGE)

    description, by = parts[0].strip(), parts[1].strip()
    if not description or not by:
        raise CommandSyntaxError(DEADLINE_USAGE)
    return DeadlineParts(description, by)


def parse_event(args: str) -> EventParts:
    """Split ``<description> /from <start> /to <end>``.

    When both ends parse as dates, the start must not be after the end.
    If either end is free text no ordering can be checked, so none is.
    """
    first = _FROM_RE.split(_single_line(args, EVENT_USAGE), maxsplit=1)
    if len(first) < 2:
        raise CommandSyntaxError(EVENT_USAGE)

    second = _TO_RE.split(first[1], maxsplit=1)
    if len(second) < 2:
        raise CommandSyntaxError(EVENT_USAGE)

    description = first[0].strip()
    start, end = second[0].strip(), second[1].strip()
    if not description or not start or not end:
        raise CommandSyntaxError(EVENT_USAGE)

    parsed_start = parse_datetime(start)
    parsed_end = parse_datetime(end)
    if parsed_start is not None and parsed_end is not None and parsed_start > parsed_end:
        raise CommandValidationError(INVALID_RANGE)

    return EventParts(description, start, end)


def parse_index(args: str, command: Command) -> int:
    """Parse the 1-based task number of a mark, unmark or delete command.

    Only the shape is checked here; the caller checks it against the list.
    """
    example = _INDEX_EXAMPLES[command]
    args = (args or "").strip()
    if not args:
        if command is Command.DELETE:
            raise CommandSyntaxError(f'Use a number only, e.g., "{example}".')
        raise CommandSyntaxError(f'Please provide a task number (e.g., "{example}").')
    if not _DIGITS_RE.fullmatch(args):
        raise CommandSyntaxError(f'Use a number only, e.g., "{example}".')
    return int(args)


def check_index(number: int, size: int) -> int:
    """Validate a 1-based task number against the list size.

    Returns:
        The matching 0-based index
    """
    if size == 0:
        raise CommandValidationError(NO_TASKS)
    if number < 1 or number > size:
        raise CommandValidationError(f"Please provide a valid task number (1-{size}).")
    return number - 1


def parse_find(args: str) -> str:
    """Return the keyword of a ``find`` command."""
    keyword = (args or "").strip()
    if not keyword:
        raise CommandSyntaxError(FIND_USAGE)
    return keyword
