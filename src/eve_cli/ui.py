"""Terminal presentation for Eve.

``render_reply`` builds the plain text of every reply so it can be checked
without a terminal; ``UI`` prints it through a themed Rich console.
"""

from typing import List, Optional

from rich.console import Console
from rich.rule import Rule
from rich.text import Text
from rich.theme import Theme

from .app import Reply, ReplyKind
from .task import Task

LOGO = (
    " ______   __      __   ______ \n"
    "| _____|  \\ \\    / /  | _____|\n"
    "| |__      \\ \\  / /   | |__  \n"
    "|  __|      \\ \\/ /    |  __| \n"
    "| |____      \\  /     | |____ \n"
    "|______|      \\/      |______|\n"
)

WELCOME = "Hello, I am Eve!"
PROMPT = "What can I do for you?"
GOODBYE = "Bye. Hope to see you again soon!"
EOF_NOTICE = "Goodbye (EOF)."

HELP_LINES = [
    "Available commands:",
    "  help                                 - Show this help message.",
    "  list                                 - Show all tasks and status.",
    "  find <keyword>                       - Search tasks by keyword.",
    "  todo <desc>                          - Add a ToDo task.",
    "  deadline <desc> /by <time>           - Add a Deadline.",
    "  event <desc> /from <start> /to <end> - Add an Event.",
    "  mark N                               - Mark task N as done.",
    "  unmark N                             - Mark task N as not done.",
    "  delete N                             - Delete task N.",
    "  bye                                  - Exit the program.",
]

EVE_THEME = Theme({
    "border": "#41505E",
    "primary": "#68D5F3 bold",
    "success": "#8BD649 bold",
    "error": "#F78C6C bold",
    "muted": "#718CA1",
})

_REPLY_STYLES = {
    ReplyKind.ADDED: "success",
    ReplyKind.MARKED: "success",
    ReplyKind.UNMARKED: "success",
    ReplyKind.DELETED: "success",
    ReplyKind.ERROR: "error",
    ReplyKind.UNKNOWN: "error",
}


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def _numbered(tasks: List[Task]) -> List[str]:
    return [f"{i}.{task}" for i, task in enumerate(tasks, start=1)]


def render_reply(reply: Reply) -> str:
    """Plain text shown to the user for ``reply``."""
    kind = reply.kind

    if kind is ReplyKind.EMPTY:
        return ""
    if kind is ReplyKind.HELP:
        return "\n".join(HELP_LINES)
    if kind is ReplyKind.GOODBYE:
        return GOODBYE
    if kind in (ReplyKind.ERROR, ReplyKind.UNKNOWN):
        return reply.message

    if kind is ReplyKind.LIST:
        if not reply.tasks:
            return "No tasks yet."
        return "\n".join(["Here are the tasks in your list:"] + _numbered(reply.tasks))

    if kind is ReplyKind.FOUND:
        if not reply.tasks:
            return "No matching tasks found."
        return "\n".join(["Here are the matching tasks in your list:"] + _numbered(reply.tasks))

    if kind is ReplyKind.ADDED:
        return "\n".join(["Got it. I've added this task:", f"  {reply.task}", _count_line(reply.count)])
    if kind is ReplyKind.MARKED:
        return "\n".join(["Nice! I've marked this task as done:", f"  {reply.task}"])
    if kind is ReplyKind.UNMARKED:
        return "\n".join(["OK, I've marked this task as not done yet:", f"  {reply.task}"])
    if kind is ReplyKind.DELETED:
        return "\n".join(["Noted. I've removed this task:", f"  {reply.task}", _count_line(reply.count)])

    raise ValueError(f"Unhandled reply kind: {kind}")


def get_console(use_color: bool = True, **kwargs) -> Console:
    """Console with the Eve theme applied."""
    return Console(theme=EVE_THEME, no_color=not use_color, highlight=False, **kwargs)


class UI:
    """Prints Eve's side of the conversation."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def _boxed(self, text: str, style: Optional[str] = None):
        self.console.print(Rule(style="border"))
        self.console.print(Text(text, style=style or ""))
        self.console.print(Rule(style="border"))

    def show_welcome(self):
        self.console.print(Rule(style="border"))
        self.console.print(Text(WELCOME, style="primary"))
        self.console.print(Text(LOGO, style="primary"))
        self.console.print(PROMPT)
        self.console.print(Rule(style="border"))

    def show(self, reply: Reply):
        text = render_reply(reply)
        if not text:
            return
        self._boxed(text, _REPLY_STYLES.get(reply.kind))

    def show_eof(self):
        self._boxed(EOF_NOTICE, "muted")

    def show_goodbye(self):
        self._boxed(GOODBYE)

    def read_command(self) -> Optional[str]:
        """Read one line, or None at end of input."""
        try:
            return self.console.input("[primary]>[/primary] ")
        except EOFError:
            return None
