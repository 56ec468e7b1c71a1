"""Exceptions raised by Eve's command handling.

Every error here is recoverable: it carries a message meant for the user,
and the caller reports it without changing any state.
"""


class EveError(Exception):
    """Base class for user-facing, recoverable errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CommandSyntaxError(EveError):
    """Command arguments are malformed or incomplete."""


class CommandValidationError(EveError):
    """Arguments are well-formed but not acceptable in the current state."""
