"""
Unified hierarchy of error types. These inherit from standard errors like
ValueError and IOError but are more fine-grained.
"""

from typing import Tuple, Type


class JumperRuntimeError(ValueError):
    """Base class for jumper runtime errors."""

    pass


class SelfExplanatoryError(JumperRuntimeError):
    """Common errors that arise from 'normal' problems that are largely self-explanatory,
    i.e., no stack trace should be necessary when reporting to the user."""

    pass


class InvalidInput(SelfExplanatoryError):
    """Raised when the wrong kind of input is given to a command."""

    pass


class UsageError(InvalidInput):
    """Raised when the command line itself is malformed."""

    pass


class MissingInput(UsageError):
    """Raised when a required argument is missing."""

    pass


class InvalidCommand(UsageError):
    """Raised when a command or option is not recognized."""

    pass


class NotFound(InvalidInput):
    """Raised when a token doesn't match any bookmark."""

    pass


class StoreError(SelfExplanatoryError, IOError):
    """Raised when the bookmark file can't be created, read, or written."""

    pass


class InvalidState(SelfExplanatoryError):
    """Raised when the environment is not in a valid state for an operation."""

    pass


class SetupError(SelfExplanatoryError):
    """Raised when the shell integration can't be installed."""

    pass


NONFATAL_EXCEPTIONS: Tuple[Type[Exception], ...] = (
    SelfExplanatoryError,
    FileNotFoundError,
    IOError,
)
"""Exceptions that are not fatal and usually don't merit a full stack trace."""


def exit_code_for(exception: Exception) -> int:
    """
    Process exit status for a handled error. Usage problems get 2, as with
    most command-line tools, and everything else gets 1.
    """
    if isinstance(exception, UsageError):
        return 2
    return 1


## Tests


def test_error_hierarchy():
    assert issubclass(StoreError, IOError)
    assert isinstance(StoreError("Could not read: /tmp/x"), NONFATAL_EXCEPTIONS)
    assert isinstance(NotFound("Folder not found: x"), NONFATAL_EXCEPTIONS)
    assert not isinstance(KeyError("x"), NONFATAL_EXCEPTIONS)

    assert exit_code_for(MissingInput("Usage: jumper remove <folder-name-or-number>")) == 2
    assert exit_code_for(InvalidCommand("Unrecognized option: -x")) == 2
    assert exit_code_for(NotFound("Folder not found: x")) == 1
    assert exit_code_for(StoreError("Could not write")) == 1
    assert str(StoreError("Could not write")) == "Could not write"
