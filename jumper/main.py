"""
Main entry point for jumper.

The first argument is a command (`add`, `list`, `remove`, `setup`). Anything
else is a folder number or name to jump to: its path is printed with no newline
so the `jp` shell function can `cd` to it.
"""

import inspect
import sys
from typing import List, Optional

from jumper.commands import bookmark_commands
from jumper.commands.command_registry import all_commands, is_command, look_up_command
from jumper.config.logger import get_logger
from jumper.config.settings import APP_NAME
from jumper.config.setup import setup
from jumper.errors import exit_code_for, MissingInput, NONFATAL_EXCEPTIONS
from jumper.shell_tools.exception_printing import summarize_traceback

log = get_logger(__name__)

USAGE = f"Usage: {APP_NAME} <command>"


def usage_text() -> str:
    """
    Usage with a summary of each command. Shown on stderr when there are no
    arguments. There are no options, since any argument that isn't a command is
    a folder to jump to.
    """
    from jumper.version import get_version

    lines = [f"{APP_NAME} {get_version()}", USAGE, "", "Commands:"]
    for name, func in all_commands().items():
        doc = inspect.getdoc(func) or ""
        summary = doc.splitlines()[0] if doc else ""
        lines.append(f"  {name:<8} {summary}")
    lines.append(f"  {'<folder>':<8} Print the path of a folder, by number or name.")
    return "\n".join(lines)


def run_command(name: str, args: List[str]) -> None:
    """
    Run a registered command, passing only as many arguments as it takes.
    """
    command = look_up_command(name)
    max_args = len(inspect.signature(command).parameters)
    log.info("Command: %s %s", name, " ".join(args))
    command(*args[:max_args])


def run_jump(token: str) -> int:
    """
    Jumps fail silently: nothing on stdout or stderr, just a non-zero exit.
    """
    try:
        bookmark_commands.jump(token)
    except NONFATAL_EXCEPTIONS as e:
        log.info("Jump to %r failed: %s", token, e)
        return exit_code_for(e)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        setup()

        if not argv:
            raise MissingInput(usage_text())

        name, args = argv[0], argv[1:]
        if not is_command(name):
            return run_jump(name)

        run_command(name, args)
        return 0
    except NONFATAL_EXCEPTIONS as e:
        log.error("%s", summarize_traceback(e))
        log.info("Command error details: %s", e, exc_info=True)
        return exit_code_for(e)


def console_main():
    sys.exit(main())


if __name__ == "__main__":
    console_main()
