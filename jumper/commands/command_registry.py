from typing import Any, Callable, Dict

from jumper.config.logger import get_logger
from jumper.errors import InvalidCommand

log = get_logger(__name__)


CommandFunction = Callable[..., Any]

_commands: Dict[str, CommandFunction] = {}


def jumper_command(func: CommandFunction) -> CommandFunction:
    """
    Register a command under the name of its function. A trailing underscore
    is dropped, so `list_` registers as `list`.
    """
    _commands[func.__name__.rstrip("_")] = func
    return func


def all_commands() -> Dict[str, CommandFunction]:
    """
    All commands, sorted by name.
    """
    return dict(sorted(_commands.items()))


def look_up_command(name: str) -> CommandFunction:
    cmd = _commands.get(name)
    if not cmd:
        raise InvalidCommand(f"Command `{name}` not found")
    return cmd


def is_command(name: str) -> bool:
    return name in _commands
