"""
Xonsh extension for jumper.

Load with `xontrib load jumper`. Adds a `jp` alias that works like the bash
function: with no argument it lists bookmarks, and with a folder number or name
it changes to that folder. Folder names complete after `jp`.
"""

from typing import List, Optional

from xonsh.built_ins import XSH
from xonsh.completers.completer import add_one_completer
from xonsh.completers.tools import contextual_command_completer_for
from xonsh.dirstack import cd

from jumper.config.logger import get_logger
from jumper.config.setup import setup
from jumper.errors import NONFATAL_EXCEPTIONS
from jumper.file_storage.stores import current_store
from jumper.main import main
from jumper.resolver import folder_names, resolve

setup()

log = get_logger(__name__)


def _jp(args: List[str], stdin=None) -> Optional[int]:
    if not args:
        return main(["list"])

    try:
        bookmark = resolve(args[0], current_store().load_all())
    except NONFATAL_EXCEPTIONS as e:
        log.info("jp %r failed: %s", args[0], e)
        return 1
    if not bookmark:
        return 1

    cd([bookmark.path])
    return None


@contextual_command_completer_for("jp")
def _jp_completer(command):
    if command.arg_index != 1:
        return None
    try:
        names = folder_names(current_store().load_all())
    except NONFATAL_EXCEPTIONS:
        return None
    return {name for name in names if name.startswith(command.prefix)}


XSH.aliases["jp"] = _jp  # type: ignore

add_one_completer("jp", _jp_completer, "start")
