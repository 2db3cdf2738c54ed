"""
Output methods. These are for user interaction, not logging.

Everything here goes to stdout. Paths are printed as `Text` so brackets in
folder names are never read as markup, and with soft wrapping so long paths
stay on one line for anything parsing the output.
"""

import sys
import threading
from contextlib import contextmanager
from io import StringIO
from typing import Any, Callable, Optional

import rich
from rich.console import Console
from rich.text import Text

from jumper.config.logger import get_highlighter, get_theme
from jumper.config.text_styles import COLOR_STATUS


def new_console(file=None, force_terminal: Optional[bool] = None) -> Console:
    """
    Create a new console with our theme and highlighter.
    """
    return Console(
        theme=get_theme(),
        highlighter=get_highlighter(),
        file=file,
        force_terminal=force_terminal,
    )


# Allow output stream to be redirected if desired.
_output_context = threading.local()


@contextmanager
def redirect_output(new_output):
    old_output = getattr(_output_context, "stream", None)
    _output_context.stream = new_output
    try:
        yield
    finally:
        _output_context.stream = old_output


def output_as_string(func: Callable, *args: Any, **kwargs: Any) -> str:
    """
    Collect output printed by the given function as a string.
    """
    buffer = StringIO()
    with redirect_output(buffer):
        func(*args, **kwargs)
    return buffer.getvalue()


def _current_console() -> Console:
    stream = getattr(_output_context, "stream", None)
    if stream:
        return new_console(file=stream, force_terminal=False)
    return rich.get_console()


def rprint(*args, **kwargs):
    """Print to the global console, unless output stream is redirected."""
    _current_console().print(*args, soft_wrap=True, **kwargs)


def output(message: str = "", *args, color: Optional[str] = None, end: str = "\n"):
    text = message % args if args else message
    rprint(Text(text, style=color or ""), end=end)


def output_status(message: str, *args):
    output(message, *args, color=COLOR_STATUS)


def output_result(message: str, *args):
    # Results stay unstyled since scripts parse them.
    output(message, *args)


def output_raw(text: str):
    """
    Write text exactly, with no styling and no trailing newline.
    """
    stream = getattr(_output_context, "stream", None) or sys.stdout
    stream.write(text)
    stream.flush()


## Tests


def test_output_as_string():
    def emit():
        output("Available folders:")
        output_result("%d. %s", 1, "/a/[b]/c")
        output_raw("/a/b")

    assert output_as_string(emit) == "Available folders:\n1. /a/[b]/c\n/a/b"


def test_long_paths_are_not_wrapped():
    long_path = "/" + "/".join(["segment"] * 30)
    assert output_as_string(output_result, long_path) == long_path + "\n"
