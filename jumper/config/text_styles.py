"""
Settings that define the visual appearance of text outputs.
"""

import re

## Colors

COLOR_STATUS = "yellow"

COLOR_KEY = "bright_blue"

COLOR_ERROR = "bright_red"

COLOR_PATH = "bright_cyan"


## Symbols

EMOJI_WARN = "△"

EMOJI_ERROR = EMOJI_WARN + EMOJI_WARN


## Rich setup

from rich.highlighter import _combine_regex, RegexHighlighter  # noqa: E402
from rich.style import Style  # noqa: E402


class JumperHighlighter(RegexHighlighter):
    """
    Highlighter for console logs: warning symbols, numbered entries, and paths.
    """

    base_style = "jumper."
    highlights = [
        _combine_regex(
            f"(?P<warn>{re.escape(EMOJI_WARN)})",
            r"^(?P<entry_index>\d+\.) ",
            r"(?P<path>\B(/[-\w._+]+)*\/)(?P<filename>[-\w._+]*)?",
            r"(?P<code_span>`[^`\n]+`)",
        ),
    ]


RICH_STYLES = {
    "jumper.warn": Style(color=COLOR_ERROR),
    "jumper.entry_index": Style(color=COLOR_KEY),
    "jumper.path": Style(color=COLOR_PATH),
    "jumper.filename": Style(color=COLOR_PATH, bold=True),
    "jumper.code_span": Style(color=COLOR_KEY, italic=False),
}
