import logging
import threading
from functools import cache
from logging import Formatter
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from jumper.config.settings import global_settings, LogLevel, resolve_and_create_dirs
from jumper.config.text_styles import EMOJI_ERROR, EMOJI_WARN, JumperHighlighter, RICH_STYLES

LOG_FILE_NAME = "jumper.log"

_log_lock = threading.RLock()

_file_handler: Optional[logging.Handler] = None

_console_handler: Optional[logging.Handler] = None


def log_file_path() -> Path:
    return global_settings().log_dir / LOG_FILE_NAME


@cache
def get_highlighter():
    return JumperHighlighter()


@cache
def get_theme():
    return Theme(RICH_STYLES)


@cache
def get_error_console() -> Console:
    """
    Console for logs and error messages. This is always stderr, since stdout
    is reserved for command output that the shell wrapper may capture.
    """
    return Console(theme=get_theme(), highlighter=get_highlighter(), stderr=True)


def logging_setup():
    """
    Set up or reset logging setup. Call at initial run and again if the state
    directory changes. Replaces all previous handlers on the root logger.
    """
    global _file_handler, _console_handler

    settings = global_settings()
    resolve_and_create_dirs(settings.log_dir, is_dir=True)

    # Verbose logging to file, important logging to console.
    file_handler = logging.FileHandler(log_file_path(), encoding="utf-8")
    file_handler.setLevel(settings.file_log_level.value)
    file_handler.setFormatter(Formatter("%(asctime)s %(levelname).1s %(name)s - %(message)s"))

    console_handler = RichHandler(
        console=get_error_console(),
        level=settings.console_log_level.value,
        show_time=False,
        show_path=False,
        show_level=False,
        highlighter=get_highlighter(),
        markup=False,
    )
    console_handler.setLevel(settings.console_log_level.value)
    console_handler.setFormatter(Formatter("%(message)s"))

    root = logging.getLogger()
    root.setLevel(min(settings.file_log_level.value, settings.console_log_level.value))
    # Remove any existing handlers.
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler in (_file_handler, _console_handler):
            handler.close()
    root.addHandler(console_handler)
    root.addHandler(file_handler)

    _file_handler = file_handler
    _console_handler = console_handler


def prefix(line, emoji: str = "", warn_emoji: str = ""):
    emojis = f"{warn_emoji}{emoji}".strip()
    return " ".join(filter(None, [emojis, line]))


def prefix_args(args, emoji: str = "", warn_emoji: str = ""):
    if len(args) > 0:
        args = (prefix(args[0], emoji, warn_emoji),) + args[1:]
    return args


class CustomLogger:
    """
    Custom logger to be clearer about user messages.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, *args, **kwargs):
        self.logger.debug(*args, **kwargs)

    def info(self, *args, **kwargs):
        self.logger.info(*args, **kwargs)

    def message(self, *args, **kwargs):
        self.logger.warning(*args, **kwargs)

    def warning(self, *args, **kwargs):
        self.logger.warning(*prefix_args(args, warn_emoji=EMOJI_WARN), **kwargs)

    def error(self, *args, **kwargs):
        self.logger.error(*prefix_args(args, warn_emoji=EMOJI_ERROR), **kwargs)

    def log(self, level: LogLevel, *args, **kwargs):
        getattr(self, level.name)(*args, **kwargs)

    # Fallback for other attributes/methods.
    def __getattr__(self, attr):
        return getattr(self.logger, attr)


def get_logger(name: str):
    return CustomLogger(name)


def reset_logging():
    """
    Reinstall handlers, picking up the current settings (e.g. a new state directory).
    """
    with _log_lock:
        logging_setup()
        get_logger(__name__).info("Logging to: %s", log_file_path())
