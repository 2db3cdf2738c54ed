import os
import threading
from contextlib import contextmanager
from enum import Enum
from logging import DEBUG, ERROR, INFO, WARNING
from pathlib import Path
from typing import List, Optional

from pydantic.dataclasses import dataclass

from jumper.errors import InvalidInput


APP_NAME = "jumper"

DOT_DIR = "~/.jumper"

STORE_FILENAME = "folders"

SCRIPT_FILENAME = "jumper.sh"

RC_FILES = [".bashrc", ".bash_aliases"]

JUMPER_DIR_ENV = "JUMPER_DIR"

LOG_LEVEL_ENV = "JUMPER_LOG_LEVEL"


def resolve_and_create_dirs(path: Path | str, is_dir: bool = False) -> Path:
    """
    Resolve a path to an absolute path, handling ~ for the home directory
    and creating any missing parent directories.
    """
    full_path = Path(path).expanduser().resolve()
    if not full_path.exists():
        if is_dir:
            os.makedirs(full_path, exist_ok=True)
        else:
            os.makedirs(full_path.parent, exist_ok=True)
    return full_path


class LogLevel(Enum):
    debug = DEBUG
    info = INFO
    warning = WARNING
    message = WARNING  # Same as warning, just for important console messages.
    error = ERROR

    @classmethod
    def parse(cls, level_str: str):
        canon_name = level_str.strip().lower()
        if canon_name == "warn":
            canon_name = "warning"
        try:
            return cls[canon_name]
        except KeyError:
            raise InvalidInput(
                f"Invalid log level: `{level_str}`. Valid options are: {', '.join(f'`{name}`' for name in cls.__members__)}"
            )

    def __str__(self):
        return self.name


@dataclass
class Settings:
    jumper_dir: Path
    """Directory holding the bookmark file, the shell script, and logs."""

    home_dir: Path
    """The user's home directory, where shell init files are looked up."""

    store_filename: str
    """Name of the bookmark file within `jumper_dir`."""

    script_filename: str
    """Name of the generated shell script within `jumper_dir`."""

    rc_files: List[str]
    """Shell init files, relative to `home_dir`, tried in order by `setup`."""

    console_log_level: LogLevel
    """The log level for console-based logging."""

    file_log_level: LogLevel
    """The log level for file-based logging."""

    @property
    def store_path(self) -> Path:
        return self.jumper_dir / self.store_filename

    @property
    def script_path(self) -> Path:
        return self.jumper_dir / self.script_filename

    @property
    def log_dir(self) -> Path:
        return self.jumper_dir / "logs"


def _settings_from_env() -> Settings:
    jumper_dir = os.environ.get(JUMPER_DIR_ENV) or DOT_DIR
    log_level = os.environ.get(LOG_LEVEL_ENV)
    return Settings(
        jumper_dir=Path(jumper_dir).expanduser().absolute(),
        home_dir=Path.home(),
        store_filename=STORE_FILENAME,
        script_filename=SCRIPT_FILENAME,
        rc_files=list(RC_FILES),
        console_log_level=LogLevel.parse(log_level) if log_level else LogLevel.warning,
        file_log_level=LogLevel.info,
    )


_settings: Optional[Settings] = None

_settings_lock = threading.RLock()


def global_settings() -> Settings:
    """
    Read access to global settings. These are read from the environment on first use.
    """
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = _settings_from_env()
        return _settings


def reset_global_settings() -> None:
    """
    Drop current settings so they are read from the environment again.
    """
    global _settings
    with _settings_lock:
        _settings = None


@contextmanager
def update_global_settings():
    """
    Context manager for thread-safe updates to global settings.
    """
    with _settings_lock:
        yield global_settings()


## Tests


def test_log_level_parse():
    assert LogLevel.parse("WARN") == LogLevel.warning
    assert LogLevel.parse(" debug ") == LogLevel.debug
    try:
        LogLevel.parse("loud")
        assert False, "Expected InvalidInput"
    except InvalidInput as e:
        assert "`loud`" in str(e)


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv(JUMPER_DIR_ENV, str(tmp_path / "state"))
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    monkeypatch.setenv("HOME", str(tmp_path))
    reset_global_settings()
    try:
        settings = global_settings()
        assert settings.store_path == tmp_path / "state" / "folders"
        assert settings.script_path == tmp_path / "state" / "jumper.sh"
        assert settings.home_dir == tmp_path
        assert settings.console_log_level == LogLevel.error
        assert global_settings() is settings

        with update_global_settings() as s:
            s.rc_files = [".zshrc"]
        assert global_settings().rc_files == [".zshrc"]
    finally:
        reset_global_settings()
