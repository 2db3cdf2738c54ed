import pytest

from jumper.config.logger import reset_logging
from jumper.config.settings import reset_global_settings


@pytest.fixture
def jumper_home(tmp_path, monkeypatch):
    """
    A fresh home directory and jumper state directory for one test.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("JUMPER_DIR", str(tmp_path / ".jumper"))
    monkeypatch.delenv("JUMPER_LOG_LEVEL", raising=False)
    reset_global_settings()
    reset_logging()
    yield tmp_path
    reset_global_settings()
