"""
Persistence for the bookmark list: a plain text file with one absolute path
per line. Reads are fresh on every call and nothing is cached between calls.
There's no locking, so two processes mutating at once can lose an update.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List

from strif import atomic_output_file

from jumper.config.logger import get_logger
from jumper.errors import StoreError

log = get_logger(__name__)


class BookmarkStore(ABC):
    """
    Storage for the ordered list of bookmarked paths. The store doesn't
    de-duplicate; callers check `contains()` before `append()`.
    """

    @abstractmethod
    def load_all(self) -> List[str]:
        """All paths in stored order, stripped, with blank lines dropped."""

    @abstractmethod
    def append(self, path: str) -> None:
        """Add one path at the end."""

    @abstractmethod
    def rewrite(self, paths: Iterable[str]) -> None:
        """Replace the whole list."""

    def contains(self, path: str) -> bool:
        return path in self.load_all()


def _clean_lines(lines: Iterable[str]) -> List[str]:
    return [line for line in (raw.strip() for raw in lines) if line]


class FileBookmarkStore(BookmarkStore):
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def ensure_exists(self) -> None:
        """
        Create the parent directory and an empty file if the store doesn't exist yet.
        """
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                log.info("Created bookmark file: %s", self.path)
        except OSError as e:
            raise StoreError(f"Could not create bookmark file {self.path}: {e}") from e

    def load_all(self) -> List[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return _clean_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Could not read bookmark file {self.path}: {e}") from e

    def append(self, path: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(path + "\n")
        except OSError as e:
            raise StoreError(f"Could not write bookmark file {self.path}: {e}") from e
        log.info("Appended bookmark: %s", path)

    def rewrite(self, paths: Iterable[str]) -> None:
        # Write through symlinks so a linked bookmark file stays linked.
        target = self.path.resolve()
        try:
            with atomic_output_file(str(target)) as tmp_path:
                with open(tmp_path, "w", encoding="utf-8") as f:
                    for path in paths:
                        f.write(path + "\n")
        except OSError as e:
            raise StoreError(f"Could not write bookmark file {self.path}: {e}") from e
        log.info("Rewrote bookmark file: %s", target)

    def __repr__(self) -> str:
        return f"FileBookmarkStore({str(self.path)!r})"


class MemoryBookmarkStore(BookmarkStore):
    """
    In-memory store with the same contract, for tests and embedding.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self.paths: List[str] = list(paths)

    def load_all(self) -> List[str]:
        return _clean_lines(self.paths)

    def append(self, path: str) -> None:
        self.paths.append(path)

    def rewrite(self, paths: Iterable[str]) -> None:
        self.paths = list(paths)

    def __repr__(self) -> str:
        return f"MemoryBookmarkStore({self.paths!r})"


## Tests


def test_file_store_round_trip(tmp_path):
    store = FileBookmarkStore(tmp_path / "state" / "folders")
    store.ensure_exists()
    assert store.path.read_text() == ""
    assert store.load_all() == []

    store.append("/home/u/proj")
    store.append("/home/u/docs")
    assert store.load_all() == ["/home/u/proj", "/home/u/docs"]
    assert store.path.read_text() == "/home/u/proj\n/home/u/docs\n"
    assert store.contains("/home/u/docs")
    assert not store.contains("/home/u/docs/")

    store.rewrite(["/home/u/docs"])
    assert store.path.read_text() == "/home/u/docs\n"

    store.rewrite([])
    assert store.path.read_text() == ""


def test_file_store_ignores_blank_lines(tmp_path):
    path = tmp_path / "folders"
    path.write_text("\n  /a/b  \n\n\t\n/c/d\n")
    store = FileBookmarkStore(path)
    store.ensure_exists()
    assert store.load_all() == ["/a/b", "/c/d"]
    assert path.read_text() == "\n  /a/b  \n\n\t\n/c/d\n"


def test_file_store_rewrite_keeps_symlink(tmp_path):
    real = tmp_path / "real_folders"
    real.write_text("/a\n/b\n")
    link = tmp_path / "folders"
    link.symlink_to(real)

    store = FileBookmarkStore(link)
    store.rewrite(["/b"])
    assert link.is_symlink()
    assert real.read_text() == "/b\n"


def test_file_store_errors(tmp_path):
    store = FileBookmarkStore(tmp_path / "missing" / "folders")
    try:
        store.load_all()
        assert False, "Expected StoreError"
    except StoreError as e:
        assert isinstance(e, IOError)
        assert "missing" in str(e)


def test_file_store_undecodable(tmp_path):
    path = tmp_path / "folders"
    path.write_bytes(b"/a/\xff\n")
    try:
        FileBookmarkStore(path).load_all()
        assert False, "Expected StoreError"
    except StoreError as e:
        assert "Could not read" in str(e)


def test_memory_store():
    store = MemoryBookmarkStore(["/a/b", " ", "/c/d"])
    assert store.load_all() == ["/a/b", "/c/d"]
    store.append("/e/f")
    assert store.contains("/e/f")
    store.rewrite(["/c/d"])
    assert store.load_all() == ["/c/d"]
