import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def base_name(path: str) -> str:
    """
    Final segment of a path, ignoring trailing slashes, as the shell `basename`
    does. The root path's name is `/` and an empty path's name is `.`.
    """
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def parse_index(token: str) -> Optional[int]:
    """
    Parse a token as a decimal integer with an optional sign. Returns None if the
    token isn't a number at all. Range checks are up to the caller.
    """
    if not _INDEX_RE.fullmatch(token):
        return None
    return int(token)


@dataclass(frozen=True)
class Bookmark:
    """
    A bookmarked folder and its 1-based position in the list.
    """

    index: int
    path: str

    @property
    def name(self) -> str:
        return base_name(self.path)

    def __str__(self) -> str:
        return f"{self.index}. {self.path}"


def numbered(paths: Iterable[str]) -> Iterator[Bookmark]:
    for i, path in enumerate(paths, start=1):
        yield Bookmark(i, path)


## Tests


def test_base_name():
    assert base_name("/home/u/proj") == "proj"
    assert base_name("/home/u/proj/") == "proj"
    assert base_name("/") == "/"
    assert base_name("//") == "/"
    assert base_name("proj") == "proj"
    assert base_name("") == "."


def test_parse_index():
    assert parse_index("1") == 1
    assert parse_index("007") == 7
    assert parse_index("+3") == 3
    assert parse_index("-2") == -2
    assert parse_index("1.5") is None
    assert parse_index("1_000") is None
    assert parse_index(" 1") is None
    assert parse_index("1\n") is None
    assert parse_index("proj") is None
    assert parse_index("") is None


def test_numbered():
    bookmarks = list(numbered(["/a/b", "/c/d"]))
    assert bookmarks == [Bookmark(1, "/a/b"), Bookmark(2, "/c/d")]
    assert bookmarks[1].name == "d"
    assert str(bookmarks[0]) == "1. /a/b"
