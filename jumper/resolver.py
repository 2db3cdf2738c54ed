"""
Map a user-supplied token to a bookmark. A token is either a 1-based index
into the list or a folder name (the final path segment, or the full path).
"""

from typing import List, Optional, Sequence

from jumper.errors import NotFound
from jumper.model.bookmarks_model import base_name, Bookmark, parse_index


def resolve(token: str, paths: Sequence[str]) -> Optional[Bookmark]:
    """
    Look up a token. An in-range index wins. Otherwise the first entry whose
    name or full path equals the token matches. Returns None if nothing does.
    """
    index = parse_index(token)
    if index is not None and 1 <= index <= len(paths):
        return Bookmark(index, paths[index - 1])

    for i, path in enumerate(paths, start=1):
        if base_name(path) == token or path == token:
            return Bookmark(i, path)

    return None


def resolve_or_raise(token: str, paths: Sequence[str]) -> Bookmark:
    bookmark = resolve(token, paths)
    if not bookmark:
        raise NotFound(f"Folder not found: {token}")
    return bookmark


def folder_names(paths: Sequence[str]) -> List[str]:
    """
    Distinct folder names in stored order, for completion.
    """
    return list(dict.fromkeys(base_name(path) for path in paths))


## Tests


def test_resolve():
    paths = ["/a/b", "/c/d"]
    assert resolve("1", paths) == Bookmark(1, "/a/b")
    assert resolve("2", paths) == Bookmark(2, "/c/d")
    assert resolve("d", paths) == Bookmark(2, "/c/d")
    assert resolve("/a/b", paths) == Bookmark(1, "/a/b")
    assert resolve("99", paths) is None
    assert resolve("0", paths) is None
    assert resolve("-1", paths) is None
    assert resolve("a", paths) is None
    assert resolve("1", []) is None


def test_resolve_first_match_wins():
    paths = ["/x/proj", "/y/proj", "/z/1"]
    assert resolve("proj", paths) == Bookmark(1, "/x/proj")
    # Index lookup takes priority over a folder with a numeric name.
    assert resolve("1", paths) == Bookmark(1, "/x/proj")
    assert resolve("2", paths) == Bookmark(2, "/y/proj")
    # Out of range numbers can still match by name.
    assert resolve("3", ["/z/3"]) == Bookmark(1, "/z/3")


def test_resolve_or_raise():
    try:
        resolve_or_raise("nope", ["/a/b"])
        assert False, "Expected NotFound"
    except NotFound as e:
        assert str(e) == "Folder not found: nope"


def test_folder_names():
    assert folder_names(["/x/proj", "/y/proj", "/z/docs", "/"]) == ["proj", "docs", "/"]
