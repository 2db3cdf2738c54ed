"""
The bookmark commands: add the current folder, list, remove, and jump.
"""

import os
from typing import Optional

from jumper.commands.command_registry import jumper_command
from jumper.config.logger import get_logger
from jumper.errors import InvalidState, MissingInput, NotFound
from jumper.file_storage.stores import current_store
from jumper.model.bookmarks_model import numbered
from jumper.resolver import resolve_or_raise
from jumper.text_ui.command_output import output_raw, output_result, output_status

log = get_logger(__name__)

LIST_HEADER = "Available folders:"

EMPTY_LIST_HINT = "No folders in jump list. Use 'jumper add' to add the current folder."


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError as e:
        raise InvalidState(f"Could not get current directory: {e}") from e


@jumper_command
def add() -> None:
    """
    Add the current folder to the jump list.
    """
    current_dir = _current_dir()
    # Lines are stripped on read, so surrounding whitespace or a newline would make
    # the path come back as a different folder and never match on the next `add`.
    if current_dir != current_dir.strip() or "\n" in current_dir:
        raise InvalidState(
            f"Can't bookmark a folder with a newline or surrounding whitespace: {current_dir!r}"
        )
    store = current_store()

    # Exact string match only: no normalization of symlinks, case, or slashes.
    if store.contains(current_dir):
        output_result("Current folder already in the list: %s", current_dir)
        return

    store.append(current_dir)
    output_result("Added current folder to jump list: %s", current_dir)


@jumper_command
def list_() -> None:
    """
    List all folders in the jump list, numbered from 1.
    """
    paths = current_store().load_all()
    if not paths:
        output_status(EMPTY_LIST_HINT)
        return

    output_result(LIST_HEADER)
    for bookmark in numbered(paths):
        output_result(str(bookmark))


@jumper_command
def remove(token: Optional[str] = None) -> None:
    """
    Remove a folder from the jump list, by number or folder name.
    Later folders move up one place.
    """
    if token is None:
        raise MissingInput("Usage: jumper remove <folder-name-or-number>")

    store = current_store()
    paths = store.load_all()
    if not paths:
        raise NotFound("No folders in jump list.")

    bookmark = resolve_or_raise(token, paths)
    del paths[bookmark.index - 1]
    store.rewrite(paths)

    log.info("Removed bookmark %s", bookmark)
    output_result("Removed folder: %s", bookmark.path)


def jump(token: str) -> None:
    """
    Print the folder for a number or folder name, with no newline, so a shell
    function can `cd` to it. Raises `NotFound` without printing anything if
    there is no match.
    """
    paths = current_store().load_all()
    bookmark = resolve_or_raise(token, paths)
    log.info("Jump %r -> %s", token, bookmark.path)
    output_raw(bookmark.path)


## Tests


def _run(func, *args) -> str:
    from jumper.text_ui.command_output import output_as_string

    return output_as_string(func, *args)


def test_add_is_idempotent(monkeypatch, tmp_path):
    from jumper.file_storage.bookmark_store import MemoryBookmarkStore
    from jumper.file_storage.stores import use_store

    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()
    with use_store(MemoryBookmarkStore()) as store:
        assert _run(add) == f"Added current folder to jump list: {cwd}\n"
        assert _run(add) == f"Current folder already in the list: {cwd}\n"
        assert store.load_all() == [cwd]


def test_add_rejects_unstorable_paths(monkeypatch):
    from jumper.file_storage.bookmark_store import MemoryBookmarkStore
    from jumper.file_storage.stores import use_store

    for cwd in ["/home/u/proj ", " /home/u/proj", "/home/u/a\nb"]:
        monkeypatch.setattr(os, "getcwd", lambda: cwd)
        with use_store(MemoryBookmarkStore(["/home/u/proj"])) as store:
            try:
                add()
                assert False, "Expected InvalidState"
            except InvalidState:
                pass
            assert store.load_all() == ["/home/u/proj"]


def test_list():
    from jumper.file_storage.bookmark_store import MemoryBookmarkStore
    from jumper.file_storage.stores import use_store

    with use_store(MemoryBookmarkStore()):
        assert _run(list_) == EMPTY_LIST_HINT + "\n"

    with use_store(MemoryBookmarkStore(["/a/b", "/c/d"])):
        assert _run(list_) == "Available folders:\n1. /a/b\n2. /c/d\n"


def test_remove_shifts_later_entries():
    from jumper.file_storage.bookmark_store import MemoryBookmarkStore
    from jumper.file_storage.stores import use_store

    with use_store(MemoryBookmarkStore(["/a/b", "/c/d", "/e/f"])) as store:
        assert _run(remove, "1") == "Removed folder: /a/b\n"
        assert store.load_all() == ["/c/d", "/e/f"]
        assert _run(remove, "f") == "Removed folder: /e/f\n"
        assert store.load_all() == ["/c/d"]


def test_remove_not_found_leaves_list_unchanged():
    from jumper.file_storage.bookmark_store import MemoryBookmarkStore
    from jumper.file_storage.stores import use_store

    for paths, token in [(["/a/b"], "2"), (["/a/b"], "zzz"), ([], "1")]:
        with use_store(MemoryBookmarkStore(paths)) as store:
            try:
                remove(token)
                assert False, "Expected NotFound"
            except NotFound:
                pass
            assert store.load_all() == paths

    try:
        remove()
        assert False, "Expected MissingInput"
    except MissingInput:
        pass


def test_jump():
    from io import StringIO

    from jumper.file_storage.bookmark_store import MemoryBookmarkStore
    from jumper.file_storage.stores import use_store
    from jumper.text_ui.command_output import redirect_output

    with use_store(MemoryBookmarkStore(["/a/b", "/c/d"])):
        assert _run(jump, "1") == "/a/b"
        assert _run(jump, "d") == "/c/d"
        assert _run(jump, "/a/b") == "/a/b"

        buffer = StringIO()
        with redirect_output(buffer):
            try:
                jump("99")
                assert False, "Expected NotFound"
            except NotFound:
                pass
        assert buffer.getvalue() == ""
