from contextlib import contextmanager
from typing import Generator, Optional

from jumper.config.settings import global_settings
from jumper.file_storage.bookmark_store import BookmarkStore, FileBookmarkStore

_store_override: Optional[BookmarkStore] = None


def current_store() -> BookmarkStore:
    """
    The store commands operate on: the bookmark file from the current settings,
    created empty if it doesn't exist yet, unless overridden with `use_store()`.
    """
    if _store_override is not None:
        return _store_override

    store = FileBookmarkStore(global_settings().store_path)
    store.ensure_exists()
    return store


@contextmanager
def use_store(store: BookmarkStore) -> Generator[BookmarkStore, None, None]:
    """
    Temporarily point all commands at a different store (e.g. an in-memory one).
    """
    global _store_override
    old_store = _store_override
    _store_override = store
    try:
        yield store
    finally:
        _store_override = old_store
