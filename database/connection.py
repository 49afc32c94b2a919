"""
Document store management.
Handles loading, saving, and the single-writer transaction around both.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager

from flask import current_app

from database.schema import empty_document, normalize_document
from models.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

# One lock per store file, shared by every DocumentStore on that path
_locks = {}
_locks_guard = threading.Lock()


def _lock_for(path: str) -> threading.RLock:
    key = os.path.abspath(path)
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.RLock()
        return _locks[key]


class DocumentStore:
    """
    JSON document holding users, reservations and food orders.

    The document is always read and written in full. Every read-modify-write
    goes through transaction(), which holds the file's lock from load to save.
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = _lock_for(path)

    def load(self) -> dict:
        """
        Read the whole document.

        Returns:
            dict: Document with every collection present (empty if no file)

        Raises:
            StoreUnavailable: If the file cannot be read or parsed
        """
        with self._lock:
            if not os.path.exists(self.path):
                return empty_document()
            try:
                with open(self.path, encoding='utf-8') as f:
                    data = f.read()
                if not data.strip():
                    return empty_document()
                return normalize_document(json.loads(data))
            except (OSError, ValueError) as e:
                logger.error(f'Error reading store {self.path}: {e}', exc_info=True)
                raise StoreUnavailable('No se pudo leer la base de datos.') from e

    def save(self, state: dict) -> None:
        """
        Replace the whole document atomically.

        Args:
            state: Full document to write

        Raises:
            StoreUnavailable: If the file cannot be written
        """
        with self._lock:
            directory = os.path.dirname(os.path.abspath(self.path))
            tmp_path = None
            try:
                os.makedirs(directory, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(state, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except (OSError, TypeError, ValueError) as e:
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)
                logger.error(f'Error writing store {self.path}: {e}', exc_info=True)
                raise StoreUnavailable('No se pudo escribir en la base de datos.') from e

    def snapshot(self) -> dict:
        """Read-only view of the document (consistent with concurrent writers)."""
        return self.load()

    @contextmanager
    def transaction(self):
        """
        Load, yield for changes, then save, all under the store lock.

        If the body raises, nothing is written and the error propagates.

        Usage:
            with get_store().transaction() as state:
                state['reservations'].append(reservation)
        """
        with self._lock:
            state = self.load()
            yield state
            self.save(state)


def init_store(app):
    """Attach the document store to the app."""
    app.extensions['document_store'] = DocumentStore(app.config['STORE_PATH'])


def get_store() -> DocumentStore:
    """
    Get the document store of the current app.

    Returns:
        DocumentStore
    """
    return current_app.extensions['document_store']


def init_db():
    """
    Initialize store: replace the document with an empty one and seed it.
    WARNING: This will delete all existing data!
    """
    from database.seed import seed_database

    store = get_store()
    with store.transaction() as state:
        state.clear()
        state.update(empty_document())
        seed_database(state)

    logger.info(f'Store initialized at {store.path}')
