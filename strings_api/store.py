import logging
import threading

from .exceptions import StringAlreadyExists, StringNotFound
from .utils import compute_sha256

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory, content-addressed store of StringRecord objects.

    Records are keyed by the SHA-256 hex digest of their value. A single lock
    covers the whole map and is held for the full duration of every
    operation, reads included, so store operations are linearized. Hashing
    happens before the lock is taken. Nothing is persisted.
    """

    def __init__(self):
        self._records = {}
        self._lock = threading.Lock()

    def create(self, record):
        with self._lock:
            if record.id in self._records:
                logger.debug("Rejecting duplicate string id=%s", record.id)
                raise StringAlreadyExists()
            self._records[record.id] = record
        logger.info("Stored string id=%s length=%s", record.id, record.properties.length)
        return record

    def get_by_value(self, value):
        record_id = compute_sha256(value)
        with self._lock:
            record = self._records.get(record_id)
        if record is None:
            logger.debug("String id=%s not found", record_id)
            raise StringNotFound()
        return record

    def list_all(self):
        """Return a snapshot of every stored record. Order is unspecified."""
        with self._lock:
            return list(self._records.values())

    def delete_by_value(self, value):
        record_id = compute_sha256(value)
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is None:
            logger.debug("String id=%s not found for delete", record_id)
            raise StringNotFound()
        logger.info("Deleted string id=%s", record_id)

    def __contains__(self, value):
        record_id = compute_sha256(value)
        with self._lock:
            return record_id in self._records

    def __len__(self):
        with self._lock:
            return len(self._records)


_default_store = None
_default_store_lock = threading.Lock()


def get_default_store():
    """Return the process-wide store shared by the API views."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = StringStore()
        return _default_store
