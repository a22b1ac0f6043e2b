"""In-memory registry of produce entries shared by all request handlers."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request

from src.models.produce import Produce
from src.services.rwlock import ReadWriteLock
from src.services.validation import normalize_code

logger = logging.getLogger(__name__)

DUPLICATE_ENTRY = "entry already exists"
NO_ENTRY = "entry does not exist"


class RegistryError(RuntimeError):
    """Base exception for registry errors."""


class DuplicateProduceError(RegistryError):
    """Raised when adding a produce code that is already registered."""

    def __init__(self, code: str) -> None:
        super().__init__(DUPLICATE_ENTRY)
        self.code = code


class ProduceNotFoundError(RegistryError):
    """Raised when deleting a produce code that is not registered."""

    def __init__(self, code: str) -> None:
        super().__init__(NO_ENTRY)
        self.code = code


class ProduceRegistry:
    """Ordered produce store with a code index for constant-time lookups.

    ``_records`` keeps insertion order for listings while ``_codes`` answers
    membership without walking the list. Both are only mutated under the
    write lock, and a code is in ``_codes`` exactly when a record with that
    code is in ``_records``.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._records: list[Produce] = []
        self._codes: set[str] = set()

    def add(self, produce: Produce) -> Produce:
        """Store ``produce`` unless its code is already registered.

        The existence check first runs under the shared lock so duplicate
        rejections never wait on the exclusive lock. The check is repeated
        under the exclusive lock before inserting, since another writer may
        have added the same code in between.

        Raises:
            DuplicateProduceError: If the code is already present.
        """

        with self._lock.read_locked():
            exists = produce.code in self._codes
        if exists:
            logger.debug("Rejected duplicate produce %s", produce.code)
            raise DuplicateProduceError(produce.code)

        with self._lock.write_locked():
            if produce.code in self._codes:
                logger.debug("Rejected duplicate produce %s after race", produce.code)
                raise DuplicateProduceError(produce.code)
            self._records.append(produce)
            self._codes.add(produce.code)

        logger.info("Added produce %s (%s)", produce.code, produce.name)
        return produce

    def delete(self, code: str) -> None:
        """Remove the entry with ``code``, keeping the order of the rest.

        Raises:
            ProduceNotFoundError: If no entry has that code.
        """

        code = normalize_code(code)
        with self._lock.write_locked():
            for index, produce in enumerate(self._records):
                if produce.code == code:
                    del self._records[index]
                    self._codes.discard(code)
                    break
            else:
                logger.debug("Produce %s not found for deletion", code)
                raise ProduceNotFoundError(code)

        logger.info("Deleted produce %s", code)

    def list_produce(self) -> list[Produce]:
        """Return a snapshot of all entries in insertion order."""

        with self._lock.read_locked():
            return list(self._records)

    def codes(self) -> set[str]:
        with self._lock.read_locked():
            return set(self._codes)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        with self._lock.read_locked():
            return normalize_code(code) in self._codes

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._records)


def get_registry(request: Request) -> ProduceRegistry:
    """FastAPI dependency returning the registry attached to the application."""

    return request.app.state.registry


RegistryDependency = Annotated[ProduceRegistry, Depends(get_registry)]
