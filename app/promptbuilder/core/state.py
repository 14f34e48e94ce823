"""Collection state management.

This module provides the CollectionStore class, the single owner of the
tracked file collection. Every mutation is persisted before the in-memory
view changes, so a failed save leaves both the file and the store as they
were.
"""

import json
import logging
import os
from collections.abc import Iterable

from pydantic import ValidationError

from promptbuilder.core.storage import StorageBackend
from promptbuilder.models.entry import Collection, FileEntry

logger = logging.getLogger(__name__)


class StateIOError(Exception):
    """Raised when the persisted collection cannot be read or written."""


class CollectionStore:
    """Owns the tracked collection for the duration of one command.

    Storage location: ~/.config/promptbuilder/state.json by default.

    The state is a JSON object ``{"files": [...]}`` where each record
    holds ``relative_path`` and ``absolute_path``. A bare JSON list of
    records is also accepted when loading.
    """

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend
        self._collection: Collection | None = None

    @property
    def location(self) -> str:
        """Human-readable location of the persisted state."""
        return self._backend.location

    def load(self) -> Collection:
        """Read the persisted collection.

        An absent or blank state yields an empty collection. The result is
        cached for the lifetime of the store.

        Returns:
            The current Collection.

        Raises:
            StateIOError: If the state exists but cannot be read or parsed.
        """
        if self._collection is not None:
            return self._collection

        try:
            text = self._backend.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StateIOError(f"Failed to read state from {self.location}: {e}") from e

        if text is None or not text.strip():
            self._collection = Collection()
            return self._collection

        try:
            data = json.loads(text)
            if isinstance(data, list):
                data = {"files": data}
            self._collection = Collection.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise StateIOError(f"Failed to parse state file {self.location}: {e}") from e

        logger.debug("Loaded %d entries from %s", len(self._collection), self.location)
        return self._collection

    def list(self) -> list[FileEntry]:
        """Return tracked entries in stored (append) order.

        Entries are not checked against the filesystem; stale entries are
        returned as they are.

        Raises:
            StateIOError: If the state cannot be loaded.
        """
        return list(self.load().files)

    def add(self, entries: Iterable[FileEntry]) -> tuple[int, int]:
        """Append entries that are not tracked yet and persist the result.

        Each candidate's absolute path is canonicalized. Candidates already
        in the collection, or repeated within the batch, are skipped. The
        whole batch is saved once; if the save fails nothing is added.

        Args:
            entries: Candidate entries.

        Returns:
            Tuple of (added_count, skipped_count).

        Raises:
            StateIOError: If the state cannot be loaded or saved.
        """
        current = self.load()
        seen = current.paths()
        new_entries: list[FileEntry] = []
        skipped = 0

        for entry in entries:
            canonical = os.path.realpath(entry.absolute_path)
            if canonical in seen:
                logger.debug("Skipping duplicate %s", canonical)
                skipped += 1
                continue
            seen.add(canonical)
            if canonical != entry.absolute_path:
                entry = entry.model_copy(update={"absolute_path": canonical})
            new_entries.append(entry)

        if new_entries:
            self._save(Collection(files=[*current.files, *new_entries]))

        return len(new_entries), skipped

    def clear(self) -> None:
        """Persist an empty collection.

        Clearing an empty collection succeeds and still writes the state.

        Raises:
            StateIOError: If the state cannot be saved.
        """
        self._save(Collection())

    def _save(self, collection: Collection) -> None:
        """Serialize and persist a collection, then adopt it in memory."""
        text = json.dumps(collection.model_dump(mode="json"), indent=2)
        try:
            self._backend.write(text)
        except OSError as e:
            raise StateIOError(f"Failed to write state to {self.location}: {e}") from e
        self._collection = collection
