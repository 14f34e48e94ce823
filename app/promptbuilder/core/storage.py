"""Storage backends for the collection state.

A backend only moves a serialized blob in and out of some medium. It has
no knowledge of the collection format; CollectionStore owns that.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from tempfile import NamedTemporaryFile

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Abstract reader-writer for the serialized collection.

    Example:
        >>> backend = MemoryBackend()
        >>> backend.write('{"files": []}')
        >>> backend.read()
        '{"files": []}'
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the stored state."""

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored text, or None if nothing has been stored yet.

        Raises:
            OSError: If the medium exists but cannot be read.
        """

    @abstractmethod
    def write(self, text: str) -> None:
        """Replace the stored text.

        Either the new text is fully stored or the previous text is kept.

        Raises:
            OSError: If the text cannot be stored.
        """


class JsonFileBackend(StorageBackend):
    """Stores the collection in a single file on disk.

    The parent directory is created on first write. Writes go to a
    temporary file in the same directory and are moved into place with
    os.replace(), so a failed write never truncates the existing state.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Path to the state file."""
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def read(self) -> str | None:
        if not self._path.exists():
            return None
        return self._path.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self._path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                f.write(text)
            os.replace(str(tmp_path), str(self._path))
        except OSError:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise
        logger.debug("Wrote state file %s", self._path)


class MemoryBackend(StorageBackend):
    """Keeps the collection in memory. Used by tests and dry runs."""

    def __init__(self, text: str | None = None) -> None:
        self._text = text
        self.writes = 0

    @property
    def location(self) -> str:
        return "<memory>"

    def read(self) -> str | None:
        return self._text

    def write(self, text: str) -> None:
        self._text = text
        self.writes += 1
