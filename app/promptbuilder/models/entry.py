"""Collection models persisted in the state file.

This module defines the Pydantic models representing the state.json
structure: an ordered list of tracked files keyed by canonical path.
"""

import os
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FileEntry(BaseModel):
    """A single tracked file.

    Attributes:
        relative_path: Path relative to the directory ``add`` ran in. Display only,
            fixed at add-time.
        absolute_path: Canonical, symlink-resolved absolute path. Identity key.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    relative_path: Annotated[str, Field(min_length=1, description="Display path")]
    absolute_path: Annotated[str, Field(min_length=1, description="Canonical path")]

    @field_validator("absolute_path")
    @classmethod
    def validate_absolute(cls, v: str) -> str:
        """The identity key must be an absolute path."""
        if not os.path.isabs(v):
            msg = f"absolute_path must be absolute, got {v!r}"
            raise ValueError(msg)
        return v


class Collection(BaseModel):
    """The full tracked set, in append order.

    Attributes:
        files: Tracked entries; no two share an absolute_path.
    """

    model_config = ConfigDict(extra="forbid")

    files: Annotated[
        list[FileEntry],
        Field(default_factory=list, description="Tracked files in append order"),
    ]

    @model_validator(mode="after")
    def validate_unique_paths(self) -> "Collection":
        """Reject duplicate absolute paths."""
        seen: set[str] = set()
        duplicates: set[str] = set()
        for entry in self.files:
            if entry.absolute_path in seen:
                duplicates.add(entry.absolute_path)
            seen.add(entry.absolute_path)
        if duplicates:
            msg = f"Duplicate absolute paths in collection: {sorted(duplicates)}"
            raise ValueError(msg)
        return self

    def __len__(self) -> int:
        return len(self.files)

    def paths(self) -> set[str]:
        """Return the set of tracked absolute paths."""
        return {entry.absolute_path for entry in self.files}
