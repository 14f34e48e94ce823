"""Glob pattern expansion into canonical file paths.

Patterns are expanded one at a time against a base directory. Only files
leave this module; directories are never descended into unless the
pattern asks for it with a ``**`` segment.
"""

import glob
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from promptbuilder.models.issues import Issue, IssueKind

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Resolution:
    """Result of expanding a list of patterns.

    Attributes:
        patterns: The patterns that were expanded.
        paths: Canonical absolute file paths, first occurrence order.
        matched: Each path as it was reached from the base directory,
            before symlinks are resolved. Parallel to ``paths``.
        unmatched: Patterns that matched no file.
        duplicates: Matches dropped because their canonical path was
            already produced.
        issues: Matches that could not be canonicalized.
    """

    patterns: list[str] = field(default_factory=lambda: [])
    paths: list[Path] = field(default_factory=lambda: [])
    matched: list[Path] = field(default_factory=lambda: [])
    unmatched: list[str] = field(default_factory=lambda: [])
    duplicates: int = 0
    issues: list[Issue] = field(default_factory=lambda: [])

    @property
    def nothing_matched(self) -> bool:
        """True when no pattern matched a single file."""
        return len(self.unmatched) == len(self.patterns)


class PathResolver:
    """Expands glob patterns relative to a base directory.

    Args:
        base_dir: Directory relative patterns are expanded against.
        include_hidden: Let wildcards match names starting with a dot.
    """

    def __init__(self, base_dir: Path, *, include_hidden: bool = False) -> None:
        self._base_dir = base_dir
        self._include_hidden = include_hidden

    def resolve(self, patterns: list[str]) -> Resolution:
        """Expand patterns in order into a deduplicated list of files.

        Within a pattern, matches are taken in lexicographic order. A path
        reached again, by the same or a later pattern, is counted in
        ``duplicates`` instead of being returned twice.

        Args:
            patterns: Glob patterns; literal paths are allowed.

        Returns:
            Resolution with the collected paths and diagnostics.
        """
        result = Resolution(patterns=list(patterns))
        seen: set[Path] = set()

        for pattern in patterns:
            matched_files = 0
            for match in self._expand(pattern):
                candidate = self._base_dir / match
                if not os.path.isfile(candidate):
                    continue

                matched_files += 1
                try:
                    canonical = candidate.resolve(strict=True)
                except (OSError, RuntimeError) as e:
                    logger.warning("Cannot resolve %s: %s", candidate, e)
                    result.issues.append(
                        Issue(
                            kind=IssueKind.PATH_ERROR,
                            subject=str(candidate),
                            message=f"Cannot resolve path: {e}",
                        )
                    )
                    continue

                if canonical in seen:
                    result.duplicates += 1
                    continue
                seen.add(canonical)
                result.paths.append(canonical)
                result.matched.append(Path(os.path.normpath(candidate)))

            if matched_files == 0:
                logger.debug("Pattern matched no files: %s", pattern)
                result.unmatched.append(pattern)

        return result

    def _expand(self, pattern: str) -> list[str]:
        """Return the sorted raw glob matches for one pattern."""
        expanded = os.path.expanduser(pattern)
        matches = glob.glob(
            expanded,
            root_dir=self._base_dir,
            recursive=True,
            include_hidden=self._include_hidden,
        )
        if not matches and os.path.isfile(self._base_dir / expanded):
            # Literal path whose name contains glob characters, e.g. app/[id]/page.tsx
            return [expanded]
        return sorted(matches)


def resolve(patterns: list[str], base_dir: Path, *, include_hidden: bool = False) -> Resolution:
    """Expand patterns against base_dir.

    Convenience wrapper around PathResolver.

    Args:
        patterns: Glob patterns; literal paths are allowed.
        base_dir: Directory relative patterns are expanded against.
        include_hidden: Let wildcards match names starting with a dot.

    Returns:
        Resolution with canonical paths and diagnostics.
    """
    return PathResolver(base_dir, include_hidden=include_hidden).resolve(patterns)
