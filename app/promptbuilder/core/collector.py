"""Command policy for collecting files.

Wires the path resolver, the ignore filter and the collection store
together. The Typer commands are thin wrappers around these functions,
which take the store explicitly so tests can hand in an in-memory one.
"""

import logging
import os
from pathlib import Path

from promptbuilder.collection.ignore import IgnoreFilter
from promptbuilder.collection.resolver import PathResolver
from promptbuilder.core.config import Settings
from promptbuilder.core.paths import get_state_path
from promptbuilder.core.state import CollectionStore
from promptbuilder.core.storage import JsonFileBackend
from promptbuilder.models.entry import FileEntry
from promptbuilder.models.issues import AddReport, Issue, IssueKind

logger = logging.getLogger(__name__)


def open_store(settings: Settings) -> CollectionStore:
    """Create the store backed by the configured state file.

    Args:
        settings: Loaded settings (``state_file`` may relocate the state).

    Returns:
        CollectionStore reading and writing the JSON state file.
    """
    return CollectionStore(JsonFileBackend(get_state_path(settings.state_file)))


def display_path(path: Path, base_dir: Path) -> str:
    """Path shown to the user and used in the ``<file path=...>`` attribute.

    Relative to base_dir when possible (``..`` segments are allowed);
    absolute when no relative form exists, e.g. on another drive.
    """
    try:
        return os.path.relpath(path, base_dir)
    except ValueError:
        return str(path)


def add_patterns(
    store: CollectionStore,
    patterns: list[str],
    base_dir: Path,
    settings: Settings | None = None,
) -> AddReport:
    """Resolve patterns, drop ignored files and add the rest to the store.

    A problem with one path never stops the others; it is recorded in the
    report and the remaining entries are still committed. Duplicate
    matches collapsed during resolution count as skipped, like duplicates
    against the stored collection.

    Args:
        store: Store owning the collection.
        patterns: Glob patterns from the command line.
        base_dir: Directory the command runs in. Relative paths are stored
            relative to it.
        settings: Settings; defaults when None.

    Returns:
        AddReport with counts, added entries and issues.

    Raises:
        StateIOError: If the collection cannot be loaded or saved.
    """
    settings = settings or Settings()
    base_dir = base_dir.resolve()
    report = AddReport()

    resolver = PathResolver(base_dir, include_hidden=settings.include_hidden)
    resolution = resolver.resolve(patterns)
    report.issues.extend(resolution.issues)
    report.skipped += resolution.duplicates
    report.nothing_matched = resolution.nothing_matched

    for pattern in resolution.unmatched:
        report.issues.append(
            Issue(
                kind=IssueKind.NO_PATTERN_MATCHES,
                subject=pattern,
                message=f"No files matched pattern: {pattern}",
            )
        )

    ignore_filter = IgnoreFilter(
        base_dir,
        rule_files=settings.ignore_files,
        respect_rule_files=settings.respect_ignore_files,
    )

    candidates: list[FileEntry] = []
    # Rules apply to the path as reached from base_dir, not the symlink target
    for path, matched in zip(resolution.paths, resolution.matched, strict=True):
        try:
            if ignore_filter.is_ignored(matched):
                logger.debug("Ignored by rules: %s", path)
                report.ignored += 1
                continue
            candidates.append(
                FileEntry(relative_path=display_path(path, base_dir), absolute_path=str(path))
            )
        except (OSError, ValueError) as e:
            logger.warning("Cannot process %s: %s", path, e)
            report.issues.append(
                Issue(kind=IssueKind.PATH_ERROR, subject=str(path), message=str(e))
            )
    report.issues.extend(ignore_filter.issues)

    added, skipped = store.add(candidates)
    report.added = added
    report.skipped += skipped
    if added:
        report.entries = store.list()[-added:]

    logger.debug(
        "add: %d added, %d skipped, %d ignored, %d issue(s)",
        report.added,
        report.skipped,
        report.ignored,
        len(report.issues),
    )
    return report
