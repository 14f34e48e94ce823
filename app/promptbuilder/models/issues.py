"""Diagnostics and command reports.

Per-entry problems never abort a command. They are collected as Issue
values and summarized once the command has finished.
"""

from dataclasses import dataclass, field
from enum import Enum

from promptbuilder.models.entry import FileEntry


class IssueKind(str, Enum):
    """Kind of non-fatal problem found while running a command.

    Attributes:
        NO_PATTERN_MATCHES: A pattern matched no file.
        IGNORE_RULE_READ_ERROR: An ignore-rule file could not be read or parsed.
        PATH_ERROR: A matched path could not be canonicalized or inspected.
        CONTENT_READ_ERROR: A tracked file could not be read while printing.
    """

    NO_PATTERN_MATCHES = "no_pattern_matches"
    IGNORE_RULE_READ_ERROR = "ignore_rule_read_error"
    PATH_ERROR = "path_error"
    CONTENT_READ_ERROR = "content_read_error"


@dataclass(frozen=True, slots=True)
class Issue:
    """A single non-fatal problem.

    Attributes:
        kind: Category of the problem.
        subject: The pattern or path the problem is about.
        message: Human-readable description.
    """

    kind: IssueKind
    subject: str
    message: str

    @property
    def is_informational(self) -> bool:
        """Unmatched patterns are reported, but are not failures."""
        return self.kind == IssueKind.NO_PATTERN_MATCHES


@dataclass(slots=True)
class AddReport:
    """Outcome of an ``add`` invocation.

    Attributes:
        added: Number of new entries persisted.
        skipped: Duplicates against the collection or within the batch.
        ignored: Candidates excluded by ignore rules.
        entries: The entries that were added, in append order.
        issues: Non-fatal problems encountered.
        nothing_matched: True when no pattern matched a single file.
    """

    added: int = 0
    skipped: int = 0
    ignored: int = 0
    entries: list[FileEntry] = field(default_factory=lambda: [])
    issues: list[Issue] = field(default_factory=lambda: [])
    nothing_matched: bool = False

    @property
    def failures(self) -> list[Issue]:
        """Issues that represent entries which could not be processed."""
        return [issue for issue in self.issues if not issue.is_informational]

    @property
    def unmatched_patterns(self) -> list[str]:
        """Patterns that matched nothing."""
        return [issue.subject for issue in self.issues if issue.is_informational]


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Outcome of rendering the collection as a tagged document.

    Attributes:
        text: The rendered document.
        rendered: Number of entries whose content was embedded.
        issues: Entries that were omitted, with the reason.
    """

    text: str
    rendered: int
    issues: tuple[Issue, ...] = ()
