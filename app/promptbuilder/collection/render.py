"""Tagged text rendering of the collection.

Output layout::

    <files>
    <file path="src/app.py">
    ...content...
    </file>
    </files>

Content is embedded verbatim. Nothing is escaped, so a file that itself
contains ``</file>`` yields an ambiguous document. The path attribute is
the entry's relative path, also unescaped.
"""

import logging
from pathlib import Path

from promptbuilder.core.config import UndecodablePolicy
from promptbuilder.models.entry import FileEntry
from promptbuilder.models.issues import Issue, IssueKind, RenderResult

logger = logging.getLogger(__name__)

ROOT_OPEN = "<files>"
ROOT_CLOSE = "</files>"
FILE_CLOSE = "</file>"


class ContentReadError(Exception):
    """Raised when a tracked file cannot be read as text."""


def read_entry_content(entry: FileEntry, undecodable: UndecodablePolicy = "skip") -> str:
    """Read a tracked file in full and decode it as UTF-8.

    Args:
        entry: Entry to read.
        undecodable: ``skip`` raises on invalid UTF-8, ``replace`` substitutes U+FFFD.

    Returns:
        The decoded file content.

    Raises:
        ContentReadError: If the file is missing, unreadable or not valid UTF-8
            under the ``skip`` policy.
    """
    path = Path(entry.absolute_path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise ContentReadError(f"File no longer exists: {path}") from None
    except OSError as e:
        raise ContentReadError(f"Cannot read {path}: {e}") from e

    errors = "replace" if undecodable == "replace" else "strict"
    try:
        return data.decode("utf-8", errors=errors)
    except UnicodeDecodeError as e:
        raise ContentReadError(f"Not valid UTF-8 text: {path} ({e.reason})") from e


def format_file_element(relative_path: str, content: str) -> str:
    """Wrap content in a ``<file>`` element.

    A newline is added before the closing tag unless the content already
    ends with one.
    """
    body = content if content.endswith("\n") else content + "\n"
    return f'<file path="{relative_path}">\n{body}{FILE_CLOSE}\n'


def render_collection(
    entries: list[FileEntry],
    undecodable: UndecodablePolicy = "skip",
) -> RenderResult:
    """Render entries, in order, as one tagged document.

    An entry that cannot be read is left out of the document and reported;
    the remaining entries still render.

    Args:
        entries: Entries in stored order.
        undecodable: Policy for content that is not valid UTF-8.

    Returns:
        RenderResult with the document text and per-entry issues.
    """
    parts: list[str] = [ROOT_OPEN + "\n"]
    issues: list[Issue] = []
    rendered = 0

    for entry in entries:
        try:
            content = read_entry_content(entry, undecodable)
        except ContentReadError as e:
            logger.warning("Omitting %s: %s", entry.relative_path, e)
            issues.append(
                Issue(
                    kind=IssueKind.CONTENT_READ_ERROR,
                    subject=entry.relative_path,
                    message=str(e),
                )
            )
            continue
        parts.append(format_file_element(entry.relative_path, content))
        rendered += 1

    parts.append(ROOT_CLOSE + "\n")
    return RenderResult(text="".join(parts), rendered=rendered, issues=tuple(issues))
