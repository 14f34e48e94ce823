"""Unit tests for tagged output rendering."""

from pathlib import Path

import pytest
from promptbuilder.collection.render import (
    ContentReadError,
    format_file_element,
    read_entry_content,
    render_collection,
)
from promptbuilder.models.entry import FileEntry
from promptbuilder.models.issues import IssueKind


def _entry(path: Path, relative: str | None = None) -> FileEntry:
    return FileEntry(relative_path=relative or path.name, absolute_path=str(path))


class TestReadEntryContent:
    """Tests for read_entry_content function."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        """UTF-8 content is returned as text."""
        path = tmp_path / "a.txt"
        path.write_text("héllo\n", encoding="utf-8")

        assert read_entry_content(_entry(path)) == "héllo\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A deleted file raises ContentReadError."""
        with pytest.raises(ContentReadError, match="no longer exists"):
            read_entry_content(_entry(tmp_path / "gone.txt"))

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        """A path that became a directory raises ContentReadError."""
        (tmp_path / "dir").mkdir()

        with pytest.raises(ContentReadError):
            read_entry_content(_entry(tmp_path / "dir"))

    def test_invalid_utf8_skipped_by_default(self, tmp_path: Path) -> None:
        """Binary content is rejected under the skip policy."""
        path = tmp_path / "image.bin"
        path.write_bytes(b"\x89PNG\xff\x00")

        with pytest.raises(ContentReadError, match="Not valid UTF-8"):
            read_entry_content(_entry(path))

    def test_invalid_utf8_replaced(self, tmp_path: Path) -> None:
        """The replace policy substitutes undecodable bytes."""
        path = tmp_path / "mixed.txt"
        path.write_bytes(b"ok\xffok")

        assert read_entry_content(_entry(path), "replace") == "ok�ok"


class TestFormatFileElement:
    """Tests for format_file_element function."""

    def test_adds_missing_newline(self) -> None:
        """Content without a trailing newline gets one before the closing tag."""
        assert format_file_element("a.txt", "x") == '<file path="a.txt">\nx\n</file>\n'

    def test_keeps_existing_newline(self) -> None:
        """Content ending with a newline is not padded."""
        assert format_file_element("a.txt", "x\n") == '<file path="a.txt">\nx\n</file>\n'

    def test_content_embedded_verbatim(self) -> None:
        """Tag-like content is not escaped."""
        element = format_file_element("t.html", "<file>&</file>\n")

        assert "<file>&</file>\n</file>" in element


class TestRenderCollection:
    """Tests for render_collection function."""

    def test_two_files_in_order(self, tmp_path: Path) -> None:
        """Entries render in the given order inside a single root element."""
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("alpha\n")
        b.write_text("bravo\n")

        result = render_collection([_entry(a), _entry(b)])

        assert result.text == (
            "<files>\n"
            '<file path="a.txt">\nalpha\n</file>\n'
            '<file path="b.txt">\nbravo\n</file>\n'
            "</files>\n"
        )
        assert result.rendered == 2
        assert result.issues == ()

    def test_uses_relative_path_attribute(self, tmp_path: Path) -> None:
        """The path attribute is the stored relative path."""
        path = tmp_path / "src" / "main.rs"
        path.parent.mkdir()
        path.write_text("fn main() {}\n")

        result = render_collection([_entry(path, "src/main.rs")])

        assert '<file path="src/main.rs">' in result.text
        assert str(tmp_path) not in result.text

    def test_unreadable_entry_omitted(self, tmp_path: Path) -> None:
        """A missing file is reported and the others still render."""
        a = tmp_path / "a.txt"
        a.write_text("alpha\n")

        result = render_collection([_entry(tmp_path / "gone.txt"), _entry(a)])

        assert 'path="gone.txt"' not in result.text
        assert '<file path="a.txt">' in result.text
        assert result.rendered == 1
        assert len(result.issues) == 1
        assert result.issues[0].kind == IssueKind.CONTENT_READ_ERROR
        assert result.issues[0].subject == "gone.txt"

    def test_empty_collection(self) -> None:
        """No entries renders an empty root element."""
        result = render_collection([])

        assert result.text == "<files>\n</files>\n"
        assert result.rendered == 0
