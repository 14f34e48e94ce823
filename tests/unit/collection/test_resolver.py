"""Unit tests for glob pattern resolution."""

import os
from pathlib import Path

import pytest
from promptbuilder.collection.resolver import PathResolver, resolve
from promptbuilder.models.issues import IssueKind


class TestLiteralPaths:
    """Tests for patterns without wildcards."""

    def test_literal_file_resolves(self, project: Path) -> None:
        """An exact file path resolves to that single file."""
        result = resolve(["a.txt"], project)

        assert result.paths == [(project / "a.txt").resolve()]
        assert result.unmatched == []

    def test_missing_literal_is_unmatched(self, project: Path) -> None:
        """A literal path that does not exist is reported, not raised."""
        result = resolve(["missing.txt"], project)

        assert result.paths == []
        assert result.unmatched == ["missing.txt"]
        assert result.nothing_matched is True

    def test_absolute_pattern(self, project: Path, tmp_path: Path) -> None:
        """Absolute patterns ignore the base directory."""
        result = resolve([str(project / "b.txt")], tmp_path)

        assert result.paths == [(project / "b.txt").resolve()]

    def test_literal_hidden_file_resolves(self, project: Path) -> None:
        """Hidden files are reachable when named explicitly."""
        result = resolve([".gitignore"], project)

        assert result.paths == [(project / ".gitignore").resolve()]

    def test_literal_path_with_glob_characters(self, tmp_path: Path) -> None:
        """An existing file is found by its literal name even if it looks like a glob."""
        page = tmp_path / "app" / "[id]" / "page.tsx"
        page.parent.mkdir(parents=True)
        page.write_text("export {}\n")

        result = resolve(["app/[id]/page.tsx"], tmp_path)

        assert result.paths == [page.resolve()]
        assert result.unmatched == []

    def test_matched_keeps_symlinked_path(self, tmp_path: Path) -> None:
        """matched holds the path under the base directory, paths the link target."""
        target = tmp_path / "real"
        target.mkdir()
        (target / "x.py").write_text("x\n")
        base = tmp_path / "base"
        base.mkdir()
        (base / "link").symlink_to(target, target_is_directory=True)

        result = resolve(["link/*.py"], base)

        assert result.paths == [(target / "x.py").resolve()]
        assert result.matched == [base / "link" / "x.py"]


class TestWildcards:
    """Tests for wildcard expansion."""

    def test_matches_sorted_lexicographically(self, project: Path) -> None:
        """Matches within a pattern come back in path order."""
        result = resolve(["*.txt"], project)

        assert [p.name for p in result.paths] == ["a.txt", "b.txt"]

    def test_directories_not_recursed(self, project: Path) -> None:
        """A wildcard matching a directory does not descend into it."""
        result = resolve(["*"], project)

        names = [p.name for p in result.paths]
        assert "main.rs" not in names
        assert "src" not in names
        assert names == ["Cargo.lock", "a.txt", "b.txt"]

    def test_directory_only_pattern_is_unmatched(self, project: Path) -> None:
        """A pattern that only matches directories matches no files."""
        result = resolve(["src"], project)

        assert result.paths == []
        assert result.unmatched == ["src"]

    def test_double_star_recurses(self, project: Path) -> None:
        """A ** segment descends into subdirectories."""
        result = resolve(["src/**/*.rs"], project)

        relative = [p.relative_to(project.resolve()).as_posix() for p in result.paths]
        assert relative == ["src/lib.rs", "src/main.rs", "src/nested/util.rs"]

    def test_hidden_files_skipped_by_wildcards(self, project: Path) -> None:
        """Wildcards do not match dot-files by default."""
        result = resolve(["*"], project)

        assert ".gitignore" not in [p.name for p in result.paths]

    def test_include_hidden(self, project: Path) -> None:
        """include_hidden lets wildcards match dot-files."""
        result = PathResolver(project, include_hidden=True).resolve(["*"])

        assert ".gitignore" in [p.name for p in result.paths]


class TestDeduplication:
    """Tests for duplicate collapsing and canonicalization."""

    def test_same_pattern_twice(self, project: Path) -> None:
        """Repeating a pattern yields the file once and counts the duplicate."""
        result = resolve(["a.txt", "a.txt"], project)

        assert result.paths == [(project / "a.txt").resolve()]
        assert result.duplicates == 1
        assert result.unmatched == []

    def test_overlapping_patterns_keep_first_order(self, project: Path) -> None:
        """Overlapping patterns keep the first occurrence position."""
        result = resolve(["b.txt", "*.txt"], project)

        assert [p.name for p in result.paths] == ["b.txt", "a.txt"]
        assert result.duplicates == 1

    def test_dot_segments_canonicalized(self, project: Path) -> None:
        """Paths with . and .. segments resolve to the same canonical path."""
        result = resolve(["./a.txt", "src/../a.txt"], project)

        assert result.paths == [(project / "a.txt").resolve()]
        assert result.duplicates == 1

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink_resolves_to_target(self, project: Path) -> None:
        """A symlink and its target are the same file."""
        (project / "link.txt").symlink_to(project / "a.txt")

        result = resolve(["a.txt", "link.txt"], project)

        assert result.paths == [(project / "a.txt").resolve()]
        assert result.duplicates == 1

    def test_partially_unmatched(self, project: Path) -> None:
        """Only the patterns without matches are reported."""
        result = resolve(["a.txt", "*.md"], project)

        assert len(result.paths) == 1
        assert result.unmatched == ["*.md"]
        assert result.nothing_matched is False

    def test_no_path_errors_for_regular_files(self, project: Path) -> None:
        """Plain files produce no path issues."""
        result = resolve(["**/*"], project)

        assert not [i for i in result.issues if i.kind == IssueKind.PATH_ERROR]
