"""Ignore-rule evaluation for candidate files.

Rules come from ignore-rule files (``.gitignore``, ``.ignore``) in every
directory from the filesystem root down to the directory holding the
candidate. Each directory contributes one layer of gitwildmatch rules,
matched relative to that directory.

Layers are folded from the outermost directory inwards and the last
matching rule decides, so a rule closer to the file overrides an ancestor
and a negated rule re-includes a path excluded before it. Files ending in
``.lock`` are always ignored, whatever the rules say.
"""

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pathspec.patterns import GitWildMatchPattern

from promptbuilder.core.config import DEFAULT_IGNORE_FILES
from promptbuilder.models.issues import Issue, IssueKind

logger = logging.getLogger(__name__)

# Hard exclusion checked before any rule file; negation cannot undo it
LOCK_SUFFIX = ".lock"


class IgnoreRuleReadError(Exception):
    """Raised when an ignore-rule file cannot be read or parsed."""


@dataclass(frozen=True, slots=True)
class Rule:
    """A single compiled ignore rule.

    Attributes:
        source: The rule line as written.
        negate: True for ``!pattern`` rules that re-include a path.
        pattern: Compiled gitwildmatch pattern.
    """

    source: str
    negate: bool
    pattern: GitWildMatchPattern

    def matches(self, relative_posix: str) -> bool:
        """Check whether the rule applies to a path relative to its directory."""
        return self.pattern.match_file(relative_posix) is not None


@dataclass(frozen=True, slots=True)
class RuleLayer:
    """Rules contributed by one directory, in file order.

    Attributes:
        directory: Directory the rules are relative to.
        rules: Rules in evaluation order; later rules override earlier ones.
    """

    directory: Path
    rules: tuple[Rule, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return bool(self.rules)


def parse_rules(lines: Sequence[str]) -> tuple[Rule, ...]:
    """Compile ignore-file lines into rules.

    Blank lines and comments produce no rule.

    Args:
        lines: Lines of an ignore-rule file.

    Returns:
        Compiled rules in file order.

    Raises:
        ValueError: If a line is not a valid gitwildmatch pattern.
    """
    rules: list[Rule] = []
    for line in lines:
        pattern = GitWildMatchPattern(line)
        if pattern.include is None:
            continue
        rules.append(Rule(source=line, negate=not pattern.include, pattern=pattern))
    return tuple(rules)


def load_rule_file(path: Path) -> tuple[Rule, ...]:
    """Read and compile one ignore-rule file.

    Args:
        path: Path to the rule file.

    Returns:
        Compiled rules in file order.

    Raises:
        IgnoreRuleReadError: If the file cannot be read or contains an invalid rule.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreRuleReadError(f"Cannot read {path}: {e}") from e

    try:
        return parse_rules(text.splitlines())
    except ValueError as e:
        raise IgnoreRuleReadError(f"Invalid rule in {path}: {e}") from e


def is_lock_file(path: Path) -> bool:
    """Check the built-in exclusion for ``*.lock`` files."""
    return path.name.endswith(LOCK_SUFFIX)


class IgnoreFilter:
    """Decides which candidate files are excluded by ignore rules.

    Rule layers are read lazily and cached per directory for the lifetime
    of the filter, which is one ``add`` invocation. A rule file that cannot
    be read makes its directory contribute no rules; the problem is logged
    and kept in ``issues``.

    Args:
        base_dir: Directory relative candidate paths are taken against.
        rule_files: Names of ignore-rule files, lowest precedence first.
        respect_rule_files: If False, only the built-in ``.lock`` rule applies.
    """

    def __init__(
        self,
        base_dir: Path,
        *,
        rule_files: Sequence[str] = DEFAULT_IGNORE_FILES,
        respect_rule_files: bool = True,
    ) -> None:
        self._base_dir = base_dir
        self._rule_files = tuple(rule_files)
        self._respect_rule_files = respect_rule_files
        self._layers: dict[Path, RuleLayer] = {}
        self.issues: list[Issue] = []

    def is_ignored(self, path: Path) -> bool:
        """Check whether a file is excluded.

        Args:
            path: File to check; relative paths are taken against base_dir.

        Returns:
            True if the file must not be collected.
        """
        target = Path(os.path.normpath(path if path.is_absolute() else self._base_dir / path))

        if is_lock_file(target):
            return True
        if not self._respect_rule_files:
            return False

        ignored = False
        for layer in self.layers_for(target):
            relative = target.relative_to(layer.directory).as_posix()
            for rule in layer.rules:
                if rule.matches(relative):
                    ignored = not rule.negate
        return ignored

    def layers_for(self, path: Path) -> list[RuleLayer]:
        """Return the non-empty rule layers governing a path, outermost first."""
        chain = list(reversed(path.parents))
        layers = [self._layer(directory) for directory in chain]
        return [layer for layer in layers if layer]

    def _layer(self, directory: Path) -> RuleLayer:
        """Load (or fetch from cache) the rule layer of one directory."""
        cached = self._layers.get(directory)
        if cached is not None:
            return cached

        rules: list[Rule] = []
        for name in self._rule_files:
            rule_path = directory / name
            if not os.path.isfile(rule_path):
                continue
            try:
                rules.extend(load_rule_file(rule_path))
            except IgnoreRuleReadError as e:
                logger.warning("Ignoring rules from %s: %s", directory, e)
                self.issues.append(
                    Issue(
                        kind=IssueKind.IGNORE_RULE_READ_ERROR,
                        subject=str(rule_path),
                        message=str(e),
                    )
                )
                rules = []
                break

        layer = RuleLayer(directory=directory, rules=tuple(rules))
        if layer:
            logger.debug("Loaded %d ignore rules from %s", len(layer.rules), directory)
        self._layers[directory] = layer
        return layer


def is_ignored(path: Path, base_dir: Path) -> bool:
    """Check a single path against the ignore rules of its directory chain.

    Convenience wrapper around IgnoreFilter for one-off checks.

    Args:
        path: File to check; relative paths are taken against base_dir.
        base_dir: Directory the search started from.

    Returns:
        True if the file must not be collected.
    """
    return IgnoreFilter(base_dir).is_ignored(path)
