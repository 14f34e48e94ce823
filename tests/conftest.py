"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from promptbuilder.core.config import Settings
from promptbuilder.core.state import CollectionStore
from promptbuilder.core.storage import MemoryBackend


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG config at a throwaway directory so no test touches ~/.config."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("PROMPTBUILDER_STATE_FILE", raising=False)
    return config_home


@pytest.fixture
def memory_store() -> CollectionStore:
    """Collection store kept entirely in memory."""
    return CollectionStore(MemoryBackend())


@pytest.fixture
def cli_obj(memory_store: CollectionStore) -> dict[str, object]:
    """Context object that makes the CLI use default settings and an in-memory store."""
    return {"store": memory_store, "settings": Settings()}


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project tree.

    Layout::

        project/
            .gitignore          (target/, *.log)
            a.txt
            b.txt
            Cargo.lock
            src/main.rs
            src/lib.rs
            src/nested/util.rs
            target/debug/build.rs
            logs/app.log
    """
    root = tmp_path / "project"
    files = {
        ".gitignore": "target/\n*.log\n",
        "a.txt": "alpha\n",
        "b.txt": "bravo\n",
        "Cargo.lock": "# lock\n",
        "src/main.rs": "fn main() {}\n",
        "src/lib.rs": "pub mod nested;\n",
        "src/nested/util.rs": "pub fn util() {}\n",
        "target/debug/build.rs": "// generated\n",
        "logs/app.log": "started\n",
    }
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root
