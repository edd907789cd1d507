"""Shared fixtures: a throwaway Git repository with a base and a working branch."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Dict

import pytest

VALID_WORKFLOW = (
    '{"id":"greeting","version":"1.0","specVersion":"0.8","name":"Greeting",'
    '"start":"Greet","states":[{"name":"Greet","type":"inject",'
    '"data":{"greeting":"Hello"},"end":true}]}'
)


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            "-C",
            str(repo),
            *args,
        ],
        check=True,
        capture_output=True,
        text=True,
    )


@pytest.fixture
def git_repo(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Return a factory building a repo where ``feature`` adds *files* on top of ``main``."""

    def make(files: Dict[str, str]) -> Path:
        repo = tmp_path / "repo"
        repo.mkdir()
        _git(repo, "init", "-q")
        (repo / "README.md").write_text("base\n", encoding="utf-8")
        _git(repo, "add", "README.md")
        _git(repo, "commit", "-q", "-m", "base")
        _git(repo, "branch", "-M", "main")
        _git(repo, "checkout", "-q", "-b", "feature")
        for name, content in files.items():
            path = repo / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        _git(repo, "add", "-A")
        _git(repo, "commit", "-q", "-m", "feature")
        return repo

    return make


@pytest.fixture
def valid_workflow() -> str:
    """A minimal workflow definition that passes the bundled schema."""
    return VALID_WORKFLOW
