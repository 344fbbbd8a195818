"""Shared test fixtures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from npm_release.collaborators import Collaborators
from npm_release.models import Choice


@dataclass
class FakeHost:
    """In-memory collaborators that record every call in order."""

    files: dict[str, str] = field(default_factory=dict)
    answer: str = "patch"
    fail_commands: set[str] = field(default_factory=set)
    calls: list[tuple[str, str]] = field(default_factory=list)
    prompts: list[tuple[str, list[Choice], str]] = field(default_factory=list)

    async def read(self, path: str) -> str:
        self.calls.append(("read", path))
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.files[path]

    async def exec(self, command: str) -> None:
        self.calls.append(("exec", command))
        if command in self.fail_commands:
            raise RuntimeError(f"command failed: {command}")

    async def prompt_select(
        self, question: str, choices: list[Choice], default: str
    ) -> str:
        self.calls.append(("prompt", question))
        self.prompts.append((question, choices, default))
        return self.answer

    def log(self, message: str) -> None:
        self.calls.append(("log", message))

    def collaborators(self) -> Collaborators:
        return Collaborators(
            read=self.read,
            exec=self.exec,
            prompt_select=self.prompt_select,
            log=self.log,
        )

    @property
    def commands(self) -> list[str]:
        return [arg for kind, arg in self.calls if kind == "exec"]

    @property
    def messages(self) -> list[str]:
        return [arg for kind, arg in self.calls if kind == "log"]


@pytest.fixture
def host() -> FakeHost:
    """A fake host with a valid package.json at version 2.3.1."""
    return FakeHost(files={"./package.json": json.dumps({"version": "2.3.1"})})


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a temporary npm-release.toml."""
    content = """\
[npm]
tagCommit = true
preReleaseId = "beta"
version-args = "--no-verify"
publish_args = "--tag next"

[npm.defaults]
choice = "minor"
"""
    path = tmp_path / "npm-release.toml"
    path.write_text(content)
    return path
