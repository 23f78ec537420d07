from __future__ import annotations

import io
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import pytest

from phaseswarm.cli import main
from phaseswarm.ui import set_color_enabled


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    set_color_enabled(None)


@dataclass
class Workspace:
    cwd: Path
    home: Path

    @property
    def local_registry(self) -> Path:
        return self.cwd / ".phaseswarm-registry.json"

    @property
    def global_registry(self) -> Path:
        return self.home / ".phaseswarm-registry.json"

    @property
    def commands_dir(self) -> Path:
        return self.cwd / ".claude" / "commands"


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    cwd = tmp_path / "repo"
    home = tmp_path / "home"
    cwd.mkdir()
    home.mkdir()
    return Workspace(cwd=cwd, home=home)


def write_registry(path: Path, **fields: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(fields, indent=2), encoding="utf-8")
    return path


RunCli = Callable[..., int]


@pytest.fixture
def run_cli(workspace: Workspace, monkeypatch: pytest.MonkeyPatch) -> RunCli:
    def _run(*argv: str, stdin: str | None = None, env: dict[str, str] | None = None,
             cwd: Path | None = None) -> int:
        if stdin is not None:
            monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        return main(
            list(argv),
            cwd=cwd or workspace.cwd,
            environ=dict(env or {}),
            home=workspace.home,
        )

    return _run
