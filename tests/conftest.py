from __future__ import annotations

import subprocess

import pytest


class FakeCommands:
    """Stands in for subprocess.run, keyed by the command's first word."""

    def __init__(self) -> None:
        self.outputs: dict[str, tuple[int, str]] = {}
        self.errors: dict[str, BaseException] = {}
        self.calls: list[list[str]] = []

    def set_output(self, program: str, stdout: str, returncode: int = 0) -> None:
        self.outputs[program] = (returncode, stdout)

    def set_error(self, program: str, error: BaseException) -> None:
        self.errors[program] = error

    def __call__(self, command, **kwargs):  # type: ignore[no-untyped-def]
        self.calls.append(list(command))
        program = command[0]
        if program in self.errors:
            raise self.errors[program]
        if program not in self.outputs:
            raise FileNotFoundError(2, "No such file or directory", program)
        returncode, stdout = self.outputs[program]
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr="boom" if returncode else "")


@pytest.fixture
def fake_commands(monkeypatch) -> FakeCommands:
    fake = FakeCommands()
    monkeypatch.setattr("sysfetch.modules.base.subprocess.run", fake)
    return fake


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("WAYLAND_DISPLAY", "DISPLAY", "SHELL", "XDG_CURRENT_DESKTOP"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
