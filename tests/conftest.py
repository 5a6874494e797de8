"""Shared fixtures: a recording stand-in for SHFileOperation and answer providers."""

from __future__ import annotations

import io

import pytest

from shell_delete.shell_api import ShellRequest, ShellResult


class RecordingFacility:
    """Records submitted requests and answers with a fixed status or exception."""

    def __init__(self, status: int = 0, aborted: bool = False, error: BaseException | None = None) -> None:
        self.status = status
        self.aborted = aborted
        self.error = error
        self.requests: list[ShellRequest] = []

    def __call__(self, request: ShellRequest) -> ShellResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return ShellResult(status=self.status, aborted=self.aborted)


class ScriptedConfirmation:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


@pytest.fixture
def facility() -> RecordingFacility:
    return RecordingFacility()


@pytest.fixture
def make_facility():
    return RecordingFacility


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def say_yes() -> ScriptedConfirmation:
    return ScriptedConfirmation(True)


@pytest.fixture
def say_no() -> ScriptedConfirmation:
    return ScriptedConfirmation(False)
