from __future__ import annotations

import io
from pathlib import Path
import threading
import time

import pytest

from shell_delete.confirm import (
    confirm_delete,
    console_confirmation,
    format_confirmation_prompt,
    is_affirmative,
)


def test_prompt_single_item():
    prompt = format_confirmation_prompt([r"C:\temp\a.txt"], permanently_delete=False)
    assert prompt == "Are you sure you want to delete this item?\n> C:\\temp\\a.txt\n[Yes/No]> "


def test_prompt_several_items_permanent():
    prompt = format_confirmation_prompt(["a.txt", Path("b.txt")], permanently_delete=True)
    lines = prompt.split("\n")
    assert lines[0] == "Are you sure you want to permanently delete these items?"
    assert lines[1:3] == ["> a.txt", "> b.txt"]
    assert lines[-1] == "[Yes/No]> "


@pytest.mark.parametrize("answer", ["y", "Y", "yes", "  YES please\n", "yep"])
def test_affirmative_answers(answer):
    assert is_affirmative(answer)


@pytest.mark.parametrize("answer", ["", "\n", "n", "no", "ok", " nope y", None])
def test_negative_answers(answer):
    assert not is_affirmative(answer)


def test_console_confirmation_reads_one_line():
    stdin = io.StringIO("yes\nno\n")
    stdout = io.StringIO()
    assert console_confirmation("Delete?\n[Yes/No]> ", stdin=stdin, stdout=stdout)
    assert stdout.getvalue() == "Delete?\n[Yes/No]> "
    assert stdin.readline() == "no\n"


def test_console_confirmation_end_of_input_is_no():
    assert not console_confirmation("?", stdin=io.StringIO(""), stdout=io.StringIO())


def test_confirm_delete_uses_provider():
    prompts = []

    def provider(prompt):
        prompts.append(prompt)
        return True

    assert confirm_delete(["x"], False, provider)
    assert prompts == [format_confirmation_prompt(["x"], False)]


class SlowConsole:
    """Shared stdin/stdout whose readline blocks until released."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.events = []
        self.reading = threading.Event()
        self.release = threading.Event()
        self._guard = threading.Lock()

    def write(self, text):
        with self._guard:
            self.events.append(("write", text))

    def flush(self):
        pass

    def readline(self):
        self.reading.set()
        self.release.wait(timeout=5)
        with self._guard:
            answer = self.answers.pop(0)
            self.events.append(("read", answer))
        return answer


def test_concurrent_prompts_do_not_interleave():
    console = SlowConsole(["yes\n", "no\n"])
    results = {}

    def ask(name):
        results[name] = console_confirmation(f"{name}?", stdin=console, stdout=console)

    first = threading.Thread(target=ask, args=("first",))
    first.start()
    assert console.reading.wait(timeout=5)

    second = threading.Thread(target=ask, args=("second",))
    second.start()
    time.sleep(0.1)
    # The second prompt waits while the first one is still reading its answer.
    assert console.events == [("write", "first?")]

    console.release.set()
    first.join(timeout=5)
    second.join(timeout=5)

    assert console.events == [
        ("write", "first?"),
        ("read", "yes\n"),
        ("write", "second?"),
        ("read", "no\n"),
    ]
    assert results == {"first": True, "second": False}
