"""
Console confirmation used when the shell's own dialogs are turned off.

A confirmation provider is any callable taking the prompt text and returning
True to go ahead. `console_confirmation` is the default one; GUIs and scripts
pass their own to `shell_delete.delete(confirm=...)`.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Callable, Sequence, TextIO

logger = logging.getLogger(__name__)

ConfirmationProvider = Callable[[str], bool]

AFFIRMATIVE_PREFIX = "y"
INPUT_MARKER = "[Yes/No]> "

# Serializes prompts so concurrent callers do not share one line of stdin.
_prompt_lock = threading.Lock()


def format_confirmation_prompt(paths: Sequence[str | os.PathLike], permanently_delete: bool) -> str:
    """Return the question, one "> path" line per item, and the input marker."""
    verb = "permanently delete" if permanently_delete else "delete"
    target = "this item?" if len(paths) == 1 else "these items?"
    lines = [f"Are you sure you want to {verb} {target}"]
    lines.extend(f"> {os.fspath(p)}" for p in paths)
    lines.append(INPUT_MARKER)
    return "\n".join(lines)


def is_affirmative(answer: str | None) -> bool:
    if not answer:
        return False
    return answer.strip().lower().startswith(AFFIRMATIVE_PREFIX)


def console_confirmation(prompt: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> bool:
    """
    Write `prompt` and read a single line of input.

    Blocks until a line is available. End of input is a "no".
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    with _prompt_lock:
        stdout.write(prompt)
        stdout.flush()
        answer = stdin.readline()
    return is_affirmative(answer)


def confirm_delete(
    paths: Sequence[str | os.PathLike],
    permanently_delete: bool,
    provider: ConfirmationProvider | None = None,
) -> bool:
    provider = provider if provider is not None else console_confirmation
    prompt = format_confirmation_prompt(paths, permanently_delete)
    confirmed = bool(provider(prompt))
    logger.debug("Confirmation for %d item(s): %s", len(paths), "yes" if confirmed else "no")
    return confirmed
