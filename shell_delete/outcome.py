"""Result types returned by `shell_delete.delete` and the error-code table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# System error codes SHFileOperation is known to return for deletes.
ERROR_NAMES: dict[int, str] = {
    2: "ERROR_FILE_NOT_FOUND",
    5: "ERROR_ACCESS_DENIED",
    6: "ERROR_INVALID_HANDLE",
    1223: "ERROR_CANCELLED",
}

UNKNOWN_ERROR = "[unknown]"

REFERENCE_URLS = (
    "https://learn.microsoft.com/en-us/windows/win32/api/shellapi/nf-shellapi-shfileoperationa",
    "https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-erref/18d8fbe8-a967-4f1c-ae50-99ca8e491d2d",
    "https://learn.microsoft.com/en-us/windows/win32/debug/system-error-codes--0-499-",
)


@dataclass(frozen=True)
class Succeeded:
    """The shell reported status 0."""

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """
    The request was not carried out.

    `code` and `description` are None when the failure happened before the
    shell returned a status (bad path, pywin32 missing, marshaling error).
    """

    code: int | None = None
    description: str | None = None

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Cancelled:
    """The user declined the console confirmation; nothing was submitted."""

    def __bool__(self) -> bool:
        return False


Outcome = Union[Succeeded, Failed, Cancelled]


def describe_error(code: int) -> str:
    return ERROR_NAMES.get(code, UNKNOWN_ERROR)


def format_diagnostic(code: int, description: str | None = None) -> str:
    """Two-line message written when the shell returns a non-zero status."""
    if description is None:
        description = describe_error(code)
    return f"Error #{code}: {description}\n( see {' OR '.join(REFERENCE_URLS)} )"
