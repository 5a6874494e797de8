"""
Request building and submission for the Windows shell file operation API.

Requests go through `SHFileOperation` from pywin32's `win32com.shell`, so a
delete with FOF_ALLOWUNDO lands in the Recycle Bin instead of being removed
for good. pywin32 is imported on first use; on other platforms the facility
raises `ShellFacilityError`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any, Callable, Iterable

from .flags import FileOperationFlags, FileOperationType, describe_flags

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "\0"
LIST_TERMINATOR = "\0\0"


class ShellFacilityError(OSError):
    """SHFileOperation could not be reached or raised instead of returning a status."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class ShellRequest:
    """Fields of SHFILEOPSTRUCT; `as_tuple` lays them out in pywin32's order."""
    func: FileOperationType
    source: str
    flags: FileOperationFlags
    hwnd: int = 0
    destination: str | None = None
    name_mappings: Any = None
    progress_title: str | None = None

    def as_tuple(self) -> tuple:
        return (
            self.hwnd,                # owner window handle
            int(self.func),           # wFunc
            self.source,              # pFrom, double-null terminated
            self.destination,         # pTo
            int(self.flags),          # fFlags
            self.name_mappings,       # hNameMappings
            self.progress_title,      # lpszProgressTitle
        )


@dataclass(frozen=True)
class ShellResult:
    status: int
    aborted: bool = False
    name_mappings: Any = None


ShellFacility = Callable[[ShellRequest], ShellResult]


def encode_paths(paths: Iterable[str | os.PathLike]) -> str:
    """
    Join paths with NUL and terminate the list with two NULs.

    Raises
    ------
    ValueError
        If there are no paths, or a path is empty or contains NUL.
    """
    items = [os.fspath(p) for p in paths]
    if not items:
        raise ValueError("No paths given")
    for item in items:
        if not item:
            raise ValueError("Empty path in path list")
        if PATH_SEPARATOR in item:
            raise ValueError(f"Path contains a NUL character: {item!r}")
    return PATH_SEPARATOR.join(items) + LIST_TERMINATOR


def decode_paths(payload: str) -> list[str]:
    parts = payload.split(PATH_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def build_delete_request(paths: Iterable[str | os.PathLike], flags: FileOperationFlags) -> ShellRequest:
    return ShellRequest(
        func=FileOperationType.FO_DELETE,
        source=encode_paths(paths),
        flags=FileOperationFlags(flags),
    )


def _load_shell() -> tuple[Any, type[BaseException]]:
    """Return pywin32's shell module and the pywintypes error class."""
    try:
        import pywintypes  # type: ignore
        from win32com.shell import shell  # type: ignore
    except ImportError as exc:
        raise ShellFacilityError(f"pywin32 shell API is not available: {exc}") from exc
    return shell, pywintypes.error


def pywin32_facility(request: ShellRequest) -> ShellResult:
    """
    Submit `request` with `shell.SHFileOperation`.

    Raises
    ------
    ShellFacilityError
        If pywin32 is missing or the call raises `pywintypes.error`.
    """
    shell, win_error = _load_shell()
    logger.debug(
        "SHFileOperation func=%s flags=%s items=%d",
        request.func.name,
        describe_flags(request.flags),
        len(decode_paths(request.source)),
    )
    try:
        res = shell.SHFileOperation(request.as_tuple())
    except win_error as exc:
        code = getattr(exc, "winerror", None)
        raise ShellFacilityError(f"SHFileOperation raised: {exc}", code) from exc
    return ShellResult(status=int(res[0]), aborted=bool(res[1]) if len(res) > 1 else False)
