"""
Flag handling for the Windows shell file operation API.

The values mirror `win32com.shell.shellcon` so a request can be composed
without importing pywin32 (which only exists on Windows).
"""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)


class FileOperationFlags(enum.IntFlag):
    """fFlags bits accepted by SHFileOperation."""

    FOF_SILENT = 0x0004           # no progress dialog
    FOF_NOCONFIRMATION = 0x0010   # answer "Yes to all" to any dialog
    FOF_ALLOWUNDO = 0x0040        # recycle instead of deleting permanently
    FOF_SIMPLEPROGRESS = 0x0100   # progress dialog without file names
    FOF_NOERRORUI = 0x0400        # no error dialogs
    FOF_WANTNUKEWARNING = 0x4000  # warn when an item is too big for the bin


class FileOperationType(enum.IntEnum):
    """wFunc values of SHFILEOPSTRUCT."""

    FO_MOVE = 0x0001
    FO_COPY = 0x0002
    FO_DELETE = 0x0003
    FO_RENAME = 0x0004


# Bits set when the shell must run without surfacing any UI.
NO_UI_FLAGS = (
    FileOperationFlags.FOF_NOCONFIRMATION
    | FileOperationFlags.FOF_SILENT
    | FileOperationFlags.FOF_NOERRORUI
)


def default_flags() -> FileOperationFlags:
    return FileOperationFlags.FOF_ALLOWUNDO | FileOperationFlags.FOF_WANTNUKEWARNING


def needs_confirmation(no_confirmation: bool, show_dialogs: bool) -> bool:
    """True when the shell dialogs are off but the user still has to confirm."""
    return not show_dialogs and not no_confirmation


def compose_flags(
    permanently_delete: bool = False,
    no_confirmation: bool = False,
    show_dialogs: bool = True,
    flags: FileOperationFlags | None = None,
) -> FileOperationFlags:
    """
    Build the final flag set for a delete request.

    Parameters
    ----------
    permanently_delete : bool
        Clear FOF_ALLOWUNDO, even when `flags` sets it.
    no_confirmation : bool
        Add FOF_NOCONFIRMATION.
    show_dialogs : bool
        When False, drop the nuke warning and add the no-UI bits. Callers
        must obtain confirmation first (see `needs_confirmation`).
    flags : FileOperationFlags | None
        Starting set; `default_flags()` when omitted.

    Returns
    -------
    FileOperationFlags
    """
    f_flags = FileOperationFlags(default_flags() if flags is None else flags)
    if permanently_delete:
        f_flags &= ~FileOperationFlags.FOF_ALLOWUNDO
    if no_confirmation:
        f_flags |= FileOperationFlags.FOF_NOCONFIRMATION
    if not show_dialogs:
        f_flags &= ~FileOperationFlags.FOF_WANTNUKEWARNING
        f_flags |= NO_UI_FLAGS
    logger.debug("Composed flags: %s (0x%04x)", describe_flags(f_flags), int(f_flags))
    return f_flags


def describe_flags(flags: FileOperationFlags) -> str:
    """Return e.g. "FOF_ALLOWUNDO|FOF_WANTNUKEWARNING", or "0" for no bits."""
    names = [member.name for member in FileOperationFlags if member in flags]
    return "|".join(names) or "0"


def parse_flags(text: str) -> FileOperationFlags:
    """
    Parse a comma-separated list of flag names such as "ALLOWUNDO,silent".

    The FOF_ prefix is optional and case is ignored. An empty string gives
    the empty flag set.
    """
    result = FileOperationFlags(0)
    for raw in text.split(","):
        name = raw.strip().upper()
        if not name:
            continue
        if not name.startswith("FOF_"):
            name = "FOF_" + name
        try:
            result |= FileOperationFlags[name]
        except KeyError:
            valid = ", ".join(m.name for m in FileOperationFlags)
            raise ValueError(f"Unknown flag '{raw.strip()}'. Valid flags: {valid}") from None
    return result
