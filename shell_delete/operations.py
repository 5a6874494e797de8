"""
Delete or recycle paths through the Windows shell.

`delete` composes the flags, asks for confirmation on the console when the
shell dialogs are suppressed, submits one FO_DELETE request and turns the
shell status into a `Succeeded`, `Failed` or `Cancelled` outcome.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Sequence, TextIO, Union

from .confirm import ConfirmationProvider, confirm_delete
from .flags import FileOperationFlags, compose_flags, describe_flags, needs_confirmation
from .outcome import Cancelled, Failed, Outcome, Succeeded, describe_error, format_diagnostic
from .shell_api import ShellFacility, build_delete_request, pywin32_facility

logger = logging.getLogger(__name__)

PathArg = Union[str, os.PathLike]

# Errors the shell boundary is expected to produce: OSError covers
# ShellFacilityError, ValueError/TypeError cover path encoding and marshaling.
SUBMISSION_ERRORS = (OSError, ValueError, TypeError)


def _as_path_list(paths: PathArg | Sequence[PathArg]) -> list[str]:
    """Return the paths as strings; raises TypeError for anything that is not a path."""
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    return [os.fspath(p) for p in paths]


def _opaque_failure(exc: Exception, out: TextIO) -> Failed:
    out.write(f"Error: {exc}\n")
    logger.error("Shell delete could not be submitted: %s", exc)
    return Failed()


def delete(
    paths: PathArg | Sequence[PathArg],
    permanently_delete: bool = False,
    no_confirmation: bool = False,
    show_dialogs: bool = True,
    flags: FileOperationFlags | None = None,
    *,
    confirm: ConfirmationProvider | None = None,
    facility: ShellFacility | None = None,
    out: TextIO | None = None,
) -> Outcome:
    """
    Send one or more paths to the Recycle Bin, or delete them permanently.

    Parameters
    ----------
    paths : str | PathLike | Sequence[str | PathLike]
        A single path or several. Order is kept and duplicates are passed on.
    permanently_delete : bool
        Skip the Recycle Bin. Overrides FOF_ALLOWUNDO in `flags`.
    no_confirmation : bool
        Do not ask before deleting.
    show_dialogs : bool
        Let the shell show its dialogs. When False and `no_confirmation` is
        also False, the user is asked on the console (or via `confirm`).
    flags : FileOperationFlags | None
        Starting flag set instead of FOF_ALLOWUNDO | FOF_WANTNUKEWARNING.
    confirm : callable, optional
        Confirmation provider taking the prompt text. Console by default.
    facility : callable, optional
        Takes a `ShellRequest` and returns a `ShellResult`. pywin32 by default.
    out : TextIO, optional
        Stream for the cancel notice and error diagnostics; stdout by default.

    Returns
    -------
    Succeeded | Failed | Cancelled
    """
    out = out if out is not None else sys.stdout
    facility = facility if facility is not None else pywin32_facility

    f_flags = compose_flags(permanently_delete, no_confirmation, show_dialogs, flags)

    # Bad paths fail here, before anyone is asked to confirm them.
    try:
        items = _as_path_list(paths)
        request = build_delete_request(items, f_flags)
    except SUBMISSION_ERRORS as exc:
        return _opaque_failure(exc, out)

    if needs_confirmation(no_confirmation, show_dialogs):
        if not confirm_delete(items, permanently_delete, confirm):
            out.write("canceled.\n")
            logger.info("Delete cancelled by user (%d item(s))", len(items))
            return Cancelled()

    try:
        logger.debug("Submitting delete of %d item(s) with %s", len(items), describe_flags(f_flags))
        result = facility(request)
    except SUBMISSION_ERRORS as exc:
        return _opaque_failure(exc, out)

    if result.status == 0:
        if result.aborted:
            logger.warning("Shell reported status 0 but some operations were aborted")
        action = "Deleted" if FileOperationFlags.FOF_ALLOWUNDO not in f_flags else "Moved to Recycle Bin"
        for item in items:
            logger.info("%s -> %s", action, item)
        return Succeeded()

    description = describe_error(result.status)
    out.write(format_diagnostic(result.status, description) + "\n")
    logger.error("Shell delete failed, code=%s (%s)", result.status, description)
    return Failed(code=result.status, description=description)


def send_to_recycle_bin(
    paths: PathArg | Sequence[PathArg],
    permanently_delete: bool = False,
    no_confirmation: bool = False,
    show_dialogs: bool = True,
    flags: FileOperationFlags | None = None,
    **kwargs,
) -> Outcome:
    """Alias of `delete` under the name used by recycle-bin helpers."""
    return delete(paths, permanently_delete, no_confirmation, show_dialogs, flags, **kwargs)
