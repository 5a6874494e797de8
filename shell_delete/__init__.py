"""Delete or recycle files through the Windows shell (SHFileOperation via pywin32)."""

from .confirm import confirm_delete, console_confirmation, format_confirmation_prompt
from .flags import FileOperationFlags, FileOperationType, compose_flags, default_flags
from .operations import delete, send_to_recycle_bin
from .outcome import Cancelled, Failed, Outcome, Succeeded
from .shell_api import ShellFacilityError, ShellRequest, ShellResult, pywin32_facility

__all__ = [
    "Cancelled",
    "Failed",
    "FileOperationFlags",
    "FileOperationType",
    "Outcome",
    "ShellFacilityError",
    "ShellRequest",
    "ShellResult",
    "Succeeded",
    "compose_flags",
    "confirm_delete",
    "console_confirmation",
    "default_flags",
    "delete",
    "format_confirmation_prompt",
    "pywin32_facility",
    "send_to_recycle_bin",
]
