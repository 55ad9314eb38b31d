"""Error pattern shared by the installer tools.

Each tool defines its own code enum and raises ToolError with it:

    class ErrorCode(ToolErrorEnum):
        TARGET_NOT_FOUND = ("E001", 1)
        NOT_A_DIRECTORY = ("E002", 2)

    raise ToolError(ErrorCode.TARGET_NOT_FOUND, "/mnt does not exist")
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class ToolErrorCode(Protocol):
    def code(self) -> str:
        """Short identifier such as 'E001'."""
        ...

    def exit_code(self) -> int: ...


class ToolErrorEnum(Enum):
    """Enum base whose members are (code, exit_code) pairs."""

    def code(self) -> str:
        return self.value[0]

    def exit_code(self) -> int:
        return int(self.value[1])

    def __str__(self) -> str:
        return self.code()


class ToolError(Exception):
    def __init__(self, code: ToolErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def exit_code(self) -> int:
        return self.code.exit_code()

    def __str__(self) -> str:
        return f"{self.code.code()}: {self.message}"
