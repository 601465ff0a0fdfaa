"""Result status, base exception, function kinds and the common object base."""

from __future__ import annotations

import abc
import enum

STATUS_OK = 0
STATUS_ERR = -1
STATUS_ERROR_INFO_CONNECTOR = " && "

EMPTY = ""
DEFAULT = "default"
UNKNOWN = "unknown"
BASIC_EXCEPTION = "cgkit default exception"
FUNCTION_NO_SUPPORT = "cgkit function no support"


class Status:
    """Outcome of an operation.

    A code of 0 means success, a positive code is a warning and a
    negative code is an error.
    """

    __slots__ = ("code", "info")

    def __init__(self, info: str | None = None, code: int | None = None) -> None:
        if info is None and code is None:
            self.code = STATUS_OK
            self.info = EMPTY
        else:
            self.code = STATUS_ERR if code is None else code
            self.info = EMPTY if info is None else info

    def __iadd__(self, other: Status) -> Status:
        if self.is_ok() and other.is_ok():
            return self
        if self.is_ok():
            self.info = other.info
        elif not other.is_ok():
            self.info = self.info + STATUS_ERROR_INFO_CONNECTOR + other.info
        self.code = STATUS_ERR
        return self

    def __add__(self, other: Status) -> Status:
        result = Status(self.info, self.code)
        result += other
        return result

    def set_status(self, info: str, code: int = STATUS_ERR) -> None:
        """Replace the code and the message."""
        self.code = code
        self.info = info

    def reset(self) -> None:
        """Return to the successful state."""
        self.code = STATUS_OK
        self.info = EMPTY

    def is_ok(self) -> bool:
        return self.code == STATUS_OK

    def is_err(self) -> bool:
        return self.code < STATUS_OK

    def is_not_err(self) -> bool:
        return self.code >= STATUS_OK

    def is_not_ok(self) -> bool:
        return self.code != STATUS_OK

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.code == other.code and self.info == other.info

    def __hash__(self) -> int:
        return hash((self.code, self.info))

    def __repr__(self) -> str:
        return f"Status(info={self.info!r}, code={self.code})"


class CGraphException(Exception):
    """Base exception of the package."""

    def __init__(self, info: str = EMPTY) -> None:
        self.info = info or BASIC_EXCEPTION
        super().__init__(self.info)


class FunctionType(enum.Enum):
    """Kind of lifecycle function."""

    INIT = 1
    RUN = 2
    DESTROY = 3


class CObject(abc.ABC):
    """Base of every object with an init/run/destroy lifecycle."""

    def init(self) -> Status:
        return Status()

    @abc.abstractmethod
    def run(self) -> Status:
        """Do the object's work."""

    def destroy(self) -> Status:
        return Status()


class DescInfo:
    """Name, unique session id and description of an object."""

    def __init__(self) -> None:
        self.name = EMPTY
        self.session = EMPTY
        self.description = EMPTY

    def set_name(self, name: str) -> DescInfo:
        self.name = name
        return self

    def set_description(self, description: str) -> DescInfo:
        self.description = description
        return self